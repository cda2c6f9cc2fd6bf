"""Pydantic field types backed by the addr-spec parser."""
from __future__ import annotations

from typing import Annotated

from pydantic import AfterValidator

from addrspec.services.parser import parse


def _validate_address(value: str) -> str:
    parse(value)
    return value


EmailAddress = Annotated[str, AfterValidator(_validate_address)]
"""A ``str`` field that must parse with the default :class:`EmailOptions`.

:class:`~addrspec.core.exceptions.EmailError` subclasses ``ValueError`` so a
rejected address surfaces as a regular pydantic ``ValidationError``.
"""
