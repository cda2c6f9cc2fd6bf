"""Validation of the part before the ``@``."""
from __future__ import annotations

from addrspec.core.constants import DOUBLE_QUOTE, LOCAL_PART_MAX_LENGTH
from addrspec.core.exceptions import EmailError, ErrorKind
from addrspec.utils.classifier import is_dot_atom_text, is_quoted_content


def parse_local_part(part: str) -> None:
    """Validate ``part`` as a quoted-string or a dot-atom.

    The length limit applies to the raw text, surrounding quotes included.

    Raises:
        EmailError: ``LocalPartEmpty``, ``LocalPartTooLong`` or
            ``InvalidCharacter``, checked in that order.
    """

    if not part:
        raise EmailError(ErrorKind.LocalPartEmpty)

    if len(part) > LOCAL_PART_MAX_LENGTH:
        raise EmailError(ErrorKind.LocalPartTooLong)

    if part.startswith(DOUBLE_QUOTE) and part.endswith(DOUBLE_QUOTE):
        if len(part) <= 2:
            raise EmailError(ErrorKind.LocalPartEmpty)
        parse_quoted_local_part(part[1:-1])
    else:
        parse_unquoted_local_part(part)


def parse_quoted_local_part(part: str) -> None:
    if not is_quoted_content(part):
        raise EmailError(ErrorKind.InvalidCharacter)


def parse_unquoted_local_part(part: str) -> None:
    if not is_dot_atom_text(part):
        raise EmailError(ErrorKind.InvalidCharacter)
