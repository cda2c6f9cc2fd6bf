"""Percent-encoding for ``mailto`` URIs."""
from __future__ import annotations

from addrspec.core.constants import MAILTO_URI_PREFIX
from addrspec.utils.classifier import is_reserved_uni_char


def encode(address: str) -> str:
    """Percent-encode reserved ASCII punctuation; everything else is copied."""

    return "".join(
        f"%{ord(c):02X}" if is_reserved_uni_char(c) else c for c in address
    )


def mailto_uri(address: str) -> str:
    return MAILTO_URI_PREFIX + encode(address)
