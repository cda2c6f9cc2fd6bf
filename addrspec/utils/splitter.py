"""Split a raw address into display name, local part and domain.

Nothing here validates content; the pieces are handed to the local-part and
domain validators afterwards.
"""
from __future__ import annotations

from typing import Tuple

from addrspec.core.constants import AT_SYMBOL, DISPLAY_END, DISPLAY_SEPARATOR
from addrspec.core.exceptions import EmailError, ErrorKind


def split_display_email(text: str) -> Tuple[str, str]:
    """Return ``(display_name, email)`` for ``Name <email>`` or a bare address.

    The last ``" <"`` (a space followed by ``<``) opens the address, so a
    ``<`` with no space before it does not. Without one the whole text is
    the address and the display name is empty.
    """

    idx = text.rfind(DISPLAY_SEPARATOR)
    if idx == -1:
        return "", text

    left = text[:idx].strip()
    right = text[idx + len(DISPLAY_SEPARATOR):].strip()
    if not right.endswith(DISPLAY_END):
        raise EmailError(ErrorKind.MissingEndBracket)

    return left, right[: -len(DISPLAY_END)]


def split_at(address: str) -> Tuple[str, str]:
    """Split on the last ``@``.

    A quoted local part containing ``@`` is therefore cut at the wrong place;
    domains never contain ``@``.
    """

    idx = address.rfind(AT_SYMBOL)
    if idx == -1:
        raise EmailError(ErrorKind.MissingSeparator)
    return address[:idx], address[idx + 1:]


def split_parts(address: str) -> Tuple[str, str, str]:
    """Return ``(local, domain, display_name)``."""

    display, email = split_display_email(address)
    local, domain = split_at(email)
    return local, domain, display
