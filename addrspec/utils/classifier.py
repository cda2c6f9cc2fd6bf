"""Character-class predicates for the addr-spec grammar.

All predicates take a single code point (a one-character ``str``) or, for the
``*_text``/``*_content``/``*_label`` helpers, a whole string. Python strings
are already sequences of code points, so non-ASCII characters are tested once
each.
"""
from __future__ import annotations

import re

from addrspec.core.constants import (
    BACKSLASH,
    DOT,
    DOUBLE_QUOTE,
    HORIZONTAL_TAB,
    LEFT_BRACKET,
    LEFT_PARENTHESIS,
    RIGHT_BRACKET,
    RIGHT_PARENTHESIS,
    SPACE,
)

_ATOM_SPECIALS = frozenset(
    {
        LEFT_PARENTHESIS,
        RIGHT_PARENTHESIS,
        "<",
        ">",
        LEFT_BRACKET,
        RIGHT_BRACKET,
        ":",
        ";",
        "@",
        BACKSLASH,
        ",",
        DOT,
        DOUBLE_QUOTE,
    }
)

_RESERVED_URI_CHARS = frozenset("!#$%&'()*+,/:;=?[]")

# ASCII letters and digits only; str.isalnum() admits non-ASCII letters.
_DOMAIN_LABEL = re.compile(r"[A-Za-z0-9](?:[A-Za-z0-9-]*[A-Za-z0-9])?")


def is_utf8_non_ascii_char(c: str) -> bool:
    return ord(c) > 127


def is_visible_char(c: str) -> bool:
    """VCHAR: printable ASCII excluding space."""

    return 0x21 <= ord(c) <= 0x7E


def is_whitespace_char(c: str) -> bool:
    """WSP: space or horizontal tab."""

    return c == SPACE or c == HORIZONTAL_TAB


def is_quoted_text_char(c: str) -> bool:
    """qtext: VCHAR without backslash and double quote."""

    code = ord(c)
    return code == 0x21 or 0x23 <= code <= 0x5B or 0x5D <= code <= 0x7E


def is_domain_literal_char(c: str) -> bool:
    """dtext: VCHAR without backslash and square brackets, plus non-ASCII."""

    code = ord(c)
    return 0x21 <= code <= 0x5A or 0x5E <= code <= 0x7E or is_utf8_non_ascii_char(c)


def is_atom_char(c: str) -> bool:
    """atext: VCHAR without the RFC 5322 specials, plus non-ASCII."""

    if is_utf8_non_ascii_char(c):
        return True
    return is_visible_char(c) and c not in _ATOM_SPECIALS


def is_atom_text(s: str) -> bool:
    return len(s) > 0 and all(is_atom_char(c) for c in s)


def is_dot_atom_text(s: str) -> bool:
    """Return True when ``s`` is one or more atoms joined by single dots.

    Empty segments produced by leading, trailing or doubled dots fail
    :func:`is_atom_text`, so they reject the whole string.
    """

    return all(is_atom_text(segment) for segment in s.split(DOT))


def is_quoted_content(s: str) -> bool:
    """Validate the interior of a quoted-string (quotes already stripped).

    A backslash must be followed by a visible character; the pair is consumed
    as one quoted-pair. Every other character must be whitespace or qtext.
    """

    index = 0
    length = len(s)
    while index < length:
        c = s[index]
        if c == BACKSLASH:
            if index + 1 < length and is_visible_char(s[index + 1]):
                index += 2
                continue
            return False
        if not (is_whitespace_char(c) or is_quoted_text_char(c)):
            return False
        index += 1
    return True


def is_domain_label(s: str) -> bool:
    """DNS label: alphanumeric at both ends, hyphens allowed inside."""

    return _DOMAIN_LABEL.fullmatch(s) is not None


def is_reserved_uni_char(c: str) -> bool:
    """Punctuation that must be percent-encoded inside a ``mailto`` URI."""

    return c in _RESERVED_URI_CHARS
