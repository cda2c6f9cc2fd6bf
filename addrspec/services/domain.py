"""Validation of the part after the ``@``.

A domain is either a dotted sequence of DNS labels or a bracketed literal
such as ``[127.0.0.1]`` or ``[IPv6:2001:db8::1]``. Literals are only checked
for character-class membership; the numeric structure of an IP address is
not verified and ``ErrorKind.InvalidIPAddress`` is never raised here.
"""
from __future__ import annotations

from typing import Optional

from addrspec.core.constants import (
    DOMAIN_MAX_LENGTH,
    DOT,
    LEFT_BRACKET,
    RIGHT_BRACKET,
    SUB_DOMAIN_MAX_LENGTH,
)
from addrspec.core.exceptions import EmailError, ErrorKind
from addrspec.schemas import EmailOptions
from addrspec.utils.classifier import is_domain_label, is_domain_literal_char


def parse_domain(part: str, options: Optional[EmailOptions] = None) -> None:
    """Validate ``part`` as a text domain or, when allowed, a domain literal.

    Raises:
        EmailError: ``DomainEmpty`` and ``DomainTooLong`` first, then
            ``UnsupportedDomainLiteral`` for a disallowed literal, then
            whatever the text or literal check reports.
    """

    if options is None:
        options = EmailOptions()

    if not part:
        raise EmailError(ErrorKind.DomainEmpty)

    if len(part) > DOMAIN_MAX_LENGTH:
        raise EmailError(ErrorKind.DomainTooLong)

    if part.startswith(LEFT_BRACKET) and part.endswith(RIGHT_BRACKET):
        if not options.allow_domain_literal:
            raise EmailError(ErrorKind.UnsupportedDomainLiteral)
        parse_literal_domain(part[1:-1])
    else:
        parse_text_domain(part, options)


def parse_text_domain(part: str, options: Optional[EmailOptions] = None) -> None:
    """Validate each dot-separated label in order, then the label count."""

    if options is None:
        options = EmailOptions()

    count = 0
    for label in part.split(DOT):
        if not label:
            raise EmailError(ErrorKind.SubdomainEmpty)
        if len(label) > SUB_DOMAIN_MAX_LENGTH:
            raise EmailError(ErrorKind.SubdomainTooLong)
        if not is_domain_label(label):
            raise EmailError(ErrorKind.InvalidCharacter)
        count += 1

    if count < options.minimum_sub_domains:
        raise EmailError(ErrorKind.DomainTooFew)


def parse_literal_domain(part: str) -> None:
    """Validate the interior of ``[...]`` (brackets already stripped)."""

    for c in part:
        if not is_domain_literal_char(c):
            raise EmailError(ErrorKind.InvalidCharacter)
