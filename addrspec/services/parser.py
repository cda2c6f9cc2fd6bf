"""Entry points that turn a raw address into a :class:`ParsedEmail`."""
from __future__ import annotations

from typing import Optional

from addrspec.core.constants import DISPLAY_START
from addrspec.core.exceptions import EmailError, ErrorKind
from addrspec.schemas import EmailOptions, ParsedEmail
from addrspec.services.domain import parse_domain
from addrspec.services.local_part import parse_local_part
from addrspec.utils.encoding import mailto_uri
from addrspec.utils.splitter import split_display_email, split_parts


def parse(address: str, options: Optional[EmailOptions] = None) -> ParsedEmail:
    """Parse ``address`` or raise :class:`EmailError` for the first violated rule.

    The display-name policy is checked before the local part, and the local
    part before the domain.
    """

    if options is None:
        options = EmailOptions()

    local_part, domain, display = split_parts(address)
    has_display = bool(display)
    starts_with_bracket = local_part.startswith(DISPLAY_START)

    if has_display and not options.allow_display_text:
        raise EmailError(ErrorKind.UnsupportedDisplayName)

    if not has_display and starts_with_bracket:
        if options.allow_display_text:
            raise EmailError(ErrorKind.MissingDisplayName)
        raise EmailError(ErrorKind.InvalidCharacter)

    parse_local_part(local_part)
    parse_domain(domain, options)

    _, email = split_display_email(address)

    return ParsedEmail(
        original=address,
        email=email,
        local_part=local_part,
        domain=domain,
        display_name=display,
        uri=mailto_uri(email),
    )


def is_valid(address: str, options: Optional[EmailOptions] = None) -> bool:
    try:
        parse(address, options)
    except EmailError:
        return False
    return True


def is_valid_local_part(part: str) -> bool:
    try:
        parse_local_part(part)
    except EmailError:
        return False
    return True


def is_valid_domain(part: str, options: Optional[EmailOptions] = None) -> bool:
    try:
        parse_domain(part, options)
    except EmailError:
        return False
    return True
