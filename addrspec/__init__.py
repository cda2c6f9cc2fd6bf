"""Validate and parse email addresses against a configurable RFC 5322 subset."""

from addrspec.core.constants import (
    DOMAIN_MAX_LENGTH,
    LOCAL_PART_MAX_LENGTH,
    SUB_DOMAIN_MAX_LENGTH,
)
from addrspec.core.exceptions import AddrSpecError, ConfigurationError, EmailError, ErrorKind
from addrspec.schemas import EmailOptions, ParsedEmail
from addrspec.services import (
    is_valid,
    is_valid_domain,
    is_valid_local_part,
    parse,
    parse_domain,
    parse_local_part,
)
from addrspec.utils import encode

__version__ = "0.1.0"

__all__ = [
    "AddrSpecError",
    "ConfigurationError",
    "DOMAIN_MAX_LENGTH",
    "EmailError",
    "EmailOptions",
    "ErrorKind",
    "LOCAL_PART_MAX_LENGTH",
    "ParsedEmail",
    "SUB_DOMAIN_MAX_LENGTH",
    "encode",
    "is_valid",
    "is_valid_domain",
    "is_valid_local_part",
    "parse",
    "parse_domain",
    "parse_local_part",
]
