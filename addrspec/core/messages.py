"""Human-readable text for each :class:`ErrorKind`."""
from __future__ import annotations

from typing import Dict

from addrspec.core.constants import (
    DOMAIN_MAX_LENGTH,
    DOT,
    LOCAL_PART_MAX_LENGTH,
    SUB_DOMAIN_MAX_LENGTH,
)
from addrspec.core.exceptions import ErrorKind

ERROR_MESSAGES: Dict[ErrorKind, str] = {
    ErrorKind.InvalidCharacter: "Invalid character.",
    ErrorKind.MissingSeparator: "Missing separator character '@'.",
    ErrorKind.LocalPartEmpty: "Local part is empty.",
    ErrorKind.LocalPartTooLong: f"Local part is too long. Length limit: {LOCAL_PART_MAX_LENGTH}.",
    ErrorKind.DomainEmpty: "Domain is empty.",
    ErrorKind.DomainTooLong: f"Domain is too long. Length limit: {DOMAIN_MAX_LENGTH}.",
    ErrorKind.SubdomainEmpty: "A subdomain is empty.",
    ErrorKind.SubdomainTooLong: f"A subdomain is too long. Length limit: {SUB_DOMAIN_MAX_LENGTH}.",
    ErrorKind.DomainTooFew: "Too few parts in the domain.",
    ErrorKind.DomainInvalidSeparator: f"Invalid placement of the domain separator '{DOT}'.",
    ErrorKind.UnbalancedQuotes: "Quotes around the local-part are unbalanced.",
    ErrorKind.InvalidComment: "A comment was badly formed.",
    ErrorKind.InvalidIPAddress: "Invalid IP Address specified for domain.",
    ErrorKind.UnsupportedDomainLiteral: "Domain literals are not supported.",
    ErrorKind.UnsupportedDisplayName: "Display names are not supported.",
    ErrorKind.MissingDisplayName: "Display name was not supplied, but email starts with '<'.",
    ErrorKind.MissingEndBracket: "Terminating '>' is missing.",
}


def get_error_message(kind: ErrorKind) -> str:
    """Return the message for ``kind``."""

    return ERROR_MESSAGES.get(kind, "Unknown error.")
