"""Custom exception hierarchy for addrspec."""
from __future__ import annotations

from enum import Enum


class ErrorKind(str, Enum):
    """Closed set of reasons an address can be rejected."""

    InvalidCharacter = "InvalidCharacter"
    MissingSeparator = "MissingSeparator"
    LocalPartEmpty = "LocalPartEmpty"
    LocalPartTooLong = "LocalPartTooLong"
    DomainEmpty = "DomainEmpty"
    DomainTooLong = "DomainTooLong"
    SubdomainEmpty = "SubdomainEmpty"
    SubdomainTooLong = "SubdomainTooLong"
    DomainTooFew = "DomainTooFew"
    DomainInvalidSeparator = "DomainInvalidSeparator"
    UnbalancedQuotes = "UnbalancedQuotes"
    InvalidComment = "InvalidComment"
    InvalidIPAddress = "InvalidIPAddress"
    UnsupportedDomainLiteral = "UnsupportedDomainLiteral"
    UnsupportedDisplayName = "UnsupportedDisplayName"
    MissingDisplayName = "MissingDisplayName"
    MissingEndBracket = "MissingEndBracket"


class AddrSpecError(Exception):
    """Base exception for all addrspec errors."""


class ConfigurationError(AddrSpecError):
    """Configuration-related errors."""


class EmailError(AddrSpecError, ValueError):
    """An address, local part or domain violated the grammar.

    Only ``kind`` is carried; the message is derived from it.
    """

    def __init__(self, kind: ErrorKind) -> None:
        from addrspec.core.messages import get_error_message

        super().__init__(get_error_message(kind))
        self.kind = kind

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, EmailError):
            return NotImplemented
        return self.kind is other.kind

    def __hash__(self) -> int:
        return hash(self.kind)

    def __repr__(self) -> str:
        return f"EmailError({self.kind.value})"
