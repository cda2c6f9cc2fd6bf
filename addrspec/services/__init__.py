"""Service layer exports."""

from .domain import parse_domain, parse_literal_domain, parse_text_domain
from .local_part import parse_local_part, parse_quoted_local_part, parse_unquoted_local_part
from .parser import is_valid, is_valid_domain, is_valid_local_part, parse

__all__ = [
    "is_valid",
    "is_valid_domain",
    "is_valid_local_part",
    "parse",
    "parse_domain",
    "parse_literal_domain",
    "parse_local_part",
    "parse_quoted_local_part",
    "parse_text_domain",
    "parse_unquoted_local_part",
]
