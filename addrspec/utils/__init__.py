"""Lexical helpers: character classes, splitting and URI encoding."""

from .classifier import (
    is_atom_char,
    is_atom_text,
    is_domain_label,
    is_domain_literal_char,
    is_dot_atom_text,
    is_quoted_content,
    is_quoted_text_char,
    is_reserved_uni_char,
    is_utf8_non_ascii_char,
    is_visible_char,
    is_whitespace_char,
)
from .encoding import encode, mailto_uri
from .splitter import split_at, split_display_email, split_parts

__all__ = [
    "encode",
    "is_atom_char",
    "is_atom_text",
    "is_domain_label",
    "is_domain_literal_char",
    "is_dot_atom_text",
    "is_quoted_content",
    "is_quoted_text_char",
    "is_reserved_uni_char",
    "is_utf8_non_ascii_char",
    "is_visible_char",
    "is_whitespace_char",
    "mailto_uri",
    "split_at",
    "split_display_email",
    "split_parts",
]
