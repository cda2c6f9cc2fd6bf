"""Pydantic models for parser configuration and results."""
from __future__ import annotations

from pydantic import BaseModel, ConfigDict, Field, model_validator

from addrspec.core.constants import AT_SYMBOL, MAILTO_URI_PREFIX


class EmailOptions(BaseModel):
    """Policy knobs applied while parsing an address."""

    model_config = ConfigDict(frozen=True)

    minimum_sub_domains: int = Field(0, ge=0)
    allow_domain_literal: bool = True
    allow_display_text: bool = True


class ParsedEmail(BaseModel):
    """Structured result of a successful :func:`addrspec.parse` call."""

    model_config = ConfigDict(frozen=True)

    original: str
    email: str
    local_part: str
    domain: str
    display_name: str = ""
    uri: str

    @model_validator(mode="after")
    def validate_components(self) -> "ParsedEmail":
        if self.email != f"{self.local_part}{AT_SYMBOL}{self.domain}":
            raise ValueError("email must equal local_part@domain")
        if not self.uri.startswith(MAILTO_URI_PREFIX):
            raise ValueError(f"uri must start with {MAILTO_URI_PREFIX!r}")
        return self
