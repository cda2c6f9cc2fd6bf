"""Default parser policy and logging settings read from the environment.

Only the command line front-end reads these; library callers pass
:class:`~addrspec.schemas.EmailOptions` explicitly.
"""
from __future__ import annotations

import logging
import os
from functools import lru_cache
from typing import Any

from dotenv import find_dotenv, load_dotenv
from pydantic import BaseModel, ConfigDict, Field, ValidationError, field_validator

from addrspec.core.exceptions import ConfigurationError
from addrspec.schemas import EmailOptions

logger = logging.getLogger(__name__)

_LOG_LEVELS = {"CRITICAL", "ERROR", "WARNING", "INFO", "DEBUG"}


class Settings(BaseModel):
    """Runtime configuration values for the addrspec command line."""

    model_config = ConfigDict(populate_by_name=True, frozen=True)

    minimum_sub_domains: int = Field(0, validation_alias="ADDRSPEC_MINIMUM_SUB_DOMAINS", ge=0)
    allow_domain_literal: bool = Field(True, validation_alias="ADDRSPEC_ALLOW_DOMAIN_LITERAL")
    allow_display_text: bool = Field(True, validation_alias="ADDRSPEC_ALLOW_DISPLAY_TEXT")
    log_level: str = Field("INFO", validation_alias="LOG_LEVEL")

    @field_validator("log_level")
    @classmethod
    def validate_log_level(cls, value: str) -> str:
        """Accept standard level names regardless of case."""

        level = value.strip().upper()
        if level not in _LOG_LEVELS:
            raise ValueError(f"LOG_LEVEL must be one of {', '.join(sorted(_LOG_LEVELS))}")
        return level

    def email_options(self) -> EmailOptions:
        return EmailOptions(
            minimum_sub_domains=self.minimum_sub_domains,
            allow_domain_literal=self.allow_domain_literal,
            allow_display_text=self.allow_display_text,
        )


@lru_cache
def get_settings() -> Settings:
    """Return cached settings built from the environment and ``.env``."""

    dotenv_path = find_dotenv(usecwd=True)
    if dotenv_path:
        load_dotenv(dotenv_path)
        logger.debug("Loaded environment overrides from %s", dotenv_path)

    overrides: dict[str, Any] = {}
    for name, field in Settings.model_fields.items():
        value = os.getenv(str(field.validation_alias))
        if value is not None and value.strip():
            overrides[name] = value.strip()

    try:
        return Settings(**overrides)
    except ValidationError as exc:
        raise ConfigurationError(f"Invalid addrspec settings: {exc}") from exc
