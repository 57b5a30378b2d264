"""Runtime settings for the console game."""

from __future__ import annotations

import os
from typing import Mapping, Optional

from pydantic import BaseModel, ConfigDict, Field, field_validator

ENV_PREFIX = "TICTACTOE_"
LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")

_TRUTHY = {"y", "yes", "true", "1", "on"}
_FALSY = {"n", "no", "false", "0", "off"}


def _parse_flag(value: object) -> object:
    if isinstance(value, str):
        lowered = value.strip().lower()
        if lowered in _TRUTHY:
            return True
        if lowered in _FALSY:
            return False
        raise ValueError(f"Expected a yes/no value, got {value!r}")
    return value


class Settings(BaseModel):
    """Validated settings, read from ``TICTACTOE_*`` variables and CLI flags."""

    model_config = ConfigDict(populate_by_name=True, frozen=True)

    human_first: Optional[bool] = Field(
        default=None,
        alias="HUMAN_FIRST",
        description="Preselect the move order instead of asking",
    )
    log_level: str = Field(default="WARNING", alias="LOG_LEVEL")
    show_instructions: bool = Field(default=True, alias="INSTRUCTIONS")

    @field_validator("human_first", "show_instructions", mode="before")
    @classmethod
    def parse_flag(cls, value: object) -> object:
        return _parse_flag(value)

    @field_validator("log_level")
    @classmethod
    def ensure_known_level(cls, value: str) -> str:
        level = value.strip().upper()
        if level not in LOG_LEVELS:
            raise ValueError(
                f"Unsupported log level {value!r}. "
                f"Choose one of {', '.join(LOG_LEVELS)}."
            )
        return level

    @classmethod
    def from_env(cls, environ: Optional[Mapping[str, str]] = None) -> "Settings":
        env = os.environ if environ is None else environ
        values = {
            key[len(ENV_PREFIX) :]: value
            for key, value in env.items()
            if key.startswith(ENV_PREFIX) and value != ""
        }
        known = {f.alias for f in cls.model_fields.values()}
        return cls.model_validate({k: v for k, v in values.items() if k in known})

    def merged(self, **overrides: object) -> "Settings":
        """Return a copy with the non-``None`` overrides applied and re-validated."""
        data = self.model_dump()
        data.update({k: v for k, v in overrides.items() if v is not None})
        return Settings.model_validate(data)
