"""Settings schema and resolution.

A Pydantic ``Settings`` model is the single source of truth for the few knobs
the library exposes. Values are read from ``OUTCOMES_*`` environment variables
(a project ``.env`` file is honoured but never overrides the real
environment) and validated once per process.
"""

from __future__ import annotations

from functools import cache
import logging
import os
from typing import Any

from dotenv import load_dotenv
from pydantic import BaseModel, Field, ValidationError, field_validator

from outcomes.errors import ConfigurationError

logger = logging.getLogger(__name__)

ENV_PREFIX = "OUTCOMES_"


class Settings(BaseModel):
    """Validated library settings."""

    #: Message carried by the default ``MissingValueError``.
    missing_message: str = Field(default="value is missing", min_length=1)
    #: Log exceptions captured by ``of_attempt()`` at DEBUG level.
    log_captured: bool = Field(default=True)

    model_config = {"frozen": True, "extra": "forbid"}

    @field_validator("missing_message", mode="before")
    @classmethod
    def strip_message(cls, v: Any) -> Any:
        """Trim surrounding whitespace on the default message."""
        if isinstance(v, str):
            return v.strip()
        return v


_DEFAULTS = Settings()


def _env_overrides() -> dict[str, str]:
    overrides: dict[str, str] = {}
    for name in Settings.model_fields:
        raw = os.environ.get(f"{ENV_PREFIX}{name.upper()}")
        if raw is not None:
            overrides[name] = raw
    return overrides


@cache
def resolve_settings() -> Settings:
    """Resolve settings from the environment.

    Cached for the life of the process; call ``resolve_settings.cache_clear()``
    after changing the environment.

    Raises:
        ConfigurationError: An ``OUTCOMES_*`` variable holds an invalid value.
    """
    load_dotenv(override=False)
    overrides = _env_overrides()
    try:
        return Settings(**overrides)
    except ValidationError as exc:
        names = ", ".join(
            f"{ENV_PREFIX}{str(err['loc'][0]).upper()}" for err in exc.errors()
        )
        raise ConfigurationError(
            f"Invalid outcomes settings: {names}",
            hint="Fix or unset the offending OUTCOMES_* environment variables.",
        ) from exc


def effective_settings() -> Settings:
    """Return resolved settings, or the defaults when resolution fails.

    Used on combinator paths, which must not raise because of configuration.
    """
    try:
        return resolve_settings()
    except ConfigurationError as exc:
        logger.debug("Falling back to default settings: %s", exc)
        return _DEFAULTS
