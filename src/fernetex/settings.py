"""Command-line configuration loaded from environment variables."""

import functools

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings

from fernetex.constants import DEFAULT_TTL_SECONDS


class FernetSettings(BaseSettings):
    """Defaults for the ``fernetex`` command.

    The codec itself never reads these; keys are always passed explicitly.
    """

    FERNET_SECRET: str = ""
    FERNET_TTL_SECONDS: int = Field(default=DEFAULT_TTL_SECONDS, ge=0)
    FERNET_ENFORCE_TTL: bool = True

    # Logging
    LOG_LEVEL: str = "WARNING"
    LOG_JSON: bool = False

    model_config = {"env_prefix": ""}

    @field_validator("FERNET_SECRET")
    @classmethod
    def _strip_secret(cls, value: str) -> str:
        return value.strip()

    @field_validator("LOG_LEVEL")
    @classmethod
    def _normalize_level(cls, value: str) -> str:
        return value.strip().upper()


@functools.lru_cache(maxsize=1)
def get_settings() -> FernetSettings:
    """Return cached settings singleton."""
    return FernetSettings()
