"""Configuration settings for signing and recovery."""

import os
from functools import lru_cache

from pydantic import BaseModel, field_validator

from recoverable_sig.exceptions import ConfigurationError
from recoverable_sig.types.compact_types import ChainContext, check_chain_id

# Configuration Constants
ENV_DETERMINISTIC = "RECOVERABLE_SIG_DETERMINISTIC"
ENV_LOW_S = "RECOVERABLE_SIG_LOW_S"
ENV_VERIFY_EXPECTED_KEY = "RECOVERABLE_SIG_VERIFY_EXPECTED_KEY"
ENV_CHAIN_ID = "RECOVERABLE_SIG_CHAIN_ID"
ENV_LOG_LEVEL = "RECOVERABLE_SIG_LOG_LEVEL"
DEFAULT_LOG_LEVEL = "WARNING"

_ENV_FIELDS = {
    "deterministic": ENV_DETERMINISTIC,
    "low_s": ENV_LOW_S,
    "verify_expected_key": ENV_VERIFY_EXPECTED_KEY,
    "chain_id": ENV_CHAIN_ID,
    "log_level": ENV_LOG_LEVEL,
}
_LOG_LEVELS = ("CRITICAL", "ERROR", "WARNING", "INFO", "DEBUG")


class SignerSettings(BaseModel):
    """Settings shared by the signer and the version normalizer."""

    # Signing behaviour
    deterministic: bool = True
    low_s: bool = True
    verify_expected_key: bool = True

    # Header encoding
    chain_id: int | None = None

    log_level: str = DEFAULT_LOG_LEVEL

    @field_validator("chain_id")
    @classmethod
    def validate_chain_id(cls, v: int | None) -> int | None:
        return check_chain_id(v)

    @field_validator("log_level")
    @classmethod
    def validate_log_level(cls, v: str) -> str:
        """Validate that the level is one of the standard logging level names."""
        level = v.strip().upper()
        if level not in _LOG_LEVELS:
            msg = f"log_level must be one of {', '.join(_LOG_LEVELS)}, got {v!r}"
            raise ValueError(msg)
        return level

    class Config:
        validate_assignment = True

    def chain_context(self) -> ChainContext:
        """Chain context matching the configured chain id."""
        return ChainContext(chain_id=self.chain_id)

    def update(self, **values) -> None:
        """Update settings in place; every value is validated on assignment."""
        for name, value in values.items():
            if name not in type(self).model_fields:
                msg = f"Unknown setting: {name}"
                raise ConfigurationError(msg, setting=name)
            setattr(self, name, value)

    @classmethod
    def from_env(cls) -> "SignerSettings":
        """
        Create settings from environment variables.

        Unset or blank variables fall back to the defaults.

        Returns:
            SignerSettings: Settings instance with values from environment variables.

        Example:
            ```python
            settings = SignerSettings.from_env()
            signature = sign_compact(digest, private_key, public_key_hex, settings=settings)
            ```
        """
        values = {}
        for name, env_var in _ENV_FIELDS.items():
            raw = os.getenv(env_var)
            if raw is not None and raw.strip():
                values[name] = raw.strip()
        return cls(**values)


@lru_cache(maxsize=1)
def get_settings() -> SignerSettings:
    """Process-wide default settings, read from the environment on first use."""
    return SignerSettings.from_env()
