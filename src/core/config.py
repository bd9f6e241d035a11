"""Runtime configuration model for Molymod DMS.

This module owns all environment variable parsing and validation.
Other modules consume a typed config object instead of raw env reads.
"""

from __future__ import annotations

from dataclasses import dataclass
import os

from core.constants import (
    CREATE_IF_MISSING_ENV,
    DEFAULT_CREATE_IF_MISSING,
    DEFAULT_LOG_LEVEL,
    FALSE_ENV_VALUES,
    LOG_LEVEL_ENV,
    SUPPORTED_LOG_LEVELS,
    TRUE_ENV_VALUES,
)
from core.errors import DmsConfigError


@dataclass(frozen=True)
class DmsConfig:
    """Validated runtime configuration.

    Attributes:
        create_if_missing: Create an empty store when the path does not exist.
            When False, opening a missing file fails instead.
        log_level: Minimum structured log level.
    """

    create_if_missing: bool = DEFAULT_CREATE_IF_MISSING
    log_level: str = DEFAULT_LOG_LEVEL

    @classmethod
    def from_env(cls) -> "DmsConfig":
        """Build config from process environment variables.

        Returns:
            A validated config object.

        Raises:
            DmsConfigError: If environment values are invalid.
        """
        create_value = os.getenv(CREATE_IF_MISSING_ENV)
        log_level_value = os.getenv(LOG_LEVEL_ENV, DEFAULT_LOG_LEVEL)
        create_if_missing = (
            DEFAULT_CREATE_IF_MISSING
            if create_value is None
            else _parse_bool(CREATE_IF_MISSING_ENV, create_value)
        )
        return cls(
            create_if_missing=create_if_missing,
            log_level=_parse_log_level(log_level_value),
        )


def _parse_bool(env_name: str, raw_value: str) -> bool:
    """Parse a boolean environment value.

    Args:
        env_name: Variable name, used in error messages.
        raw_value: Raw string from environment.

    Returns:
        Parsed boolean.

    Raises:
        DmsConfigError: If value is not a recognized boolean word.
    """
    normalized = raw_value.strip().lower()
    if normalized in TRUE_ENV_VALUES:
        return True
    if normalized in FALSE_ENV_VALUES:
        return False
    raise DmsConfigError(
        f"Invalid {env_name} value: expected one of "
        f"{', '.join(TRUE_ENV_VALUES + FALSE_ENV_VALUES)}, got '{raw_value}'."
    )


def _parse_log_level(raw_value: str) -> str:
    """Parse the log level environment value.

    Raises:
        DmsConfigError: If level is unsupported.
    """
    normalized = raw_value.strip().lower()
    if normalized not in SUPPORTED_LOG_LEVELS:
        raise DmsConfigError(
            f"Invalid {LOG_LEVEL_ENV} value: expected one of "
            f"{', '.join(SUPPORTED_LOG_LEVELS)}, got '{raw_value}'."
        )
    return normalized
