"""
Configuration management for the brewing calculator MCP server.
"""

import logging
import os
from dataclasses import dataclass

from brewing_units.exceptions import ConfigurationError


@dataclass
class BrewCalcConfig:
    """Configuration for the brewing calculator server."""

    precision: int = 3
    log_level: str = "INFO"

    @property
    def log_level_number(self) -> int:
        """Numeric logging level for logging.basicConfig()."""
        return logging.getLevelName(self.log_level)


def get_config() -> BrewCalcConfig:
    """
    Get server configuration from environment.

    Environment variables:
        BREWCALC_PRECISION: Decimal places in tool results (default 3)
        BREWCALC_LOG_LEVEL: Logging level name (default INFO)

    Returns:
        BrewCalcConfig instance

    Raises:
        ConfigurationError: If a value is invalid
    """
    config = BrewCalcConfig()

    precision = os.environ.get("BREWCALC_PRECISION")
    if precision:
        try:
            config.precision = int(precision)
        except ValueError as e:
            raise ConfigurationError(
                f"BREWCALC_PRECISION must be a whole number, got {precision!r}"
            ) from e
        if config.precision < 0:
            raise ConfigurationError(
                f"BREWCALC_PRECISION must not be negative, got {precision!r}"
            )

    log_level = os.environ.get("BREWCALC_LOG_LEVEL")
    if log_level:
        config.log_level = log_level.strip().upper()
        if not isinstance(logging.getLevelName(config.log_level), int):
            raise ConfigurationError(
                f"BREWCALC_LOG_LEVEL is not a logging level: {log_level!r}"
            )

    return config
