"""Environment configuration for the roller."""
import os
from dataclasses import dataclass

from .exceptions import ConfigurationError

OUTPUT_FORMATS = ("debug", "json", "text")
LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")


@dataclass
class Config:
    """Application configuration loaded from environment variables."""

    log_level: str
    output_format: str
    seed: int | None

    @classmethod
    def from_env(cls) -> "Config":
        """Load configuration from environment variables.

        Returns:
            Config instance with values from environment

        Raises:
            ConfigurationError: If a variable holds an invalid value
        """
        output_format = os.environ.get("ROLL_OUTPUT_FORMAT", "debug").lower()
        if output_format not in OUTPUT_FORMATS:
            raise ConfigurationError(
                f"ROLL_OUTPUT_FORMAT must be one of {', '.join(OUTPUT_FORMATS)}",
                config_key="ROLL_OUTPUT_FORMAT",
            )

        seed_str = os.environ.get("ROLL_SEED")
        seed = None
        if seed_str:
            try:
                seed = int(seed_str)
            except ValueError:
                raise ConfigurationError(
                    "ROLL_SEED must be an integer",
                    config_key="ROLL_SEED",
                ) from None

        log_level = os.environ.get("POWERTOOLS_LOG_LEVEL", "WARNING").upper()
        if log_level not in LOG_LEVELS:
            raise ConfigurationError(
                f"POWERTOOLS_LOG_LEVEL must be one of {', '.join(LOG_LEVELS)}",
                config_key="POWERTOOLS_LOG_LEVEL",
            )

        return cls(
            log_level=log_level,
            output_format=output_format,
            seed=seed,
        )


def get_config() -> Config:
    """Get cached configuration instance.

    Returns:
        Config instance (cached after first call)
    """
    if not hasattr(get_config, "_config"):
        get_config._config = Config.from_env()
    return get_config._config
