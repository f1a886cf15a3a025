"""Configuration model classes (configuration file schema).

Copyright (C) 2025 Paulo Ferreira de Castro

Licensed under the Open Software License version 3.0, a copy of which can be
found in the LICENSE file.
"""

import os
from typing import Annotated, Any, Final, override

from pydantic import BaseModel, Field, ValidationError, field_validator

LOG_LEVEL_ENV_VAR: Final = "PREDICTION_BUILDER_LOG_LEVEL"
LOG_LEVELS: Final = ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")


class ConfigError(Exception):
    pass


def normalize_log_level(value: str) -> str:
    level = value.strip().upper()
    if level not in LOG_LEVELS:
        raise ValueError(
            f"Invalid log level ‘{value}’, expected one of: {', '.join(LOG_LEVELS)}"
        )
    return level


class PredictorConfig(BaseModel):
    # precision: Number of decimal places that the slope, intercept, correlation
    # coefficient and predicted value are rounded to.
    precision: Annotated[int, Field(ge=0, le=15)] = 5
    # min_observations: A regression needs at least 3 observations to be meaningful.
    min_observations: Annotated[int, Field(ge=3)] = 3


class CoreConfig(BaseModel):
    predictor: PredictorConfig = PredictorConfig()
    log_level: str = "INFO"

    @field_validator("log_level")
    @classmethod
    def check_log_level(cls, value: str) -> str:
        return normalize_log_level(value)

    # pylint incorrectly reports that the parent has a different number of arguments.
    # pylint: disable=arguments-differ
    @override
    def model_post_init(self, context: Any):
        """Use the log level from the environment variable (if set)."""
        env_str = os.environ.get(LOG_LEVEL_ENV_VAR, "").strip()
        # An env var (if set) takes precedence over the config file setting.
        if env_str:
            try:
                self.log_level = normalize_log_level(env_str)
            except ValueError as e:
                raise ValueError(
                    f"Error validating environment variable ‘{LOG_LEVEL_ENV_VAR}’: {e}"
                ) from e

        return super().model_post_init(context)


def load_config_file(config_file: str) -> dict[str, Any]:
    """Load and parse the TOML configuration file."""
    from tomllib import load, TOMLDecodeError

    with open(config_file, "rb") as f:
        try:
            return load(f)
        except TOMLDecodeError as e:
            raise ConfigError(
                f"Failed to parse configuration file '{config_file}':\n{e}"
            ) from e


def validate_config[T: CoreConfig](config_obj: dict, config_type: type[T]) -> T:
    """Validate the TOML configuration file using a Pydantic model."""
    # Errors raised by model_post_init() are not wrapped in a ValidationError.
    try:
        return config_type(**config_obj)
    except (ValidationError, ValueError) as e:
        raise ConfigError(f"Invalid configuration file:\n{e}") from e
