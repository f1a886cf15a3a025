"""Prediction Builder: predict y for a given x using a simple linear regression.

Copyright (C) 2025 Paulo Ferreira de Castro

Licensed under the Open Software License version 3.0, a copy of which can be
found in the LICENSE file.
"""

from .algo.error import (
    DegenerateInputError,
    InsufficientDataError,
    InvalidInputError,
    PredictionError,
    UnsupportedOperationError,
)
from .algo.linear_regression import (
    LinearModel,
    RegressionPredictor,
    RegressionResult,
    predict,
)
from .config.schema import ConfigError, CoreConfig, PredictorConfig

__all__ = [
    "ConfigError",
    "CoreConfig",
    "DegenerateInputError",
    "InsufficientDataError",
    "InvalidInputError",
    "LinearModel",
    "PredictionError",
    "PredictorConfig",
    "RegressionPredictor",
    "RegressionResult",
    "UnsupportedOperationError",
    "predict",
]
