"""Exception classes raised by the prediction builder.

Copyright (C) 2025 Paulo Ferreira de Castro

Licensed under the Open Software License version 3.0, a copy of which can be
found in the LICENSE file.
"""


class PredictionError(Exception):
    pass


class InvalidInputError(PredictionError, ValueError):
    """A dataset element is missing its x or y component, or is not numeric."""


class InsufficientDataError(PredictionError, ValueError):
    """The dataset has fewer observations than required for a regression."""


class DegenerateInputError(PredictionError, ValueError):
    """The regression is undefined, e.g. all x values are identical."""


class UnsupportedOperationError(PredictionError, AttributeError):
    """An operation that the predictor does not define was requested."""


def fmt_unsupported_call(name: str, args: tuple, kwargs: dict) -> str:
    """Produce a message like ‘No such method exists: fit (1, 2, scale=3)’."""
    params = [str(arg) for arg in args]
    params.extend(f"{key}={value}" for key, value in kwargs.items())
    return f"No such method exists: {name} ({', '.join(params)})"
