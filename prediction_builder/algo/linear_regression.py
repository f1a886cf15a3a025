"""Linear Regression prediction builder.

Build a prediction of the expected value of y for a given x, based on a simple
linear regression model (ordinary least squares, one predictor) of the form
h(x) = a + bx fitted to a dataset of (x, y) observations.

Copyright (C) 2025 Paulo Ferreira de Castro

Licensed under the Open Software License version 3.0, a copy of which can be
found in the LICENSE file.
"""

import logging
import math
from collections.abc import Callable, Iterable, Sequence
from dataclasses import dataclass
from decimal import ROUND_HALF_UP, Decimal, localcontext
from typing import Any

from ..config.schema import PredictorConfig
from .dataset import Point, Vectors, is_number, read_from_sequence
from .error import (
    DegenerateInputError,
    InsufficientDataError,
    UnsupportedOperationError,
    fmt_unsupported_call,
)

_LOGGER = logging.getLogger(__name__)


def to_query_value(value: Any) -> float:
    """Coerce the query value x to float, or 0.0 if it is not numeric.

    Numeric strings such as ‘4.5’ and Decimal values are accepted. Non-finite
    values are not.
    """
    if isinstance(value, (str, Decimal)):
        try:
            value = float(value)
        except ValueError:
            value = None
    if is_number(value):
        return float(value)

    _LOGGER.debug("Non-numeric query value %r, using 0 instead", value)
    return 0.0


def round_half_away(number: float, precision: int = 5) -> float:
    """Round to the given number of decimal places, with ties away from zero.

    The builtin round() rounds ties to even and operates on the binary value, so
    round(2.675, 2) == 2.67. This function rounds the shortest decimal
    representation of the float instead, so round_half_away(2.675, 2) == 2.68.
    """
    if not math.isfinite(number):
        return float(number)
    with localcontext() as ctx:
        # Enough digits for the integral part of any float plus the decimals.
        ctx.prec = 330
        quantum = Decimal(1).scaleb(-precision)
        value = Decimal(repr(float(number)))
        rounded = value.quantize(quantum, rounding=ROUND_HALF_UP)
    return float(rounded)


def fmt_number(number: float) -> str:
    """Format a number the way PHP prints floats: 10.0 -> '10', 2.5 -> '2.5'."""
    text = repr(float(number))
    return text.removesuffix(".0")


def square(v: float) -> float:
    return v * v


def average(vector: Sequence[float]) -> float:
    return sum(vector) / len(vector)


def sum_squared(vector: Iterable[float]) -> float:
    return sum(square(v) for v in vector)


def sum_xy(points: Iterable[Point]) -> float:
    return sum(x * y for x, y in points)


def dispersion(vector: Sequence[float]) -> float:
    """The dispersion Dv = (Σv² / N) - (Σv / N)²"""
    return sum_squared(vector) / len(vector) - square(average(vector))


def _is_constant(vector: Sequence[float]) -> bool:
    return len(set(vector)) <= 1


def slope(vectors: Vectors) -> float:
    """The slope, or the regression coefficient.

    b = ((ΣXY / N) - (ΣX / N)(ΣY / N)) / ((ΣX² / N) - (ΣX / N)²)

    Raises:
        DegenerateInputError: If all x values are identical (zero dispersion)
    """
    dx = dispersion(vectors.x)
    # Identical x values may leave a tiny non-zero dx due to float cancellation.
    if dx <= 0 or _is_constant(vectors.x):
        raise DegenerateInputError(
            "All x values in the dataset are identical: the slope is undefined."
        )
    ave_xy = sum_xy(vectors.points()) / len(vectors)
    covariance = ave_xy - average(vectors.x) * average(vectors.y)

    return covariance / dx


def intercept(vectors: Vectors, b: float) -> float:
    """The intercept a = (ΣY / N) - b(ΣX / N)"""
    return average(vectors.y) - b * average(vectors.x)


def correlation(vectors: Vectors, b: float) -> float:
    """The Pearson's correlation coefficient Rxy = b * (sqrt(Dx) / sqrt(Dy))

    Raises:
        DegenerateInputError: If all y values are identical (zero dispersion)
    """
    dy = dispersion(vectors.y)
    if dy <= 0 or _is_constant(vectors.y):
        raise DegenerateInputError(
            "All y values in the dataset are identical: the correlation coefficient is undefined."
        )
    return b * (math.sqrt(dispersion(vectors.x)) / math.sqrt(dy))


@dataclass(frozen=True)
class LinearModel:
    """A linear model h(x) = a + bx that fits the data."""

    a: float
    b: float

    def __call__(self, x: float) -> float:
        return self.a + self.b * x

    def __str__(self) -> str:
        # A negative slope is not normalised: '3.2+-1.1x'
        return f"{fmt_number(self.a)}+{fmt_number(self.b)}x"


@dataclass(frozen=True)
class RegressionResult:
    model_description: str
    correlation: float
    query_value: float
    predicted_value: float
    slope: float
    intercept: float

    def as_dict(self) -> dict[str, str | float]:
        """Result keyed by the short field names: ln_model, cor, x and y."""
        return {
            "ln_model": self.model_description,
            "cor": self.correlation,
            "x": self.query_value,
            "y": self.predicted_value,
        }


class RegressionPredictor:
    """Predict y for a given x using a linear regression over a dataset of (x, y).

    The dataset is validated when the predictor is constructed. The regression is
    computed by build(), which may be called any number of times.

    Any undefined public attribute resolves to a function that raises
    UnsupportedOperationError when called, naming the operation and its
    arguments. hasattr(predictor, "fit") is therefore True, while
    predictor.fit(1, 2) fails.

    Example:
        >>> data = [[1, 20], [2, 70], [2, 45], [3, 81], [5, 73], [6, 80], [7, 110]]
        >>> RegressionPredictor(4.5, data).build().predicted_value
        76.65
    """

    def __init__(
        self,
        x: Any,
        data: Sequence[Any],
        config: PredictorConfig | None = None,
    ):
        self._config = config or PredictorConfig()
        self._x = to_query_value(x)
        self._vectors = read_from_sequence(data)
        self._count = len(self._vectors)

    def __getattr__(self, name: str) -> Callable[..., Any]:
        """Fail with UnsupportedOperationError for operations that don't exist.

        Only called for attributes not found by normal lookup. Private names fail
        on access, so that hasattr() and copy/pickle protocol lookups behave.
        """
        if name.startswith("_"):
            raise UnsupportedOperationError(fmt_unsupported_call(name, (), {}))

        def unsupported(*args: Any, **kwargs: Any) -> Any:
            raise UnsupportedOperationError(fmt_unsupported_call(name, args, kwargs))

        return unsupported

    @property
    def x(self) -> float:
        return self._x

    @property
    def count(self) -> int:
        return self._count

    @property
    def x_vector(self) -> tuple[float, ...]:
        return self._vectors.x

    @property
    def y_vector(self) -> tuple[float, ...]:
        return self._vectors.y

    def _round(self, number: float) -> float:
        return round_half_away(number, self._config.precision)

    def build(self) -> RegressionResult:
        """Build the prediction of the expected value of y for the given x.

        Returns:
            RegressionResult: The model description, correlation coefficient,
                query value x and predicted value y

        Raises:
            InsufficientDataError: If the dataset has fewer than the minimum
                number of observations (3 by default)
            DegenerateInputError: If all x values or all y values are identical
        """
        min_count = self._config.min_observations
        if self._count < min_count:
            raise InsufficientDataError(
                f"The dataset should contain a minimum of {min_count} observations."
            )

        b = self._round(slope(self._vectors))
        a = self._round(intercept(self._vectors, b))
        model = LinearModel(a, b)
        y = self._round(model(self._x))
        cor = self._round(correlation(self._vectors, b))

        _LOGGER.debug(
            "Linear model h(x) = %s over %d observations (r=%s): h(%s) = %s",
            model,
            self._count,
            cor,
            self._x,
            y,
        )

        return RegressionResult(
            model_description=str(model),
            correlation=cor,
            query_value=self._x,
            predicted_value=y,
            slope=b,
            intercept=a,
        )


def predict(
    data: Sequence[Any], x: Any, config: PredictorConfig | None = None
) -> float:
    """Compute the predicted value y = a + b * x for the given value x."""
    return RegressionPredictor(x, data, config).build().predicted_value
