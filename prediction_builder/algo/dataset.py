"""Dataset ingestion: validate (x, y) observations and split them into vectors.

Copyright (C) 2025 Paulo Ferreira de Castro

Licensed under the Open Software License version 3.0, a copy of which can be
found in the LICENSE file.
"""

import math
from collections.abc import Iterable, Mapping, Sequence, Sized
from dataclasses import dataclass
from numbers import Real
from typing import Any

from .error import InvalidInputError

MISMATCH_MSG = "Mismatch in the number of x and y in the dataset."

type Point = tuple[float, float]


@dataclass(frozen=True)
class Vectors:
    """Parallel x and y vectors decomposed from a dataset, in dataset order."""

    x: tuple[float, ...]
    y: tuple[float, ...]

    def __len__(self) -> int:
        return len(self.x)

    def points(self) -> Iterable[Point]:
        return zip(self.x, self.y)


def is_number(value: Any) -> bool:
    """Return True for finite real numbers other than bool."""
    # bool is a subclass of int, but True is not an observation.
    if not isinstance(value, Real) or isinstance(value, bool):
        return False
    return math.isfinite(value)


def _component(element: Any, i: int) -> float | None:
    try:
        value = element[i]
    except (IndexError, KeyError, TypeError):
        return None
    return float(value) if is_number(value) else None


def read_observation(element: Any, index: int) -> Point:
    """Return the (x, y) pair of a dataset element.

    Args:
        element (Any): A list, tuple or mapping with items 0 (x) and 1 (y)
        index (int): Position of the element in the dataset, for error messages

    Raises:
        InvalidInputError: If x or y is missing or not a number, or if the
            element has more than two components
    """
    x = _component(element, 0)
    y = _component(element, 1)
    too_long = (
        isinstance(element, Sized)
        and not isinstance(element, Mapping)
        and len(element) > 2
    )
    if x is None or y is None or too_long:
        raise InvalidInputError(f"{MISMATCH_MSG} (observation {index}: {element!r})")

    return (x, y)


def read_from_sequence(data: Sequence[Any]) -> Vectors:
    """Validate every dataset element and split the dataset into x and y vectors."""
    if isinstance(data, (str, bytes)) or not isinstance(data, Sequence):
        raise InvalidInputError(
            f"The dataset must be a sequence of (x, y) pairs, got ‘{type(data).__name__}’"
        )

    points = [read_observation(element, i) for i, element in enumerate(data)]
    x_vector = tuple(p[0] for p in points)
    y_vector = tuple(p[1] for p in points)

    return Vectors(x_vector, y_vector)
