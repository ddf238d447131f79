"""Weighted random selection over a mapping of items to weights.

Uniform draws come from an explicit ``numpy.random.Generator`` so results
are reproducible with a seeded generator and no global state is touched.
"""

from __future__ import annotations

import numbers
from typing import Callable, Hashable, Iterable, Mapping, Optional, TypeVar, Union

import numpy as np

from ..foundation.exceptions import InvalidArgumentError
from ..runtime.logging_utils import get_logger

T = TypeVar("T", bound=Hashable)
Weight = Union[int, float]

_logger = get_logger(__name__)


def _all_integral(weights: Iterable[Weight]) -> bool:
    return all(isinstance(w, numbers.Integral) for w in weights)


def weighted_random_choice(
    options: Mapping[T, Weight],
    rng: Optional[np.random.Generator] = None,
) -> T:
    """
    Pick a key of ``options`` with probability proportional to its value.

    Integer weights draw an integer cutoff in ``[0, total)``; any float
    weight switches to a float cutoff ``random() * total``. The first key
    whose running weight sum exceeds the cutoff wins.

    Raises:
        InvalidArgumentError: if ``options`` is empty.
    """
    if not options:
        raise InvalidArgumentError("Cannot take a weighted random choice of an empty map.")
    rng = rng if rng is not None else np.random.default_rng()

    items = list(options.items())
    total = sum(weight for _, weight in items)
    if _all_integral(weight for _, weight in items):
        if total <= 0:
            raise InvalidArgumentError(f"Total weight must be positive, got {total}")
        cutoff: Weight = int(rng.integers(0, total))
    else:
        cutoff = float(rng.random()) * total

    running: Weight = 0
    for item, weight in items:
        running += weight
        if running > cutoff:
            return item

    _logger.debug(
        "weighted_random_choice: cutoff %s not reached (total %s); picking uniformly",
        cutoff,
        total,
    )
    return items[int(rng.integers(0, len(items)))][0]


def weighted_random_choice_by(
    items: Iterable[T],
    weight_selector: Callable[[T], Weight],
    rng: Optional[np.random.Generator] = None,
) -> T:
    """Weight each item by ``weight_selector(item)`` and pick one."""
    return weighted_random_choice({item: weight_selector(item) for item in items}, rng=rng)


__all__ = ["weighted_random_choice", "weighted_random_choice_by"]
