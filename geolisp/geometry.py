"""Numeric helpers shared by the value model and the operations."""

from __future__ import annotations

import logging
import math
from typing import Callable, Optional, Tuple, TypeVar

import numpy as np

from .config import DEFAULT_MAX_ATTEMPTS
from .errors import ConstraintError

logger = logging.getLogger(__name__)

T = TypeVar('T')

TWO_PI = 2.0 * math.pi
ON_CIRCLE_TOLERANCE = 1e-6


def distance(first, second) -> float:
    """Euclidean distance between two objects exposing ``x`` and ``y``."""

    return math.hypot(first.x - second.x, first.y - second.y)


def midpoint_coords(first, second) -> Tuple[float, float]:
    return (first.x + second.x) * 0.5, (first.y + second.y) * 0.5


def normalize_angle(theta: float) -> float:
    """Map ``theta`` (radians) into ``[0, 2*pi)``."""

    theta = math.fmod(theta, TWO_PI)
    if theta < 0.0:
        theta += TWO_PI
    # fmod of a tiny negative value can round back up to 2*pi
    if theta >= TWO_PI:
        theta = 0.0
    return theta


def polar_angle(origin, point) -> float:
    return normalize_angle(math.atan2(point.y - origin.y, point.x - origin.x))


class RandomSource:
    """Single source of randomness for the randomized constructors.

    Wraps a :class:`numpy.random.Generator`; pass a seeded generator (or a
    seed through :meth:`from_seed`) to make constructions reproducible.
    """

    def __init__(
        self,
        rng: Optional[np.random.Generator] = None,
        *,
        max_attempts: int = DEFAULT_MAX_ATTEMPTS,
    ):
        if max_attempts < 1:
            raise ValueError(f'max_attempts must be positive, got {max_attempts}')
        self.rng = rng if rng is not None else np.random.default_rng()
        self.max_attempts = max_attempts

    @classmethod
    def from_seed(cls, seed: Optional[int], *, max_attempts: int = DEFAULT_MAX_ATTEMPTS) -> 'RandomSource':
        return cls(np.random.default_rng(seed), max_attempts=max_attempts)

    def angle(self) -> float:
        """Uniform angle in ``[0, 2*pi)``."""

        return float(self.rng.uniform(0.0, TWO_PI))

    def sample(self, draw: Callable[[], T], accept: Callable[[T], bool], what: str) -> T:
        """Draw candidates until one is accepted, at most ``max_attempts`` times."""

        for attempt in range(1, self.max_attempts + 1):
            candidate = draw()
            if accept(candidate):
                if attempt > 1:
                    logger.debug('Accepted %s after %d draws', what, attempt)
                return candidate
        logger.warning('Giving up on %s after %d draws', what, self.max_attempts)
        raise ConstraintError(what, self.max_attempts)

    def __repr__(self) -> str:
        return f'RandomSource(max_attempts={self.max_attempts})'
