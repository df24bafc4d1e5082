from __future__ import annotations

from dataclasses import dataclass, field
from typing import Iterator, List, Tuple

import numpy as np


Point = Tuple[float, float]


@dataclass
class AnimationState:
    """Mutable clock state owned by a single :class:`~epicycle_tracer.analysis.animation.AnimationClock`.

    Attributes
    ----------
    time:
        Animation angle in radians, wraps back to 0 at the end of each period.
    accumulated_frame_time:
        Frame-throttling accumulator; a step is taken once it reaches 1.
    step:
        Number of steps taken in the current period.
    period:
        Number of completed periods since the last reset.
    """

    time: float = 0.0
    accumulated_frame_time: float = 0.0
    step: int = 0
    period: int = 0


@dataclass
class TracedPath:
    """Chronologically ordered 2-D points traced during the current period."""

    points: List[Point] = field(default_factory=list)

    def __len__(self) -> int:
        return len(self.points)

    def __iter__(self) -> Iterator[Point]:
        return iter(self.points)

    def append(self, point: Point) -> None:
        self.points.append((float(point[0]), float(point[1])))

    def clear(self) -> None:
        self.points = []

    def as_array(self) -> np.ndarray:
        """Return points as an ``(n, 2)`` float array (``(0, 2)`` when empty)."""
        if not self.points:
            return np.zeros((0, 2), dtype=float)
        return np.asarray(self.points, dtype=float)
