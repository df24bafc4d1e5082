from __future__ import annotations

from dataclasses import dataclass
from typing import Callable, Tuple

import numpy as np


CurveFn = Callable[[np.ndarray], Tuple[np.ndarray, np.ndarray]]


@dataclass(frozen=True)
class SampledCurve:
    """Two equally long sample sequences over one period of a closed curve.

    Arrays are shaped ``(N,)`` and indexed by the uniform angular grid
    ``theta_n = 2*pi*n/N``.
    """

    x: np.ndarray
    y: np.ndarray

    def __post_init__(self) -> None:
        x = np.asarray(self.x, dtype=float)
        y = np.asarray(self.y, dtype=float)
        if x.ndim != 1 or y.ndim != 1:
            raise ValueError(f"x and y must be 1D, got shapes {x.shape} and {y.shape}")
        if x.size != y.size:
            raise ValueError(f"x and y must have equal length, got {x.size} and {y.size}")
        object.__setattr__(self, "x", x)
        object.__setattr__(self, "y", y)

    @property
    def sample_count(self) -> int:
        return int(self.x.size)

    def points(self) -> np.ndarray:
        """Return samples as an ``(N, 2)`` array."""
        return np.column_stack([self.x, self.y])


def angular_grid(sample_count: int) -> np.ndarray:
    """Uniform grid ``[0, 2*pi)`` with ``sample_count`` points (step ``2*pi/N``)."""
    N = int(sample_count)
    if N <= 0:
        raise ValueError(f"sample_count must be > 0, got {sample_count}")
    return 2.0 * np.pi * np.arange(N, dtype=float) / float(N)


def sample_curve(fn: CurveFn, sample_count: int) -> SampledCurve:
    """Sample any parametric closed curve ``fn(theta) -> (x, y)`` over one period.

    ``fn`` receives the whole angular grid as an array and must return two
    arrays of the same shape.
    """
    theta = angular_grid(sample_count)
    x, y = fn(theta)
    return SampledCurve(x=np.asarray(x, dtype=float), y=np.asarray(y, dtype=float))


def sample_circle(radius: float, sample_count: int = 50) -> SampledCurve:
    """``x = r*cos(theta)``, ``y = r*sin(theta)`` on the uniform grid."""
    r = float(radius)
    return sample_curve(lambda theta: (r * np.cos(theta), r * np.sin(theta)), sample_count)


def circle_outline(center: Tuple[float, float], radius: float, segments: int = 50) -> np.ndarray:
    """Closed outline polyline of a circle, shape ``(segments + 1, 2)``.

    The first point is repeated at the end so the polyline closes.
    """
    n = int(segments)
    if n < 1:
        raise ValueError(f"segments must be >= 1, got {segments}")
    theta = np.linspace(0.0, 2.0 * np.pi, n + 1)
    cx, cy = float(center[0]), float(center[1])
    r = float(radius)
    return np.column_stack([cx + r * np.cos(theta), cy + r * np.sin(theta)])
