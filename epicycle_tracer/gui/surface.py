"""Name-keyed scene surface.

Every drawable is stored under a name; writing a shape under an existing name
replaces the previous one (``upsert``). Rendering backends only need to walk
:meth:`SceneSurface.items` in insertion order.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Dict, Iterator, Optional, Tuple, Union

import numpy as np

from epicycle_tracer.analysis.sampler import circle_outline


@dataclass(frozen=True)
class PointSet:
    points: np.ndarray  # (n, 2)
    color: str = "red"
    size: float = 0.1


@dataclass(frozen=True)
class CircleShape:
    center: Tuple[float, float]
    radius: float
    color: str = "white"
    segments: int = 50

    def outline(self) -> np.ndarray:
        return circle_outline(self.center, self.radius, self.segments)


@dataclass(frozen=True)
class LineShape:
    p0: Tuple[float, float]
    p1: Tuple[float, float]
    color: str = "white"


@dataclass(frozen=True)
class PolylineShape:
    points: np.ndarray  # (n, 2)
    color: str = "green"


Shape = Union[PointSet, CircleShape, LineShape, PolylineShape]


def _points_array(points) -> np.ndarray:
    arr = np.asarray(points, dtype=float)
    if arr.size == 0:
        return np.zeros((0, 2), dtype=float)
    if arr.ndim != 2 or arr.shape[1] != 2:
        raise ValueError(f"points must have shape (n, 2), got {arr.shape}")
    return arr


def _xy(p) -> Tuple[float, float]:
    return float(p[0]), float(p[1])


class SceneSurface:
    """Explicit mapping from shape name to the current shape definition."""

    def __init__(self) -> None:
        self._shapes: Dict[str, Shape] = {}
        self.revision = 0

    def __len__(self) -> int:
        return len(self._shapes)

    def __contains__(self, name: str) -> bool:
        return name in self._shapes

    def get(self, name: str) -> Optional[Shape]:
        return self._shapes.get(name)

    def items(self) -> Iterator[Tuple[str, Shape]]:
        return iter(list(self._shapes.items()))

    def upsert(self, name: str, shape: Shape) -> None:
        """Add ``shape`` under ``name``, removing any prior shape with that name."""
        self._shapes.pop(name, None)
        self._shapes[name] = shape
        self.revision += 1

    def discard(self, name: str) -> bool:
        removed = self._shapes.pop(name, None) is not None
        if removed:
            self.revision += 1
        return removed

    def discard_prefix(self, prefix: str) -> int:
        names = [n for n in self._shapes if n.startswith(prefix)]
        for n in names:
            del self._shapes[n]
        if names:
            self.revision += 1
        return len(names)

    def clear(self) -> None:
        self._shapes.clear()
        self.revision += 1

    # ------------------------------------------------------------------
    # Draw primitives
    # ------------------------------------------------------------------

    def draw_points(self, points, name: str = "path_points", color: str = "red", size: float = 0.1) -> None:
        """Replace the displayed point set ``name`` with ``points``."""
        self.upsert(name, PointSet(points=_points_array(points), color=color, size=float(size)))

    def draw_circle(self, center, radius: float, name: str, color: str = "red", segments: int = 50) -> None:
        self.upsert(
            name,
            CircleShape(center=_xy(center), radius=float(radius), color=color, segments=int(segments)),
        )

    def draw_line(self, p0, p1, name: str, color: str = "white") -> None:
        self.upsert(name, LineShape(p0=_xy(p0), p1=_xy(p1), color=color))

    def draw_polyline(self, points, name: str, color: str = "green") -> None:
        self.upsert(name, PolylineShape(points=_points_array(points), color=color))
