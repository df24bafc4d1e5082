"""
Matplotlib rendering of a :class:`~epicycle_tracer.gui.surface.SceneSurface`.

Design goals:
- Stateless: every call redraws the whole surface on the given axis.
- The axis mirrors the reference scene: dark background, square aspect and a
  20x20 unit grid centred on the origin.
"""

from __future__ import annotations

from typing import Optional, Tuple

import matplotlib.pyplot as plt

from .surface import CircleShape, LineShape, PointSet, PolylineShape, SceneSurface


GRID_EXTENT = 10.0
BACKGROUND = "#111111"
GRID_MAJOR_COLOR = "teal"
GRID_MINOR_COLOR = "darkgray"

# Point sizes are expressed in scene units; this maps them to marker points.
_POINT_SIZE_SCALE = 40.0


def _setup_axis(ax, extent: float) -> None:
    ax.set_facecolor(BACKGROUND)
    ax.set_xlim(-extent, extent)
    ax.set_ylim(-extent, extent)
    ax.set_aspect("equal", adjustable="box")
    ax.set_xticks(range(int(-extent), int(extent) + 1, 1), minor=True)
    ax.set_yticks(range(int(-extent), int(extent) + 1, 1), minor=True)
    ax.grid(True, which="minor", color=GRID_MINOR_COLOR, linewidth=0.3)
    ax.grid(True, which="major", color=GRID_MAJOR_COLOR, linewidth=0.5)
    ax.axhline(0.0, color=GRID_MAJOR_COLOR, linewidth=0.8)
    ax.axvline(0.0, color=GRID_MAJOR_COLOR, linewidth=0.8)


def render_surface(ax, surface: SceneSurface, *, extent: float = GRID_EXTENT, title: Optional[str] = None) -> int:
    """Clear ``ax`` and draw every shape of ``surface``.

    Returns the number of shapes drawn.
    """
    ax.clear()
    _setup_axis(ax, extent)

    n = 0
    for _name, shape in surface.items():
        if isinstance(shape, PointSet):
            if shape.points.shape[0]:
                ax.plot(
                    shape.points[:, 0],
                    shape.points[:, 1],
                    linestyle="none",
                    marker="o",
                    markersize=max(1.0, shape.size * _POINT_SIZE_SCALE),
                    color=shape.color,
                )
        elif isinstance(shape, CircleShape):
            pts = shape.outline()
            ax.plot(pts[:, 0], pts[:, 1], color=shape.color, linewidth=0.6)
        elif isinstance(shape, LineShape):
            ax.plot([shape.p0[0], shape.p1[0]], [shape.p0[1], shape.p1[1]], color=shape.color, linewidth=0.8)
        elif isinstance(shape, PolylineShape):
            if shape.points.shape[0]:
                ax.plot(shape.points[:, 0], shape.points[:, 1], color=shape.color, linewidth=1.0)
        else:
            raise TypeError(f"Unsupported shape type: {type(shape).__name__}")
        n += 1

    if title:
        ax.set_title(title)
    return n


def render_figure(surface: SceneSurface, *, figsize: Tuple[float, float] = (6.0, 6.0), title: Optional[str] = None):
    """Create a new figure, render ``surface`` on it and return ``(fig, ax)``."""
    fig, ax = plt.subplots(figsize=figsize)
    render_surface(ax, surface, title=title)
    return fig, ax
