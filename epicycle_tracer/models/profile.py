"""Tracer profile -- bundles all configuration that affects the animation.

A TracerProfile groups every parameter of a playback session into one frozen
dataclass. It can be:

- Constructed with defaults matching the reference scene
- Overridden field-by-field via ``dataclasses.replace()``
- Serialized to/from a dict for JSON provenance
"""

from __future__ import annotations

import math
from dataclasses import asdict, dataclass
from typing import Any, Dict, Tuple


PERIOD_BOUNDARIES = ("inclusive", "strict")


@dataclass(frozen=True)
class TracerProfile:
    """Frozen configuration for one epicycle playback.

    Curve
    -----
    sample_count : int
        Number of samples N per period (shared by both axes).
    radius : float
        Radius of the target circle.

    Clock
    -----
    draw_speed : float
        Added to the frame accumulator on every frame; a step is taken once the
        accumulator reaches 1 (0.5 advances on every other frame).
    period_boundary : str
        ``"inclusive"`` resets after exactly N steps (``time >= 2*pi``);
        ``"strict"`` resets on ``time > 2*pi`` of the accumulated float time.

    Chains
    ------
    x_origin, y_origin : tuple of float
        Where the x-axis and y-axis epicycle chains are anchored.
    x_rotation, y_rotation : float
        Phase offset added to every term of the chain. The y chain is rotated
        by pi/2 so that its sine component carries the y coordinate.

    Drawing
    -------
    circle_segments : int
        Tessellation of each epicycle circle outline.
    """

    sample_count: int = 50
    radius: float = 2.0

    draw_speed: float = 0.5
    period_boundary: str = "inclusive"

    x_origin: Tuple[float, float] = (0.0, 5.0)
    y_origin: Tuple[float, float] = (5.0, 0.0)
    x_rotation: float = 0.0
    y_rotation: float = math.pi / 2

    circle_segments: int = 50
    path_color: str = "red"
    path_point_size: float = 0.1
    epicycle_color: str = "white"
    connector_color: str = "white"
    target_color: str = "green"

    def validate(self) -> "TracerProfile":
        """Raise ``ValueError`` for values the animation cannot run with."""
        if int(self.sample_count) <= 0:
            raise ValueError(f"sample_count must be > 0, got {self.sample_count}")
        if not (self.draw_speed > 0):
            raise ValueError(f"draw_speed must be > 0, got {self.draw_speed}")
        if self.period_boundary not in PERIOD_BOUNDARIES:
            raise ValueError(
                f"period_boundary must be one of {PERIOD_BOUNDARIES}, got {self.period_boundary!r}"
            )
        if int(self.circle_segments) < 3:
            raise ValueError(f"circle_segments must be >= 3, got {self.circle_segments}")
        return self

    # ------------------------------------------------------------------
    # Serialization
    # ------------------------------------------------------------------

    def to_dict(self) -> Dict[str, Any]:
        """Return a JSON-friendly dict (tuples become lists)."""
        d = asdict(self)
        d["x_origin"] = list(d["x_origin"])
        d["y_origin"] = list(d["y_origin"])
        return d

    @classmethod
    def from_dict(cls, d: Dict[str, Any]) -> "TracerProfile":
        """Reconstruct from a dict (e.g. loaded from JSON)."""
        d = dict(d)  # shallow copy
        for key in ("x_origin", "y_origin"):
            if key in d and not isinstance(d[key], tuple):
                d[key] = tuple(float(v) for v in d[key])
        return cls(**d)
