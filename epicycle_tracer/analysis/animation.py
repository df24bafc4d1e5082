"""Animation clock, path accumulator and the frame driver.

The clock is a two-state machine evaluated once per rendered frame:

- ACCUMULATING: the frame accumulator is below 1, nothing but rendering happens.
- ADVANCING: the accumulator reached 1; both axis chains are synthesized at the
  current time, the traced point is appended and time advances by ``2*pi/N``.

The DFT is only evaluated by :class:`EpicycleAnimator` when the curve changes
(``set_radius`` / ``load_curve``), never inside :meth:`AnimationClock.tick`.
"""

from __future__ import annotations

import math
from dataclasses import dataclass, replace
from typing import Any, List, Optional, Tuple

import numpy as np

from epicycle_tracer.analysis.dft import transform
from epicycle_tracer.analysis.sampler import SampledCurve, sample_circle
from epicycle_tracer.analysis.synthesis import EpicycleChain, synthesize
from epicycle_tracer.models.profile import TracerProfile
from epicycle_tracer.models.spectrum import Spectrum
from epicycle_tracer.models.state import AnimationState, Point, TracedPath


TWO_PI = 2.0 * math.pi

PATH_NAME = "path_points"
TARGET_NAME = "target_curve"
X_CHAIN_PREFIX = "epicycles_x"
Y_CHAIN_PREFIX = "epicycles_y"
CONNECTOR_X_NAME = "connector_x"
CONNECTOR_Y_NAME = "connector_y"


@dataclass(frozen=True)
class FrameResult:
    """Outcome of one :meth:`AnimationClock.tick`.

    ``path`` is the traced path as it stood after appending ``point`` (before a
    period reset cleared it), shape ``(n, 2)``. All fields except ``advanced``
    are None for ACCUMULATING frames.
    """

    advanced: bool
    point: Optional[Point] = None
    x_chain: Optional[EpicycleChain] = None
    y_chain: Optional[EpicycleChain] = None
    path: Optional[np.ndarray] = None
    period_completed: bool = False


def check_axis_lengths(x_spectrum: Spectrum, y_spectrum: Spectrum) -> int:
    """Return the shared component count or raise ``ValueError``."""
    nx, ny = len(x_spectrum), len(y_spectrum)
    if nx != ny:
        raise ValueError(f"x and y spectra must have the same length, got {nx} and {ny}")
    if ny <= 0:
        raise ValueError("spectra must contain at least one component")
    return ny


class AnimationClock:
    """Frame-throttled clock owning one :class:`AnimationState` and one :class:`TracedPath`.

    Instances are independent; several clocks can run side by side (e.g. in tests)
    without a rendering surface.
    """

    def __init__(
        self,
        x_spectrum: Spectrum,
        y_spectrum: Spectrum,
        profile: Optional[TracerProfile] = None,
    ) -> None:
        self.profile = (profile or TracerProfile()).validate()
        self.state = AnimationState()
        self.path = TracedPath()
        self.x_spectrum = x_spectrum
        self.y_spectrum = y_spectrum
        self._n = check_axis_lengths(x_spectrum, y_spectrum)

    @property
    def dt(self) -> float:
        """Time advance per step, ``2*pi/N`` with N the y-axis component count."""
        return TWO_PI / float(len(self.y_spectrum))

    @property
    def steps_per_period(self) -> int:
        return self._n

    def set_spectra(
        self,
        x_spectrum: Spectrum,
        y_spectrum: Spectrum,
        profile: Optional[TracerProfile] = None,
    ) -> None:
        """Swap in recomputed spectra (and optionally the profile they came from).

        Playback continues from the current time when N is unchanged; otherwise
        the clock is reset so the step grid stays consistent.
        """
        n = check_axis_lengths(x_spectrum, y_spectrum)
        if profile is not None:
            self.profile = profile.validate()
        self.x_spectrum = x_spectrum
        self.y_spectrum = y_spectrum
        if n != self._n:
            self._n = n
            self.reset()

    def reset(self) -> None:
        self.state = AnimationState()
        self.path.clear()

    def tick(self) -> FrameResult:
        """Run one rendered frame of the state machine."""
        st = self.state
        st.accumulated_frame_time += float(self.profile.draw_speed)
        if st.accumulated_frame_time < 1.0:
            return FrameResult(advanced=False)

        st.accumulated_frame_time = 0.0
        return self._advance()

    def _advance(self) -> FrameResult:
        p = self.profile
        st = self.state

        x_chain = synthesize(p.x_origin, p.x_rotation, self.x_spectrum, st.time)
        y_chain = synthesize(p.y_origin, p.y_rotation, self.y_spectrum, st.time)
        point = (x_chain.endpoint[0], y_chain.endpoint[1])
        self.path.append(point)
        path = self.path.as_array()

        st.step += 1
        if p.period_boundary == "strict":
            st.time += self.dt
            completed = st.time > TWO_PI
        else:
            # Integer step counter: no float drift at the period boundary.
            st.time = st.step * self.dt
            completed = st.step >= self._n

        if completed:
            st.time = 0.0
            st.step = 0
            st.period += 1
            self.path.clear()

        return FrameResult(
            advanced=True,
            point=point,
            x_chain=x_chain,
            y_chain=y_chain,
            path=path,
            period_completed=completed,
        )


class EpicycleAnimator:
    """Frame driver: curve -> DFT (both axes) -> clock -> rendering surface.

    Parameters
    ----------
    profile:
        Session configuration. Defaults to :class:`TracerProfile` defaults.
    surface:
        Optional rendering collaborator exposing ``draw_points``, ``draw_circle``,
        ``draw_line``, ``draw_polyline``, ``discard`` and ``discard_prefix`` (see
        :class:`~epicycle_tracer.gui.surface.SceneSurface`). When None the
        animator runs headless.
    """

    def __init__(self, profile: Optional[TracerProfile] = None, surface: Any = None) -> None:
        self.profile = (profile or TracerProfile()).validate()
        self.surface = surface
        self.curve: Optional[SampledCurve] = None
        self.x_spectrum: Optional[Spectrum] = None
        self.y_spectrum: Optional[Spectrum] = None
        self.clock: Optional[AnimationClock] = None
        self.set_radius(self.profile.radius)

    # ------------------------------------------------------------------
    # Parameter changes (DFT runs here, off the frame path)
    # ------------------------------------------------------------------

    def set_radius(self, radius: float) -> None:
        """Resample the target circle and recompute both spectra."""
        self.profile = replace(self.profile, radius=float(radius))
        self.load_curve(sample_circle(self.profile.radius, self.profile.sample_count))

    def load_curve(self, curve: SampledCurve) -> None:
        """Use any sampled closed curve as the target."""
        x_spectrum = transform(curve.x)
        y_spectrum = transform(curve.y)
        check_axis_lengths(x_spectrum, y_spectrum)

        self.profile = replace(self.profile, sample_count=len(y_spectrum))

        if self.clock is None:
            self.clock = AnimationClock(x_spectrum, y_spectrum, self.profile)
        else:
            n_changed = len(y_spectrum) != len(self.y_spectrum)
            self.clock.set_spectra(x_spectrum, y_spectrum, self.profile)
            if n_changed:
                self._clear_traces()

        self.curve = curve
        self.x_spectrum = x_spectrum
        self.y_spectrum = y_spectrum

        if self.surface is not None:
            closed = np.vstack([curve.points(), curve.points()[:1]])
            self.surface.draw_polyline(closed, TARGET_NAME, self.profile.target_color)

    # ------------------------------------------------------------------
    # Frame loop
    # ------------------------------------------------------------------

    @property
    def path(self) -> TracedPath:
        return self.clock.path

    @property
    def state(self) -> AnimationState:
        return self.clock.state

    def reset(self) -> None:
        self.clock.reset()
        self._clear_traces()

    def frame(self) -> FrameResult:
        result = self.clock.tick()
        if result.advanced and self.surface is not None:
            self._draw(result)
        return result

    def run(self, n_frames: int) -> List[FrameResult]:
        """Run ``n_frames`` frames back to back and return the advancing ones."""
        out: List[FrameResult] = []
        for _ in range(int(n_frames)):
            r = self.frame()
            if r.advanced:
                out.append(r)
        return out

    def _draw(self, result: FrameResult) -> None:
        p = self.profile
        s = self.surface
        self._draw_chain(result.x_chain, X_CHAIN_PREFIX)
        self._draw_chain(result.y_chain, Y_CHAIN_PREFIX)
        s.draw_line(result.x_chain.endpoint, result.point, CONNECTOR_X_NAME, p.connector_color)
        s.draw_line(result.y_chain.endpoint, result.point, CONNECTOR_Y_NAME, p.connector_color)
        s.draw_points(result.path, PATH_NAME, p.path_color, p.path_point_size)

    def _draw_chain(self, chain: EpicycleChain, prefix: str) -> None:
        p = self.profile
        for i in range(len(chain)):
            center = _as_point(chain.centers[i])
            tip = _as_point(chain.tips[i])
            self.surface.draw_circle(
                center, float(chain.radii[i]), f"{prefix}_circle_{i}", p.epicycle_color, p.circle_segments
            )
            self.surface.draw_line(center, tip, f"{prefix}_line_{i}", p.epicycle_color)

    def _clear_traces(self) -> None:
        """Bring the surface in line with a freshly reset clock: empty path, no chains."""
        s = self.surface
        if s is None:
            return
        p = self.profile
        s.draw_points(np.zeros((0, 2)), PATH_NAME, p.path_color, p.path_point_size)
        s.discard(CONNECTOR_X_NAME)
        s.discard(CONNECTOR_Y_NAME)
        s.discard_prefix(X_CHAIN_PREFIX)
        s.discard_prefix(Y_CHAIN_PREFIX)


def _as_point(row: np.ndarray) -> Tuple[float, float]:
    return float(row[0]), float(row[1])
