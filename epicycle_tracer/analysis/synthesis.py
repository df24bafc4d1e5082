"""Epicycle synthesis: sum frequency components back into a chain of rotating vectors."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Iterable, Tuple

import numpy as np

from epicycle_tracer.models.spectrum import FrequencyComponent


@dataclass(frozen=True)
class EpicycleChain:
    """Tip-to-tail chain of rotating vectors evaluated at one animation time.

    Attributes
    ----------
    origin:
        Anchor of the first vector, shape ``(2,)``.
    centers:
        Start point of each term, shape ``(n_terms, 2)``.
    tips:
        End point of each term (intermediate vector endpoints), shape ``(n_terms, 2)``.
    radii:
        Amplitude of each term, shape ``(n_terms,)``.
    """

    origin: np.ndarray
    centers: np.ndarray
    tips: np.ndarray
    radii: np.ndarray

    @property
    def endpoint(self) -> Tuple[float, float]:
        """Final running point: the reconstructed coordinate for this axis."""
        if self.tips.shape[0] == 0:
            return float(self.origin[0]), float(self.origin[1])
        return float(self.tips[-1, 0]), float(self.tips[-1, 1])

    def __len__(self) -> int:
        return int(self.tips.shape[0])


def synthesize(
    origin: Tuple[float, float],
    rotation_offset: float,
    components: Iterable[FrequencyComponent],
    time: float,
) -> EpicycleChain:
    r"""Chain the components from ``origin`` in the given order.

    Each term contributes
    ``amp * (cos(freq*time + phase + rotation_offset), sin(freq*time + phase + rotation_offset))``
    and the running point after the last term is the chain endpoint.

    Summation order does not change the endpoint, only the intermediate points.
    Pure function: no hidden state.
    """
    comps = list(components)
    o = np.array([float(origin[0]), float(origin[1])], dtype=float)

    if not comps:
        empty = np.zeros((0, 2), dtype=float)
        return EpicycleChain(origin=o, centers=empty, tips=empty.copy(), radii=np.zeros(0, dtype=float))

    freq = np.array([c.freq for c in comps], dtype=float)
    amp = np.array([c.amp for c in comps], dtype=float)
    phase = np.array([c.phase for c in comps], dtype=float)

    angle = freq * float(time) + phase + float(rotation_offset)
    steps = np.column_stack([amp * np.cos(angle), amp * np.sin(angle)])

    tips = o[None, :] + np.cumsum(steps, axis=0)
    centers = np.vstack([o[None, :], tips[:-1]])

    return EpicycleChain(origin=o, centers=centers, tips=tips, radii=amp)
