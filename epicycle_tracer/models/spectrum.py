"""Frequency-domain representation produced by the DFT engine.

One :class:`Spectrum` is produced per sampled axis. Its components are stored in
ascending frequency order (index 0 is the DC term), which is also the order in
which the synthesizer chains them tip to tail.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Iterator, Tuple, Union, overload

import numpy as np
import pandas as pd


@dataclass(frozen=True)
class FrequencyComponent:
    """One harmonic of a sampled signal.

    Attributes
    ----------
    real, imag:
        Real/imaginary correlation sums, already divided by the sample count N.
    freq:
        Harmonic index k in ``[0, N)``.
    amp:
        ``sqrt(real**2 + imag**2)``; directly usable as an epicycle radius.
    phase:
        ``atan2(imag, real)`` in ``(-pi, pi]``.
    """

    real: float
    imag: float
    freq: int
    amp: float
    phase: float

    @classmethod
    def from_sums(cls, real: float, imag: float, freq: int) -> "FrequencyComponent":
        # +0.0 folds a negative zero so the phase stays in (-pi, pi].
        real = float(real) + 0.0
        imag = float(imag) + 0.0
        return cls(
            real=real,
            imag=imag,
            freq=int(freq),
            amp=float(np.hypot(real, imag)),
            phase=float(np.arctan2(imag, real)),
        )

    @property
    def coefficient(self) -> complex:
        return complex(self.real, self.imag)


@dataclass(frozen=True)
class Spectrum:
    """Immutable, ordered sequence of :class:`FrequencyComponent`.

    Behaves like a read-only sequence (``len``, indexing, slicing, iteration,
    ``reversed``) and additionally exposes vectorised views used by the
    synthesizer.
    """

    components: Tuple[FrequencyComponent, ...]

    def __post_init__(self) -> None:
        object.__setattr__(self, "components", tuple(self.components))

    def __len__(self) -> int:
        return len(self.components)

    def __iter__(self) -> Iterator[FrequencyComponent]:
        return iter(self.components)

    def __reversed__(self) -> Iterator[FrequencyComponent]:
        return reversed(self.components)

    @overload
    def __getitem__(self, i: int) -> FrequencyComponent: ...

    @overload
    def __getitem__(self, i: slice) -> "Spectrum": ...

    def __getitem__(self, i: Union[int, slice]):
        if isinstance(i, slice):
            return Spectrum(self.components[i])
        return self.components[i]

    @property
    def sample_count(self) -> int:
        return len(self.components)

    @property
    def frequencies(self) -> np.ndarray:
        return np.array([c.freq for c in self.components], dtype=int)

    @property
    def amplitudes(self) -> np.ndarray:
        return np.array([c.amp for c in self.components], dtype=float)

    @property
    def phases(self) -> np.ndarray:
        return np.array([c.phase for c in self.components], dtype=float)

    @property
    def coefficients(self) -> np.ndarray:
        """Complex coefficients ``real + 1j*imag`` with ``1/N`` normalisation."""
        return np.array([c.coefficient for c in self.components], dtype=complex)

    def to_frame(self) -> pd.DataFrame:
        """Return one row per component with columns ``freq, real, imag, amp, phase``."""
        return pd.DataFrame(
            {
                "freq": self.frequencies,
                "real": np.array([c.real for c in self.components], dtype=float),
                "imag": np.array([c.imag for c in self.components], dtype=float),
                "amp": self.amplitudes,
                "phase": self.phases,
            }
        )
