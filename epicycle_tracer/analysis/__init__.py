"""Numeric core.

Data flow:
  - ``sampler`` produces two equally long sample sequences of a closed curve.
  - ``dft`` turns each sequence into a :class:`~epicycle_tracer.models.spectrum.Spectrum`.
  - ``synthesis`` chains spectrum components into rotating vectors at a given time.
  - ``animation`` advances time frame by frame and accumulates the traced path.

The DFT is evaluated on curve changes only; the per-frame path is synthesis only.
"""

from .dft import transform, dft_coefficients
from .sampler import SampledCurve, sample_circle, sample_curve
from .synthesis import EpicycleChain, synthesize
from .animation import AnimationClock, EpicycleAnimator, FrameResult

__all__ = [
    "transform",
    "dft_coefficients",
    "SampledCurve",
    "sample_circle",
    "sample_curve",
    "EpicycleChain",
    "synthesize",
    "AnimationClock",
    "EpicycleAnimator",
    "FrameResult",
]
