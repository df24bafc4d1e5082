"""Direct discrete Fourier transform of a real-valued sampled sequence.

Functions
---------
transform
    Compute the ``1/N`` normalised DFT of a 1-D signal as a :class:`Spectrum`.
dft_coefficients
    The same computation returning the raw complex coefficient vector.

Notes
-----
The transform is evaluated directly as a correlation against ``cos``/``sin`` of
the angular grid ``2*pi*k*n/N`` (O(N^2) time). ``numpy.fft`` is deliberately not
used: a fast transform omits the ``1/N`` normalisation, and the amplitudes here
are consumed as physical epicycle radii.
"""

from __future__ import annotations

from typing import Sequence, Union

import numpy as np

from epicycle_tracer.models.spectrum import FrequencyComponent, Spectrum


def dft_coefficients(signal: Union[Sequence[float], np.ndarray]) -> np.ndarray:
    r"""Return complex coefficients ``X[k] = (1/N) * sum_n x[n] exp(-2j*pi*k*n/N)``.

    Parameters
    ----------
    signal:
        Real-valued samples over one period, shape ``(N,)`` with ``N >= 1``.

    Returns
    -------
    np.ndarray
        Complex array of shape ``(N,)`` in ascending frequency order.
    """
    x = np.asarray(signal, dtype=float)
    if x.ndim != 1:
        raise ValueError(f"signal must be 1D (N,), got shape {x.shape}")

    N = int(x.size)
    if N <= 0:
        raise ValueError("signal must contain at least one sample")

    k = np.arange(N, dtype=float)
    phi = 2.0 * np.pi * np.outer(k, k) / float(N)  # phi[k, n]

    real = (np.cos(phi) @ x) / float(N)
    imag = -(np.sin(phi) @ x) / float(N)
    return real + 1j * imag


def transform(signal: Union[Sequence[float], np.ndarray]) -> Spectrum:
    """Compute the frequency-domain representation of one sampled axis.

    Output has exactly ``N`` components with ``freq`` values ``0..N-1`` in order.
    The function is pure: recompute whenever the source signal changes.
    """
    coeff = dft_coefficients(signal)
    return Spectrum(
        tuple(
            FrequencyComponent.from_sums(c.real, c.imag, k)
            for k, c in enumerate(coeff)
        )
    )
