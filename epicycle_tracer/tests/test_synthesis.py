"""Tests for the epicycle synthesizer."""

from __future__ import annotations

import numpy as np
import pytest

from epicycle_tracer.analysis.dft import transform
from epicycle_tracer.analysis.sampler import sample_circle
from epicycle_tracer.analysis.synthesis import synthesize
from epicycle_tracer.models.spectrum import FrequencyComponent


def _component(freq: int, amp: float, phase: float) -> FrequencyComponent:
    return FrequencyComponent.from_sums(amp * np.cos(phase), amp * np.sin(phase), freq)


def test_single_term_rotates_about_origin() -> None:
    c = _component(freq=1, amp=2.0, phase=0.0)

    chain = synthesize((1.0, 1.0), 0.0, [c], np.pi / 2)

    assert chain.endpoint == pytest.approx((1.0, 3.0), abs=1e-12)
    assert len(chain) == 1
    np.testing.assert_allclose(chain.centers[0], [1.0, 1.0])
    assert chain.radii[0] == pytest.approx(2.0)


def test_rotation_offset_adds_to_every_term() -> None:
    comps = [_component(0, 1.0, 0.0), _component(2, 0.5, 0.3)]
    t = 0.7

    a = synthesize((0.0, 0.0), np.pi / 2, comps, t)
    shifted = [_component(c.freq, c.amp, c.phase + np.pi / 2) for c in comps]
    b = synthesize((0.0, 0.0), 0.0, shifted, t)

    assert a.endpoint == pytest.approx(b.endpoint, abs=1e-12)


def test_chain_links_tip_to_tail() -> None:
    rng = np.random.default_rng(1)
    spec = transform(rng.normal(size=9))

    chain = synthesize((0.0, 5.0), 0.0, spec, 1.1)

    assert len(chain) == 9
    np.testing.assert_allclose(chain.centers[0], [0.0, 5.0])
    np.testing.assert_allclose(chain.centers[1:], chain.tips[:-1])
    lengths = np.linalg.norm(chain.tips - chain.centers, axis=1)
    np.testing.assert_allclose(lengths, spec.amplitudes, atol=1e-12)


def test_summation_order_does_not_change_endpoint() -> None:
    rng = np.random.default_rng(2)
    spec = transform(rng.normal(size=24))

    fwd = synthesize((0.0, 0.0), 0.4, spec, 2.3)
    rev = synthesize((0.0, 0.0), 0.4, reversed(spec), 2.3)

    assert rev.endpoint == pytest.approx(fwd.endpoint, abs=1e-10)
    # Intermediate chain differs.
    assert not np.allclose(rev.tips[0], fwd.tips[0])


def test_empty_components_return_origin() -> None:
    chain = synthesize((2.0, -1.0), 0.0, [], 0.5)
    assert chain.endpoint == (2.0, -1.0)
    assert len(chain) == 0
    assert chain.tips.shape == (0, 2)


def test_axes_combine_into_circle_on_sample_grid() -> None:
    N = 50
    curve = sample_circle(2.0, N)
    sx, sy = transform(curve.x), transform(curve.y)

    for n in (0, 7, 25, 49):
        t = 2.0 * np.pi * n / N
        x_end = synthesize((0.0, 5.0), 0.0, sx, t).endpoint
        y_end = synthesize((5.0, 0.0), np.pi / 2, sy, t).endpoint
        assert (x_end[0], y_end[1]) == pytest.approx((curve.x[n], curve.y[n]), abs=1e-10)
