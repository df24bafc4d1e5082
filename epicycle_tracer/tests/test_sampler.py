from __future__ import annotations

import numpy as np
import pytest

from epicycle_tracer.analysis.sampler import (
    SampledCurve,
    angular_grid,
    circle_outline,
    sample_circle,
    sample_curve,
)


def test_sample_circle_uniform_grid() -> None:
    curve = sample_circle(2.0, 50)

    assert curve.sample_count == 50
    theta = 2.0 * np.pi * np.arange(50) / 50.0
    np.testing.assert_allclose(curve.x, 2.0 * np.cos(theta))
    np.testing.assert_allclose(curve.y, 2.0 * np.sin(theta))
    assert curve.x[0] == pytest.approx(2.0)
    assert curve.y[0] == pytest.approx(0.0)


def test_sample_count_is_exact() -> None:
    # Index-based grid: no extra sample from float accumulation.
    for n in (3, 7, 49, 50, 51, 100):
        assert sample_circle(1.0, n).sample_count == n
        g = angular_grid(n)
        assert g[0] == 0.0
        assert g[-1] < 2.0 * np.pi


def test_sample_curve_generic() -> None:
    curve = sample_curve(lambda th: (3.0 * np.cos(th), 1.0 * np.sin(2.0 * th)), 8)
    assert curve.points().shape == (8, 2)
    assert curve.x[0] == pytest.approx(3.0)


def test_invalid_sample_count() -> None:
    with pytest.raises(ValueError):
        sample_circle(1.0, 0)


def test_mismatched_axes_rejected() -> None:
    with pytest.raises(ValueError):
        SampledCurve(x=np.zeros(4), y=np.zeros(5))


def test_circle_outline_closed() -> None:
    pts = circle_outline((1.0, -1.0), 0.5, segments=50)
    assert pts.shape == (51, 2)
    np.testing.assert_allclose(pts[0], pts[-1], atol=1e-12)
    np.testing.assert_allclose(np.hypot(pts[:, 0] - 1.0, pts[:, 1] + 1.0), 0.5)
