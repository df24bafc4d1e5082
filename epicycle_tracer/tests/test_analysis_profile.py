"""Tests for TracerProfile."""

from __future__ import annotations

import dataclasses
import json
import math

import pytest

from epicycle_tracer.models.profile import TracerProfile


def test_profile_defaults() -> None:
    p = TracerProfile()
    assert p.sample_count == 50
    assert p.radius == 2.0
    assert p.draw_speed == 0.5
    assert p.period_boundary == "inclusive"
    assert p.x_origin == (0.0, 5.0)
    assert p.y_origin == (5.0, 0.0)
    assert p.x_rotation == 0.0
    assert p.y_rotation == pytest.approx(math.pi / 2)
    assert p.path_color == "red"
    assert p.path_point_size == 0.1
    assert p.target_color == "green"


def test_profile_frozen() -> None:
    p = TracerProfile()
    with pytest.raises(dataclasses.FrozenInstanceError):
        p.radius = 3.0  # type: ignore[misc]


def test_profile_replace() -> None:
    p = TracerProfile()
    p2 = dataclasses.replace(p, radius=4.0)
    assert p2.radius == 4.0
    assert p2.sample_count == 50  # unchanged


@pytest.mark.parametrize(
    "overrides",
    [
        {"sample_count": 0},
        {"draw_speed": -0.5},
        {"period_boundary": "open"},
        {"circle_segments": 2},
    ],
)
def test_profile_validate_rejects(overrides) -> None:
    with pytest.raises(ValueError):
        dataclasses.replace(TracerProfile(), **overrides).validate()


def test_profile_dict_roundtrip_through_json() -> None:
    p = TracerProfile(radius=3.5, sample_count=64, period_boundary="strict", x_origin=(1.0, 2.0))
    d = p.to_dict()
    assert isinstance(d["x_origin"], list)  # tuple -> list for JSON
    p2 = TracerProfile.from_dict(json.loads(json.dumps(d)))
    assert p2 == p
