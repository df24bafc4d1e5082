from __future__ import annotations

import json

from epicycle_tracer.models.profile import TracerProfile
from epicycle_tracer.scripts.render_period import frames_for_one_period, main


def test_frames_for_one_period() -> None:
    assert frames_for_one_period(TracerProfile()) == 2 * 50
    assert frames_for_one_period(TracerProfile(draw_speed=1.0, sample_count=10)) == 10
    assert frames_for_one_period(TracerProfile(draw_speed=0.3, sample_count=5)) == 4 * 5


def test_cli_writes_png(tmp_path, capsys) -> None:
    out = tmp_path / "scene.png"
    rc = main(["--radius", "3", "--samples", "12", "--out", str(out)])
    assert rc == 0
    assert out.exists() and out.stat().st_size > 0
    captured = capsys.readouterr().out
    assert "steps taken: 12; traced points: 12" in captured


def test_cli_reads_profile_json(tmp_path) -> None:
    prof = tmp_path / "profile.json"
    prof.write_text(json.dumps(TracerProfile(sample_count=8, draw_speed=1.0).to_dict()), encoding="utf-8")
    out = tmp_path / "nested" / "scene.png"
    assert main(["--profile", str(prof), "--boundary", "strict", "--out", str(out)]) == 0
    assert out.exists()


def test_rendered_scene_closes_the_circle(tmp_path) -> None:
    from epicycle_tracer.analysis.animation import EpicycleAnimator
    from epicycle_tracer.gui.surface import SceneSurface

    profile = TracerProfile(sample_count=12)
    surface = SceneSurface()
    anim = EpicycleAnimator(profile, surface=surface)
    results = anim.run(frames_for_one_period(profile))

    assert results[-1].period_completed
    assert surface.get("path_points").points.shape == (12, 2)
