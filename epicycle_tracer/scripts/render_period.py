"""Headless rendering of one epicycle period to a PNG file.

Example
-------
    python -m epicycle_tracer.scripts.render_period --radius 3 --out circle.png
"""

from __future__ import annotations

import json
from dataclasses import replace
from pathlib import Path
from typing import Optional, Sequence

from epicycle_tracer.analysis.animation import EpicycleAnimator
from epicycle_tracer.gui.surface import SceneSurface
from epicycle_tracer.models.profile import PERIOD_BOUNDARIES, TracerProfile


def frames_for_one_period(profile: TracerProfile) -> int:
    """Frames needed to take all N steps of one period, the closing step included."""
    frames_per_step = 1
    acc = 0.0
    while acc + profile.draw_speed < 1.0:
        acc += profile.draw_speed
        frames_per_step += 1
    return frames_per_step * int(profile.sample_count)


def render_period(profile: TracerProfile, out_path: Path, *, dpi: int = 120) -> Path:
    """Run the first period to its closing step and save the scene.

    The closing step pushes the full pre-reset path to the surface, so the
    saved scene shows all N traced points.
    """
    import matplotlib

    matplotlib.use("Agg")
    import matplotlib.pyplot as plt

    from epicycle_tracer.gui.plot_view import render_figure

    surface = SceneSurface()
    animator = EpicycleAnimator(profile, surface=surface)
    results = animator.run(frames_for_one_period(profile))
    n_points = int(results[-1].path.shape[0])

    title = f"r = {profile.radius:g}, N = {profile.sample_count}, points = {n_points}"
    fig, _ax = render_figure(surface, title=title)
    out_path = Path(out_path)
    out_path.parent.mkdir(parents=True, exist_ok=True)
    fig.savefig(out_path, dpi=int(dpi))
    plt.close(fig)

    print(f"[info] steps taken: {len(results)}; traced points: {n_points}")
    return out_path


def main(argv: Optional[Sequence[str]] = None) -> int:
    import argparse
    import textwrap

    p = argparse.ArgumentParser(
        prog="python -m epicycle_tracer.scripts.render_period",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        description=textwrap.dedent(
            """\
            Trace one period of a circle with Fourier epicycles and save the scene as PNG.

            Defaults reproduce the reference scene (N=50, r=2, draw speed 0.5).
            A JSON profile (TracerProfile.to_dict() layout) can be given with --profile;
            explicit flags override its values.
            """
        ),
    )
    p.add_argument("--profile", default=None, help="JSON file with TracerProfile fields")
    p.add_argument("--radius", type=float, default=None, help="Circle radius")
    p.add_argument("--samples", type=int, default=None, help="Sample count N per period")
    p.add_argument("--draw-speed", type=float, default=None, help="Frame accumulator increment")
    p.add_argument("--boundary", choices=PERIOD_BOUNDARIES, default=None, help="Period boundary policy")
    p.add_argument("--dpi", type=int, default=120, help="Output resolution")
    p.add_argument("--out", default="epicycles.png", help="Output PNG path")

    ns = p.parse_args(list(argv) if argv is not None else None)

    profile = TracerProfile()
    if ns.profile:
        with open(Path(ns.profile).expanduser(), "r", encoding="utf-8") as fh:
            profile = TracerProfile.from_dict(json.load(fh))

    overrides = {}
    if ns.radius is not None:
        overrides["radius"] = float(ns.radius)
    if ns.samples is not None:
        overrides["sample_count"] = int(ns.samples)
    if ns.draw_speed is not None:
        overrides["draw_speed"] = float(ns.draw_speed)
    if ns.boundary is not None:
        overrides["period_boundary"] = ns.boundary
    profile = replace(profile, **overrides).validate()

    out = render_period(profile, Path(ns.out), dpi=ns.dpi)
    print(f"[info] wrote: {out}")
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
