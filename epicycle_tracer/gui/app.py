from __future__ import annotations

from dataclasses import dataclass
from typing import Optional

import ipywidgets as w
from IPython.display import display
import matplotlib.pyplot as plt

from epicycle_tracer.analysis.animation import EpicycleAnimator, FrameResult
from epicycle_tracer.models.profile import TracerProfile

from .log_view import PlayerLog
from .plot_view import render_surface
from .surface import SceneSurface


# Keep a single active GUI instance per kernel to avoid duplicated callbacks / stacked widgets.
_ACTIVE_GUI: Optional[w.Widget] = None


@dataclass
class PlayerState:
    animator: Optional[EpicycleAnimator] = None
    surface: Optional[SceneSurface] = None
    frames: int = 0
    busy: bool = False


def _close_all_figures() -> None:
    plt.close("all")


def build_gui(profile: Optional[TracerProfile] = None) -> w.Widget:
    """
    Epicycle player GUI (Jupyter / VSCode notebooks).

    The radius slider triggers a full resample + DFT of both axes; the Play
    widget drives one animation frame per tick.
    """
    global _ACTIVE_GUI

    if _ACTIVE_GUI is not None:
        _ACTIVE_GUI.close()
        _ACTIVE_GUI = None

    profile = (profile or TracerProfile()).validate()
    log = PlayerLog(title="Log")
    st = PlayerState()

    out_plot = w.Output(layout=w.Layout(border="1px solid #ddd", padding="8px"))
    out_table = w.Output(layout=w.Layout(border="1px solid #ddd", padding="8px"))

    sl_radius = w.FloatSlider(
        value=float(profile.radius),
        min=0.1,
        max=8.0,
        step=0.1,
        description="Radius",
        continuous_update=False,
        layout=w.Layout(width="360px"),
    )
    play = w.Play(value=0, min=0, max=10**9, step=1, interval=40, description="Play")
    btn_step = w.Button(description="Step", layout=w.Layout(width="100px"))
    btn_reset = w.Button(description="Reset", button_style="warning", layout=w.Layout(width="100px"))
    btn_spectrum = w.Button(description="Spectrum", layout=w.Layout(width="120px"))
    lbl_status = w.HTML()

    def _status() -> None:
        a = st.animator
        if a is None:
            lbl_status.value = ""
            return
        s = a.state
        lbl_status.value = (
            f"N={len(a.y_spectrum)} &nbsp; time={s.time:.3f} rad &nbsp; "
            f"step={s.step} &nbsp; path={len(a.path)} &nbsp; period={s.period}"
        )

    def _redraw() -> None:
        with out_plot:
            out_plot.clear_output(wait=True)
            _close_all_figures()
            fig, ax = plt.subplots(figsize=(6.0, 6.0))
            render_surface(ax, st.surface, title=f"r = {st.animator.profile.radius:g}")
            plt.show()
        _status()

    def _setup() -> None:
        st.surface = SceneSurface()
        st.animator = EpicycleAnimator(profile, surface=st.surface)
        st.frames = 0
        log.info(f"Sampled circle r={profile.radius:g}, N={profile.sample_count}; spectra ready.")

    def _frame() -> Optional[FrameResult]:
        if st.busy or st.animator is None:
            return None
        st.busy = True
        try:
            r = st.animator.frame()
            st.frames += 1
            if r.advanced:
                if r.period_completed:
                    log.info(f"Period {st.animator.state.period} complete; path cleared.")
                _redraw()
            return r
        finally:
            st.busy = False

    def _on_play(_change) -> None:
        try:
            _frame()
        except Exception as e:
            play.playing = False
            log.exception("frame", e)

    def _on_step(_) -> None:
        try:
            r = _frame()
            # A step always advances the clock, even when throttling skips a frame.
            while r is not None and not r.advanced:
                r = _frame()
        except Exception as e:
            log.exception("step", e)

    def _on_reset(_) -> None:
        try:
            st.animator.reset()
            st.frames = 0
            log.info("Animation reset.")
            _redraw()
        except Exception as e:
            log.exception("reset", e)

    def _on_radius(change) -> None:
        try:
            st.animator.set_radius(float(change["new"]))
            log.info(f"Radius -> {st.animator.profile.radius:g}; spectra recomputed.")
            _redraw()
        except Exception as e:
            log.exception("radius", e)

    def _on_spectrum(_) -> None:
        with out_table:
            out_table.clear_output(wait=True)
            try:
                a = st.animator
                print("=== X AXIS ===")
                display(a.x_spectrum.to_frame())
                print("=== Y AXIS ===")
                display(a.y_spectrum.to_frame())
            except Exception as e:
                log.exception("spectrum", e)

    try:
        _setup()
        _redraw()
    except Exception as e:
        log.exception("setup", e)

    play.observe(_on_play, names="value")
    sl_radius.observe(_on_radius, names="value")
    btn_step.on_click(_on_step)
    btn_reset.on_click(_on_reset)
    btn_spectrum.on_click(_on_spectrum)

    controls = w.HBox([sl_radius, play, btn_step, btn_reset, btn_spectrum])
    gui = w.VBox([controls, lbl_status, out_plot, out_table, log.panel])
    gui._player_state = st  # exposed for headless inspection

    _ACTIVE_GUI = gui
    return gui
