"""GUI package - scene surface, Matplotlib rendering and the ipywidgets player.

Modules:
1. surface: name-keyed SceneSurface (upsert / discard) used by the animator
2. plot_view: stateless Matplotlib rendering of a SceneSurface
3. log_view: HTML log widget for notebook front-ends
4. app: interactive player (radius slider, Play/Step/Reset, spectrum tables)

Entry point:
    from epicycle_tracer.gui.app import build_gui
    gui = build_gui()

Only ``app`` and ``log_view`` import ipywidgets; ``surface`` is usable headless.
"""
