"""Epicycle Tracer -- Fourier epicycle reconstruction of closed 2-D curves.

A closed curve is sampled over one period, each coordinate sequence is
decomposed with a direct discrete Fourier transform, and the curve is traced
back frame by frame as the tip of a chain of rotating vectors ("epicycles").

This package provides tools for:
- Sampling parametric closed curves at a fixed sample count
- Computing the direct (O(N^2)) DFT of a real-valued sequence
- Summing frequency components back into chains of rotating vectors
- Driving a frame-throttled animation clock that accumulates a traced path
- Rendering the resulting scene with Matplotlib / ipywidgets

Key principles:
- The DFT runs only when the curve changes, never inside the frame loop
- Animation state is an explicit value, not module-level globals
- Drawable shapes are addressed by name with replace-on-write semantics

Main subpackages:
- analysis: DFT engine, sampler, synthesizer, animation clock
- gui: Scene surface, Matplotlib rendering, interactive ipywidgets player
- models: Data models (FrequencyComponent, Spectrum, TracedPath, TracerProfile)
- scripts: Command-line entry points
"""

__all__ = []
