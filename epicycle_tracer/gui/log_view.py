from __future__ import annotations

import html
from collections import deque
from dataclasses import dataclass
from typing import Deque, Literal, Optional, Tuple

import ipywidgets as w


Level = Literal["info", "warning", "error"]

_COLORS = {
    "error": "#b00020",    # red
    "warning": "#b26a00",  # orange
    "info": "#222222",     # near-black
}

_PREFIXES: Tuple[Tuple[str, Level], ...] = (
    ("ERROR:", "error"),
    ("WARNING:", "warning"),
)


def classify(message: str) -> Level:
    """Severity from a leading ``ERROR:`` / ``WARNING:`` tag, ``info`` otherwise."""
    s = (message or "").lstrip()
    for prefix, level in _PREFIXES:
        if s.startswith(prefix):
            return level
    return "info"


@dataclass
class _Entry:
    level: Level
    message: str
    count: int = 1

    def html_row(self) -> str:
        suffix = f" (x{self.count})" if self.count > 1 else ""
        return (
            f"<div style='color:{_COLORS[self.level]}; white-space:pre-wrap; font-family:monospace;'>"
            f"{html.escape(self.message + suffix)}</div>"
        )


class PlayerLog:
    """
    Player log rendered into a single HTML widget.

    Messages are tagged the same way the CLI prints them: a line starting with
    ``ERROR:`` or ``WARNING:`` gets that severity, anything else is info.
    Frame callbacks can fire many times per second, so consecutive repeats
    collapse into one row (xN) and only the newest ``max_entries`` rows are kept.
    """

    def __init__(self, *, title: Optional[str] = None, height_px: int = 160, max_entries: int = 500) -> None:
        self._entries: Deque[_Entry] = deque(maxlen=int(max_entries))
        self._height_px = int(height_px)
        self.widget = w.HTML()
        header = [w.HTML(f"<b>{html.escape(title)}</b>")] if title else []
        self.panel = w.VBox(header + [self.widget])
        self._render()

    @property
    def entries(self) -> Tuple[Tuple[str, str, int], ...]:
        """``(level, message, count)`` for each entry, oldest first."""
        return tuple((e.level, e.message, e.count) for e in self._entries)

    def report(self, message: str) -> Level:
        """Append ``message`` with the severity given by its tag; return that severity."""
        msg = "" if message is None else str(message)
        level = classify(msg)
        last = self._entries[-1] if self._entries else None
        if last is not None and (last.level, last.message) == (level, msg):
            last.count += 1
        else:
            self._entries.append(_Entry(level=level, message=msg))
        self._render()
        return level

    def info(self, message: str) -> None:
        self.report(message)

    def warning(self, message: str) -> None:
        self.report(f"WARNING: {message}")

    def exception(self, action: str, exc: BaseException) -> None:
        """Report a failed GUI action as ``ERROR: <action>: <repr(exc)>``."""
        self.report(f"ERROR: {action}: {exc!r}")

    def clear(self) -> None:
        self._entries.clear()
        self._render()

    def _render(self) -> None:
        inner = "".join(e.html_row() for e in self._entries) or "<div style='color:#666;'>Log is empty.</div>"
        self.widget.value = (
            f"<div style='border:1px solid #ddd; padding:8px; height:{self._height_px}px; "
            f"overflow-y:auto; background:#fff;'>{inner}</div>"
        )
