"""Drawing surfaces, viewport and frame scheduling for the hero backdrop.

The starfield never talks to a real display. It draws through the small
``Surface`` interface and asks a scheduler for the next frame, so the same
loop can run headless in tests (``RecordingSurface`` + ``ManualFrameScheduler``)
or be baked into an SVG image (``SvgSurface``) for the page.
"""

from __future__ import annotations

import itertools
from typing import Callable, Dict, List, Optional, Protocol, Tuple

RGB = Tuple[int, int, int]

# Background gradients behind the star field (start, middle, end).
BACKGROUNDS = {
    True: ("#0f172a", "#1e293b", "#0f172a"),
    False: ("#1e3a8a", "#3b82f6", "#1e40af"),
}


class Surface(Protocol):
    width: int
    height: int

    def clear(self) -> None: ...

    def fill_circle(self, x: float, y: float, radius: float, color: str, alpha: float) -> None: ...

    def stroke_gradient_line(
        self,
        x0: float,
        y0: float,
        x1: float,
        y1: float,
        rgb: RGB,
        alpha: float,
        width: float,
    ) -> None: ...


class RecordingSurface:
    """Keeps the draw calls of the current frame as plain tuples."""

    def __init__(self, width: int = 0, height: int = 0):
        self.width = width
        self.height = height
        self.ops: List[tuple] = []
        self.clears = 0

    def clear(self) -> None:
        self.ops = []
        self.clears += 1

    def fill_circle(self, x, y, radius, color, alpha):
        self.ops.append(("circle", x, y, radius, color, alpha))

    def stroke_gradient_line(self, x0, y0, x1, y1, rgb, alpha, width):
        self.ops.append(("line", x0, y0, x1, y1, rgb, alpha, width))

    def circles(self) -> List[tuple]:
        return [op for op in self.ops if op[0] == "circle"]

    def lines(self) -> List[tuple]:
        return [op for op in self.ops if op[0] == "line"]


class SvgSurface:
    """Accumulates one frame as SVG elements."""

    def __init__(self, width: int = 0, height: int = 0, dark: bool = True):
        self.width = width
        self.height = height
        self.dark = dark
        self._elements: List[str] = []
        self._gradients: List[str] = []

    def clear(self) -> None:
        self._elements = []
        self._gradients = []

    def fill_circle(self, x, y, radius, color, alpha):
        self._elements.append(
            f'<circle cx="{x:.2f}" cy="{y:.2f}" r="{radius:.2f}" '
            f'fill="{color}" fill-opacity="{alpha:.3f}"/>'
        )

    def stroke_gradient_line(self, x0, y0, x1, y1, rgb, alpha, width):
        gid = f"streak{len(self._gradients)}"
        r, g, b = rgb
        self._gradients.append(
            f'<linearGradient id="{gid}" gradientUnits="userSpaceOnUse" '
            f'x1="{x0:.2f}" y1="{y0:.2f}" x2="{x1:.2f}" y2="{y1:.2f}">'
            f'<stop offset="0" stop-color="rgb({r},{g},{b})" stop-opacity="0"/>'
            f'<stop offset="1" stop-color="rgb({r},{g},{b})" stop-opacity="1"/>'
            f"</linearGradient>"
        )
        self._elements.append(
            f'<line x1="{x0:.2f}" y1="{y0:.2f}" x2="{x1:.2f}" y2="{y1:.2f}" '
            f'stroke="url(#{gid})" stroke-width="{width:g}" stroke-linecap="round" '
            f'stroke-opacity="{alpha:.3f}"/>'
        )

    def to_svg(self) -> str:
        start, middle, end = BACKGROUNDS[bool(self.dark)]
        defs = (
            '<linearGradient id="bg" x1="0" y1="0" x2="1" y2="1">'
            f'<stop offset="0%" stop-color="{start}"/>'
            f'<stop offset="50%" stop-color="{middle}"/>'
            f'<stop offset="100%" stop-color="{end}"/>'
            "</linearGradient>" + "".join(self._gradients)
        )
        return (
            f'<svg xmlns="http://www.w3.org/2000/svg" width="{self.width}" '
            f'height="{self.height}" viewBox="0 0 {self.width} {self.height}">'
            f"<defs>{defs}</defs>"
            f'<rect width="100%" height="100%" fill="url(#bg)"/>'
            + "".join(self._elements)
            + "</svg>"
        )


class Viewport:
    """Window-sized area that hands out a drawing surface.

    ``surface=None`` models an environment with no 2D context (headless
    rendering, unsupported browser); ``get_context`` then returns ``None``.
    """

    def __init__(self, width: int, height: int, surface: Optional[Surface] = None):
        self.width = width
        self.height = height
        self._surface = surface
        self._listeners: List[Callable[[], None]] = []

    def get_context(self) -> Optional[Surface]:
        return self._surface

    def add_resize_listener(self, fn: Callable[[], None]) -> None:
        self._listeners.append(fn)

    def remove_resize_listener(self, fn: Callable[[], None]) -> None:
        if fn in self._listeners:
            self._listeners.remove(fn)

    @property
    def listener_count(self) -> int:
        return len(self._listeners)

    def resize(self, width: int, height: int) -> None:
        self.width = width
        self.height = height
        for fn in list(self._listeners):
            fn()


class ManualFrameScheduler:
    """Frame scheduler driven by explicit ``tick()`` calls.

    A callback requested during a tick runs on the *next* tick, the same
    way a display refresh callback does.
    """

    def __init__(self):
        self._ids = itertools.count(1)
        self._pending: Dict[int, Callable[[], None]] = {}

    def request_frame(self, callback: Callable[[], None]) -> int:
        handle = next(self._ids)
        self._pending[handle] = callback
        return handle

    def cancel_frame(self, handle: Optional[int]) -> None:
        if handle is not None:
            self._pending.pop(handle, None)

    @property
    def pending(self) -> int:
        return len(self._pending)

    def tick(self) -> int:
        """Run every callback queued before this refresh; return how many ran."""
        due, self._pending = self._pending, {}
        for callback in due.values():
            callback()
        return len(due)

    def run(self, frames: int) -> None:
        for _ in range(frames):
            if not self.tick():
                break
