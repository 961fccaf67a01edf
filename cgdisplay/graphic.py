"""Colours, pens, painters and the common base of drawable objects."""

from __future__ import annotations

import string
from dataclasses import dataclass
from typing import Any, Protocol, runtime_checkable

_NAMED_COLORS: dict[str, tuple[int, int, int, int]] = {
    "black": (0, 0, 0, 255),
    "white": (255, 255, 255, 255),
    "red": (255, 0, 0, 255),
    "green": (0, 128, 0, 255),
    "blue": (0, 0, 255, 255),
    "yellow": (255, 255, 0, 255),
    "cyan": (0, 255, 255, 255),
    "magenta": (255, 0, 255, 255),
    "gray": (128, 128, 128, 255),
    "grey": (128, 128, 128, 255),
    "transparent": (0, 0, 0, 0),
}


def _parse_color(value: Any) -> tuple[int, int, int, int] | None:
    if isinstance(value, str):
        if not value.startswith("#"):
            return _NAMED_COLORS.get(value.lower())
        digits = value[1:]
        if not digits or any(c not in string.hexdigits for c in digits):
            return None
        if len(digits) == 3:
            r, g, b = (int(c * 2, 16) for c in digits)
            return r, g, b, 255
        if len(digits) == 6:
            r, g, b = (int(digits[i:i + 2], 16) for i in (0, 2, 4))
            return r, g, b, 255
        if len(digits) == 8:
            a, r, g, b = (int(digits[i:i + 2], 16) for i in (0, 2, 4, 6))
            return r, g, b, a
        return None
    if isinstance(value, (tuple, list)) and len(value) in (3, 4):
        if all(isinstance(c, int) and not isinstance(c, bool) and 0 <= c <= 255 for c in value):
            r, g, b, *rest = value
            return r, g, b, rest[0] if rest else 255
    return None


def is_valid_color(value: Any) -> bool:
    """Tell whether ``value`` names a colour: ``#rgb``, ``#rrggbb``, ``#aarrggbb``, a name or an RGB(A) tuple."""
    return _parse_color(value) is not None


def color_name(value: Any) -> str:
    """Return the colour as ``#rrggbb`` in lower case, alpha dropped."""
    rgba = _parse_color(value)
    if rgba is None:
        raise ValueError(f"invalid colour: {value!r}")
    r, g, b, _ = rgba
    return f"#{r:02x}{g:02x}{b:02x}"


def _format_number(value: float) -> str:
    return f"{value:g}"


@dataclass(frozen=True)
class Pen:
    """Stroke colour and integer line width."""

    color: Any
    width: int = 1


@runtime_checkable
class Painter(Protocol):
    """The drawing surface objects render onto."""

    def set_pen(self, pen: Pen) -> None:
        """Use ``pen`` for the following strokes."""

    def draw_point(self, x: float, y: float) -> None:
        """Plot a single point."""

    def draw_line(self, x1: float, y1: float, x2: float, y2: float) -> None:
        """Draw a straight segment."""


class RecordingPainter:
    """A painter that keeps every stroke it is asked to draw."""

    def __init__(self) -> None:
        self.pen: Pen | None = None
        self.operations: list[tuple] = []

    def set_pen(self, pen: Pen) -> None:
        self.pen = pen

    def draw_point(self, x: float, y: float) -> None:
        self.operations.append(("point", self.pen, x, y))

    def draw_line(self, x1: float, y1: float, x2: float, y2: float) -> None:
        self.operations.append(("line", self.pen, x1, y1, x2, y2))


class GraphicObject:
    """Common state of everything kept in the display file."""

    def __init__(self, color: Any = "black") -> None:
        self.color = color
        self.size = 1.0
        self.radius = 1.0
        self.model_transformed = False
        self.viewport_transformed = False

    def mark_model_transformed(self) -> None:
        self.model_transformed = True

    def reset_model_transformed(self) -> None:
        self.model_transformed = False

    def mark_viewport_transformed(self) -> None:
        self.viewport_transformed = True

    def reset_viewport_transformed(self) -> None:
        self.viewport_transformed = False

    def pen(self) -> Pen:
        return Pen(self.color, int(self.size))

    def draw(self, painter: Painter) -> None:
        """Select this object's pen; subclasses then draw their geometry."""
        painter.set_pen(self.pen())