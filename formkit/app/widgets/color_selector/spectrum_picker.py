from __future__ import annotations

import re
from typing import Callable, List, Optional, Sequence, Union

Color = Union[str, Sequence[int], None]
MoveHandler = Callable[[Optional[str]], None]

_HEX_RE = re.compile(r"^#?([0-9a-fA-F]{3}|[0-9a-fA-F]{6})$")


def to_hex_string(color: Color) -> Optional[str]:
    """Converts a color to ``#rrggbb``.

    Accepts ``#rgb``, ``#rrggbb`` (with or without ``#``) and ``[r, g, b]``.
    Empty values are returned as ``None``.

    :raises ValueError: if the color can not be parsed
    """
    if color is None or color == "":
        return None
    if isinstance(color, str):
        match = _HEX_RE.match(color.strip())
        if match is None:
            raise ValueError(f"Incorrect color format: {color}, hex color is expected")
        digits = match.group(1).lower()
        if len(digits) == 3:
            digits = "".join(c * 2 for c in digits)
        return f"#{digits}"
    if isinstance(color, (list, tuple)) and len(color) == 3:
        if all(isinstance(c, int) and 0 <= c <= 255 for c in color):
            return "#{:02x}{:02x}{:02x}".format(*color)
    raise ValueError(f"Incorrect color format: {color}, [r, g, b] with values in [0, 255] is expected")


class SpectrumPicker:
    """Handle of an inline (flat) color picker.

    ``move`` handlers are called on every live change of the color, with the
    hex string of the new color or ``None`` when the color was cleared.
    :meth:`set` changes the color without calling them. An inline picker does
    not write its color back to the owning field, the owner has to do it.
    """

    EVENTS = ("move",)

    def __init__(self, color: Color = None, on_reflow: Optional[Callable[[], None]] = None):
        self._color = to_hex_string(color)
        self._move_handlers: List[MoveHandler] = []
        self._on_reflow = on_reflow

    def on(self, event: str, handler: MoveHandler) -> None:
        self._check_event(event)
        if handler not in self._move_handlers:
            self._move_handlers.append(handler)

    def off(self, event: str, handler: MoveHandler) -> None:
        self._check_event(event)
        if handler in self._move_handlers:
            self._move_handlers.remove(handler)

    def move(self, color: Color) -> None:
        self._color = to_hex_string(color)
        for handler in list(self._move_handlers):
            handler(self._color)

    def get(self) -> Optional[str]:
        return self._color

    def set(self, color: Color) -> None:
        self._color = to_hex_string(color)

    def reflow(self) -> None:
        if self._on_reflow is not None:
            self._on_reflow()

    def _check_event(self, event: str) -> None:
        if event not in SpectrumPicker.EVENTS:
            raise ValueError(f"Unknown picker event: {event}, possible events: {SpectrumPicker.EVENTS}")
