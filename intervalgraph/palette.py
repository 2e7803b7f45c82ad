# intervalgraph/palette.py
from __future__ import annotations

from typing import Any, List, Optional, Sequence, Tuple

from .errors import PaletteError

ColorStop = Tuple[float, Any]

DEFAULT_COLORS: Tuple[ColorStop, ...] = (
    (0, "#ff5450"),
    (0, "#ff5450"),
    (50, "#ff9431"),
    (100, "#d7e174"),
    (100, "#5cb781"),
    (100, "#557ebf"),
)

DEFAULT_BG_COLOR = "#e1e0eb"


class Palette:
    """Percent ranges -> color references.

    Stops are (upper threshold, color), kept in ascending order:
      - the first stop colors every lower value
      - the last stop colors every higher value
      - a threshold listed twice in a row colors exactly that value
    None maps to the background color.
    """

    def __init__(self, colors: Optional[Sequence[ColorStop]] = None, bg_color: Any = DEFAULT_BG_COLOR) -> None:
        self._colors: List[ColorStop] = []
        self.set_colors(DEFAULT_COLORS if colors is None else colors)
        self.bg_color = bg_color

    @property
    def colors(self) -> Tuple[ColorStop, ...]:
        return tuple(self._colors)

    def set_colors(self, colors: Sequence[ColorStop]) -> "Palette":
        stops = [(t, c) for t, c in colors]
        if not stops:
            raise ValueError("palette needs at least one color stop")
        # Stable: equal thresholds keep their given order.
        self._colors = sorted(stops, key=lambda s: s[0])
        return self

    def set_bg_color(self, color: Any) -> "Palette":
        self.bg_color = color
        return self

    def get_color(self, percent: Optional[float] = None) -> Any:
        if percent is None:
            return self.bg_color if self.bg_color is not None else ""
        stops = self._colors
        last = len(stops) - 1
        for i, (threshold, color) in enumerate(stops):
            if i == 0 and percent < threshold:
                return color
            if i > 0 and threshold == stops[i - 1][0] and percent == threshold:
                return color
            if i > 0 and threshold != stops[i - 1][0] and percent < threshold:
                return color
            if i == last and percent > threshold:
                return color
        raise PaletteError(f"The percentage {percent} did not match any range in the color palette.")

    __call__ = get_color

    def __repr__(self) -> str:
        return f"Palette(colors={self._colors!r}, bg_color={self.bg_color!r})"


__all__ = [
    "DEFAULT_BG_COLOR",
    "DEFAULT_COLORS",
    "Palette",
]
