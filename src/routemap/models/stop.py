from __future__ import annotations

from dataclasses import dataclass, replace
from enum import Enum
from typing import Optional, Tuple, Union

from ..config import DEFAULT_CATEGORY

LatLng = Tuple[float, float]


class Color(str, Enum):
    """Closed marker palette. WHITE marks an unassigned stop."""
    WHITE = "white"
    RED = "red"
    BLUE = "blue"
    GREEN = "green"
    YELLOW = "yellow"
    PURPLE = "purple"

    @classmethod
    def parse(cls, value: Union[str, "Color"]) -> "Color":
        if isinstance(value, cls):
            return value
        try:
            return cls(str(value).strip().lower())
        except ValueError:
            palette = ", ".join(c.value for c in cls)
            raise ValueError(f"Unknown color {value!r}, expected one of: {palette}")

    @property
    def legend(self) -> Optional[str]:
        return CATEGORY_LEGEND.get(self)


DEFAULT_COLOR = Color.WHITE

CATEGORY_LEGEND = {
    Color.RED: "Pickup",
    Color.BLUE: "Call-In",
    Color.YELLOW: "Bulk Stop",
    Color.GREEN: "Business",
}


@dataclass(frozen=True)
class Stop:
    """
    A delivery stop on the demo map.
    label is the 1-based route position, only set once the stops are sorted.
    """
    id: int
    name: str
    lat: float
    lng: float
    category: str = DEFAULT_CATEGORY
    color: Color = DEFAULT_COLOR
    label: Optional[int] = None

    def __post_init__(self):
        object.__setattr__(self, "color", Color.parse(self.color))

    @property
    def position(self) -> LatLng:
        return (self.lat, self.lng)

    def with_color(self, color: Color) -> Stop:
        return replace(self, color=Color.parse(color))

    def with_label(self, label: Optional[int]) -> Stop:
        return replace(self, label=label)

    @property
    def display_name(self) -> str:
        return f"Stop {self.label}" if self.label else self.name
