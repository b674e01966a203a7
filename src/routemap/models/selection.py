"""
Multi-select and recolor of stops.

Selection survives leaving select mode; only apply() (or the session
regenerating its stops) empties it.
"""
from typing import FrozenSet, List, Sequence, Set, Union
import logging

from ..config import DEFAULT_ACTIVE_COLOR
from .stop import Color, Stop

logger = logging.getLogger(__name__)


class ColorSelection:
    def __init__(self, active_color: Union[str, Color] = DEFAULT_ACTIVE_COLOR):
        self.active_color = Color.parse(active_color)
        self.select_mode = False
        self._selected: Set[int] = set()

    @property
    def selected_ids(self) -> FrozenSet[int]:
        return frozenset(self._selected)

    def is_selected(self, stop_id: int) -> bool:
        return stop_id in self._selected

    def toggle_select_mode(self) -> bool:
        self.select_mode = not self.select_mode
        logger.debug(f"Select mode {'on' if self.select_mode else 'off'}")
        return self.select_mode

    def toggle(self, stop_id: int) -> bool:
        """Flip membership of stop_id, returns True if it is now selected"""
        if stop_id in self._selected:
            self._selected.discard(stop_id)
            return False
        self._selected.add(stop_id)
        return True

    def set_active_color(self, color: Union[str, Color]) -> Color:
        self.active_color = Color.parse(color)
        return self.active_color

    def apply(self, stops: Sequence[Stop]) -> List[Stop]:
        """
        Recolor every selected stop with the active color and clear the selection.
        Returns a new list; stops outside the selection are passed through untouched.
        """
        recolored = [
            stop.with_color(self.active_color) if stop.id in self._selected else stop
            for stop in stops
        ]
        logger.debug(f"Applied {self.active_color.value} to {len(self._selected)} selected stops")
        self._selected = set()
        return recolored

    def clear(self) -> None:
        self._selected = set()
