"""
Single owner of the demo's mutable state.

Presentation code reads stops/start point/selection through the properties
below and requests every change through the event methods. Each event runs to
completion before the next one is handled.
"""
from typing import Dict, FrozenSet, Optional, Sequence, Tuple, Union
import logging
import math

from ..config import DEFAULT_STOP_COUNT
from .route_optimizer import sequence_stops
from .selection import ColorSelection
from .stop import Color, LatLng, Stop

logger = logging.getLogger(__name__)


def _to_latlng(position) -> LatLng:
    try:
        lat, lng = position
        lat, lng = float(lat), float(lng)
    except (TypeError, ValueError):
        raise ValueError(f"Start point must be a (lat, lng) pair, got {position!r}")
    if not (math.isfinite(lat) and math.isfinite(lng)):
        raise ValueError(f"Start point coordinates must be finite, got {position!r}")
    return lat, lng


class SessionState:
    def __init__(self, generator=None, stop_count: int = DEFAULT_STOP_COUNT):
        if generator is None:
            from ..utils.stop_generator import StopGenerator
            generator = StopGenerator()
        self.generator = generator
        self.stop_count = stop_count
        self._stops: Tuple[Stop, ...] = tuple(self.generator.generate(stop_count))
        self._start_point: Optional[LatLng] = None
        self._drop_pending = False
        self._selection = ColorSelection()

    # Outbound state

    @property
    def stops(self) -> Tuple[Stop, ...]:
        return self._stops

    @property
    def start_point(self) -> Optional[LatLng]:
        return self._start_point

    @property
    def drop_pending(self) -> bool:
        return self._drop_pending

    @property
    def select_mode(self) -> bool:
        return self._selection.select_mode

    @property
    def selected_ids(self) -> FrozenSet[int]:
        return self._selection.selected_ids

    @property
    def active_color(self) -> Color:
        return self._selection.active_color

    @property
    def is_sorted(self) -> bool:
        return bool(self._stops) and all(stop.label is not None for stop in self._stops)

    def get_stop(self, stop_id: int) -> Optional[Stop]:
        for stop in self._stops:
            if stop.id == stop_id:
                return stop
        return None

    def snapshot(self) -> Dict:
        return {
            "stops": self._stops,
            "start_point": self._start_point,
            "selected_ids": self.selected_ids,
            "active_color": self.active_color,
            "drop_pending": self._drop_pending,
            "select_mode": self.select_mode,
        }

    # Start point

    def enter_drop_mode(self) -> None:
        self._drop_pending = True
        logger.debug("Waiting for a map click to place the start point")

    def drop_start(self, position: Sequence[float]) -> bool:
        """Place the start point if a drop is pending. Returns False (no-op) otherwise."""
        if not self._drop_pending:
            logger.debug("Map click ignored, not in drop mode")
            return False
        self._start_point = _to_latlng(position)
        self._drop_pending = False
        logger.info(f"Start point set to {self._start_point[0]:.5f}, {self._start_point[1]:.5f}")
        return True

    # Sequencing

    def sort_by_distance(self) -> bool:
        if self._start_point is None:
            logger.info("Sort requested without a start point, nothing to do")
            return False
        self._stops = tuple(sequence_stops(self._stops, self._start_point))
        logger.info(f"Sorted {len(self._stops)} stops by distance from start")
        return True

    def regenerate(self) -> None:
        """
        Replace the stops with a fresh layout.
        Start point, pending drop, selection and select mode are all reset.
        """
        self._stops = tuple(self.generator.generate(self.stop_count))
        self._start_point = None
        self._drop_pending = False
        self._selection.clear()
        self._selection.select_mode = False
        logger.info(f"Regenerated {len(self._stops)} stops")

    # Selection / coloring

    def toggle_select_mode(self) -> bool:
        return self._selection.toggle_select_mode()

    def toggle_select(self, stop_id: int) -> bool:
        return self._selection.toggle(stop_id)

    def set_active_color(self, color: Union[str, Color]) -> Color:
        return self._selection.set_active_color(color)

    def apply_color(self) -> int:
        """Recolor the selected stops, returns how many were recolored"""
        count = sum(1 for stop in self._stops if self._selection.is_selected(stop.id))
        self._stops = tuple(self._selection.apply(self._stops))
        return count

    # Inbound events from the presentation surface

    def request_drop_mode(self) -> None:
        self.enter_drop_mode()

    def map_clicked(self, position: Sequence[float]) -> bool:
        return self.drop_start(position)

    def request_sort(self) -> bool:
        return self.sort_by_distance()

    def request_regenerate(self) -> None:
        self.regenerate()

    def stop_clicked(self, stop_id: int) -> bool:
        """Toggle a stop's selection while select mode is on. Returns True if the selection changed."""
        if not self.select_mode:
            return False
        if self.get_stop(stop_id) is None:
            logger.warning(f"Ignoring click on unknown stop id {stop_id}")
            return False
        self._selection.toggle(stop_id)
        return True
