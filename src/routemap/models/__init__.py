from .stop import CATEGORY_LEGEND, DEFAULT_COLOR, Color, LatLng, Stop
from .route_optimizer import RouteOptimizer, route_length, sequence_stops, squared_distance
from .selection import ColorSelection
from .session_state import SessionState

__all__ = [
    "CATEGORY_LEGEND",
    "DEFAULT_COLOR",
    "Color",
    "LatLng",
    "Stop",
    "RouteOptimizer",
    "route_length",
    "sequence_stops",
    "squared_distance",
    "ColorSelection",
    "SessionState",
]
