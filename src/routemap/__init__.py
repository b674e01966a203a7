"""Courier route map demo: synthetic stops, nearest-neighbor ordering and color coding."""
from .models import Color, ColorSelection, RouteOptimizer, SessionState, Stop
from .utils import MapVisualizer, StopGenerator

__version__ = "0.1.0"

__all__ = [
    "Color",
    "ColorSelection",
    "RouteOptimizer",
    "SessionState",
    "Stop",
    "MapVisualizer",
    "StopGenerator",
]
