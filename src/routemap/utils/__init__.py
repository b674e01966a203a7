from .stop_generator import StopGenerator
from .map_visualizer import MapVisualizer
from .route_summary import create_route_summary, format_route_summary

__all__ = [
    "StopGenerator",
    "MapVisualizer",
    "create_route_summary",
    "format_route_summary",
]
