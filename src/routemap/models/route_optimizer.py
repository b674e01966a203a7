import math
from typing import List, Optional, Sequence, Tuple, Union
import logging

from .stop import LatLng, Stop

logger = logging.getLogger(__name__)

Point = Union[Stop, Tuple[float, float]]


def _coords(point: Point) -> LatLng:
    if isinstance(point, Stop):
        return point.position
    lat, lng = point
    return float(lat), float(lng)


def squared_distance(a: Point, b: Point) -> float:
    """
    Squared straight-line distance in lat/lng space.
    Only used to compare candidates, so no geodesic correction and no square root.
    """
    lat1, lng1 = _coords(a)
    lat2, lng2 = _coords(b)
    return (lat1 - lat2) ** 2 + (lng1 - lng2) ** 2


def route_length(stops: Sequence[Stop], start: Optional[LatLng]) -> float:
    """Sum of leg lengths (degrees) from start through stops in their current order"""
    if start is None or not stops:
        return 0.0
    total = 0.0
    current = start
    for stop in stops:
        total += math.sqrt(squared_distance(current, stop))
        current = stop.position
    return total


class RouteOptimizer:
    def __init__(self, stops: Sequence[Stop], start: Optional[LatLng]):
        self.stops = list(stops)
        self.start = start
        self.unvisited: List[Stop] = []
        self.current_location: Optional[LatLng] = start

    def find_nearest_point(self) -> Stop:
        if not self.unvisited:
            raise ValueError("No unvisited points found")

        # strict < keeps the first stop in pool order on ties
        nearest = self.unvisited[0]
        min_distance = squared_distance(nearest, self.current_location)

        for stop in self.unvisited[1:]:
            distance = squared_distance(stop, self.current_location)
            if distance < min_distance:
                min_distance = distance
                nearest = stop

        return nearest

    def optimize_route(self) -> List[Stop]:
        if self.start is None:
            logger.debug("No start point set, keeping stop order")
            return self.stops

        self.unvisited = list(self.stops)
        self.current_location = self.start
        route = []

        while self.unvisited:
            nearest = self.find_nearest_point()
            self.unvisited.remove(nearest)
            route.append(nearest.with_label(len(route) + 1))
            self.current_location = nearest.position

        logger.debug(f"Sequenced {len(route)} stops, route length {route_length(route, self.start):.4f} deg")
        return route


def sequence_stops(stops: Sequence[Stop], start: Optional[LatLng]) -> List[Stop]:
    return RouteOptimizer(stops, start).optimize_route()
