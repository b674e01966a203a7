import pytest

from routemap.models.stop import Stop
from routemap.models.session_state import SessionState


class FixedGenerator:
    """Hands out the same stop layout on every call and counts the calls."""

    def __init__(self, stops):
        self.stops = list(stops)
        self.calls = 0

    def generate(self, count=None):
        self.calls += 1
        return list(self.stops)


@pytest.fixture
def line_stops():
    # Stops on the x axis: A=1, B=5, C=2
    return [
        Stop(id=1, name="Stop 1", lat=1.0, lng=0.0),
        Stop(id=2, name="Stop 2", lat=5.0, lng=0.0),
        Stop(id=3, name="Stop 3", lat=2.0, lng=0.0),
    ]


@pytest.fixture
def session(line_stops):
    return SessionState(FixedGenerator(line_stops), stop_count=len(line_stops))
