import numpy as np
from typing import List, Optional, Sequence, Tuple, Union
import logging

from ..config import AREA_CENTERS, DEFAULT_CATEGORY, DEFAULT_STOP_COUNT, STOP_JITTER
from ..models.stop import DEFAULT_COLOR, Stop

logger = logging.getLogger(__name__)


class StopGenerator:
    def __init__(
        self,
        rng: Optional[Union[int, np.random.Generator]] = None,
        area_centers: Sequence[Tuple[float, float]] = AREA_CENTERS,
        jitter: float = STOP_JITTER,
    ):
        if isinstance(rng, np.random.Generator):
            self.rng = rng
        else:
            self.rng = np.random.default_rng(rng)
        if not area_centers:
            raise ValueError("At least one area center is required")
        self.area_centers = list(area_centers)
        self.jitter = jitter

    def generate(self, count: int = DEFAULT_STOP_COUNT) -> List[Stop]:
        """
        Scatter count stops around the area centers.
        Each stop picks a center uniformly and is offset by up to +/- jitter degrees per axis.
        """
        if isinstance(count, bool) or not isinstance(count, (int, np.integer)) or count <= 0:
            raise ValueError(f"Stop count must be a positive integer, got {count!r}")

        stops = []
        for index in range(1, count + 1):
            lat_base, lng_base = self.area_centers[self.rng.integers(len(self.area_centers))]
            stops.append(Stop(
                id=index,
                name=f"Stop {index}",
                lat=float(lat_base + self.rng.uniform(-self.jitter, self.jitter)),
                lng=float(lng_base + self.rng.uniform(-self.jitter, self.jitter)),
                category=DEFAULT_CATEGORY,
                color=DEFAULT_COLOR,
            ))

        logger.debug(f"Generated {len(stops)} stops around {len(self.area_centers)} area centers")
        return stops
