from typing import NamedTuple, Tuple

from ..geometry_kernel.static_class import Parity


class Segment(NamedTuple):
    """One cut of a wedge by a slicing plane. Both endpoints share ``z``."""
    x1: float
    y1: float
    z: float
    x2: float
    y2: float
    facet_id: int
    parity: Parity

    @property
    def start(self) -> Tuple[float, float, float]:
        return self.x1, self.y1, self.z

    @property
    def end(self) -> Tuple[float, float, float]:
        return self.x2, self.y2, self.z

    @property
    def midpoint(self) -> Tuple[float, float, float]:
        return (self.x1 + self.x2) / 2.0, (self.y1 + self.y2) / 2.0, self.z

    def as_tuple(self) -> Tuple[float, float, float, float, float, float]:
        """(x1, y1, z, x2, y2, z)"""
        return self.x1, self.y1, self.z, self.x2, self.y2, self.z
