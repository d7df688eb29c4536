# -*- coding: utf-8 -*-
"""
Sweep Configuration
===================

Sweep bounds and slice count. The only knobs of the sweep driver are
z_min, z_max and N; everything else is derived.
"""

import math
import numbers
from dataclasses import dataclass
from typing import List

from ..default_config import DEFAULTS

Z_MIN = DEFAULTS["Z_MIN"]
Z_MAX = DEFAULTS["Z_MAX"]
SLICE_COUNT = DEFAULTS["SLICE_COUNT"]
PROGRESS_MIN_ITEMS = DEFAULTS["PROGRESS_MIN_ITEMS"]
OUTPUT_FORMAT = DEFAULTS["OUTPUT_FORMAT"]


@dataclass(frozen=True)
class SliceConfig:
    """
    Attributes:
        z_min: Height of the first slice.
        z_max: Upper sweep bound; never sliced itself.
        slice_count: Number of slices N (N >= 1).
    """
    z_min: float = Z_MIN
    z_max: float = Z_MAX
    slice_count: int = SLICE_COUNT

    def __post_init__(self):
        if isinstance(self.slice_count, bool) or not isinstance(self.slice_count, numbers.Integral):
            raise ValueError(f"slice_count must be an integer, got {self.slice_count!r}")
        if self.slice_count < 1:
            raise ValueError(f"slice_count must be >= 1, got {self.slice_count}")
        if not (math.isfinite(self.z_min) and math.isfinite(self.z_max)):
            raise ValueError(f"sweep bounds must be finite, got [{self.z_min}, {self.z_max}]")
        if self.z_min > self.z_max:
            raise ValueError(f"z_min must not exceed z_max, got [{self.z_min}, {self.z_max}]")

    @property
    def step(self) -> float:
        return (self.z_max - self.z_min) / self.slice_count

    def heights(self) -> List[float]:
        """Slice heights z_min + i * step for i in 0..N-1."""
        step = self.step
        return [self.z_min + i * step for i in range(int(self.slice_count))]
