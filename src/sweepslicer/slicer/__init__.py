# -*- coding: utf-8 -*-

from .config import SliceConfig
from .segment import Segment
from .slicer import Slicer
from .writer import segments_to_frame, write_csv, write_segments, write_xyz

__all__ = [
    "Segment",
    "SliceConfig",
    "Slicer",
    "segments_to_frame",
    "write_csv",
    "write_segments",
    "write_xyz",
]
