# -*- coding: utf-8 -*-
"""
Segment Writers
===============

Text output for slice segments.

- ``xyz``: two lines ``x y z`` per segment, segments abut directly.
- ``csv``: one row per segment via a pandas DataFrame
  (columns x1, y1, z, x2, y2, facet, parity).
"""

from typing import Iterable, Optional, TextIO

import pandas as pd

from .segment import Segment

SEGMENT_COLUMNS = ["x1", "y1", "z", "x2", "y2", "facet", "parity"]
OUTPUT_FORMATS = ("xyz", "csv")


def write_xyz(segments: Iterable[Segment], stream: TextIO, float_format: str = "g") -> int:
    """Write segments as endpoint lines and return how many were written.

    The default ``g`` format prints six significant digits.
    """
    count = 0
    for seg in segments:
        x1, y1, z, x2, y2 = (format(v, float_format) for v in (seg.x1, seg.y1, seg.z, seg.x2, seg.y2))
        stream.write(f"{x1} {y1} {z}\n{x2} {y2} {z}\n")
        count += 1
    return count


def segments_to_frame(segments: Iterable[Segment]) -> pd.DataFrame:
    """Collect segments into a DataFrame, one row per segment."""
    rows = [
        (seg.x1, seg.y1, seg.z, seg.x2, seg.y2, int(seg.facet_id), seg.parity.name)
        for seg in segments
    ]
    return pd.DataFrame(rows, columns=SEGMENT_COLUMNS)


def write_csv(segments: Iterable[Segment], stream: TextIO, float_format: Optional[str] = None) -> int:
    df = segments_to_frame(segments)
    df.to_csv(stream, index=False, float_format=float_format)
    return len(df)


def write_segments(segments: Iterable[Segment], stream: TextIO, fmt: str = "xyz") -> int:
    """Dispatch on output format.

    Raises:
        ValueError: Unknown format name.
    """
    if fmt == "xyz":
        return write_xyz(segments, stream)
    if fmt == "csv":
        return write_csv(segments, stream)
    raise ValueError(f"Unsupported output format: {fmt}. Choose one of {', '.join(OUTPUT_FORMATS)}.")
