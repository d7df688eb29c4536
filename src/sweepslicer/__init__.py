# -*- coding: utf-8 -*-
"""
sweepslicer
===========

Plane-sweep slicer for triangle meshes.

Reads an ASCII STL mesh and cuts it with evenly spaced horizontal planes,
producing unordered line segments per slice.

Usage Example:
    from sweepslicer import Slicer, parse_file

    mesh = parse_file("part.stl", progress=False)
    for seg in Slicer(mesh).iter_segments(z_min=0.0, z_max=10.0, slice_count=50):
        print(seg.as_tuple())
"""

__version__ = "1.0.0"
__license__ = "MIT"

from .exceptions import MalformedMeshError, SweepSlicerError, UnknownEventKindError
from .file_parser import MeshData, parse_ascii_stl, parse_file, read_stl
from .slicer import Segment, SliceConfig, Slicer

__all__ = [
    "MalformedMeshError",
    "MeshData",
    "Segment",
    "SliceConfig",
    "Slicer",
    "SweepSlicerError",
    "UnknownEventKindError",
    "parse_ascii_stl",
    "parse_file",
    "read_stl",
]
