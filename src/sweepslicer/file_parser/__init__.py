# -*- coding: utf-8 -*-
"""
Sweepslicer File Parser Package
===============================

Mesh ingest for the slicer: reads ASCII STL into a deduplicated indexed
vertex / facet table.

Currently supported formats:
- ASCII STL (the binary variant is rejected)

Usage Example:
    from sweepslicer.file_parser import parse_file
    mesh = parse_file("model.stl")
"""

from .mesh_data import MeshData
from .stl_parser import parse_ascii_stl, read_stl
from .file_dispatcher import parse_file

__all__ = [
    "MeshData",
    "parse_ascii_stl",
    "parse_file",
    "read_stl",
]
