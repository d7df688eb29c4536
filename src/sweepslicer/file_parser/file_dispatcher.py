# -*- coding: utf-8 -*-
"""
File Dispatcher
Single entry point for mesh ingest; picks the parser from the file suffix.

Main interfaces:
- parse_file: generic entry, returns MeshData

Dependencies:
- stdlib: pathlib, typing
- local modules: stl_parser.read_stl
"""

from pathlib import Path
from typing import Any, Union

from .mesh_data import MeshData
from .stl_parser import read_stl


def parse_file(file_path: Union[str, Path], **kwargs: Any) -> MeshData:
    """Dispatch file parsing based on file suffix and return MeshData.

    Args:
        file_path: File path, str or Path.
        **kwargs: Passed through to the concrete parser, e.g. progress.

    Returns:
        MeshData: The parsed indexed mesh.

    Raises:
        FileNotFoundError: When the file does not exist.
        ValueError: When the file type is not supported.

    Examples:
        >>> from sweepslicer.file_parser import parse_file
        >>> mesh = parse_file("part.stl", progress=False)
        >>> assert mesh.facet_count >= 0
    """
    path = Path(file_path)
    if not path.exists():
        raise FileNotFoundError(f"File not found: {file_path}")

    suffix = path.suffix.lower()
    if suffix == ".stl":
        return read_stl(path, **kwargs)
    raise ValueError(f"Unsupported file format: {suffix}. Only ASCII .stl is supported.")
