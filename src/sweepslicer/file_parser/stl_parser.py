"""STL Parser
Parses ASCII STL (stereolithography) text into the indexed ``MeshData``
structure used by the slicer.

Main interfaces:
- parse_ascii_stl: parse an iterable of text lines
- read_stl: read an ASCII STL file from disk

The file is read by a line-oriented state machine:

    SEEKING_FACET -> SEEKING_LOOP -> SEEKING_VERTEX -> SEEKING_ENDFACET -> SEEKING_FACET ...

terminated by ``endsolid``. Facet normals are not read. Vertices are
deduplicated by exact coordinate value, first-seen order.

Dependencies:
- stdlib: codecs, enum, logging, pathlib, typing
- third party: numpy, tqdm
"""

import codecs
import logging
from enum import Enum
from pathlib import Path
from typing import Dict, Iterable, List, Optional, Sequence, Tuple, Union

import numpy as np
from tqdm import tqdm

from ..exceptions import MalformedMeshError
from .config import PROGRESS_MIN_ITEMS
from .mesh_data import MeshData

logger = logging.getLogger("STLParser")

ASCII_HEADER = "solid"
BINARY_HEADER_SIZE = 84  # 80-byte header + uint32 facet count
BINARY_FACET_SIZE = 50


class ParserState(Enum):
    SEEKING_FACET = 0
    SEEKING_LOOP = 1
    SEEKING_VERTEX = 2
    SEEKING_ENDFACET = 3


def _parse_vertex(line: str, line_number: int) -> Tuple[float, float, float]:
    """Parse a ``vertex x y z`` line into a coordinate tuple."""
    tokens = line.split()
    if len(tokens) != 4:
        raise MalformedMeshError(f"expected 'vertex x y z', got {line!r}", line_number)
    try:
        return float(tokens[1]), float(tokens[2]), float(tokens[3])
    except ValueError:
        raise MalformedMeshError(f"unparsable vertex coordinates in {line!r}", line_number) from None


def parse_ascii_stl(lines: Iterable[str], progress: bool = False) -> MeshData:
    """Parse ASCII STL text into a deduplicated indexed mesh.

    Args:
        lines: Lines of the STL file, with or without trailing newlines.
        progress: Whether to show a progress bar (only for large inputs).

    Returns:
        MeshData: vertex table in first-seen order and one facet per STL facet.

    Raises:
        MalformedMeshError: bad header, unexpected keyword, a loop without exactly
            three vertices, unparsable coordinates, or end of input inside a facet.

    Examples:
        >>> mesh = parse_ascii_stl([
        ...     "solid demo",
        ...     "facet normal 0 0 1", "outer loop",
        ...     "vertex 0 0 0", "vertex 1 0 0", "vertex 0 1 0",
        ...     "endloop", "endfacet",
        ...     "endsolid demo",
        ... ])
        >>> mesh.facet_count
        1
    """
    if isinstance(lines, str):
        lines = lines.splitlines()
    elif not isinstance(lines, Sequence):
        lines = list(lines)
    start = 0
    while start < len(lines) and not lines[start].lstrip("\ufeff").strip():
        start += 1
    if start == len(lines):
        raise MalformedMeshError("empty input, expected an ASCII STL header", 1)

    header = lines[start].lstrip("\ufeff").strip()
    if not header.startswith(ASCII_HEADER):
        raise MalformedMeshError("header malformed or file not in ASCII STL format", start + 1)
    name = header[len(ASCII_HEADER):].strip()

    vertex_indices: Dict[Tuple[float, float, float], int] = {}
    vertices: List[Tuple[float, float, float]] = []
    triangles: List[List[int]] = []
    active_triplet: List[int] = []

    state = ParserState.SEEKING_FACET
    terminated = False
    line_number = start + 1
    it_lines = tqdm(
        lines[start + 1:],
        desc="STL lines",
        unit="line",
        leave=False,
        disable=not progress or len(lines) < PROGRESS_MIN_ITEMS,
    )
    for line_number, raw in enumerate(it_lines, start=start + 2):
        line = raw.strip()
        if not line:
            continue

        if state == ParserState.SEEKING_FACET:
            if line.startswith("endsolid"):
                terminated = True
                break
            if not line.startswith("facet"):
                raise MalformedMeshError(f"expected 'facet', got {line!r}", line_number)
            state = ParserState.SEEKING_LOOP

        elif state == ParserState.SEEKING_LOOP:
            if not line.startswith("outer loop"):
                raise MalformedMeshError(f"expected 'outer loop', got {line!r}", line_number)
            active_triplet = []
            state = ParserState.SEEKING_VERTEX

        elif state == ParserState.SEEKING_VERTEX:
            if line.startswith("vertex"):
                if len(active_triplet) == 3:
                    raise MalformedMeshError("more than three vertices in one loop", line_number)
                key = _parse_vertex(line, line_number)
                if key not in vertex_indices:
                    vertex_indices[key] = len(vertices)
                    vertices.append(key)
                active_triplet.append(vertex_indices[key])
            elif line.startswith("endloop"):
                if len(active_triplet) != 3:
                    raise MalformedMeshError(
                        f"loop closed after {len(active_triplet)} vertices, expected 3", line_number
                    )
                triangles.append(active_triplet)
                state = ParserState.SEEKING_ENDFACET
            else:
                raise MalformedMeshError(f"expected 'vertex' or 'endloop', got {line!r}", line_number)

        elif state == ParserState.SEEKING_ENDFACET:
            if not line.startswith("endfacet"):
                raise MalformedMeshError(f"expected 'endfacet', got {line!r}", line_number)
            state = ParserState.SEEKING_FACET

    if not terminated:
        if state != ParserState.SEEKING_FACET:
            raise MalformedMeshError(f"unexpected end of input while {state.name}", line_number)
        logger.warning(f"ASCII STL ended without 'endsolid' after {line_number} lines")

    logger.info(f"Parsed solid {name!r}: {len(triangles)} facets, {len(vertices)} unique vertices")
    return MeshData(
        vertices=np.asarray(vertices, dtype=float).reshape(-1, 3),
        triangles=np.asarray(triangles, dtype=np.int64).reshape(-1, 3),
        name=name,
    )


def _is_binary_stl(data: bytes) -> bool:
    """Binary if the bytes do not open with 'solid' (BOM and leading whitespace allowed),
    or if their size is exactly 84 + 50 * facet count read from bytes 80..84.
    """
    body = data[len(codecs.BOM_UTF8):] if data.startswith(codecs.BOM_UTF8) else data
    if not body.lstrip().startswith(ASCII_HEADER.encode("ascii")):
        return True
    if len(data) < BINARY_HEADER_SIZE:
        return False
    facet_count = int.from_bytes(data[80:BINARY_HEADER_SIZE], "little")
    return len(data) == BINARY_HEADER_SIZE + BINARY_FACET_SIZE * facet_count


def read_stl(file_path: Union[str, Path], progress: bool = True, encoding: Optional[str] = "utf-8") -> MeshData:
    """Read an ASCII STL file and build its indexed mesh.

    Args:
        file_path: Path to the STL file (str or Path).
        progress: Whether to show a progress bar while parsing large files.
        encoding: Text encoding of the file.

    Returns:
        MeshData: The parsed mesh.

    Raises:
        FileNotFoundError: If the file does not exist.
        MalformedMeshError: If the file is binary STL or not valid ASCII STL.
    """
    path = Path(file_path)
    with open(path, "rb") as f:
        data = f.read()
    if _is_binary_stl(data):
        raise MalformedMeshError(f"{path.name}: header malformed or file not in ASCII STL format (binary STL is not supported)", 1)

    lines = data.decode(encoding or "utf-8", errors="replace").splitlines()
    logger.debug(f"Read {len(lines)} lines from {path}")
    return parse_ascii_stl(lines, progress=progress)
