# -*- coding: utf-8 -*-
from dataclasses import dataclass, field
from typing import Dict, Tuple

import numpy as np

from ..exceptions import MalformedMeshError
from .config import FLOAT_DTYPE, INDEX_DTYPE


@dataclass
class MeshData:
    """
    Indexed triangle mesh consumed by the slicer.

    Attributes:
        vertices: (V, 3) float32 numpy array of vertex coordinates; z is the sweep axis.
        triangles: (F, 3) int64 numpy array of vertex indices, one row per facet.
        name: Solid name taken from the file header (may be empty).

    Every index in ``triangles`` must name a row of ``vertices``. Duplicate
    vertex coordinates are tolerated but the parser removes them.
    """

    vertices: np.ndarray
    triangles: np.ndarray
    name: str = field(default="")

    def __post_init__(self):
        # Ensure types are correct
        self.vertices = np.asarray(self.vertices, dtype=FLOAT_DTYPE)
        self.triangles = np.asarray(self.triangles, dtype=INDEX_DTYPE)
        if self.vertices.size == 0:
            self.vertices = self.vertices.reshape(0, 3)
        if self.triangles.size == 0:
            self.triangles = self.triangles.reshape(0, 3)
        self._validate()

    def _validate(self) -> None:
        if self.vertices.ndim != 2 or self.vertices.shape[1] != 3:
            raise MalformedMeshError(f"vertices must have shape (V, 3), got {self.vertices.shape}")
        if self.triangles.ndim != 2 or self.triangles.shape[1] != 3:
            raise MalformedMeshError(f"triangles must have shape (F, 3), got {self.triangles.shape}")
        if not np.all(np.isfinite(self.vertices)):
            raise MalformedMeshError("vertices contain non-finite coordinates")
        if self.triangles.size:
            lo = int(self.triangles.min())
            hi = int(self.triangles.max())
            if lo < 0 or hi >= len(self.vertices):
                raise MalformedMeshError(
                    f"facet index out of range [0, {len(self.vertices)}): min={lo}, max={hi}"
                )

    @classmethod
    def from_triangle_soup(cls, points, name: str = "") -> "MeshData":
        """Build a deduplicated indexed mesh from an (F, 3, 3) array of corner coordinates.

        Vertices keep first-seen order, so the result matches what the STL parser
        produces for the same facets.
        """
        soup = np.asarray(points, dtype=FLOAT_DTYPE)
        if soup.size == 0:
            return cls(vertices=np.empty((0, 3)), triangles=np.empty((0, 3)), name=name)
        if soup.ndim != 3 or soup.shape[1:] != (3, 3):
            raise MalformedMeshError(f"triangle soup must have shape (F, 3, 3), got {soup.shape}")

        vertex_map: Dict[Tuple[float, float, float], int] = {}
        vertices = []
        triangles = []
        for corners in soup:
            tri = []
            for v in corners:
                key = tuple(v.tolist())
                if key not in vertex_map:
                    vertex_map[key] = len(vertices)
                    vertices.append(key)
                tri.append(vertex_map[key])
            triangles.append(tri)
        return cls(vertices=vertices, triangles=triangles, name=name)

    @property
    def vertex_count(self) -> int:
        return len(self.vertices)

    @property
    def facet_count(self) -> int:
        return len(self.triangles)

    def z_range(self) -> Tuple[float, float]:
        """Returns (z_min, z_max) over all vertices."""
        if self.vertex_count == 0:
            raise MalformedMeshError("mesh has no vertices")
        z = self.vertices[:, 2]
        return float(z.min()), float(z.max())

    def __repr__(self):
        return (f"MeshData(name={self.name!r}, "
                f"vertices_shape={self.vertices.shape}, "
                f"triangles_shape={self.triangles.shape})")
