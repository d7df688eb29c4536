# -*- coding: utf-8 -*-
"""
Wedge
=====

Triangle classifier for the plane sweep.

Each facet is split at its middle-height vertex into two wedges:

    UPPER   edges (mid -> max) and (min -> max), z in [z_mid, z_max]
    LOWER   edges (min -> max) and (min -> mid), z in [z_min, z_mid]

Inside one wedge every horizontal plane cuts the same two edges, so the
interpolator needs no per-slice case analysis.
"""

import logging
from dataclasses import dataclass
from typing import List, Tuple

import numpy as np

from .config import FLOAT_DTYPE, WEDGE_ID_SHIFT
from .static_class import Parity

logger = logging.getLogger("Classifier")


def wedge_id(facet_id: int, parity: Parity) -> int:
    """Stable key shared by the ACTIVATE and DEACTIVATE events of one wedge."""
    return (int(facet_id) << WEDGE_ID_SHIFT) | int(parity)


@dataclass(frozen=True)
class Wedge:
    """
    Part of a facet between two horizontal planes.

    Attributes:
        facet_id: Index of the facet in the mesh facet table.
        parity: LOWER or UPPER half of the facet.
        a, b: Vertex indices of edge AB.
        c, d: Vertex indices of edge CD.
        z_low: Height where the wedge starts.
        z_high: Height where the wedge ends.
    """
    facet_id: int
    parity: Parity
    a: int
    b: int
    c: int
    d: int
    z_low: float
    z_high: float

    @property
    def id(self) -> int:
        return wedge_id(self.facet_id, self.parity)

    @property
    def edges(self) -> Tuple[Tuple[int, int], Tuple[int, int]]:
        return (self.a, self.b), (self.c, self.d)

    @property
    def height(self) -> float:
        return self.z_high - self.z_low

    def contains(self, z: float) -> bool:
        """Half-open interval (z_low, z_high], the same rule the sweep applies."""
        return self.z_low < z <= self.z_high


def rank_vertices(vertices: np.ndarray, triangles: np.ndarray) -> np.ndarray:
    """Order each facet's vertex indices by height.

    Ties in z are broken by vertex index so the ranking is total.

    Args:
        vertices: (V, 3) vertex table.
        triangles: (F, 3) facet table.

    Returns:
        (F, 3) array whose rows are (min, mid, max) vertex indices.
    """
    triangles = np.asarray(triangles)
    if len(triangles) == 0:
        return triangles.reshape(0, 3)
    z = np.asarray(vertices, dtype=FLOAT_DTYPE)[triangles, 2]
    # lexsort: last key is primary
    order = np.lexsort((triangles, z), axis=-1)
    return np.take_along_axis(triangles, order, axis=1)


def _make_wedges(facet_id: int, lo: int, mid: int, hi: int, vertices: np.ndarray) -> Tuple[Wedge, Wedge]:
    z_lo = float(vertices[lo, 2])
    z_mid = float(vertices[mid, 2])
    z_hi = float(vertices[hi, 2])
    lower = Wedge(facet_id, Parity.LOWER, lo, hi, lo, mid, z_lo, z_mid)
    upper = Wedge(facet_id, Parity.UPPER, mid, hi, lo, hi, z_mid, z_hi)
    return lower, upper


def classify_facet(facet_id: int, facet, vertices: np.ndarray) -> Tuple[Wedge, Wedge]:
    """Split one facet into its (LOWER, UPPER) wedges."""
    lo, mid, hi = rank_vertices(vertices, np.asarray([facet]))[0].tolist()
    return _make_wedges(facet_id, lo, mid, hi, vertices)


def classify_mesh(mesh) -> List[Wedge]:
    """Split every facet of a mesh into wedges.

    Args:
        mesh: MeshData (anything with ``vertices`` and ``triangles``).

    Returns:
        Wedges in facet order: [lower_0, upper_0, lower_1, upper_1, ...].
    """
    vertices = np.asarray(mesh.vertices, dtype=FLOAT_DTYPE)
    ranked = rank_vertices(vertices, mesh.triangles)
    wedges: List[Wedge] = []
    degenerate = 0
    for facet_id, (lo, mid, hi) in enumerate(ranked.tolist()):
        lower, upper = _make_wedges(facet_id, lo, mid, hi, vertices)
        if lower.z_low == upper.z_high:
            degenerate += 1
        wedges.append(lower)
        wedges.append(upper)
    if degenerate:
        logger.debug(f"{degenerate} horizontal facet(s) produce zero-height wedges only")
    return wedges
