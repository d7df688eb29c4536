# -*- coding: utf-8 -*-
"""
Intersection
============

Pure geometry interpolation utilities.

This module must be stateless:
- no dependency on the sweep driver / active set
- only takes raw vertices, edges and a plane height and returns points

Primary use in slicing:
    plane Z = z  ∩  wedge(AB, CD)  ->  two 2D points

For an edge (P, Q) and height z:

    t = (z - P.z) / (Q.z - P.z)
    x = P.x + t * (Q.x - P.x)
    y = P.y + t * (Q.y - P.y)

No tolerance is applied: an edge with Q.z == P.z yields inf / nan, which
propagate to the caller.
"""
from typing import Tuple

import numpy as np

from .wedge import Wedge


def interpolate_edge(p, q, z: float) -> Tuple[float, float]:
    """
    Point where the plane Z = z crosses the line through P and Q.

    :param p: (3,) coordinates of P
    :param q: (3,) coordinates of Q
    :param z: plane height
    :return: (x, y)
    """
    p = np.asarray(p, dtype=np.float64)
    q = np.asarray(q, dtype=np.float64)
    with np.errstate(divide="ignore", invalid="ignore"):
        t = (z - p[2]) / (q[2] - p[2])
        x = p[0] + t * (q[0] - p[0])
        y = p[1] + t * (q[1] - p[1])
    return float(x), float(y)


def intersect_edges(vertices: np.ndarray, edge_table: np.ndarray, z: float) -> np.ndarray:
    """
    Cut many wedges with one plane.

    :param vertices: (V, 3) vertex table
    :param edge_table: (k, 4) vertex indices (a, b, c, d) per wedge
    :param z: plane height
    :return: (k, 4) array of (x1, y1, x2, y2); (x1, y1) on AB, (x2, y2) on CD
    """
    edge_table = np.asarray(edge_table, dtype=np.int64).reshape(-1, 4)
    verts = np.asarray(vertices, dtype=np.float64)
    out = np.empty((len(edge_table), 4), dtype=np.float64)
    with np.errstate(divide="ignore", invalid="ignore"):
        for col, (i, j) in enumerate(((0, 1), (2, 3))):
            P = verts[edge_table[:, i]]
            Q = verts[edge_table[:, j]]
            d = Q - P
            t = (z - P[:, 2]) / d[:, 2]
            out[:, 2 * col:2 * col + 2] = P[:, :2] + t[:, None] * d[:, :2]
    return out


def intersect_wedge(wedge: Wedge, vertices: np.ndarray, z: float) -> Tuple[Tuple[float, float], Tuple[float, float]]:
    """Return the two segment endpoints where Z = z cuts edges AB and CD of ``wedge``."""
    x1, y1, x2, y2 = intersect_edges(vertices, [[wedge.a, wedge.b, wedge.c, wedge.d]], z)[0].tolist()
    return (x1, y1), (x2, y2)
