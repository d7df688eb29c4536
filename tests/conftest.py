"""Shared meshes and helpers for the sweepslicer tests."""

from pathlib import Path
from typing import Callable, Sequence

import numpy as np
import pytest

from sweepslicer.file_parser import MeshData


def stl_text(facets: Sequence[Sequence[Sequence[float]]], name: str = "test") -> str:
    """Render facets (each three (x, y, z) corners) as ASCII STL."""
    lines = [f"solid {name}"]
    for corners in facets:
        lines.append("  facet normal 0 0 0")
        lines.append("    outer loop")
        for x, y, z in corners:
            lines.append(f"      vertex {x} {y} {z}")
        lines.append("    endloop")
        lines.append("  endfacet")
    lines.append(f"endsolid {name}")
    return "\n".join(lines) + "\n"


def uv_sphere(radius: float = 1.0, n_lat: int = 24, n_lon: int = 48) -> MeshData:
    """Closed UV sphere centred at the origin, poles on the z-axis."""
    theta = np.linspace(0.0, np.pi, n_lat + 1)[1:-1]
    phi = np.linspace(0.0, 2.0 * np.pi, n_lon, endpoint=False)
    rings = [
        [(radius * np.sin(t) * np.cos(p), radius * np.sin(t) * np.sin(p), radius * np.cos(t)) for p in phi]
        for t in theta
    ]
    top = (0.0, 0.0, radius)
    bottom = (0.0, 0.0, -radius)
    soup = []
    for j in range(n_lon):
        k = (j + 1) % n_lon
        soup.append([top, rings[0][j], rings[0][k]])
        soup.append([bottom, rings[-1][k], rings[-1][j]])
        for i in range(len(rings) - 1):
            a, b = rings[i][j], rings[i][k]
            c, d = rings[i + 1][j], rings[i + 1][k]
            soup.append([a, c, d])
            soup.append([a, d, b])
    return MeshData.from_triangle_soup(soup, name="sphere")


@pytest.fixture
def single_triangle() -> MeshData:
    return MeshData(
        vertices=[(0.0, 0.0, 0.0), (10.0, 0.0, 0.0), (5.0, 10.0, 10.0)],
        triangles=[(0, 1, 2)],
    )


@pytest.fixture
def tilted_square() -> MeshData:
    # Rectangle 10 x 10 in x/y, rising in z along y.
    return MeshData(
        vertices=[(0.0, 0.0, 0.0), (10.0, 0.0, 0.0), (10.0, 10.0, 10.0), (0.0, 10.0, 10.0)],
        triangles=[(0, 1, 2), (0, 2, 3)],
    )


@pytest.fixture
def horizontal_facet() -> MeshData:
    return MeshData(
        vertices=[(0.0, 0.0, 3.0), (4.0, 0.0, 3.0), (0.0, 4.0, 3.0)],
        triangles=[(0, 1, 2)],
    )


@pytest.fixture
def sphere() -> MeshData:
    return uv_sphere()


@pytest.fixture
def write_stl(tmp_path: Path) -> Callable[..., Path]:
    def _write(facets, name: str = "test", filename: str = "mesh.stl") -> Path:
        path = tmp_path / filename
        path.write_text(stl_text(facets, name), encoding="utf-8")
        return path

    return _write
