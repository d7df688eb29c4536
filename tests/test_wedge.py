import numpy as np

from sweepslicer.geometry_kernel import Parity, Wedge, classify_facet, classify_mesh, rank_vertices, wedge_id
from sweepslicer.slicer import Slicer


def test_rank_vertices_orders_by_height():
    vertices = np.array([(0, 0, 5), (0, 0, 1), (0, 0, 3)], dtype=np.float32)
    ranked = rank_vertices(vertices, np.array([(0, 1, 2), (2, 0, 1)]))
    assert ranked.tolist() == [[1, 2, 0], [1, 2, 0]]


def test_rank_vertices_breaks_ties_by_index():
    vertices = np.array([(0, 0, 3), (1, 0, 3), (0, 1, 3), (0, 0, 0)], dtype=np.float32)
    ranked = rank_vertices(vertices, np.array([(2, 0, 1), (1, 3, 0)]))
    assert ranked.tolist() == [[0, 1, 2], [3, 0, 1]]


def test_rank_vertices_empty():
    vertices = np.zeros((0, 3), dtype=np.float32)
    assert rank_vertices(vertices, np.zeros((0, 3), dtype=np.int64)).shape == (0, 3)


def test_classify_facet_edges():
    vertices = np.array([(0, 0, 0), (4, 0, 2), (0, 4, 8)], dtype=np.float32)
    lower, upper = classify_facet(7, (2, 0, 1), vertices)

    assert lower.parity == Parity.LOWER
    assert lower.edges == ((0, 2), (0, 1))
    assert (lower.z_low, lower.z_high) == (0.0, 2.0)

    assert upper.parity == Parity.UPPER
    assert upper.edges == ((1, 2), (0, 2))
    assert (upper.z_low, upper.z_high) == (2.0, 8.0)

    assert lower.facet_id == upper.facet_id == 7


def test_wedge_ids_are_unique_and_stable():
    assert wedge_id(0, Parity.LOWER) == 0
    assert wedge_id(0, Parity.UPPER) == 1
    assert wedge_id(5, Parity.LOWER) == 10
    assert wedge_id(5, Parity.UPPER) == 11
    big = 2 ** 40
    assert wedge_id(big, Parity.UPPER) == 2 * big + 1


def test_classify_mesh_two_wedges_per_facet(tilted_square):
    wedges = classify_mesh(tilted_square)
    assert len(wedges) == 4
    assert [w.parity for w in wedges] == [Parity.LOWER, Parity.UPPER] * 2
    assert [w.facet_id for w in wedges] == [0, 0, 1, 1]
    assert len({w.id for w in wedges}) == 4


def test_horizontal_facet_gives_zero_height_wedges(horizontal_facet):
    lower, upper = classify_mesh(horizontal_facet)
    assert lower.height == 0.0
    assert upper.height == 0.0
    assert lower.z_low == upper.z_high == 3.0


def test_wedge_contains():
    wedge = Wedge(0, Parity.LOWER, 0, 2, 0, 1, 1.0, 4.0)
    assert not wedge.contains(1.0)
    assert wedge.contains(1.5)
    assert wedge.contains(4.0)
    assert not wedge.contains(4.5)
    assert wedge.height == 3.0


def test_wedge_contains_agrees_with_sweep(tilted_square):
    slicer = Slicer(tilted_square)
    for z in (0.0, 2.5, 5.0, 10.0):
        cut = {(s.facet_id, s.parity) for s in slicer.slice_layer(z)}
        expected = {(w.facet_id, w.parity) for w in slicer.wedges if w.contains(z)}
        assert cut == expected
