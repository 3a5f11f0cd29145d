"""Tests for minimum-distance edge inference."""
import logging

import numpy
import numpy.testing as npt
import pytest

from polychoron._backend import NumpyBackend
from polychoron._edges import infer_edges, sq_distance_matrix


class TestInferEdges:

    def test_unit_square(self):
        """Sides are edges, diagonals are not."""
        square = [(0, 0, 0, 0), (1, 0, 0, 0), (1, 1, 0, 0), (0, 1, 0, 0)]
        assert infer_edges(square) == [(0, 1), (0, 3), (1, 2), (2, 3)]

    def test_lexicographic_order(self):
        V = [(1, 0, 0, 0), (0, 1, 0, 0), (-1, 0, 0, 0), (0, -1, 0, 0)]
        edges = infer_edges(V)
        assert edges == sorted(edges)
        assert all(i < j for i, j in edges)

    def test_returns_python_ints(self):
        edges = infer_edges([(0, 0, 0, 0), (1, 0, 0, 0)])
        assert edges == [(0, 1)]
        assert all(type(i) is int and type(j) is int for i, j in edges)

    def test_too_few_vertices(self):
        assert infer_edges([]) == []
        assert infer_edges([(1, 2, 3, 4)]) == []

    def test_coincident_vertices_ignored(self):
        """Duplicates do not define the minimum distance."""
        V = [(0, 0, 0, 0), (0, 0, 0, 0), (2, 0, 0, 0)]
        assert infer_edges(V) == [(0, 2), (1, 2)]

    def test_all_coincident(self, caplog):
        V = [(1, 1, 1, 1)] * 3
        with caplog.at_level(logging.WARNING):
            assert infer_edges(V) == []
        assert "coincide" in caplog.text

    def test_eps_threshold(self):
        """Pairs closer than eps are treated as coincident."""
        V = [(0, 0, 0, 0), (0.01, 0, 0, 0), (1, 0, 0, 0)]
        assert infer_edges(V) == [(0, 1)]
        assert infer_edges(V, eps=1e-3) == [(1, 2)]

    def test_tolerance_on_minimum(self):
        V = [(0, 0, 0, 0), (1, 0, 0, 0), (0, 1 + 1e-8, 0, 0)]
        assert infer_edges(V) == [(0, 1), (0, 2)]

    def test_backend_distance_matrix(self):
        V = [(1, 0, 0, 0), (0, 1, 0, 0), (-1, 0, 0, 0), (0, -1, 0, 0)]
        assert infer_edges(V, backend="numpy") == infer_edges(V)
        assert infer_edges(V, backend=NumpyBackend()) == [(0, 1), (0, 3),
                                                          (1, 2), (2, 3)]

    def test_accepts_array(self):
        V = numpy.eye(4)
        assert len(infer_edges(V)) == 6


def test_sq_distance_matrix():
    rng = numpy.random.default_rng(42)
    coords = rng.random((10, 4))
    d2 = sq_distance_matrix(coords)
    assert d2.shape == (10, 10)
    npt.assert_allclose(numpy.diag(d2), 0.0, atol=1e-15)
    npt.assert_allclose(d2, d2.T)
    assert d2[2, 5] == pytest.approx(numpy.sum((coords[2] - coords[5]) ** 2))
