"""
Edge skeleton recovery from vertex coordinates.

In a vertex-transitive regular polytope every true edge has the same
length, so the edge set is every vertex pair at the minimum nonzero
distance. Used by the generators whose adjacency is not enumerated
directly (16-cell, 24-cell).
"""
from __future__ import annotations

import logging
from typing import List, Sequence

import numpy as np

from ._vertex import Edge

# Absolute tolerance on squared distance when matching the minimum.
EDGE_TOLERANCE = 1e-6


def sq_distance_matrix(coords: np.ndarray) -> np.ndarray:
    """Pairwise squared Euclidean distances of an ``(N, dim)`` array."""
    diff = coords[:, np.newaxis, :] - coords[np.newaxis, :, :]
    return np.sum(diff ** 2, axis=-1)


def infer_edges(vertices: Sequence[Sequence[float]],
                eps: float = 1e-6, backend=None) -> List[Edge]:
    """Return every vertex pair at the minimum nonzero squared distance.

    Parameters
    ----------
    vertices : sequence of 4-vectors
    eps : float
        Squared distances at or below ``eps`` are treated as coincident
        vertices and never define the minimum.
    backend : BatchBackend, str or None
        Backend computing the distance matrix, see
        :func:`polychoron._backend.get_backend`. Plain numpy when None.

    Returns
    -------
    list of ``(i, j)`` tuples with ``i < j``, in lexicographic order.
    """
    n = len(vertices)
    if n < 2:
        return []

    coords = np.asarray(vertices, dtype=float)
    iu, ju = np.triu_indices(n, k=1)
    if backend is None:
        d2 = sq_distance_matrix(coords)
    else:
        from ._backend import get_backend
        d2 = get_backend(backend).batch_sq_distance_matrix(coords)
    d2 = d2[iu, ju]

    # First pass: minimum squared distance among non-coincident pairs
    separated = d2 > eps
    if not np.any(separated):
        logging.warning("All %d vertices coincide within eps=%g; "
                        "no edges inferred.", n, eps)
        return []
    d2_min = d2[separated].min()

    # Second pass: every pair at that distance
    on_edge = np.abs(d2 - d2_min) <= EDGE_TOLERANCE
    return [(int(i), int(j)) for i, j in zip(iu[on_edge], ju[on_edge])]
