"""
Generators for the regular convex 4-polytopes.

Supported shapes:
    - 8-cell / tesseract (V=16, E=32)
    - 5-cell / simplex (V=5, E=10)
    - 16-cell / cross-polytope (V=8, E=24)
    - 24-cell (V=24, E=96)

Every generator takes a scale factor and returns a ``Polytope``: a tuple
of ``Vec4`` vertices and a tuple of ``(i, j)`` edges with ``i < j``.
"""
from __future__ import annotations

import enum
import itertools
import math
from typing import Callable, Dict, NamedTuple, Sequence, Tuple, Union

from ._edges import infer_edges
from ._vertex import Edge, Vec4


class Shape(enum.Enum):
    TESSERACT = "8-cell"
    SIMPLEX = "5-cell"
    CROSS = "16-cell"
    CELL24 = "24-cell"

    @classmethod
    def parse(cls, shape: Union["Shape", str]) -> "Shape":
        """Resolve a ``Shape`` from a member, a value or a common alias."""
        if isinstance(shape, cls):
            return shape
        key = str(shape).strip().lower()
        try:
            return _ALIASES[key]
        except KeyError:
            raise ValueError(
                f"Unknown shape {shape!r}. Available: {sorted(_ALIASES)}"
            ) from None


_ALIASES = {
    "8-cell": Shape.TESSERACT,
    "8cell": Shape.TESSERACT,
    "tesseract": Shape.TESSERACT,
    "hypercube": Shape.TESSERACT,
    "5-cell": Shape.SIMPLEX,
    "5cell": Shape.SIMPLEX,
    "simplex": Shape.SIMPLEX,
    "16-cell": Shape.CROSS,
    "16cell": Shape.CROSS,
    "cross": Shape.CROSS,
    "cross-polytope": Shape.CROSS,
    "24-cell": Shape.CELL24,
    "24cell": Shape.CELL24,
}


class Polytope(NamedTuple):
    vertices: Tuple[Vec4, ...]
    edges: Tuple[Edge, ...]
    shape: Shape


# Regular 5-cell on the sphere of radius sqrt(16/5); every pair of
# template vertices is at squared distance 8.
_SQRT5 = math.sqrt(5.0)
_SIMPLEX_TEMPLATE = (
    (1.0, 1.0, 1.0, -1.0 / _SQRT5),
    (1.0, -1.0, -1.0, -1.0 / _SQRT5),
    (-1.0, 1.0, -1.0, -1.0 / _SQRT5),
    (-1.0, -1.0, 1.0, -1.0 / _SQRT5),
    (0.0, 0.0, 0.0, _SQRT5 - 1.0 / _SQRT5),
)


def normalize(v: Sequence[float]) -> Vec4:
    """Scale a 4-vector to unit length. A zero vector is returned as is."""
    length = math.sqrt(sum(c * c for c in v)) or 1.0
    return Vec4(*(c / length for c in v))


def tesseract(size: float = 1.0) -> Polytope:
    """8-cell with vertices at ``(+-size, +-size, +-size, +-size)``.

    Vertex ``i`` takes ``+size`` on axis ``k`` when bit ``k`` of ``i`` is
    set, so two vertices share an edge exactly when their indices differ
    in one bit.
    """
    s = size
    vertices = tuple(
        Vec4(*(s if i & (1 << k) else -s for k in range(4)))
        for i in range(16)
    )

    edges = []
    for i in range(16):
        for k in range(4):
            j = i ^ (1 << k)
            if i < j:
                edges.append((i, j))

    return Polytope(vertices, tuple(edges), Shape.TESSERACT)


def simplex(size: float = 1.0) -> Polytope:
    """5-cell inscribed in the 3-sphere of radius ``size``.

    The vertex positions differ from the common raw template
    ``(+-1, +-1, +-1, -1), (0, 0, 0, 4)``, which is not equilateral after
    normalization. Here the w offsets are chosen so all ten edges have
    equal length.
    """
    vertices = tuple(
        Vec4(*(c * size for c in normalize(v))) for v in _SIMPLEX_TEMPLATE
    )
    edges = tuple(itertools.combinations(range(len(vertices)), 2))
    return Polytope(vertices, edges, Shape.SIMPLEX)


def cross_polytope(size: float = 1.0) -> Polytope:
    """16-cell with vertices at ``+-size`` on each axis."""
    vertices = []
    for axis in range(4):
        for sign in (1.0, -1.0):
            x = [0.0] * 4
            x[axis] = sign * size
            vertices.append(Vec4(*x))

    return Polytope(tuple(vertices), tuple(infer_edges(vertices)),
                    Shape.CROSS)


def twenty_four_cell(size: float = 1.0) -> Polytope:
    """24-cell: all permutations of ``(+-1, +-1, 0, 0)`` scaled by ``size``."""
    vertices = []
    for a, b in itertools.combinations(range(4), 2):
        for sa, sb in itertools.product((1.0, -1.0), repeat=2):
            x = [0.0] * 4
            x[a] = sa * size
            x[b] = sb * size
            vertices.append(Vec4(*x))

    return Polytope(tuple(vertices), tuple(infer_edges(vertices)),
                    Shape.CELL24)


GENERATORS: Dict[Shape, Callable[[float], Polytope]] = {
    Shape.TESSERACT: tesseract,
    Shape.SIMPLEX: simplex,
    Shape.CROSS: cross_polytope,
    Shape.CELL24: twenty_four_cell,
}


def generate(shape: Union[Shape, str], size: float = 1.0) -> Polytope:
    """Build the polytope named by ``shape`` at scale ``size``.

    :param shape: Shape member, or a name such as ``"8-cell"``,
                  ``"simplex"``, ``"cross"`` or ``"24cell"``
    :param size: positive scale factor
    :return: Polytope
    """
    return GENERATORS[Shape.parse(shape)](size)
