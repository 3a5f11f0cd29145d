"""Point types shared by the generators, the rotation engine and the
projector."""
from __future__ import annotations

from typing import NamedTuple, Tuple


class Vec4(NamedTuple):
    """A point in 4-space."""
    x: float
    y: float
    z: float
    w: float


class ProjectedPoint(NamedTuple):
    """A projected point in 3-space together with its depth scalar.

    ``t`` is the originating ``w`` coordinate remapped to ``[0, 1]`` for
    depth shading.
    """
    x: float
    y: float
    z: float
    t: float


Edge = Tuple[int, int]
