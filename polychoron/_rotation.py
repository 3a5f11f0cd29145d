"""
Rotations in 4-space composed from six planar (Givens) rotations.

The planes are applied in the fixed order xy, xz, xw, yz, yw, zw and each
step acts on the coordinates already rotated by the previous steps.
Planar rotations in 4-space do not commute, so reordering ``PLANES``
changes the result.
"""
from __future__ import annotations

import math
from typing import List, Mapping, NamedTuple, Sequence, Union

import numpy as np

from ._vertex import Vec4

# (plane name, first axis, second axis) in application order
PLANES = (
    ("xy", 0, 1),
    ("xz", 0, 2),
    ("xw", 0, 3),
    ("yz", 1, 2),
    ("yw", 1, 3),
    ("zw", 2, 3),
)


class RotationAngles(NamedTuple):
    """One angle per coordinate plane, in radians. Zero means no rotation."""
    xy: float = 0.0
    xz: float = 0.0
    xw: float = 0.0
    yz: float = 0.0
    yw: float = 0.0
    zw: float = 0.0


AnglesLike = Union[RotationAngles, Mapping[str, float], Sequence[float]]


def as_angles(angles: AnglesLike) -> RotationAngles:
    """Coerce a plane->angle mapping into ``RotationAngles``.

    Missing planes default to zero; unknown plane names raise ``ValueError``.
    A plain sequence is read in ``PLANES`` order.
    """
    if isinstance(angles, RotationAngles):
        return angles
    if not isinstance(angles, Mapping):
        return RotationAngles(*(float(a) for a in angles))
    unknown = set(angles) - set(RotationAngles._fields)
    if unknown:
        raise ValueError(
            f"Unknown rotation plane(s) {sorted(unknown)}. "
            f"Available: {list(RotationAngles._fields)}"
        )
    return RotationAngles(**{k: float(v) for k, v in angles.items()})


def rotate(point: Sequence[float], angles: AnglesLike) -> Vec4:
    """Rotate a single 4D point by the composed plane rotations.

    Planes whose angle is exactly zero are skipped so their coordinates
    pass through bit-exact.
    """
    angles = as_angles(angles)
    p = list(point)
    for (plane, i, j), theta in zip(PLANES, angles):
        if theta == 0:
            continue
        c, s = math.cos(theta), math.sin(theta)
        a, b = p[i], p[j]
        p[i] = c * a - s * b
        p[j] = s * a + c * b
    return Vec4(*p)


def rotate_all(points: Sequence[Sequence[float]],
               angles: AnglesLike) -> List[Vec4]:
    """Rotate every point, returning a new list of the same length/order."""
    angles = as_angles(angles)
    return [rotate(p, angles) for p in points]


def rotation_matrix(angles: AnglesLike) -> np.ndarray:
    """Return the 4x4 orthogonal matrix ``R`` with ``R @ p == rotate(p)``."""
    angles = as_angles(angles)
    R = np.eye(4)
    for (plane, i, j), theta in zip(PLANES, angles):
        if theta == 0:
            continue
        c, s = math.cos(theta), math.sin(theta)
        G = np.eye(4)
        G[i, i], G[j, j] = c, c
        G[i, j], G[j, i] = -s, s
        # Later steps act on the output of earlier ones
        R = G @ R
    return R
