"""Perspective projection from 4-space to 3-space."""
from __future__ import annotations

import math
from typing import List, Sequence

from ._vertex import ProjectedPoint

DEFAULT_PERSPECTIVE_DISTANCE = 3.0

# Multiplier on the tanh argument of the depth scalar. 1.0 gives the
# gentlest falloff; 1.6 is the sharper variant some viewers use.
DEPTH_SHARPNESS = 1.0


def depth(w: float, distance: float = DEFAULT_PERSPECTIVE_DISTANCE,
          sharpness: float = DEPTH_SHARPNESS) -> float:
    """Map an unbounded ``w`` coordinate smoothly into ``[0, 1]``."""
    if distance == 0:
        # Limit as the eye approaches the origin from +w
        return 0.5 + 0.5 * math.copysign(1.0, sharpness * w) if w else 0.5
    return 0.5 + 0.5 * math.tanh(sharpness * w / distance)


def project(point: Sequence[float],
            distance: float = DEFAULT_PERSPECTIVE_DISTANCE,
            sharpness: float = DEPTH_SHARPNESS) -> ProjectedPoint:
    """Project a 4D point to 3D with a perspective divide along ``w``.

    :param point: (x, y, z, w)
    :param distance: eye-to-origin distance along the w axis
    :param sharpness: tanh multiplier for the depth scalar
    :return: ProjectedPoint(x, y, z, t)
    """
    x, y, z, w = point
    d = distance - w
    # Eye point coincides with the vertex; leave it unscaled
    k = distance / d if d != 0 else 1.0
    return ProjectedPoint(x * k, y * k, z * k, depth(w, distance, sharpness))


def project_all(points: Sequence[Sequence[float]],
                distance: float = DEFAULT_PERSPECTIVE_DISTANCE,
                sharpness: float = DEPTH_SHARPNESS) -> List[ProjectedPoint]:
    return [project(p, distance, sharpness) for p in points]
