"""
Seed-driven scene setup and per-frame edge buffers.

A hex seed (e.g. a randomness beacon value fetched by the caller) fixes
the base rotation angles, the base hue and, in ``"auto"`` mode, the shape.
Each frame the caller advances the angles by elapsed time and asks for the
projected edge segments to draw.
"""
from __future__ import annotations

import math
from typing import Dict, NamedTuple, Tuple, Union

import numpy as np

from ._backend import BatchBackend, get_backend
from ._polytope import Polytope, Shape, generate
from ._projection import DEFAULT_PERSPECTIVE_DISTANCE, DEPTH_SHARPNESS
from ._rotation import PLANES, AnglesLike, RotationAngles, as_angles

# Size multipliers that give the four shapes a similar on-screen extent
DISPLAY_SCALES: Dict[Shape, float] = {
    Shape.TESSERACT: 1.0,
    Shape.SIMPLEX: 1.2,
    Shape.CROSS: 1.2,
    Shape.CELL24: 0.9,
}

# Angular speed of each plane in radians per second, in PLANES order
ANGULAR_RATES = RotationAngles(xy=0.35, xz=0.27, xw=0.31,
                               yz=0.29, yw=0.33, zw=0.37)


class Scene(NamedTuple):
    polytope: Polytope
    angles: RotationAngles
    hue: int
    shape: Shape


def _seed_bytes(seed_hex: str) -> bytes:
    try:
        data = bytes.fromhex(seed_hex)
    except (TypeError, ValueError):
        raise ValueError(f"Seed must be a hex string, got {seed_hex!r}") from None
    if not data:
        raise ValueError("Seed must contain at least one byte")
    return data


def angles_from_hex(seed_hex: str) -> RotationAngles:
    """Derive base rotation angles in ``[-pi, pi]`` from a hex seed.

    Plane ``k`` (in ``PLANES`` order) uses byte ``k`` of the seed, wrapping
    around for seeds shorter than six bytes.
    """
    data = _seed_bytes(seed_hex)
    return RotationAngles(*(
        data[k % len(data)] / 255 * 2 * math.pi - math.pi
        for k in range(len(PLANES))
    ))


def hue_from_hex(seed_hex: str) -> int:
    """Base hue in degrees ``[0, 360)`` from the first two seed bytes."""
    data = _seed_bytes(seed_hex)
    return int.from_bytes(data[:2], "big") % 360


def choose_shape(seed_hex: str) -> Shape:
    """Pick the tesseract for an even first byte, the simplex for odd."""
    return Shape.TESSERACT if _seed_bytes(seed_hex)[0] % 2 == 0 else Shape.SIMPLEX


def seed_scene(seed_hex: str, shape: Union[Shape, str] = "auto",
               size: float = 1.0) -> Scene:
    """Build the polytope, base angles and hue selected by a seed.

    :param seed_hex: hex string of seed bytes
    :param shape: a Shape or shape name, or ``"auto"`` to let the seed
                  choose between the tesseract and the simplex
    :param size: base scale, multiplied by ``DISPLAY_SCALES[shape]``
    """
    angles = angles_from_hex(seed_hex)
    hue = hue_from_hex(seed_hex)
    if isinstance(shape, str) and shape.strip().lower() == "auto":
        shape = choose_shape(seed_hex)
    else:
        shape = Shape.parse(shape)
    polytope = generate(shape, size * DISPLAY_SCALES[shape])
    return Scene(polytope, angles, hue, shape)


def frame_angles(base: AnglesLike, elapsed: float, speed: float = 1.0,
                 rates: AnglesLike = ANGULAR_RATES) -> RotationAngles:
    """Base angles advanced by ``elapsed`` seconds of rotation at ``speed``."""
    base = as_angles(base)
    rates = as_angles(rates)
    return RotationAngles(*(a + elapsed * speed * r
                            for a, r in zip(base, rates)))


def edge_segments(
    polytope: Polytope,
    angles: AnglesLike,
    distance: float = DEFAULT_PERSPECTIVE_DISTANCE,
    sharpness: float = DEPTH_SHARPNESS,
    backend: Union[BatchBackend, str, None] = None,
) -> Tuple[np.ndarray, np.ndarray]:
    """Rotate and project a polytope, then gather its edge endpoints.

    Returns
    -------
    positions : ndarray of shape (E, 2, 3)
        Projected endpoints of every edge, in edge order.
    depths : ndarray of shape (E, 2)
        Depth scalar ``t`` of each endpoint.
    """
    backend = get_backend(backend)
    rotated = backend.batch_rotate(np.asarray(polytope.vertices, dtype=float),
                                   angles)
    xyz, t = backend.batch_project(rotated, distance, sharpness)
    edges = np.asarray(polytope.edges, dtype=int).reshape(-1, 2)
    return xyz[edges], t[edges]
