"""
polychoron: rotation and perspective projection of regular 4-polytopes.

Usage::

    from polychoron import generate, rotate_all, project_all

    P = generate("24-cell", size=0.9)
    rotated = rotate_all(P.vertices, {"xw": 0.4, "yz": 0.2})
    projected = project_all(rotated, distance=3.0)
    for i, j in P.edges:
        a, b = projected[i], projected[j]
"""
import logging

from ._vertex import Edge, ProjectedPoint, Vec4
from ._edges import EDGE_TOLERANCE, infer_edges
from ._polytope import (
    GENERATORS,
    Polytope,
    Shape,
    cross_polytope,
    generate,
    normalize,
    simplex,
    tesseract,
    twenty_four_cell,
)
from ._rotation import (
    PLANES,
    RotationAngles,
    as_angles,
    rotate,
    rotate_all,
    rotation_matrix,
)
from ._projection import (
    DEFAULT_PERSPECTIVE_DISTANCE,
    DEPTH_SHARPNESS,
    depth,
    project,
    project_all,
)
from ._backend import BatchBackend, NumpyBackend, TorchBackend, get_backend
from ._scene import (
    ANGULAR_RATES,
    DISPLAY_SCALES,
    Scene,
    angles_from_hex,
    choose_shape,
    edge_segments,
    frame_angles,
    hue_from_hex,
    seed_scene,
)

# Optional modules for plotting:
try:
    from ._plotting import animate_polytope, edge_colors, plot_polytope
except ImportError:
    logging.warning("Plotting functions are unavailable. To use install "
                    "matplotlib, install using ex. `pip install matplotlib` ")
    matplotlib_available = False
else:
    matplotlib_available = True

__version__ = "0.1.0"

__all__ = [
    "Vec4",
    "Edge",
    "ProjectedPoint",
    "Polytope",
    "Shape",
    "GENERATORS",
    "generate",
    "tesseract",
    "simplex",
    "cross_polytope",
    "twenty_four_cell",
    "normalize",
    "infer_edges",
    "EDGE_TOLERANCE",
    "PLANES",
    "RotationAngles",
    "as_angles",
    "rotate",
    "rotate_all",
    "rotation_matrix",
    "DEFAULT_PERSPECTIVE_DISTANCE",
    "DEPTH_SHARPNESS",
    "depth",
    "project",
    "project_all",
    "BatchBackend",
    "NumpyBackend",
    "TorchBackend",
    "get_backend",
    "ANGULAR_RATES",
    "DISPLAY_SCALES",
    "Scene",
    "seed_scene",
    "angles_from_hex",
    "hue_from_hex",
    "choose_shape",
    "frame_angles",
    "edge_segments",
]
if matplotlib_available:
    __all__ += ["plot_polytope", "animate_polytope", "edge_colors"]
