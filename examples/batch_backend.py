"""
Rotate and project a large point cloud with a batch backend.

Uses torch on CUDA when available ("gpu"), otherwise numpy.
"""
import time

import numpy as np

from polychoron import RotationAngles, get_backend

rng = np.random.default_rng(42)
coords = rng.normal(size=(200_000, 4))
angles = RotationAngles(0.35, 0.27, 0.31, 0.29, 0.33, 0.37)

for name in ("numpy", "gpu"):
    backend = get_backend(name)
    t0 = time.perf_counter()
    rotated = backend.batch_rotate(coords, angles)
    xyz, t = backend.batch_project(rotated, 3.0, 1.0)
    dt = time.perf_counter() - t0
    print(f"{backend.name}: {coords.shape[0]} points in {dt * 1e3:.1f} ms, "
          f"t in [{t.min():.3f}, {t.max():.3f}]")
