"""
Batch computation backends for polychoron.

Provides a unified interface for rotating and projecting whole ``(N, 4)``
coordinate arrays at once. Backends:

- ``NumpyBackend``: Vectorized numpy (default, always available)
- ``TorchBackend``: CPU or CUDA via PyTorch (requires ``torch``)

Usage::

    from polychoron._backend import get_backend

    backend = get_backend("numpy")      # explicit
    backend = get_backend("torch")      # PyTorch on CPU (or device=...)
    backend = get_backend("gpu")        # torch+CUDA, fallback to numpy
"""
from __future__ import annotations

import logging
import math
from typing import Any, Protocol, Tuple, runtime_checkable

import numpy as np

from ._edges import sq_distance_matrix
from ._projection import DEFAULT_PERSPECTIVE_DISTANCE, DEPTH_SHARPNESS
from ._rotation import PLANES, AnglesLike, as_angles


# ---------------------------------------------------------------------------
# Protocol (structural typing interface)
# ---------------------------------------------------------------------------
@runtime_checkable
class BatchBackend(Protocol):
    """Protocol for batch computation backends."""

    name: str

    def batch_rotate(self, coords: np.ndarray,
                     angles: AnglesLike) -> np.ndarray:
        """Rotate N points by the composed plane rotations.

        Parameters
        ----------
        coords : ndarray of shape (N, 4)
        angles : RotationAngles or mapping of plane name to angle

        Returns
        -------
        ndarray of shape (N, 4)
        """
        ...

    def batch_project(
        self,
        coords: np.ndarray,
        distance: float,
        sharpness: float,
    ) -> Tuple[np.ndarray, np.ndarray]:
        """Perspective-project N points from 4D to 3D.

        Parameters
        ----------
        coords : ndarray of shape (N, 4)
        distance : eye-to-origin distance along w
        sharpness : tanh multiplier for the depth scalar

        Returns
        -------
        xyz : ndarray of shape (N, 3)
        t : ndarray of shape (N,), depth scalars in [0, 1]
        """
        ...

    def batch_sq_distance_matrix(self, coords: np.ndarray) -> np.ndarray:
        """Compute the pairwise squared Euclidean distance matrix.

        Parameters
        ----------
        coords : ndarray of shape (N, dim)

        Returns
        -------
        ndarray of shape (N, N)
        """
        ...


# ---------------------------------------------------------------------------
# Numpy backend (always available)
# ---------------------------------------------------------------------------
class NumpyBackend:
    """Vectorized numpy backend. Default for all installations."""

    name = "numpy"

    def batch_rotate(self, coords: np.ndarray,
                     angles: AnglesLike) -> np.ndarray:
        angles = as_angles(angles)
        out = np.array(coords, dtype=float, copy=True).reshape(-1, 4)
        for (plane, i, j), theta in zip(PLANES, angles):
            if theta == 0:
                continue
            c, s = math.cos(theta), math.sin(theta)
            a = out[:, i].copy()
            b = out[:, j].copy()
            out[:, i] = c * a - s * b
            out[:, j] = s * a + c * b
        return out

    def batch_project(
        self,
        coords: np.ndarray,
        distance: float = DEFAULT_PERSPECTIVE_DISTANCE,
        sharpness: float = DEPTH_SHARPNESS,
    ) -> Tuple[np.ndarray, np.ndarray]:
        coords = np.asarray(coords, dtype=float).reshape(-1, 4)
        w = coords[:, 3]
        d = distance - w
        k = np.divide(distance, d, out=np.ones_like(d), where=d != 0)
        xyz = coords[:, :3] * k[:, np.newaxis]
        if distance == 0:
            # Limit as the eye approaches the origin from +w
            t = np.where(w == 0, 0.5, 0.5 + 0.5 * np.sign(sharpness * w))
        else:
            t = 0.5 + 0.5 * np.tanh(sharpness * w / distance)
        return xyz, t

    def batch_sq_distance_matrix(self, coords: np.ndarray) -> np.ndarray:
        return sq_distance_matrix(np.asarray(coords, dtype=float))


# ---------------------------------------------------------------------------
# PyTorch backend (optional CPU/GPU)
# ---------------------------------------------------------------------------
class TorchBackend:
    """Backend using PyTorch float64 tensors. Requires ``torch``."""

    name = "torch"

    def __init__(self, device: str | None = None):
        import torch
        self.torch = torch
        if device is None:
            device = "cpu"
        self.device = torch.device(device)

    def _as_tensor(self, coords):
        return self.torch.as_tensor(np.asarray(coords, dtype=float),
                                    dtype=self.torch.float64,
                                    device=self.device)

    def batch_rotate(self, coords: np.ndarray,
                     angles: AnglesLike) -> np.ndarray:
        angles = as_angles(angles)
        out = self._as_tensor(coords).reshape(-1, 4).clone()
        for (plane, i, j), theta in zip(PLANES, angles):
            if theta == 0:
                continue
            c, s = math.cos(theta), math.sin(theta)
            a = out[:, i].clone()
            b = out[:, j].clone()
            out[:, i] = c * a - s * b
            out[:, j] = s * a + c * b
        return out.cpu().numpy()

    def batch_project(
        self,
        coords: np.ndarray,
        distance: float = DEFAULT_PERSPECTIVE_DISTANCE,
        sharpness: float = DEPTH_SHARPNESS,
    ) -> Tuple[np.ndarray, np.ndarray]:
        torch = self.torch
        X = self._as_tensor(coords).reshape(-1, 4)
        w = X[:, 3]
        d = distance - w
        safe_d = torch.where(d == 0, torch.ones_like(d), d)
        k = torch.where(d == 0, torch.ones_like(d), distance / safe_d)
        xyz = X[:, :3] * k.unsqueeze(1)
        if distance == 0:
            t = torch.where(w == 0, torch.full_like(w, 0.5),
                            0.5 + 0.5 * torch.sign(sharpness * w))
        else:
            t = 0.5 + 0.5 * torch.tanh(sharpness * w / distance)
        return xyz.cpu().numpy(), t.cpu().numpy()

    def batch_sq_distance_matrix(self, coords: np.ndarray) -> np.ndarray:
        X = self._as_tensor(coords)
        diff = X[:, None, :] - X[None, :, :]
        return (diff ** 2).sum(dim=-1).cpu().numpy()


# ---------------------------------------------------------------------------
# Backend registry and auto-detection
# ---------------------------------------------------------------------------
_BACKENDS: dict[str, type] = {
    "numpy": NumpyBackend,
    "torch": TorchBackend,
}


def _detect_gpu_backend() -> BatchBackend:
    """Use torch on CUDA when available, falling back to numpy."""
    try:
        import torch
    except ImportError:
        logging.warning("GPU backend requested but torch is not installed, "
                        "install using ex. `pip install torch`. "
                        "Falling back to numpy.")
        return NumpyBackend()
    if not torch.cuda.is_available():
        logging.warning("GPU backend requested but CUDA is not available. "
                        "Falling back to numpy.")
        return NumpyBackend()
    return TorchBackend(device="cuda")


def get_backend(name: str | BatchBackend | None = None,
                **kwargs: Any) -> BatchBackend:
    """Get a computation backend by name.

    Parameters
    ----------
    name : str, BatchBackend or None
        Backend name: ``"numpy"``, ``"torch"``, ``"gpu"`` (auto-detect),
        or ``None`` (numpy default). A backend instance is returned as is.
    **kwargs
        Passed to the backend constructor (e.g. ``device="cuda:1"`` for
        torch).

    Returns
    -------
    BatchBackend
        An instance satisfying the :class:`BatchBackend` protocol.
    """
    if isinstance(name, BatchBackend):
        return name
    if name is None or name == "numpy":
        return NumpyBackend()
    if name == "gpu":
        return _detect_gpu_backend()
    if name not in _BACKENDS:
        raise ValueError(
            f"Unknown backend {name!r}. Available: {list(_BACKENDS.keys())} or 'gpu'"
        )
    return _BACKENDS[name](**kwargs)
