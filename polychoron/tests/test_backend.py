"""
Backend tests for polychoron.

PyTorch tests run on CPU when torch is installed; CUDA-specific tests are
skipped when no GPU driver is available.

Run all backend tests:            pytest polychoron/tests/test_backend.py
Run GPU-only tests:               pytest polychoron/tests/test_backend.py -m gpu
Skip GPU tests:                   pytest polychoron/tests/test_backend.py -m "not gpu"
"""
import logging

import numpy as np
import numpy.testing as npt
import pytest

from polychoron._backend import (
    BatchBackend,
    NumpyBackend,
    TorchBackend,
    get_backend,
)
from polychoron._polytope import twenty_four_cell
from polychoron._projection import project
from polychoron._rotation import RotationAngles, rotate

# ---------------------------------------------------------------------------
# Library / hardware availability detection
# ---------------------------------------------------------------------------
try:
    import torch as _torch  # noqa: F401
    HAS_TORCH = True
    HAS_TORCH_CUDA = _torch.cuda.is_available()
except ImportError:
    HAS_TORCH = False
    HAS_TORCH_CUDA = False

requires_torch = pytest.mark.skipif(
    not HAS_TORCH, reason="PyTorch not installed"
)
requires_torch_cuda = pytest.mark.skipif(
    not HAS_TORCH_CUDA, reason="PyTorch CUDA not available (no driver or no GPU)"
)


# ---------------------------------------------------------------------------
# Shared test fixtures
# ---------------------------------------------------------------------------
ANGLES = RotationAngles(0.3, -1.1, 0.0, 2.4, 0.7, -0.2)


def _make_test_coords(n=50, seed=42):
    rng = np.random.default_rng(seed)
    return rng.normal(size=(n, 4))


def _reference_rotate(coords, angles):
    return np.array([rotate(p, angles) for p in coords])


def _reference_project(coords, distance=3.0, sharpness=1.0):
    out = np.array([project(p, distance, sharpness) for p in coords])
    return out[:, :3], out[:, 3]


class _BackendChecks:
    """Checks shared by every backend; subclasses set ``self.backend``."""

    def test_satisfies_protocol(self):
        assert isinstance(self.backend, BatchBackend)

    def test_batch_rotate(self):
        coords = _make_test_coords()
        result = self.backend.batch_rotate(coords, ANGLES)
        assert result.shape == (50, 4)
        npt.assert_allclose(result, _reference_rotate(coords, ANGLES),
                            atol=1e-12)

    def test_batch_rotate_identity_exact(self):
        coords = _make_test_coords(n=10)
        result = self.backend.batch_rotate(coords, RotationAngles())
        npt.assert_array_equal(result, coords)

    def test_batch_rotate_skips_zero_planes(self):
        coords = _make_test_coords(n=10)
        result = self.backend.batch_rotate(coords, {"xy": 0.9})
        npt.assert_array_equal(result[:, 2:], coords[:, 2:])

    def test_batch_rotate_does_not_modify_input(self):
        coords = _make_test_coords(n=10)
        original = coords.copy()
        self.backend.batch_rotate(coords, ANGLES)
        npt.assert_array_equal(coords, original)

    def test_batch_rotate_norm_preserved(self):
        coords = _make_test_coords()
        result = self.backend.batch_rotate(coords, ANGLES)
        npt.assert_allclose(np.linalg.norm(result, axis=1),
                            np.linalg.norm(coords, axis=1))

    @pytest.mark.parametrize("sharpness", [1.0, 1.6])
    def test_batch_project(self, sharpness):
        coords = _make_test_coords()
        xyz, t = self.backend.batch_project(coords, 3.0, sharpness)
        ref_xyz, ref_t = _reference_project(coords, 3.0, sharpness)
        assert xyz.shape == (50, 3)
        assert t.shape == (50,)
        npt.assert_allclose(xyz, ref_xyz, atol=1e-12)
        npt.assert_allclose(t, ref_t, atol=1e-12)

    def test_batch_project_guard(self):
        coords = np.array([[1.0, 2.0, 3.0, 3.0], [1.0, 2.0, 3.0, 0.0]])
        xyz, t = self.backend.batch_project(coords, 3.0, 1.0)
        assert np.all(np.isfinite(xyz))
        npt.assert_array_equal(xyz, [[1.0, 2.0, 3.0], [1.0, 2.0, 3.0]])
        assert t[1] == 0.5

    @pytest.mark.parametrize("w", [-2.0, 0.0, 1e-9, 2.0])
    def test_batch_project_zero_distance(self, w):
        """Zero distance takes the same one-sided depth limit as project."""
        coords = np.array([[1.0, -1.0, 0.5, w]])
        xyz, t = self.backend.batch_project(coords, 0.0, 1.0)
        ref_xyz, ref_t = _reference_project(coords, 0.0, 1.0)
        assert np.all(np.isfinite(t))
        npt.assert_array_equal(t, ref_t)
        npt.assert_allclose(xyz, ref_xyz)

    def test_batch_sq_distance_matrix(self):
        coords = np.array(twenty_four_cell().vertices)
        d2 = self.backend.batch_sq_distance_matrix(coords)
        assert d2.shape == (24, 24)
        npt.assert_allclose(np.diag(d2), 0.0, atol=1e-15)
        npt.assert_allclose(d2, d2.T)
        assert np.count_nonzero(np.isclose(d2, 2.0)) == 2 * 96


# ---------------------------------------------------------------------------
# TestNumpyBackend: always runs
# ---------------------------------------------------------------------------
class TestNumpyBackend(_BackendChecks):
    """Validates the vectorized NumpyBackend against per-point functions."""

    def setup_method(self):
        self.backend = NumpyBackend()

    def test_name(self):
        assert self.backend.name == "numpy"

    def test_accepts_lists(self):
        result = self.backend.batch_rotate([(1, 0, 0, 0)], {"xw": np.pi})
        npt.assert_allclose(result, [[-1.0, 0.0, 0.0, 0.0]], atol=1e-15)


# ---------------------------------------------------------------------------
# TestTorchBackend: CPU, requires torch
# ---------------------------------------------------------------------------
@requires_torch
class TestTorchBackend(_BackendChecks):

    def setup_method(self):
        self.backend = TorchBackend()

    def test_name(self):
        assert self.backend.name == "torch"

    def test_matches_numpy(self):
        coords = _make_test_coords(n=100)
        npt.assert_allclose(self.backend.batch_rotate(coords, ANGLES),
                            NumpyBackend().batch_rotate(coords, ANGLES),
                            atol=1e-12)


@requires_torch_cuda
@pytest.mark.gpu
class TestTorchCudaBackend(_BackendChecks):

    def setup_method(self):
        self.backend = TorchBackend(device="cuda")


# ---------------------------------------------------------------------------
# Registry
# ---------------------------------------------------------------------------
class TestGetBackend:

    def test_default_is_numpy(self):
        assert isinstance(get_backend(), NumpyBackend)
        assert isinstance(get_backend("numpy"), NumpyBackend)

    def test_passthrough_instance(self):
        backend = NumpyBackend()
        assert get_backend(backend) is backend

    def test_unknown(self):
        with pytest.raises(ValueError, match="Unknown backend"):
            get_backend("opencl")

    def test_gpu_returns_backend(self, caplog):
        with caplog.at_level(logging.WARNING):
            backend = get_backend("gpu")
        assert isinstance(backend, BatchBackend)
        if not HAS_TORCH_CUDA:
            assert isinstance(backend, NumpyBackend)
            assert "Falling back to numpy" in caplog.text

    @requires_torch
    def test_torch_by_name(self):
        assert isinstance(get_backend("torch"), TorchBackend)
