import h5py
import numpy as np
import jax.numpy as jnp
import pytest

from flatobj import loads
from flatobj.utils.serialize import load_h5, load_npz, save_h5, save_npz

TRIANGLE = (
    "v 0.0 0.0 0.0\n"
    "v 1.0 0.0 0.0\n"
    "v 0.0 1.0 0.0\n"
    "vn 0.0 0.0 1.0\n"
    "vt 0.0 0.0\n"
    "vt 1.0 0.0\n"
    "vt 0.0 1.0\n"
    "f 1/1/1 2/2/1 3/3/1\n"
)


def test_npz(tmp_path):
    mesh = loads(TRIANGLE, 3, 1, 3)
    path = tmp_path / "triangle.npz"
    save_npz(mesh, path)
    with np.load(str(path)) as data:
        assert int(data["corner_count"]) == 3
        assert data["positions"].dtype == np.float32
    restored = load_npz(path)
    assert restored.corner_count == 3
    assert jnp.allclose(restored.texcoords, mesh.texcoords)


def test_h5(tmp_path):
    mesh = loads(TRIANGLE, 3, 1, 3)
    path = tmp_path / "triangle.h5"
    save_h5(mesh, path)
    with h5py.File(str(path), "r") as f:
        assert f.attrs["corner_count"] == 3
        assert f["normals"].compression == "gzip"
    restored = load_h5(path)
    assert jnp.allclose(restored.normals, mesh.normals)


def test_corner_count_mismatch(tmp_path):
    mesh = loads(TRIANGLE, 3, 1, 3)
    path = tmp_path / "triangle.h5"
    save_h5(mesh, path)
    with h5py.File(str(path), "a") as f:
        f.attrs["corner_count"] = 6
    pytest.raises(ValueError, load_h5, path)
