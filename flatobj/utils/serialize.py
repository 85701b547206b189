import h5py
import jax.numpy as jnp
import numpy as np

from ..mesh import FlatMesh
from .defaults import Defaults

BUFFER_NAMES = ("positions", "normals", "texcoords")


def _buffers(mesh):
    return {name: np.asarray(getattr(mesh, name), dtype=np.float32) for name in BUFFER_NAMES}


def _from_buffers(buffers):
    return FlatMesh(*(jnp.asarray(buffers[name], dtype=jnp.float32) for name in BUFFER_NAMES))


def save_npz(mesh, path):
    """Write the three flat buffers and the corner count to a ``.npz`` archive."""
    np.savez(str(path), corner_count=np.uint32(mesh.corner_count), **_buffers(mesh))


def load_npz(path):
    with np.load(str(path)) as data:
        mesh = _from_buffers(data)
        _check_corner_count(mesh, int(data["corner_count"]), path)
    return mesh


def save_h5(mesh, path, compression=Defaults.H5_COMPRESSION):
    r"""Write the flat buffers to an HDF5 file.

    Each buffer becomes one float32 dataset; the corner count is stored as a
    file attribute.

    Args:
        mesh (FlatMesh): Mesh to write.
        path (str): Output file, overwritten if it exists.
        compression (str): h5py dataset compression (default: "gzip").
    """
    with h5py.File(str(path), "w") as f:
        f.attrs["corner_count"] = mesh.corner_count
        for name, data in _buffers(mesh).items():
            f.create_dataset(name, data=data, compression=compression)


def load_h5(path):
    with h5py.File(str(path), "r") as f:
        mesh = _from_buffers({name: f[name][()] for name in BUFFER_NAMES})
        _check_corner_count(mesh, int(f.attrs["corner_count"]), path)
    return mesh


def _check_corner_count(mesh, corner_count, path):
    if mesh.corner_count != corner_count:
        raise ValueError(
            f"{path} declares {corner_count} corners but holds {mesh.corner_count}."
        )
