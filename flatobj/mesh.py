import jax.numpy as jnp

from .utils.asserts import assert_flat


class FlatMesh(object):
    r"""Non-indexed triangle list: one position, normal and texcoord per corner.

    Corners are stored in face order, three per triangle, so corners shared
    between faces appear once per face. The buffers are flat float32 arrays
    ready to be uploaded as vertex attributes.

    Args:
        positions (jnp.ndarray): Corner positions (shape: :math:`(3N)`).
        normals (jnp.ndarray): Corner normals (shape: :math:`(3N)`).
        texcoords (jnp.ndarray): Corner texture coordinates (shape: :math:`(2N)`).
    """

    def __init__(self, positions, normals, texcoords):
        num_positions = assert_flat(positions, "positions", 3)
        num_normals = assert_flat(normals, "normals", 3)
        num_texcoords = assert_flat(texcoords, "texcoords", 2)
        if not num_positions == num_normals == num_texcoords:
            raise ValueError(
                "positions, normals and texcoords must describe the same number of"
                f" corners. Got {num_positions}, {num_normals} and {num_texcoords}."
            )
        self.positions = positions
        self.normals = normals
        self.texcoords = texcoords

    def __repr__(self):
        return f"FlatMesh(corner_count={self.corner_count})"

    @property
    def corner_count(self):
        return self.positions.shape[0] // 3

    @property
    def triangle_count(self):
        return self.corner_count // 3

    def as_vectors(self):
        r"""Return the buffers as per-corner rows.

        Returns:
            (tuple): positions :math:`(N, 3)`, normals :math:`(N, 3)` and
            texcoords :math:`(N, 2)`.
        """
        return (
            self.positions.reshape(-1, 3),
            self.normals.reshape(-1, 3),
            self.texcoords.reshape(-1, 2),
        )

    def interleaved(self):
        """Per-corner ``(x, y, z, nx, ny, nz, u, v)`` rows, shape :math:`(N, 8)`."""
        return jnp.concatenate(self.as_vectors(), axis=-1)

    @classmethod
    def from_obj(cls, path, max_vertices, max_normals, max_indices, max_texcoords=None):
        """Load an OBJ file, raising ``ObjError`` on failure."""
        from .loader import load_or_raise

        return load_or_raise(path, max_vertices, max_normals, max_indices, max_texcoords)
