import jax.numpy as jnp
import numpy as np

from .errors import IndexOutOfRangeError
from .faces import CORNERS_PER_FACE
from .mesh import FlatMesh

POSITION, TEXCOORD, NORMAL = range(3)


def assemble(scratch):
    r"""Expand the recorded corners into flat per-corner attribute buffers.

    Each corner carries three independent indices, so a single shared
    index cannot describe it. Instead every corner gets its own copy of the
    position, texcoord and normal it references. No welding is done.

    Args:
        scratch (ScratchGeometry): Result of a successful scan.

    Returns:
        (FlatMesh): Buffers with exactly ``scratch.num_corners`` entries each.

    Raises:
        IndexOutOfRangeError: If a corner references an undeclared record.
    """
    corners = scratch.corners[: scratch.num_corners]
    _check_range(corners[:, POSITION], scratch.num_positions, "vertex")
    _check_range(corners[:, TEXCOORD], scratch.num_texcoords, "texture coord")
    _check_range(corners[:, NORMAL], scratch.num_normals, "normal")

    positions = scratch.positions[corners[:, POSITION]].reshape(-1)
    texcoords = scratch.texcoords[corners[:, TEXCOORD]].reshape(-1)
    normals = scratch.normals[corners[:, NORMAL]].reshape(-1)
    return FlatMesh(jnp.asarray(positions), jnp.asarray(normals), jnp.asarray(texcoords))


def _check_range(indices, count, kind):
    bad = np.flatnonzero(indices >= count)
    if bad.size:
        corner = int(bad[0])
        raise IndexOutOfRangeError(
            f"Face {corner // CORNERS_PER_FACE + 1} references {kind} "
            f"{int(indices[corner]) + 1}, but only {count} were declared"
        )
