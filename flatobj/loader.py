r"""Loader for a narrow, triangulated subset of Wavefront OBJ.

Only ``v x y z``, ``vt u v``, ``vn x y z`` and ``f v/t/n v/t/n v/t/n`` lines
are read, everything else is skipped. The caller declares the maximum number
of records up front; storage is sized once from those maxima and the load
fails if the file declares more. Any malformed record fails the whole load,
there is no partial result.
"""

import logging

from .assemble import assemble
from .config import LoadLimits
from .errors import ObjError, ObjReadError
from .scanner import scan
from .utils.defaults import Defaults

logger = logging.getLogger(__name__)


def read_text(path, encoding=Defaults.ENCODING):
    """Read the whole file into memory."""
    try:
        with open(str(path), "r", encoding=encoding) as f:
            return f.read()
    except OSError as err:
        raise ObjReadError(f"Could not open {path}: {err.strerror or err}") from err
    except UnicodeDecodeError as err:
        raise ObjReadError(f"Could not decode {path} as {encoding}: {err.reason}") from err


def loads(text, max_vertices, max_normals, max_indices, max_texcoords=None):
    r"""Parse OBJ text that is already in memory.

    Args:
        text (str): OBJ file contents.
        max_vertices (int): Maximum number of ``v`` records.
        max_normals (int): Maximum number of ``vn`` records.
        max_indices (int): Maximum number of face corners (3 per triangle).
        max_texcoords (int): Maximum number of ``vt`` records; defaults to
            ``max_indices``.

    Returns:
        (FlatMesh): The flattened triangle list.

    Raises:
        ObjError: On the first malformed record or exceeded capacity.
    """
    limits = LoadLimits(max_vertices, max_normals, max_indices, max_texcoords)
    return assemble(scan(text, limits))


def load_or_raise(path, max_vertices, max_normals, max_indices, max_texcoords=None):
    """Like ``load``, but raise ``ObjError`` instead of returning None."""
    text = read_text(path)
    try:
        return loads(text, max_vertices, max_normals, max_indices, max_texcoords)
    except ObjError as err:
        err.path = str(path)
        raise


def load(path, max_vertices, max_normals, max_indices, max_texcoords=None):
    r"""Load an OBJ file into flat position, normal and texcoord buffers.

    Failures are reported on the ``flatobj`` logger and signalled by a
    ``None`` return value. Use ``load_or_raise`` to get the exception.

    Returns:
        (FlatMesh or None): The mesh, or None if the load failed.
    """
    try:
        mesh = load_or_raise(path, max_vertices, max_normals, max_indices, max_texcoords)
    except ObjError as err:
        logger.error("Failed to load %s: %s", path, err)
        return None
    logger.debug("Loaded %s: %d corners", path, mesh.corner_count)
    return mesh
