import logging
from pathlib import Path

import yaml

from .utils.defaults import Defaults

logger = logging.getLogger(__name__)

LIMIT_KEYS = ("max_vertices", "max_normals", "max_indices", "max_texcoords")


class LoadLimits(object):
    r"""Caller-declared upper bounds on the records of one OBJ file.

    Args:
        max_vertices (int): Maximum number of ``v`` records.
        max_normals (int): Maximum number of ``vn`` records.
        max_indices (int): Maximum number of face corners (3 per face).
        max_texcoords (int): Maximum number of ``vt`` records. Falls back to
            ``max_indices`` when ``None`` (default: None).
    """

    def __init__(
        self,
        max_vertices=Defaults.MAX_VERTICES,
        max_normals=Defaults.MAX_NORMALS,
        max_indices=Defaults.MAX_INDICES,
        max_texcoords=None,
    ):
        # Only an explicit texcoord bound stays put when max_indices is replaced.
        self.texcoords_explicit = max_texcoords is not None
        if max_texcoords is None:
            max_texcoords = max_indices
        self.max_vertices = _check_limit("max_vertices", max_vertices)
        self.max_normals = _check_limit("max_normals", max_normals)
        self.max_indices = _check_limit("max_indices", max_indices)
        self.max_texcoords = _check_limit("max_texcoords", max_texcoords)

    def __repr__(self):
        fields = ", ".join(f"{key}={getattr(self, key)}" for key in LIMIT_KEYS)
        return f"LoadLimits({fields})"

    def __eq__(self, other):
        if not isinstance(other, LoadLimits):
            return NotImplemented
        return self.as_dict() == other.as_dict()

    def as_dict(self):
        return {key: getattr(self, key) for key in LIMIT_KEYS}

    def replace(self, **overrides):
        """Return a copy with the given (non-None) limits replaced."""
        values = self.as_dict()
        if not self.texcoords_explicit:
            values["max_texcoords"] = None
        values.update({k: v for k, v in overrides.items() if v is not None})
        return LoadLimits(**values)

    @classmethod
    def from_dict(cls, values):
        unknown = sorted(set(values) - set(LIMIT_KEYS))
        if unknown:
            raise ValueError(f"Unknown load limit(s): {', '.join(unknown)}")
        return cls(**values)

    @classmethod
    def from_yaml(cls, path):
        r"""Read limits from a YAML mapping such as::

            max_vertices: 1024
            max_normals: 1024
            max_indices: 6144

        Missing keys take their defaults.
        """
        with open(str(path), "r") as f:
            values = yaml.safe_load(f)
        if values is None:
            values = {}
        if not isinstance(values, dict):
            raise ValueError(
                f"Expected a mapping of load limits in {path}. Got {type(values)} instead."
            )
        logger.debug("Read load limits from %s: %s", Path(path), values)
        return cls.from_dict(values)


def _check_limit(name, value):
    if isinstance(value, bool) or not isinstance(value, int):
        raise ValueError(f"{name} must be an integer. Got {value!r} instead.")
    if value < 0:
        raise ValueError(f"{name} must be non-negative. Got {value} instead.")
    return value
