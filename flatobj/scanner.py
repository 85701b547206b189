import logging

import numpy as np

from .cursor import Cursor
from .errors import CapacityExceededError, MalformedNumberError, ObjError
from .faces import CORNERS_PER_FACE, parse_face
from .vectors import parse_vec2, parse_vec3

logger = logging.getLogger(__name__)

POSITION_PREFIX = "v "
TEXCOORD_PREFIX = "vt"
NORMAL_PREFIX = "vn"
FACE_PREFIX = "f "


class ScratchGeometry(object):
    r"""Fixed-capacity storage filled by a single scan.

    Every array is allocated once from the load limits. Going past a
    capacity raises ``CapacityExceededError``; nothing is ever reallocated.
    The ``reserve_*`` checks run before a record is parsed, the ``add_*``
    methods store it.

    Args:
        limits (LoadLimits): Capacities of the four record kinds.
    """

    def __init__(self, limits):
        self.limits = limits
        self.positions = np.zeros((limits.max_vertices, 3), dtype=np.float32)
        self.normals = np.zeros((limits.max_normals, 3), dtype=np.float32)
        self.texcoords = np.zeros((limits.max_texcoords, 2), dtype=np.float32)
        # One (position, texcoord, normal) row per face corner.
        self.corners = np.zeros((limits.max_indices, 3), dtype=np.int64)
        self.num_positions = 0
        self.num_normals = 0
        self.num_texcoords = 0
        self.num_corners = 0

    def reserve_position(self):
        if self.num_positions >= self.limits.max_vertices:
            raise CapacityExceededError("vertices", self.limits.max_vertices)

    def add_position(self, xyz):
        self.reserve_position()
        self.positions[self.num_positions] = xyz
        self.num_positions += 1

    def reserve_normal(self):
        if self.num_normals >= self.limits.max_normals:
            raise CapacityExceededError("normals", self.limits.max_normals)

    def add_normal(self, xyz):
        self.reserve_normal()
        self.normals[self.num_normals] = xyz
        self.num_normals += 1

    def reserve_texcoord(self):
        if self.num_texcoords >= self.limits.max_texcoords:
            raise CapacityExceededError("texture coords", self.limits.max_texcoords)

    def add_texcoord(self, uv):
        self.reserve_texcoord()
        self.texcoords[self.num_texcoords] = uv
        self.num_texcoords += 1

    def reserve_face(self):
        if self.num_corners + CORNERS_PER_FACE > self.limits.max_indices:
            raise CapacityExceededError("indices", self.limits.max_indices)

    def add_face(self, corners):
        self.reserve_face()
        end = self.num_corners + CORNERS_PER_FACE
        self.corners[self.num_corners:end] = corners
        self.num_corners = end

    @property
    def num_faces(self):
        return self.num_corners // CORNERS_PER_FACE


def scan(text, limits):
    r"""Run the single forward pass over an OBJ buffer.

    Each line is classified by its first two characters and routed to the
    matching record parser. Lines of any other kind are skipped unread.
    The first error aborts the scan.

    Args:
        text (str): Whole contents of the OBJ file.
        limits (LoadLimits): Capacities for the scratch storage.

    Returns:
        (ScratchGeometry): The declared records and the face corners.

    Raises:
        ObjError: On the first malformed record or exceeded capacity, with
            ``line`` set to the offending line.
    """
    scratch = ScratchGeometry(limits)
    cursor = Cursor(text)
    while not cursor.at_end():
        line_start = cursor.position
        try:
            _scan_line(cursor, scratch)
        except ObjError as err:
            if err.line is None:
                err.line = Cursor(text, line_start).line_number()
            raise
    logger.debug(
        "Scanned %d vertices, %d normals, %d texture coords, %d faces",
        scratch.num_positions,
        scratch.num_normals,
        scratch.num_texcoords,
        scratch.num_faces,
    )
    return scratch


def _scan_line(cursor, scratch):
    prefix = cursor.peek() + cursor.peek(1)
    if prefix == POSITION_PREFIX:
        scratch.reserve_position()
        cursor.advance(2)
        scratch.add_position(parse_vec3(cursor, "vertex"))
    elif prefix == TEXCOORD_PREFIX:
        scratch.reserve_texcoord()
        _skip_prefix(cursor)
        scratch.add_texcoord(parse_vec2(cursor, "texture coord"))
    elif prefix == NORMAL_PREFIX:
        scratch.reserve_normal()
        _skip_prefix(cursor)
        scratch.add_normal(parse_vec3(cursor, "normal"))
    elif prefix == FACE_PREFIX:
        scratch.reserve_face()
        cursor.advance(2)
        scratch.add_face(parse_face(cursor))
    else:
        cursor.skip_line()
        return
    # Step over the terminator the record parser stopped on.
    cursor.advance()


def _skip_prefix(cursor):
    # Two-letter prefixes ("vt", "vn") must be followed by a single space.
    if cursor.peek(2) != " ":
        raise MalformedNumberError(
            f"Expected a space after {cursor.peek() + cursor.peek(1)!r} record prefix"
        )
    cursor.advance(3)
