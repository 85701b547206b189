from collections import namedtuple

import numpy as np

from .cursor import LINE_END
from .errors import (
    MalformedFaceError,
    MalformedIndexGroupError,
    MalformedNumberError,
    UnexpectedEndOfBufferError,
)
from .scalars import to_uint

GROUP_SEPARATOR = " "
INDEX_SEPARATOR = "/"
CORNERS_PER_FACE = 3
# Largest index the int64 corner scratch can hold.
MAX_INDEX = int(np.iinfo(np.int64).max)

# 0-based indices of one face corner into the position, texcoord and normal lists.
Corner = namedtuple("Corner", ["position", "texcoord", "normal"])


def parse_index_group(cursor):
    r"""Parse one ``v/t/n`` index group of a face line.

    OBJ indices are 1-based, so a decoded zero can only come from a missing
    or invalid field and is rejected. Valid indices are shifted to 0-based.
    Texture and normal indices are optional in OBJ but required here.

    Args:
        cursor (Cursor): Scan cursor, positioned on the first digit of the
            group. Left on the space or line terminator ending the group.

    Returns:
        (Corner): 0-based position, texcoord and normal indices.

    Raises:
        MalformedIndexGroupError: If a component is missing, zero or invalid.
        UnexpectedEndOfBufferError: If the buffer ends inside the group.
    """
    start = cursor.position
    slashes = []
    while not cursor.at_end():
        char = cursor.peek()
        if char == INDEX_SEPARATOR:
            if len(slashes) == 2:
                raise MalformedIndexGroupError(
                    "OBJ index group has more than three components"
                )
            slashes.append(cursor.position)
        elif char == GROUP_SEPARATOR or char == LINE_END:
            if not slashes:
                raise MalformedIndexGroupError(
                    "Reached end of OBJ index group without parsing the texture index"
                )
            if len(slashes) == 1:
                raise MalformedIndexGroupError(
                    "Reached end of OBJ index group without parsing the normal index"
                )
            end = cursor.position
            return Corner(
                _to_index(cursor.buffer, start, slashes[0], "Vertex"),
                _to_index(cursor.buffer, slashes[0] + 1, slashes[1], "Texture"),
                _to_index(cursor.buffer, slashes[1] + 1, end, "Normal"),
            )
        cursor.advance()
    raise UnexpectedEndOfBufferError("Reached end of OBJ file while parsing an index group")


def _to_index(buffer, start, end, name):
    try:
        value = to_uint(buffer, start, end)
    except MalformedNumberError:
        value = 0
    if value == 0:
        raise MalformedIndexGroupError(
            f"{name} index of OBJ index group was either missing or invalid: "
            f"{buffer[start:end]!r}"
        )
    if value > MAX_INDEX:
        raise MalformedIndexGroupError(
            f"{name} index of OBJ index group is too large: {buffer[start:end]!r}"
        )
    return value - 1


def parse_face(cursor):
    r"""Parse the three index groups of a triangulated face line.

    The cursor must sit on the first character of the first group. On
    success it is left on the line terminator.

    Returns:
        (tuple): Three ``Corner`` records, in file order.

    Raises:
        MalformedFaceError: If the line holds fewer or more than three groups.
    """
    corners = []
    for _ in range(CORNERS_PER_FACE):
        if corners:
            if cursor.peek() == LINE_END:
                raise MalformedFaceError(
                    f"Reached end of OBJ face line after {len(corners)} index "
                    "group(s), only triangles are supported"
                )
            cursor.advance()
        corners.append(parse_index_group(cursor))
    if cursor.peek() != LINE_END:
        raise MalformedFaceError(
            "Parsed 3 OBJ index groups in current face without reaching a newline, "
            "the OBJ file may have non-triangulated geometry which is not supported, "
            "or the OBJ file may be corrupted"
        )
    return tuple(corners)
