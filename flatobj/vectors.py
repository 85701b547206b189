import numpy as np

from .cursor import LINE_END
from .errors import MalformedNumberError, UnexpectedEndOfBufferError
from .scalars import to_float

FIELD_SEPARATOR = " "
VALID_VECTOR_CHARS = frozenset("0123456789-.")
FLOAT32_MAX = float(np.finfo(np.float32).max)

VEC3_COMPONENTS = ("x", "y", "z")
VEC2_COMPONENTS = ("u", "v")


def parse_vector(cursor, components, what):
    r"""Parse the space separated fields of a ``v``, ``vn`` or ``vt`` line.

    The cursor must sit on the first character after the record prefix and
    its separating space. On success it is left on the line terminator.

    Args:
        cursor (Cursor): Shared scan cursor.
        components (tuple): Names of the expected fields, in order.
        what (str): Record description used in error messages.

    Returns:
        (tuple): One float per component.

    Raises:
        MalformedNumberError: On an invalid character, a missing or extra
            field, or a field that is not a number.
        UnexpectedEndOfBufferError: If the buffer ends before the terminator.
    """
    bounds = []
    field_start = cursor.position
    while not cursor.at_end():
        char = cursor.peek()
        if char == FIELD_SEPARATOR:
            if len(bounds) == len(components) - 1:
                raise MalformedNumberError(
                    f"Unexpected component after {components[-1]} in OBJ {what} line"
                )
            bounds.append((field_start, cursor.position))
            field_start = cursor.position + 1
        elif char == LINE_END:
            if len(bounds) < len(components) - 1:
                raise MalformedNumberError(
                    f"Reached end of OBJ {what} line without parsing the "
                    f"{components[len(bounds) + 1]} element"
                )
            bounds.append((field_start, cursor.position))
            return tuple(
                _convert(cursor.buffer, start, end, name, what)
                for (start, end), name in zip(bounds, components)
            )
        elif char not in VALID_VECTOR_CHARS:
            raise MalformedNumberError(
                f"Invalid character encountered when parsing OBJ {what}: {char!r}"
            )
        cursor.advance()
    raise UnexpectedEndOfBufferError(f"Reached end of OBJ file while parsing a {what}")


def _convert(buffer, start, end, name, what):
    try:
        value = to_float(buffer, start, end)
    except MalformedNumberError as err:
        raise MalformedNumberError(
            f"Bad {name} element of OBJ {what}: {err.message}"
        ) from None
    # Scratch storage is float32; larger magnitudes would be stored as inf.
    if abs(value) > FLOAT32_MAX:
        raise MalformedNumberError(
            f"Bad {name} element of OBJ {what}: {buffer[start:end]!r} is out of float32 range"
        )
    return value


def parse_vec3(cursor, what="vertex/normal"):
    """Parse the three coordinates of a position or normal line."""
    return parse_vector(cursor, VEC3_COMPONENTS, what)


def parse_vec2(cursor, what="texture coord"):
    """Parse the two coordinates of a texture-coordinate line."""
    return parse_vector(cursor, VEC2_COMPONENTS, what)
