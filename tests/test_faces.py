import pytest

from flatobj.cursor import Cursor
from flatobj.errors import (
    MalformedFaceError,
    MalformedIndexGroupError,
    UnexpectedEndOfBufferError,
)
from flatobj.faces import Corner, parse_face, parse_index_group


def test_index_group_is_zero_based():
    cursor = Cursor("12/2/17 ")
    assert parse_index_group(cursor) == Corner(11, 1, 16)
    assert cursor.peek() == " "


def test_index_group_ends_at_newline():
    cursor = Cursor("1/1/1\n")
    assert parse_index_group(cursor) == Corner(0, 0, 0)
    assert cursor.peek() == "\n"


def test_index_group_missing_components():
    with pytest.raises(MalformedIndexGroupError, match="normal index"):
        parse_index_group(Cursor("1/1 "))
    with pytest.raises(MalformedIndexGroupError, match="texture index"):
        parse_index_group(Cursor("1 "))
    with pytest.raises(MalformedIndexGroupError, match="Texture index"):
        parse_index_group(Cursor("1//1\n"))
    with pytest.raises(MalformedIndexGroupError, match="Normal index"):
        parse_index_group(Cursor("1/1/\n"))


def test_index_group_zero_or_invalid():
    with pytest.raises(MalformedIndexGroupError, match="Vertex index"):
        parse_index_group(Cursor("0/1/1 "))
    pytest.raises(MalformedIndexGroupError, parse_index_group, Cursor("-1/1/1 "))
    pytest.raises(MalformedIndexGroupError, parse_index_group, Cursor("1/a/1 "))
    pytest.raises(MalformedIndexGroupError, parse_index_group, Cursor("1/1/1/1 "))


def test_index_group_unterminated():
    pytest.raises(UnexpectedEndOfBufferError, parse_index_group, Cursor("1/1/1"))


def test_parse_face():
    cursor = Cursor("1/1/1 2/2/1 3/3/1\n")
    corners = parse_face(cursor)
    assert corners == (Corner(0, 0, 0), Corner(1, 1, 0), Corner(2, 2, 0))
    assert cursor.peek() == "\n"


def test_face_with_four_groups():
    with pytest.raises(MalformedFaceError, match="non-triangulated"):
        parse_face(Cursor("1/1/1 2/2/2 3/3/3 4/4/4\n"))


def test_face_with_two_groups():
    with pytest.raises(MalformedFaceError, match="only triangles"):
        parse_face(Cursor("1/1/1 2/2/2\n"))


def test_face_propagates_group_errors():
    pytest.raises(MalformedIndexGroupError, parse_face, Cursor("1/1 2/2/2 3/3/3\n"))
    pytest.raises(MalformedIndexGroupError, parse_face, Cursor("1/1/1 0/1/1 3/3/3\n"))


def test_index_group_too_large():
    # Larger than the int64 corner storage can hold.
    with pytest.raises(MalformedIndexGroupError, match="too large"):
        parse_index_group(Cursor("99999999999999999999/1/1 "))
    with pytest.raises(MalformedIndexGroupError, match="Normal index"):
        parse_index_group(Cursor("1/1/99999999999999999999\n"))
