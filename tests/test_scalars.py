import pytest

from flatobj.errors import MalformedNumberError
from flatobj.scalars import to_float, to_uint


def test_to_float_slice():
    buffer = "v 1.5 -2.25 3\n"
    assert to_float(buffer, 2, 5) == 1.5
    assert to_float(buffer, 6, 11) == -2.25
    assert to_float(buffer, 12, 13) == 3.0


def test_to_float_has_no_width_cap():
    text = "0.12345678901234567890"
    assert to_float(text, 0, len(text)) == pytest.approx(0.12345678901234567890)


def test_to_float_rejects_garbage():
    # A malformed field is an error, not a silent zero.
    pytest.raises(MalformedNumberError, to_float, "1.2.3", 0, 5)
    pytest.raises(MalformedNumberError, to_float, "-", 0, 1)
    pytest.raises(MalformedNumberError, to_float, "abc", 1, 1)


def test_to_uint():
    assert to_uint("f 12/3/4", 2, 4) == 12
    assert to_uint("0", 0, 1) == 0


def test_to_uint_rejects_non_digits():
    pytest.raises(MalformedNumberError, to_uint, "-1", 0, 2)
    pytest.raises(MalformedNumberError, to_uint, " 1", 0, 2)
    pytest.raises(MalformedNumberError, to_uint, "", 0, 0)
