from .errors import MalformedNumberError

DIGITS = frozenset("0123456789")


def to_float(buffer, start, end):
    r"""Convert ``buffer[start:end]`` to a float.

    The slice is handed straight to ``float``, so there is no width limit.
    Unlike C's ``atof`` a malformed field is an error, never a silent zero.

    Args:
        buffer (str): Text being parsed.
        start (int): First offset of the field.
        end (int): One past the last offset of the field.

    Returns:
        (float): The converted value.

    Raises:
        MalformedNumberError: If the field is empty or not a decimal number.
    """
    text = buffer[start:end]
    if not text:
        raise MalformedNumberError("Empty numeric field")
    try:
        return float(text)
    except ValueError:
        raise MalformedNumberError(f"Could not convert {text!r} to a float") from None


def to_uint(buffer, start, end):
    r"""Convert ``buffer[start:end]`` to a non-negative integer.

    Only decimal digits are accepted; signs and whitespace are rejected.

    Raises:
        MalformedNumberError: If the field is empty or holds a non-digit.
    """
    text = buffer[start:end]
    if not text:
        raise MalformedNumberError("Empty integer field")
    for char in text:
        if char not in DIGITS:
            raise MalformedNumberError(
                f"Invalid character {char!r} in integer field {text!r}"
            )
    return int(text)
