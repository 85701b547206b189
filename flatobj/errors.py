class ObjError(Exception):
    r"""Base class for every failure raised while loading an OBJ file.

    ``line`` is the 1-based line of the record that failed, when known. It is
    filled in by the scanner as the error propagates out of a record parser.
    """

    def __init__(self, message, line=None):
        super().__init__(message)
        self.message = message
        self.line = line
        self.path = None

    def __str__(self):
        if self.line is None:
            return self.message
        return f"line {self.line}: {self.message}"


class ObjReadError(ObjError):
    """The file could not be opened, read or decoded."""


class CapacityExceededError(ObjError):
    r"""More records of one kind were declared than the caller allowed.

    Args:
        kind (str): Which record kind overflowed (``"vertices"``,
            ``"normals"``, ``"texcoords"`` or ``"indices"``).
        limit (int): The maximum that was exceeded.
    """

    def __init__(self, kind, limit, line=None):
        super().__init__(
            f"Exceeded maximum number of {kind} ({limit}) while parsing OBJ file",
            line=line,
        )
        self.kind = kind
        self.limit = limit


class MalformedNumberError(ObjError):
    """A coordinate field is missing, has an invalid character or is unparseable."""


class MalformedIndexGroupError(ObjError):
    """A ``v/t/n`` group is missing a component or holds a zero index."""


class MalformedFaceError(ObjError):
    """A face line does not hold exactly three index groups."""


class IndexOutOfRangeError(ObjError):
    """A face corner references a record that was never declared."""


class UnexpectedEndOfBufferError(ObjError):
    """The buffer ended in the middle of a record."""
