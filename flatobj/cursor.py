from .errors import UnexpectedEndOfBufferError

LINE_END = "\n"


class Cursor(object):
    r"""A forward-only, bounds-checked position inside a text buffer.

    All record parsers share a single cursor. Reads past the end of the
    buffer return an empty string from ``peek`` and raise from ``advance``,
    so no parser ever indexes the buffer directly.

    Args:
        buffer (str): Decoded contents of the OBJ file.
        position (int): Initial offset (default: 0).
    """

    def __init__(self, buffer, position=0):
        if position < 0 or position > len(buffer):
            raise ValueError(
                f"Cursor position {position} outside buffer of length {len(buffer)}"
            )
        self.buffer = buffer
        self.position = position

    def __len__(self):
        return len(self.buffer)

    def at_end(self):
        return self.position >= len(self.buffer)

    def peek(self, offset=0):
        """Return the character ``offset`` places ahead, or ``""`` past the end."""
        index = self.position + offset
        if index < 0 or index >= len(self.buffer):
            return ""
        return self.buffer[index]

    def advance(self, count=1):
        if self.position + count > len(self.buffer):
            raise UnexpectedEndOfBufferError(
                f"Reached end of OBJ buffer while advancing {count} character(s)"
            )
        self.position += count

    def find_line_end(self):
        r"""Offset of the next line terminator at or after the cursor.

        Raises:
            UnexpectedEndOfBufferError: If the buffer has no further terminator.
        """
        index = self.buffer.find(LINE_END, self.position)
        if index == -1:
            raise UnexpectedEndOfBufferError(
                "Reached end of OBJ buffer while seeking end of line"
            )
        return index

    def skip_line(self):
        """Move to the start of the next line; returns False if there is none."""
        index = self.buffer.find(LINE_END, self.position)
        if index == -1:
            self.position = len(self.buffer)
            return False
        self.position = index + 1
        return True

    def line_number(self):
        # Counted on demand, only diagnostics need it.
        return self.buffer.count(LINE_END, 0, self.position) + 1
