from .config import LoadLimits
from .errors import (
    CapacityExceededError,
    IndexOutOfRangeError,
    MalformedFaceError,
    MalformedIndexGroupError,
    MalformedNumberError,
    ObjError,
    ObjReadError,
    UnexpectedEndOfBufferError,
)
from .loader import load, load_or_raise, loads
from .mesh import FlatMesh

__version__ = "0.1.0"
