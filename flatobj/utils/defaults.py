class Defaults(object):
    r"""Default capacities used when the caller (or a config file) gives none.

    Scratch storage is sized once from these maxima and never grown.
    """

    # Maximum number of position ("v") records.
    MAX_VERTICES = 65536

    # Maximum number of normal ("vn") records.
    MAX_NORMALS = 65536

    # Maximum number of face corners, i.e. 3 x triangles. Also bounds the
    # number of texture-coordinate ("vt") records unless given separately.
    MAX_INDICES = 196608

    # Text encoding of OBJ files.
    ENCODING = "utf-8"

    # Compression used when writing HDF5 exports.
    H5_COMPRESSION = "gzip"
