# Example script that loads a triangulated OBJ and reports what would be
# uploaded to the GPU for it.

import argparse
from pathlib import Path

import jax.numpy as jnp

from flatobj import load

if __name__ == "__main__":

    parser = argparse.ArgumentParser()
    parser.add_argument(
        "--obj",
        type=str,
        default=str(Path(__file__).parent / "sampledata" / "cube.obj"),
        help="OBJ file to load.",
    )
    parser.add_argument(
        "--max-vertices", type=int, default=8, help="Maximum number of positions."
    )
    parser.add_argument(
        "--max-normals", type=int, default=6, help="Maximum number of normals."
    )
    parser.add_argument(
        "--max-indices",
        type=int,
        default=36,
        help="Maximum number of face corners (3 per triangle).",
    )
    args = parser.parse_args()

    mesh = load(args.obj, args.max_vertices, args.max_normals, args.max_indices)
    if mesh is None:
        raise SystemExit(1)

    positions, normals, _ = mesh.as_vectors()
    print(f"Triangles: {mesh.triangle_count}, corners: {mesh.corner_count}")
    print("Bounding box min:", positions.min(axis=0))
    print("Bounding box max:", positions.max(axis=0))
    # Normals of a well-formed mesh are unit length.
    lengths = jnp.linalg.norm(normals, axis=-1)
    print("Max normal length deviation:", float(jnp.abs(lengths - 1.0).max()))

    buffers = (mesh.positions, mesh.normals, mesh.texcoords)
    nbytes = sum(buf.size * buf.dtype.itemsize for buf in buffers)
    print(f"Vertex buffer size: {nbytes} bytes")
