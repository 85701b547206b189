# Command line front end: load OBJ files and optionally export the flat buffers.

import argparse
import json
import logging
import os
from pathlib import Path

from tqdm import tqdm

from .config import LoadLimits
from .errors import ObjError
from .loader import load_or_raise
from .utils.serialize import save_h5, save_npz

logger = logging.getLogger(__name__)

EXPORTERS = {"npz": save_npz, "h5": save_h5}


def get_parser():
    parser = argparse.ArgumentParser(
        prog="flatobj",
        description="Load triangulated OBJ files into flat position/normal/texcoord buffers.",
    )
    parser.add_argument("paths", nargs="+", help="OBJ files to load.")
    parser.add_argument(
        "--config",
        type=str,
        default=None,
        help="YAML file with max_vertices/max_normals/max_indices/max_texcoords.",
    )
    parser.add_argument(
        "--max-vertices",
        type=int,
        default=None,
        help="Maximum number of position (v) records per file.",
    )
    parser.add_argument(
        "--max-normals",
        type=int,
        default=None,
        help="Maximum number of normal (vn) records per file.",
    )
    parser.add_argument(
        "--max-indices",
        type=int,
        default=None,
        help="Maximum number of face corners (3 per triangle) per file.",
    )
    parser.add_argument(
        "--max-texcoords",
        type=int,
        default=None,
        help="Maximum number of texture coordinate (vt) records per file"
        " (default: same as --max-indices).",
    )
    parser.add_argument(
        "--out-dir",
        type=str,
        default=None,
        help="Directory to write the flattened buffers to. Nothing is written if unset.",
    )
    parser.add_argument(
        "--format",
        type=str,
        choices=sorted(EXPORTERS),
        default="npz",
        help="Export format used with --out-dir.",
    )
    parser.add_argument("--verbose", action="store_true", help="Log scan statistics.")
    return parser


def get_limits(args):
    limits = LoadLimits.from_yaml(args.config) if args.config else LoadLimits()
    return limits.replace(
        max_vertices=args.max_vertices,
        max_normals=args.max_normals,
        max_indices=args.max_indices,
        max_texcoords=args.max_texcoords,
    )


def main(argv=None):
    args = get_parser().parse_args(argv)
    logging.basicConfig(
        format="%(levelname)s - %(message)s",
        level=logging.DEBUG if args.verbose else logging.INFO,
    )

    try:
        limits = get_limits(args)
    except (OSError, ValueError) as err:
        logger.error("Invalid load limits: %s", err)
        return 2
    logger.debug("Using %s", limits)

    if args.out_dir is not None:
        os.makedirs(args.out_dir, exist_ok=True)
        with open(os.path.join(args.out_dir, "args.json"), "w") as f:
            json.dump(args.__dict__, f, indent=2)

    failures = 0
    for path in tqdm(args.paths, disable=len(args.paths) < 2):
        try:
            mesh = load_or_raise(
                path,
                limits.max_vertices,
                limits.max_normals,
                limits.max_indices,
                limits.max_texcoords,
            )
        except ObjError as err:
            logger.error("Failed to load %s: %s", path, err)
            failures += 1
            continue

        print(f"{path}: {mesh.triangle_count} triangles, {mesh.corner_count} corners")
        if args.out_dir is not None:
            outfile = os.path.join(args.out_dir, f"{Path(path).stem}.{args.format}")
            try:
                EXPORTERS[args.format](mesh, outfile)
            except OSError as err:
                logger.error("Failed to write %s: %s", outfile, err)
                failures += 1
                continue
            logger.debug("Wrote %s", outfile)

    return 1 if failures else 0
