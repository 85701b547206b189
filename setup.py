import logging
import os

from setuptools import find_packages, setup

PACKAGE_NAME = "flatobj"
VERSION = "0.1.0"
DESCRIPTION = "flatobj: Minimal loader for triangulated Wavefront OBJ files"
URL = "<url.to.go.in.here>"
AUTHOR = "Krishna Murthy Jatavallabhula"
LICENSE = "(TBD)"
DOWNLOAD_URL = ""
LONG_DESCRIPTION = """
Loads a narrow, predictable subset of Wavefront OBJ (positions, normals,
texture coordinates and triangulated faces) into flat, render-ready arrays.
Pure Python, numpy and JAX; no model-import library required.
"""
CLASSIFIERS = [
    "Intended Audience :: Developers",
    "Intended Audience :: Education",
    "Intended Audience :: Science/Research",
    "Operating System :: POSIX :: Linux",
    "Programming Language :: Python :: 3 :: Only",
    "License :: OSI Approved :: MIT",
    "Topic :: Software Development :: Libraries",
]

cwd = os.path.dirname(os.path.abspath(__file__))
logger = logging.getLogger()
logging.basicConfig(format="%(levelname)s - %(message)s")


def get_requirements():
    return [
        "jax",
        "jaxlib",
        "numpy",
        "pyyaml",
        "h5py",
        "tqdm",
    ]


if __name__ == "__main__":
    setup(
        # Metadata
        name=PACKAGE_NAME,
        version=VERSION,
        author=AUTHOR,
        description=DESCRIPTION,
        url=URL,
        long_description=LONG_DESCRIPTION,
        licence=LICENSE,
        python_requires=">=3.9",
        # Package info
        packages=find_packages(exclude=("docs", "tests", "examples")),
        install_requires=get_requirements(),
        extras_require={"test": ["pytest"]},
        entry_points={"console_scripts": ["flatobj=flatobj.cli:main"]},
        zip_safe=True,
        classifiers=CLASSIFIERS,
    )
