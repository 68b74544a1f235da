"""
Build script for svgattrs.

The package is pure Python by default. Setting SVGATTRS_USE_MYPYC=1 compiles
the name lookup with mypyc:

    SVGATTRS_USE_MYPYC=1 pip install .[mypyc]
"""

import os
import sys

from setuptools import setup

# attributes.py stays interpreted: mypyc rejects Enum classes with a custom __new__
COMPILED_MODULE = "src/svgattrs/lookup.py"


def compiled_extensions():
    if os.environ.get("SVGATTRS_USE_MYPYC", "0") != "1":
        return []
    try:
        from mypyc.build import mypycify
    except ImportError:
        sys.exit("SVGATTRS_USE_MYPYC=1 needs mypyc: pip install svgattrs[mypyc]")
    return mypycify([COMPILED_MODULE], opt_level=os.environ.get("MYPYC_OPT_LEVEL", "3"))


if __name__ == "__main__":
    setup(ext_modules=compiled_extensions())
