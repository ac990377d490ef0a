"""
Build script for turbotags with optional mypyc compilation.

Usage:
    # Pure Python build (default)
    python -m build

    # Compiled with mypyc
    TURBOTAGS_USE_MYPYC=1 pip install .
"""

import os
import sys
from pathlib import Path

from setuptools import setup

USE_MYPYC = os.environ.get("TURBOTAGS_USE_MYPYC", "0") == "1"

# Only the helpers every element passes through are compiled.
# Note: node.py and directive.py are excluded; the directive classes rely on
# __init_subclass__ rewriting class attributes, which mypyc does not allow.
MYPYC_MODULES = [
    "src/turbotags/serialize.py",
    "src/turbotags/attributes.py",
    "src/turbotags/content.py",
]


def build_with_mypyc() -> list:
    """Build extension modules using mypyc."""
    try:
        from mypyc.build import mypycify
    except ImportError:
        print(
            "ERROR: mypyc is not installed. Install with: pip install mypy",
            file=sys.stderr,
        )
        print("Or install with mypyc support: pip install turbotags[mypyc]", file=sys.stderr)
        sys.exit(1)

    for module_path in MYPYC_MODULES:
        if not Path(module_path).exists():
            print(f"ERROR: Module not found: {module_path}", file=sys.stderr)
            sys.exit(1)

    print(f"Compiling {len(MYPYC_MODULES)} modules with mypyc:")
    for module in MYPYC_MODULES:
        print(f"  - {module}")

    return mypycify(
        MYPYC_MODULES,
        opt_level=os.environ.get("MYPYC_OPT_LEVEL", "3"),
        debug_level=os.environ.get("MYPYC_DEBUG_LEVEL", "0"),
        separate=False,
        multi_file=False,
    )


if __name__ == "__main__":
    ext_modules = []

    if USE_MYPYC:
        ext_modules = build_with_mypyc()
    else:
        print("Building turbotags in pure Python mode (no mypyc compilation)")
        print("To enable mypyc: TURBOTAGS_USE_MYPYC=1 pip install .")

    setup(
        ext_modules=ext_modules,
    )
