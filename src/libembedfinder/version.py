"""
python version token handling.
"""

from __future__ import annotations

import sys

from .models import Target


def normalize_version(python_version: str, target: Target) -> str:
    """
    convert a version string into the form used on the target platform.

    windows distributions name their executable and shared library without
    the separator (python311.exe, python311.dll), everything else keeps it.

    arguments:
        `python_version: str`
            version as requested, e.g. "3.11"
        `target: Target`
            platform the build targets

    returns: `str`
        "311" for windows targets, the input unchanged otherwise
    """
    if target.is_windows:
        return python_version.replace(".", "")
    return python_version


def python_library_name(normalized_version: str) -> str:
    """name of the interpreter library itself, e.g. "python3.11" or "python311"."""
    return f"python{normalized_version}"


def host_python_version() -> str:
    """major.minor version of the running interpreter."""
    return f"{sys.version_info.major}.{sys.version_info.minor}"
