"""
tests for version token handling.
"""

from __future__ import annotations

import sys

from libembedfinder.models import OsTag, Target
from libembedfinder.version import host_python_version, normalize_version, python_library_name


class TestNormalizeVersion:
    """tests for normalize_version."""

    def test_windows_strips_dots(self) -> None:
        assert normalize_version("3.11", Target(OsTag.WINDOWS)) == "311"

    def test_non_windows_unchanged(self) -> None:
        assert normalize_version("3.11", Target(OsTag.LINUX)) == "3.11"
        assert normalize_version("3.11", Target(OsTag.MACOS)) == "3.11"

    def test_windows_multiple_dots(self) -> None:
        """test that every dot is removed, not just the first."""
        assert normalize_version("3.12.1", Target(OsTag.WINDOWS)) == "3121"

    def test_windows_no_dots(self) -> None:
        """test that an already-normalized token is left alone."""
        assert normalize_version("311", Target(OsTag.WINDOWS)) == "311"

    def test_free_threaded_suffix_kept(self) -> None:
        assert normalize_version("3.13t", Target(OsTag.LINUX)) == "3.13t"


class TestHelpers:
    """tests for the smaller version helpers."""

    def test_python_library_name(self) -> None:
        assert python_library_name("3.11") == "python3.11"
        assert python_library_name("311") == "python311"

    def test_host_python_version(self) -> None:
        expected = f"{sys.version_info.major}.{sys.version_info.minor}"
        assert host_python_version() == expected
