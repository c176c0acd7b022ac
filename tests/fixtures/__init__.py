"""test fixtures and utilities for libembedfinder."""

from __future__ import annotations

from .hosts import FakeHost

__all__ = ["FakeHost"]
