"""
discovery strategies for python build configuration.
"""

from __future__ import annotations

from .config_tool import probe_config_tool
from .interpreter import find_interpreter, probe_interpreter
from .pkg_config import probe_pkg_config, resolve_pkg_config
from .windows import fill_from_install_layout

__all__ = [
    "probe_config_tool",
    "probe_pkg_config",
    "probe_interpreter",
    "find_interpreter",
    "resolve_pkg_config",
    "fill_from_install_layout",
]
