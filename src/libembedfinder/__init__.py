"""
python embedding configuration finder.

libembedfinder works out the include paths, library paths and libraries
needed to embed or extend cpython, trying the `pythonX.Y-config` helper,
pkg-config, and the interpreter's own sysconfig in turn.
"""

from __future__ import annotations

__version__ = "0.1.0"

from .core import STRATEGY_ORDER, find_python_config, probe_all
from .errors import EmbedFinderError, PythonNotFoundError
from .flags import FlagClass, ParsedFlags, parse_flags
from .host import Host
from .integration import BuildModule, CompileFlags, apply_result, link_everything
from .models import (
    OsTag,
    ResolutionResult,
    SearchPaths,
    StrategyOutcome,
    StrategyType,
    Target,
)
from .version import normalize_version

__all__ = [
    "STRATEGY_ORDER",
    "find_python_config",
    "probe_all",
    "link_everything",
    "apply_result",
    "normalize_version",
    "parse_flags",
    "BuildModule",
    "CompileFlags",
    "EmbedFinderError",
    "FlagClass",
    "Host",
    "OsTag",
    "ParsedFlags",
    "PythonNotFoundError",
    "ResolutionResult",
    "SearchPaths",
    "StrategyOutcome",
    "StrategyType",
    "Target",
]
