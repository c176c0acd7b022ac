"""
models for libembedfinder.
"""

from __future__ import annotations

import sys
from dataclasses import dataclass, field
from enum import Enum
from typing import TYPE_CHECKING, Any, final

if TYPE_CHECKING:
    from .flags import ParsedFlags


class OsTag(Enum):
    """
    operating system of the target a python embedding is built for.
    """

    LINUX = "linux"
    MACOS = "macos"
    WINDOWS = "windows"
    FREEBSD = "freebsd"
    OTHER = "other"

    @classmethod
    def from_platform(cls, platform: str) -> OsTag:
        """
        map a `sys.platform` style string onto an os tag.

        arguments:
            `platform: str`
                value such as "linux", "win32", "darwin" or "freebsd14"

        returns: `OsTag`
            matching tag, `OsTag.OTHER` when unrecognised
        """
        if platform.startswith("linux"):
            return cls.LINUX
        if platform in ("win32", "cygwin", "windows"):
            return cls.WINDOWS
        if platform in ("darwin", "macos"):
            return cls.MACOS
        if platform.startswith("freebsd"):
            return cls.FREEBSD
        return cls.OTHER


@final
@dataclass(frozen=True)
class Target:
    """
    target platform descriptor.

    attributes:
        `os: OsTag`
            operating system the build targets
    """

    os: OsTag

    @classmethod
    def host(cls) -> Target:
        """describe the platform of the running interpreter."""
        return cls(os=OsTag.from_platform(sys.platform))

    @property
    def is_windows(self) -> bool:
        return self.os is OsTag.WINDOWS


class StrategyType(Enum):
    """
    discovery strategies, in the order the chain runs them.

    attributes:
        `CONFIG_TOOL: str`
            per-version `pythonX.Y-config` helper
        `PKG_CONFIG: str`
            package-config database (`python-X.Y-embed`)
        `INTERPRETER: str`
            sysconfig introspection of the interpreter itself, followed by
            the windows directory-layout heuristic
    """

    CONFIG_TOOL = "config_tool"
    PKG_CONFIG = "pkg_config"
    INTERPRETER = "interpreter"


@final
@dataclass(frozen=True)
class SearchPaths:
    """
    directories the compiler and linker should search.

    attributes:
        `include: tuple[str, ...]`
            header directories, e.g. "/usr/include/python3.11"
        `library: tuple[str, ...]`
            linkable library directories, e.g. "/usr/lib64"
    """

    include: tuple[str, ...] = ()
    library: tuple[str, ...] = ()


@final
@dataclass(frozen=True)
class ResolutionResult:
    """
    build configuration discovered for one python version and target.

    attributes:
        `search_paths: SearchPaths`
            include and library directories, in discovery order
        `link_libraries: tuple[str, ...]`
            bare library names, e.g. ("python3.11", "m")
        `python_version: str`
            normalized version token the discovery ran with
        `source: StrategyType`
            the strategy whose outcome this is
    """

    search_paths: SearchPaths
    link_libraries: tuple[str, ...]
    python_version: str
    source: StrategyType

    def is_empty(self) -> bool:
        return not (
            self.search_paths.include or self.search_paths.library or self.link_libraries
        )

    def to_dict(self) -> dict[str, Any]:
        """convert to a json-serialisable dictionary."""
        return {
            "python_version": self.python_version,
            "source": self.source.value,
            "include": list(self.search_paths.include),
            "library": list(self.search_paths.library),
            "link_libraries": list(self.link_libraries),
        }


@dataclass
class StrategyOutcome:
    """
    partial result accumulated by a single strategy.

    attributes:
        `include: list[str]`
            header directories found so far
        `library: list[str]`
            library directories found so far
        `link: list[str]`
            library names found so far
    """

    include: list[str] = field(default_factory=list)
    library: list[str] = field(default_factory=list)
    link: list[str] = field(default_factory=list)

    def is_empty(self) -> bool:
        return not (self.include or self.library or self.link)

    def __bool__(self) -> bool:
        return not self.is_empty()

    def extend(self, flags: ParsedFlags) -> None:
        """append everything a flag tokenizer pass found, keeping order."""
        self.include.extend(flags.include)
        self.library.extend(flags.library)
        self.link.extend(flags.link)

    def freeze(self, python_version: str, source: StrategyType) -> ResolutionResult:
        """
        fold this outcome into an immutable resolution result.

        arguments:
            `python_version: str`
                normalized version token
            `source: StrategyType`
                strategy that produced this outcome

        returns: `ResolutionResult`
            result sharing no mutable state with this outcome
        """
        return ResolutionResult(
            search_paths=SearchPaths(include=tuple(self.include), library=tuple(self.library)),
            link_libraries=tuple(self.link),
            python_version=python_version,
            source=source,
        )
