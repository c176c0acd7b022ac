"""
applying discovered configuration to a build.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import Protocol, final

from .core import find_python_config
from .host import Host
from .models import ResolutionResult, Target
from .version import python_library_name

logger = logging.getLogger(__name__)


class BuildModule(Protocol):
    """
    the parts of a build graph node that embedding python touches.

    attributes:
        `target: Target`
            platform the module is compiled for
        `pic: bool`
            whether position-independent code is enabled
        `link_libc: bool`
            whether the c standard library is linked
    """

    target: Target
    pic: bool
    link_libc: bool

    def add_include_path(self, path: str) -> None: ...

    def add_library_path(self, path: str) -> None: ...

    def link_system_library(self, name: str, *, use_pkg_config: bool = True) -> None: ...


@final
@dataclass
class LinkedLibrary:
    """
    a library linked into a `CompileFlags` module.

    attributes:
        `name: str`
            bare library name
        `use_pkg_config: bool`
            whether the build system may consult pkg-config for it
    """

    name: str
    use_pkg_config: bool = True


@dataclass
class CompileFlags:
    """
    a `BuildModule` that records what was applied and renders it as flags.

    attributes:
        `target: Target`
            platform the module is compiled for
        `include_paths: list[str]`
            added include directories
        `library_paths: list[str]`
            added library directories
        `libraries: list[LinkedLibrary]`
            linked libraries, in link order
        `pic: bool`
            position-independent code
        `link_libc: bool`
            link the c standard library
    """

    target: Target = field(default_factory=Target.host)
    include_paths: list[str] = field(default_factory=list)
    library_paths: list[str] = field(default_factory=list)
    libraries: list[LinkedLibrary] = field(default_factory=list)
    pic: bool = False
    link_libc: bool = False

    def add_include_path(self, path: str) -> None:
        self.include_paths.append(path)

    def add_library_path(self, path: str) -> None:
        self.library_paths.append(path)

    def link_system_library(self, name: str, *, use_pkg_config: bool = True) -> None:
        self.libraries.append(LinkedLibrary(name=name, use_pkg_config=use_pkg_config))

    def cflags(self) -> str:
        """compiler flags, e.g. "-I/usr/include/python3.11 -fPIC"."""
        flags = [f"-I{path}" for path in self.include_paths]
        if self.pic:
            flags.append("-fPIC")
        return " ".join(flags)

    def ldflags(self) -> str:
        """linker flags, e.g. "-L/usr/lib64 -lm -lpython3.11 -lc"."""
        flags = [f"-L{path}" for path in self.library_paths]
        flags.extend(f"-l{library.name}" for library in self.libraries)
        if self.link_libc:
            flags.append("-lc")
        return " ".join(flags)


def apply_result(module: BuildModule, result: ResolutionResult) -> None:
    """
    wire a resolution result into a build module.

    1. adds search paths for includes and libraries.
    2. enables pic and links the c standard library, both needed by python.
    3. links the discovered libraries, then the python library itself.
    """
    for include_path in result.search_paths.include:
        module.add_include_path(include_path)
    for library_path in result.search_paths.library:
        module.add_library_path(library_path)

    module.pic = True
    module.link_libc = True

    for library_name in result.link_libraries:
        module.link_system_library(library_name)
    # the flags above already came from pkg-config or its equivalent
    module.link_system_library(python_library_name(result.python_version), use_pkg_config=False)


def link_everything(
    module: BuildModule,
    python_version: str,
    *,
    host: Host | None = None,
    pkg_config: str | None = None,
) -> ResolutionResult:
    """
    find python for the module's target and link it into the module.

    arguments:
        `module: BuildModule`
            build node to configure
        `python_version: str`
            version to embed, e.g. "3.11"
        `host: Host | None`
            host to probe. if None, the real machine.
        `pkg_config: str | None`
            pkg-config executable override

    returns: `ResolutionResult`
        the configuration that was applied

    raises:
        `PythonNotFoundError`
            if nothing was found; the module is left untouched
    """
    result = find_python_config(python_version, module.target, host=host, pkg_config=pkg_config)
    logger.debug("applying %s configuration for python %s", result.source.value, python_version)
    apply_result(module, result)
    return result
