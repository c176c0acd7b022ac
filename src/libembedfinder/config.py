"""
configuration loading for embedfinder.

this module handles loading configuration from pyproject.toml,
.embedfinder.toml, and environment variables.
"""

from __future__ import annotations

import logging
import os
import tomllib
from collections.abc import Mapping
from dataclasses import dataclass
from pathlib import Path
from typing import Any

from .models import OsTag, Target
from .strategies.pkg_config import PKG_CONFIG_ENV
from .version import host_python_version

logger = logging.getLogger(__name__)

VERSION_ENV = "EMBEDFINDER_PYTHON_VERSION"
TARGET_OS_ENV = "EMBEDFINDER_TARGET_OS"


@dataclass
class Config:
    """
    main configuration class for embedfinder.

    attributes:
        `python_version: str | None`
            python version to look for. None means the running interpreter's.
        `target_os: OsTag | None`
            target operating system. None means the host's.
        `pkg_config: str | None`
            pkg-config executable. None means `PKG_CONFIG` or "pkg-config".
    """

    python_version: str | None = None
    target_os: OsTag | None = None
    pkg_config: str | None = None

    @property
    def resolved_python_version(self) -> str:
        return self.python_version or host_python_version()

    @property
    def target(self) -> Target:
        return Target(os=self.target_os) if self.target_os is not None else Target.host()

    @classmethod
    def from_pyproject_toml(cls, project_root: str | Path) -> Config | None:
        """
        Load configuration from the [tool.embedfinder] table of pyproject.toml.

        arguments:
            `project_root: str | Path`
                project root directory containing pyproject.toml

        returns: `Config | None`
            configuration object if found, none otherwise
        """
        pyproject = Path(project_root).joinpath("pyproject.toml")
        if not pyproject.exists():
            return None

        try:
            with open(pyproject, "rb") as f:
                data = tomllib.load(f)
        except (OSError, tomllib.TOMLDecodeError) as e:
            logger.debug("ignoring unreadable %s: %s", pyproject, e)
            return None

        tool_config = data.get("tool", {}).get("embedfinder")  # pyright: ignore[reportAny]
        if not isinstance(tool_config, dict):
            return None
        return cls._from_dict(tool_config)  # pyright: ignore[reportUnknownArgumentType]

    @classmethod
    def from_embedfinder_toml(cls, project_root: str | Path) -> Config | None:
        """
        Load configuration from .embedfinder.toml.

        arguments:
            `project_root: str | Path`
                project root directory containing .embedfinder.toml

        returns: `Config | None`
            configuration object if found, none otherwise
        """
        config_file = Path(project_root).joinpath(".embedfinder.toml")
        if not config_file.exists():
            return None

        try:
            with open(config_file, "rb") as f:
                data = tomllib.load(f)
        except (OSError, tomllib.TOMLDecodeError) as e:
            logger.debug("ignoring unreadable %s: %s", config_file, e)
            return None

        return cls._from_dict(data)

    @classmethod
    def from_environment(cls, environ: Mapping[str, str] | None = None) -> Config:
        """
        Load configuration from environment variables.

        arguments:
            `environ: Mapping[str, str] | None`
                environment to read. if None, `os.environ`.

        returns: `Config`
            configuration with values from environment
        """
        environ = os.environ if environ is None else environ
        config = cls()

        if python_version := environ.get(VERSION_ENV):
            config.python_version = python_version

        if target_os := environ.get(TARGET_OS_ENV):
            config.target_os = _parse_os(target_os)

        if pkg_config := environ.get(PKG_CONFIG_ENV):
            config.pkg_config = pkg_config

        return config

    @classmethod
    def load(
        cls, project_root: str | Path = ".", environ: Mapping[str, str] | None = None
    ) -> Config:
        """
        Load configuration from all available sources.

        sources are loaded in order of priority (later overrides earlier):
        1. default values
        2. pyproject.toml
        3. .embedfinder.toml
        4. environment variables

        arguments:
            `project_root: str | Path`
                project root directory
            `environ: Mapping[str, str] | None`
                environment to read. if None, `os.environ`.

        returns: `Config`
            merged configuration from all sources
        """
        project_path = Path(project_root).resolve()
        config = cls()

        if pyproject_config := cls.from_pyproject_toml(project_path):
            config = config.merge(pyproject_config)

        if embedfinder_config := cls.from_embedfinder_toml(project_path):
            config = config.merge(embedfinder_config)

        return config.merge(cls.from_environment(environ))

    def merge(self, other: Config) -> Config:
        """
        merge another configuration into this one.

        values set in 'other' take precedence over this config.

        arguments:
            `other: Config`
                configuration to merge

        returns: `Config`
            new merged configuration
        """
        return Config(
            python_version=other.python_version
            if other.python_version is not None
            else self.python_version,
            target_os=other.target_os if other.target_os is not None else self.target_os,
            pkg_config=other.pkg_config if other.pkg_config is not None else self.pkg_config,
        )

    @classmethod
    def _from_dict(cls, data: dict[str, Any]) -> Config:
        config = cls()

        if "python_version" in data:
            config.python_version = str(data["python_version"])  # pyright: ignore[reportAny]
        if "target_os" in data:
            config.target_os = _parse_os(str(data["target_os"]))  # pyright: ignore[reportAny]
        if "pkg_config" in data:
            config.pkg_config = str(data["pkg_config"])  # pyright: ignore[reportAny]

        return config


def _parse_os(value: str) -> OsTag:
    try:
        return OsTag(value.lower())
    except ValueError:
        return OsTag.from_platform(value.lower())
