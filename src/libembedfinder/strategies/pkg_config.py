"""
pkg-config database strategy.
"""

from __future__ import annotations

import logging

from ..flags import INCLUDE_FLAGS, LINK_FLAGS, parse_flags
from ..host import Host
from ..models import StrategyOutcome

logger = logging.getLogger(__name__)

PKG_CONFIG_ENV = "PKG_CONFIG"
DEFAULT_PKG_CONFIG = "pkg-config"


def resolve_pkg_config(host: Host, override: str | None = None) -> str:
    """
    pick the pkg-config executable name.

    arguments:
        `host: Host`
            host whose environment may carry `PKG_CONFIG`
        `override: str | None`
            explicit choice, wins over the environment

    returns: `str`
        executable name or path to invoke
    """
    if override:
        return override
    return host.getenv(PKG_CONFIG_ENV) or DEFAULT_PKG_CONFIG


def package_name(python_version: str) -> str:
    """pkg-config module name for an embeddable python, e.g. "python-3.11-embed"."""
    return f"python-{python_version}-embed"


def probe_pkg_config(python_version: str, host: Host, pkg_config: str) -> StrategyOutcome:
    """
    query pkg-config for the embeddable python package.

    arguments:
        `python_version: str`
            normalized version token
        `host: Host`
            host to run pkg-config on
        `pkg_config: str`
            pkg-config executable, see `resolve_pkg_config`

    returns: `StrategyOutcome`
        whatever was found, empty if pkg-config or the package is missing
    """
    outcome = StrategyOutcome()
    package = package_name(python_version)

    if (stdout := host.run([pkg_config, "--cflags-only-I", package])) is not None:
        outcome.extend(parse_flags(stdout, INCLUDE_FLAGS))

    if (stdout := host.run([pkg_config, "--libs", package])) is not None:
        outcome.extend(parse_flags(stdout, LINK_FLAGS))

    logger.debug("%s found: %s", pkg_config, outcome)
    return outcome
