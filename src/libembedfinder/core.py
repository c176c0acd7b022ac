"""
core discovery logic for libembedfinder.
"""

from __future__ import annotations

import logging
from collections.abc import Callable
from functools import partial

from .errors import PythonNotFoundError
from .host import Host
from .models import ResolutionResult, StrategyOutcome, StrategyType, Target
from .strategies import (
    probe_config_tool,
    probe_interpreter,
    probe_pkg_config,
    resolve_pkg_config,
)
from .version import normalize_version

logger = logging.getLogger(__name__)

# Priority order for discovery (first nonempty outcome wins)
STRATEGY_ORDER = [
    StrategyType.CONFIG_TOOL,
    StrategyType.PKG_CONFIG,
    StrategyType.INTERPRETER,
]

Probe = Callable[[], StrategyOutcome]


def _build_chain(
    normalized_version: str,
    target: Target,
    host: Host,
    pkg_config: str,
) -> list[tuple[StrategyType, Probe]]:
    probes: dict[StrategyType, Probe] = {
        StrategyType.CONFIG_TOOL: partial(probe_config_tool, normalized_version, host),
        StrategyType.PKG_CONFIG: partial(probe_pkg_config, normalized_version, host, pkg_config),
        StrategyType.INTERPRETER: partial(probe_interpreter, normalized_version, host, target),
    }
    return [(strategy, probes[strategy]) for strategy in STRATEGY_ORDER]


def find_python_config(
    python_version: str,
    target: Target | None = None,
    *,
    host: Host | None = None,
    pkg_config: str | None = None,
) -> ResolutionResult:
    """
    discover include paths, library paths and libraries for embedding python.

    strategies run in `STRATEGY_ORDER`; the first one to find anything at
    all (an include path, a library path or a library name) wins and the
    rest are skipped.

    arguments:
        `python_version: str`
            version to look for, e.g. "3.11"
        `target: Target | None`
            platform the build targets. if None, the running platform.
        `host: Host | None`
            host to probe. if None, the real machine.
        `pkg_config: str | None`
            pkg-config executable. if None, `PKG_CONFIG` or "pkg-config".

    returns: `ResolutionResult`
        configuration found by the winning strategy

    raises:
        `PythonNotFoundError`
            if every strategy came back empty
    """
    target = target if target is not None else Target.host()
    host = host if host is not None else Host()

    normalized_version = normalize_version(python_version, target)
    pkg_config_exe = resolve_pkg_config(host, pkg_config)
    logger.debug(
        "looking for python %s (%s) for %s", python_version, normalized_version, target.os.value
    )

    for strategy, probe in _build_chain(normalized_version, target, host, pkg_config_exe):
        outcome = probe()
        if outcome:
            logger.debug("%s succeeded, skipping remaining strategies", strategy.value)
            return outcome.freeze(normalized_version, strategy)
        logger.debug("%s found nothing", strategy.value)

    raise PythonNotFoundError(python_version, normalized_version)


def probe_all(
    python_version: str,
    target: Target | None = None,
    *,
    host: Host | None = None,
    pkg_config: str | None = None,
) -> list[tuple[StrategyType, StrategyOutcome]]:
    """
    run every strategy, without stopping at the first success.

    meant for diagnostics: shows what each mechanism would find on this
    host. never raises for an empty outcome.

    arguments:
        `python_version: str`
            version to look for, e.g. "3.11"
        `target: Target | None`
            platform the build targets. if None, the running platform.
        `host: Host | None`
            host to probe. if None, the real machine.
        `pkg_config: str | None`
            pkg-config executable. if None, `PKG_CONFIG` or "pkg-config".

    returns: `list[tuple[StrategyType, StrategyOutcome]]`
        one entry per strategy, in priority order
    """
    target = target if target is not None else Target.host()
    host = host if host is not None else Host()

    normalized_version = normalize_version(python_version, target)
    pkg_config_exe = resolve_pkg_config(host, pkg_config)

    return [
        (strategy, probe())
        for strategy, probe in _build_chain(normalized_version, target, host, pkg_config_exe)
    ]
