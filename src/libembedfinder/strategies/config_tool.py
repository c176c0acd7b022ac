"""
`pythonX.Y-config` helper strategy.
"""

from __future__ import annotations

import logging

from ..flags import INCLUDE_FLAGS, LINK_FLAGS, parse_flags
from ..host import Host
from ..models import StrategyOutcome

logger = logging.getLogger(__name__)


def probe_config_tool(python_version: str, host: Host) -> StrategyOutcome:
    """
    ask the per-version config helper for embedding flags.

    the helper is run twice, once for `--includes` and once for
    `--ldflags`. either run may fail without affecting the other.

    arguments:
        `python_version: str`
            normalized version token
        `host: Host`
            host to run the helper on

    returns: `StrategyOutcome`
        whatever was found, empty if the helper is missing
    """
    outcome = StrategyOutcome()

    config_exe = host.find_program(f"python{python_version}-config")
    if config_exe is None:
        return outcome

    if (stdout := host.run([config_exe, "--embed", "--includes"])) is not None:
        outcome.extend(parse_flags(stdout, INCLUDE_FLAGS))

    if (stdout := host.run([config_exe, "--embed", "--ldflags"])) is not None:
        outcome.extend(parse_flags(stdout, LINK_FLAGS))

    logger.debug("config tool found: %s", outcome)
    return outcome
