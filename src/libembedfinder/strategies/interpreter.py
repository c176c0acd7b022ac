"""
interpreter introspection strategy.

runs the interpreter for the requested version and asks `sysconfig` where
its headers and libraries live.
"""

from __future__ import annotations

import logging

from ..flags import FlagClass, parse_flags
from ..host import Host
from ..models import StrategyOutcome, Target
from .windows import fill_from_install_layout

logger = logging.getLogger(__name__)

INCLUDE_QUERY = 'import sysconfig\nprint(sysconfig.get_path("include"))'
LIBDIR_QUERY = 'import sysconfig\nprint(sysconfig.get_config_var("LIBDIR"))'
BLDLIBRARY_QUERY = 'import sysconfig\nprint(sysconfig.get_config_var("BLDLIBRARY"))'

# what print() shows for a config variable that is not set
_UNSET = "None"


def find_interpreter(python_version: str, host: Host) -> str | None:
    """locate `pythonX.Y`, falling back to a generic `python3`."""
    return host.find_program(f"python{python_version}", "python3")


def _query(host: Host, python_exe: str, script: str) -> str | None:
    stdout = host.run([python_exe, "-c", script])
    if stdout is None:
        return None

    value = stdout.strip()
    if not value or value == _UNSET:
        logger.debug("interpreter reported nothing for: %s", script.splitlines()[-1])
        return None
    return value


def probe_interpreter(python_version: str, host: Host, target: Target) -> StrategyOutcome:
    """
    introspect the interpreter for its include dir, libdir and link flags.

    each of the three queries is independent: one failing does not stop
    the others. on windows targets, gaps left afterwards are filled from
    the interpreter's install directory.

    arguments:
        `python_version: str`
            normalized version token
        `host: Host`
            host to run the interpreter on
        `target: Target`
            platform the build targets

    returns: `StrategyOutcome`
        whatever was found, empty if no interpreter is available
    """
    outcome = StrategyOutcome()

    python_exe = find_interpreter(python_version, host)
    if python_exe is None:
        return outcome

    if (include_dir := _query(host, python_exe, INCLUDE_QUERY)) is not None:
        outcome.include.append(include_dir)

    if (lib_dir := _query(host, python_exe, LIBDIR_QUERY)) is not None:
        outcome.library.append(lib_dir)

    if (ldlibrary := _query(host, python_exe, BLDLIBRARY_QUERY)) is not None:
        outcome.extend(parse_flags(ldlibrary, {FlagClass.LIBRARY}))

    if target.is_windows and not (outcome.include and outcome.library):
        fill_from_install_layout(outcome, python_exe, host)

    logger.debug("interpreter %s found: %s", python_exe, outcome)
    return outcome
