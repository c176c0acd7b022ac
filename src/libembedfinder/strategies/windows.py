"""
windows install layout heuristic.

a python.org install on windows has no config helper and its sysconfig
may not report a libdir, but headers and import libraries sit next to
the executable in `Include` and `libs`.
"""

from __future__ import annotations

import logging
import os

from ..host import Host
from ..models import StrategyOutcome

logger = logging.getLogger(__name__)

INCLUDE_SUBDIR = "Include"
LIBS_SUBDIR = "libs"


def fill_from_install_layout(outcome: StrategyOutcome, python_exe: str, host: Host) -> None:
    """
    add the install's `Include` and `libs` directories where still missing.

    only empty fields are filled; anything already found is kept as is.

    arguments:
        `outcome: StrategyOutcome`
            outcome to fill in place
        `python_exe: str`
            path of the located interpreter
        `host: Host`
            host to check paths on
    """
    root_dir = os.path.dirname(python_exe)
    if not root_dir:
        return

    if not outcome.include:
        include_dir = os.path.join(root_dir, INCLUDE_SUBDIR)
        if host.exists(include_dir):
            logger.debug("using install layout include dir: %s", include_dir)
            outcome.include.append(include_dir)

    if not outcome.library:
        libs_dir = os.path.join(root_dir, LIBS_SUBDIR)
        if host.exists(libs_dir):
            logger.debug("using install layout libs dir: %s", libs_dir)
            outcome.library.append(libs_dir)
