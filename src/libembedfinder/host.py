"""
access to the machine the discovery runs on.

every strategy goes through a `Host` to look up programs, run them and
check paths, so the whole chain can be driven by a fake in tests.
"""

from __future__ import annotations

import logging
import os
import shutil
import subprocess
from collections.abc import Mapping, Sequence
from pathlib import Path

logger = logging.getLogger(__name__)


class Host:
    """
    the real host: `PATH` lookups, blocking subprocesses, the filesystem.

    programs are only searched for on the `PATH` of `environ`; without one,
    nothing is found.

    arguments:
        `environ: Mapping[str, str] | None`
            environment to read variables from and to search `PATH` in.
            defaults to `os.environ`.
    """

    def __init__(self, environ: Mapping[str, str] | None = None) -> None:
        self.environ: Mapping[str, str] = os.environ if environ is None else environ

    def getenv(self, name: str) -> str | None:
        return self.environ.get(name)

    def find_program(self, *names: str) -> str | None:
        """
        find the first of the given program names on the search path.

        arguments:
            `*names: str`
                candidate program names, most specific first

        returns: `str | None`
            full path to the program, or none if no candidate was found
        """
        search_path = self.environ.get("PATH", "")
        for name in names:
            if found := shutil.which(name, path=search_path):
                logger.debug("found program '%s' at %s", name, found)
                return found
            logger.debug("program '%s' not found", name)
        return None

    def run(self, argv: Sequence[str]) -> str | None:
        """
        run a command to completion and return what it printed.

        stderr is passed through to the caller's terminal. there is no
        timeout: a command that never exits blocks forever.

        arguments:
            `argv: Sequence[str]`
                program and arguments

        returns: `str | None`
            stdout on a zero exit status, none if the command could not be
            started, exited nonzero or printed something undecodable
        """
        logger.debug("running: %s", " ".join(argv))
        try:
            result = subprocess.run(
                list(argv),
                stdout=subprocess.PIPE,
                text=True,
                check=False,
                env=dict(self.environ),
            )
        except (FileNotFoundError, OSError, UnicodeDecodeError) as e:
            logger.debug("failed to run %s: %s", argv[0], e)
            return None

        if result.returncode != 0:
            logger.debug("%s exited with status %d", argv[0], result.returncode)
            return None

        return result.stdout

    def exists(self, path: str | Path) -> bool:
        return Path(path).exists()
