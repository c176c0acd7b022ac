"""
cli for embedfinder.
"""

from __future__ import annotations

import argparse
import json
import logging
import sys
from collections.abc import Sequence

from . import __version__
from .config import Config
from .core import find_python_config, probe_all
from .errors import PythonNotFoundError
from .integration import CompileFlags, apply_result
from .models import OsTag, ResolutionResult, StrategyOutcome, StrategyType


def create_parser() -> argparse.ArgumentParser:
    """
    create the argument parser for embedfinder.

    returns: `argparse.ArgumentParser`
        configured argument parser
    """
    parser = argparse.ArgumentParser(
        prog="embedfinder",
        description="find compiler and linker settings for embedding python",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
examples:
  embedfinder                          # settings for this interpreter's version
  embedfinder 3.11                     # settings for python 3.11
  embedfinder 3.11 --target-os windows # look for python311 instead
  embedfinder 3.11 --ldflags           # print linker flags only
  embedfinder 3.11 --all               # show what every strategy finds
        """,
    )

    _ = parser.add_argument(
        "python_version",
        nargs="?",
        default=None,
        help="python version to look for (default: the running interpreter's)",
    )

    _ = parser.add_argument(
        "--target-os",
        choices=[t.value for t in OsTag],
        help="operating system the build targets (default: this one)",
    )

    _ = parser.add_argument(
        "--pkg-config",
        metavar="EXE",
        help="pkg-config executable (default: $PKG_CONFIG or pkg-config)",
    )

    output = parser.add_mutually_exclusive_group()
    _ = output.add_argument(
        "--json",
        action="store_true",
        help="output as json",
    )
    _ = output.add_argument(
        "--cflags",
        action="store_true",
        help="print compiler flags only",
    )
    _ = output.add_argument(
        "--ldflags",
        action="store_true",
        help="print linker flags only",
    )

    _ = parser.add_argument(
        "--all",
        action="store_true",
        help="run every strategy and show what each one finds",
    )

    _ = parser.add_argument(
        "--debug",
        action="store_true",
        help="enable debug logging for troubleshooting",
    )

    _ = parser.add_argument(
        "--version",
        action="version",
        version=f"%(prog)s {__version__}",
    )

    return parser


def format_result(result: ResolutionResult, json_output: bool = False) -> str:
    """
    format a resolution result for output.

    arguments:
        `result: ResolutionResult`
            result to format
        `json_output: bool`
            whether to output as json

    returns: `str`
        formatted output string
    """
    if json_output:
        return json.dumps(result.to_dict(), indent=2)

    lines = [
        f"python_version: {result.python_version}",
        f"source: {result.source.value}",
    ]
    lines.extend(f"include: {path}" for path in result.search_paths.include)
    lines.extend(f"library: {path}" for path in result.search_paths.library)
    lines.extend(f"link: {name}" for name in result.link_libraries)

    return "\n".join(lines)


def format_outcomes(
    outcomes: list[tuple[StrategyType, StrategyOutcome]], json_output: bool = False
) -> str:
    """
    format the per-strategy outcomes of `probe_all`.

    arguments:
        `outcomes: list[tuple[StrategyType, StrategyOutcome]]`
            outcomes in priority order
        `json_output: bool`
            whether to output as json

    returns: `str`
        formatted output string
    """
    if json_output:
        return json.dumps(
            [
                {
                    "strategy": strategy.value,
                    "include": outcome.include,
                    "library": outcome.library,
                    "link_libraries": outcome.link,
                }
                for strategy, outcome in outcomes
            ],
            indent=2,
        )

    blocks: list[str] = []
    for i, (strategy, outcome) in enumerate(outcomes, 1):
        lines = [f"[{i}] {strategy.value}"]
        if not outcome:
            lines.append("nothing found")
        lines.extend(f"include: {path}" for path in outcome.include)
        lines.extend(f"library: {path}" for path in outcome.library)
        lines.extend(f"link: {name}" for name in outcome.link)
        blocks.append("\n".join(lines))

    return "\n\n".join(blocks)


def main(argv: Sequence[str] | None = None) -> int:
    """
    main entry point for the embedfinder cli.

    arguments:
        `argv: Sequence[str] | None`
            command line arguments. if None, uses sys.argv.

    returns: `int`
        exit code (0 if python was found, 1 if not)
    """
    parser = create_parser()
    args = parser.parse_args(argv)

    # extract args with getattr to avoid Any propagation from Namespace
    version_arg = getattr(args, "python_version", None)
    target_os_arg = getattr(args, "target_os", None)
    pkg_config_arg = getattr(args, "pkg_config", None)
    json_output = bool(getattr(args, "json", False))
    cflags_only = bool(getattr(args, "cflags", False))
    ldflags_only = bool(getattr(args, "ldflags", False))
    show_all = bool(getattr(args, "all", False))
    debug = bool(getattr(args, "debug", False))

    if show_all and (cflags_only or ldflags_only):
        parser.error("--all cannot be combined with --cflags or --ldflags")

    if debug:
        logging.basicConfig(
            level=logging.DEBUG,
            format="[%(name)s] %(message)s",
        )

    # apply cli overrides
    config = Config.load()
    if version_arg:
        config.python_version = str(version_arg)  # pyright: ignore[reportAny]
    if target_os_arg:
        config.target_os = OsTag(str(target_os_arg))  # pyright: ignore[reportAny]
    if pkg_config_arg:
        config.pkg_config = str(pkg_config_arg)  # pyright: ignore[reportAny]

    python_version = config.resolved_python_version
    target = config.target

    if show_all:
        outcomes = probe_all(python_version, target, pkg_config=config.pkg_config)
        print(format_outcomes(outcomes, json_output=json_output))
        return 0 if any(outcome for _, outcome in outcomes) else 1

    try:
        result = find_python_config(python_version, target, pkg_config=config.pkg_config)
    except PythonNotFoundError as e:
        if json_output:
            print(json.dumps({"found": False, "python_version": python_version}))
        print(f"embedfinder: error: {e}", file=sys.stderr)
        return 1

    if cflags_only or ldflags_only:
        flags = CompileFlags(target=target)
        apply_result(flags, result)
        print(flags.cflags() if cflags_only else flags.ldflags())
        return 0

    print(format_result(result, json_output=json_output))
    return 0


if __name__ == "__main__":
    sys.exit(main())
