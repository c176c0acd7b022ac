"""
tokenizer for compiler and linker flag strings.

tools such as `python3.11-config --ldflags` and `pkg-config --libs` print
flags separated by spaces and newlines. this module picks out the search
paths and library names from that output, in the order they appear.
"""

from __future__ import annotations

import logging
import re
from collections.abc import Iterable
from dataclasses import dataclass, field
from enum import Enum
from typing import final

logger = logging.getLogger(__name__)

_SEPARATORS = re.compile(r"[ \n]+")


class FlagClass(Enum):
    """
    flag classes the tokenizer can extract.

    attributes:
        `INCLUDE: str`
            `-I<dir>` header search directory
        `LIBRARY_PATH: str`
            `-L<dir>` library search directory
        `LIBRARY: str`
            `-l<name>` library to link
    """

    INCLUDE = "-I"
    LIBRARY_PATH = "-L"
    LIBRARY = "-l"


INCLUDE_FLAGS = frozenset({FlagClass.INCLUDE})
LINK_FLAGS = frozenset({FlagClass.LIBRARY_PATH, FlagClass.LIBRARY})


@final
@dataclass
class ParsedFlags:
    """
    values extracted from a flag string.

    attributes:
        `include: list[str]`
            values of `-I` flags
        `library: list[str]`
            values of `-L` flags
        `link: list[str]`
            values of `-l` flags
    """

    include: list[str] = field(default_factory=list)
    library: list[str] = field(default_factory=list)
    link: list[str] = field(default_factory=list)

    def _bucket(self, flag: FlagClass) -> list[str]:
        if flag is FlagClass.INCLUDE:
            return self.include
        if flag is FlagClass.LIBRARY_PATH:
            return self.library
        return self.link


def tokenize(output: str) -> list[str]:
    """split tool output on spaces and newlines, dropping empty tokens."""
    return [token for token in _SEPARATORS.split(output) if token]


def parse_flags(output: str, classes: Iterable[FlagClass]) -> ParsedFlags:
    """
    extract flag values from raw tool output.

    both the joined form (`-I/usr/include`) and the separate form
    (`-I /usr/include`) are recognised. tokens that are not one of the
    requested flags are skipped, as is a separate-form flag with nothing
    after it.

    arguments:
        `output: str`
            stdout of the tool
        `classes: Iterable[FlagClass]`
            which flags to pick out

    returns: `ParsedFlags`
        values in discovery order, not deduplicated
    """
    wanted = frozenset(classes)
    parsed = ParsedFlags()
    tokens = tokenize(output)

    index = 0
    while index < len(tokens):
        token = tokens[index]
        index += 1

        for flag in wanted:
            prefix = flag.value
            if token == prefix:
                if index >= len(tokens):
                    logger.debug("dangling '%s' at end of flags, ignoring", prefix)
                    break
                value = tokens[index]
                index += 1
            elif token.startswith(prefix):
                value = token[len(prefix) :]
            else:
                continue

            parsed._bucket(flag).append(value)
            # prefixes are distinct, so no other class can match this token
            break

    return parsed
