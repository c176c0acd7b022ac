"""
exceptions raised by libembedfinder.
"""

from __future__ import annotations


class EmbedFinderError(Exception):
    """base class for libembedfinder errors."""


class PythonNotFoundError(EmbedFinderError):
    """
    no discovery strategy found anything for the requested python.

    attributes:
        `python_version: str`
            version as the caller requested it
        `normalized_version: str`
            platform-specific token the strategies were run with
    """

    def __init__(self, python_version: str, normalized_version: str) -> None:
        self.python_version = python_version
        self.normalized_version = normalized_version
        super().__init__(
            f"could not find build configuration for python {python_version}"
            + (f" (looked for '{normalized_version}')" if normalized_version != python_version else "")
        )
