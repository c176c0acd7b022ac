"""
tests for the strategy chain.
"""

from __future__ import annotations

import os
from unittest import mock

import pytest

from libembedfinder import core
from libembedfinder.core import STRATEGY_ORDER, find_python_config, probe_all
from libembedfinder.errors import PythonNotFoundError
from libembedfinder.models import OsTag, StrategyOutcome, StrategyType, Target
from libembedfinder.strategies.interpreter import (
    BLDLIBRARY_QUERY,
    INCLUDE_QUERY,
    LIBDIR_QUERY,
)

from tests.fixtures import FakeHost

LINUX = Target(OsTag.LINUX)
WINDOWS = Target(OsTag.WINDOWS)


class TestStrategyOrder:
    """tests for the fixed priority order."""

    def test_order(self) -> None:
        assert STRATEGY_ORDER == [
            StrategyType.CONFIG_TOOL,
            StrategyType.PKG_CONFIG,
            StrategyType.INTERPRETER,
        ]

    def test_config_tool_short_circuits(self, config_tool_host: FakeHost) -> None:
        """test that pkg-config and the interpreter are never tried."""
        result = find_python_config("3.11", LINUX, host=config_tool_host)

        assert result.source is StrategyType.CONFIG_TOOL
        assert config_tool_host.ran("pkg-config") == 0
        assert "python3.11" not in config_tool_host.lookups
        assert "python3" not in config_tool_host.lookups

    def test_pkg_config_short_circuits(self, pkg_config_host: FakeHost) -> None:
        result = find_python_config("3.11", LINUX, host=pkg_config_host)

        assert result.source is StrategyType.PKG_CONFIG
        assert result.search_paths.include == ("/opt/py/include/python3.11",)
        assert result.search_paths.library == ("/opt/py/lib",)
        assert result.link_libraries == ("python3.11",)
        assert pkg_config_host.lookups == ["python3.11-config"]

    def test_partial_outcome_short_circuits(self) -> None:
        """test that a library path alone is enough to stop the chain."""
        exe = "/usr/bin/python3.11-config"
        host = FakeHost(
            programs={"python3.11-config": exe, "python3.11": "/usr/bin/python3.11"},
            outputs={(exe, "--embed", "--ldflags"): "-L/usr/lib64\n"},
        )
        result = find_python_config("3.11", LINUX, host=host)

        assert result.source is StrategyType.CONFIG_TOOL
        assert result.search_paths.include == ()
        assert result.search_paths.library == ("/usr/lib64",)
        assert result.link_libraries == ()
        assert host.ran("pkg-config") == 0
        assert host.ran("/usr/bin/python3.11") == 0

    def test_falls_through_to_interpreter(self) -> None:
        exe = "/usr/bin/python3.11"
        host = FakeHost(
            programs={"python3.11": exe},
            outputs={
                (exe, "-c", INCLUDE_QUERY): "/usr/include/python3.11\n",
                (exe, "-c", LIBDIR_QUERY): "/usr/lib\n",
                (exe, "-c", BLDLIBRARY_QUERY): "-lpython3.11\n",
            },
        )
        result = find_python_config("3.11", LINUX, host=host)

        assert result.source is StrategyType.INTERPRETER
        assert result.link_libraries == ("python3.11",)
        # config helper lookup, two pkg-config runs, three interpreter queries
        assert host.ran("pkg-config") == 2
        assert host.ran(exe) == 3

    def test_strategies_called_once_each(self) -> None:
        """test call counts with the probes themselves mocked."""
        found = StrategyOutcome(link=["python3.11"])
        with (
            mock.patch.object(core, "probe_config_tool", return_value=StrategyOutcome()) as first,
            mock.patch.object(core, "probe_pkg_config", return_value=found) as second,
            mock.patch.object(core, "probe_interpreter") as third,
        ):
            result = find_python_config("3.11", LINUX, host=FakeHost())

        assert first.call_count == 1
        assert second.call_count == 1
        assert third.call_count == 0
        assert result.link_libraries == ("python3.11",)


class TestWindows:
    """tests for windows targets."""

    def test_uses_normalized_version(self) -> None:
        host = FakeHost()
        with pytest.raises(PythonNotFoundError):
            _ = find_python_config("3.11", WINDOWS, host=host)

        assert host.lookups == ["python311-config", "python311", "python3"]
        assert ("pkg-config", "--libs", "python-311-embed") in host.commands

    def test_install_layout(self) -> None:
        root = os.path.join("C:", "Python311")
        exe = os.path.join(root, "python311.exe")
        host = FakeHost(
            programs={"python311": exe},
            dirs={os.path.join(root, "Include"), os.path.join(root, "libs")},
        )
        result = find_python_config("3.11", WINDOWS, host=host)

        assert result.python_version == "311"
        assert result.source is StrategyType.INTERPRETER
        assert result.search_paths.include == (os.path.join(root, "Include"),)
        assert result.search_paths.library == (os.path.join(root, "libs"),)
        assert result.link_libraries == ()


class TestPkgConfigOverride:
    """tests for choosing the pkg-config executable."""

    def test_environment(self) -> None:
        host = FakeHost(environ={"PKG_CONFIG": "pkgconf"})
        with pytest.raises(PythonNotFoundError):
            _ = find_python_config("3.11", LINUX, host=host)

        assert host.ran("pkgconf") == 2
        assert host.ran("pkg-config") == 0

    def test_argument(self) -> None:
        host = FakeHost(environ={"PKG_CONFIG": "pkgconf"})
        with pytest.raises(PythonNotFoundError):
            _ = find_python_config("3.11", LINUX, host=host, pkg_config="my-pkg-config")

        assert host.ran("my-pkg-config") == 2
        assert host.ran("pkgconf") == 0


class TestFailure:
    """tests for the unresolved case."""

    def test_raises_once(self, empty_host: FakeHost) -> None:
        with pytest.raises(PythonNotFoundError) as exc_info:
            _ = find_python_config("3.11", LINUX, host=empty_host)

        assert exc_info.value.python_version == "3.11"
        assert exc_info.value.normalized_version == "3.11"
        assert "3.11" in str(exc_info.value)

    def test_windows_message_mentions_token(self, empty_host: FakeHost) -> None:
        with pytest.raises(PythonNotFoundError, match="311"):
            _ = find_python_config("3.11", WINDOWS, host=empty_host)


class TestIdempotence:
    """tests for repeated resolution."""

    def test_same_result_twice(self, config_tool_host: FakeHost) -> None:
        first = find_python_config("3.11", LINUX, host=config_tool_host)
        second = find_python_config("3.11", LINUX, host=config_tool_host)

        assert first == second
        assert first is not second


class TestProbeAll:
    """tests for probe_all."""

    def test_runs_every_strategy(self, config_tool_host: FakeHost) -> None:
        outcomes = probe_all("3.11", LINUX, host=config_tool_host)

        assert [strategy for strategy, _ in outcomes] == STRATEGY_ORDER
        assert outcomes[0][1].link == ["python3.11", "dl", "m"]
        assert outcomes[1][1].is_empty()
        assert outcomes[2][1].is_empty()
        assert config_tool_host.ran("pkg-config") == 2

    def test_never_raises(self, empty_host: FakeHost) -> None:
        outcomes = probe_all("3.11", LINUX, host=empty_host)
        assert all(outcome.is_empty() for _, outcome in outcomes)
