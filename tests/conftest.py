"""
conftest for libembedfinder tests.
"""

from __future__ import annotations

import pytest

from tests.fixtures import FakeHost


@pytest.fixture
def empty_host() -> FakeHost:
    """a host where nothing can be found."""
    return FakeHost()


@pytest.fixture
def config_tool_host() -> FakeHost:
    """a host with a working python3.11-config."""
    exe = "/usr/bin/python3.11-config"
    return FakeHost(
        programs={"python3.11-config": exe},
        outputs={
            (exe, "--embed", "--includes"): (
                "-I/usr/include/python3.11 -I/usr/include/python3.11\n"
            ),
            (exe, "--embed", "--ldflags"): "-L/usr/lib64 -lpython3.11 -ldl -lm\n",
        },
    )


@pytest.fixture
def pkg_config_host() -> FakeHost:
    """a host with no config helper but a pkg-config that knows python."""
    return FakeHost(
        outputs={
            ("pkg-config", "--cflags-only-I", "python-3.11-embed"): "-I/opt/py/include/python3.11\n",
            ("pkg-config", "--libs", "python-3.11-embed"): "-L/opt/py/lib -lpython3.11\n",
        },
    )
