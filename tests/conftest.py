"""Shared pytest fixtures.

The goimports call is replaced so the suite runs without a Go toolchain.
"""

import logging
import subprocess

import pytest


BASE_GO = """\
package main

import "bytes"

type Element int

func main() {
	v := NewBaseType("root", bytes.NewBufferString("buf"))
	_ = v
}
"""


@pytest.fixture(autouse=True)
def reset_package_logger():
    """Undo setup_logging after each test."""
    yield
    logger = logging.getLogger("go_dataclass")
    for handler in list(logger.handlers):
        logger.removeHandler(handler)
    logger.setLevel(logging.NOTSET)
    logger.propagate = True


@pytest.fixture
def fake_goimports(monkeypatch):
    """Record goimports invocations instead of running them."""
    calls = []

    def fake_run(cmd, check=False, **kwargs):
        calls.append(list(cmd))
        return subprocess.CompletedProcess(cmd, 0)

    monkeypatch.setattr("go_dataclass.utils.subprocess.run", fake_run)
    return calls


@pytest.fixture
def go_package(tmp_path):
    """A directory holding a single Go package named main."""
    (tmp_path / "base.go").write_text(BASE_GO, encoding="utf-8")
    return tmp_path


@pytest.fixture
def clean_env(monkeypatch):
    """Remove the DATACLASS_* toggles from the environment."""
    monkeypatch.delenv("DATACLASS_DEBUG", raising=False)
    monkeypatch.delenv("DATACLASS_STDOUT", raising=False)
