# tests/conftest.py
# Pytest configuration w/ isolation fixtures for deterministic test runs

import pytest
from pathlib import Path
from typing import Callable, List, Union

from rich.console import Console
from typer.testing import CliRunner


@pytest.fixture(autouse=True)
def isolate_output(monkeypatch):
    # ! reset output manager to NullOutputManager & swap in a fresh wide console for test isolation
    from catr.core.output import reset_output_manager

    reset_output_manager()
    # wide console so long temp paths in log lines are not wrapped
    monkeypatch.setattr("catr.cat_io.console.console", Console(stderr=True, width=400))
    yield
    reset_output_manager()


@pytest.fixture
def write_source(tmp_path) -> Callable[..., Path]:
    # Write an input file from a list of lines (joined w/ "\n", trailing newline) or raw bytes
    def _write(name: str, content: Union[List[str], bytes]) -> Path:
        path = tmp_path / name
        if isinstance(content, bytes):
            path.write_bytes(content)
        else:
            path.write_bytes("".join(f"{line}\n" for line in content).encode("utf-8"))
        return path

    return _write


@pytest.fixture
def sample_source(write_source) -> Path:
    # the three-line file used by most numbering scenarios
    return write_source("sample.txt", ["a", "", "b"])


@pytest.fixture
def runner() -> CliRunner:
    return CliRunner()


@pytest.fixture
def recording_console(monkeypatch):
    # Swap the shared console for a wide recording console & return it
    recording = Console(stderr=True, width=200, record=True)
    monkeypatch.setattr("catr.cat_io.console.console", recording)
    return recording
