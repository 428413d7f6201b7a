"""Pytest configuration and fixtures for CLI tests.

Commands run against a feed file written from the shared sample events,
with config discovery pointed at an empty temporary directory.
"""

import json

import msgspec
import pytest
from click.testing import CliRunner

from festsearch.cli.main import cli
from festsearch.core.models import Feed


@pytest.fixture(autouse=True)
def isolated_config(tmp_path, monkeypatch):
    """Keep user and project config files out of CLI tests."""
    monkeypatch.setenv("XDG_CONFIG_HOME", str(tmp_path / "xdg"))
    monkeypatch.chdir(tmp_path)


@pytest.fixture
def feed_file(tmp_path, sample_events):
    """Feed object file with metadata."""
    path = tmp_path / "events.json"
    feed = Feed(
        events=tuple(sample_events),
        schema_version="1",
        generated_at="2026-03-01T00:00:00Z",
    )
    path.write_bytes(msgspec.json.encode(feed))
    return path


@pytest.fixture
def config_file(tmp_path):
    """Write a YAML config file and return its path."""

    def write(text: str, name: str = "config.yaml"):
        path = tmp_path / name
        path.write_text(text)
        return path

    return write


@pytest.fixture
def cli_runner():
    return CliRunner()


@pytest.fixture
def invoke(cli_runner, feed_file):
    """Run the CLI quietly against the sample feed."""

    def run(*args, feed=True):
        options = ["--quiet", "--no-color"]
        if feed:
            options += ["--feed", str(feed_file)]
        return cli_runner.invoke(cli, [*options, *args])

    return run


@pytest.fixture
def invoke_json(invoke):
    """Run a command with JSON output and decode it."""

    def run(*args):
        result = invoke(*args, "--format", "json")
        assert result.exit_code == 0, result.output
        return json.loads(result.stdout)

    return run
