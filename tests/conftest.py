"""Shared test fixtures and helpers for codepick tests."""

import json
import os
from pathlib import Path

import pytest
from click.testing import CliRunner

FIXTURES = Path(__file__).parent / "fixtures"


def invoke_cli(runner, args, cwd=None, json_mode=False):
    """Invoke the CLI in-process, optionally from *cwd* and with --json."""
    from codepick.cli import cli

    full_args = (["--json"] if json_mode else []) + list(args)
    if cwd is None:
        return runner.invoke(cli, full_args, catch_exceptions=False)
    old_cwd = os.getcwd()
    try:
        os.chdir(str(cwd))
        return runner.invoke(cli, full_args, catch_exceptions=False)
    finally:
        os.chdir(old_cwd)


def parse_json_output(result, command):
    """Parse a --json envelope and check it names *command*."""
    data = json.loads(result.stdout)
    assert data["command"] == command, f"expected command {command!r}, got {data.get('command')!r}"
    return data


@pytest.fixture
def cli_runner():
    """Provide a Click CliRunner compatible with Click 8.2+."""
    try:
        return CliRunner(mix_stderr=False)
    except TypeError:
        return CliRunner()


@pytest.fixture
def project_factory(tmp_path):
    """Create a workspace (a directory with .git) holding the given files."""
    def _create(files: dict, name: str = "proj") -> Path:
        root = tmp_path / name
        root.mkdir()
        (root / ".git").mkdir()
        for rel_path, content in files.items():
            path = root / rel_path
            path.parent.mkdir(parents=True, exist_ok=True)
            path.write_text(content, encoding="utf-8")
        return root
    return _create


@pytest.fixture(autouse=True)
def _clean_codepick_env(monkeypatch):
    """Keep CODEPICK_* settings from the developer's shell out of tests."""
    for name in list(os.environ):
        if name.startswith("CODEPICK_"):
            monkeypatch.delenv(name, raising=False)
