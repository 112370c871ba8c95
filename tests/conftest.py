import subprocess
from unittest.mock import MagicMock

import pytest
from click.testing import CliRunner

from lx.cli import cli


@pytest.fixture
def workdir(tmp_path, monkeypatch):
    """Empty working directory with no HELIX_* overrides"""
    monkeypatch.chdir(tmp_path)
    for name in [
        "HELIX_COMPOSE_BINARY",
        "HELIX_DOCKER_BINARY",
        "HELIX_COMPOSE_DEV",
        "HELIX_COMPOSE_PROD",
        "HELIX_COMPOSE_INSTALL",
        "HELIX_ENV_FILE",
        "HELIX_CONFIG_FILE",
        "HELIX_API_PORT",
        "HELIX_DEFAULT_DB_PASSWORD",
        "HELIX_TOKEN_LENGTH",
        "HELIX_DEV_IMAGES",
        "HELIX_PROD_IMAGES",
    ]:
        monkeypatch.delenv(name, raising=False)
    return tmp_path


@pytest.fixture
def popen(monkeypatch):
    """Replace subprocess.Popen, the fake process prints one line and exits with 0"""
    calls = []

    def fake_popen(args, **kwargs):
        calls.append((args, kwargs))
        process = MagicMock()
        process.stdout = iter(["done\n"])
        process.returncode = 0
        return process

    monkeypatch.setattr(subprocess, "Popen", fake_popen)
    return calls


@pytest.fixture
def run_cli(workdir):
    runner = CliRunner()

    def invoke(args, **kwargs):
        return runner.invoke(cli, args, catch_exceptions=False, **kwargs)

    return invoke
