import ipaddress
import socket
import subprocess
import sys

import pytest

from lx.helpers import (
    CommandSpawnError,
    DockerHelper,
    EnvFile,
    EnvFileError,
    IpAddressError,
    NetworkHelper,
    SecurityHelper,
    SystemHelper,
)


def test_run_command_waits_and_returns_exit_code(popen):
    result = SystemHelper.run_command(["docker-compose", "-f", "a.yml", "down"])

    assert result.returncode == 0
    assert result.stdout == ["    |\tdone"]
    assert popen[0][0] == ["docker-compose", "-f", "a.yml", "down"]


def test_run_command_ignores_non_zero_exit_code(monkeypatch, popen):
    process_class = subprocess.Popen

    def failing_popen(args, **kwargs):
        process = process_class(args, **kwargs)
        process.returncode = 17
        return process

    monkeypatch.setattr(subprocess, "Popen", failing_popen)

    result = SystemHelper.run_command(["docker", "image", "rm", "x"], suppress_output=True)
    assert result.returncode == 17


def test_run_command_missing_executable_is_fatal(monkeypatch):
    def missing(args, **kwargs):
        raise FileNotFoundError(2, "No such file or directory", args[0])

    monkeypatch.setattr(subprocess, "Popen", missing)

    with pytest.raises(CommandSpawnError) as excinfo:
        SystemHelper.run_command(["docker-compose", "pull"])

    assert "docker-compose" in excinfo.value.message
    assert excinfo.value.exit_code == 1


def test_docker_helper_builds_arguments(popen):
    docker = DockerHelper("podman-compose", "podman")
    docker.compose("releases/docker-compose.yml", ["up", "-d"], env={"A": "1"})
    docker.remove_image("xavier2p/helix-db")

    assert popen[0][0] == ["podman-compose", "-f", "releases/docker-compose.yml", "up", "-d"]
    assert popen[0][1]["env"] == {"A": "1"}
    assert popen[1][0] == ["podman", "image", "rm", "xavier2p/helix-db"]


def test_generate_token_is_alphanumeric():
    token = SecurityHelper.generate_token()

    assert len(token) == 128
    assert token.isascii() and token.isalnum()
    assert SecurityHelper.generate_token() != token
    assert len(SecurityHelper.generate_token(16)) == 16


class FakeSocket:
    def __init__(self, *args):
        self.connected_to = None

    def __enter__(self):
        return self

    def __exit__(self, *exc):
        return False

    def connect(self, address):
        self.connected_to = address

    def getsockname(self):
        return ("192.168.1.20", 53412)


def test_get_ip_address(monkeypatch):
    monkeypatch.setattr(socket, "socket", FakeSocket)

    ip_address = NetworkHelper.get_ip_address()

    assert ip_address == "192.168.1.20"
    assert isinstance(ipaddress.ip_address(ip_address), ipaddress.IPv4Address)


def test_get_ip_address_failure_is_fatal(monkeypatch):
    class UnreachableSocket(FakeSocket):
        def connect(self, address):
            raise OSError(101, "Network is unreachable")

    monkeypatch.setattr(socket, "socket", UnreachableSocket)

    with pytest.raises(IpAddressError):
        NetworkHelper.get_ip_address()


def test_env_file_create_truncates(tmp_path):
    env_file = EnvFile(str(tmp_path / ".env"))

    env_file.create()
    env_file.append("A", "1")
    env_file.create()
    assert env_file.exists()
    assert (tmp_path / ".env").read_text() == ""

    env_file.create()
    assert (tmp_path / ".env").read_text() == ""


def test_env_file_append_requires_create(tmp_path):
    env_file = EnvFile(str(tmp_path / ".env"))

    with pytest.raises(EnvFileError):
        env_file.append("A", "1")

    assert not (tmp_path / ".env").exists()


def test_env_file_append_keeps_order_and_duplicates(tmp_path):
    env_file = EnvFile(str(tmp_path / ".env"))
    env_file.create()

    env_file.append("A", "1")
    env_file.append("B", "2")
    env_file.append("A", "3")

    assert (tmp_path / ".env").read_text().splitlines() == ["A=1", "B=2", "A=3"]
    assert env_file.read() == {"A": "3", "B": "2"}


def test_env_file_read_missing_file(tmp_path):
    assert EnvFile(str(tmp_path / ".env")).read() == {}


def test_env_file_create_failure_is_fatal(tmp_path):
    env_file = EnvFile(str(tmp_path / "missing" / ".env"))

    with pytest.raises(EnvFileError):
        env_file.create()


def test_run_command_replaces_undecodable_output():
    result = SystemHelper.run_command(
        [sys.executable, "-c", "import sys; sys.stdout.buffer.write(b'\\xff\\xfe bad\\n')"],
        suppress_output=True,
    )

    assert result.returncode == 0
    assert result.stdout == ["    |\t\ufffd\ufffd bad"]
