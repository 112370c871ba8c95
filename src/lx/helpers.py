from datetime import datetime
import ipaddress
import logging
import os
import secrets
import socket
import string
import subprocess

import click
from dotenv import dotenv_values

logger = logging.getLogger(__name__)


class HelixError(click.ClickException):
    """Base class for fatal errors, reported by click as 'Error: <message>' with exit code 1"""

    pass


class CommandSpawnError(HelixError):
    """The external command could not be started"""

    pass


class EnvFileError(HelixError):
    """The environment file could not be created or written"""

    pass


class IpAddressError(HelixError):
    """The local IP address could not be resolved"""

    pass


class ConfigFileError(HelixError):
    """The cabinet configuration file could not be written"""

    pass


class SystemHelper:
    """Helper class for general system operations"""

    @staticmethod
    def run_command(
        args: list,
        env: dict = None,
        cwd: str = None,
        suppress_output: bool = False,
    ) -> subprocess.CompletedProcess:
        """
        Run an external command and wait for it to finish

        The exit code of the command is returned but never checked.

        Args:
            args (list): Executable and its arguments
            env (dict, optional): Environment of the child process. Defaults to the current one.
            cwd (str, optional): Working directory to execute the command in. Defaults to None.
            suppress_output (bool, optional): Whether to suppress command terminal output. Defaults to False.

        Raises:
            CommandSpawnError: the executable is missing or cannot be started
        """
        command = " ".join(args)
        logger.debug("Running: %s", command)
        if not suppress_output:
            click.echo(f"   ⚡Starting command at {datetime.now().strftime('%Y-%m-%d %H:%M:%S')}")
            click.echo(f"    > Running: {command}")

        collected_output = []
        try:
            process = subprocess.Popen(
                args,
                stdout=subprocess.PIPE,
                stderr=subprocess.STDOUT,
                encoding="utf-8",
                errors="replace",
                env=env,
                cwd=cwd,
            )
        except OSError as e:
            raise CommandSpawnError(f"Failed to execute '{args[0]}': {e}") from e

        try:
            # stream output line by line, indenting each line
            for line in process.stdout or []:
                line = "    |\t" + line.rstrip()
                if not suppress_output:
                    click.echo(line)
                collected_output.append(line)
        finally:
            process.wait()

        logger.debug("Command '%s' exited with %s", command, process.returncode)

        if not suppress_output:
            click.echo(f"   ⚡Finished command at {datetime.now().strftime('%Y-%m-%d %H:%M:%S')}")

        return subprocess.CompletedProcess(
            args=args, returncode=process.returncode, stdout=collected_output
        )


class DockerHelper:
    """Helper class for docker and docker-compose operations"""

    def __init__(self, compose_binary: str = "docker-compose", docker_binary: str = "docker"):
        self.compose_binary = compose_binary
        self.docker_binary = docker_binary

    def compose(self, compose_file: str, args: list, env: dict = None):
        """Run a compose verb (up, down, pull...) against a compose file"""
        return SystemHelper.run_command([self.compose_binary, "-f", compose_file, *args], env=env)

    def remove_image(self, image: str):
        """Remove a docker image"""
        return SystemHelper.run_command([self.docker_binary, "image", "rm", image])


class SecurityHelper:
    """Helper class for security-related operations"""

    TOKEN_ALPHABET = string.ascii_letters + string.digits

    @staticmethod
    def generate_token(length: int = 128) -> str:
        """Generate a secure random alphanumeric token"""
        return "".join(secrets.choice(SecurityHelper.TOKEN_ALPHABET) for _ in range(length))


class NetworkHelper:
    """Helper class for network lookups"""

    # no packet is sent, connect() on a UDP socket only selects the outgoing interface
    PROBE_ADDRESS = ("8.8.8.8", 80)

    @staticmethod
    def get_ip_address() -> str:
        """Get the IP address of the interface used for outbound traffic"""
        try:
            with socket.socket(socket.AF_INET, socket.SOCK_DGRAM) as s:
                s.connect(NetworkHelper.PROBE_ADDRESS)
                address = s.getsockname()[0]
            return str(ipaddress.ip_address(address))
        except (OSError, ValueError) as e:
            raise IpAddressError(f"Could not get IP address: {e}") from e


class EnvFile:
    """The KEY=VALUE environment file shared with docker-compose"""

    def __init__(self, path: str):
        self.path = path

    def exists(self) -> bool:
        return os.path.exists(self.path)

    def create(self):
        """Create the file or truncate it to empty"""
        try:
            with open(self.path, "w", encoding="utf-8"):
                pass
        except OSError as e:
            raise EnvFileError(f"Could not create {self.path}: {e}") from e

    def append(self, key: str, value: str):
        """Append a KEY=VALUE line, the file must have been created before"""
        if not self.exists():
            raise EnvFileError(f"Could not write {key} to {self.path}: file does not exist")

        try:
            with open(self.path, "a", encoding="utf-8") as f:
                f.write(f"{key}={value}\n")
        except OSError as e:
            raise EnvFileError(f"Could not write {key} to {self.path}: {e}") from e

    def read(self) -> dict:
        """Load the key value pairs, the last occurrence of a key wins"""
        if not self.exists():
            return {}

        return {key: value for key, value in dotenv_values(self.path).items() if value is not None}
