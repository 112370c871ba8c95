"""
First time setup of a Helix instance

Writes the environment file consumed by docker-compose, then pulls the
release images. Each step aborts the installation on failure, files
already written are left as they are.
"""

import logging

import click

from lx.actions.base import BaseAction
from lx.helpers import NetworkHelper, SecurityHelper

logger = logging.getLogger(__name__)

ACCESS_TOKEN = "ACCESS_TOKEN"
REFRESH_TOKEN = "REFRESH_TOKEN"


class InstallAction(BaseAction):
    """Install the Helix stack"""

    banner = " --    Installing Helix     --\n"

    def create_env_file(self):
        """Create the environment file, an existing one is truncated"""
        click.echo(f"Creating {self.env_file.path}...")
        self.env_file.create()

    def get_db_password(self) -> str:
        """Ask for the database password and store it"""
        default = self.config.default_db_password
        password = click.prompt(
            f"Choose database password (default: {default})",
            default="",
            show_default=False,
            hide_input=True,
        ).strip()
        if not password:
            password = default

        self.env_file.append("DATABASE_PASSWORD", password)
        return password

    def get_ip_address(self) -> str:
        """Resolve the IP address of the machine and store the API URL"""
        ip_address = NetworkHelper.get_ip_address()
        click.echo(f"IP Address: {ip_address}")
        self.env_file.append("API_URL", f"http://{ip_address}:{self.config.api_port}/api")
        self.env_file.append("IP_ADDRESS", ip_address)
        return ip_address

    def create_random_token(self, name: str) -> str:
        click.echo(f"Generating {name}...")
        token = SecurityHelper.generate_token(self.config.token_length)
        self.env_file.append(name, token)
        return token

    def pull_images(self):
        click.echo("Pulling the latest images...")
        self.docker.compose(self.config.compose_install, ["pull"])

    def sum_up(self, password: str, ip_address: str):
        click.echo(" --     Helix Installed     --\n")
        click.echo(f"Database password: {password if self.config.show_password else '****'}")
        click.echo(f"IP Address: {ip_address}")
        click.echo("Ready to start Helix!")

    def run(self):
        click.echo(self.banner)
        self.create_env_file()
        password = self.get_db_password()
        ip_address = self.get_ip_address()
        self.create_random_token(ACCESS_TOKEN)
        self.create_random_token(REFRESH_TOKEN)
        logger.info("Environment written to %s", self.env_file.path)
        self.pull_images()
        self.sum_up(password, ip_address)
