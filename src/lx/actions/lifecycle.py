import logging
import os

import click

from lx.actions.base import BaseAction

logger = logging.getLogger(__name__)


class StartAction(BaseAction):
    """Start the Helix stack"""

    banner = " --     Starting Helix     --\n"

    def load_environment(self) -> dict:
        """
        Environment for docker-compose: the current environment overridden by the env file

        A missing env file is not fatal, the stack is started with the current environment.
        """
        environment = dict(os.environ)
        if not self.env_file.exists():
            logger.debug("Environment file %s not found", self.env_file.path)
            click.echo(f"   ⚠️ {self.env_file.path} not found")
            return environment

        try:
            values = self.env_file.read()
        except (OSError, UnicodeDecodeError) as e:
            logger.debug("Could not read %s: %s", self.env_file.path, e)
            click.echo(f"   ⚠️ Warning: Could not read {self.env_file.path}: {e}")
            return environment

        logger.debug("Loaded %s variables from %s", len(values), self.env_file.path)
        environment.update(values)
        return environment

    def run(self):
        click.echo(self.banner)
        environment = self.load_environment()
        if self.config.dev:
            self.docker.compose(self.config.compose_file, ["up", "--build"], env=environment)
        else:
            self.docker.compose(self.config.compose_file, ["up", "-d"], env=environment)


class StopAction(BaseAction):
    """Stop the Helix stack"""

    banner = " --     Stopping Helix     --\n"

    def run(self):
        click.echo(self.banner)
        self.docker.compose(self.config.compose_file, ["down"])


class CleanAction(BaseAction):
    """Remove the images of the Helix stack"""

    banner = " --     Cleaning Helix     --\n"

    def run(self):
        click.echo(self.banner)
        for image in self.config.images:
            logger.info("Removing image %s", image)
            self.docker.remove_image(image)


class BannerAction(BaseAction):
    """Placeholder commands, they only print their banner"""

    def __init__(self, config, banner: str):
        super().__init__(config)
        self.banner = banner

    def run(self):
        click.echo(self.banner)
