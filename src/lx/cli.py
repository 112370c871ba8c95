#!/usr/bin/env python3
"""
The Helix Utility Tool - CLI Module

Manages a Helix instance: starts and stops the docker-compose stack, removes
its images, installs a new instance and collects the cabinet configuration.

Usage:
    lx [--dev] [--verbose] [--show-password] <command>

Commands: start, stop, restart, status, logs, clean, config, install
"""

import logging

import click

from lx.actions import (
    BannerAction,
    BaseAction,
    CleanAction,
    ConfigAction,
    HelixConfig,
    InstallAction,
    StartAction,
    StopAction,
)
from lx.commands import Command, UnknownCommandError, validate_command
from lx.helpers import HelixError
from lx.version import __version__

# Configure logging
logging.basicConfig(
    level=logging.WARNING,
    format="%(asctime)s [%(levelname)s] %(name)s: %(message)s",
    datefmt="%Y-%m-%d %H:%M:%S",
)
logger = logging.getLogger(__name__)

ACTIONS = {
    Command.START: StartAction,
    Command.STOP: StopAction,
    Command.CLEAN: CleanAction,
    Command.CONFIG: ConfigAction,
    Command.INSTALL: InstallAction,
}

BANNERS = {
    Command.RESTART: " -- Restarting Helix --",
    Command.STATUS: " -- Helix Status --",
    Command.LOGS: " -- Helix Logs --",
}

HEADER = [
    " -- The Helix Utility Tool --",
    " --   Credits:  Xavier2p   --",
    " --   Helix Medical 2023    --\n",
]


class HelixOrchestrator:
    """Builds the configuration and the action of each command"""

    def __init__(self, dev: bool = False, show_password: bool = False):
        try:
            self.config = HelixConfig.from_env(dev=dev, show_password=show_password)
        except ValueError as e:
            raise HelixError(f"Invalid configuration: {e}") from e

    def get_action(self, command: Command) -> BaseAction:
        """Factory method to get the action of a command"""
        if command in BANNERS:
            return BannerAction(self.config, BANNERS[command])

        return ACTIONS[command](self.config)


class HelixGroup(click.Group):
    """Group rejecting unknown commands with exit code 1, before the group callback runs"""

    def resolve_command(self, ctx, args):
        try:
            validate_command(args[0])
        except UnknownCommandError as e:
            click.echo(str(e), err=True)
            click.echo("Please use `lx --help` for more information.", err=True)
            ctx.exit(1)

        return super().resolve_command(ctx, args)


def print_header(dev: bool):
    for line in HEADER:
        click.echo(line)
    logger.debug("Environment: %s", "Dev" if dev else "Prod")


def run_command(ctx, command: Command):
    orchestrator: HelixOrchestrator = ctx.obj["orchestrator"]
    orchestrator.get_action(command).run()


# --- CLI Implementation ---
@click.group(cls=HelixGroup)
@click.option("--dev", is_flag=True, help="Use the development stack")
@click.option("--verbose", "-v", is_flag=True, help="Enable verbose output (debug logging)")
@click.option(
    "--show-password", is_flag=True, help="Display the database password after installation"
)
@click.version_option(__version__, prog_name="lx")
@click.pass_context
def cli(ctx, dev, verbose, show_password):
    """The Helix Utility Tool"""
    ctx.ensure_object(dict)

    # Set logging level based on verbose flag
    if verbose:
        logging.getLogger().setLevel(logging.DEBUG)
        logger.debug("Verbose logging enabled")

    ctx.obj["orchestrator"] = HelixOrchestrator(dev=dev, show_password=show_password)
    ctx.obj["dev"] = dev
    print_header(dev)


@cli.command()
@click.pass_context
def start(ctx):
    """Start the Helix stack"""
    run_command(ctx, Command.START)


@cli.command()
@click.pass_context
def stop(ctx):
    """Stop the Helix stack"""
    run_command(ctx, Command.STOP)


@cli.command()
@click.pass_context
def restart(ctx):
    """Restart the Helix stack (not implemented yet)"""
    run_command(ctx, Command.RESTART)


@cli.command()
@click.pass_context
def status(ctx):
    """Display the status of the Helix stack (not implemented yet)"""
    run_command(ctx, Command.STATUS)


@cli.command()
@click.pass_context
def logs(ctx):
    """Display the logs of the Helix stack (not implemented yet)"""
    run_command(ctx, Command.LOGS)


@cli.command()
@click.pass_context
def clean(ctx):
    """Remove the images of the Helix stack"""
    run_command(ctx, Command.CLEAN)


@cli.command()
@click.pass_context
def config(ctx):
    """Create the cabinet configuration file"""
    run_command(ctx, Command.CONFIG)


@cli.command()
@click.pass_context
def install(ctx):
    """Install a new Helix instance"""
    run_command(ctx, Command.INSTALL)


if __name__ == "__main__":
    cli()
