from enum import Enum


class Command(str, Enum):
    START = "start"
    STOP = "stop"
    RESTART = "restart"
    STATUS = "status"
    LOGS = "logs"
    CLEAN = "clean"
    CONFIG = "config"
    INSTALL = "install"


COMMANDS = [command.value for command in Command]

UNKNOWN_COMMAND_MESSAGE = "Command doesn't exist."


class UnknownCommandError(ValueError):
    """The command is not one of the supported commands"""

    def __init__(self, command: str):
        super().__init__(UNKNOWN_COMMAND_MESSAGE)
        self.command = command


def validate_command(command: str) -> Command:
    """
    Validate the command provided by the user

    Only exact matches are accepted.

    Raises:
        UnknownCommandError: the command doesn't exist
    """
    if command not in COMMANDS:
        raise UnknownCommandError(command)

    return Command(command)
