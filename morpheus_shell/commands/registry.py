"""Maps command names to the command sets that implement them."""

import logging

from .base import CommandContext, CommandError, CommandResult, CommandSet
from .file_system_commands import FileSystemCommands
from .session_commands import SessionCommands

logger = logging.getLogger(__name__)


class CommandRegistry:
    """A fixed name-to-handler table built once at startup."""

    def __init__(self, command_sets: list[CommandSet]) -> None:
        self._commands: dict[str, CommandSet] = {}
        for command_set in command_sets:
            for name in command_set.get_commands():
                if name in self._commands:
                    raise ValueError(f"Command '{name}' is registered twice.")
                self._commands[name] = command_set

    @property
    def names(self) -> list[str]:
        return sorted(self._commands)

    def dispatch(self, command: str, context: CommandContext) -> CommandResult:
        """
        Runs `command` and always returns a result.

        Unknown names and `CommandError`s become a single response line.
        Any other exception is logged and reported as an internal error so the
        shell never raises back into its caller.
        """
        command_set = self._commands.get(command)
        if command_set is None:
            logger.debug("Unrecognized command: %s", command)
            return CommandResult(lines=[f"{command}: command not recognized"])

        logger.debug("Dispatching '%s' with args %s", command, context.args)
        try:
            return command_set.execute(command, context)
        except CommandError as e:
            return CommandResult(lines=[str(e)])
        except Exception as e:
            logger.error(f"Error executing command '{command}': {e}", exc_info=True)
            return CommandResult(lines=[f"{command}: internal error"])


def build_default_registry() -> CommandRegistry:
    """Returns a registry holding every built-in command."""
    return CommandRegistry([FileSystemCommands(), SessionCommands()])
