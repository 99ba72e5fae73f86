import logging
from datetime import datetime
from typing_extensions import override

from morpheus_shell.texts import get_all_texts
from morpheus_shell.vfs.path_utils import format_path

from .base import CommandContext, CommandError, CommandResult, CommandSet

logger = logging.getLogger(__name__)

SHUTDOWN_COMMANDS = ["exit", "quit", "shutdown"]

SessionCommandNames = ["help", "banner", "record", "status", "clear", *SHUTDOWN_COMMANDS]


class SessionCommands(CommandSet):
    """Commands that print static texts or act on the session itself."""

    @override
    def get_commands(self) -> list[str]:
        return SessionCommandNames

    @override
    def execute(self, command: str, context: CommandContext) -> CommandResult:
        match command:
            case "help":
                return CommandResult(lines=list(get_all_texts()["help"]))
            case "banner":
                return CommandResult(lines=context.logo.splitlines())
            case "record":
                return CommandResult(lines=list(get_all_texts()["record"]))
            case "status":
                return self._status_handler(context)
            case "clear":
                return CommandResult(clear=True)
            case "exit" | "quit" | "shutdown":
                return self._shutdown_handler(command)
            case _:
                raise CommandError(f"{command}: command not recognized")

    def _status_handler(self, context: CommandContext) -> CommandResult:
        return CommandResult(
            lines=[
                "Morpheus subsystems nominal.",
                f"Timestamp: {datetime.now().strftime('%Y-%m-%d %H:%M:%S')}",
                f"Working directory: {format_path(context.current_path)}",
                "Ready for operator input.",
            ]
        )

    def _shutdown_handler(self, command: str) -> CommandResult:
        logger.info("Shutdown requested via '%s'", command)
        return CommandResult(
            lines=[get_all_texts()["shutdown"]],
            kind="system",
            terminate=True,
        )
