"""Base types shared by all command sets."""

from abc import ABC, abstractmethod

from pydantic import BaseModel, Field

from morpheus_shell.models.session import LogKind, LogLine
from morpheus_shell.vfs.nodes import Directory
from morpheus_shell.vfs.tree import get_root


class CommandError(Exception):
    """A domain failure that is reported to the operator as one response line."""

    def __init__(self, message: str) -> None:
        super().__init__(message)
        self.message = message

    def __str__(self) -> str:
        return self.message


class CommandContext(BaseModel):
    """Everything a handler may read while running."""

    current_path: tuple[str, ...] = ()
    args: list[str] = Field(default_factory=list)
    log: list[LogLine] = Field(default_factory=list)
    logo: str = ""
    root: Directory = Field(default_factory=get_root)


class CommandResult(BaseModel):
    """
    What a handler wants to happen.

    `lines` are appended to the log with the given `kind`. The optional flags
    describe the state changes the shell applies afterwards.
    """

    lines: list[str] = Field(default_factory=list)
    kind: LogKind = "response"
    new_path: tuple[str, ...] | None = None
    clear: bool = False
    terminate: bool = False


class CommandSet(ABC):
    """A group of related commands that share a dispatcher."""

    @abstractmethod
    def get_commands(self) -> list[str]:
        """Returns the command names this set answers to."""

    @abstractmethod
    def execute(self, command: str, context: CommandContext) -> CommandResult:
        """
        Runs one command.

        Raises:
            CommandError: For any operator-facing failure.
        """
