from typing import Literal

from pydantic import BaseModel, Field

LogKind = Literal["system", "command", "response"]


class LogLine(BaseModel):
    """One entry of the shell scrollback."""

    kind: LogKind
    text: str


class ShellSession(BaseModel):
    """Stores the working directory and scrollback for a single shell run."""

    current_path: tuple[str, ...] = ()
    log: list[LogLine] = Field(default_factory=list)
    state: Literal["active", "terminating"] = "active"


class SubmitResult(BaseModel):
    """The outcome of feeding one line to the shell."""

    session: ShellSession
    output: list[LogLine] = Field(default_factory=list)
    terminate: bool = False
    cleared: bool = False  # True when the scrollback was wiped
