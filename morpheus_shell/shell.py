"""
The shell state machine.

A session is only ever changed by `submit` or `interrupt`, and both return a
new session instead of mutating the one they were given.
"""

import logging

from morpheus_shell.commands.base import CommandContext, CommandResult
from morpheus_shell.commands.registry import CommandRegistry
from morpheus_shell.models.session import LogLine, ShellSession, SubmitResult
from morpheus_shell.texts import get_all_texts
from morpheus_shell.utils.dependencies import get_base_config, get_command_registry
from morpheus_shell.vfs.path_utils import PathSegments, format_path

logger = logging.getLogger(__name__)

DEFAULT_PATH: PathSegments = ("home", "operator")


def init_session() -> ShellSession:
    """Starts a session in the operator's home with the greeting lines logged."""
    texts = get_all_texts()
    return ShellSession(
        current_path=DEFAULT_PATH,
        log=[
            LogLine(kind="system", text=texts["greeting"]),
            LogLine(kind="system", text=texts["auth-hint"]),
        ],
    )


def prompt(session: ShellSession, hostname: str | None = None) -> str:
    """Builds the prompt string, e.g. `morpheus/home/operator$`."""
    if hostname is None:
        hostname = get_base_config().SHELL_HOSTNAME
    return f"{hostname}{format_path(session.current_path)}$"


def submit(
    session: ShellSession,
    raw_line: str,
    registry: CommandRegistry | None = None,
    hostname: str | None = None,
) -> SubmitResult:
    """
    Feeds one typed line to the shell.

    Blank input is dropped without logging anything. Otherwise the line is
    echoed to the log with the prompt, split on whitespace and dispatched by
    its first token. A session that is already terminating ignores input.

    Args:
        session: The session to start from. It is not modified.
        raw_line: The line as typed, before trimming.
        registry: The command table; defaults to the built-in commands.
        hostname: The prompt host name; defaults to the configured one.

    Returns:
        The new session, the log lines this call appended and whether the
        collaborator should tear the shell down.
    """
    if session.state == "terminating":
        return SubmitResult(session=session, terminate=True)

    line = raw_line.strip()
    if not line:
        return SubmitResult(session=session)

    command, *args = line.split()
    # The echo keeps the line exactly as typed; only the terminator is dropped.
    typed = raw_line.rstrip("\r\n")
    echo = LogLine(kind="command", text=f"{prompt(session, hostname)} {typed}")
    registry = registry or get_command_registry()
    result = registry.dispatch(command, _build_context(session, args, [*session.log, echo]))
    return _apply(session, [echo], result)


def interrupt(session: ShellSession, registry: CommandRegistry | None = None) -> SubmitResult:
    """Handles an external interrupt the same way as `exit`, without echoing a command."""
    if session.state == "terminating":
        return SubmitResult(session=session, terminate=True)

    logger.info("Interrupt received, shutting down session.")
    registry = registry or get_command_registry()
    result = registry.dispatch("exit", _build_context(session, [], list(session.log)))
    return _apply(session, [], result)


def _build_context(session: ShellSession, args: list[str], log: list[LogLine]) -> CommandContext:
    return CommandContext(
        current_path=session.current_path,
        args=args,
        log=log,
        logo=get_all_texts()["logo"],
    )


def _apply(session: ShellSession, echo: list[LogLine], result: CommandResult) -> SubmitResult:
    if result.clear:
        return SubmitResult(session=session.model_copy(update={"log": []}), cleared=True)

    output = [*echo, *(LogLine(kind=result.kind, text=text) for text in result.lines)]
    update: dict = {"log": [*session.log, *output]}
    if result.new_path is not None:
        update["current_path"] = result.new_path
    if result.terminate:
        update["state"] = "terminating"

    return SubmitResult(
        session=session.model_copy(update=update),
        output=output,
        terminate=result.terminate,
    )
