"""
The main entry points for the Morpheus shell.

This script handles environment loading, logging configuration, the terminal
front end and MCP server execution.
"""

import locale
import logging
import os
import sys
import time

import typer
from dotenv import load_dotenv
from rich.console import Console
from rich.markup import escape

from morpheus_shell.boot import boot_frames
from morpheus_shell.models.session import LogLine
from morpheus_shell.shell import init_session, interrupt, prompt, submit
from morpheus_shell.texts import get_all_texts
from morpheus_shell.utils.config import ShellConfig
from morpheus_shell.utils.dependencies import get_base_config

LINE_STYLES = {
    "system": "bold bright_green",
    "command": "bright_white",
    "response": "green",
}

app = typer.Typer(
    name="morpheus",
    help="Morpheus-86 retro terminal",
    add_completion=False,
)


def setup_environment(default_level: str = "INFO") -> bool:
    """
    Loads environment variables and configures application-wide logging.
    It's expected that the correct .env file is loaded by the process runner (e.g., uv).
    """
    load_dotenv()  # Load environment variables from .env file.

    # Logs go to stderr so they never interleave with terminal output on stdout.
    log_level = os.environ.get("LOG_LEVEL", default_level).upper()
    logging.basicConfig(
        level=log_level,
        format="%(asctime)s [%(levelname)s] %(name)s: %(message)s",
        datefmt="%Y-%m-%d %H:%M:%S",
        stream=sys.stderr,
    )

    # `ls` sorts with locale.strxfrm, which only collates once LC_COLLATE is set.
    try:
        locale.setlocale(locale.LC_COLLATE, "")
    except locale.Error as e:
        logging.warning("Could not apply the environment's collation locale, using 'C': %s", e)

    logging.info("Environment and logging configured.")
    return True


def render_lines(console: Console, lines: list[LogLine]) -> None:
    """Prints log lines using the phosphor palette for their kind."""
    for line in lines:
        console.print(line.text, style=LINE_STYLES[line.kind], markup=False, highlight=False)


def play_boot_sequence(console: Console, config: ShellConfig) -> None:
    console.print(get_all_texts()["logo"], style="magenta", markup=False, highlight=False)
    console.print("Booting Morpheus environment...", style="green")
    for message, bar in boot_frames(config.BOOT_BAR_WIDTH):
        console.print(message, style="bright_green", markup=False)
        console.print(bar, style="green", markup=False, highlight=False)
        if config.BOOT_STEP_SECONDS > 0:
            time.sleep(config.BOOT_STEP_SECONDS)


def run_shell(console: Console, config: ShellConfig) -> None:
    """Reads lines from the console until the session terminates."""
    logger = logging.getLogger(__name__)
    session = init_session()
    render_lines(console, session.log)

    while True:
        try:
            raw_line = console.input(f"[bold bright_green]{escape(prompt(session, config.SHELL_HOSTNAME))}[/] ")
            result = submit(session, raw_line, hostname=config.SHELL_HOSTNAME)
        except (KeyboardInterrupt, EOFError):
            console.print()
            result = interrupt(session)

        session = result.session
        if result.cleared:
            console.clear()
        # The typed line is already on screen, so command echoes are not reprinted.
        render_lines(console, [line for line in result.output if line.kind != "command"])

        if result.terminate:
            logger.info("Session terminated, exiting in %.1fs.", config.SHUTDOWN_DELAY_SECONDS)
            time.sleep(config.SHUTDOWN_DELAY_SECONDS)
            break


@app.command()
def main(
    skip_boot: bool = typer.Option(False, "--skip-boot", help="Skip the boot sequence animation."),
) -> None:
    """Boot the Morpheus terminal and start an interactive shell."""
    if not setup_environment(default_level="WARNING"):
        logging.critical("Initial environment setup failed. Exiting.")
        sys.exit(1)

    config = get_base_config()
    console = Console()
    if not skip_boot:
        play_boot_sequence(console, config)
    run_shell(console, config)


def run_server() -> None:
    """
    Sets up the environment and runs the MCP server.
    """
    if not setup_environment():
        logging.critical("Initial environment setup failed. Exiting.")
        sys.exit(1)

    # Import server components after setup to ensure environment is loaded first.
    from .server import mcp_app, server_config

    logger = logging.getLogger(__name__)
    logger.info("--- Morpheus Shell MCP Server ---")
    logger.info("Starting server with transport: %s", server_config.MCP_TRANSPORT)
    if server_config.MCP_TRANSPORT != "stdio":
        logger.info(
            "Server will listen on: %s:%s",
            server_config.MCP_HOST,
            server_config.MCP_PORT,
        )

    mcp_app.run(transport=server_config.MCP_TRANSPORT)


if __name__ == "__main__":
    app()
