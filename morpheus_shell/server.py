"""
MCP server definition for the Morpheus shell.

The server drives one process-wide shell session; it never holds more than one.
"""

import logging
from typing import Any

from mcp.server.fastmcp import Context, FastMCP

from morpheus_shell.models.session import SubmitResult
from morpheus_shell.shell import interrupt, prompt, submit
from morpheus_shell.utils.config import ShellConfig
from morpheus_shell.utils.dependencies import get_base_config, get_session_manager

# Get a module-level logger
logger = logging.getLogger(__name__)


def build_server(config: ShellConfig) -> FastMCP:
    """Build and configure the FastMCP server instance.

    Args:
        config: The shell's configuration.

    Returns:
        A configured FastMCP instance.
    """
    logger.info(
        "Initializing FastMCP server",
        extra={"host": config.MCP_HOST, "port": config.MCP_PORT},
    )
    return FastMCP(
        "morpheus-shell",
        host=config.MCP_HOST,
        port=config.MCP_PORT,
    )



def _format_result(result: SubmitResult) -> dict[str, Any]:
    return {
        "output": [line.text for line in result.output],
        "prompt": prompt(result.session, server_config.SHELL_HOSTNAME),
        "terminate": result.terminate,
        "cleared": result.cleared,
    }


# Get the base configuration for server initialization.
# This is also imported by main.py to run the server.
server_config = get_base_config()
mcp_app = build_server(server_config)


# --- Tool Definitions ---

@mcp_app.tool()
async def terminal(
    context: Context,
    line: str,
) -> dict[str, Any]:
    """
    Types one line into the Morpheus-86 terminal.

    Args:
        line: The command line, e.g. 'ls /etc' or 'cat mission.log'.

    Returns:
        A dictionary with the lines the command printed, the new prompt and
        whether the session has shut down.
    """
    logger.info(f"Executing terminal line: {line}")
    try:
        manager = get_session_manager()
        result = submit(manager.get_session(), line, hostname=server_config.SHELL_HOSTNAME)
        manager.store(result.session)
        return {"status": "success", "result": _format_result(result)}
    except Exception as e:
        logger.error(f"Error executing terminal line: {e}", exc_info=True)
        return {"status": "error", "error": str(e)}


@mcp_app.tool(name="interrupt")
async def interrupt_tool(
    context: Context,
) -> dict[str, Any]:
    """
    Sends Ctrl+C to the terminal, which shuts the session down.

    Returns:
        A dictionary with the shutdown output.
    """
    logger.info("Executing interrupt.")
    try:
        manager = get_session_manager()
        result = interrupt(manager.get_session())
        manager.store(result.session)
        return {"status": "success", "result": _format_result(result)}
    except Exception as e:
        logger.error(f"Error executing interrupt: {e}", exc_info=True)
        return {"status": "error", "error": str(e)}


@mcp_app.tool()
async def reset_session(
    context: Context,
) -> dict[str, Any]:
    """
    Starts a fresh terminal session in the operator's home directory.

    Returns:
        A dictionary with the greeting lines and the prompt.
    """
    logger.info("Executing reset_session.")
    try:
        session = get_session_manager().reset()
        return {
            "status": "success",
            "result": {
                "output": [line.text for line in session.log],
                "prompt": prompt(session, server_config.SHELL_HOSTNAME),
                "terminate": False,
                "cleared": False,
            },
        }
    except Exception as e:
        logger.error(f"Error executing reset_session: {e}", exc_info=True)
        return {"status": "error", "error": str(e)}
