"""
Configuration and dependency management for the Morpheus shell.
"""

import logging
from functools import lru_cache

from morpheus_shell.commands.registry import CommandRegistry, build_default_registry
from morpheus_shell.utils.config import ShellConfig

logger = logging.getLogger(__name__)


@lru_cache
def get_base_config() -> ShellConfig:
    """
    Retrieves the base shell configuration from environment variables.

    This function is cached to avoid repeatedly reading and parsing environment
    variables and .env files.

    Returns:
        A cached instance of the ShellConfig.
    """
    return ShellConfig()


@lru_cache
def get_command_registry() -> CommandRegistry:
    """Returns a cached instance of the CommandRegistry."""
    logger.info("Initializing CommandRegistry singleton.")
    return build_default_registry()


# The session manager builds sessions through morpheus_shell.shell, which itself
# depends on the providers above, so it is imported after them.
from morpheus_shell.utils.session_manager import SessionManager


@lru_cache
def get_session_manager() -> SessionManager:
    """Returns a cached instance of the SessionManager."""
    logger.info("Initializing SessionManager singleton.")
    return SessionManager()
