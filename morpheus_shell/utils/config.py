"""Shell configuration definition."""

from pydantic_settings import BaseSettings


class ShellConfig(BaseSettings):
    """
    Defines the configuration for the Morpheus shell, loaded from environment
    variables or a .env file.
    """

    # Host name shown in front of the working directory in the prompt.
    SHELL_HOSTNAME: str = "morpheus"
    # Pause between printing the shutdown message and leaving the shell.
    SHUTDOWN_DELAY_SECONDS: float = 0.6
    # Pause between boot sequence frames. 0 disables the animation delay.
    BOOT_STEP_SECONDS: float = 0.4
    # Number of cells in the boot progress bar.
    BOOT_BAR_WIDTH: int = 30

    # MCP Server transport mechanism (e.g., "stdio", "sse", "streamable-http")
    MCP_TRANSPORT: str = "stdio"
    # Host for the MCP server to bind to when not using stdio.
    MCP_HOST: str = "127.0.0.1"
    # Port for the MCP server to listen on.
    MCP_PORT: int = 8660

    class Config:
        """Pydantic configuration settings."""

        # We do not specify env_file here.
        # Environment loading is handled explicitly in main.py via load_dotenv
        # to ensure the correct .env file is used.
        extra = "ignore"
