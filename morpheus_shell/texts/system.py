"""Defines the fixed texts shown by the Morpheus shell."""

LOGO = r"""
 __  __  ___  ____  ____  _   _ _____ _   _ ____
|  \/  |/ _ \|  _ \|  _ \| | | | ____| | | / ___|
| |\/| | | | | |_) | |_) | |_| |  _| | | | \___ \
| |  | | |_| |  _ <|  __/|  _  | |___| |_| |___) |
|_|  |_|\___/|_| \_\_|   |_| |_|_____|\___/|____/
                 M O R P H E U S - 8 6
""".strip("\n")

GREETING = "MORPHEUS-86 TERMINAL LINK ESTABLISHED."

AUTH_HINT = "Operator authorization required. Type `help` to list available commands."

HELP_LINES = [
    "Available commands:",
    "  help            - show this help text",
    "  ls [path]       - list directory contents",
    "  cd <path>       - change the working directory",
    "  pwd             - print the working directory",
    "  cat <file>      - print file contents",
    "  motd            - print the message of the day",
    "  banner          - print the Morpheus logo",
    "  record          - guidance for recording your screen session",
    "  status          - display the current mission status",
    "  clear           - wipe the command output window",
    "  exit|quit|shutdown - terminate the session",
]

RECORD_LINES = [
    "Screen capture prep checklist:",
    "  • Ensure your preferred screen recorder is running.",
    "  • Trigger the Morpheus CLI actions you want captured.",
    "  • When finished, stop the recorder to save your video.",
    "  • Optional: run `status` to log the session outcome.",
]

SHUTDOWN_MESSAGE = "Shutting down Morpheus session..."

MOTD_PATH = "/etc/motd"


def get_texts() -> dict[str, str | list[str]]:
    """
    Returns a dictionary of the static shell texts.
    """
    return {
        "logo": LOGO,
        "greeting": GREETING,
        "auth-hint": AUTH_HINT,
        "help": HELP_LINES,
        "record": RECORD_LINES,
        "shutdown": SHUTDOWN_MESSAGE,
        "motd-path": MOTD_PATH,
    }
