"""Boot sequence frames shown before the shell starts."""

from collections.abc import Iterator

from pydantic import BaseModel

DEFAULT_BAR_WIDTH = 30


class BootMessage(BaseModel):
    text: str
    progress: int


BOOT_MESSAGES = [
    BootMessage(text="Initializing system...", progress=10),
    BootMessage(text="Loading core modules...", progress=30),
    BootMessage(text="Establishing secure connection...", progress=60),
    BootMessage(text="Preparing user interface...", progress=90),
    BootMessage(text="System ready.", progress=100),
]


def render_progress_bar(progress: int, width: int = DEFAULT_BAR_WIDTH) -> str:
    """Renders e.g. `[▓▓▓░░░] 50%`. Progress is clamped to 0..100."""
    clamped = max(0, min(progress, 100))
    filled = round(clamped / 100 * width)
    bar = "▓" * filled + "░" * (width - filled)
    return f"[{bar}] {clamped:>3}%"


def boot_frames(width: int = DEFAULT_BAR_WIDTH) -> Iterator[tuple[str, str]]:
    """Yields (status message, progress bar) pairs in boot order."""
    for message in BOOT_MESSAGES:
        yield message.text, render_progress_bar(message.progress, width)
