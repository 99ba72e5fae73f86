"""The fixed Morpheus-86 directory tree."""

from morpheus_shell.vfs.nodes import Directory, File, RootDirectory


def _text(*lines: str) -> str:
    return "\n".join(lines)


FILE_SYSTEM = RootDirectory(
    children=(
        Directory(
            name="home",
            children=(
                Directory(
                    name="operator",
                    children=(
                        File(
                            name="readme.txt",
                            content=_text(
                                "Morpheus-86 Workstation Notes",
                                "--------------------------------",
                                "This virtual environment simulates a late 80s terminal.",
                                "Type `help` to discover available commands.",
                                "Remember: curiosity keeps the system awake.",
                            ),
                        ),
                        File(
                            name="mission.log",
                            content=_text(
                                "██ MORPHEUS OPS LOG ██",
                                "12:00 CALIBRATION COMPLETE",
                                "12:14 RECEIVED SIGNAL FROM SLEEPER NODE",
                                "12:17 SIGNAL LOST — ANALYSIS QUEUED",
                                "12:25 Awaiting manual review...",
                            ),
                        ),
                    ),
                ),
            ),
        ),
        Directory(
            name="system",
            children=(
                File(
                    name="bios.cfg",
                    content=_text(
                        "# Morpheus BIOS Configuration",
                        "clock_speed = 12MHz",
                        "memory_bank = 640KB",
                        "ui_mode = phosphor-green",
                        "sound = muted",
                    ),
                ),
                Directory(
                    name="devices",
                    children=(
                        File(
                            name="tty0.log",
                            content=_text(
                                "[BOOT] Terminal line 0 engaged.",
                                "[BOOT] CRT scanlines calibrated.",
                                "[BOOT] Audio feedback suppressed.",
                            ),
                        ),
                    ),
                ),
            ),
        ),
        Directory(
            name="etc",
            children=(
                File(
                    name="motd",
                    content=_text(
                        "Wake up, operator.",
                        "Maintain cover. Observe anomalies.",
                        "Signal strength: nominal.",
                    ),
                ),
            ),
        ),
    ),
)


def get_root() -> RootDirectory:
    """Returns the process-wide, read-only filesystem root."""
    return FILE_SYSTEM
