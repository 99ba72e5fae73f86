#!/usr/bin/env python3
"""
Unit tests for the terminal front end in main.py
"""

import locale
from io import StringIO
from unittest.mock import patch

import pytest
from rich.console import Console
from typer.testing import CliRunner

from morpheus_shell.main import app, play_boot_sequence, run_shell, setup_environment
from morpheus_shell.utils.config import ShellConfig


class TestTerminalFrontEnd:
    """Tests for the REPL loop"""

    @pytest.fixture
    def config(self):
        return ShellConfig(SHUTDOWN_DELAY_SECONDS=0, BOOT_STEP_SECONDS=0, BOOT_BAR_WIDTH=10)

    @pytest.fixture
    def console(self):
        return Console(file=StringIO(), force_terminal=False, width=120)

    def test_boot_sequence_prints_frames(self, console, config):
        play_boot_sequence(console, config)
        output = console.file.getvalue()
        assert "Booting Morpheus environment..." in output
        assert "System ready." in output
        assert "[▓▓▓▓▓▓▓▓▓▓] 100%" in output

    def test_shell_runs_until_exit(self, console, config):
        with patch.object(console, "input", side_effect=["pwd", "cat /etc/motd", "exit"]):
            run_shell(console, config)
        output = console.file.getvalue()
        assert "/home/operator" in output
        assert "Wake up, operator." in output
        assert output.rstrip().endswith("Shutting down Morpheus session...")

    @pytest.mark.parametrize("error", [KeyboardInterrupt, EOFError])
    def test_interrupt_shuts_down(self, console, config, error):
        with patch.object(console, "input", side_effect=error):
            run_shell(console, config)
        assert "Shutting down Morpheus session..." in console.file.getvalue()


class TestCommandLine:
    """Tests for the typer entry point and environment setup"""

    @pytest.fixture
    def runner(self):
        return CliRunner()

    @pytest.fixture(autouse=True)
    def keep_process_locale(self):
        with patch("morpheus_shell.main.locale.setlocale") as mock_setlocale:
            yield mock_setlocale

    def test_skip_boot_goes_straight_to_shell(self, runner):
        with patch("morpheus_shell.main.play_boot_sequence") as mock_boot, \
             patch("morpheus_shell.main.run_shell") as mock_shell:
            result = runner.invoke(app, ["--skip-boot"])
        assert result.exit_code == 0
        mock_boot.assert_not_called()
        mock_shell.assert_called_once()

    def test_boot_runs_by_default(self, runner):
        with patch("morpheus_shell.main.play_boot_sequence") as mock_boot, \
             patch("morpheus_shell.main.run_shell") as mock_shell:
            result = runner.invoke(app, [])
        assert result.exit_code == 0
        mock_boot.assert_called_once()
        mock_shell.assert_called_once()

    def test_setup_environment_applies_collation_locale(self, keep_process_locale):
        assert setup_environment() is True
        keep_process_locale.assert_called_once_with(locale.LC_COLLATE, "")

    def test_setup_environment_survives_unknown_locale(self, keep_process_locale):
        keep_process_locale.side_effect = locale.Error("unsupported locale setting")
        assert setup_environment() is True
