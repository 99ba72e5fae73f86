#!/usr/bin/env python3
"""
Unit tests for session_commands.py
"""

import pytest

from morpheus_shell.commands.base import CommandContext
from morpheus_shell.commands.session_commands import SessionCommands
from morpheus_shell.texts import get_all_texts


class TestSessionCommands:
    """Tests for SessionCommands"""

    @pytest.fixture
    def commands(self):
        return SessionCommands()

    @pytest.fixture
    def context(self):
        return CommandContext(current_path=("home", "operator"), logo="LINE ONE\nLINE TWO")

    def test_help_lists_commands(self, commands, context):
        lines = commands.execute("help", context).lines
        assert lines == get_all_texts()["help"]
        assert lines[0] == "Available commands:"

    def test_banner_splits_logo(self, commands, context):
        assert commands.execute("banner", context).lines == ["LINE ONE", "LINE TWO"]

    def test_record(self, commands, context):
        lines = commands.execute("record", context).lines
        assert lines[0] == "Screen capture prep checklist:"

    def test_status(self, commands, context):
        lines = commands.execute("status", context).lines
        assert lines[0] == "Morpheus subsystems nominal."
        assert lines[1].startswith("Timestamp: ")
        assert "Working directory: /home/operator" in lines

    def test_clear(self, commands, context):
        result = commands.execute("clear", context)
        assert result.clear is True
        assert result.lines == []

    @pytest.mark.parametrize("command", ["exit", "quit", "shutdown"])
    def test_shutdown_aliases(self, commands, context, command):
        result = commands.execute(command, context)
        assert result.terminate is True
        assert result.kind == "system"
        assert result.lines == ["Shutting down Morpheus session..."]
