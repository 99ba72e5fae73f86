#!/usr/bin/env python3
"""
Unit tests for the MCP server tools
"""

from unittest.mock import MagicMock, patch

import pytest

from morpheus_shell import server
from morpheus_shell.utils.dependencies import get_session_manager


class TestServerTools:
    """Tests for the terminal MCP tools"""

    @pytest.fixture(autouse=True)
    def fresh_session(self):
        get_session_manager.cache_clear()
        yield
        get_session_manager.cache_clear()

    @pytest.fixture
    def context(self):
        return MagicMock()

    @pytest.mark.asyncio
    async def test_terminal_runs_command(self, context):
        response = await server.terminal(context, "pwd")
        assert response["status"] == "success"
        assert response["result"]["output"] == [
            f"{server.server_config.SHELL_HOSTNAME}/home/operator$ pwd",
            "/home/operator",
        ]
        assert response["result"]["terminate"] is False

    @pytest.mark.asyncio
    async def test_terminal_keeps_state_between_calls(self, context):
        await server.terminal(context, "cd /etc")
        response = await server.terminal(context, "ls")
        assert response["result"]["output"][-1] == "motd"
        assert response["result"]["prompt"].endswith("/etc$")

    @pytest.mark.asyncio
    async def test_interrupt_terminates(self, context):
        response = await server.interrupt_tool(context)
        assert response["result"]["terminate"] is True
        assert response["result"]["output"] == ["Shutting down Morpheus session..."]

        after = await server.terminal(context, "pwd")
        assert after["result"]["terminate"] is True
        assert after["result"]["output"] == []

    @pytest.mark.asyncio
    async def test_reset_session(self, context):
        await server.terminal(context, "exit")
        response = await server.reset_session(context)
        assert response["status"] == "success"
        assert response["result"]["prompt"].endswith("/home/operator$")
        assert len(response["result"]["output"]) == 2

    @pytest.mark.asyncio
    async def test_terminal_reports_errors(self, context):
        with patch("morpheus_shell.server.submit", side_effect=RuntimeError("boom")):
            response = await server.terminal(context, "pwd")
        assert response == {"status": "error", "error": "boom"}
