#!/usr/bin/env python3
"""
Unit tests for session_manager.py
"""

from morpheus_shell.shell import submit
from morpheus_shell.utils.dependencies import get_session_manager
from morpheus_shell.utils.session_manager import SessionManager


class TestSessionManager:
    """Tests for SessionManager"""

    def test_lazily_starts_one_session(self):
        manager = SessionManager()
        session = manager.get_session()
        assert session.current_path == ("home", "operator")
        assert manager.get_session() is session

    def test_store_and_reset(self):
        manager = SessionManager()
        moved = submit(manager.get_session(), "cd /etc").session
        manager.store(moved)
        assert manager.get_session().current_path == ("etc",)

        fresh = manager.reset()
        assert fresh.current_path == ("home", "operator")
        assert manager.get_session() is fresh

    def test_provider_returns_one_shared_manager(self):
        get_session_manager.cache_clear()
        try:
            manager = get_session_manager()
            assert isinstance(manager, SessionManager)
            assert get_session_manager() is manager
        finally:
            get_session_manager.cache_clear()
