from morpheus_shell import shell
from morpheus_shell.models.session import ShellSession


class SessionManager:
    """Keeps the single shell session of the running process."""

    def __init__(self) -> None:
        self._session: ShellSession | None = None

    def get_session(self) -> ShellSession:
        """Returns the current session, starting one if none exists yet."""
        if self._session is None:
            self._session = shell.init_session()
        return self._session

    def store(self, session: ShellSession) -> None:
        self._session = session

    def reset(self) -> ShellSession:
        """Discards the current session and starts a fresh one."""
        self._session = shell.init_session()
        return self._session
