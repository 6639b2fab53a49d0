"""Signal setup for the interactive shell."""

from __future__ import annotations

import signal
from types import FrameType
from typing import Any

from minishell_core.errors import ShellError


def ignore_signal(signum: int) -> None:
    """Make the process ignore ``signum``."""
    try:
        signal.signal(signum, signal.SIG_IGN)
    except (OSError, ValueError) as exc:
        raise ShellError("ignore_sig", "sigaction failed") from exc


class SignalWatcher:
    """Records the last signal received so the prompt loop can react to it.

    As a context manager it installs its handlers on entry and restores the
    previous ones on exit.
    """

    def __init__(self) -> None:
        self.pending: int = 0
        self._saved: dict[int, Any] = {}

    def install(self) -> None:
        """Ignore SIGQUIT and record SIGINT instead of dying on it."""
        for signum in (signal.SIGQUIT, signal.SIGINT):
            self._saved.setdefault(signum, signal.getsignal(signum))
        ignore_signal(signal.SIGQUIT)
        try:
            signal.signal(signal.SIGINT, self.handle)
        except (OSError, ValueError) as exc:
            raise ShellError("setup_sigint", "sigaction failed") from exc

    def restore(self) -> None:
        """Put back the handlers that were in place before ``install``."""
        for signum, previous in self._saved.items():
            signal.signal(signum, previous if previous is not None else signal.SIG_DFL)
        self._saved.clear()

    def handle(self, signum: int, frame: FrameType | None) -> None:
        """Signal handler: remember which signal arrived."""
        self.pending = signum

    def consume_sigint(self) -> bool:
        """Return True once for each pending SIGINT, clearing it."""
        if self.pending == signal.SIGINT:
            self.pending = 0
            return True
        return False

    def __enter__(self) -> SignalWatcher:
        self.install()
        return self

    def __exit__(self, *exc_info: object) -> None:
        self.restore()