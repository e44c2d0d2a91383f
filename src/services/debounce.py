"""Cancel-and-restart debouncing for rapidly changing input."""
import asyncio
import logging

from config import SEARCH_DEBOUNCE_SECONDS

logger = logging.getLogger(__name__)


def asyncio_scheduler(delay: float, callback):
    """Schedule *callback* on the running event loop; returns a cancellable handle."""
    return asyncio.get_running_loop().call_later(delay, callback)


class Debouncer:
    """Commit only the last value of a burst, after a quiet period.

    ``scheduler(delay, callback)`` must return a handle with ``cancel()``.
    At most one timer is pending at any time: each ``push`` cancels the
    previous handle before scheduling a new one.
    """

    def __init__(self, on_commit, delay: float = SEARCH_DEBOUNCE_SECONDS, scheduler=None):
        self.on_commit = on_commit
        self.delay = delay
        self.scheduler = scheduler or asyncio_scheduler
        self._handle = None
        self._value = None
        self._closed = False

    @property
    def pending(self) -> bool:
        return self._handle is not None

    def push(self, value: str) -> None:
        if self._closed:
            return
        self.cancel()
        self._value = value
        self._handle = self.scheduler(self.delay, self._fire)

    def cancel(self) -> None:
        """Drop the pending commit, if any."""
        if self._handle is not None:
            self._handle.cancel()
            self._handle = None

    def close(self) -> None:
        self.cancel()
        self._closed = True

    def _fire(self) -> None:
        if self._handle is None:
            return
        self._handle = None
        logger.debug("Debounce commit: %r", self._value)
        self.on_commit(self._value)
