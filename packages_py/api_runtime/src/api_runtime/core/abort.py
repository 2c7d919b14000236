"""
Abort controller / signal pair used to cancel in-flight requests.
"""
import asyncio
import logging
from typing import Callable, List, Optional

logger = logging.getLogger(__name__)


class AbortError(Exception):
    """Raised by a transport that stopped because its signal was aborted."""

    def __init__(self, reason: Optional[str] = None):
        super().__init__(reason or "The operation was aborted")
        self.reason = reason


class AbortSignal:
    """Read side of an AbortController, handed to the transport."""

    def __init__(self) -> None:
        self._aborted = False
        self._reason: Optional[str] = None
        self._event = asyncio.Event()
        self._listeners: List[Callable[["AbortSignal"], None]] = []

    @property
    def aborted(self) -> bool:
        return self._aborted

    @property
    def reason(self) -> Optional[str]:
        return self._reason

    def add_listener(self, listener: Callable[["AbortSignal"], None]) -> None:
        """Register a callback fired once when the signal aborts."""
        self._listeners.append(listener)

    def raise_if_aborted(self) -> None:
        if self._aborted:
            raise AbortError(self._reason)

    async def wait(self) -> None:
        """Block until the signal is aborted."""
        await self._event.wait()

    def _abort(self, reason: Optional[str]) -> None:
        if self._aborted:
            return
        self._aborted = True
        self._reason = reason
        self._event.set()
        for listener in self._listeners:
            listener(self)


class AbortController:
    """Owns an AbortSignal and the right to abort it."""

    def __init__(self) -> None:
        self.signal = AbortSignal()

    def abort(self, reason: Optional[str] = None) -> None:
        logger.debug(f"Aborting signal (reason={reason!r})")
        self.signal._abort(reason)
