"""Thread-safe accumulator of errors with optional broadcast."""

from __future__ import annotations

import threading
from typing import Callable, Optional

from richerr.logging_config import get_logger
from richerr.perrors import append_error
from richerr.services.channel import ErrorChannel
from richerr.services.send_nb import SendNb

logger = get_logger(__name__)

EMPTY_STORE = "<nil>"


class ErrorStore:
    """
    Composes submitted errors into one value.

    The first error becomes the composed value; later errors are attached to
    it with append_error. If a channel is given, every submitted error is
    also sent on it without blocking the submitter.

        store = ErrorStore()
        store.add_error(err1)
        store.add_error(err2)
        if (err := store.get_error()) is not None:
            print(short(err))
    """

    def __init__(self, channel: Optional[ErrorChannel] = None):
        self._composed: Optional[BaseException] = None
        self._lock = threading.Lock()

        self._channel = channel
        self._is_shutdown = False
        self._channel_lock = threading.Lock()
        self._sender: Optional[SendNb] = None
        if channel is not None:
            self._sender = SendNb(channel, on_failure=self._absorb)

    def add_error(self, err: Optional[BaseException]) -> Optional[BaseException]:
        """
        Add err to the composed error and return the new composed value.

        None leaves the store unchanged.
        """
        if err is None:
            return self.get_error()

        with self._lock:
            if self._composed is None:
                self._composed = err
            else:
                self._composed = append_error(self._composed, err)
            # queued under the composed lock so broadcast order matches composition order
            if self._sender is not None:
                self._broadcast(err)
            return self._composed

    def get_error(self) -> Optional[BaseException]:
        """The composed error, or None if nothing was added."""
        with self._lock:
            return self._composed

    def error(self) -> str:
        """Message of the composed error, "<nil>" if empty."""
        err = self.get_error()
        if err is None:
            return EMPTY_STORE
        return str(err)

    def __str__(self) -> str:
        return self.error()

    def __repr__(self) -> str:
        return f"ErrorStore({self.error()!r})"

    def invoke_if_error(self, fn: Callable[[BaseException], object]) -> None:
        """Call fn with the composed error if there is one."""
        err = self.get_error()
        if err is not None:
            fn(err)

    @property
    def channel(self) -> Optional[ErrorChannel]:
        return self._channel

    @property
    def has_channel(self) -> bool:
        return self._channel is not None

    @property
    def is_shutdown(self) -> bool:
        with self._channel_lock:
            return self._is_shutdown

    def shutdown(self) -> None:
        """
        Close the output channel.

        Safe to call repeatedly and concurrently with add_error. Errors added
        afterwards still update the composed value but are not broadcast.
        """
        with self._channel_lock:
            if self._is_shutdown:
                return
            self._is_shutdown = True
            if self._channel is None:
                return
            self._channel.close()
        logger.info("error_store_shutdown")

    def _broadcast(self, err: BaseException) -> None:
        with self._channel_lock:
            if self._is_shutdown or self._sender is None:
                return
            self._sender.send(err)

    def _absorb(self, exc: BaseException) -> None:
        """Fold a sender failure into the composed value without broadcasting it."""
        with self._lock:
            if self._composed is None:
                self._composed = exc
            else:
                self._composed = append_error(self._composed, exc)
