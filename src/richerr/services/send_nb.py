"""Non-blocking send onto an ErrorChannel."""

from __future__ import annotations

import itertools
import threading
from collections import deque
from typing import Callable, Optional

from richerr.config import get_settings
from richerr.errors import ChannelClosedError
from richerr.logging_config import get_logger
from richerr.services.channel import ErrorChannel

logger = get_logger(__name__)

# Receives runtime failures raised while sending
FailureCallback = Callable[[BaseException], None]

_thread_ids = itertools.count(1)


class SendNb:
    """
    Sends errors on a channel without blocking the caller.

    Errors are queued in a FIFO and delivered one at a time by a daemon
    sender thread. The thread exits when the FIFO is empty and is started
    again by the next send. Once the channel is closed, queued errors are
    dropped silently. Any other failure during a send is passed to
    on_failure.
    """

    def __init__(
        self,
        channel: ErrorChannel,
        on_failure: Optional[FailureCallback] = None,
        thread_name: Optional[str] = None,
    ):
        self._channel = channel
        self._on_failure = on_failure
        self._thread_name = thread_name or get_settings().sender_thread_name
        self._fifo: deque[BaseException] = deque()
        self._lock = threading.Lock()
        self._thread: Optional[threading.Thread] = None

    def send(self, err: BaseException) -> None:
        """Queue err for delivery. Never blocks on the channel."""
        with self._lock:
            self._fifo.append(err)
            if self._thread is not None:
                return
            self._thread = threading.Thread(
                target=self._run,
                name=f"{self._thread_name}-{next(_thread_ids)}",
                daemon=True,
            )
            thread = self._thread
        thread.start()
        logger.debug("sender_thread_started", thread=thread.name)

    @property
    def pending(self) -> int:
        """Number of errors waiting to be sent."""
        with self._lock:
            return len(self._fifo)

    @property
    def running(self) -> bool:
        with self._lock:
            return self._thread is not None

    def join(self, timeout: Optional[float] = None) -> bool:
        """
        Wait for the current sender thread to exit.

        Returns True if no sender thread is running afterwards.
        """
        with self._lock:
            thread = self._thread
        if thread is not None:
            thread.join(timeout)
        return not self.running

    def _run(self) -> None:
        sent = 0
        try:
            while True:
                with self._lock:
                    if not self._fifo:
                        self._thread = None
                        break
                    err = self._fifo.popleft()

                try:
                    self._channel.send(err)
                    sent += 1
                except ChannelClosedError:
                    with self._lock:
                        dropped = len(self._fifo) + 1
                        self._fifo.clear()
                        self._thread = None
                    logger.debug("send_dropped_channel_closed", dropped=dropped)
                    break
                except Exception as exc:
                    logger.warning("send_failed", error=str(exc), error_type=type(exc).__name__)
                    self._report_failure(exc)
        finally:
            # a later send must be able to start a new sender
            with self._lock:
                if self._thread is threading.current_thread():
                    self._thread = None
            logger.debug("sender_thread_exited", thread=threading.current_thread().name, sent=sent)

    def _report_failure(self, exc: BaseException) -> None:
        if self._on_failure is None:
            return
        try:
            self._on_failure(exc)
        except Exception as callback_exc:
            logger.warning(
                "send_failed",
                error=str(callback_exc),
                error_type=type(callback_exc).__name__,
                stage="on_failure",
            )
