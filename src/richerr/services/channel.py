"""Closable thread-safe channel of errors."""

from __future__ import annotations

import queue
import threading
import time
from collections import deque
from typing import Iterator

from richerr.errors import ChannelClosedError, ConfigurationError


class ErrorChannel:
    """
    Channel carrying errors from producers to any number of receivers.

    With capacity 0 a send completes only once a receiver has taken the
    value. With capacity N up to N values are buffered. Each value is
    received by exactly one receiver.

    Closing wakes blocked senders with ChannelClosedError. Values already
    buffered remain receivable; after that receive returns None.
    """

    def __init__(self, capacity: int = 0):
        if capacity < 0:
            raise ConfigurationError("capacity must be >= 0", context={"capacity": capacity})
        self._capacity = capacity
        # (ticket, err) in send order
        self._items: deque[tuple[int, BaseException]] = deque()
        self._sent = 0
        self._received = 0
        self._closed = False
        self._cond = threading.Condition()

    @property
    def capacity(self) -> int:
        return self._capacity

    @property
    def closed(self) -> bool:
        with self._cond:
            return self._closed

    def send(self, err: BaseException) -> None:
        """Send err, blocking until a receiver or buffer space accepts it."""
        with self._cond:
            while not self._closed and self._capacity > 0 and len(self._items) >= self._capacity:
                self._cond.wait()
            if self._closed:
                raise ChannelClosedError()

            self._sent += 1
            ticket = self._sent
            self._items.append((ticket, err))
            self._cond.notify_all()
            if self._capacity > 0:
                return

            # rendezvous: wait for a receiver to take this ticket
            while self._received < ticket and not self._closed:
                self._cond.wait()
            if self._received < ticket:
                raise ChannelClosedError()

    def receive(self, timeout: float | None = None) -> BaseException | None:
        """
        Take the next error.

        Returns None once the channel is closed and drained.
        Raises queue.Empty if timeout expires first.
        """
        deadline = None if timeout is None else time.monotonic() + timeout
        with self._cond:
            while not self._items:
                if self._closed:
                    return None
                if deadline is None:
                    self._cond.wait()
                    continue
                remaining = deadline - time.monotonic()
                if remaining <= 0:
                    raise queue.Empty
                self._cond.wait(remaining)

            ticket, err = self._items.popleft()
            self._received = ticket
            self._cond.notify_all()
            return err

    def close(self) -> None:
        """Close the channel. Idempotent."""
        with self._cond:
            if self._closed:
                return
            self._closed = True
            if self._capacity == 0:
                # senders still waiting for a receiver are not delivered
                self._items.clear()
            self._cond.notify_all()

    def __len__(self) -> int:
        with self._cond:
            return len(self._items) if self._capacity > 0 else 0

    def __iter__(self) -> Iterator[BaseException]:
        """Receive until the channel is closed and drained."""
        while True:
            err = self.receive()
            if err is None:
                return
            yield err
