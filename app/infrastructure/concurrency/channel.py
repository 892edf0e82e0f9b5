"""Zero-capacity rendezvous channel for handing work between threads.

A ``send`` does not return until a receiver has taken the item, so a producer
can never run ahead of its consumers. Closing the channel is the termination
signal: receivers drain any item already handed over, then stop.

State transitions:
- OPEN -> CLOSED: ``close()``, exactly once; a second close is an error
- send on CLOSED raises ChannelClosedError
- receive on CLOSED with no pending item raises ChannelClosedError
"""

import threading
from typing import Generic, Iterator, Optional, TypeVar

T = TypeVar("T")


class ChannelClosedError(Exception):
    """Raised when sending on, receiving from, or re-closing a closed channel."""

    pass


class RendezvousChannel(Generic[T]):
    """Unbuffered channel: each send blocks until a receiver takes the item.

    Safe for any number of senders and receivers. Iterating the channel
    receives until it is closed and drained.

    Args:
        name: Name used in error messages
    """

    def __init__(self, name: str = "channel"):
        self.name = name

        # Handoff slot; holds at most one item that a sender is offering
        self._slot: Optional[T] = None
        self._slot_full = False
        # Tickets pair each send with the receive that took its item
        self._sent = 0
        self._received = 0
        self._closed = False

        # Thread safety
        self._cond = threading.Condition(threading.Lock())

    @property
    def closed(self) -> bool:
        """Whether close() has been called."""
        with self._cond:
            return self._closed

    def send(self, item: T) -> None:
        """Hand an item to a receiver, blocking until one has taken it.

        Args:
            item: Item to deliver

        Raises:
            ChannelClosedError: If the channel is closed before the item
                could be offered
        """
        with self._cond:
            # Another sender may be mid-handoff
            while self._slot_full and not self._closed:
                self._cond.wait()
            if self._closed:
                raise ChannelClosedError(f"send on closed {self.name}")

            self._slot = item
            self._slot_full = True
            self._sent += 1
            ticket = self._sent
            self._cond.notify_all()

            # Rendezvous: wait until a receiver took this item. Receivers keep
            # draining after close, so this always completes once one arrives.
            while self._received < ticket:
                self._cond.wait()

    def receive(self) -> T:
        """Take the next item, blocking until a sender offers one.

        Returns:
            The item handed over by a sender

        Raises:
            ChannelClosedError: If the channel is closed and drained
        """
        with self._cond:
            while not self._slot_full:
                if self._closed:
                    raise ChannelClosedError(f"receive on closed {self.name}")
                self._cond.wait()

            item = self._slot
            self._slot = None
            self._slot_full = False
            self._received += 1
            self._cond.notify_all()
            return item  # type: ignore[return-value]

    def close(self) -> None:
        """Close the channel and wake every blocked sender and receiver.

        Raises:
            ChannelClosedError: If the channel was already closed
        """
        with self._cond:
            if self._closed:
                raise ChannelClosedError(f"close of closed {self.name}")
            self._closed = True
            self._cond.notify_all()

    def __iter__(self) -> Iterator[T]:
        while True:
            try:
                yield self.receive()
            except ChannelClosedError:
                return
