"""Unit tests for the rendezvous channel.

Tests cover:
- Send blocks until a receiver takes the item
- Close semantics (single close, send after close, drain after close)
- Iteration until closed
- Many senders and receivers
"""

import threading
import time

import pytest

from infrastructure.concurrency import ChannelClosedError, RendezvousChannel


def _start(target, *args):
    thread = threading.Thread(target=target, args=args, daemon=True)
    thread.start()
    return thread


@pytest.mark.unit
class TestRendezvousHandoff:
    """Test suite for the blocking handoff between sender and receiver."""

    def test_send_blocks_until_received(self):
        """A send does not return before a receiver has taken the item."""
        channel = RendezvousChannel()
        sent = threading.Event()

        def sender():
            channel.send("group-1")
            sent.set()

        thread = _start(sender)

        assert not sent.wait(timeout=0.2)
        assert channel.receive() == "group-1"
        assert sent.wait(timeout=2)
        thread.join(timeout=2)

    def test_receive_blocks_until_sent(self):
        """A receive waits for a sender to offer an item."""
        channel = RendezvousChannel()
        received = []

        thread = _start(lambda: received.append(channel.receive()))
        time.sleep(0.1)
        assert received == []

        channel.send("group-1")
        thread.join(timeout=2)

        assert received == ["group-1"]

    def test_items_arrive_in_send_order_for_single_sender(self):
        """Items from one sender are received in the order they were sent."""
        channel = RendezvousChannel()
        items = [f"group-{i}" for i in range(20)]

        def sender():
            for item in items:
                channel.send(item)
            channel.close()

        _start(sender)

        assert list(channel) == items

    def test_each_item_received_exactly_once(self):
        """With many receivers every item is delivered to exactly one of them."""
        channel = RendezvousChannel()
        received = []
        lock = threading.Lock()

        def receiver():
            for item in channel:
                with lock:
                    received.append(item)

        receivers = [_start(receiver) for _ in range(5)]
        for i in range(100):
            channel.send(i)
        channel.close()
        for thread in receivers:
            thread.join(timeout=5)

        assert sorted(received) == list(range(100))


@pytest.mark.unit
class TestRendezvousClose:
    """Test suite for closing the channel."""

    def test_closed_property(self):
        """closed reflects whether close() was called."""
        channel = RendezvousChannel()

        assert channel.closed is False
        channel.close()
        assert channel.closed is True

    def test_close_twice_raises(self):
        """A second close is an error."""
        channel = RendezvousChannel(name="group channel")
        channel.close()

        with pytest.raises(ChannelClosedError, match="close of closed group channel"):
            channel.close()

    def test_send_on_closed_channel_raises(self):
        """Sending after close raises instead of blocking."""
        channel = RendezvousChannel()
        channel.close()

        with pytest.raises(ChannelClosedError):
            channel.send("group-1")

    def test_receive_on_closed_empty_channel_raises(self):
        """Receiving from a closed, drained channel raises."""
        channel = RendezvousChannel()
        channel.close()

        with pytest.raises(ChannelClosedError):
            channel.receive()

    def test_close_wakes_blocked_receivers(self):
        """Receivers blocked on an empty channel stop when it is closed."""
        channel = RendezvousChannel()
        results = []

        threads = [_start(lambda: results.append(list(channel))) for _ in range(3)]
        time.sleep(0.1)
        channel.close()
        for thread in threads:
            thread.join(timeout=2)

        assert all(not thread.is_alive() for thread in threads)
        assert results == [[], [], []]

    def test_pending_item_is_drained_after_close(self):
        """An item offered before close is still delivered."""
        channel = RendezvousChannel()
        channel_ready = threading.Event()

        def sender():
            channel_ready.set()
            channel.send("last-group")

        thread = _start(sender)
        channel_ready.wait(timeout=2)
        # Give the sender time to place the item in the slot
        time.sleep(0.1)
        channel.close()

        assert channel.receive() == "last-group"
        thread.join(timeout=2)
        assert not thread.is_alive()
        with pytest.raises(ChannelClosedError):
            channel.receive()

    def test_iteration_stops_on_close(self):
        """Iterating yields sent items then stops once closed."""
        channel = RendezvousChannel()

        def sender():
            channel.send(1)
            channel.send(2)
            channel.close()

        _start(sender)

        assert list(channel) == [1, 2]
