"""Thread coordination primitives."""

from infrastructure.concurrency.channel import ChannelClosedError, RendezvousChannel

__all__ = ["RendezvousChannel", "ChannelClosedError"]
