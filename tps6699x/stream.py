"""Present a series of disjoint byte chunks as one continuous byte stream.

A stream alternates between two states: seeking forward to a target
offset, and reading a fixed number of bytes.  Chunks are fed in as they
arrive, and each call returns what was left over, so the caller can pass
it on to the next state.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, replace
from typing import Union

_log = logging.getLogger(__name__)


class InvalidParamsError(ValueError):
    """Raised when a stream operation is given parameters it cannot honour."""


@dataclass
class ReadOperation:
    """Progress of a read of ``total`` bytes, ``current`` of which are done."""

    total: int
    current: int = 0

    def advance(self, count: int) -> None:
        """Record that ``count`` more bytes have been read."""
        self.current += count


@dataclass(frozen=True)
class SeekOperation:
    """A request to move the stream forward to absolute offset ``target``."""

    target: int


@dataclass
class SeekingStream:
    """A stream skipping bytes until it reaches ``target``."""

    position: int
    target: int

    def start_read(self, operation: ReadOperation) -> ReadingStream:
        """Switch to reading, starting at the current position."""
        return ReadingStream(position=self.position, operation=replace(operation))

    def seek_bytes(self, data: bytes) -> bytes:
        """Consume bytes up to the target and return whatever follows it.

        If the target lies beyond the end of ``data``, every byte is
        consumed and an empty slice is returned.
        """
        skip = self.target - self.position
        if skip <= len(data):
            _log.debug(
                "Data length: %d current: %d target: %d, skipping %d bytes",
                len(data),
                self.position,
                self.target,
                skip,
            )
            self.position = self.target
            return data[skip:]

        _log.debug(
            "Still waiting for target byte: %#x current: %#x",
            self.target,
            self.position,
        )
        self.position += len(data)
        return data[:0]


@dataclass
class ReadResult:
    """Outcome of feeding one chunk to a :class:`ReadingStream`.

    ``read_state`` is the state of the read *before* this chunk was taken,
    since the caller has not yet processed ``read_data``.
    """

    remaining_data: bytes
    read_data: bytes
    read_state: ReadOperation
    position: int

    def remaining(self) -> int:
        """Number of bytes still needed after this chunk to finish the read."""
        return self.read_state.total - (self.read_state.current + len(self.read_data))

    def is_complete(self) -> bool:
        """True if this chunk finished the read."""
        return self.remaining() == 0


@dataclass
class ReadingStream:
    """A stream collecting the bytes of a read operation."""

    position: int
    operation: ReadOperation

    def start_seek(self, operation: SeekOperation) -> SeekingStream:
        """Switch to seeking; the target may not lie behind the current position."""
        if operation.target < self.position:
            raise InvalidParamsError(
                f"cannot seek backwards from {self.position:#x} to {operation.target:#x}"
            )
        return SeekingStream(position=self.position, target=operation.target)

    def read_bytes(self, data: bytes) -> ReadResult:
        """Take as many bytes as the read still needs from ``data``."""
        _log.debug("Starting read at %#x", self.position)
        required = self.operation.total - self.operation.current
        take = min(required, len(data))
        to_take, remaining = data[:take], data[take:]

        previous_state = replace(self.operation)
        self.operation.advance(take)
        self.position += take
        _log.debug(
            "total: %d, required: %d, %d bytes to take, current: %d, data: %d",
            self.operation.total,
            required,
            take,
            self.operation.current,
            len(data),
        )

        return ReadResult(
            remaining_data=remaining,
            read_data=to_take,
            read_state=previous_state,
            position=self.position,
        )


Stream = Union[ReadingStream, SeekingStream]