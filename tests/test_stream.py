import pytest

from tps6699x.stream import (
    InvalidParamsError,
    ReadOperation,
    ReadingStream,
    SeekingStream,
    SeekOperation,
)


def _reader(total):
    return SeekingStream(0, 0).start_read(ReadOperation(total))


def test_seek_incomplete():
    stream = SeekingStream(0, 8)
    remaining = stream.seek_bytes(bytes([0, 1, 2, 3]))
    assert remaining == b""
    assert stream.position == 4


def test_seek_exact():
    stream = SeekingStream(0, 4)
    remaining = stream.seek_bytes(bytes([0, 1, 2, 3]))
    assert remaining == b""
    assert stream.position == 4


def test_seek_remaining():
    stream = SeekingStream(0, 2)
    remaining = stream.seek_bytes(bytes([0, 1, 2, 3, 4]))
    assert remaining == bytes([2, 3, 4])
    assert stream.position == 2


def test_seek_across_chunks():
    stream = SeekingStream(0, 6)
    assert stream.seek_bytes(bytes([0, 1, 2, 3])) == b""
    assert stream.seek_bytes(bytes([4, 5, 6, 7])) == bytes([6, 7])
    assert stream.position == 6


def test_seek_backwards():
    stream = _reader(4)
    stream.read_bytes(bytes([0, 1, 2, 3]))
    with pytest.raises(InvalidParamsError):
        stream.start_seek(SeekOperation(2))


def test_seek_forward_from_reading():
    stream = _reader(4)
    stream.read_bytes(bytes([0, 1, 2, 3]))
    seeking = stream.start_seek(SeekOperation(10))
    assert seeking == SeekingStream(position=4, target=10)


def test_read_exact():
    stream = _reader(4)
    result = stream.read_bytes(bytes([0, 1, 2, 3]))
    assert result.remaining_data == b""
    assert result.read_state.current == 0
    assert result.read_state.total == 4
    assert result.read_data == bytes([0, 1, 2, 3])
    assert result.position == 4
    assert result.is_complete()


def test_read_remaining():
    stream = _reader(4)
    result = stream.read_bytes(bytes([0, 1, 2, 3, 4]))
    assert result.remaining_data == bytes([4])
    assert result.read_state.current == 0
    assert result.read_state.total == 4
    assert result.read_data == bytes([0, 1, 2, 3])
    assert result.position == 4


def test_read_split_exact():
    stream = _reader(7)
    result = stream.read_bytes(bytes([0, 1, 2, 3]))
    assert result.remaining_data == b""
    assert result.read_state.current == 0
    assert result.read_state.total == 7
    assert result.read_data == bytes([0, 1, 2, 3])
    assert result.position == 4
    assert result.remaining() == 3
    assert not result.is_complete()

    result = stream.read_bytes(bytes([4, 5, 6]))
    assert result.remaining_data == b""
    assert result.read_state.current == 4
    assert result.read_state.total == 7
    assert result.read_data == bytes([4, 5, 6])
    assert result.position == 7
    assert result.is_complete()


def test_read_split_remaining():
    stream = _reader(7)
    result = stream.read_bytes(bytes([0, 1, 2, 3]))
    assert result.remaining_data == b""
    assert result.read_state.current == 0
    assert result.read_state.total == 7
    assert result.read_data == bytes([0, 1, 2, 3])
    assert result.position == 4

    result = stream.read_bytes(bytes([4, 5, 6, 7]))
    assert result.remaining_data == bytes([7])
    assert result.read_state.current == 4
    assert result.read_state.total == 7
    assert result.read_data == bytes([4, 5, 6])
    assert result.position == 7


def test_start_read_copies_operation():
    operation = ReadOperation(4)
    stream = SeekingStream(0, 0).start_read(operation)
    stream.read_bytes(bytes([0, 1]))
    assert operation.current == 0
    assert stream.operation.current == 2


def test_read_starts_at_seek_position():
    seeking = SeekingStream(0, 3)
    leftover = seeking.seek_bytes(bytes([0, 1, 2, 3, 4]))
    reading = seeking.start_read(ReadOperation(2))
    result = reading.read_bytes(leftover)
    assert result.read_data == bytes([3, 4])
    assert result.position == 5
    assert isinstance(reading, ReadingStream) and result.is_complete()


def test_read_operation_advance():
    operation = ReadOperation(10)
    operation.advance(3)
    operation.advance(4)
    assert operation == ReadOperation(total=10, current=7)