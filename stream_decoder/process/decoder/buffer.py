# Path: stream_decoder/process/decoder/buffer.py
"""
Byte Buffer

Growable store of received-but-unconsumed bytes. Data is appended at the
tail and consumed from the head; consumed prefixes are dropped at once.
"""

from typing import Union


BytesLike = Union[bytes, bytearray, memoryview]


class ByteBuffer:
    """
    Accumulates incoming chunks and hands out consumed prefixes.

    Example:
        buffer = ByteBuffer()
        buffer.append(b'12')
        buffer.append(b'345')
        buffer.consume(4)   # b'1234'
        buffer.peek()       # b'5'
    """

    def __init__(self, initial: BytesLike = b''):
        self._data = bytearray(initial)

    def append(self, data: BytesLike) -> None:
        """
        Append bytes at the tail, preserving arrival order.

        Raises:
            TypeError: If data is not bytes-like
        """
        if not isinstance(data, (bytes, bytearray, memoryview)):
            raise TypeError(f"data must be bytes-like, got {type(data).__name__}")
        self._data.extend(data)

    def consume(self, length: int) -> bytes:
        """
        Remove and return the first `length` bytes.

        Raises:
            ValueError: If length is negative or exceeds the buffered size
        """
        if length < 0 or length > len(self._data):
            raise ValueError(
                f"cannot consume {length} bytes from a buffer of {len(self._data)}"
            )
        chunk = bytes(self._data[:length])
        # bytearray drops a head slice without moving the remainder
        del self._data[:length]
        return chunk

    def peek(self) -> bytes:
        """Snapshot of all buffered bytes."""
        return bytes(self._data)

    def startswith(self, prefix: bytes) -> bool:
        return self._data.startswith(prefix)

    def clear(self) -> None:
        self._data.clear()

    def __len__(self) -> int:
        return len(self._data)

    def __bool__(self) -> bool:
        return bool(self._data)

    def __repr__(self) -> str:
        return f"ByteBuffer({len(self._data)} bytes)"


__all__ = ['ByteBuffer']
