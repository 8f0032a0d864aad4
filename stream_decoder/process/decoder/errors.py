# Path: stream_decoder/process/decoder/errors.py
"""
Decoder Error Hierarchy

Every error raised by the engine derives from DecodeError.

Propagation policy:
    - LiteralMismatchError is recoverable: it is thrown into the Program
      at its suspension point and only escapes decode() when the Program
      does not handle it.
    - UninitializedEngineError, UnsupportedDirectiveError and
      ReentrantDecodeError are caller or Program defects; they surface
      immediately and are never delivered to a Program.
"""

from typing import Optional

from .constants import preview


class DecodeError(Exception):
    """Base class for all decoder errors."""


class UninitializedEngineError(DecodeError):
    """decode() or restart() called before any Program was set."""

    def __init__(self, message: Optional[str] = None):
        super().__init__(
            message or
            "decoder not initialized (make sure you call `use` before `decode`)"
        )


class UnsupportedDirectiveError(DecodeError):
    """
    A Program yielded something outside the directive union, or a
    predicate returned an unusable length.

    Attributes:
        value: The offending yield value or predicate result
    """

    def __init__(self, message: str, value: object = None):
        super().__init__(message)
        self.value = value


class LiteralMismatchError(DecodeError):
    """
    Buffered bytes do not start with the literal a Program asked for.

    Attributes:
        expected: The literal requested by the Program
        actual: The buffered bytes compared against it (same length)
    """

    def __init__(self, expected: bytes, actual: bytes):
        super().__init__(
            f"Expected buffer to contain {preview(expected)}, "
            f"found {preview(actual)}"
        )
        self.expected = bytes(expected)
        self.actual = bytes(actual)


class ReentrantDecodeError(DecodeError):
    """A Program called back into the decoder that is currently driving it."""


__all__ = [
    'DecodeError',
    'UninitializedEngineError',
    'UnsupportedDirectiveError',
    'LiteralMismatchError',
    'ReentrantDecodeError',
]
