# Path: stream_decoder/process/decoder/resolver.py
"""
Match Resolver

Decides whether the buffered bytes satisfy an outstanding directive.

Resolution never consumes anything; the decoder consumes exactly
Resolution.length bytes after a MATCHED outcome, so every directive
either fully succeeds or fully defers.
"""

from dataclasses import dataclass
from typing import Optional

from .buffer import ByteBuffer
from .constants import ResolutionStatus
from .directives import Directive, FixedLength, ExactBytes, Predicate
from .errors import UnsupportedDirectiveError


@dataclass(frozen=True)
class Resolution:
    """
    Result of resolving one directive against the buffer.

    Attributes:
        status: NEED_MORE, MATCHED or MISMATCH
        length: Bytes to consume (MATCHED only)
        expected: Literal that failed to match (MISMATCH only)
        actual: Buffered bytes compared against it (MISMATCH only)
    """
    status: ResolutionStatus
    length: int = 0
    expected: Optional[bytes] = None
    actual: Optional[bytes] = None

    @classmethod
    def need_more(cls) -> 'Resolution':
        return cls(status=ResolutionStatus.NEED_MORE)

    @classmethod
    def matched(cls, length: int) -> 'Resolution':
        return cls(status=ResolutionStatus.MATCHED, length=length)

    @classmethod
    def mismatch(cls, expected: bytes, actual: bytes) -> 'Resolution':
        return cls(
            status=ResolutionStatus.MISMATCH,
            expected=expected,
            actual=actual,
        )

    @property
    def is_matched(self) -> bool:
        return self.status is ResolutionStatus.MATCHED


def resolve(buffer: ByteBuffer, directive: Directive) -> Resolution:
    """
    Resolve a directive against the buffer.

    Args:
        buffer: Buffered, unconsumed bytes
        directive: Outstanding directive

    Returns:
        Resolution

    Raises:
        UnsupportedDirectiveError: If the directive is not part of the
            union or a predicate returns an unusable length
    """
    available = len(buffer)

    if isinstance(directive, FixedLength):
        if available < directive.length:
            return Resolution.need_more()
        return Resolution.matched(directive.length)

    if isinstance(directive, ExactBytes):
        literal = directive.literal
        if available < len(literal):
            return Resolution.need_more()
        if buffer.startswith(literal):
            return Resolution.matched(len(literal))
        actual = buffer.peek()[:len(literal)]
        return Resolution.mismatch(literal, actual)

    if isinstance(directive, Predicate):
        return _resolve_predicate(buffer.peek(), directive)

    raise UnsupportedDirectiveError(
        f"directive {directive!r} ({type(directive).__name__}) is not supported",
        directive,
    )


def _resolve_predicate(data: bytes, directive: Predicate) -> Resolution:
    """
    Evaluate a predicate over the full buffer.

    Args:
        data: Snapshot of the buffer
        directive: Predicate directive

    Returns:
        Resolution (NEED_MORE or MATCHED)
    """
    result = directive(data)

    if result is None:
        return Resolution.need_more()

    if isinstance(result, bool) or not isinstance(result, int):
        raise UnsupportedDirectiveError(
            f"predicate must return an int or None, got {type(result).__name__}",
            result,
        )

    if result < 0:
        return Resolution.need_more()

    if result > len(data):
        raise UnsupportedDirectiveError(
            f"predicate asked for {result} bytes but only {len(data)} are buffered",
            result,
        )

    return Resolution.matched(result)


__all__ = ['Resolution', 'resolve']
