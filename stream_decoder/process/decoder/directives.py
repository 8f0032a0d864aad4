# Path: stream_decoder/process/decoder/directives.py
"""
Directives

A directive is what a Program yields to ask for its next slice of bytes.
The union is closed:

    FixedLength(n)       exactly n bytes
    ExactBytes(literal)  len(literal) bytes that must equal literal
    Predicate(fn)        fn(buffer) decides how many bytes to take

Programs may also yield shorthands which are normalized by to_directive()
at the moment they are issued:

    int                        -> FixedLength
    str                        -> ExactBytes (UTF-8)
    bytes/bytearray/memoryview -> ExactBytes
    callable                   -> Predicate

Example:
    def header():
        yield 'MAGIC'                  # ExactBytes(b'MAGIC')
        size = yield 4                 # FixedLength(4)
        name = yield read_until(b'\\0')  # Predicate
"""

from dataclasses import dataclass
from typing import Callable, Optional, Union

from .errors import UnsupportedDirectiveError


PredicateFn = Callable[[bytes], Optional[int]]


@dataclass(frozen=True)
class FixedLength:
    """
    Consume exactly `length` bytes once that many are buffered.

    Attributes:
        length: Number of bytes to consume (>= 0)
    """
    length: int

    def __post_init__(self) -> None:
        if isinstance(self.length, bool) or not isinstance(self.length, int):
            raise UnsupportedDirectiveError(
                f"FixedLength requires an int, got {type(self.length).__name__}",
                self.length,
            )
        if self.length < 0:
            raise UnsupportedDirectiveError(
                f"FixedLength requires a non-negative length, got {self.length}",
                self.length,
            )


@dataclass(frozen=True)
class ExactBytes:
    """
    Consume `literal` once len(literal) bytes are buffered; the bytes
    must be equal to it.

    Attributes:
        literal: Expected bytes (str is encoded as UTF-8)
    """
    literal: bytes

    def __post_init__(self) -> None:
        literal = self.literal
        if isinstance(literal, str):
            literal = literal.encode('utf-8')
        elif isinstance(literal, (bytearray, memoryview)):
            literal = bytes(literal)
        elif not isinstance(literal, bytes):
            raise UnsupportedDirectiveError(
                f"ExactBytes requires bytes or str, got {type(literal).__name__}",
                literal,
            )
        object.__setattr__(self, 'literal', literal)

    def __len__(self) -> int:
        return len(self.literal)


@dataclass(frozen=True)
class Predicate:
    """
    Let `fn` decide how many bytes to consume.

    fn receives the whole buffered content as bytes and returns either a
    length in [0, len(buffer)] or a negative value / None to wait for
    more data. It is called again on every buffer growth.

    Attributes:
        fn: Callable mapping buffered bytes to a length or sentinel
        name: Optional label used in log messages
    """
    fn: PredicateFn
    name: Optional[str] = None

    def __post_init__(self) -> None:
        if not callable(self.fn):
            raise UnsupportedDirectiveError(
                f"Predicate requires a callable, got {type(self.fn).__name__}",
                self.fn,
            )

    def __call__(self, buffer: bytes) -> Optional[int]:
        return self.fn(buffer)


Directive = Union[FixedLength, ExactBytes, Predicate]

DIRECTIVE_TYPES = (FixedLength, ExactBytes, Predicate)


def to_directive(value: object) -> Directive:
    """
    Normalize a value yielded by a Program into a Directive.

    Args:
        value: Directive instance or shorthand

    Returns:
        Directive

    Raises:
        UnsupportedDirectiveError: If the value is outside the union
    """
    if isinstance(value, DIRECTIVE_TYPES):
        return value

    # bool is an int subclass but never a meaningful length
    if isinstance(value, bool):
        raise UnsupportedDirectiveError(
            "Expected yield value to be one of int|str|bytes|callable|Directive, "
            "instead got bool",
            value,
        )

    if isinstance(value, int):
        return FixedLength(value)

    if isinstance(value, (str, bytes, bytearray, memoryview)):
        return ExactBytes(value)

    if callable(value):
        return Predicate(value)

    raise UnsupportedDirectiveError(
        "Expected yield value to be one of int|str|bytes|callable|Directive, "
        f"instead got {type(value).__name__}",
        value,
    )


def read_until(delimiter: Union[bytes, str]) -> Predicate:
    """
    Build a predicate matching everything before the first `delimiter`.

    The delimiter itself is left in the buffer.

    Args:
        delimiter: Non-empty bytes (or str, encoded as UTF-8)

    Returns:
        Predicate

    Example:
        line = yield read_until(b'\\n')
        yield b'\\n'
    """
    if isinstance(delimiter, str):
        delimiter = delimiter.encode('utf-8')
    delimiter = bytes(delimiter)
    if not delimiter:
        raise ValueError("read_until requires a non-empty delimiter")

    return Predicate(lambda buffer: buffer.find(delimiter), name=f"until {delimiter!r}")


def describe(directive: Directive) -> str:
    """Human-readable description of a directive for logging."""
    if isinstance(directive, FixedLength):
        return f"length {directive.length}"
    if isinstance(directive, ExactBytes):
        return f"literal {directive.literal!r}"
    return f"predicate {directive.name or getattr(directive.fn, '__name__', '?')}"


__all__ = [
    'FixedLength',
    'ExactBytes',
    'Predicate',
    'Directive',
    'DIRECTIVE_TYPES',
    'PredicateFn',
    'to_directive',
    'read_until',
    'describe',
]
