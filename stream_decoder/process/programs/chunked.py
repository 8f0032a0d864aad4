# Path: stream_decoder/process/programs/chunked.py
"""
Chunked Record Program

Reads a stream of length-prefixed records:

    <hex length>\\n<record bytes>\\n\\n
    ...
    0\\n\\n

A length of zero marks end-of-stream. Each record is handed to a sink as
soon as its trailing terminator has arrived.

Example:
    sink = RecordCollector()
    decoder = Decoder(chunked_records(sink))
    decoder.decode(b'B\\nHello world\\n\\n8\\nAwesome!\\n\\n0\\n\\n')
    sink.records   # [b'Hello world', b'Awesome!']
"""

from typing import Callable, Iterable, Optional, Protocol, Union

from stream_decoder.constants import (
    RECORD_LENGTH_BASE,
    RECORD_LENGTH_TERMINATOR,
    RECORD_TERMINATOR,
    END_OF_STREAM_LENGTH,
)
from stream_decoder.core.logger import get_process_logger, get_output_logger
from stream_decoder.process.decoder import DecodeError, read_until


logger = get_process_logger('chunked_records')


class RecordFormatError(DecodeError):
    """A record length line is not a valid hexadecimal number."""


class RecordSink(Protocol):
    """Receiver of decoded records."""

    def record(self, data: bytes) -> None: ...

    def end(self) -> None: ...


class RecordCollector:
    """
    Sink that keeps decoded records and forwards them to callbacks.

    Attributes:
        records: Records received so far, in stream order
        ended: True once the end-of-stream marker was read
        end_count: Number of end-of-stream markers seen
    """

    def __init__(
        self,
        on_record: Optional[Callable[[bytes], None]] = None,
        on_end: Optional[Callable[[], None]] = None
    ):
        self.records: list[bytes] = []
        self.ended = False
        self.end_count = 0
        self._on_record = on_record
        self._on_end = on_end
        self.logger = get_output_logger('record_collector')

    def record(self, data: bytes) -> None:
        self.records.append(data)
        self.logger.debug(f"Record #{len(self.records)}: {len(data)} bytes")
        if self._on_record:
            self._on_record(data)

    def end(self) -> None:
        self.ended = True
        self.end_count += 1
        self.logger.debug(f"End of stream after {len(self.records)} records")
        if self._on_end:
            self._on_end()


def parse_record_length(line: bytes) -> int:
    """
    Parse a hexadecimal record length line.

    Raises:
        RecordFormatError: If the line is empty, negative or not hexadecimal
    """
    text = line.decode('ascii', errors='replace').strip()
    try:
        length = int(text, RECORD_LENGTH_BASE)
    except ValueError:
        raise RecordFormatError(f"invalid record length line: {line!r}") from None
    if length < 0:
        raise RecordFormatError(f"negative record length: {line!r}")
    return length


def read_chunked_record(sink: RecordSink):
    """
    Program reading one record (or the end-of-stream marker).

    Usable directly as a Program or as a sub-program via `yield from`.

    Returns:
        The record bytes, or None at end-of-stream
    """
    length_line = yield read_until(RECORD_LENGTH_TERMINATOR)
    length = parse_record_length(length_line)
    yield RECORD_LENGTH_TERMINATOR

    if length == END_OF_STREAM_LENGTH:
        # the zero-length record still carries its blank terminator line
        yield RECORD_LENGTH_TERMINATOR
        logger.debug("End-of-stream marker")
        sink.end()
        return None

    record = yield length
    yield RECORD_TERMINATOR
    sink.record(record)
    return record


def chunked_records(sink: RecordSink):
    """
    Build a Program factory reading one record per Program run.

    With auto-restart on, the decoder restarts the factory after every
    record, so a whole stream is decoded record by record.

    Args:
        sink: Receiver of records and the end-of-stream event

    Returns:
        Zero-argument generator function
    """
    def read_record():
        return (yield from read_chunked_record(sink))

    return read_record


def encode_chunked(
    records: Iterable[Union[bytes, str]],
    terminate: bool = True
) -> bytes:
    """
    Encode records in the chunked record format.

    Args:
        records: Record payloads (str is encoded as UTF-8)
        terminate: Append the end-of-stream marker

    Returns:
        Encoded stream

    Example:
        encode_chunked([b'Hello world', b'Awesome!'])
        # b'B\\nHello world\\n\\n8\\nAwesome!\\n\\n0\\n\\n'
    """
    parts: list[bytes] = []
    for record in records:
        if isinstance(record, str):
            record = record.encode('utf-8')
        if not record:
            raise ValueError("empty records collide with the end-of-stream marker")
        parts.append(format(len(record), 'X').encode('ascii'))
        parts.append(RECORD_LENGTH_TERMINATOR)
        parts.append(bytes(record))
        parts.append(RECORD_TERMINATOR)
    if terminate:
        parts.append(format(END_OF_STREAM_LENGTH, 'X').encode('ascii'))
        parts.append(RECORD_LENGTH_TERMINATOR + RECORD_LENGTH_TERMINATOR)
    return b''.join(parts)


__all__ = [
    'RecordSink',
    'RecordCollector',
    'RecordFormatError',
    'parse_record_length',
    'read_chunked_record',
    'chunked_records',
    'encode_chunked',
]
