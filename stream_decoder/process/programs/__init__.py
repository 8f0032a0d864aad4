# Path: stream_decoder/process/programs/__init__.py
"""
Reference Programs

Decoding programs built on the engine. They are examples of the
directive contract, not part of it.

Components:
    - chunked_records: length-prefixed record stream (hex length lines)
    - RecordCollector: sink collecting decoded records
    - encode_chunked: builds a stream chunked_records can read
"""

from .chunked import (
    RecordCollector,
    RecordFormatError,
    chunked_records,
    read_chunked_record,
    encode_chunked,
)

__all__ = [
    'RecordCollector',
    'RecordFormatError',
    'chunked_records',
    'read_chunked_record',
    'encode_chunked',
]
