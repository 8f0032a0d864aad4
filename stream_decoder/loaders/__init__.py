# Path: stream_decoder/loaders/__init__.py
"""
stream_decoder Loaders Package

Byte sources that push data into a decoder. The engine itself never
acquires bytes; these helpers are what the CLI and tests use.

Example:
    from stream_decoder.loaders import iter_file_chunks, feed

    feed(decoder, iter_file_chunks(Path('records.bin'), chunk_size=64))
"""

from .byte_source import iter_file_chunks, iter_byte_chunks, feed

__all__ = [
    'iter_file_chunks',
    'iter_byte_chunks',
    'feed',
]
