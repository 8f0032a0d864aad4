# Path: stream_decoder/loaders/byte_source.py
"""
Byte Sources

Split files or in-memory data into chunks and push them into a decoder.
"""

from pathlib import Path
from typing import Iterable, Iterator, Union

from stream_decoder.constants import DEFAULT_READ_CHUNK_SIZE, MIN_READ_CHUNK_SIZE
from stream_decoder.core.logger import get_input_logger


logger = get_input_logger('byte_source')


def _check_chunk_size(chunk_size: int) -> None:
    if chunk_size < MIN_READ_CHUNK_SIZE:
        raise ValueError(
            f"chunk_size must be at least {MIN_READ_CHUNK_SIZE}, got {chunk_size}"
        )


def iter_file_chunks(
    file_path: Union[Path, str],
    chunk_size: int = DEFAULT_READ_CHUNK_SIZE
) -> Iterator[bytes]:
    """
    Read a file in fixed-size chunks.

    Args:
        file_path: File to read
        chunk_size: Bytes per chunk (the last chunk may be shorter)

    Yields:
        Chunks in file order

    Raises:
        FileNotFoundError: If file doesn't exist
        ValueError: If chunk_size is below 1
    """
    _check_chunk_size(chunk_size)
    file_path = Path(file_path)

    if not file_path.exists():
        raise FileNotFoundError(f"File not found: {file_path}")

    logger.info(f"Reading {file_path} in {chunk_size}-byte chunks")

    total = 0
    with open(file_path, 'rb') as f:
        while True:
            chunk = f.read(chunk_size)
            if not chunk:
                break
            total += len(chunk)
            yield chunk

    logger.debug(f"Read {total} bytes from {file_path}")


def iter_byte_chunks(data: bytes, chunk_size: int) -> Iterator[bytes]:
    """
    Split in-memory bytes into chunks of `chunk_size`.

    Raises:
        ValueError: If chunk_size is below 1
    """
    _check_chunk_size(chunk_size)
    for start in range(0, len(data), chunk_size):
        yield data[start:start + chunk_size]


def feed(decoder, chunks: Iterable[bytes]) -> int:
    """
    Push every chunk into `decoder.decode` in order.

    Args:
        decoder: Decoder receiving the data
        chunks: Iterable of byte chunks

    Returns:
        Total number of bytes pushed
    """
    total = 0
    count = 0
    for chunk in chunks:
        decoder.decode(chunk)
        total += len(chunk)
        count += 1
    logger.debug(f"Fed {total} bytes in {count} chunks")
    return total


__all__ = ['iter_file_chunks', 'iter_byte_chunks', 'feed']
