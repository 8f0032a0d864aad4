# Path: stream_decoder/constants.py
"""
System-Wide Constants for stream_decoder

Central repository for constant values shared by the CLI, loaders and
reference programs. Engine-specific constants live in
process/decoder/constants.py.
"""

from typing import Final


# ==============================================================================
# ENVIRONMENT
# ==============================================================================
ENV_PREFIX: Final[str] = 'STREAM_DECODER_'
"""Prefix of every environment variable read by ConfigLoader."""

ENV_FILE_NAME: Final[str] = '.env'


# ==============================================================================
# INPUT DEFAULTS
# ==============================================================================
DEFAULT_READ_CHUNK_SIZE: Final[int] = 4096
"""Bytes read per call when streaming a file into a decoder."""

MIN_READ_CHUNK_SIZE: Final[int] = 1


# ==============================================================================
# CHUNKED RECORD FORMAT
# ==============================================================================
RECORD_LENGTH_BASE: Final[int] = 16
"""Record length lines are hexadecimal."""

RECORD_LENGTH_TERMINATOR: Final[bytes] = b'\n'
RECORD_TERMINATOR: Final[bytes] = b'\n\n'
END_OF_STREAM_LENGTH: Final[int] = 0


# ==============================================================================
# DISPLAY
# ==============================================================================
MENU_WIDTH: Final[int] = 60
MENU_SEPARATOR: Final[str] = '-' * MENU_WIDTH
MENU_HEADER: Final[str] = '=' * MENU_WIDTH

STATUS_OK: Final[str] = '[OK]'
STATUS_FAIL: Final[str] = '[FAIL]'
STATUS_WARN: Final[str] = '[WARN]'
STATUS_INFO: Final[str] = '[INFO]'

EXIT_OK: Final[int] = 0
EXIT_ERROR: Final[int] = 1
EXIT_INTERRUPTED: Final[int] = 130


__all__ = [
    'ENV_PREFIX',
    'ENV_FILE_NAME',
    'DEFAULT_READ_CHUNK_SIZE',
    'MIN_READ_CHUNK_SIZE',
    'RECORD_LENGTH_BASE',
    'RECORD_LENGTH_TERMINATOR',
    'RECORD_TERMINATOR',
    'END_OF_STREAM_LENGTH',
    'MENU_WIDTH',
    'MENU_SEPARATOR',
    'MENU_HEADER',
    'STATUS_OK',
    'STATUS_FAIL',
    'STATUS_WARN',
    'STATUS_INFO',
    'EXIT_OK',
    'EXIT_ERROR',
    'EXIT_INTERRUPTED',
]
