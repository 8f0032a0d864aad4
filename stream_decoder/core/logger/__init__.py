# Path: stream_decoder/core/logger/__init__.py
"""
stream_decoder Logger Package

IPO-aware logging for the stream decoder.

Provides separate log streams for:
- INPUT layer (byte sources, CLI)
- PROCESS layer (decoding engine, programs)
- OUTPUT layer (record sinks, printing)
"""

from .ipo_logging import (
    setup_ipo_logging,
    get_input_logger,
    get_process_logger,
    get_output_logger,
)

__all__ = [
    'setup_ipo_logging',
    'get_input_logger',
    'get_process_logger',
    'get_output_logger',
]
