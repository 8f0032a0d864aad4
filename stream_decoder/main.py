#!/usr/bin/env python3
# Path: stream_decoder/main.py
"""
stream_decoder - Main Entry Point

Decodes a chunked record file with the incremental decoder, feeding it
in fixed-size reads the way a socket or pipe would deliver it.

Data Flow:
    INPUT:   record file, read in --chunk-size pieces
    PROCESS: Decoder driving the chunked_records program
    OUTPUT:  one line per decoded record on stdout

Usage:
    python -m stream_decoder.main records.bin
    python -m stream_decoder.main records.bin --chunk-size 1
    python -m stream_decoder.main records.bin --no-auto-restart

Configuration:
    STREAM_DECODER_* variables or a .env file next to this module
    (see config_loader.py).
"""

import argparse
import sys
from pathlib import Path
from typing import Optional

from stream_decoder.config_loader import ConfigLoader
from stream_decoder.core.logger import (
    setup_ipo_logging,
    get_input_logger,
    get_output_logger,
)
from stream_decoder.constants import (
    STATUS_OK, STATUS_FAIL, STATUS_WARN, STATUS_INFO,
    MENU_SEPARATOR,
    MENU_HEADER,
    EXIT_OK, EXIT_ERROR, EXIT_INTERRUPTED,
)
from stream_decoder.loaders import iter_file_chunks, feed
from stream_decoder.process.decoder import Decoder, DecoderSettings, DecodeError
from stream_decoder.process.programs import RecordCollector, chunked_records


def print_banner() -> None:
    """Print application banner."""
    print()
    print(MENU_HEADER)
    print("  STREAM_DECODER - Incremental Record Decoder")
    print(MENU_HEADER)
    print()


def print_system_info(config: ConfigLoader) -> None:
    """
    Print system configuration information.

    Args:
        config: ConfigLoader instance
    """
    print(f"  Environment:  {config.get('environment')}")
    print(f"  Auto-restart: {config.get('auto_restart')}")
    print(f"  Chunk size:   {config.get('read_chunk_size')}")
    print()


def initialize_system() -> ConfigLoader:
    """
    Load configuration and set up logging.

    STREAM_DECODER_DEBUG forces DEBUG level regardless of LOG_LEVEL.

    Returns:
        ConfigLoader instance
    """
    config = ConfigLoader()

    log_level = 'DEBUG' if config.get('debug') else config.get('log_level', 'INFO')

    setup_ipo_logging(
        log_dir=config.get('log_dir'),
        log_level=log_level,
        console_output=config.get('log_console', True)
    )

    return config


def decode_file(
    file_path: Path,
    chunk_size: int,
    settings: DecoderSettings,
    echo: bool = True
) -> RecordCollector:
    """
    Decode a chunked record file.

    Args:
        file_path: File to decode
        chunk_size: Bytes per decode() call
        settings: Decoder settings
        echo: Print each record as it is decoded

    Returns:
        RecordCollector holding every decoded record
    """
    output_logger = get_output_logger('main')

    def print_record(record: bytes) -> None:
        output_logger.debug(f"Printing record of {len(record)} bytes")
        print(record.decode('utf-8', errors='replace'))

    sink = RecordCollector(on_record=print_record if echo else None)
    decoder = Decoder(chunked_records(sink), settings)

    feed(decoder, iter_file_chunks(file_path, chunk_size))

    if decoder.buffered:
        output_logger.warning(
            f"{len(decoder.buffered)} trailing bytes were not decoded"
        )

    return sink


def main(argv: Optional[list[str]] = None) -> int:
    """
    Main entry point for stream_decoder.

    Args:
        argv: Command line arguments (defaults to sys.argv[1:])

    Returns:
        Exit code (0 for success, non-zero for error)
    """
    parser = argparse.ArgumentParser(
        description='stream_decoder - decode a chunked record stream incrementally',
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  python -m stream_decoder.main records.bin                 Decode with defaults
  python -m stream_decoder.main records.bin --chunk-size 1  One byte per decode call
  python -m stream_decoder.main records.bin --no-auto-restart
        """
    )

    parser.add_argument(
        'file',
        type=Path,
        help='Chunked record file to decode'
    )

    parser.add_argument(
        '--chunk-size', '-s',
        type=int,
        help='Bytes per decode call (default: STREAM_DECODER_READ_CHUNK_SIZE)'
    )

    parser.add_argument(
        '--no-auto-restart',
        action='store_true',
        help='Stop after the first record instead of restarting the program'
    )

    parser.add_argument(
        '--quiet', '-q',
        action='store_true',
        help='Suppress banner and summary output'
    )

    args = parser.parse_args(argv)

    if not args.quiet:
        print_banner()

    try:
        config = initialize_system()
        logger = get_input_logger('main')

        if not args.quiet:
            print_system_info(config)

        chunk_size = (
            args.chunk_size if args.chunk_size is not None
            else config.get('read_chunk_size')
        )
        settings = DecoderSettings.from_config(config)
        if args.no_auto_restart:
            settings = settings.model_copy(update={'auto_restart': False})

        logger.info(f"Decoding {args.file} (chunk size {chunk_size})")
        sink = decode_file(args.file, chunk_size, settings)

        if not args.quiet:
            print(MENU_SEPARATOR)
            print(f"{STATUS_OK} Decoded {len(sink.records)} records")
            if not sink.ended:
                print(f"{STATUS_WARN} End-of-stream marker not reached")

        return EXIT_OK

    except DecodeError as e:
        print(f"\n{STATUS_FAIL} Decode error: {e}")
        return EXIT_ERROR

    except (OSError, ValueError) as e:
        print(f"\n{STATUS_FAIL} Error: {e}")
        return EXIT_ERROR

    except KeyboardInterrupt:
        print(f"\n{STATUS_INFO} Interrupted")
        return EXIT_INTERRUPTED


if __name__ == '__main__':
    sys.exit(main())
