# Path: stream_decoder/__init__.py
"""
stream_decoder - Incremental Byte Stream Decoding

Decodes a continuous, arbitrarily chunked byte stream into application
tokens by driving a client-supplied generator ("Program") that asks for
the bytes it needs one directive at a time.

Example:
    from stream_decoder import Decoder, read_until

    def read_line():
        line = yield read_until(b'\\n')
        yield b'\\n'
        print(line)

    decoder = Decoder(read_line)
    decoder.decode(b'hello\\nwor')
    decoder.decode(b'ld\\n')
"""

from stream_decoder.process.decoder import (
    Decoder,
    DecoderSettings,
    DecoderPhase,
    FixedLength,
    ExactBytes,
    Predicate,
    read_until,
    DecodeError,
    UninitializedEngineError,
    UnsupportedDirectiveError,
    LiteralMismatchError,
    ReentrantDecodeError,
)

__version__ = '0.3.0'

__all__ = [
    'Decoder',
    'DecoderSettings',
    'DecoderPhase',
    'FixedLength',
    'ExactBytes',
    'Predicate',
    'read_until',
    'DecodeError',
    'UninitializedEngineError',
    'UnsupportedDirectiveError',
    'LiteralMismatchError',
    'ReentrantDecodeError',
]
