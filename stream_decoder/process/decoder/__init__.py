# Path: stream_decoder/process/decoder/__init__.py
"""
Decoder Package

Resumable single-buffer incremental matcher.

Components:
    - ByteBuffer: received-but-unconsumed bytes
    - resolve: decides NEED_MORE / MATCHED / MISMATCH for a directive
    - ProgramHost: starts, resumes and injects errors into a Program
    - Decoder: driver loop plus restart/use lifecycle

Example:
    from stream_decoder.process.decoder import Decoder, read_until

    def read_line():
        line = yield read_until(b'\\n')
        yield b'\\n'
        lines.append(line)

    decoder = Decoder(read_line)
    decoder.decode(b'first\\nsec')
    decoder.decode(b'ond\\n')
"""

from .buffer import ByteBuffer
from .constants import DecoderPhase, ResolutionStatus, NEED_MORE
from .directives import (
    FixedLength,
    ExactBytes,
    Predicate,
    Directive,
    to_directive,
    read_until,
)
from .errors import (
    DecodeError,
    UninitializedEngineError,
    UnsupportedDirectiveError,
    LiteralMismatchError,
    ReentrantDecodeError,
)
from .resolver import Resolution, resolve
from .program_host import (
    ProgramHost,
    ProgramStep,
    ProgramTemplate,
    create_program,
)
from .settings import DecoderSettings
from .decoder import Decoder

__all__ = [
    # Engine
    'Decoder',
    'DecoderSettings',
    'DecoderPhase',
    # Building blocks
    'ByteBuffer',
    'Resolution',
    'ResolutionStatus',
    'resolve',
    'ProgramHost',
    'ProgramStep',
    'ProgramTemplate',
    'create_program',
    # Directives
    'FixedLength',
    'ExactBytes',
    'Predicate',
    'Directive',
    'to_directive',
    'read_until',
    'NEED_MORE',
    # Errors
    'DecodeError',
    'UninitializedEngineError',
    'UnsupportedDirectiveError',
    'LiteralMismatchError',
    'ReentrantDecodeError',
]
