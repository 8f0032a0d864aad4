# Path: stream_decoder/process/decoder/constants.py
"""
Constants for the Decoding Engine

Defines the decoder lifecycle phases, resolution outcomes and the
sentinel values shared by directives and the resolver.
"""

from enum import Enum
from typing import Final


# ==============================================================================
# DECODER PHASES
# ==============================================================================
class DecoderPhase(str, Enum):
    """
    Lifecycle phase of a Decoder.

    IDLE: Program created but not started yet
    AWAITING: Program yielded a directive the buffer cannot satisfy yet
    DONE: Program completed and auto-restart is off (or impossible)
    FAILED: Program or directive raised; needs restart() or use()
    """
    IDLE = "idle"
    AWAITING = "awaiting"
    DONE = "done"
    FAILED = "failed"

    def __str__(self) -> str:
        return self.value


# ==============================================================================
# RESOLUTION OUTCOMES
# ==============================================================================
class ResolutionStatus(str, Enum):
    """Outcome of resolving a directive against the buffer."""
    NEED_MORE = "need_more"
    MATCHED = "matched"
    MISMATCH = "mismatch"

    def __str__(self) -> str:
        return self.value


# ==============================================================================
# SENTINELS AND LIMITS
# ==============================================================================
NEED_MORE: Final[int] = -1
"""Value a predicate returns when the buffer cannot satisfy it yet."""

ERROR_PREVIEW_BYTES: Final[int] = 32
"""Maximum number of bytes quoted in error messages."""


def preview(data: bytes, limit: int = ERROR_PREVIEW_BYTES) -> str:
    """Short printable rendering of bytes for log and error messages."""
    if len(data) <= limit:
        return repr(bytes(data))
    return f"{bytes(data[:limit])!r}... ({len(data)} bytes)"
