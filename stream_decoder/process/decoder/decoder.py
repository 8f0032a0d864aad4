# Path: stream_decoder/process/decoder/decoder.py
"""
Incremental Decoder

Runs a Program (generator) against a byte stream that arrives in
arbitrary chunks. The Program yields directives; the decoder resumes it
with the requested bytes once they are buffered.

Driver loop, per decode() call:

    IDLE      start the Program            -> AWAITING or completion
    AWAITING  resolve pending directive
                NEED_MORE -> return to caller
                MATCHED   -> consume, resume Program
                MISMATCH  -> throw LiteralMismatchError into Program
    completion
              auto_restart -> fresh Program from template, keep going
                              while bytes remain
              otherwise    -> DONE, hold buffered bytes until
                              restart() / use()

The loop is iterative, so long runs of immediately satisfiable
directives or back-to-back completions never grow the call stack.

Example:
    def greeting():
        name = yield read_until(b'\\n')
        yield b'\\n'
        print(f"Hello {name.decode()}")

    decoder = Decoder(greeting)
    decoder.decode(b'Ja')
    decoder.decode(b'ne\\nJoe\\n')   # prints Hello Jane, Hello Joe
"""

from collections.abc import Generator
from typing import Any, Mapping, Optional, Union

from stream_decoder.core.logger import get_process_logger

from .buffer import ByteBuffer, BytesLike
from .constants import DecoderPhase, ResolutionStatus, preview
from .directives import Directive, describe
from .errors import (
    LiteralMismatchError,
    ReentrantDecodeError,
    UninitializedEngineError,
)
from .program_host import (
    ProgramHost,
    ProgramSource,
    ProgramStep,
    ProgramTemplate,
    create_program,
)
from .resolver import resolve
from .settings import DecoderSettings


class Decoder:
    """
    Resumable single-buffer incremental matcher.

    Example:
        decoder = Decoder(read_record, {'auto_restart': False})
        for chunk in chunks:
            decoder.decode(chunk)
        decoder.restart()
    """

    def __init__(
        self,
        program: Optional[ProgramSource] = None,
        settings: Union[DecoderSettings, Mapping[str, Any], None] = None,
        *args: Any
    ):
        """
        Initialize decoder.

        Args:
            program: Generator function/factory, or a single-use generator.
                May be None and supplied later with use() or restart().
            settings: DecoderSettings or a mapping of its fields
            *args: Arguments passed to the factory on every instantiation
        """
        self.settings = DecoderSettings.coerce(settings)
        self.logger = get_process_logger('decoder')

        self._buffer = ByteBuffer()
        self._template: Optional[ProgramTemplate] = None
        self._host: Optional[ProgramHost] = None
        self._pending: Optional[Directive] = None
        self._phase = DecoderPhase.IDLE
        self._driving = False
        self._buffer_warned = False
        self._cycle_consumed = 0

        if program is not None:
            self._template = ProgramTemplate(program, args)
            self._start_from_template()

    # ========================================================================
    # PUBLIC API
    # ========================================================================

    @property
    def phase(self) -> DecoderPhase:
        return self._phase

    @property
    def pending(self) -> Optional[Directive]:
        """Directive the current Program is waiting on, if any."""
        return self._pending

    @property
    def buffered(self) -> bytes:
        """Snapshot of received but unconsumed bytes."""
        return self._buffer.peek()

    def decode(self, data: BytesLike) -> None:
        """
        Append bytes and drive the Program as far as they allow.

        Args:
            data: Next chunk of the stream

        Raises:
            UninitializedEngineError: If no Program was ever set
            UnsupportedDirectiveError: If the Program yields an invalid directive
            LiteralMismatchError: If a literal mismatch is not handled by the Program
            ReentrantDecodeError: If called from inside a running Program
            Exception: Anything else the Program raises
        """
        self._check_reentry('decode')

        if self._host is None:
            raise UninitializedEngineError()

        self._buffer.append(data)
        self._check_buffer_size()

        if self._phase in (DecoderPhase.DONE, DecoderPhase.FAILED):
            self.logger.debug(
                f"Holding {len(data)} bytes ({self._phase}); "
                f"{len(self._buffer)} bytes buffered"
            )
            return

        self._drive()

    def use(self, program: ProgramSource, *args: Any) -> None:
        """
        Swap the active Program.

        The restart template is left unchanged, so auto-restart and
        restart() still build Programs from it. The pending directive is
        dropped; buffered bytes are kept and offered to the new Program
        immediately.

        Args:
            program: Generator function/factory or generator instance
            *args: Arguments for the factory
        """
        self._check_reentry('use')

        self._install(create_program(program, args))
        self.logger.debug(f"Using program {self._host.name}")

        if self._buffer:
            self._drive()

    def restart(self, program: Optional[ProgramSource] = None, *args: Any) -> None:
        """
        Discard the current Program and start a new one.

        Args:
            program: New template (factory or generator); None reuses the
                stored template
            *args: Arguments for the factory; with program=None they
                replace the stored template arguments

        Raises:
            UninitializedEngineError: If there is no template to restart from
        """
        self._check_reentry('restart')

        if program is not None:
            self._template = ProgramTemplate(program, args)
        elif self._template is None:
            raise UninitializedEngineError(
                "decoder has no program template to restart from"
            )
        elif args:
            self._template = ProgramTemplate(self._template.source, args)

        self._start_from_template()
        self.logger.debug(f"Restarted with program {self._host.name}")

        if self._buffer:
            self._drive()

    # ========================================================================
    # DRIVER LOOP
    # ========================================================================

    def _drive(self) -> None:
        """Run the state machine, marking the decoder failed on any error."""
        self._driving = True
        try:
            self._run()
        except Exception as e:
            self._phase = DecoderPhase.FAILED
            self._pending = None
            self.logger.error(f"Decoding failed in {self._host.name}: {e}")
            raise
        finally:
            self._driving = False
            self._check_buffer_size()

    def _run(self) -> None:
        while True:
            if self._phase is DecoderPhase.IDLE:
                step = self._host.start()

            elif self._phase is DecoderPhase.AWAITING:
                resolution = resolve(self._buffer, self._pending)

                if resolution.status is ResolutionStatus.NEED_MORE:
                    return

                if resolution.is_matched:
                    data = self._buffer.consume(resolution.length)
                    self._cycle_consumed += len(data)
                    self.logger.debug(f"match {len(data)} bytes ({describe(self._pending)})")
                    step = self._host.resume(data)
                else:
                    error = LiteralMismatchError(resolution.expected, resolution.actual)
                    self.logger.debug(
                        f"mismatch: expected {preview(resolution.expected)}, "
                        f"found {preview(resolution.actual)}"
                    )
                    step = self._host.inject(error)

            else:
                return

            if not step.done:
                self._await(step)
                continue

            if not self._on_complete():
                return

    def _await(self, step: ProgramStep) -> None:
        self._pending = step.directive
        self._phase = DecoderPhase.AWAITING

    def _on_complete(self) -> bool:
        """
        Handle Program completion.

        Returns:
            True if the driver loop should keep going
        """
        self._pending = None
        finished = self._host.name
        consumed = self._cycle_consumed

        if not self.settings.auto_restart:
            self._phase = DecoderPhase.DONE
            self.logger.debug(f"Program {finished} completed; holding")
            return False

        if self._template is None or not self._template.can_instantiate:
            self._phase = DecoderPhase.DONE
            self.logger.debug(
                f"Program {finished} completed; no reusable template to restart from"
            )
            return False

        self._start_from_template()
        self.logger.debug(f"Program {finished} completed; restarted")

        if not self._buffer:
            return False

        if consumed == 0:
            # the whole cycle left the buffer untouched; the next one would too
            self.logger.warning(
                f"Program {finished} completed without consuming input; "
                f"{len(self._buffer)} bytes left for the next decode call"
            )
            return False

        return True

    # ========================================================================
    # HELPERS
    # ========================================================================

    def _start_from_template(self) -> None:
        self._install(self._template.instantiate())

    def _install(self, program: Generator) -> None:
        self._host = ProgramHost(program)
        self._pending = None
        self._phase = DecoderPhase.IDLE
        self._cycle_consumed = 0

    def _check_reentry(self, operation: str) -> None:
        if self._driving:
            raise ReentrantDecodeError(
                f"{operation}() called while the decoder is running a program"
            )

    def _check_buffer_size(self) -> None:
        limit = self.settings.buffer_warning_bytes
        if limit is None:
            return

        size = len(self._buffer)
        if size > limit and not self._buffer_warned:
            self._buffer_warned = True
            self.logger.warning(
                f"Buffered input reached {size} bytes (warning threshold {limit}); "
                f"pending {describe(self._pending) if self._pending else 'nothing'}"
            )
        elif size <= limit:
            self._buffer_warned = False

    def __repr__(self) -> str:
        program = self._host.name if self._host else None
        return (
            f"Decoder(program={program}, phase={self._phase}, "
            f"buffered={len(self._buffer)})"
        )


__all__ = ['Decoder']
