# Path: stream_decoder/process/decoder/program_host.py
"""
Program Host

Owns one suspended Program (a generator) and moves it forward:

    start()         run until the first directive or completion
    resume(data)    deliver the bytes that satisfied the last directive
    inject(error)   raise `error` at the Program's suspension point

Each call returns a ProgramStep. Values the Program yields are turned
into Directives here, at the point of issue, so a malformed yield fails
before anything is resolved against the buffer. Exceptions raised by the
Program propagate unchanged.

Nested sub-programs need no support from the host: `yield from` keeps a
single outstanding directive across the whole delegation chain, and
injected errors travel down that chain to the innermost frame.
"""

from collections.abc import Generator
from dataclasses import dataclass
from typing import Any, Callable, Optional, Union

from .directives import Directive, to_directive
from .errors import UninitializedEngineError


ProgramSource = Union[Generator, Callable[..., Generator]]


@dataclass(frozen=True)
class ProgramStep:
    """
    Result of advancing a Program.

    Attributes:
        directive: Directive yielded by the Program (None when done)
        done: True when the Program returned
    """
    directive: Optional[Directive] = None
    done: bool = False


def create_program(source: ProgramSource, args: tuple = ()) -> Generator:
    """
    Turn a generator or generator factory into a fresh Program.

    Args:
        source: Generator instance, or callable returning one
        args: Positional arguments for a factory

    Returns:
        Generator ready to be started

    Raises:
        TypeError: If source is neither, or a factory returns a non-generator
    """
    if isinstance(source, Generator):
        if args:
            raise TypeError("arguments cannot be applied to a generator instance")
        return source

    if not callable(source):
        raise TypeError(
            f"program must be a generator or a generator factory, "
            f"got {type(source).__name__}"
        )

    program = source(*args)
    if not isinstance(program, Generator):
        raise TypeError(
            f"program factory {getattr(source, '__name__', source)!r} returned "
            f"{type(program).__name__}, expected a generator"
        )
    return program


@dataclass
class ProgramTemplate:
    """
    What restart() and auto-restart build new Programs from.

    A factory can be instantiated any number of times. A generator
    instance is single-use: it can back exactly one Program.

    Attributes:
        source: Generator factory or generator instance
        args: Arguments passed to the factory
        spent: True once a single-use instance has been handed out
    """
    source: ProgramSource
    args: tuple = ()
    spent: bool = False

    @property
    def single_use(self) -> bool:
        return isinstance(self.source, Generator)

    @property
    def can_instantiate(self) -> bool:
        return not (self.single_use and self.spent)

    def instantiate(self) -> Generator:
        """
        Build a Program from the template.

        Raises:
            UninitializedEngineError: If a single-use instance was already used
        """
        if not self.can_instantiate:
            raise UninitializedEngineError(
                "program template is a generator instance that was already used; "
                "pass a generator function to restart it"
            )
        if self.single_use:
            self.spent = True
        return create_program(self.source, self.args)


class ProgramHost:
    """
    Drives a single Program generator.

    Example:
        host = ProgramHost(create_program(read_header))
        step = host.start()
        while not step.done:
            step = host.resume(bytes_for(step.directive))
    """

    def __init__(self, program: Generator):
        self._program = program
        self.name = getattr(program, '__qualname__', type(program).__name__)
        self.started = False
        self.finished = False

    def start(self) -> ProgramStep:
        """Run the Program up to its first directive."""
        self.started = True
        return self._advance(self._program.send, None)

    def resume(self, data: bytes) -> ProgramStep:
        """Deliver matched bytes and run up to the next directive."""
        return self._advance(self._program.send, data)

    def inject(self, error: BaseException) -> ProgramStep:
        """Raise `error` inside the Program and let it recover or fail."""
        return self._advance(self._program.throw, error)

    def _advance(self, method: Callable[[Any], Any], argument: Any) -> ProgramStep:
        if self.finished:
            raise RuntimeError(f"program {self.name} has already finished")
        try:
            value = method(argument)
        except StopIteration:
            self.finished = True
            return ProgramStep(done=True)
        except BaseException:
            self.finished = True
            raise

        return ProgramStep(directive=to_directive(value))

    def __repr__(self) -> str:
        state = 'finished' if self.finished else ('running' if self.started else 'new')
        return f"ProgramHost({self.name}, {state})"


__all__ = [
    'ProgramSource',
    'ProgramStep',
    'ProgramTemplate',
    'ProgramHost',
    'create_program',
]
