# Path: stream_decoder/tests/unit/test_decoder/test_program_host.py
"""
Tests for the program host and program templates.
"""

import pytest

from stream_decoder.process.decoder import (
    ExactBytes,
    FixedLength,
    LiteralMismatchError,
    ProgramHost,
    ProgramTemplate,
    UninitializedEngineError,
    UnsupportedDirectiveError,
    create_program,
)


def two_steps():
    first = yield 2
    second = yield 'ok'
    return first + second


class TestCreateProgram:
    """Test program instantiation."""

    def test_factory_is_called(self):
        program = create_program(two_steps)
        assert hasattr(program, 'send')

    def test_factory_arguments(self):
        def sized(n):
            yield n

        program = create_program(sized, (4,))
        assert next(program) == 4

    def test_generator_instance_used_as_is(self):
        program = two_steps()
        assert create_program(program) is program

    def test_arguments_with_instance_rejected(self):
        with pytest.raises(TypeError):
            create_program(two_steps(), (1,))

    def test_non_generator_factory_rejected(self):
        with pytest.raises(TypeError):
            create_program(lambda: [1, 2])

    def test_non_callable_rejected(self):
        with pytest.raises(TypeError):
            create_program(42)


class TestProgramHost:
    """Test starting, resuming and injecting errors."""

    def test_start_returns_first_directive(self):
        host = ProgramHost(two_steps())
        step = host.start()

        assert step.directive == FixedLength(2)
        assert not step.done

    def test_resume_normalizes_shorthand(self):
        host = ProgramHost(two_steps())
        host.start()
        step = host.resume(b'ab')

        assert step.directive == ExactBytes(b'ok')

    def test_completion_finishes_host(self):
        host = ProgramHost(two_steps())
        host.start()
        host.resume(b'ab')
        step = host.resume(b'ok')

        assert step.done
        assert host.finished

    def test_inject_handled(self):
        def recovering():
            try:
                yield 'hello'
            except LiteralMismatchError:
                yield 'other'

        host = ProgramHost(recovering())
        host.start()
        step = host.inject(LiteralMismatchError(b'hello', b'12345'))

        assert step.directive == ExactBytes(b'other')

    def test_inject_unhandled_propagates(self):
        host = ProgramHost(two_steps())
        host.start()

        with pytest.raises(LiteralMismatchError):
            host.inject(LiteralMismatchError(b'ok', b'no'))
        assert host.finished

    def test_invalid_yield(self):
        def bad():
            yield 1.5

        host = ProgramHost(bad())

        with pytest.raises(UnsupportedDirectiveError):
            host.start()

    def test_advance_after_finish(self):
        def empty():
            return
            yield

        host = ProgramHost(empty())
        assert host.start().done

        with pytest.raises(RuntimeError):
            host.resume(b'')


class TestProgramTemplate:
    """Test template reuse rules."""

    def test_factory_template_reusable(self):
        template = ProgramTemplate(two_steps)

        assert template.instantiate() is not template.instantiate()
        assert template.can_instantiate

    def test_instance_template_single_use(self):
        template = ProgramTemplate(two_steps())
        template.instantiate()

        assert not template.can_instantiate
        with pytest.raises(UninitializedEngineError):
            template.instantiate()
