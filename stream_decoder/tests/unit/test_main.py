# Path: stream_decoder/tests/unit/test_main.py
"""
Unit Tests for main.py

Tests the CLI entry point functionality including:
- Banner and system info output
- Argument parsing
- System initialization
- Exit codes for decode errors, missing files and interrupts
"""

from unittest.mock import MagicMock, patch

import pytest

from stream_decoder.constants import EXIT_OK, EXIT_ERROR, EXIT_INTERRUPTED
from stream_decoder.process.decoder import DecoderSettings


@pytest.fixture
def mock_config():
    """ConfigLoader stand-in with CLI defaults."""
    values = {
        'environment': 'test',
        'auto_restart': True,
        'buffer_warning_bytes': None,
        'read_chunk_size': 4096,
        'log_dir': None,
        'log_level': 'INFO',
        'log_console': False,
    }
    config = MagicMock()
    config.get.side_effect = lambda key, default=None: values.get(key, default)
    return config


@pytest.fixture
def patched_init(mock_config):
    """Skip real logging setup in main()."""
    with patch('stream_decoder.main.initialize_system', return_value=mock_config) as mock_init:
        yield mock_init


class TestPrintBanner:
    """Test banner printing."""

    def test_print_banner_outputs_text(self, capsys):
        """print_banner should output text."""
        from stream_decoder.main import print_banner

        print_banner()
        captured = capsys.readouterr()

        assert 'STREAM_DECODER' in captured.out
        assert 'Incremental Record Decoder' in captured.out

    def test_banner_is_ascii_only(self, capsys):
        """Banner should contain only ASCII characters."""
        from stream_decoder.main import print_banner

        print_banner()
        captured = capsys.readouterr()

        for char in captured.out:
            assert ord(char) < 128, f"Non-ASCII character found: {char}"


class TestPrintSystemInfo:
    """Test system info printing."""

    def test_print_system_info(self, capsys, mock_config):
        """Should print configuration info."""
        from stream_decoder.main import print_system_info

        print_system_info(mock_config)
        captured = capsys.readouterr()

        assert 'test' in captured.out
        assert '4096' in captured.out


class TestInitializeSystem:
    """Test system initialization."""

    def test_initialize_sets_up_logging(self):
        with patch('stream_decoder.main.ConfigLoader') as MockConfig:
            with patch('stream_decoder.main.setup_ipo_logging') as mock_setup:
                mock_config = MagicMock()
                mock_config.get.side_effect = lambda key, default=None: default
                MockConfig.return_value = mock_config

                from stream_decoder.main import initialize_system
                result = initialize_system()

        assert result is mock_config
        mock_setup.assert_called_once_with(
            log_dir=None, log_level='INFO', console_output=True
        )

    def test_debug_forces_debug_level(self):
        """debug=True should override the configured log level."""
        values = {'debug': True, 'log_level': 'WARNING'}
        with patch('stream_decoder.main.ConfigLoader') as MockConfig:
            with patch('stream_decoder.main.setup_ipo_logging') as mock_setup:
                mock_config = MagicMock()
                mock_config.get.side_effect = lambda key, default=None: values.get(key, default)
                MockConfig.return_value = mock_config

                from stream_decoder.main import initialize_system
                initialize_system()

        assert mock_setup.call_args.kwargs['log_level'] == 'DEBUG'


class TestDecodeFile:
    """Test decode_file."""

    def test_prints_records(self, capsys, chunked_file):
        from stream_decoder.main import decode_file

        sink = decode_file(chunked_file, 3, DecoderSettings())
        captured = capsys.readouterr()

        assert sink.records == [b'Hello world', b'Awesome!']
        assert captured.out.splitlines() == ['Hello world', 'Awesome!']

    def test_no_echo(self, capsys, chunked_file):
        from stream_decoder.main import decode_file

        sink = decode_file(chunked_file, 3, DecoderSettings(), echo=False)

        assert capsys.readouterr().out == ''
        assert sink.ended is True


class TestMain:
    """Test main() argument handling and exit codes."""

    def test_missing_file_argument(self):
        from stream_decoder.main import main

        with pytest.raises(SystemExit):
            main([])

    def test_success(self, capsys, patched_init, chunked_file):
        from stream_decoder.main import main

        assert main([str(chunked_file)]) == EXIT_OK

        out = capsys.readouterr().out
        assert 'Hello world' in out
        assert 'Decoded 2 records' in out

    def test_quiet(self, capsys, patched_init, chunked_file):
        from stream_decoder.main import main

        assert main([str(chunked_file), '--quiet', '--chunk-size', '1']) == EXIT_OK

        out = capsys.readouterr().out
        assert out.splitlines() == ['Hello world', 'Awesome!']

    def test_no_auto_restart(self, capsys, patched_init, chunked_file):
        from stream_decoder.main import main

        assert main([str(chunked_file), '--no-auto-restart']) == EXIT_OK

        out = capsys.readouterr().out
        assert 'Decoded 1 records' in out
        assert 'End-of-stream marker not reached' in out

    def test_missing_file(self, capsys, patched_init, temp_dir):
        from stream_decoder.main import main

        assert main([str(temp_dir / 'missing.bin')]) == EXIT_ERROR
        assert 'File not found' in capsys.readouterr().out

    def test_invalid_chunk_size(self, patched_init, chunked_file):
        from stream_decoder.main import main

        assert main([str(chunked_file), '--chunk-size', '-2']) == EXIT_ERROR

    def test_zero_chunk_size_is_rejected(self, capsys, patched_init, chunked_file):
        """--chunk-size 0 must not fall back to the configured default."""
        from stream_decoder.main import main

        assert main([str(chunked_file), '--chunk-size', '0', '-q']) == EXIT_ERROR
        assert 'chunk_size must be at least 1' in capsys.readouterr().out

    def test_decode_error(self, capsys, patched_init, temp_dir):
        from stream_decoder.main import main

        path = temp_dir / 'bad.bin'
        path.write_bytes(b'not hex\n')

        assert main([str(path), '--quiet']) == EXIT_ERROR
        assert 'Decode error' in capsys.readouterr().out

    def test_keyboard_interrupt(self, patched_init, chunked_file):
        from stream_decoder.main import main

        with patch('stream_decoder.main.decode_file', side_effect=KeyboardInterrupt):
            assert main([str(chunked_file), '--quiet']) == EXIT_INTERRUPTED
