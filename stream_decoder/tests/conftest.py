# Path: stream_decoder/tests/conftest.py
"""
Pytest Configuration and Shared Fixtures for stream_decoder

Provides common test fixtures used across all test modules.
"""

import os
import sys
import tempfile
from pathlib import Path
from unittest.mock import patch

import pytest

# Add project root to path for imports
PROJECT_ROOT = Path(__file__).parent.parent.parent
sys.path.insert(0, str(PROJECT_ROOT))


# ==============================================================================
# ENVIRONMENT FIXTURES
# ==============================================================================

@pytest.fixture
def mock_env_vars():
    """Provide mock environment variables for testing."""
    env_vars = {
        'STREAM_DECODER_ENVIRONMENT': 'test',
        'STREAM_DECODER_DEBUG': 'true',
        'STREAM_DECODER_LOG_LEVEL': 'DEBUG',
        'STREAM_DECODER_LOG_CONSOLE': 'false',
        'STREAM_DECODER_AUTO_RESTART': 'false',
        'STREAM_DECODER_READ_CHUNK_SIZE': '7',
        'STREAM_DECODER_BUFFER_WARNING_BYTES': '1024',
    }

    with patch.dict(os.environ, env_vars, clear=False):
        yield env_vars


@pytest.fixture
def temp_dir():
    """Create a temporary directory for test files."""
    with tempfile.TemporaryDirectory() as tmpdir:
        yield Path(tmpdir)


@pytest.fixture
def reset_singletons():
    """Reset the ConfigLoader singleton between tests."""
    from stream_decoder.config_loader import ConfigLoader

    ConfigLoader._instance = None
    ConfigLoader._initialized = False

    yield

    ConfigLoader._instance = None
    ConfigLoader._initialized = False


# ==============================================================================
# SAMPLE DATA FIXTURES
# ==============================================================================

@pytest.fixture
def chunked_stream():
    """Two records followed by the end-of-stream marker."""
    return b'B\nHello world\n\n8\nAwesome!\n\n0\n\n'


@pytest.fixture
def chunked_file(temp_dir, chunked_stream):
    """Write the chunked sample stream to a file."""
    path = temp_dir / 'chunked.txt'
    path.write_bytes(chunked_stream)
    return path


@pytest.fixture
def messages():
    """List that test programs append decoded values to."""
    return []


# ==============================================================================
# UTILITY FIXTURES
# ==============================================================================

@pytest.fixture
def capture_logs():
    """Capture log output for testing."""
    import logging
    from io import StringIO

    log_capture = StringIO()
    handler = logging.StreamHandler(log_capture)
    handler.setLevel(logging.DEBUG)

    root_logger = logging.getLogger()
    previous_level = root_logger.level
    root_logger.setLevel(logging.DEBUG)
    root_logger.addHandler(handler)

    yield log_capture

    root_logger.removeHandler(handler)
    root_logger.setLevel(previous_level)
