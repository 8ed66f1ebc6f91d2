# Path: rosetta_verify/tests/conftest.py
"""
Pytest Configuration and Shared Fixtures for rosetta_verify

Provides common test fixtures used across all test modules.
"""

import os
import sys
from pathlib import Path
from unittest.mock import MagicMock, patch

import pytest

# Add repository root and tests directory to path for imports
TESTS_ROOT = Path(__file__).parent
REPO_ROOT = TESTS_ROOT.parent.parent
sys.path.insert(0, str(REPO_ROOT))
sys.path.insert(0, str(TESTS_ROOT))

from fixtures.sample_data import (
    create_block,
    create_operation,
    create_transaction,
    create_transfer_descriptions,
)


# ==============================================================================
# ENVIRONMENT FIXTURES
# ==============================================================================

@pytest.fixture
def mock_env_vars():
    """Provide mock environment variables for testing."""
    env_vars = {
        'ROSETTA_VERIFY_ENVIRONMENT': 'test',
        'ROSETTA_VERIFY_DEBUG': 'true',

        # Logging
        'ROSETTA_VERIFY_LOG_DIR': '/tmp/rosetta_verify_test/logs',
        'ROSETTA_VERIFY_LOG_LEVEL': 'DEBUG',
        'ROSETTA_VERIFY_LOG_CONSOLE': 'false',

        # Operation asserter
        'ROSETTA_VERIFY_SUCCESSFUL_STATUSES': 'SUCCESS, OK',
        'ROSETTA_VERIFY_FAILED_STATUSES': 'FAILURE,REVERTED',

        # Matching
        'ROSETTA_VERIFY_DESCRIPTIONS_DIR': '/tmp/rosetta_verify_test/descriptions',

        # Grouping policy
        'ROSETTA_VERIFY_STRICT_RELATED_OPERATIONS': 'true',
    }

    with patch.dict(os.environ, env_vars, clear=False):
        yield env_vars


@pytest.fixture
def clean_env_vars():
    """Remove all ROSETTA_VERIFY_ variables for default-value tests."""
    cleaned = {k: v for k, v in os.environ.items() if not k.startswith('ROSETTA_VERIFY_')}
    with patch.dict(os.environ, cleaned, clear=True):
        yield


# ==============================================================================
# SAMPLE DATA FIXTURES
# ==============================================================================

@pytest.fixture
def transfer_operations():
    """Provide a sender/recipient pair linked through related_operations."""
    return [
        create_operation(0, address='A', value='-10'),
        create_operation(1, address='B', value='10', related=[0]),
    ]


@pytest.fixture
def transfer_transaction(transfer_operations):
    """Provide a transaction holding the transfer pair."""
    return create_transaction(transfer_operations)


@pytest.fixture
def sample_block():
    """Provide a block with two transactions touching accounts A, B and C."""
    return create_block([
        create_transaction([
            create_operation(0, address='A', value='-10'),
            create_operation(1, address='B', value='10', related=[0]),
        ], tx_hash='tx1'),
        create_transaction([
            create_operation(0, address='A', value='-2.5'),
            create_operation(1, address='C', value='2.5', related=[0]),
            create_operation(2, op_type='fee', address='A', value='-0.1', status='FAILURE'),
        ], tx_hash='tx2'),
    ])


@pytest.fixture
def transfer_descriptions():
    """Provide sender/recipient descriptions with opposite amounts."""
    return create_transfer_descriptions()


# ==============================================================================
# MOCK FIXTURES
# ==============================================================================

@pytest.fixture
def mock_config():
    """Create a mock ConfigLoader for testing."""
    config = MagicMock()
    config.get.side_effect = lambda key, default=None: {
        'environment': 'test',
        'debug': True,
        'successful_statuses': ['SUCCESS', 'OK'],
        'failed_statuses': ['FAILURE'],
        'strict_related_operations': True,
    }.get(key, default)
    return config


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


@pytest.fixture
def reset_singletons():
    """Reset any singleton instances between tests."""
    from rosetta_verify.config_loader import ConfigLoader
    ConfigLoader._instance = None
    ConfigLoader._initialized = False

    yield

    ConfigLoader._instance = None
    ConfigLoader._initialized = False
