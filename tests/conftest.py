"""
Pytest configuration and shared fixtures

Common fixtures used across multiple test files are defined here.
No test needs a live PostgreSQL: the store is exercised against a mocked
pool and the routes against a mocked store.
"""
import pytest
import sys
from datetime import timedelta
from pathlib import Path
from unittest.mock import AsyncMock, Mock

# Add api directory to path for imports
# Detect if running in Docker (./api:/app mount) vs host (./api exists)
api_path = Path(__file__).parent.parent / "api"
if not api_path.exists():
    # Running in Docker where api contents are at /app directly
    api_path = Path(__file__).parent.parent
sys.path.insert(0, str(api_path))

from tests.factories import CREATED_AT, build_test_app, document_row, folder_row


# =============================================================================
# Test Data Fixtures
# =============================================================================

@pytest.fixture
def sample_folder():
    from domain_models import Folder
    return Folder.from_row(folder_row())


@pytest.fixture
def sample_document():
    from domain_models import Document
    return Document.from_row(document_row())


# =============================================================================
# Common Mock Fixtures
# =============================================================================

@pytest.fixture
def mock_pool():
    """Mock asyncpg pool: fetch returns rows, fetchrow returns one row"""
    pool = Mock()
    pool.fetch = AsyncMock(return_value=[])
    pool.fetchrow = AsyncMock(return_value=None)
    pool.fetchval = AsyncMock(return_value=1)
    pool.close = AsyncMock()
    return pool


@pytest.fixture
def mock_store():
    """Mock DriveStore with async operations"""
    store = Mock()
    store.list_drive = AsyncMock()
    store.create_folder = AsyncMock()
    store.create_document = AsyncMock()
    store.get_document = AsyncMock()
    store.update_document = AsyncMock()
    return store


@pytest.fixture
def mock_app_state(mock_store):
    """Mock AppState wired to mock_store"""
    state = Mock()
    state.get_drive_store = Mock(return_value=mock_store)
    return state


@pytest.fixture
def client(mock_app_state):
    """Test client over the full route set with a mocked store"""
    from fastapi.testclient import TestClient
    return TestClient(build_test_app(mock_app_state))


@pytest.fixture
def later():
    """A timestamp after CREATED_AT"""
    return CREATED_AT + timedelta(minutes=5)
