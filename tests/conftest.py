"""
Global pytest configuration and fixtures for Boardroom persona service tests
"""

import pytest
import sys
from datetime import datetime, timezone
from pathlib import Path
from typing import List
from unittest.mock import AsyncMock

# Add project root to path
sys.path.insert(0, str(Path(__file__).parent.parent))

from boardroom.models import Board, Persona
from boardroom.services.completion_service import CompletionService
from tests.fixtures.completion import StubCompletionService
from tests.fixtures.personas import TEST_PERSONAS


@pytest.fixture
def personas() -> List[Persona]:
    """Board roster personas, in roster order"""
    return [Persona(**data) for data in TEST_PERSONAS]


@pytest.fixture
def board(personas) -> Board:
    """A private board owned by user_owner with five personas"""
    return Board(
        id="board_1",
        name="Growth Advisory Board",
        description="Advisors for the 2025 expansion plan",
        user_id="user_owner",
        is_public=False,
        personas=personas,
        created_at=datetime(2025, 3, 1, 9, 0, tzinfo=timezone.utc)
    )


@pytest.fixture
def mock_db():
    """Create mock database manager"""
    db = AsyncMock()
    db.schema = "boardroom"
    db.execute_query = AsyncMock()
    return db


@pytest.fixture
def stub_completion():
    return StubCompletionService()


@pytest.fixture
def mock_completion():
    """Completion service mock returning a fixed reply"""
    service = AsyncMock(spec=CompletionService)
    service.complete = AsyncMock(return_value="Here is my advice.")
    return service


# Markers for different test types
def pytest_configure(config):
    config.addinivalue_line(
        "markers", "unit: mark test as a unit test"
    )
    config.addinivalue_line(
        "markers", "integration: mark test as an integration test"
    )
    config.addinivalue_line(
        "markers", "e2e: mark test as an end-to-end test"
    )
    config.addinivalue_line(
        "markers", "slow: mark test as slow running"
    )
