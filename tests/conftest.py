"""
Shared test fixtures for the match registry.

Each test drives its async code with asyncio.run and opens a fresh registry
backed by its own SQLite file, so engines never outlive their event loop.
"""

import os
import sys
from contextlib import asynccontextmanager

import pytest

# Add the project root to Python path
sys.path.insert(0, os.path.dirname(os.path.dirname(os.path.abspath(__file__))))

from matchbook.database.database import Database
from matchbook.database.match_store import MatchStore
from matchbook.operations.authorization import WriterAuthorization
from matchbook.operations.match_registry import MatchRegistry

OWNER_ID = 111111111111111111
STRANGER_ID = 222222222222222222


@pytest.fixture
def registry_env(tmp_path):
    """Factory for `async with registry_env() as registry:` blocks"""

    @asynccontextmanager
    async def _open(owner_id: int = OWNER_ID):
        db = Database(f"sqlite:///{tmp_path / 'matches.db'}")
        await db.initialize()
        try:
            yield MatchRegistry(MatchStore(db), WriterAuthorization(owner_id))
        finally:
            await db.close()

    return _open
