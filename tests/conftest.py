"""Pytest fixtures shared by the test suite."""

import tempfile

import pytest

from itombs.models import RelativeRecord
from itombs.store.relative_store import RelativeStore


@pytest.fixture
def store():
    """RelativeStore backed by a temporary SQLite file."""
    with tempfile.TemporaryDirectory() as tmpdir:
        yield RelativeStore(db_path=f"{tmpdir}/tree.db")


@pytest.fixture
def make_record():
    """Factory for in-memory relative records."""
    counter = {"next": 1}

    def _make(name: str, relationship: str, owner_id: int = 7, profile_link=None):
        record = RelativeRecord(
            tree_id=counter["next"],
            user_id=owner_id,
            relative_name=name,
            relationship=relationship,
            profile_url=profile_link,
        )
        counter["next"] += 1
        return record

    return _make
