"""Tests for the SQLite relative store."""

import tempfile

import pytest

from itombs.errors import NotFound, TransientError, ValidationError
from itombs.store.relative_store import RelativeStore


class TestRelativeStore:
    """Test relative storage."""

    def test_add_and_list(self, store):
        """Should add relatives and list them in insertion order."""
        bob = store.add_relative(1, "Bob", "parent", "https://example.com/bob")
        sue = store.add_relative(1, "Sue", "parent")

        assert bob.id > 0
        assert bob.owner_id == 1
        assert bob.profile_link == "https://example.com/bob"
        assert sue.profile_link is None
        assert store.list_relatives(1) == [bob, sue]

    def test_owners_are_isolated(self, store):
        store.add_relative(1, "Bob", "parent")
        store.add_relative(2, "Ann", "spouse")
        assert [r.name for r in store.list_relatives(2)] == ["Ann"]
        assert store.list_relatives(3) == []

    def test_strips_fields(self, store):
        record = store.add_relative(1, "  Bob  ", " sibling ", "   ")
        assert record.name == "Bob"
        assert record.relationship == "sibling"
        assert record.profile_link is None

    @pytest.mark.parametrize("owner_id, name, relationship", [
        (1, "", "parent"),
        (1, "   ", "parent"),
        (1, "Bob", None),
        (None, "Bob", "parent"),
    ])
    def test_missing_fields(self, store, owner_id, name, relationship):
        """Missing required fields are rejected."""
        with pytest.raises(ValidationError):
            store.add_relative(owner_id, name, relationship)
        assert store.list_relatives(1) == []

    def test_unknown_relationship_kept(self, store):
        """Relationships outside the vocabulary are stored and deletable."""
        friend = store.add_relative(1, "Max", "bestfriend")
        assert store.list_relatives(1) == [friend]
        assert store.delete_relative(friend.id)
        assert store.list_relatives(1) == []

    def test_delete(self, store):
        bob = store.add_relative(1, "Bob", "parent")
        assert store.delete_relative(bob.id)
        assert store.get_relative(bob.id) is None

    def test_delete_twice(self, store):
        """Deleting a stale id raises NotFound."""
        bob = store.add_relative(1, "Bob", "parent")
        store.delete_relative(bob.id)
        with pytest.raises(NotFound):
            store.delete_relative(bob.id)

    def test_database_failure(self):
        """An unusable database path surfaces as TransientError."""
        with tempfile.TemporaryDirectory() as tmpdir:
            with pytest.raises(TransientError):
                RelativeStore(db_path=tmpdir)

    def test_api_serialization(self, store):
        record = store.add_relative(4, "Bob", "parent", "https://example.com")
        assert record.to_api() == {
            "tree_id": record.id,
            "user_id": 4,
            "relative_name": "Bob",
            "relationship": "parent",
            "profile_url": "https://example.com",
        }
