"""Store package - persistence for relative records."""

from itombs.store.relative_store import RelativeStore

__all__ = ["RelativeStore"]
