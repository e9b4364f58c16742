"""Family tree routes: list, add and delete relatives."""

from functools import lru_cache
from typing import Optional

from fastapi import APIRouter, Depends
from fastapi.responses import JSONResponse

from itombs.errors import NotFound, TransientError, ValidationError
from itombs.logger import get_logger
from itombs.models import NewRelative
from itombs.store.relative_store import RelativeStore

logger = get_logger(__name__)

router = APIRouter(prefix="/api/tree", tags=["tree"])


@lru_cache(maxsize=1)
def open_store() -> RelativeStore:
    """Shared store instance. A failed open is not cached, so the next request retries."""
    return RelativeStore()


def get_store() -> Optional[RelativeStore]:
    """Store for a request, or None when the database cannot be opened (overridden in tests)."""
    try:
        return open_store()
    except TransientError as e:
        logger.error("Opening tree database failed: %s", e)
        return None


def _message(text: str, status_code: int) -> JSONResponse:
    return JSONResponse({"message": text}, status_code=status_code)


def _server_error() -> JSONResponse:
    return _message("Server error", 500)


@router.get("")
def list_relatives(
    userId: Optional[int] = None, store: Optional[RelativeStore] = Depends(get_store)
):
    """Get all relatives for a user."""
    if userId is None:
        return _message("Missing userId parameter", 400)
    if store is None:
        return _server_error()
    try:
        records = store.list_relatives(userId)
    except TransientError as e:
        logger.error("GET tree failed for user %s: %s", userId, e)
        return _server_error()
    return [record.to_api() for record in records]


@router.post("", status_code=201)
def add_relative(body: NewRelative, store: Optional[RelativeStore] = Depends(get_store)):
    """Add a new relative to a user's tree."""
    if store is None:
        return _server_error()
    try:
        record = store.add_relative(
            body.owner_id, body.name, body.relationship, body.profile_link
        )
    except ValidationError as e:
        return _message(str(e), 400)
    except TransientError as e:
        logger.error("POST tree failed: %s", e)
        return _server_error()
    return record.to_api()


def _delete(treeId: Optional[int], store: Optional[RelativeStore]):
    if treeId is None:
        return _message("Missing treeId parameter", 400)
    if store is None:
        return _server_error()
    try:
        store.delete_relative(treeId)
    except NotFound as e:
        logger.warning("DELETE tree: %s", e)
        return _message("Relative not found", 404)
    except TransientError as e:
        logger.error("DELETE tree failed for %s: %s", treeId, e)
        return _server_error()
    return {"message": "Relative deleted"}


@router.delete("")
def delete_relative(
    treeId: Optional[int] = None, store: Optional[RelativeStore] = Depends(get_store)
):
    """Delete a relative by ``treeId`` query parameter."""
    return _delete(treeId, store)


@router.delete("/{tree_id}")
def delete_relative_by_path(tree_id: int, store: Optional[RelativeStore] = Depends(get_store)):
    """Delete a relative by path id."""
    return _delete(tree_id, store)
