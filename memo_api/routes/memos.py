"""
Memo endpoints
"""
import logging
from typing import List, Optional
from fastapi import APIRouter, Depends, Response

from memo_api.errors import (
    MemoBadRequestError,
    MemoNotFoundError,
    NOT_FOUND_MESSAGE,
    STATUS_MANDATORY_MESSAGE,
)
from memo_api.models.memo import ErrorMessage, Memo, MemoCreate, MemoUpdate
from memo_api.services.memo_store import MemoStore, get_memo_store

logger = logging.getLogger(__name__)
router = APIRouter()


def _parse_memo_id(raw: str) -> Optional[int]:
    """Path id as int, None when it is not a number (no memo can match it)"""
    try:
        return int(raw)
    except ValueError:
        logger.debug(f"Non-numeric memo id: {raw!r}")
        return None


@router.post("", response_model=Memo, status_code=201)
async def create_memo(request: MemoCreate, store: MemoStore = Depends(get_memo_store)):
    """Create a pending memo"""
    return store.create(title=request.title, created_at=request.created_at)


@router.get("", response_model=List[Memo])
async def list_memos(store: MemoStore = Depends(get_memo_store)):
    """List memos in creation order"""
    return store.list()


@router.get(
    "/{memo_id}",
    response_model=Memo,
    responses={404: {"model": ErrorMessage}}
)
async def get_memo(memo_id: str, store: MemoStore = Depends(get_memo_store)):
    """Fetch one memo"""
    parsed_id = _parse_memo_id(memo_id)
    if parsed_id is None:
        raise MemoNotFoundError(NOT_FOUND_MESSAGE)
    return store.get(parsed_id)


@router.put(
    "/{memo_id}",
    response_model=Memo,
    responses={400: {"model": ErrorMessage}}
)
async def update_memo(
    memo_id: str,
    request: Optional[MemoUpdate] = None,
    store: MemoStore = Depends(get_memo_store)
):
    """Update title and status of a memo; a missing body means a missing status"""
    parsed_id = _parse_memo_id(memo_id)
    if parsed_id is None:
        raise MemoBadRequestError(STATUS_MANDATORY_MESSAGE)

    request = request or MemoUpdate()
    return store.update(parsed_id, title=request.title, status=request.status)


@router.delete(
    "/{memo_id}",
    status_code=204,
    response_class=Response,
    responses={404: {"model": ErrorMessage}}
)
async def delete_memo(memo_id: str, store: MemoStore = Depends(get_memo_store)):
    """Delete a memo"""
    parsed_id = _parse_memo_id(memo_id)
    if parsed_id is None:
        raise MemoNotFoundError(NOT_FOUND_MESSAGE)

    store.delete(parsed_id)
    return Response(status_code=204)
