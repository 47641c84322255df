"""
Health check endpoint
"""
import logging
from fastapi import APIRouter, Depends

from memo_api import __version__
from memo_api.config import get_settings
from memo_api.services.memo_store import MemoStore, get_memo_store

logger = logging.getLogger(__name__)
router = APIRouter()


@router.get("")
async def health_check(store: MemoStore = Depends(get_memo_store)):
    """
    Health check endpoint
    Reports how many memos the store currently holds
    """
    return {
        "status": "healthy",
        "version": __version__,
        "environment": get_settings().environment,
        "memo_count": len(store.list())
    }
