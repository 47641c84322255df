"""
Pydantic models for request/response validation
"""
from memo_api.models.memo import Memo, MemoCreate, MemoUpdate, MemoStatus, ErrorMessage
