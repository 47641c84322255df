"""
Memo models
"""
from enum import Enum
from typing import Optional
from pydantic import BaseModel, Field


class MemoStatus(str, Enum):
    """Lifecycle flag of a memo"""
    PENDING = "pendente"
    DONE = "feito"


class Memo(BaseModel):
    """Stored memo record"""
    id: int = Field(..., ge=1)
    title: str
    status: MemoStatus = MemoStatus.PENDING
    created_at: str


class MemoCreate(BaseModel):
    """Create memo request. created_at is passed through when the client sends one."""
    title: str = ""
    created_at: Optional[str] = None


class MemoUpdate(BaseModel):
    """Update memo request. status is checked by the store, not here."""
    title: Optional[str] = None
    status: Optional[str] = None


class ErrorMessage(BaseModel):
    """Error body returned for every rejected request"""
    message: str
