"""
Memo store: an ordered collection of memos behind a small interface

InMemoryMemoStore keeps records in an injected list for the life of the
process. Ids come from a counter so a deleted id is never handed out again;
clear() resets both the list and the counter.
"""
import logging
from abc import ABC, abstractmethod
from datetime import datetime, timezone
from typing import List, Optional

from memo_api.errors import (
    MemoBadRequestError,
    MemoNotFoundError,
    NOT_FOUND_MESSAGE,
    STATUS_MANDATORY_MESSAGE,
)
from memo_api.models.memo import Memo, MemoStatus

logger = logging.getLogger(__name__)


class MemoStore(ABC):
    """Store interface used by the memo routes"""

    @abstractmethod
    def create(self, title: str, created_at: Optional[str] = None) -> Memo:
        """Append a new pending memo and return it"""

    @abstractmethod
    def list(self) -> List[Memo]:
        """All memos in insertion order"""

    @abstractmethod
    def get(self, memo_id: int) -> Memo:
        """Memo by id, MemoNotFoundError if absent"""

    @abstractmethod
    def update(self, memo_id: int, title: Optional[str], status: Optional[str]) -> Memo:
        """Overwrite title and status of an existing memo"""

    @abstractmethod
    def delete(self, memo_id: int) -> None:
        """Remove a memo, MemoNotFoundError if absent"""

    @abstractmethod
    def clear(self) -> None:
        """Drop every memo and restart id assignment"""


class InMemoryMemoStore(MemoStore):
    """Memo store backed by a plain list"""

    def __init__(self, records: Optional[List[Memo]] = None):
        self.records = records if records is not None else []
        self._last_id = max((memo.id for memo in self.records), default=0)

    def create(self, title: str, created_at: Optional[str] = None) -> Memo:
        self._last_id += 1
        memo = Memo(
            id=self._last_id,
            title=title,
            status=MemoStatus.PENDING,
            created_at=created_at or datetime.now(timezone.utc).isoformat()
        )
        self.records.append(memo)

        logger.info(f"Memo created: id={memo.id}")
        return memo

    def list(self) -> List[Memo]:
        return list(self.records)

    def get(self, memo_id: int) -> Memo:
        memo = self._find(memo_id)
        if memo is None:
            raise MemoNotFoundError(NOT_FOUND_MESSAGE)
        return memo

    def update(self, memo_id: int, title: Optional[str], status: Optional[str]) -> Memo:
        memo = self._find(memo_id)

        # Unknown ids get the missing-status message as well
        if memo is None or not status:
            logger.warning(f"Memo update rejected: id={memo_id} status={status!r}")
            raise MemoBadRequestError(STATUS_MANDATORY_MESSAGE)

        try:
            new_status = MemoStatus(status)
        except ValueError:
            allowed = ", ".join(s.value for s in MemoStatus)
            raise MemoBadRequestError(f'Invalid status "{status}". Use one of: {allowed}.')

        if title is not None:
            memo.title = title
        memo.status = new_status

        logger.info(f"Memo updated: id={memo_id} status={new_status.value}")
        return memo

    def delete(self, memo_id: int) -> None:
        memo = self._find(memo_id)
        if memo is None:
            logger.warning(f"Memo delete rejected: id={memo_id} not found")
            raise MemoNotFoundError(NOT_FOUND_MESSAGE)

        self.records.remove(memo)
        logger.info(f"Memo deleted: id={memo_id}")

    def clear(self) -> None:
        self.records.clear()
        self._last_id = 0
        logger.debug("Memo store cleared")

    def _find(self, memo_id: int) -> Optional[Memo]:
        for memo in self.records:
            if memo.id == memo_id:
                return memo
        return None


_memo_store: Optional[MemoStore] = None


def get_memo_store() -> MemoStore:
    """Get or create the process-wide memo store"""
    global _memo_store
    if _memo_store is None:
        _memo_store = InMemoryMemoStore()
    return _memo_store
