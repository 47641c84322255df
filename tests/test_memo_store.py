# FILE: tests/test_memo_store.py

import pytest

from memo_api.errors import MemoBadRequestError, MemoNotFoundError
from memo_api.models.memo import Memo, MemoStatus
from memo_api.services.memo_store import InMemoryMemoStore, get_memo_store


def test_create_assigns_sequential_ids():
    store = InMemoryMemoStore()

    first = store.create("Um")
    second = store.create("Dois")

    assert (first.id, second.id) == (1, 2)
    assert first.status == MemoStatus.PENDING


def test_create_uses_iso_timestamp_by_default():
    memo = InMemoryMemoStore().create("Um")

    # ISO-8601 with a UTC offset
    assert "T" in memo.created_at
    assert memo.created_at.endswith("+00:00")


def test_deleted_id_is_not_reused():
    """Removing the newest memo must not hand its id out again"""
    store = InMemoryMemoStore()
    store.create("Um")
    store.create("Dois")

    store.delete(2)
    third = store.create("Tres")

    assert third.id == 3


def test_clear_resets_ids():
    store = InMemoryMemoStore()
    store.create("Um")
    store.create("Dois")

    store.clear()

    assert store.list() == []
    assert store.create("Novo").id == 1


def test_injected_records_are_used():
    records = [Memo(id=7, title="Existente", created_at="01/01/9999")]
    store = InMemoryMemoStore(records)

    created = store.create("Novo")

    assert created.id == 8
    assert records[-1] is created


def test_list_returns_copy():
    store = InMemoryMemoStore()
    store.create("Um")

    snapshot = store.list()
    snapshot.clear()

    assert len(store.list()) == 1


def test_update_title_optional():
    store = InMemoryMemoStore()
    store.create("Original")

    memo = store.update(1, title=None, status="feito")

    assert memo.title == "Original"
    assert memo.status == MemoStatus.DONE


@pytest.mark.parametrize("status", [None, ""])
def test_update_requires_status(status):
    store = InMemoryMemoStore()
    store.create("Original")

    with pytest.raises(MemoBadRequestError) as excinfo:
        store.update(1, title="X", status=status)

    assert excinfo.value.message == 'The field "status" is mandatory.'
    assert excinfo.value.status_code == 400


def test_update_missing_id_is_bad_request():
    with pytest.raises(MemoBadRequestError):
        InMemoryMemoStore().update(999, title="Nada", status="feito")


def test_delete_missing_id_is_not_found():
    with pytest.raises(MemoNotFoundError) as excinfo:
        InMemoryMemoStore().delete(999)

    assert excinfo.value.message == "Memo not found"
    assert excinfo.value.status_code == 404


def test_default_store_is_singleton():
    assert get_memo_store() is get_memo_store()
