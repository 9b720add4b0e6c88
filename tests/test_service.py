from __future__ import annotations

from unittest.mock import MagicMock

from data.records import Page, Record, StoreResult
from data.service import (
    ListState,
    next_disabled,
    page_after_delete,
    page_offset,
    parse_record_id,
    prev_disabled,
    submit_create,
    submit_update,
    total_pages,
    truncate_description,
)


def _record(i: int) -> Record:
    return Record(id=i, name=f"n{i}", email=f"s{i}@x.com", number="1234567890", desc="0123456789")


def test_page_math():
    assert page_offset(1, 8) == 0
    assert page_offset(3, 8) == 16
    assert total_pages(0, 8) == 0
    assert total_pages(8, 8) == 1
    assert total_pages(9, 8) == 2


def test_prev_next_disabled():
    assert prev_disabled(1)
    assert not prev_disabled(2)
    assert next_disabled(2, 2)
    assert not next_disabled(1, 2)
    # No rows at all: both directions are disabled.
    assert next_disabled(1, 0)


def test_truncate_always_appends_ellipsis():
    assert truncate_description("short note") == "short note..."
    assert truncate_description("one two three four five six seven") == "one two three four five six seven..."
    assert truncate_description("a b c d e f g h i j") == "a b c d e f g..."
    assert truncate_description(None) == "..."


def test_truncate_splits_on_any_whitespace():
    assert truncate_description("a  b\tc\nd") == "a b c d..."


def test_page_after_delete_steps_back_only_when_page_emptied():
    assert page_after_delete(2, 0) == 1
    assert page_after_delete(2, 3) == 2
    assert page_after_delete(1, 0) == 1


def test_list_state_discards_superseded_results():
    state = ListState(page_size=8)
    first = state.begin(1)
    second = state.begin(2)

    late = StoreResult(value=Page(records=[_record(1)], total_count=1))
    assert not state.apply(first, late)
    assert state.records == []

    fresh = StoreResult(value=Page(records=[_record(9), _record(8)], total_count=9))
    assert state.apply(second, fresh)
    assert [r.id for r in state.records] == [9, 8]
    assert state.page == 2
    assert state.pages == 2


def test_list_state_invalidate_drops_in_flight_fetch():
    state = ListState()
    token = state.begin(1)
    state.invalidate()
    assert not state.apply(token, StoreResult(value=Page(records=[_record(1)], total_count=1)))
    assert state.records == []


def test_list_state_keeps_previous_rows_on_error():
    state = ListState()
    state.apply(state.begin(1), StoreResult(value=Page(records=[_record(3)], total_count=1)))
    assert state.apply(state.begin(1), StoreResult(error="network down"))
    assert [r.id for r in state.records] == [3]


def test_list_state_failed_fetch_returns_to_last_loaded_page():
    state = ListState(page_size=8)
    state.apply(state.begin(1), StoreResult(value=Page(records=[_record(9), _record(8)], total_count=9)))

    assert state.apply(state.begin(2), StoreResult(error="list down"))
    assert state.page == 1
    assert [r.id for r in state.records] == [9, 8]
    assert state.pages == 2


def test_submit_create_invalid_never_calls_store(valid_values):
    store = MagicMock()
    out = submit_create(store, {**valid_values, "number": "12345"})
    assert out.errors == {"number": "Phone number must be 10 digits"}
    store.insert.assert_not_called()


def test_submit_create_inserts_cleaned_values(valid_values):
    store = MagicMock()
    store.insert.return_value = StoreResult(value=_record(10))
    out = submit_create(store, {**valid_values, "extra": "ignored"})
    assert out.ok
    assert out.record.id == 10
    store.insert.assert_called_once_with(valid_values)


def test_submit_create_surfaces_store_error_verbatim(valid_values):
    store = MagicMock()
    store.insert.return_value = StoreResult(error='duplicate key value violates unique constraint "student_email_key"')
    out = submit_create(store, valid_values)
    assert not out.ok
    assert out.store_error == 'duplicate key value violates unique constraint "student_email_key"'


def test_submit_update_uses_edit_phone_rules(valid_values):
    store = MagicMock()
    store.update.return_value = StoreResult()
    out = submit_update(store, 7, {**valid_values, "number": "123456789012"})
    assert out.ok
    store.update.assert_called_once_with(7, {**valid_values, "number": "123456789012"})


def test_submit_update_error(valid_values):
    store = MagicMock()
    store.update.return_value = StoreResult(error="permission denied for table student_table")
    out = submit_update(store, 7, valid_values)
    assert out.store_error == "permission denied for table student_table"


def test_parse_record_id():
    assert parse_record_id("42") == 42
    assert parse_record_id(" 7 ") == 7
    assert parse_record_id(3) == 3
    assert parse_record_id("abc") is None
    assert parse_record_id("0") is None
    assert parse_record_id(None) is None
