from __future__ import annotations

from types import SimpleNamespace
from unittest.mock import MagicMock

import httpx
from postgrest.exceptions import APIError

from data.records import Record, SupabaseRecordStore

ROW = {"id": 5, "name": "Jo", "email": "jo@x.com", "number": "1234567890", "desc": "0123456789"}


def _store():
    client = MagicMock()
    return client, client.table.return_value, SupabaseRecordStore(client, "student_table")


def test_list_page_orders_desc_and_uses_inclusive_range():
    client, table, store = _store()
    query = table.select.return_value.order.return_value.range.return_value
    query.execute.return_value = SimpleNamespace(data=[ROW], count=9)

    res = store.list_page(8, 8)

    client.table.assert_called_with("student_table")
    table.select.assert_called_once_with("*", count="exact")
    table.select.return_value.order.assert_called_once_with("id", desc=True)
    table.select.return_value.order.return_value.range.assert_called_once_with(8, 15)
    assert res.ok
    assert res.value.total_count == 9
    assert res.value.records == [Record.from_row(ROW)]


def test_list_page_handles_missing_count_and_data():
    _, table, store = _store()
    query = table.select.return_value.order.return_value.range.return_value
    query.execute.return_value = SimpleNamespace(data=None, count=None)
    res = store.list_page(0, 8)
    assert res.value.records == []
    assert res.value.total_count == 0


def test_api_error_message_is_returned_verbatim():
    _, table, store = _store()
    query = table.select.return_value.order.return_value.range.return_value
    query.execute.side_effect = APIError(
        {"message": 'relation "public.student_table" does not exist', "code": "42P01", "hint": None, "details": None}
    )
    res = store.list_page(0, 8)
    assert not res.ok
    assert res.error == 'relation "public.student_table" does not exist'


def test_transport_error_becomes_result():
    _, table, store = _store()
    table.delete.return_value.eq.return_value.execute.side_effect = httpx.ConnectError("connection refused")
    res = store.delete(5)
    assert not res.ok
    assert res.error == "connection refused"


def test_get_by_id_found_and_missing():
    _, table, store = _store()
    query = table.select.return_value.eq.return_value.limit.return_value
    query.execute.return_value = SimpleNamespace(data=[ROW], count=None)
    assert store.get_by_id(5).value == Record.from_row(ROW)
    table.select.return_value.eq.assert_called_with("id", 5)

    query.execute.return_value = SimpleNamespace(data=[], count=None)
    res = store.get_by_id(999999)
    assert res.ok
    assert res.value is None


def test_insert_sends_only_writable_fields():
    _, table, store = _store()
    table.insert.return_value.execute.return_value = SimpleNamespace(data=[ROW], count=None)
    res = store.insert({**{k: v for k, v in ROW.items() if k != "id"}, "id": 77, "junk": 1})
    table.insert.assert_called_once_with([{k: v for k, v in ROW.items() if k != "id"}])
    assert res.value.id == 5


def test_update_and_delete_filter_by_id():
    _, table, store = _store()
    values = {k: v for k, v in ROW.items() if k != "id"}
    assert store.update(5, values).ok
    table.update.assert_called_once_with(values)
    table.update.return_value.eq.assert_called_once_with("id", 5)

    assert store.delete(5).ok
    table.delete.return_value.eq.assert_called_once_with("id", 5)
