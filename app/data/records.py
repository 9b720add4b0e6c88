from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Callable, Generic, Mapping, Optional, Protocol, TypeVar

import httpx
from postgrest.exceptions import APIError

from utils.logging import get_logger

log = get_logger(__name__)

T = TypeVar("T")

WRITABLE_FIELDS = ("name", "email", "number", "desc")


@dataclass(frozen=True)
class Record:
    id: int
    name: str
    email: str
    number: str
    desc: str

    @classmethod
    def from_row(cls, row: Mapping[str, Any]) -> "Record":
        return cls(
            id=int(row["id"]),
            name=str(row.get("name") or ""),
            email=str(row.get("email") or ""),
            number=str(row.get("number") or ""),
            desc=str(row.get("desc") or ""),
        )

    def values(self) -> dict[str, str]:
        return {k: getattr(self, k) for k in WRITABLE_FIELDS}


@dataclass(frozen=True)
class Page:
    records: list[Record] = field(default_factory=list)
    total_count: int = 0


@dataclass(frozen=True)
class StoreResult(Generic[T]):
    """Value-or-error pair. Ordinary store failures never raise; `error` carries the store's message."""

    value: Optional[T] = None
    error: Optional[str] = None

    @property
    def ok(self) -> bool:
        return self.error is None


class RecordStore(Protocol):
    def list_page(self, offset: int, limit: int) -> StoreResult[Page]: ...

    def get_by_id(self, record_id: int) -> StoreResult[Optional[Record]]: ...

    def insert(self, values: Mapping[str, str]) -> StoreResult[Optional[Record]]: ...

    def update(self, record_id: int, values: Mapping[str, str]) -> StoreResult[None]: ...

    def delete(self, record_id: int) -> StoreResult[None]: ...


def _writable(values: Mapping[str, Any]) -> dict[str, Any]:
    return {k: values[k] for k in WRITABLE_FIELDS if k in values}


class SupabaseRecordStore:
    """
    Student table on a hosted Supabase (PostgREST) backend.

    Each call is a single request; nothing is retried or cached.
    """

    def __init__(self, client: Any, table_name: str):
        self.client = client
        self.table_name = table_name

    def _table(self):
        return self.client.table(self.table_name)

    def _run(self, op: str, fn: Callable[[], T]) -> StoreResult[T]:
        try:
            return StoreResult(value=fn())
        except APIError as e:
            message = e.message or str(e)
            log.warning("store %s failed on %s: %s", op, self.table_name, message)
            return StoreResult(error=message)
        except httpx.HTTPError as e:
            log.warning("store %s failed on %s: %s", op, self.table_name, e)
            return StoreResult(error=str(e) or type(e).__name__)

    def list_page(self, offset: int, limit: int) -> StoreResult[Page]:
        def fetch() -> Page:
            # PostgREST ranges are inclusive on both ends.
            resp = (
                self._table()
                .select("*", count="exact")
                .order("id", desc=True)
                .range(offset, offset + limit - 1)
                .execute()
            )
            rows = resp.data or []
            log.debug("listed %d rows from %s (offset=%d, limit=%d)", len(rows), self.table_name, offset, limit)
            return Page(records=[Record.from_row(r) for r in rows], total_count=resp.count or 0)

        return self._run("list", fetch)

    def get_by_id(self, record_id: int) -> StoreResult[Optional[Record]]:
        def fetch() -> Optional[Record]:
            resp = self._table().select("*").eq("id", record_id).limit(1).execute()
            rows = resp.data or []
            return Record.from_row(rows[0]) if rows else None

        return self._run("get", fetch)

    def insert(self, values: Mapping[str, str]) -> StoreResult[Optional[Record]]:
        def write() -> Optional[Record]:
            resp = self._table().insert([_writable(values)]).execute()
            rows = resp.data or []
            created = Record.from_row(rows[0]) if rows else None
            log.info("inserted record into %s (id=%s)", self.table_name, created.id if created else "?")
            return created

        return self._run("insert", write)

    def update(self, record_id: int, values: Mapping[str, str]) -> StoreResult[None]:
        def write() -> None:
            self._table().update(_writable(values)).eq("id", record_id).execute()
            log.info("updated record %s in %s", record_id, self.table_name)

        return self._run("update", write)

    def delete(self, record_id: int) -> StoreResult[None]:
        def write() -> None:
            self._table().delete().eq("id", record_id).execute()
            log.info("deleted record %s from %s", record_id, self.table_name)

        return self._run("delete", write)
