from __future__ import annotations

import math
from dataclasses import dataclass, field
from typing import Any, Mapping, Optional

from data.records import Page, Record, RecordStore, StoreResult
from data.schemas import FormVariant, validate_record
from utils.logging import get_logger

log = get_logger(__name__)

DESC_PREVIEW_WORDS = 7


def page_offset(page: int, page_size: int) -> int:
    return (page - 1) * page_size


def total_pages(total_count: int, page_size: int) -> int:
    return math.ceil(total_count / page_size) if page_size > 0 else 0


def prev_disabled(page: int) -> bool:
    return page <= 1


def next_disabled(page: int, pages: int) -> bool:
    # Also true when there are no pages at all (page 1 >= 0).
    return page >= pages


def truncate_description(desc: Optional[str], words: int = DESC_PREVIEW_WORDS) -> str:
    # The ellipsis is always appended, even when nothing was cut.
    return " ".join((desc or "").split()[:words]) + "..."


def page_after_delete(page: int, rows_left_on_page: int) -> int:
    if rows_left_on_page == 0 and page > 1:
        return page - 1
    return page


def fetch_page(store: RecordStore, page: int, page_size: int) -> StoreResult[Page]:
    return store.list_page(page_offset(page, page_size), page_size)


@dataclass
class ListState:
    """
    Per-session list view state.

    Every fetch takes a token from `begin`; `apply` drops results whose token
    has been superseded so only the latest requested page is ever shown.
    """

    page_size: int = 8
    page: int = 1
    records: list[Record] = field(default_factory=list)
    total_count: int = 0
    request_seq: int = 0
    # Page the current `records` belong to; `page` snaps back here when a fetch fails.
    loaded_page: int = 1

    def begin(self, page: int) -> int:
        # Within one script run begin/apply are back-to-back; tokens go stale once navigate() calls invalidate().
        self.page = page
        self.request_seq += 1
        return self.request_seq

    def apply(self, token: int, result: StoreResult[Page]) -> bool:
        if token != self.request_seq:
            log.debug("discarding stale page result (token=%d, latest=%d)", token, self.request_seq)
            return False
        if result.ok and result.value is not None:
            self.records = list(result.value.records)
            self.total_count = result.value.total_count
            self.loaded_page = self.page
        else:
            self.page = self.loaded_page
        return True

    def invalidate(self) -> None:
        """Supersede any in-flight fetch (e.g. the view was left)."""
        self.request_seq += 1

    @property
    def pages(self) -> int:
        return total_pages(self.total_count, self.page_size)


@dataclass(frozen=True)
class SubmitOutcome:
    errors: dict[str, str] = field(default_factory=dict)
    store_error: Optional[str] = None
    record: Optional[Record] = None

    @property
    def ok(self) -> bool:
        return not self.errors and self.store_error is None


def submit_create(store: RecordStore, values: Mapping[str, Any]) -> SubmitOutcome:
    checked = validate_record(values, FormVariant.CREATE)
    if not checked.ok:
        return SubmitOutcome(errors=checked.errors)
    res = store.insert(checked.values)
    if not res.ok:
        return SubmitOutcome(store_error=res.error)
    return SubmitOutcome(record=res.value)


def submit_update(store: RecordStore, record_id: int, values: Mapping[str, Any]) -> SubmitOutcome:
    checked = validate_record(values, FormVariant.EDIT)
    if not checked.ok:
        return SubmitOutcome(errors=checked.errors)
    res = store.update(record_id, checked.values)
    if not res.ok:
        return SubmitOutcome(store_error=res.error)
    return SubmitOutcome()


def delete_record(store: RecordStore, record_id: int) -> StoreResult[None]:
    return store.delete(record_id)


def parse_record_id(raw: Any) -> Optional[int]:
    if raw is None or isinstance(raw, bool):
        return None
    try:
        value = int(str(raw).strip())
    except ValueError:
        return None
    return value if value > 0 else None
