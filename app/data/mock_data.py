from __future__ import annotations

import threading
from typing import Mapping, Optional

import pandas as pd
from faker import Faker

from data.records import WRITABLE_FIELDS, Page, Record, StoreResult
from utils.logging import get_logger

log = get_logger(__name__)

COLUMNS = ["id", *WRITABLE_FIELDS]


def student_rows_mock(n_rows: int = 20, seed: int = 7) -> pd.DataFrame:
    fake = Faker()
    fake.seed_instance(seed)
    rows = []
    for i in range(1, n_rows + 1):
        rows.append(
            {
                "id": i,
                "name": fake.name(),
                "email": fake.email(),
                "number": fake.numerify("##########"),
                "desc": fake.sentence(nb_words=12)[:200],
            }
        )
    return pd.DataFrame(rows, columns=COLUMNS).astype({"id": "int64"})


class MockRecordStore:
    """
    In-memory stand-in for the hosted table (local dev / demos).

    Mirrors the hosted semantics: ids are assigned in increasing order and
    never reused, listing is id-descending with an exact count.
    """

    def __init__(self, df: Optional[pd.DataFrame] = None):
        self._df = (df if df is not None else student_rows_mock()).copy()
        self._next_id = int(self._df["id"].max()) + 1 if len(self._df) else 1
        self._lock = threading.Lock()

    def __len__(self) -> int:
        return len(self._df)

    def list_page(self, offset: int, limit: int) -> StoreResult[Page]:
        with self._lock:
            ordered = self._df.sort_values("id", ascending=False)
            window = ordered.iloc[offset : offset + limit]
            records = [Record.from_row(r) for r in window.to_dict("records")]
            return StoreResult(value=Page(records=records, total_count=len(self._df)))

    def get_by_id(self, record_id: int) -> StoreResult[Optional[Record]]:
        with self._lock:
            match = self._df[self._df["id"] == record_id]
            if match.empty:
                return StoreResult(value=None)
            return StoreResult(value=Record.from_row(match.iloc[0].to_dict()))

    def insert(self, values: Mapping[str, str]) -> StoreResult[Optional[Record]]:
        with self._lock:
            row = {"id": self._next_id, **{k: values.get(k, "") for k in WRITABLE_FIELDS}}
            self._next_id += 1
            self._df = pd.concat([self._df, pd.DataFrame([row], columns=COLUMNS)], ignore_index=True).astype({"id": "int64"})
            log.info("mock insert id=%s", row["id"])
            return StoreResult(value=Record.from_row(row))

    def update(self, record_id: int, values: Mapping[str, str]) -> StoreResult[None]:
        with self._lock:
            mask = self._df["id"] == record_id
            for k in WRITABLE_FIELDS:
                if k in values:
                    self._df.loc[mask, k] = values[k]
            log.info("mock update id=%s (matched=%d)", record_id, int(mask.sum()))
            return StoreResult()

    def delete(self, record_id: int) -> StoreResult[None]:
        with self._lock:
            before = len(self._df)
            self._df = self._df[self._df["id"] != record_id].reset_index(drop=True)
            log.info("mock delete id=%s (removed=%d)", record_id, before - len(self._df))
            return StoreResult()
