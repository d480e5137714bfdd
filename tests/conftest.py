from __future__ import annotations

import sys
from datetime import date, datetime, timedelta, timezone
from pathlib import Path
from types import SimpleNamespace
from typing import Any, Callable, Dict, Iterator, List, Optional, Sequence

import pytest

from inventory_forecast.domain.entities.forecast import ForecastRecord
from inventory_forecast.domain.entities.sales import SalesPoint
from inventory_forecast.domain.gateways.sales_history_gateway import (
    ISalesHistoryGateway,
)
from inventory_forecast.domain.repositories.forecast_repository import (
    IForecastRepository,
)

ROOT = Path(__file__).resolve().parents[1]
if str(ROOT) not in sys.path:
    sys.path.insert(0, str(ROOT))

FIXED_NOW = datetime(2024, 3, 15, 10, 30, tzinfo=timezone.utc)


def _matches_value(actual: Any, expected: Any) -> bool:
    if isinstance(expected, dict):
        for operator, operand in expected.items():
            if actual is None:
                return False
            if operator == "$gte" and not actual >= operand:
                return False
            if operator == "$lte" and not actual <= operand:
                return False
            if operator == "$gt" and not actual > operand:
                return False
            if operator == "$lt" and not actual < operand:
                return False
        return True
    return actual == expected


class FakeCursor:
    def __init__(self, documents: Sequence[Dict[str, Any]]):
        self._documents = list(documents)
        self._skip = 0
        self._limit = 0

    def sort(self, key: Any, direction: int = 1) -> "FakeCursor":
        keys = [(key, direction)] if isinstance(key, str) else list(key)
        for field, field_direction in reversed(keys):
            self._documents.sort(
                key=lambda doc: doc.get(field), reverse=field_direction < 0
            )
        return self

    def skip(self, amount: int) -> "FakeCursor":
        self._skip = amount
        return self

    def limit(self, amount: int) -> "FakeCursor":
        self._limit = amount
        return self

    def __iter__(self) -> Iterator[Dict[str, Any]]:
        docs = self._documents[self._skip :]
        if self._limit:
            docs = docs[: self._limit]
        return iter(docs)


class FakeCollection:
    def __init__(self) -> None:
        self.documents: List[Dict[str, Any]] = []
        self.last_query: Dict[str, Any] | None = None
        self.created_indexes: List[tuple[Any, ...]] = []

    def find_one(self, query: Dict[str, Any]) -> Dict[str, Any] | None:
        self.last_query = query
        for document in self.documents:
            if self._matches(document, query):
                return document
        return None

    def find(self, query: Dict[str, Any]) -> FakeCursor:
        self.last_query = query
        return FakeCursor(
            [doc for doc in self.documents if self._matches(doc, query)]
        )

    def insert_one(self, document: Dict[str, Any]) -> Any:
        self.documents.append(document)
        return SimpleNamespace(acknowledged=True, inserted_id=len(self.documents))

    def replace_one(
        self, query: Dict[str, Any], document: Dict[str, Any], upsert: bool = False
    ) -> Any:
        for index, existing in enumerate(self.documents):
            if self._matches(existing, query):
                self.documents[index] = document
                return SimpleNamespace(
                    matched_count=1, acknowledged=True, upserted_id=None
                )
        if upsert:
            self.documents.append(document)
            return SimpleNamespace(
                matched_count=0, acknowledged=True, upserted_id=len(self.documents)
            )
        return SimpleNamespace(matched_count=0, acknowledged=True, upserted_id=None)

    def create_index(self, keys: Any, name: str | None = None, **kwargs: Any) -> Any:
        self.created_indexes.append((keys, name, kwargs))
        return name or keys

    @staticmethod
    def _matches(document: Dict[str, Any], query: Dict[str, Any]) -> bool:
        return all(
            _matches_value(document.get(key), value) for key, value in query.items()
        )


class FakeMongoDatabase:
    def __init__(self) -> None:
        self.collections: Dict[str, FakeCollection] = {}
        self.fail_writes = False
        self.closed = False

    def get_collection(self, name: str) -> FakeCollection:
        return self.collections.setdefault(name, FakeCollection())

    async def find_one(self, collection_name: str, query: Dict[str, Any]) -> Any:
        return self.get_collection(collection_name).find_one(query)

    async def find_many(
        self,
        collection_name: str,
        query: Dict[str, Any],
        sort_by: Any = None,
        sort_direction: int = 1,
        skip: int = 0,
        limit: int = 0,
    ) -> List[Dict[str, Any]]:
        cursor = self.get_collection(collection_name).find(query)
        if sort_by:
            cursor.sort(sort_by, sort_direction)
        cursor.skip(skip)
        cursor.limit(limit)
        return list(cursor)

    async def insert_one(self, collection_name: str, document: Dict[str, Any]) -> Any:
        if self.fail_writes:
            raise Exception(f"Failed to insert document in {collection_name}")
        self.get_collection(collection_name).insert_one(document)
        return document

    async def replace_one(
        self,
        collection_name: str,
        query: Dict[str, Any],
        document: Dict[str, Any],
        upsert: bool = False,
    ) -> Any:
        if self.fail_writes:
            raise Exception(f"Failed to replace document in {collection_name}")
        result = self.get_collection(collection_name).replace_one(
            query, document, upsert=upsert
        )
        if not upsert and result.matched_count == 0:
            raise Exception(f"Document not found in {collection_name}")
        return document

    async def create_indexes(self) -> None:  # pragma: no cover - stub for tests
        pass

    def close(self) -> None:
        self.closed = True


class StubSalesHistoryGateway(ISalesHistoryGateway):
    def __init__(
        self,
        points: Optional[List[SalesPoint]] = None,
        error: Optional[Exception] = None,
    ):
        self.points = list(points or [])
        self.error = error
        self.calls: List[tuple[str, int]] = []

    async def fetch_history(
        self, product_id: str, lookback_days: int
    ) -> List[SalesPoint]:
        self.calls.append((product_id, lookback_days))
        if self.error:
            raise self.error
        return list(self.points)


class InMemoryForecastRepository(IForecastRepository):
    def __init__(self, error: Optional[Exception] = None):
        self.records: Dict[tuple[str, date], ForecastRecord] = {}
        self.put_calls = 0
        self.error = error

    async def put(self, record: ForecastRecord) -> ForecastRecord:
        self.put_calls += 1
        if self.error:
            raise self.error
        self.records[(record.product_id, record.forecast_date)] = record
        return record

    async def find_latest(self, product_id: str) -> Optional[ForecastRecord]:
        records = await self.find_by_product(product_id, limit=1)
        return records[0] if records else None

    async def find_by_product(
        self, product_id: str, limit: int = 30
    ) -> List[ForecastRecord]:
        matching = [
            record
            for (pid, _), record in self.records.items()
            if pid == product_id
        ]
        matching.sort(key=lambda record: record.forecast_date, reverse=True)
        return matching[:limit]


def make_history(
    quantities: Sequence[int], end: date = FIXED_NOW.date()
) -> List[SalesPoint]:
    """Daily sales points ending on ``end``, oldest first."""
    start = end - timedelta(days=len(quantities) - 1)
    return [
        SalesPoint(
            date=start + timedelta(days=offset),
            quantity=quantity,
            revenue=quantity * 10.0,
        )
        for offset, quantity in enumerate(quantities)
    ]


def centered_noise() -> float:
    """Uniform source pinned to the midpoint, which cancels the noise term."""
    return 0.5


@pytest.fixture()
def fake_mongo_database() -> FakeMongoDatabase:
    return FakeMongoDatabase()


@pytest.fixture()
def fixed_now() -> datetime:
    return FIXED_NOW


@pytest.fixture()
def fixed_clock() -> Callable[[], datetime]:
    return lambda: FIXED_NOW
