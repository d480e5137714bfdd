from __future__ import annotations

from typing import Dict, cast

import pymongo
import pymongo.errors
import pytest

from inventory_forecast.infrastructure.database.mongo_database import (
    FORECASTS_COLLECTION,
    SALES_DATA_COLLECTION,
    MongoDatabase,
)
from tests.conftest import FakeCollection


class _StubMongoClient:
    def __init__(self, uri: str) -> None:
        self.uri = uri
        self.databases: Dict[str, _StubDatabase] = {}
        self.closed = False

    def __getitem__(self, name: str) -> "_StubDatabase":
        return self.databases.setdefault(name, _StubDatabase())

    def close(self) -> None:
        self.closed = True


class _StubDatabase:
    def __init__(self) -> None:
        self.collections: Dict[str, FakeCollection] = {}

    def __getitem__(self, name: str) -> FakeCollection:
        return self.collections.setdefault(name, FakeCollection())


class _RejectingCollection(FakeCollection):
    def create_index(self, keys, name=None, **kwargs):
        raise pymongo.errors.OperationFailure("not authorized")


@pytest.fixture(autouse=True)
def patch_mongo_client(monkeypatch) -> None:
    monkeypatch.setattr(
        "inventory_forecast.infrastructure.database.mongo_database.MongoClient",
        _StubMongoClient,
    )


@pytest.fixture()
def database() -> MongoDatabase:
    return MongoDatabase("mongodb://localhost:27017", "inventory_forecast")


@pytest.mark.asyncio
async def test_insert_and_find_document(database: MongoDatabase) -> None:
    document = {"product_id": "SKU001", "date": "2024-03-15", "quantity": 4}
    await database.insert_one(SALES_DATA_COLLECTION, document)

    result = await database.find_one(SALES_DATA_COLLECTION, {"product_id": "SKU001"})

    assert result == document


@pytest.mark.asyncio
async def test_replace_one_requires_match_without_upsert(
    database: MongoDatabase,
) -> None:
    with pytest.raises(Exception, match="Document not found"):
        await database.replace_one(
            FORECASTS_COLLECTION, {"product_id": "SKU001"}, {"product_id": "SKU001"}
        )


@pytest.mark.asyncio
async def test_replace_one_upserts_then_replaces(database: MongoDatabase) -> None:
    query = {"product_id": "SKU001", "forecast_date": "2024-03-15"}

    await database.replace_one(
        FORECASTS_COLLECTION, query, dict(query, horizon=7), upsert=True
    )
    await database.replace_one(
        FORECASTS_COLLECTION, query, dict(query, horizon=14), upsert=True
    )

    collection = cast(FakeCollection, database.db[FORECASTS_COLLECTION])
    assert [doc["horizon"] for doc in collection.documents] == [14]


@pytest.mark.asyncio
async def test_find_many_sorts_and_limits(database: MongoDatabase) -> None:
    for day in ("2024-03-12", "2024-03-14", "2024-03-13"):
        await database.insert_one(
            FORECASTS_COLLECTION, {"product_id": "SKU001", "forecast_date": day}
        )

    results = await database.find_many(
        FORECASTS_COLLECTION,
        {"product_id": "SKU001"},
        sort_by="forecast_date",
        sort_direction=pymongo.DESCENDING,
        limit=2,
    )

    assert [doc["forecast_date"] for doc in results] == ["2024-03-14", "2024-03-13"]


@pytest.mark.asyncio
async def test_create_indexes_builds_unique_keys(database: MongoDatabase) -> None:
    await database.create_indexes()

    forecasts = cast(FakeCollection, database.db[FORECASTS_COLLECTION])
    sales = cast(FakeCollection, database.db[SALES_DATA_COLLECTION])
    assert forecasts.created_indexes[0][1] == "product_forecast_date_idx"
    assert forecasts.created_indexes[0][2] == {"unique": True}
    assert sales.created_indexes[0][1] == "product_date_idx"


@pytest.mark.asyncio
async def test_create_indexes_tolerates_operation_failure(
    database: MongoDatabase,
) -> None:
    stub_db = cast(_StubDatabase, database.db)
    stub_db.collections[FORECASTS_COLLECTION] = _RejectingCollection()

    await database.create_indexes()


def test_close_closes_client(database: MongoDatabase) -> None:
    database.close()

    assert cast(_StubMongoClient, database.client).closed is True
