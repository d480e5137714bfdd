from __future__ import annotations

import runpy
from dataclasses import dataclass

import pytest
from dependency_injector import providers

from inventory_forecast.infrastructure.database import SALES_DATA_COLLECTION
from inventory_forecast.main import seed
from inventory_forecast.main.config import AppSettings
from inventory_forecast.main.container import init_container
from tests.conftest import FakeMongoDatabase


def test_main_module_serves_with_uvicorn(monkeypatch) -> None:
    executed = {}

    def fake_run(app: str, **kwargs) -> None:
        executed["app"] = app
        executed.update(kwargs)

    monkeypatch.setattr("uvicorn.run", fake_run)
    monkeypatch.setenv("API_PORT", "8123")

    runpy.run_module("inventory_forecast.main.__main__", run_name="__main__")

    assert executed["app"] == "inventory_forecast.main.app:app"
    assert executed["port"] == 8123
    assert executed["reload"] is False


def test_seed_parse_args() -> None:
    args = seed.parse_args(["--days", "10", "--product", "A", "--product", "B"])

    assert args.days == 10
    assert args.products == ["A", "B"]
    assert seed.parse_args([]).products is None


@pytest.mark.asyncio
async def test_seed_run_writes_through_container() -> None:
    database = FakeMongoDatabase()
    container = init_container(AppSettings())
    container.mongo_database.override(providers.Object(database))

    written = await seed.run(days=2, products=["SKU009"])

    assert written == 3
    documents = database.get_collection(SALES_DATA_COLLECTION).documents
    assert {doc["product_id"] for doc in documents} == {"SKU009"}
    assert database.closed is True


@dataclass
class _Recorded:
    days: int = 0
    products: object = None


def test_seed_main_runs_with_parsed_arguments(monkeypatch) -> None:
    recorded = _Recorded()

    async def fake_run(days, products=None):
        recorded.days = days
        recorded.products = products
        return 0

    monkeypatch.setattr(seed, "run", fake_run)

    seed.main(["--days", "5", "--product", "SKU003"])

    assert recorded.days == 5
    assert recorded.products == ["SKU003"]
