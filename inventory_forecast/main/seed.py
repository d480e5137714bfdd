#!/usr/bin/env python3
"""
Seeding Entry Point - Main Layer

Writes demo sales history so forecasts can be tried out locally:

    python -m inventory_forecast.main.seed --days 60 --product SKU001
"""

import argparse
import asyncio
from typing import List, Optional

from inventory_forecast.main.config import get_settings
from inventory_forecast.main.container import app_lifespan, init_container
from inventory_forecast.shared import (
    configure_logging,
    get_logger,
    update_logging_from_settings,
)

logger = get_logger(__name__)


def parse_args(argv: Optional[List[str]] = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(description="Seed demo sales data")
    parser.add_argument(
        "--days",
        type=int,
        default=60,
        help="Days of history to generate before today (default: 60)",
    )
    parser.add_argument(
        "--product",
        dest="products",
        action="append",
        help="Product id to seed; repeatable. Defaults to the sample SKUs.",
    )
    return parser.parse_args(argv)


async def run(days: int, products: Optional[List[str]] = None) -> int:
    """Seed sales data using the container's database and seeder."""
    async with app_lifespan() as container:
        seeder = container.sales_seeder()
        written = await seeder.seed(products, days=days)

    logger.info("seed.completed", documents=written, days=days)
    return written


def main(argv: Optional[List[str]] = None) -> None:
    """Main entry point for seeding."""
    configure_logging()
    settings = get_settings()
    update_logging_from_settings(settings)

    args = parse_args(argv)
    init_container(settings)
    asyncio.run(run(args.days, args.products))


if __name__ == "__main__":
    main()
