"""
Dependency container injection module - Main Layer

Composition root wiring settings, MongoDB, the collaborators and the
forecasting use cases together.
"""

from contextlib import asynccontextmanager

from dependency_injector import containers, providers

from inventory_forecast.application.use_cases.forecast_use_cases import (
    CreateForecastUseCase,
    GetLatestForecastUseCase,
)
from inventory_forecast.domain.services.generator import (
    ForecastGenerator,
    seeded_source,
)
from inventory_forecast.infrastructure.database import MongoDatabase
from inventory_forecast.infrastructure.gateways.sales_history_gateway import (
    MongoSalesHistoryGateway,
)
from inventory_forecast.infrastructure.repositories.forecast_repository import (
    ForecastRepository,
)
from inventory_forecast.infrastructure.services.sales_seeder import SalesSeeder
from inventory_forecast.shared import get_logger

from .config import AppSettings

logger = get_logger(__name__)


class AppContainer(containers.DeclarativeContainer):
    """Composition Root using dependency-injector."""

    wiring_config = containers.WiringConfiguration(packages=["..presentation"])

    # Settings
    config = providers.Configuration()

    # Infrastructure
    mongo_database = providers.Singleton(
        MongoDatabase,
        mongo_uri=config.database.mongo_uri,
        db_name=config.database.database_name,
    )

    forecast_repository = providers.Singleton(
        ForecastRepository,
        mongo_database=mongo_database,
    )

    sales_history_gateway = providers.Singleton(
        MongoSalesHistoryGateway,
        mongo_database=mongo_database,
    )

    # A fresh uniform source per forecast run
    random_source = providers.Factory(
        seeded_source,
        seed=config.forecast.random_seed,
    )

    forecast_generator = providers.Factory(
        ForecastGenerator,
        random_source=random_source,
        window=config.forecast.moving_average_window,
    )

    sales_seeder = providers.Factory(
        SalesSeeder,
        mongo_database=mongo_database,
        random_source=random_source,
    )

    # Application (use cases)
    create_forecast_use_case = providers.Factory(
        CreateForecastUseCase,
        sales_history_gateway=sales_history_gateway,
        forecast_repository=forecast_repository,
        generator=forecast_generator,
        lookback_days=config.forecast.lookback_days,
        min_history_points=config.forecast.min_history_points,
        default_horizon=config.forecast.default_horizon,
        default_model=config.forecast.default_model,
    )

    get_latest_forecast_use_case = providers.Factory(
        GetLatestForecastUseCase,
        forecast_repository=forecast_repository,
        sales_history_gateway=sales_history_gateway,
        context_days=config.forecast.context_days,
    )


# -------------------------
# Global Container Instance
# -------------------------
_app_container: AppContainer | None = None


def init_container(settings: AppSettings) -> AppContainer:
    """Initialize global container with application settings."""

    global _app_container

    container = AppContainer()
    container.config.from_pydantic(settings)
    _app_container = container
    return container


def get_container() -> AppContainer:
    """Get the initialized global container."""

    if _app_container is None:
        raise RuntimeError("Container has not been initialized yet")

    return _app_container


@asynccontextmanager
async def app_lifespan():
    """
    Startup/shutdown of the container's external resources.

    Ensures the MongoDB indexes on startup and closes the client on
    shutdown. Used by the FastAPI lifespan and the seeding entry point.
    """
    container = get_container()
    mongo_database = container.mongo_database()

    try:
        logger.info("container.mongo.ensure_indexes")
        await mongo_database.create_indexes()
        logger.info("container.resources.initialized")
        yield container
    finally:
        logger.info("container.mongo.close")
        mongo_database.close()
        logger.info("container.resources.shutdown")
