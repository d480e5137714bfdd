"""
Application Settings - Main Layer

Use Pydantic Settings for configuration management.
Values come from environment variables, an optional .env file and the
defaults below.
"""

from typing import Optional

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict

from inventory_forecast.shared import DEFAULT_MODEL_LABEL, EnumEnvironment, EnumLogLevel


class DatabaseSettings(BaseSettings):
    """Database configuration settings."""

    mongo_uri: str = Field(
        default="mongodb://localhost:27017/inventory_forecast",
        description="MongoDB connection URI",
    )
    database_name: str = Field(
        default="inventory_forecast", description="Name of the MongoDB database"
    )

    model_config = SettingsConfigDict(
        env_prefix="DB_", case_sensitive=False, extra="ignore"
    )


class APISettings(BaseSettings):
    """HTTP API configuration settings."""

    title: str = Field(default="Inventory Forecast API", description="API title")
    description: str = Field(
        default="Short-horizon demand forecasting for inventory planning",
        description="API description",
    )
    version: str = Field(default="1.0.0", description="API version")
    host: str = Field(default="0.0.0.0", description="Interface to bind")
    port: int = Field(default=8000, description="Port to bind the server")
    reload: bool = Field(
        default=False, description="Enable auto-reload for development"
    )

    model_config = SettingsConfigDict(
        env_prefix="API_", case_sensitive=False, extra="ignore"
    )


class ForecastSettings(BaseSettings):
    """Forecasting policy settings."""

    default_horizon: int = Field(
        default=7, ge=1, description="Days forecast when the caller gives none"
    )
    moving_average_window: int = Field(
        default=7,
        ge=1,
        description="Number of recent days averaged for the baseline",
    )
    min_history_points: int = Field(
        default=7, ge=1, description="Minimum days of sales required to forecast"
    )
    lookback_days: int = Field(
        default=60, ge=1, description="Days of sales history fed to the forecast"
    )
    context_days: int = Field(
        default=30,
        ge=0,
        description="Days of sales history returned with the latest forecast",
    )
    default_model: str = Field(
        default=DEFAULT_MODEL_LABEL, description="Model label stored on forecasts"
    )
    random_seed: Optional[int] = Field(
        default=None,
        description="Seed for the forecast noise; unset draws from OS entropy",
    )

    model_config = SettingsConfigDict(
        env_prefix="FORECAST_", case_sensitive=False, extra="ignore"
    )


class LoggingSettings(BaseSettings):
    """Logging configuration settings."""

    level: EnumLogLevel = Field(default=EnumLogLevel.INFO, description="Logging level")
    format: str = Field(
        default="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
        description="Logging format",
    )
    file_path: Optional[str] = Field(
        default=None, description="Log file path (if None, logs to console)"
    )

    model_config = SettingsConfigDict(
        env_prefix="LOG_", case_sensitive=False, extra="ignore"
    )


class AppSettings(BaseSettings):
    """Main application settings, aggregating all sub-settings."""

    environment: EnumEnvironment = Field(
        default=EnumEnvironment.DEVELOPMENT, description="Application environment"
    )

    database: DatabaseSettings = Field(default_factory=DatabaseSettings)
    api: APISettings = Field(default_factory=APISettings)
    forecast: ForecastSettings = Field(default_factory=ForecastSettings)
    logging: LoggingSettings = Field(default_factory=LoggingSettings)

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        env_nested_delimiter="__",
        extra="ignore",
    )


def get_settings() -> AppSettings:
    """
    Settings factory.

    Kept as a function so tests can patch it and pick up environment
    changes made with monkeypatch.
    """
    return AppSettings()
