"""
Main module - Main/Composition Root Layer

Settings, the dependency container and the application entry points
(FastAPI app, uvicorn runner and the demo data seeder).
"""

from .config import AppSettings, get_settings
from .container import AppContainer, get_container, init_container

__all__ = [
    "AppSettings",
    "get_settings",
    "AppContainer",
    "init_container",
    "get_container",
]
