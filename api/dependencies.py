from fastapi import Request

from config import Settings, get_settings
from database.db_manager import DatabaseManager


def get_db(request: Request) -> DatabaseManager:
    """FastAPI dependency that provides the DatabaseManager."""
    return request.app.state.db_manager


def get_app_settings() -> Settings:
    """FastAPI dependency for settings (overridable in tests)."""
    return get_settings()
