"""
Database package: SQLAlchemy engine, tables and the settings store.
"""

from db.engine import create_db_engine, get_engine
from db.settings_store import SETTINGS_KEY, SettingsStore
from db.tables import app_settings, create_tables, metadata

__all__ = [
    "SETTINGS_KEY",
    "SettingsStore",
    "app_settings",
    "create_db_engine",
    "create_tables",
    "get_engine",
    "metadata",
]
