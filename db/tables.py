"""
Table definitions for the settings database.
"""

from sqlalchemy import Column, DateTime, Engine, MetaData, String, Table, Text, func

metadata = MetaData()

app_settings = Table(
    "app_settings",
    metadata,
    Column("key", String(128), primary_key=True),
    Column("value", Text, nullable=False),
    Column("updated_at", DateTime(timezone=True), server_default=func.now(), onupdate=func.now()),
)


def create_tables(engine: Engine) -> None:
    """Create missing tables. Existing tables are left untouched."""
    metadata.create_all(engine, checkfirst=True)
