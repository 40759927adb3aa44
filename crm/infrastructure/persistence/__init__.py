"""Persistence layer: SQLAlchemy engine, ORM models, repositories, migrations."""
