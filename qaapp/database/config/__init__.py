"""
The `config` package provides two core building blocks for establishing and managing the store.

Contents:
    - config: Configuration layer - strongly typed app settings loaded from environment variables (with .env support), exposed through a singleton Settings object
    - connection_engine: Database layer - SQLAlchemy engine factory for the SQLite store file, shared MetaData, and the declarative base for ORM models
"""
