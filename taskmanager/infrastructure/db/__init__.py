"""
Database module.
Engine, session factory and SQLAlchemy table models.
"""

from .database import Base, SessionLocal, create_all_tables, create_db_engine, engine, get_db

__all__ = ["Base", "SessionLocal", "create_all_tables", "create_db_engine", "engine", "get_db"]
