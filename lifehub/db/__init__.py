"""
Database Module
===============

Provides database session management and base model.
"""

from lifehub.db.base import Base
from lifehub.db.session import get_db, init_db, close_db

__all__ = ["Base", "get_db", "init_db", "close_db"]
