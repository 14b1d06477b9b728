"""
Database module for App Catalog backend
"""

from .access import Database
from .connection import create_database_engine

__all__ = ["Database", "create_database_engine"]
