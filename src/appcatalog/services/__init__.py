"""
Service layer for App Catalog backend
"""

from .data import DataService

__all__ = ["DataService"]
