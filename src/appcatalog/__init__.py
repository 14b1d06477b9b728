"""
App Catalog Backend
GraphQL API over the application catalog database
"""

__version__ = "0.1.0"

from .config import settings

__all__ = ["settings", "__version__"]
