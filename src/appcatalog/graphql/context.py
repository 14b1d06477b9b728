"""
Helpers for reading per-request state from the GraphQL context
"""

from typing import TYPE_CHECKING

import strawberry

from ..logging import get_logger

if TYPE_CHECKING:
    from ..services.data import DataService

logger = get_logger(__name__)


def get_data_service_from_info(info: strawberry.Info) -> "DataService":
    """
    Extract the data service from a GraphQL info object.

    Raises:
        RuntimeError: If the context was built without a data service
    """
    data = info.context.get("data")
    if data is None:
        logger.error("Data service not found in GraphQL context")
        raise RuntimeError("Data service not available")
    return data
