# =============================================================================
# Shopping Content API Samples - Common
# =============================================================================
"""
Shared plumbing used by every sample script.

- config: .env loading and merchant configuration
- client: Content API client (production + sandbox endpoints)
- errors: exception hierarchy and error printing
- pagination: nextPageToken walker
"""

from shopping.common.client import ContentClient
from shopping.common.errors import (
    ApiError,
    ConfigError,
    ContentApiError,
    TransportError,
    WorkflowAborted,
    print_api_error,
)
from shopping.common.pagination import iter_pages, walk

__all__ = [
    "ContentClient",
    "ApiError",
    "ConfigError",
    "ContentApiError",
    "TransportError",
    "WorkflowAborted",
    "print_api_error",
    "iter_pages",
    "walk",
]
