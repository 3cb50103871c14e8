# =============================================================================
# Shopping Content API Samples
# =============================================================================
"""
Runnable samples for the Google Shopping Content API (v2.1).

Subpackages:
- common: configuration, OAuth, API client, errors, pagination
- render: text renderers for API resources
- orders: sandbox order lifecycle workflow
- accounts: account status, account tax, shipping settings, users, MCA batch
- products: product samples
"""

__version__ = "1.0.0"
