"""
Text renderers for Content API resources.

Every renderer is a pure function: snapshot in, string out.
"""

from shopping.render.accounts import render_account_status, render_account_tax, render_shipping_settings
from shopping.render.orders import render_order

__all__ = [
    "render_account_status",
    "render_account_tax",
    "render_order",
    "render_shipping_settings",
]
