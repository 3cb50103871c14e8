#!/usr/bin/env python3
"""
Shipping Settings Samples

Usage:
    python -m shopping.accounts.shipping_settings get [ACCOUNT_ID]
    python -m shopping.accounts.shipping_settings list     # MCA only

Without ACCOUNT_ID, get reads the configured account. Non-MCA accounts can
only read their own settings.
"""

import sys

from shopping.common.config import common_arg_parser, require_mca, resolve_account_id, service_setup
from shopping.common.errors import ConfigError, ContentApiError, print_api_error
from shopping.common.pagination import DEFAULT_PAGE_SIZE, walk
from shopping.render.accounts import render_shipping_settings


def get_shipping_settings(client, account_id) -> dict:
    settings = client.get_shipping_settings(account_id)
    print(render_shipping_settings(settings))
    return settings


def list_shipping_settings(client, page_size: int = DEFAULT_PAGE_SIZE) -> int:
    """Print shipping settings for every sub-account."""
    count = 0
    for settings in walk(client.list_shipping_settings, page_size):
        print(render_shipping_settings(settings))
        count += 1
    if not count:
        print("No sub-accounts found.")
    return count


def main():
    parser = common_arg_parser("Shipping settings samples")
    parser.add_argument("action", nargs="?", default="get", choices=["get", "list"])
    parser.add_argument("account_id", nargs="?", help="Account to read (get only; defaults to MERCHANT_ID)")
    args = parser.parse_args()

    try:
        config, client = service_setup(args)
        if args.action == "list":
            require_mca(config)
            list_shipping_settings(client)
        else:
            get_shipping_settings(client, resolve_account_id(config, args.account_id))
    except ConfigError as e:
        print(f"ERROR: {e}")
        sys.exit(1)
    except ContentApiError as e:
        print_api_error(e)
        sys.exit(1)


if __name__ == "__main__":
    main()
