#!/usr/bin/env python3
"""
Account Tax Samples

READ-ONLY.

Usage:
    python -m shopping.accounts.account_tax                # workflow (default)
    python -m shopping.accounts.account_tax get [ACCOUNT_ID]
    python -m shopping.accounts.account_tax list           # MCA only
"""

import sys

from shopping.common.config import common_arg_parser, require_mca, resolve_account_id, service_setup
from shopping.common.errors import ConfigError, ContentApiError, print_api_error
from shopping.common.pagination import DEFAULT_PAGE_SIZE, walk
from shopping.render.accounts import render_account_tax


def get_account_tax(client, account_id) -> dict:
    tax = client.get_account_tax(account_id)
    print(render_account_tax(tax))
    return tax


def list_account_taxes(client, page_size: int = DEFAULT_PAGE_SIZE) -> int:
    count = 0
    for tax in walk(client.list_account_tax, page_size):
        print(render_account_tax(tax))
        count += 1
    if not count:
        print("No sub-accounts found.")
    return count


def account_tax_workflow(client, config: dict):
    print("Performing workflow for the Accounttax service.")
    print()

    merchant_id = config["merchant_id"]
    print(f"Getting tax settings for MC {merchant_id}:")
    get_account_tax(client, merchant_id)
    print()

    if config.get("is_mca"):
        print(f"Listing tax settings for sub-accounts of MC {merchant_id}:")
        list_account_taxes(client)
        print()

    print("Done with the Accounttax workflow.")


def main():
    parser = common_arg_parser("Account tax samples")
    parser.add_argument("action", nargs="?", default="workflow", choices=["workflow", "get", "list"])
    parser.add_argument("account_id", nargs="?", help="Account to read (get only; defaults to MERCHANT_ID)")
    args = parser.parse_args()

    try:
        config, client = service_setup(args)
        if args.action == "get":
            get_account_tax(client, resolve_account_id(config, args.account_id))
        elif args.action == "list":
            require_mca(config)
            list_account_taxes(client)
        else:
            account_tax_workflow(client, config)
    except ConfigError as e:
        print(f"ERROR: {e}")
        sys.exit(1)
    except ContentApiError as e:
        print_api_error(e)
        sys.exit(1)


if __name__ == "__main__":
    main()
