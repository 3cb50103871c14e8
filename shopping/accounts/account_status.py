#!/usr/bin/env python3
"""
Account Status Samples

READ-ONLY. Prints product statistics and account-level issues.

Usage:
    python -m shopping.accounts.account_status                # workflow (default)
    python -m shopping.accounts.account_status get [ACCOUNT_ID]
    python -m shopping.accounts.account_status list           # MCA only

The workflow prints the configured account's own status and, for
multi-client accounts, the status of every sub-account.
"""

import sys

from shopping.common.config import common_arg_parser, require_mca, resolve_account_id, service_setup
from shopping.common.errors import ConfigError, ContentApiError, print_api_error
from shopping.common.pagination import DEFAULT_PAGE_SIZE, walk
from shopping.render.accounts import render_account_status


def get_account_status(client, account_id) -> dict:
    status = client.get_account_status(account_id)
    print(render_account_status(status))
    return status


def list_account_statuses(client, page_size: int = DEFAULT_PAGE_SIZE) -> int:
    """Print the status of every sub-account. Returns how many were printed."""
    count = 0
    for status in walk(client.list_account_statuses, page_size):
        print(render_account_status(status))
        count += 1
    if not count:
        print("No sub-accounts found.")
    return count


def account_status_workflow(client, config: dict):
    print("Performing workflow for the Accountstatuses service.")
    print()

    merchant_id = config["merchant_id"]
    print(f"Getting account status for MC {merchant_id}:")
    get_account_status(client, merchant_id)
    print()

    if config.get("is_mca"):
        print(f"Listing account statuses for sub-accounts of MC {merchant_id}:")
        list_account_statuses(client)
        print()

    print("Done with the Accountstatuses workflow.")


def main():
    parser = common_arg_parser("Account status samples")
    parser.add_argument("action", nargs="?", default="workflow", choices=["workflow", "get", "list"])
    parser.add_argument("account_id", nargs="?", help="Account to read (get only; defaults to MERCHANT_ID)")
    args = parser.parse_args()

    try:
        config, client = service_setup(args)
        if args.action == "get":
            get_account_status(client, resolve_account_id(config, args.account_id))
        elif args.action == "list":
            require_mca(config)
            list_account_statuses(client)
        else:
            account_status_workflow(client, config)
    except ConfigError as e:
        print(f"ERROR: {e}")
        sys.exit(1)
    except ContentApiError as e:
        print_api_error(e)
        sys.exit(1)


if __name__ == "__main__":
    main()
