#!/usr/bin/env python3
"""
Add User to Primary Account

Adds MERCHANT_SAMPLE_USER as a non-admin user of the configured account.

Usage:
    python -m shopping.accounts.add_user

MUTATES the account: reads the current user list, appends the new user and
writes the account back.
"""

import sys

from shopping.common.config import common_arg_parser, service_setup
from shopping.common.errors import ApiError, ConfigError, ContentApiError, print_api_error


def add_user(client, merchant_id: str, email_address: str) -> dict:
    """Append email_address to the account's users. Returns the updated account."""
    try:
        account = client.get_account(merchant_id)
    except ApiError as e:
        if e.status_code == 404:
            print(f"Account {merchant_id} not found.")
        raise

    users = account.get("users") or []
    users.append({"emailAddress": email_address, "admin": False})
    account["users"] = users

    updated = client.update_account(merchant_id, account)
    print(f"User {email_address} added to account {merchant_id}.")
    return updated


def main():
    parser = common_arg_parser("Add the sample user to the primary account")
    args = parser.parse_args()

    try:
        config, client = service_setup(args, resolve_mca=False)
        email_address = config.get("account_sample_user")
        if not email_address:
            raise ConfigError("No account sample user address in the configuration (MERCHANT_SAMPLE_USER).")
        add_user(client, config["merchant_id"], email_address)
    except ConfigError as e:
        print(f"ERROR: {e}")
        sys.exit(1)
    except ContentApiError as e:
        print_api_error(e)
        sys.exit(1)


if __name__ == "__main__":
    main()
