#!/usr/bin/env python3
"""
Delete Sub-Accounts (Batch)

Deletes several client accounts from the configured MCA in one custombatch
call. Each entry carries a batchId (1..N) so responses can be matched back
to requests.

Usage:
    python -m shopping.accounts.delete_account_batch ACCOUNT_ID [ACCOUNT_ID ...]
"""

import sys

from shopping.common.config import common_arg_parser, require_mca, service_setup
from shopping.common.errors import ConfigError, ContentApiError, print_api_error, print_error_entry


def build_delete_entries(merchant_id: str, account_ids: list) -> list:
    return [
        {
            "batchId": batch_id,
            "merchantId": merchant_id,
            "accountId": str(account_id),
            "method": "delete",
        }
        for batch_id, account_id in enumerate(account_ids, start=1)
    ]


def delete_account_batch(client, merchant_id: str, account_ids: list) -> dict:
    """Submit the batch and print per-entry outcomes.

    Returns {batch_id: errors} for every failed entry. A failure of the batch
    call itself propagates.
    """
    entries = build_delete_entries(merchant_id, account_ids)
    try:
        response = client.custombatch_accounts(entries)
    except ContentApiError:
        print("Overall batch call resulted in an error.")
        raise

    failures = {}
    for entry in response.get("entries", []):
        batch_id = entry.get("batchId")
        error_info = entry.get("errors") or {}
        errors = error_info.get("errors", [])
        if error_info:
            print(f"Batch item {batch_id} resulted in an error.")
            if error_info.get("message"):
                print(f"  {error_info['message']}")
            for sub in errors:
                print_error_entry(sub)
            failures[batch_id] = errors
        else:
            print(f"Batch item {batch_id} successful.")
        print()
    return failures


def main():
    parser = common_arg_parser("Delete sub-accounts from the configured MCA in one batch")
    parser.add_argument("account_ids", nargs="+", metavar="ACCOUNT_ID")
    args = parser.parse_args()

    try:
        config, client = service_setup(args)
        require_mca(config)
        failures = delete_account_batch(client, config["merchant_id"], args.account_ids)
    except ConfigError as e:
        print(f"ERROR: {e}")
        sys.exit(1)
    except ContentApiError as e:
        print_api_error(e)
        sys.exit(1)

    if failures:
        sys.exit(1)


if __name__ == "__main__":
    main()
