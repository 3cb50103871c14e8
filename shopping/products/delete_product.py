#!/usr/bin/env python3
"""
Delete Product

Usage:
    python -m shopping.products.delete_product PRODUCT_ID

PRODUCT_ID is the REST ID, e.g. online:en:US:1234.
"""

import sys

from shopping.common.config import common_arg_parser, service_setup
from shopping.common.errors import ConfigError, ContentApiError, print_api_error


def delete_product(client, product_id: str):
    client.delete_product(product_id)
    print(f"Product {product_id} successfully deleted.")


def main():
    parser = common_arg_parser("Delete a product")
    parser.add_argument("product_id", metavar="PRODUCT_ID")
    args = parser.parse_args()

    try:
        config, client = service_setup(args, resolve_mca=False)
        delete_product(client, args.product_id)
    except ConfigError as e:
        print(f"ERROR: {e}")
        sys.exit(1)
    except ContentApiError as e:
        print_api_error(e)
        sys.exit(1)


if __name__ == "__main__":
    main()
