#!/usr/bin/env python3
"""
Orders Workflow - Sandbox Order Lifecycle

Walks one test order through its whole life against the sandbox endpoint so
no real order is touched:

    create -> acknowledge -> set merchant order ID -> cancel one unit
    -> advance -> ship each line item -> deliver each shipment -> return one unit

The order is refetched and printed after every mutation. Any failure stops
the run: there is no rollback of earlier steps.

Usage:
    python -m shopping.orders.workflow
    python -m shopping.orders.workflow --template template2

Operation IDs must be unique over the lifetime of an order, across all
operation types, so the backend can reject duplicates. Calls are sequential
and never retried, so a counter is enough.
"""

import random
import sys

from shopping.common.config import common_arg_parser, service_setup
from shopping.common.errors import ConfigError, ContentApiError, WorkflowAborted, print_api_error
from shopping.common.pagination import walk
from shopping.render.fields import dig
from shopping.render.orders import render_order

# =============================================================================
# CONFIGURATION
# =============================================================================

DEFAULT_TEMPLATE = "template1"
ORDERS_PAGE_SIZE = 25
SUCCESS_STATUS = "executed"

CANCEL_REASON = "noInventory"
CANCEL_REASON_TEXT = "Ran out of inventory while fulfilling request."
RETURN_REASON = "productArrivedDamaged"
RETURN_REASON_TEXT = "Item was non-functional on receipt."


# =============================================================================
# OPERATION IDS
# =============================================================================


class OperationIdSequence:
    """Single-writer counter handing out operation IDs for one order session."""

    def __init__(self, start: int = 0):
        self._next = start

    def next_id(self) -> str:
        value = self._next
        self._next += 1
        return str(value)


def random_id() -> str:
    return str(random.randint(1, 2**31 - 1))


# =============================================================================
# WORKFLOW
# =============================================================================


class OrdersWorkflow:
    """Drives one sandbox order through the lifecycle, printing as it goes."""

    def __init__(self, client, operation_ids: OperationIdSequence = None, id_factory=random_id,
                 template_name: str = DEFAULT_TEMPLATE, page_size: int = ORDERS_PAGE_SIZE):
        self.client = client
        self.operation_ids = operation_ids or OperationIdSequence()
        self.id_factory = id_factory
        self.template_name = template_name
        self.page_size = page_size

    def run(self) -> dict:
        """Execute the full lifecycle. Returns the final order snapshot."""
        order_id = self.create_test_order()

        # The new order should show up here, since nobody has claimed it yet.
        self.list_unacknowledged_orders()

        self.acknowledge(order_id)

        merchant_order_id = self.id_factory()
        self.update_merchant_order_id(order_id, merchant_order_id)
        order = self.get_order_by_merchant_order_id(merchant_order_id)
        self.show(order)

        first_item = self._line_items(order)[0]
        self.cancel_line_item(order_id, first_item["id"], 1, CANCEL_REASON, CANCEL_REASON_TEXT)
        order = self.refresh(order_id)

        self.advance_test_order(order_id)
        order = self.refresh(order_id)

        shipments = []
        for item_id in [item["id"] for item in self._line_items(order)]:
            item = next(i for i in self._line_items(order) if i["id"] == item_id)
            if not item.get("quantityPending"):
                continue
            shipments.append(self.ship_line_item_all(order_id, item))
            order = self.refresh(order_id)

        for shipment_info in shipments:
            self.mark_delivered(order_id, shipment_info)
            order = self.refresh(order_id)

        delivered = [item for item in self._line_items(order) if item.get("quantityDelivered")]
        if not delivered:
            raise WorkflowAborted(f"Order {order_id} has no delivered line items to return")
        self.return_line_item(order_id, delivered[0]["id"], 1, RETURN_REASON, RETURN_REASON_TEXT)
        return self.refresh(order_id)

    # -------------------------------------------------------------------------
    # Reads
    # -------------------------------------------------------------------------

    def list_unacknowledged_orders(self) -> int:
        """Print every unacknowledged order. Returns how many were printed."""
        print(f"Printing unacknowledged orders for {self.client.merchant_id}.")

        def fetch(page_token, page_size):
            return self.client.list_orders(page_token=page_token, max_results=page_size, acknowledged=False)

        count = 0
        for order in walk(fetch, self.page_size):
            self.show(order)
            count += 1
        if not count:
            print("No orders.")
        print()
        return count

    def get_order(self, order_id: str) -> dict:
        print(f"Retrieving order {order_id}...", end=" ", flush=True)
        order = self.client.get_order(order_id)
        print("done.")
        print()
        return order

    def get_order_by_merchant_order_id(self, merchant_order_id: str) -> dict:
        print(f"Retrieving merchant order {merchant_order_id}...", end=" ", flush=True)
        response = self.client.get_order_by_merchant_order_id(merchant_order_id)
        print("done.")
        print()
        return response.get("order", {})

    def refresh(self, order_id: str) -> dict:
        """Refetch and print the order."""
        order = self.get_order(order_id)
        self.show(order)
        return order

    def show(self, order: dict):
        print(render_order(order))
        print()

    # -------------------------------------------------------------------------
    # Mutations
    # -------------------------------------------------------------------------

    def create_test_order(self) -> str:
        print("Creating new test order...", end=" ", flush=True)
        response = self.client.create_test_order(self.template_name)
        order_id = response.get("orderId")
        if not order_id:
            raise WorkflowAborted("Test order creation returned no order ID")
        print(f"done ({order_id}).")
        print()
        return order_id

    def acknowledge(self, order_id: str):
        """Claim the order so future unacknowledged listings skip it."""
        print(f"Acknowledging order {order_id}...", end=" ", flush=True)
        response = self.client.acknowledge_order(order_id, self.operation_ids.next_id())
        self._finish(response, f"acknowledge {order_id}")

    def update_merchant_order_id(self, order_id: str, merchant_order_id: str):
        print(f"Updating merchant order ID to {merchant_order_id}...", end=" ", flush=True)
        response = self.client.update_merchant_order_id(
            order_id, self.operation_ids.next_id(), merchant_order_id
        )
        self._finish(response, f"update merchant order ID of {order_id}")

    def cancel_line_item(self, order_id: str, line_item_id: str, quantity: int, reason: str, reason_text: str):
        print(f"Cancelling {quantity} of item {line_item_id}...", end=" ", flush=True)
        response = self.client.cancel_line_item(
            order_id, self.operation_ids.next_id(), line_item_id, quantity, reason, reason_text
        )
        self._finish(response, f"cancel line item {line_item_id}")

    def advance_test_order(self, order_id: str):
        """Sandbox only: make the order no longer cancellable by the customer."""
        print(f"Advancing test order {order_id}...", end=" ", flush=True)
        self.client.advance_test_order(order_id)
        print("done.")
        print()

    def ship_line_item_all(self, order_id: str, line_item: dict) -> dict:
        """Ship the whole pending quantity of line_item.

        Returns the shipment info ({carrier, shipmentId, trackingId}) so the
        same shipment can be marked delivered later.
        """
        quantity = line_item.get("quantityPending", 0)
        print(f"Shipping {quantity} of item {line_item['id']}...", end=" ", flush=True)

        shipment_info = {
            "carrier": dig(line_item, "shippingDetails.method.carrier"),
            "shipmentId": self.id_factory(),
            "trackingId": self.id_factory(),
        }
        response = self.client.ship_line_items(
            order_id,
            self.operation_ids.next_id(),
            [{"lineItemId": line_item["id"], "quantity": quantity}],
            [shipment_info],
        )
        self._finish(response, f"ship line item {line_item['id']}")
        return shipment_info

    def mark_delivered(self, order_id: str, shipment_info: dict):
        print(f"Marking shipment {shipment_info['shipmentId']} as delivered...", end=" ", flush=True)
        response = self.client.update_shipment(
            order_id,
            self.operation_ids.next_id(),
            shipment_info["shipmentId"],
            carrier=shipment_info.get("carrier"),
            tracking_id=shipment_info.get("trackingId"),
            status="delivered",
        )
        self._finish(response, f"deliver shipment {shipment_info['shipmentId']}")

    def return_line_item(self, order_id: str, line_item_id: str, quantity: int, reason: str, reason_text: str):
        print(f"Marking {quantity} of item {line_item_id} as returned...", end=" ", flush=True)
        response = self.client.return_refund_line_item(
            order_id, self.operation_ids.next_id(), line_item_id, quantity, reason, reason_text
        )
        self._finish(response, f"return line item {line_item_id}")

    # -------------------------------------------------------------------------
    # Helpers
    # -------------------------------------------------------------------------

    def _finish(self, response: dict, action: str):
        status = response.get("executionStatus")
        print(f"done ({status}).")
        print()
        if status != SUCCESS_STATUS:
            raise WorkflowAborted(f"Could not {action}: execution status {status}")

    @staticmethod
    def _line_items(order: dict) -> list:
        items = order.get("lineItems") or []
        if not items:
            raise WorkflowAborted(f"Order {order.get('id')} has no line items")
        return items


# =============================================================================
# CLI
# =============================================================================


def main():
    parser = common_arg_parser("Run a sandbox order through its full lifecycle")
    parser.add_argument("--template", default=DEFAULT_TEMPLATE, help="Test order template name (default: template1)")
    args = parser.parse_args()

    print("=" * 70)
    print("ORDERS WORKFLOW (sandbox)")
    print("=" * 70)
    print()

    try:
        config, client = service_setup(args, sandbox=True, resolve_mca=False)
        workflow = OrdersWorkflow(client, OperationIdSequence(), template_name=args.template)
        workflow.run()
    except ConfigError as e:
        print(f"ERROR: {e}")
        sys.exit(1)
    except WorkflowAborted as e:
        print(f"\nABORTED: {e}")
        sys.exit(1)
    except ContentApiError as e:
        print()
        print_api_error(e)
        sys.exit(1)

    print("Done with the Orders workflow.")


if __name__ == "__main__":
    main()
