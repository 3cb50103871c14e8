"""
Shared pytest fixtures.

FakeContentClient stands in for ContentClient: same method names and
signatures, backed by an in-memory sandbox that updates line item quantities
the way the real sandbox does.
"""

import copy
import sys
from pathlib import Path

import pytest

PROJECT_ROOT = Path(__file__).parent.parent
sys.path.insert(0, str(PROJECT_ROOT))

from shopping.common.errors import ApiError


def make_line_item(item_id: str, quantity: int, carrier: str = "UPS") -> dict:
    return {
        "id": item_id,
        "product": {"id": f"online:en:US:{item_id}", "title": f"Product {item_id}"},
        "price": {"value": "10.00", "currency": "USD"},
        "tax": {"value": "0.80", "currency": "USD"},
        "shippingDetails": {
            "shipByDate": "2026-10-20T00:00:00Z",
            "deliverByDate": "2026-10-25T00:00:00Z",
            "method": {"carrier": carrier, "methodName": "Ground", "minDaysInTransit": 3, "maxDaysInTransit": 5},
        },
        "returnInfo": {"isReturnable": True, "daysToReturn": 30, "policyUrl": "https://example.com/returns"},
        "quantityOrdered": quantity,
        "quantityPending": quantity,
    }


class FakeContentClient:
    """In-memory sandbox with the ContentClient order surface."""

    def __init__(self, merchant_id="123", line_items=None):
        self.merchant_id = merchant_id
        self.line_items = line_items or [("item-1", 3), ("item-2", 3)]
        self.orders = {}
        self.calls = []
        self.operation_ids = []
        self.status_overrides = {}
        self._order_seq = 0

    # Orders ------------------------------------------------------------------

    def create_test_order(self, template_name, country=None):
        self.calls.append("create_test_order")
        self._order_seq += 1
        order_id = f"TEST-{self._order_seq}"
        self.orders[order_id] = {
            "id": order_id,
            "merchantId": self.merchant_id,
            "status": "inProgress",
            "placedDate": "2026-10-18T00:00:00Z",
            "acknowledged": False,
            "lineItems": [make_line_item(item_id, qty) for item_id, qty in self.line_items],
            "shipments": [],
        }
        return {"orderId": order_id}

    def advance_test_order(self, order_id):
        self.calls.append("advance_test_order")
        self.orders[order_id]["status"] = "pendingShipment"
        return {}

    def list_orders(self, page_token=None, max_results=None, acknowledged=None):
        self.calls.append("list_orders")
        orders = [o for o in self.orders.values() if acknowledged is None or o["acknowledged"] == acknowledged]
        start = int(page_token or 0)
        size = max_results or len(orders) or 1
        page = {"resources": copy.deepcopy(orders[start:start + size])}
        if start + size < len(orders):
            page["nextPageToken"] = str(start + size)
        return page

    def get_order(self, order_id):
        self.calls.append("get_order")
        if order_id not in self.orders:
            raise ApiError(404, f"Order {order_id} not found")
        return copy.deepcopy(self.orders[order_id])

    def get_order_by_merchant_order_id(self, merchant_order_id):
        self.calls.append("get_order_by_merchant_order_id")
        for order in self.orders.values():
            if order.get("merchantOrderId") == str(merchant_order_id):
                return {"kind": "content#ordersGetByMerchantOrderIdResponse", "order": copy.deepcopy(order)}
        raise ApiError(404, f"Merchant order {merchant_order_id} not found")

    def acknowledge_order(self, order_id, operation_id):
        self.orders[order_id]["acknowledged"] = True
        return self._executed("acknowledge_order", operation_id)

    def update_merchant_order_id(self, order_id, operation_id, merchant_order_id):
        self.orders[order_id]["merchantOrderId"] = str(merchant_order_id)
        return self._executed("update_merchant_order_id", operation_id)

    def cancel_line_item(self, order_id, operation_id, line_item_id, quantity, reason, reason_text):
        item = self._item(order_id, line_item_id)
        item["quantityPending"] -= quantity
        item["quantityCanceled"] = item.get("quantityCanceled", 0) + quantity
        item.setdefault("cancellations", []).append(
            {"actor": "merchant", "creationDate": "2026-10-18T01:00:00Z", "quantity": quantity,
             "reason": reason, "reasonText": reason_text}
        )
        return self._executed("cancel_line_item", operation_id)

    def ship_line_items(self, order_id, operation_id, line_items, shipment_infos):
        for entry in line_items:
            item = self._item(order_id, entry["lineItemId"])
            item["quantityPending"] -= entry["quantity"]
            item["quantityShipped"] = item.get("quantityShipped", 0) + entry["quantity"]
        for info in shipment_infos:
            self.orders[order_id]["shipments"].append(
                {"id": info["shipmentId"], "carrier": info["carrier"], "trackingId": info["trackingId"],
                 "creationDate": "2026-10-18T02:00:00Z", "status": "shipped",
                 "lineItems": copy.deepcopy(line_items)}
            )
        return self._executed("ship_line_items", operation_id)

    def update_shipment(self, order_id, operation_id, shipment_id, carrier=None, tracking_id=None, status=None):
        shipment = next(s for s in self.orders[order_id]["shipments"] if s["id"] == shipment_id)
        if status == "delivered" and shipment["status"] != "delivered":
            shipment["status"] = "delivered"
            shipment["deliveryDate"] = "2026-10-19T00:00:00Z"
            for entry in shipment["lineItems"]:
                item = self._item(order_id, entry["lineItemId"])
                item["quantityDelivered"] = item.get("quantityDelivered", 0) + entry["quantity"]
        return self._executed("update_shipment", operation_id)

    def return_refund_line_item(self, order_id, operation_id, line_item_id, quantity, reason, reason_text):
        item = self._item(order_id, line_item_id)
        item["quantityReturned"] = item.get("quantityReturned", 0) + quantity
        item.setdefault("returns", []).append(
            {"actor": "customer", "creationDate": "2026-10-20T00:00:00Z", "quantity": quantity,
             "reason": reason, "reasonText": reason_text}
        )
        return self._executed("return_refund_line_item", operation_id)

    # Helpers -----------------------------------------------------------------

    def _item(self, order_id, line_item_id):
        return next(i for i in self.orders[order_id]["lineItems"] if i["id"] == line_item_id)

    def _executed(self, name, operation_id):
        self.calls.append(name)
        self.operation_ids.append(operation_id)
        status = self.status_overrides.get(name, "executed")
        return {"kind": "content#ordersResponse", "executionStatus": status}


@pytest.fixture
def fake_client():
    return FakeContentClient()


@pytest.fixture
def make_fake_client():
    return FakeContentClient


@pytest.fixture
def sequential_ids():
    """Deterministic id_factory: "1001", "1002", ..."""
    counter = {"value": 1000}

    def next_id():
        counter["value"] += 1
        return str(counter["value"])

    return next_id


@pytest.fixture
def merchant_env(monkeypatch):
    """Process environment for a non-MCA merchant."""
    monkeypatch.setenv("MERCHANT_ID", "123")
    monkeypatch.setenv("MERCHANT_IS_MCA", "false")
    monkeypatch.setenv("MERCHANT_SAMPLE_USER", "user@example.com")
    monkeypatch.delenv("CONTENT_API_SANDBOX", raising=False)
    return monkeypatch
