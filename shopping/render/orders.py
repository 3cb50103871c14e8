"""
Order rendering.

Pure function of an Order snapshot; returns text, prints nothing.
"""

from shopping.render.fields import always, dig, field, price, render_fields, yes_no

ORDER_FIELDS = [
    field("Status", "status", present=always),
    field("Merchant", "merchantId", present=always),
    field("Merchant order ID", "merchantOrderId"),
    field("Placed on date", "placedDate", present=always),
    field("Net amount", "netPriceAmount", fmt=price),
    field("Payment status", "paymentStatus"),
    field("Acknowledged", "acknowledged", present=always, fmt=yes_no),
]

ORDER_COST_FIELDS = [
    field("Shipping cost", "shippingCost", fmt=price),
    field("Shipping cost tax", "shippingCostTax", fmt=price),
]

LINE_ITEM_FIELDS = [
    field("Product", lambda item: item.get("product") or {}, present=always,
          fmt=lambda p: f"{p.get('id', '')} ({p.get('title', '')})"),
    field("Price", "price", present=always, fmt=price),
    field("Tax", "tax", present=always, fmt=price),
]

SHIPPING_DETAILS_FIELDS = [
    field("Ship by date", "shipByDate", present=always),
    field("Deliver by date", "deliverByDate", present=always),
]

QUANTITY_FIELDS = [
    field("Quantity ordered", "quantityOrdered"),
    field("Quantity pending", "quantityPending"),
    field("Quantity canceled", "quantityCanceled"),
    field("Quantity shipped", "quantityShipped"),
    field("Quantity delivered", "quantityDelivered"),
    field("Quantity returned", "quantityReturned"),
]

# Shared by cancellations and returns
ADJUSTMENT_FIELDS = [
    field("Actor", "actor"),
    field("Creation date", "creationDate", present=always),
    field("Quantity", "quantity", present=always),
    field("Reason", "reason", present=always),
    field("Reason text", "reasonText", present=always),
]

SHIPMENT_FIELDS = [
    field("Creation date", "creationDate", present=always),
    field("Carrier", "carrier", present=always),
    field("Tracking ID", "trackingId", present=always),
]


def render_order(order: dict) -> str:
    """Render an Order resource as a multi-line report."""
    lines = [f"Order {order.get('id')}:"]
    lines.extend(render_fields(order, ORDER_FIELDS))

    line_items = order.get("lineItems") or []
    if line_items:
        lines.append(f"- {len(line_items)} line item(s):")
        for item in line_items:
            lines.extend(render_line_item(item))

    lines.extend(render_fields(order, ORDER_COST_FIELDS))

    shipments = order.get("shipments") or []
    if shipments:
        lines.append(f"- {len(shipments)} shipment(s):")
        for shipment in shipments:
            lines.extend(render_shipment(shipment))

    return "\n".join(lines)


def render_line_item(item: dict) -> list:
    lines = [f"  Line item: {item.get('id')}"]
    lines.extend(render_fields(item, LINE_ITEM_FIELDS, indent="  "))

    details = item.get("shippingDetails")
    if details:
        lines.extend(render_fields(details, SHIPPING_DETAILS_FIELDS, indent="  "))
        method = details.get("method") or {}
        lines.append(
            f"  - Deliver via {method.get('carrier', '')} {method.get('methodName', '')} "
            f"({method.get('minDaysInTransit', '')} - {method.get('maxDaysInTransit', '')} days)"
        )

    if dig(item, "returnInfo.isReturnable"):
        info = item["returnInfo"]
        lines.append("  - Item is returnable.")
        lines.append(f"    - Days to return: {info.get('daysToReturn')}")
        lines.append(f"    - Return policy is at {info.get('policyUrl')}.")
    else:
        lines.append("  - Item is not returnable.")

    lines.extend(render_fields(item, QUANTITY_FIELDS, indent="  "))

    lines.extend(_render_adjustments(item.get("cancellations"), "cancellation", "Cancellation"))
    lines.extend(_render_adjustments(item.get("returns"), "return", "Return"))
    return lines


def render_shipment(shipment: dict) -> list:
    lines = [f"  Shipment {shipment.get('id')}:"]
    lines.extend(render_fields(shipment, SHIPMENT_FIELDS, indent="  "))

    shipment_items = shipment.get("lineItems") or []
    if shipment_items:
        lines.append(f"  - {len(shipment_items)} line item(s):")
        for entry in shipment_items:
            lines.append(f"    {entry.get('quantity')} of item {entry.get('lineItemId')}")

    if shipment.get("deliveryDate"):
        lines.append(f"  - Delivery date: {shipment['deliveryDate']}")
    return lines


def _render_adjustments(entries, noun: str, heading: str) -> list:
    if not entries:
        return []
    lines = [f"  - {len(entries)} {noun}(s):"]
    for entry in entries:
        lines.append(f"    {heading}:")
        lines.extend(render_fields(entry, ADJUSTMENT_FIELDS, indent="    "))
    return lines
