"""
Content API Client

Minimal Shopping Content API (v2.1) client built on requests.
One method per REST call; list methods share the (page_token, max_results)
signature so they can be handed directly to the pagination walker.

Every call is synchronous and non-retrying:
- non-2xx responses raise ApiError
- connection problems raise TransportError
"""

import requests

from shopping.common.errors import ApiError, TransportError

# =============================================================================
# CONFIGURATION
# =============================================================================

CONTENT_API_ROOT = "https://shoppingcontent.googleapis.com/content"
CONTENT_API_VERSION = "v2.1"
CONTENT_API_SANDBOX_VERSION = "v2.1sandbox"
REQUEST_TIMEOUT = 60


# =============================================================================
# CONTENT API CLIENT
# =============================================================================


class ContentClient:
    """Content API client for read and write operations."""

    def __init__(self, merchant_id, access_token: str, sandbox: bool = False):
        self.merchant_id = str(merchant_id)
        self.access_token = access_token
        self.sandbox = sandbox
        version = CONTENT_API_SANDBOX_VERSION if sandbox else CONTENT_API_VERSION
        self.base_url = f"{CONTENT_API_ROOT}/{version}"

    def _headers(self):
        return {
            "Authorization": f"Bearer {self.access_token}",
            "Content-Type": "application/json",
        }

    def _request(self, method: str, path: str, params: dict = None, body: dict = None) -> dict:
        """Issue one request and return the decoded JSON body."""
        url = f"{self.base_url}/{path}"
        if params:
            params = {k: v for k, v in params.items() if v is not None}

        try:
            response = requests.request(
                method,
                url,
                headers=self._headers(),
                params=params or None,
                json=body,
                timeout=REQUEST_TIMEOUT,
            )
        except requests.RequestException as e:
            raise TransportError(f"{method} {url} failed: {e}") from e

        if not 200 <= response.status_code < 300:
            raise ApiError.from_response(response)

        if not response.content:
            return {}
        return response.json()

    def _list(self, path: str, page_token: str = None, max_results: int = None, **params) -> dict:
        params["pageToken"] = page_token
        params["maxResults"] = max_results
        return self._request("GET", path, params=params)

    # -------------------------------------------------------------------------
    # Orders
    # -------------------------------------------------------------------------

    def create_test_order(self, template_name: str, country: str = None) -> dict:
        body = {"templateName": template_name}
        if country:
            body["country"] = country
        return self._request("POST", f"{self.merchant_id}/testorders", body=body)

    def advance_test_order(self, order_id: str) -> dict:
        return self._request("POST", f"{self.merchant_id}/testorders/{order_id}/advance")

    def list_orders(self, page_token: str = None, max_results: int = None, acknowledged: bool = None) -> dict:
        """List orders; acknowledged=False restricts to orders not yet acknowledged."""
        if acknowledged is not None:
            acknowledged = "true" if acknowledged else "false"
        return self._list(f"{self.merchant_id}/orders", page_token, max_results, acknowledged=acknowledged)

    def get_order(self, order_id: str) -> dict:
        return self._request("GET", f"{self.merchant_id}/orders/{order_id}")

    def get_order_by_merchant_order_id(self, merchant_order_id) -> dict:
        """Returns the wrapper response; the order itself is under "order"."""
        return self._request("GET", f"{self.merchant_id}/ordersbymerchantid/{merchant_order_id}")

    def acknowledge_order(self, order_id: str, operation_id: str) -> dict:
        return self._order_action(order_id, "acknowledge", {"operationId": operation_id})

    def update_merchant_order_id(self, order_id: str, operation_id: str, merchant_order_id) -> dict:
        return self._order_action(
            order_id,
            "updateMerchantOrderId",
            {"operationId": operation_id, "merchantOrderId": str(merchant_order_id)},
        )

    def cancel_line_item(self, order_id: str, operation_id: str, line_item_id: str,
                         quantity: int, reason: str, reason_text: str) -> dict:
        return self._order_action(
            order_id,
            "cancelLineItem",
            {
                "operationId": operation_id,
                "lineItemId": line_item_id,
                "quantity": quantity,
                "reason": reason,
                "reasonText": reason_text,
            },
        )

    def ship_line_items(self, order_id: str, operation_id: str, line_items: list, shipment_infos: list) -> dict:
        """line_items: [{lineItemId, quantity}], shipment_infos: [{carrier, shipmentId, trackingId}]."""
        return self._order_action(
            order_id,
            "shipLineItems",
            {
                "operationId": operation_id,
                "lineItems": line_items,
                "shipmentInfos": shipment_infos,
            },
        )

    def update_shipment(self, order_id: str, operation_id: str, shipment_id: str,
                        carrier: str = None, tracking_id: str = None, status: str = None) -> dict:
        body = {"operationId": operation_id, "shipmentId": shipment_id}
        if carrier:
            body["carrier"] = carrier
        if tracking_id:
            body["trackingId"] = tracking_id
        if status:
            body["status"] = status
        return self._order_action(order_id, "updateShipment", body)

    def return_refund_line_item(self, order_id: str, operation_id: str, line_item_id: str,
                                quantity: int, reason: str, reason_text: str) -> dict:
        return self._order_action(
            order_id,
            "returnRefundLineItem",
            {
                "operationId": operation_id,
                "lineItemId": line_item_id,
                "quantity": quantity,
                "reason": reason,
                "reasonText": reason_text,
            },
        )

    def _order_action(self, order_id: str, action: str, body: dict) -> dict:
        return self._request("POST", f"{self.merchant_id}/orders/{order_id}/{action}", body=body)

    # -------------------------------------------------------------------------
    # Accounts
    # -------------------------------------------------------------------------

    def get_auth_info(self) -> dict:
        return self._request("GET", "accounts/authinfo")

    def get_account(self, account_id) -> dict:
        return self._request("GET", f"{self.merchant_id}/accounts/{account_id}")

    def update_account(self, account_id, account: dict) -> dict:
        return self._request("PUT", f"{self.merchant_id}/accounts/{account_id}", body=account)

    def custombatch_accounts(self, entries: list) -> dict:
        return self._request("POST", "accounts/batch", body={"entries": entries})

    # -------------------------------------------------------------------------
    # Account statuses
    # -------------------------------------------------------------------------

    def get_account_status(self, account_id) -> dict:
        return self._request("GET", f"{self.merchant_id}/accountstatuses/{account_id}")

    def list_account_statuses(self, page_token: str = None, max_results: int = None) -> dict:
        return self._list(f"{self.merchant_id}/accountstatuses", page_token, max_results)

    # -------------------------------------------------------------------------
    # Account tax
    # -------------------------------------------------------------------------

    def get_account_tax(self, account_id) -> dict:
        return self._request("GET", f"{self.merchant_id}/accounttax/{account_id}")

    def list_account_tax(self, page_token: str = None, max_results: int = None) -> dict:
        return self._list(f"{self.merchant_id}/accounttax", page_token, max_results)

    # -------------------------------------------------------------------------
    # Shipping settings
    # -------------------------------------------------------------------------

    def get_shipping_settings(self, account_id) -> dict:
        return self._request("GET", f"{self.merchant_id}/shippingsettings/{account_id}")

    def list_shipping_settings(self, page_token: str = None, max_results: int = None) -> dict:
        return self._list(f"{self.merchant_id}/shippingsettings", page_token, max_results)

    # -------------------------------------------------------------------------
    # Products
    # -------------------------------------------------------------------------

    def delete_product(self, product_id: str) -> dict:
        return self._request("DELETE", f"{self.merchant_id}/products/{product_id}")
