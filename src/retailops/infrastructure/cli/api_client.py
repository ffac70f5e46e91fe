"""Thin HTTP client for the RetailOps API, used by the CLI."""

from __future__ import annotations

from typing import Any

import click
import httpx

from retailops.infrastructure.config import get_settings

DEFAULT_TIMEOUT = 10.0


class ApiError(Exception):
    """The API answered with an error envelope or could not be reached."""


class RetailOpsClient:

    def __init__(self, http: httpx.Client) -> None:
        self._http = http

    @classmethod
    def connect(cls, base_url: str, timeout: float = DEFAULT_TIMEOUT) -> RetailOpsClient:
        return cls(httpx.Client(base_url=base_url, timeout=timeout))

    def close(self) -> None:
        self._http.close()

    # --- Products -------------------------------------------------------------

    def list_products(self, **filters: Any) -> list[dict]:
        return self._request("GET", "/api/products", params=_drop_none(filters))

    def get_product(self, product_id: str) -> dict:
        return self._request("GET", f"/api/products/{product_id}")

    def create_product(self, fields: dict) -> dict:
        return self._request("POST", "/api/products", json=fields)

    def update_product(self, product_id: str, fields: dict) -> dict:
        return self._request("PUT", f"/api/products/{product_id}", json=fields)

    def adjust_stock(self, product_id: str, delta: int) -> dict:
        return self._request("PATCH", f"/api/products/{product_id}/stock", json={"delta": delta})

    def delete_product(self, product_id: str) -> None:
        self._request("DELETE", f"/api/products/{product_id}")

    # --- Orders ---------------------------------------------------------------

    def list_orders(self, **filters: Any) -> list[dict]:
        return self._request("GET", "/api/orders", params=_drop_none(filters))

    def get_order(self, order_id: str) -> dict:
        return self._request("GET", f"/api/orders/{order_id}")

    def create_order(self, body: dict) -> dict:
        return self._request("POST", "/api/orders", json=body)

    def update_order_status(self, order_id: str, status: str) -> dict:
        return self._request("PATCH", f"/api/orders/{order_id}/status", json={"status": status})

    def cancel_order(self, order_id: str) -> dict:
        return self._request("POST", f"/api/orders/{order_id}/cancel")

    def order_stats(self) -> dict:
        return self._request("GET", "/api/orders/stats")

    # --- Internal helpers -----------------------------------------------------

    def _request(self, method: str, url: str, **kwargs: Any) -> Any:
        try:
            response = self._http.request(method, url, **kwargs)
        except httpx.HTTPError as exc:
            raise ApiError(f"Cannot reach API: {exc}") from exc

        try:
            body = response.json()
        except ValueError as exc:
            raise ApiError(f"Unexpected response ({response.status_code})") from exc

        if response.is_error or not body.get("success", False):
            raise ApiError(body.get("error") or f"Request failed ({response.status_code})")
        return body.get("data")


def _drop_none(params: dict[str, Any]) -> dict[str, Any]:
    return {k: v for k, v in params.items() if v is not None}


def get_client(ctx: click.Context) -> RetailOpsClient:
    """The client for this CLI run, connected on first use.

    The connection is closed when the root context closes.
    """
    root = ctx.find_root()
    client = root.obj.get("client")
    if client is None:
        client = RetailOpsClient.connect(root.obj.get("api_url") or get_settings().API_URL)
        root.call_on_close(client.close)
        root.obj["client"] = client
    return client
