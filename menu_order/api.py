"""HTTP client for the Foodikal menu, banner, promo and order endpoints."""

from __future__ import annotations

from typing import Any, Iterable, Optional

import httpx
import structlog

from menu_order.config import API_BASE_URL, PROMO_VALIDATION_ITEM_LIMIT, REQUEST_TIMEOUT_SECONDS
from menu_order.data import parse_banners, parse_catalog
from menu_order.errors import MenuLoadError, OrderRejected, TransportError
from menu_order.models import Banner, CartLine, Catalog, OrderReceipt, PromoOutcome

log = structlog.get_logger(__name__)


def order_items_payload(lines: Iterable[CartLine]) -> list[dict[str, int]]:
    return [{"item_id": line.id, "quantity": line.quantity} for line in lines]


class FoodikalClient:
    """Thin async wrapper over the JSON API.

    One ``httpx.AsyncClient`` is shared for the lifetime of the app; call
    :meth:`aclose` (or use ``async with``) when done.
    """

    def __init__(
        self,
        base_url: str = API_BASE_URL,
        *,
        timeout_seconds: float = REQUEST_TIMEOUT_SECONDS,
        transport: Optional[httpx.AsyncBaseTransport] = None,
    ) -> None:
        self.base_url = base_url
        self._client = httpx.AsyncClient(base_url=base_url, timeout=httpx.Timeout(timeout_seconds), transport=transport)

    async def __aenter__(self) -> "FoodikalClient":
        return self

    async def __aexit__(self, *exc_info: object) -> None:
        await self.aclose()

    async def aclose(self) -> None:
        await self._client.aclose()

    async def _request(self, method: str, path: str, *, check_status: bool = True, **kwargs: Any) -> tuple[int, dict[str, Any]]:
        try:
            response = await self._client.request(method, path, **kwargs)
            if check_status:
                response.raise_for_status()
            payload = response.json()
        except httpx.HTTPError as exc:
            log.warning("api_transport_error", method=method, path=path, error=str(exc))
            raise TransportError(f"{method} {path} failed: {exc}") from exc
        except ValueError as exc:
            log.warning("api_bad_json", method=method, path=path, status=response.status_code)
            raise TransportError(f"{method} {path} returned invalid JSON") from exc

        if not isinstance(payload, dict):
            raise TransportError(f"{method} {path} returned {type(payload).__name__}, expected an object")
        return response.status_code, payload

    async def get_menu(self) -> Catalog:
        _, payload = await self._request("GET", "/api/menu")
        if payload.get("success") and payload.get("data"):
            return parse_catalog(payload["data"])
        raise MenuLoadError(payload.get("error") or "Invalid menu data")

    async def get_banners(self) -> list[Banner]:
        _, payload = await self._request("GET", "/api/banners")
        if payload.get("success") and payload.get("banners") is not None:
            return parse_banners(payload["banners"])
        raise MenuLoadError(payload.get("error") or "Invalid banner data")

    async def validate_promo(self, code: str, lines: list[CartLine]) -> PromoOutcome:
        """Ask the service whether ``code`` applies; ``success: false`` reads as an invalid code."""
        body = {
            "promo_code": code,
            "order_items": order_items_payload(lines[:PROMO_VALIDATION_ITEM_LIMIT]),
        }
        _, payload = await self._request("POST", "/api/validate_promo", json=body)

        if not payload.get("success"):
            return PromoOutcome(valid=False, error=payload.get("error") or "Failed to validate promo code")

        return PromoOutcome(
            valid=bool(payload.get("valid")),
            error=payload.get("error") or None,
            subtotal=payload.get("subtotal"),
            discount_amount=payload.get("discount_amount"),
            final_total=payload.get("final_total"),
        )

    async def create_order(self, order: dict[str, Any]) -> OrderReceipt:
        # Status is not checked: rejections carry field details in the body.
        status, payload = await self._request("POST", "/api/create_order", check_status=False, json=order)
        if payload.get("success"):
            log.info("order_created", order_id=payload.get("order_id"), total=payload.get("total_price"))
            return OrderReceipt(
                order_id=payload.get("order_id"),
                total_price=payload.get("total_price"),
                message=payload.get("message"),
            )

        raise OrderRejected(
            payload.get("error") or "Failed to create order",
            details=payload["details"] if isinstance(payload.get("details"), dict) else None,
            status_code=status,
        )
