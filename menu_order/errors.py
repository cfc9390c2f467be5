"""Error taxonomy for the remote service and catalog payloads."""

from __future__ import annotations

from typing import Any


class ServiceError(Exception):
    """Base class for failures talking to the catalog/order service."""


class TransportError(ServiceError):
    """The request never produced a usable response."""


class MenuLoadError(ServiceError):
    """The service answered with ``success: false`` for menu or banners."""


class OrderRejected(ServiceError):
    """The service refused to create an order."""

    def __init__(self, message: str, details: dict[str, Any] | None = None, status_code: int | None = None) -> None:
        super().__init__(message)
        self.details = details or {}
        self.status_code = status_code

    @property
    def promo_error(self) -> str | None:
        value = self.details.get("promo_code")
        return str(value) if value else None


class CatalogError(ValueError):
    """A catalog payload does not have the expected shape."""
