"""Domain models for menu-order."""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum


@dataclass(frozen=True)
class MenuItem:
    """A catalog product."""

    id: int
    name: str
    category: str
    description: str
    price: int
    image: str | None = None


Catalog = dict[str, list[MenuItem]]


@dataclass(frozen=True)
class Banner:
    """A carousel slide pointing at a product or category."""

    id: int
    name: str
    item_link: str
    image_url: str
    display_order: int = 0


@dataclass
class CartLine:
    """One product's quantity entry in the cart."""

    id: int
    name: str
    price: int
    quantity: int

    @property
    def line_total(self) -> int:
        return self.price * self.quantity


@dataclass(frozen=True)
class ValidationCacheEntry:
    code: str
    valid: bool


@dataclass
class PromoState:
    """Promo input text, the last validated outcome and the applied code."""

    raw_input: str = ""
    normalized_code: str | None = None
    validation_cache: ValidationCacheEntry | None = None
    applied_code: str | None = None
    is_validating: bool = False


class PromoStatus(str, Enum):
    """Display states of the promo field."""

    EMPTY = "empty"
    FORMAT_ERROR = "format_error"
    NEEDS_ITEMS = "needs_items"
    CHECKING = "checking"
    APPLIED = "applied"
    ERROR = "error"


@dataclass(frozen=True)
class PromoOutcome:
    """Result of a promo validation call that reached the service."""

    valid: bool
    error: str | None = None
    subtotal: int | None = None
    discount_amount: int | None = None
    final_total: int | None = None


@dataclass(frozen=True)
class Totals:
    subtotal: int
    discount: int
    total: int


@dataclass
class ViewState:
    """View position kept stable across silent catalog swaps."""

    active_category: str | None = None
    scroll_offset: int = 0
    current_slide: int = 0


@dataclass
class CheckoutForm:
    customer_name: str = ""
    customer_contact: str = ""
    delivery_address: str = ""
    delivery_date: str | None = None
    comments: str = ""


@dataclass(frozen=True)
class DeliveryDateOption:
    value: str
    enabled: bool


@dataclass(frozen=True)
class OrderReceipt:
    order_id: int | str | None
    total_price: int | None
    message: str | None = None


@dataclass(frozen=True)
class SubmitOutcome:
    """What the checkout flow reports back to the form."""

    ok: bool
    message: str
    receipt: OrderReceipt | None = None
    promo_rejected: bool = False


@dataclass(frozen=True)
class Snapshot:
    """Everything the renderer needs after a state change."""

    lines: list[CartLine]
    totals: Totals
    promo_status: PromoStatus
    promo_message: str
    applied_code: str | None
    view: ViewState
    catalog_version: int = 0
    banners_version: int = 0
    submitting: bool = False
    categories: list[str] = field(default_factory=list)
