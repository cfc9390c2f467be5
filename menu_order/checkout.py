"""Checkout helpers: delivery date availability, form checks and the order body."""

from __future__ import annotations

from datetime import date
from typing import Any, Iterable, Sequence

from menu_order.config import DELIVERY_DATES, MIN_DELIVERY_LEAD_DAYS
from menu_order.constant import CHECKOUT_MESSAGES
from menu_order.models import CartLine, CheckoutForm, DeliveryDateOption


def delivery_date_options(
    dates: Iterable[str] = DELIVERY_DATES,
    today: date | None = None,
    lead_days: int = MIN_DELIVERY_LEAD_DAYS,
) -> list[DeliveryDateOption]:
    """Mark each configured date as selectable when it is at least ``lead_days`` ahead."""
    today = today or date.today()
    options: list[DeliveryDateOption] = []
    for value in dates:
        days_ahead = (date.fromisoformat(value) - today).days
        options.append(DeliveryDateOption(value=value, enabled=days_ahead >= lead_days))
    return options


def pick_delivery_date(options: Sequence[DeliveryDateOption], selected: str | None) -> str | None:
    """Keep a still-valid selection, otherwise fall back to the first enabled date."""
    for option in options:
        if option.value == selected and option.enabled:
            return selected
    for option in options:
        if option.enabled:
            return option.value
    return None


def validate_form(form: CheckoutForm, lines: Sequence[CartLine]) -> str | None:
    """Return the first blocking message, or None when the order can be sent."""
    if not lines:
        return CHECKOUT_MESSAGES["empty_cart"]
    if len(form.customer_name.strip()) < 2:
        return CHECKOUT_MESSAGES["bad_name"]
    if len(form.customer_contact.strip()) < 3:
        return CHECKOUT_MESSAGES["bad_contact"]
    if len(form.delivery_address.strip()) < 5:
        return CHECKOUT_MESSAGES["bad_address"]
    if not form.delivery_date:
        return CHECKOUT_MESSAGES["no_date"]
    return None


def build_order(form: CheckoutForm, lines: Iterable[CartLine], promo_code: str | None) -> dict[str, Any]:
    order: dict[str, Any] = {
        "customer_name": form.customer_name.strip(),
        "customer_contact": form.customer_contact.strip(),
        "delivery_address": form.delivery_address.strip(),
        "delivery_date": form.delivery_date,
        "comments": form.comments.strip(),
        "order_items": [{"item_id": line.id, "quantity": line.quantity} for line in lines],
    }
    if promo_code:
        order["promo_code"] = promo_code
    return order
