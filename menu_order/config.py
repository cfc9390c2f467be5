"""Runtime configuration defaults for the service client, promo flow and UI."""

from __future__ import annotations

import os

API_BASE_URL = os.environ.get("MENU_ORDER_API_URL", "https://foodikal-ny-cors-wrapper.x-gs-x.workers.dev").rstrip("/")
REQUEST_TIMEOUT_SECONDS = 15.0

PROMO_DEBOUNCE_SECONDS = 0.5
PROMO_MIN_LENGTH = 3
PROMO_VALIDATION_ITEM_LIMIT = 20
PROMO_DISCOUNT_RATE = "0.95"
PRICE_ROUNDING_STEP = 50

# One-shot background pass shortly after the first render.
REFRESH_DELAY_SECONDS = 0.1
CAROUSEL_AUTOPLAY_SECONDS = 5

DELIVERY_DATES: tuple[str, ...] = tuple(
    value.strip()
    for value in os.environ.get("MENU_ORDER_DELIVERY_DATES", "2025-12-30,2025-12-31").split(",")
    if value.strip()
)
MIN_DELIVERY_LEAD_DAYS = 2

CURRENCY = "RSD"

DEBUG_LOG_PATH = os.environ.get("MENU_ORDER_DEBUG_LOG", "/tmp/menu-order-debug.log")
LOG_LEVEL = 0
