"""Promo code reconciliation: input normalization, debounced validation and totals."""

from __future__ import annotations

import asyncio
import re
from decimal import ROUND_HALF_UP, Decimal
from typing import Callable, Protocol

import structlog

from menu_order.cart import CartLedger
from menu_order.config import (
    PRICE_ROUNDING_STEP,
    PROMO_DEBOUNCE_SECONDS,
    PROMO_DISCOUNT_RATE,
    PROMO_MIN_LENGTH,
    PROMO_VALIDATION_ITEM_LIMIT,
)
from menu_order.constant import PROMO_MESSAGES
from menu_order.errors import ServiceError
from menu_order.models import CartLine, PromoOutcome, PromoState, PromoStatus, Totals, ValidationCacheEntry

log = structlog.get_logger(__name__)

_CODE_PATTERN = re.compile(r"^[A-Z0-9А-ЯЁ]+$")


class PromoValidator(Protocol):
    async def validate_promo(self, code: str, lines: list[CartLine]) -> PromoOutcome: ...


def normalize_code(text: str) -> str:
    return text.strip().upper()


def format_error(code: str) -> str | None:
    """Return the client-side rejection message for ``code``, if any."""
    if len(code) < PROMO_MIN_LENGTH:
        return PROMO_MESSAGES["too_short"]
    if not _CODE_PATTERN.match(code):
        return PROMO_MESSAGES["bad_chars"]
    return None


def compute_totals(subtotal: int, promo_applied: bool) -> Totals:
    """Subtotal, discount and total; the discounted total is rounded half up to the nearest step."""
    if not promo_applied:
        return Totals(subtotal=subtotal, discount=0, total=subtotal)

    discounted = Decimal(subtotal) * Decimal(PROMO_DISCOUNT_RATE)
    steps = (discounted / PRICE_ROUNDING_STEP).quantize(Decimal(1), rounding=ROUND_HALF_UP)
    total = int(steps) * PRICE_ROUNDING_STEP
    return Totals(subtotal=subtotal, discount=subtotal - total, total=total)


class PromoReconciler:
    """Owns the promo field and keeps the applied discount consistent with the cart.

    Validation results come back through ``on_result`` so the owner can route
    them through its own dispatcher; by default they are applied directly.
    ``on_change`` fires after every transition that touches the display state
    or the applied code.
    """

    def __init__(
        self,
        cart: CartLedger,
        validator: PromoValidator,
        *,
        on_change: Callable[[], None] | None = None,
        on_result: Callable[[str, PromoOutcome | None], None] | None = None,
        debounce_seconds: float = PROMO_DEBOUNCE_SECONDS,
    ) -> None:
        self.cart = cart
        self.validator = validator
        self.on_change = on_change
        self.on_result = on_result or self.apply_result
        self.debounce_seconds = debounce_seconds
        self.state = PromoState()
        self.status = PromoStatus.EMPTY
        self.message = ""
        self._cached_status: tuple[PromoStatus, str] | None = None
        self._debounce: asyncio.Task[None] | None = None
        self._request: asyncio.Task[None] | None = None

    @property
    def applied_code(self) -> str | None:
        return self.state.applied_code

    def totals(self) -> Totals:
        return compute_totals(self.cart.subtotal(), self.state.applied_code is not None)

    def set_raw_input(self, text: str) -> None:
        code = normalize_code(text)
        self.state.raw_input = text
        self.state.normalized_code = code or None
        self._cancel_debounce()

        if not code:
            self.state.validation_cache = None
            self._cached_status = None
            if self.state.applied_code is not None:
                log.info("promo_cleared", code=self.state.applied_code)
                self.state.applied_code = None
            self._set_status(PromoStatus.EMPTY, "")
            self._changed()
            return

        if self.state.applied_code is not None and self.state.applied_code != code:
            log.info("promo_unapplied", code=self.state.applied_code, replaced_by=code)
            self.state.applied_code = None

        self._evaluate(code)
        self._changed()

    def on_cart_changed(self) -> None:
        code = normalize_code(self.state.raw_input)

        if self.cart.is_empty():
            self._cancel_debounce()
            self.state.applied_code = None
            self.state.validation_cache = None
            self._cached_status = None
            if code:
                self._evaluate(code)
            self._changed()
            return

        cache = self.state.validation_cache
        if (
            len(code) >= PROMO_MIN_LENGTH
            and self.state.applied_code is None
            and (cache is None or cache.code != code)
        ):
            self._evaluate(code)
            self._changed()

    def apply_result(self, code: str, outcome: PromoOutcome | None) -> None:
        """Fold a validation response into the state; ``None`` means the call failed."""
        current = normalize_code(self.state.raw_input)
        if current != code or self.cart.is_empty():
            log.info("promo_result_stale", code=code, current=current)
            # The newer input may have been dropped while this request was in flight.
            if self.status is PromoStatus.CHECKING and self._debounce is None and current:
                self._evaluate(current)
                self._changed()
            return

        if outcome is None:
            self.state.applied_code = None
            self.state.validation_cache = None
            self._cached_status = None
            self._set_status(PromoStatus.ERROR, f"✗ {PROMO_MESSAGES['network']}")
        elif outcome.valid:
            self.state.applied_code = code
            self.state.validation_cache = ValidationCacheEntry(code=code, valid=True)
            self._set_status(PromoStatus.APPLIED, PROMO_MESSAGES["applied"])
            self._cached_status = (self.status, self.message)
            log.info("promo_applied", code=code)
        else:
            self.state.applied_code = None
            self.state.validation_cache = ValidationCacheEntry(code=code, valid=False)
            self._set_status(PromoStatus.ERROR, f"✗ {outcome.error or PROMO_MESSAGES['invalid']}")
            self._cached_status = (self.status, self.message)
            log.info("promo_rejected", code=code, error=outcome.error)
        self._changed()

    def revert(self, message: str) -> None:
        """Drop the applied code after the order service refused it."""
        self._cancel_debounce()
        log.info("promo_reverted", code=self.state.applied_code, reason=message)
        self.state.applied_code = None
        self.state.validation_cache = None
        self._cached_status = None
        self._set_status(PromoStatus.ERROR, f"✗ {message}")
        self._changed()

    def reset(self) -> None:
        self._cancel_debounce()
        self.state = PromoState()
        self._cached_status = None
        self._set_status(PromoStatus.EMPTY, "")
        self._changed()

    def close(self) -> None:
        self._cancel_debounce()
        if self._request is not None and not self._request.done():
            self._request.cancel()
        self._request = None

    def _evaluate(self, code: str) -> None:
        self._cancel_debounce()
        error = format_error(code)
        if error is not None:
            self._set_status(PromoStatus.FORMAT_ERROR, error)
            return

        if self.cart.is_empty():
            self._set_status(PromoStatus.NEEDS_ITEMS, PROMO_MESSAGES["needs_items"])
            return

        cache = self.state.validation_cache
        if cache is not None and cache.code == code:
            if cache.valid:
                self.state.applied_code = code
            if self._cached_status is not None:
                self._set_status(*self._cached_status)
            return

        self._set_status(PromoStatus.CHECKING, PROMO_MESSAGES["checking"])
        self._debounce = asyncio.get_running_loop().create_task(self._debounced(code))

    async def _debounced(self, code: str) -> None:
        await asyncio.sleep(self.debounce_seconds)
        if self._debounce is not asyncio.current_task():
            return
        self._debounce = None
        if self.state.is_validating:
            log.debug("promo_validation_dropped", code=code)
            return
        self._request = asyncio.get_running_loop().create_task(self._validate(code))

    async def _validate(self, code: str) -> None:
        self.state.is_validating = True
        lines = self.cart.lines()[:PROMO_VALIDATION_ITEM_LIMIT]
        log.debug("promo_validation_started", code=code, lines=len(lines))
        outcome: PromoOutcome | None
        try:
            outcome = await self.validator.validate_promo(code, lines)
        except ServiceError as exc:
            log.warning("promo_validation_failed", code=code, error=str(exc))
            outcome = None
        finally:
            self.state.is_validating = False
            self._request = None
        self.on_result(code, outcome)

    def _cancel_debounce(self) -> None:
        if self._debounce is not None:
            if not self._debounce.done():
                self._debounce.cancel()
            self._debounce = None

    def _set_status(self, status: PromoStatus, message: str) -> None:
        self.status = status
        self.message = message

    def _changed(self) -> None:
        if self.on_change is not None:
            self.on_change()
