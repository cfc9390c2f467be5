"""Single owner of cart, promo and catalog state, driven by dispatched actions."""

from __future__ import annotations

from dataclasses import dataclass, replace
from typing import Any, Callable, Protocol, Union

import structlog

from menu_order.cart import CartLedger
from menu_order.checkout import build_order, validate_form
from menu_order.config import PROMO_DEBOUNCE_SECONDS
from menu_order.constant import CHECKOUT_MESSAGES
from menu_order.data import CatalogStore, banners_changed, menu_changed
from menu_order.errors import OrderRejected, ServiceError
from menu_order.models import (
    Banner,
    CartLine,
    Catalog,
    CheckoutForm,
    OrderReceipt,
    PromoOutcome,
    Snapshot,
    SubmitOutcome,
    ViewState,
)
from menu_order.promo import PromoReconciler

log = structlog.get_logger(__name__)


class OrderService(Protocol):
    async def validate_promo(self, code: str, lines: list[CartLine]) -> PromoOutcome: ...

    async def create_order(self, order: dict[str, Any]) -> OrderReceipt: ...


@dataclass(frozen=True)
class AddItem:
    product_id: int
    qty: int = 1


@dataclass(frozen=True)
class SetQuantity:
    product_id: int
    qty: int


@dataclass(frozen=True)
class RemoveItem:
    product_id: int


@dataclass(frozen=True)
class SetPromoText:
    text: str


@dataclass(frozen=True)
class ValidationResult:
    """Response for ``code``; ``outcome`` is None when the call failed."""

    code: str
    outcome: PromoOutcome | None


@dataclass(frozen=True)
class PromoRejected:
    message: str


@dataclass(frozen=True)
class OrderPlaced:
    receipt: OrderReceipt


@dataclass(frozen=True)
class CatalogRefreshed:
    menu: Catalog


@dataclass(frozen=True)
class BannersRefreshed:
    banners: list[Banner]


@dataclass(frozen=True)
class SelectCategory:
    category: str


@dataclass(frozen=True)
class ScrollTo:
    offset: int


@dataclass(frozen=True)
class SelectSlide:
    index: int


Action = Union[
    AddItem,
    SetQuantity,
    RemoveItem,
    SetPromoText,
    ValidationResult,
    PromoRejected,
    OrderPlaced,
    CatalogRefreshed,
    BannersRefreshed,
    SelectCategory,
    ScrollTo,
    SelectSlide,
]

Listener = Callable[[Snapshot], None]


class MenuController:
    """Feeds actions into the cart/promo/catalog state and notifies renderers.

    Each dispatched action produces at most one listener call, no matter how
    many lines or promo transitions it touched.
    """

    def __init__(
        self,
        service: OrderService,
        catalog: CatalogStore | None = None,
        *,
        debounce_seconds: float = PROMO_DEBOUNCE_SECONDS,
    ) -> None:
        self.service = service
        self.catalog = catalog if catalog is not None else CatalogStore.from_fallback()
        self.cart = CartLedger(self.catalog, on_change=self._on_cart_changed)
        self.promo = PromoReconciler(
            self.cart,
            service,
            on_change=self._request_render,
            on_result=self._deliver_result,
            debounce_seconds=debounce_seconds,
        )
        categories = self.catalog.categories()
        self.view = ViewState(active_category=categories[0] if categories else None)
        self.is_submitting = False
        self._listeners: list[Listener] = []
        self._depth = 0
        self._render_pending = False

    def subscribe(self, listener: Listener) -> Callable[[], None]:
        self._listeners.append(listener)

        def unsubscribe() -> None:
            if listener in self._listeners:
                self._listeners.remove(listener)

        return unsubscribe

    def snapshot(self) -> Snapshot:
        return Snapshot(
            lines=self.cart.lines(),
            totals=self.promo.totals(),
            promo_status=self.promo.status,
            promo_message=self.promo.message,
            applied_code=self.promo.applied_code,
            view=replace(self.view),
            catalog_version=self.catalog.menu_version,
            banners_version=self.catalog.banners_version,
            categories=self.catalog.categories(),
            submitting=self.is_submitting,
        )

    def dispatch(self, action: Action) -> None:
        self._depth += 1
        try:
            self._reduce(action)
        finally:
            self._depth -= 1
            if self._depth == 0 and self._render_pending:
                self._render_pending = False
                self._emit()

    def _reduce(self, action: Action) -> None:
        if isinstance(action, AddItem):
            self.cart.add_item(action.product_id, action.qty)
        elif isinstance(action, SetQuantity):
            self.cart.set_quantity(action.product_id, action.qty)
        elif isinstance(action, RemoveItem):
            self.cart.remove_item(action.product_id)
        elif isinstance(action, SetPromoText):
            self.promo.set_raw_input(action.text)
        elif isinstance(action, ValidationResult):
            self.promo.apply_result(action.code, action.outcome)
        elif isinstance(action, PromoRejected):
            self.promo.revert(action.message)
        elif isinstance(action, OrderPlaced):
            with self.cart.batch():
                self.promo.reset()
                self.cart.clear()
        elif isinstance(action, CatalogRefreshed):
            self._swap_menu(action.menu)
        elif isinstance(action, BannersRefreshed):
            self._swap_banners(action.banners)
        elif isinstance(action, SelectCategory):
            if action.category in self.catalog.menu and action.category != self.view.active_category:
                self.view.active_category = action.category
                self.view.scroll_offset = 0
                self._request_render()
        elif isinstance(action, ScrollTo):
            self.view.scroll_offset = max(0, action.offset)
            self._request_render()
        elif isinstance(action, SelectSlide):
            if self.catalog.banners:
                self.view.current_slide = action.index % len(self.catalog.banners)
                self._request_render()
        else:
            raise TypeError(f"Unknown action: {action!r}")

    def _swap_menu(self, menu: Catalog) -> None:
        if not menu_changed(self.catalog.menu, menu):
            log.debug("catalog_unchanged")
            return

        active = self.view.active_category
        self.catalog.replace_menu(menu)
        if active not in menu:
            categories = self.catalog.categories()
            self.view.active_category = categories[0] if categories else None
            self.view.scroll_offset = 0
        log.info("catalog_swapped", categories=len(menu), active=self.view.active_category)
        self._request_render()

    def _swap_banners(self, banners: list[Banner]) -> None:
        if not banners_changed(self.catalog.banners, banners):
            log.debug("banners_unchanged")
            return

        self.catalog.replace_banners(banners)
        if self.view.current_slide >= len(banners):
            self.view.current_slide = 0
        log.info("banners_swapped", count=len(banners), slide=self.view.current_slide)
        self._request_render()

    async def submit_order(self, form: CheckoutForm) -> SubmitOutcome | None:
        """Send the order once; returns None when a submission is already running."""
        if self.is_submitting:
            log.info("order_submit_ignored", reason="in_flight")
            return None

        lines = self.cart.lines()
        error = validate_form(form, lines)
        if error is not None:
            return SubmitOutcome(ok=False, message=error)

        order = build_order(form, lines, self.promo.applied_code)
        self.is_submitting = True
        self._request_render()
        try:
            receipt = await self.service.create_order(order)
        except OrderRejected as exc:
            log.warning("order_rejected", error=str(exc), details=exc.details, status=exc.status_code)
            if exc.promo_error:
                self.dispatch(PromoRejected(exc.promo_error))
                return SubmitOutcome(ok=False, message=CHECKOUT_MESSAGES["promo_rejected"], promo_rejected=True)
            return SubmitOutcome(ok=False, message=CHECKOUT_MESSAGES["failed"].format(error=exc))
        except ServiceError as exc:
            log.warning("order_failed", error=str(exc))
            return SubmitOutcome(ok=False, message=CHECKOUT_MESSAGES["failed"].format(error=exc))
        finally:
            self.is_submitting = False
            self._request_render()

        self.dispatch(OrderPlaced(receipt))
        return SubmitOutcome(
            ok=True,
            message=CHECKOUT_MESSAGES["success"].format(total=receipt.total_price),
            receipt=receipt,
        )

    def close(self) -> None:
        self.promo.close()

    def _deliver_result(self, code: str, outcome: PromoOutcome | None) -> None:
        self.dispatch(ValidationResult(code=code, outcome=outcome))

    def _on_cart_changed(self) -> None:
        self.promo.on_cart_changed()
        self._request_render()

    def _request_render(self) -> None:
        if self._depth:
            self._render_pending = True
            return
        self._emit()

    def _emit(self) -> None:
        snapshot = self.snapshot()
        for listener in list(self._listeners):
            listener(snapshot)
