"""Main Textual app class."""

from __future__ import annotations

import structlog
from rich.text import Text
from textual.app import App, ComposeResult
from textual.binding import Binding
from textual.containers import Horizontal, Vertical
from textual.css.query import NoMatches
from textual.events import Key
from textual.reactive import reactive
from textual.widgets import Header, Static

from menu_order.api import FoodikalClient
from menu_order.checkout_modal import CheckoutModal
from menu_order.config import CAROUSEL_AUTOPLAY_SECONDS
from menu_order.constant import CHECKOUT_MESSAGES
from menu_order.controller import (
    AddItem,
    MenuController,
    RemoveItem,
    ScrollTo,
    SelectCategory,
    SelectSlide,
    SetPromoText,
    SetQuantity,
)
from menu_order.models import CheckoutForm, Snapshot
from menu_order.refresh import BackgroundRefresh
from menu_order.rendering import (
    format_banner,
    format_cart,
    format_menu_item,
    format_totals,
    promo_style,
)

log = structlog.get_logger(__name__)


class MenuOrderApp(App):
    """A Textual app for browsing the menu, filling the cart and placing an order."""

    TITLE = "Foodikal"
    SUB_TITLE = "Меню / Заказ"

    CSS = """
    Screen {
        layout: vertical;
    }

    #banner {
        height: 1;
        padding: 0 1;
    }

    #main-layout {
        height: 1fr;
    }

    #menu-pane {
        width: 3fr;
        border: round $primary;
        padding: 1;
    }

    #cart-pane {
        width: 2fr;
        border: round $secondary;
        padding: 1;
    }

    #categories {
        margin-bottom: 1;
    }

    #items {
        height: 1fr;
        border: tall $surface;
        padding: 0 1;
    }

    #cart-lines {
        height: 1fr;
        border: tall $surface;
        padding: 0 1;
    }

    #promo-bar {
        border: heavy $secondary;
        padding: 0 1;
        height: 4;
    }

    #totals {
        margin-top: 1;
    }

    .pane-title {
        text-style: bold;
        margin-bottom: 1;
    }
    """

    input_state = reactive("normal")
    item_index = reactive(0)

    BINDINGS = [
        ("left", "cycle_category(-1)", "Prev category"),
        ("right", "cycle_category(1)", "Next category"),
        ("up", "move_item(-1)", "Previous item"),
        ("down", "move_item(1)", "Next item"),
        Binding("ctrl+s", "checkout", "Checkout", priority=True),
        ("ctrl+q", "quit", "Quit"),
    ]

    def __init__(self, client: FoodikalClient | None = None, controller: MenuController | None = None) -> None:
        super().__init__()
        self.client = client or FoodikalClient()
        self.controller = controller or MenuController(self.client)
        self.refresher = BackgroundRefresh(self.client, self.controller)
        self.promo_text = ""
        self.system_status = ""
        self._draft = CheckoutForm()
        self._snapshot: Snapshot = self.controller.snapshot()
        self.controller.subscribe(self._on_snapshot)

    def compose(self) -> ComposeResult:
        yield Header()
        yield Static(id="banner")
        with Horizontal(id="main-layout"):
            with Vertical(id="menu-pane"):
                yield Static(id="categories")
                yield Static(id="items")
            with Vertical(id="cart-pane"):
                yield Static("Корзина", classes="pane-title")
                yield Static(id="cart-lines")
                yield Static(id="promo-bar")
                yield Static(id="totals")
                yield Static(id="status")

    def on_mount(self) -> None:
        self.refresher.start()
        self.set_interval(CAROUSEL_AUTOPLAY_SECONDS, self._next_slide)
        self._render_all()

    async def on_unmount(self) -> None:
        self.refresher.cancel()
        self.controller.close()
        await self.client.aclose()

    def on_key(self, event: Key) -> None:
        if isinstance(self.screen, CheckoutModal):
            return

        if self.input_state == "promo":
            self._handle_promo_key(event)
            return

        if not event.is_printable or not event.character:
            return

        key = event.character.lower()
        item = self._selected_item()
        if key in {"+", "="} and item is not None:
            self.controller.dispatch(AddItem(item.id, 1))
        elif key == "-" and item is not None:
            quantity = self.controller.cart.quantity_of(item.id)
            if quantity:
                self.controller.dispatch(SetQuantity(item.id, quantity - 1))
        elif key == "d" and item is not None:
            self.controller.dispatch(RemoveItem(item.id))
        elif key == "p":
            self.input_state = "promo"
            self._render_promo()
        else:
            return
        event.stop()

    def _handle_promo_key(self, event: Key) -> None:
        if event.key in {"escape", "enter", "ctrl+c"}:
            self.input_state = "normal"
            self._render_promo()
            event.stop()
            return

        if event.key == "backspace":
            self.promo_text = self.promo_text[:-1]
        elif event.is_printable and event.character:
            self.promo_text += event.character.upper()
        else:
            return
        self.controller.dispatch(SetPromoText(self.promo_text))
        event.stop()

    def action_cycle_category(self, delta: int) -> None:
        if self.input_state != "normal":
            return
        categories = self._snapshot.categories
        if not categories:
            return
        active = self._snapshot.view.active_category
        idx = categories.index(active) if active in categories else 0
        self.controller.dispatch(SelectCategory(categories[(idx + delta) % len(categories)]))

    def action_move_item(self, delta: int) -> None:
        if self.input_state != "normal":
            return
        items = self._active_items()
        if not items:
            return
        self.controller.dispatch(ScrollTo((self.item_index + delta) % len(items)))

    def action_checkout(self) -> None:
        if isinstance(self.screen, CheckoutModal) or self._snapshot.submitting:
            return
        self.push_screen(CheckoutModal(self._snapshot.lines, self._draft), self._on_checkout_closed)

    def _on_checkout_closed(self, form: CheckoutForm | None) -> None:
        if form is None:
            return
        self._draft = form
        self.system_status = CHECKOUT_MESSAGES["in_flight"]
        self._render_status()
        self.run_worker(self._submit(form), exclusive=True)

    async def _submit(self, form: CheckoutForm) -> None:
        outcome = await self.controller.submit_order(form)
        if outcome is None:
            return
        self.system_status = outcome.message
        if outcome.ok:
            self._draft = CheckoutForm()
            self.promo_text = ""
        elif outcome.promo_rejected:
            self.input_state = "promo"
        log.info("checkout_finished", ok=outcome.ok, promo_rejected=outcome.promo_rejected)
        self._render_all()

    def _next_slide(self) -> None:
        if isinstance(self.screen, CheckoutModal):
            return
        self.controller.dispatch(SelectSlide(self._snapshot.view.current_slide + 1))

    def _on_snapshot(self, snapshot: Snapshot) -> None:
        self._snapshot = snapshot
        self._render_all()

    def _active_items(self):
        active = self._snapshot.view.active_category
        return self.controller.catalog.items_in(active) if active else []

    def _selected_item(self):
        items = self._active_items()
        if not items:
            return None
        return items[min(self.item_index, len(items) - 1)]

    def _render_all(self) -> None:
        try:
            self._render_menu()
            self._render_cart()
            self._render_promo()
            self._render_status()
        except NoMatches:
            return

    def _render_menu(self) -> None:
        snapshot = self._snapshot
        banners = self.controller.catalog.banners
        slide = snapshot.view.current_slide if snapshot.view.current_slide < len(banners) else 0
        self.query_one("#banner", Static).update(format_banner(banners, slide))

        tabs = Text()
        for idx, category in enumerate(snapshot.categories):
            if idx > 0:
                tabs.append("  ")
            if category == snapshot.view.active_category:
                tabs.append(f" {category} ", style="bold #ffffff on #b23a48")
            else:
                tabs.append(category, style="dim")
        self.query_one("#categories", Static).update(tabs)

        items = self._active_items()
        items_widget = self.query_one("#items", Static)
        if not items:
            items_widget.update("(пусто)")
            return

        self.item_index = min(snapshot.view.scroll_offset, len(items) - 1)
        start, end = self._window_bounds(len(items), self._visible_rows(items_widget), self.item_index)

        lines = Text()
        if start > 0:
            lines.append("⋮\n", style="dim")
        for idx in range(start, end):
            if idx > start:
                lines.append("\n")
            pointer = "➤ " if idx == self.item_index else "  "
            lines.append(pointer)
            lines.append_text(format_menu_item(items[idx], self.controller.cart.quantity_of(items[idx].id)))
        if end < len(items):
            lines.append("\n⋮", style="dim")
        items_widget.update(lines)

    def _render_cart(self) -> None:
        snapshot = self._snapshot
        self.query_one("#cart-lines", Static).update(format_cart(snapshot.lines))
        self.query_one("#totals", Static).update(format_totals(snapshot.totals, snapshot.applied_code is not None))

    def _render_promo(self) -> None:
        snapshot = self._snapshot
        text = Text()
        text.append("Промокод: ", style="bold" if self.input_state == "promo" else "dim")
        text.append(self.promo_text)
        if self.input_state == "promo":
            text.append("|")
        text.append("\n")
        text.append(snapshot.promo_message, style=promo_style(snapshot.promo_status))
        self.query_one("#promo-bar", Static).update(text)

    def _render_status(self) -> None:
        if self._snapshot.submitting:
            status = CHECKOUT_MESSAGES["in_flight"]
        else:
            status = self.system_status or "+/- количество, P промокод, Ctrl+S оформить"
        self.query_one("#status", Static).update(status)

    def _visible_rows(self, widget: Static) -> int:
        height = widget.size.height
        if height <= 0:
            return 8
        return max(1, height)

    def _window_bounds(self, total: int, rows: int, selected: int | None) -> tuple[int, int]:
        if total <= 0:
            return (0, 0)

        rows = max(1, rows)
        if total <= rows:
            return (0, total)

        if selected is None:
            start = 0
        else:
            half = rows // 2
            start = selected - half
            start = max(0, start)
            start = min(start, total - rows)

        return (start, start + rows)
