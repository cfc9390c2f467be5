"""Checkout form modal screen."""

from __future__ import annotations

from rich.text import Text
from textual.app import ComposeResult
from textual.containers import Container
from textual.events import Key
from textual.screen import ModalScreen
from textual.widgets import Static

from menu_order.checkout import delivery_date_options, pick_delivery_date, validate_form
from menu_order.models import CartLine, CheckoutForm

_FIELDS = (
    ("customer_name", "Имя"),
    ("customer_contact", "Телефон / Telegram"),
    ("delivery_address", "Адрес доставки"),
    ("delivery_date", "Дата доставки"),
    ("comments", "Комментарий"),
)


class CheckoutModal(ModalScreen[CheckoutForm | None]):
    """Collect customer details and a delivery date before the order is sent."""

    CSS = """
    CheckoutModal {
        align: center middle;
        background: $background 60%;
    }

    #checkout-dialog {
        width: 72;
        height: auto;
        border: round $secondary;
        background: $panel;
        padding: 1 2;
    }

    #checkout-title {
        text-style: bold;
        margin-bottom: 1;
        color: white;
    }

    #checkout-fields {
        color: white;
        margin-bottom: 1;
    }

    #checkout-error {
        color: #ffb3b3;
        margin-bottom: 1;
    }

    #checkout-help {
        color: #dddddd;
    }
    """

    def __init__(self, lines: list[CartLine], form: CheckoutForm | None = None) -> None:
        super().__init__()
        self.lines = lines
        self.form = form or CheckoutForm()
        self.options = delivery_date_options()
        self.form.delivery_date = pick_delivery_date(self.options, self.form.delivery_date)
        self.field_index = 0
        self.error = ""

    def compose(self) -> ComposeResult:
        with Container(id="checkout-dialog"):
            yield Static("Оформление заказа", id="checkout-title")
            yield Static(id="checkout-fields")
            yield Static(id="checkout-error")
            yield Static(
                "Tab/↑/↓ field. ←/→ change date. Enter send. Backspace delete. Esc cancel.",
                id="checkout-help",
            )

    def on_mount(self) -> None:
        self._refresh_content()

    def on_key(self, event: Key) -> None:
        field_name = _FIELDS[self.field_index][0]

        if event.key in {"escape", "ctrl+c"}:
            self.dismiss(None)
            event.stop()
            return

        if event.key == "enter":
            self._confirm()
            event.stop()
            return

        if event.key in {"tab", "down"}:
            self.field_index = (self.field_index + 1) % len(_FIELDS)
        elif event.key in {"shift+tab", "up"}:
            self.field_index = (self.field_index - 1) % len(_FIELDS)
        elif field_name == "delivery_date":
            if event.key in {"left", "right"}:
                self._cycle_date(1 if event.key == "right" else -1)
        elif event.key == "backspace":
            value = getattr(self.form, field_name)
            setattr(self.form, field_name, value[:-1])
        elif event.is_printable and event.character:
            setattr(self.form, field_name, getattr(self.form, field_name) + event.character)
        else:
            return

        self.error = ""
        self._refresh_content()
        event.stop()

    def _cycle_date(self, delta: int) -> None:
        enabled = [option.value for option in self.options if option.enabled]
        if not enabled:
            return
        if self.form.delivery_date not in enabled:
            self.form.delivery_date = enabled[0]
            return
        idx = enabled.index(self.form.delivery_date)
        self.form.delivery_date = enabled[(idx + delta) % len(enabled)]

    def _confirm(self) -> None:
        error = validate_form(self.form, self.lines)
        if error is not None:
            self.error = error
            self._refresh_content()
            return
        self.dismiss(self.form)

    def _refresh_content(self) -> None:
        fields = Text()
        for idx, (name, label) in enumerate(_FIELDS):
            if idx > 0:
                fields.append("\n")
            pointer = "➤ " if idx == self.field_index else "  "
            fields.append(f"{pointer}{label}: ", style="bold" if idx == self.field_index else "")
            if name == "delivery_date":
                for option in self.options:
                    if option.value == self.form.delivery_date:
                        fields.append(f"[{option.value}] ", style="bold #28a745")
                    elif option.enabled:
                        fields.append(f"{option.value} ")
                    else:
                        fields.append(f"{option.value} ", style="dim strike")
            else:
                fields.append(getattr(self.form, name))
                if idx == self.field_index:
                    fields.append("|")

        self.query_one("#checkout-fields", Static).update(fields)
        self.query_one("#checkout-error", Static).update(self.error or "")
