"""Rendering helpers for prices, cart lines, totals and the promo field."""

from __future__ import annotations

from rich.text import Text

from menu_order.config import CURRENCY
from menu_order.constant import EMPTY_CART_MESSAGE
from menu_order.models import Banner, CartLine, MenuItem, PromoStatus, Totals


def format_price(amount: int) -> str:
    return f"{amount} {CURRENCY}"


def promo_style(status: PromoStatus) -> str:
    """Return a consistent style for the promo message line."""
    if status is PromoStatus.APPLIED:
        return "bold #28a745"
    if status in {PromoStatus.ERROR, PromoStatus.FORMAT_ERROR}:
        return "bold #ffb3b3"
    return "dim"


def format_menu_item(item: MenuItem, quantity: int) -> Text:
    text = Text()
    text.append(item.name)
    text.append(f"  {format_price(item.price)}", style="bold")
    if quantity:
        text.append(f"  x{quantity}", style="bold #ffffff on #2f6db5")
    return text


def format_cart_line(line: CartLine) -> Text:
    text = Text()
    text.append(f"{line.quantity} × ", style="bold")
    text.append(line.name)
    text.append(f"  {format_price(line.line_total)}", style="dim")
    return text


def format_totals(totals: Totals, promo_applied: bool) -> Text:
    """Show the struck-through subtotal only when the promo actually lowers the price."""
    text = Text()
    if promo_applied and totals.discount > 0:
        text.append("Итого: ")
        text.append(format_price(totals.subtotal), style="strike")
        text.append("\nИтого со скидкой: ", style="bold #28a745")
        text.append(format_price(totals.total), style="bold #28a745")
        return text
    text.append("Итого: ")
    text.append(format_price(totals.total), style="bold")
    return text


def format_cart(lines: list[CartLine]) -> Text:
    if not lines:
        return Text(EMPTY_CART_MESSAGE, style="dim")
    text = Text()
    for idx, line in enumerate(lines):
        if idx > 0:
            text.append("\n")
        text.append_text(format_cart_line(line))
    return text


def format_banner(banners: list[Banner], current: int) -> Text:
    if not banners:
        return Text("")
    text = Text()
    text.append(banners[current].name, style="bold")
    text.append("  ")
    for idx in range(len(banners)):
        text.append("●" if idx == current else "○", style="bold" if idx == current else "dim")
    return text
