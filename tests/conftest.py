import asyncio

import pytest

from menu_order.data import CatalogStore
from menu_order.errors import TransportError
from menu_order.models import Banner, MenuItem, OrderReceipt, PromoOutcome


def make_menu():
    return {
        "Салаты": [
            MenuItem(1, "Винегрет (120 г)", "Салаты", "Картофель, Свекла", 175),
            MenuItem(2, "Оливье с говядиной (120 г)", "Салаты", "Картофель, Говядина", 250),
        ],
        "Канапе": [
            MenuItem(3, "Канапе овощное", "Канапе", "Томат черри, Огурец", 75),
        ],
        "Закуски": [
            MenuItem(4, "Ассорти сыров", "Закуски", "Пармезан, Хамон", 437),
        ],
    }


def make_banners(count=3):
    return [
        Banner(id=idx, name=f"Banner {idx}", item_link=f"https://example.test/#{idx}", image_url=f"https://example.test/{idx}.jpg", display_order=idx)
        for idx in range(1, count + 1)
    ]


async def settle(rounds=10):
    """Let pending debounce and request tasks run to completion."""
    for _ in range(rounds):
        await asyncio.sleep(0)


class FakeService:
    """Promo validator and order endpoint with scripted answers."""

    def __init__(self, outcomes=None, failing_codes=(), order_error=None):
        self.outcomes = outcomes or {}
        self.failing_codes = set(failing_codes)
        self.order_error = order_error
        self.promo_calls = []
        self.orders = []
        self.promo_gate = None
        self.order_gate = None

    async def validate_promo(self, code, lines):
        self.promo_calls.append((code, [(line.id, line.quantity) for line in lines]))
        if self.promo_gate is not None:
            await self.promo_gate.wait()
        if code in self.failing_codes:
            raise TransportError("connection refused")
        return self.outcomes.get(code, PromoOutcome(valid=False, error="Промокод не найден"))

    async def create_order(self, order):
        self.orders.append(order)
        if self.order_gate is not None:
            await self.order_gate.wait()
        if self.order_error is not None:
            raise self.order_error
        return OrderReceipt(order_id=101, total_price=400, message="ok")


@pytest.fixture
def store():
    return CatalogStore(make_menu(), make_banners())


@pytest.fixture
def service():
    return FakeService(outcomes={"SALE10": PromoOutcome(valid=True, subtotal=437, discount_amount=37, final_total=400)})
