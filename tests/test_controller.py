import asyncio
from dataclasses import replace

import pytest

from conftest import FakeService, make_banners, make_menu, settle

from menu_order.controller import (
    AddItem,
    BannersRefreshed,
    CatalogRefreshed,
    MenuController,
    RemoveItem,
    ScrollTo,
    SelectCategory,
    SelectSlide,
    SetPromoText,
    SetQuantity,
)
from menu_order.data import CatalogStore
from menu_order.errors import OrderRejected, TransportError
from menu_order.models import CheckoutForm, PromoStatus, Totals


def _controller(service):
    controller = MenuController(service, CatalogStore(make_menu(), make_banners(7)), debounce_seconds=0)
    snapshots = []
    controller.subscribe(snapshots.append)
    return controller, snapshots


def _form():
    return CheckoutForm(
        customer_name="Анна",
        customer_contact="+381601234567",
        delivery_address="Нови Сад, Змај Јовина 3",
        delivery_date="2025-12-31",
    )


def test_each_action_renders_once(service):
    async def scenario():
        controller, snapshots = _controller(service)

        controller.dispatch(AddItem(4, 1))
        assert len(snapshots) == 1
        assert snapshots[-1].totals == Totals(subtotal=437, discount=0, total=437)

        controller.dispatch(SetPromoText("sale10"))
        assert len(snapshots) == 2
        assert snapshots[-1].promo_status is PromoStatus.CHECKING

        await settle()
        assert len(snapshots) == 3
        assert snapshots[-1].applied_code == "SALE10"
        assert snapshots[-1].totals == Totals(subtotal=437, discount=37, total=400)

        controller.dispatch(SetQuantity(4, 2))
        assert len(snapshots) == 4
        assert snapshots[-1].totals.total == 850

        controller.close()

    asyncio.run(scenario())


def test_noop_actions_do_not_render(service):
    controller, snapshots = _controller(service)

    controller.dispatch(AddItem(999, 1))
    controller.dispatch(RemoveItem(1))
    controller.dispatch(SelectCategory("Нет такой"))

    assert snapshots == []


def test_unknown_action_is_rejected(service):
    controller, _ = _controller(service)

    with pytest.raises(TypeError):
        controller.dispatch("AddItem")


def test_identical_catalog_refresh_is_silent(service):
    controller, snapshots = _controller(service)

    controller.dispatch(CatalogRefreshed(make_menu()))
    controller.dispatch(BannersRefreshed(make_banners(7)))

    assert snapshots == []
    assert controller.catalog.menu_version == 0
    assert controller.catalog.banners_version == 0


def test_catalog_swap_keeps_cart_promo_and_view(service):
    async def scenario():
        controller, snapshots = _controller(service)
        controller.dispatch(AddItem(2, 2))
        controller.dispatch(SetPromoText("SALE10"))
        await settle()
        controller.dispatch(SelectCategory("Канапе"))
        controller.dispatch(ScrollTo(3))
        before = len(snapshots)

        fresh = make_menu()
        fresh["Салаты"][1] = replace(fresh["Салаты"][1], price=300)
        controller.dispatch(CatalogRefreshed(fresh))

        assert len(snapshots) == before + 1
        snapshot = snapshots[-1]
        assert snapshot.catalog_version == 1
        assert snapshot.view.active_category == "Канапе"
        assert snapshot.view.scroll_offset == 3
        assert [(line.id, line.quantity, line.price) for line in snapshot.lines] == [(2, 2, 250)]
        assert snapshot.applied_code == "SALE10"
        assert controller.catalog.find(2).price == 300

    asyncio.run(scenario())


def test_catalog_swap_falls_back_to_first_category(service):
    controller, snapshots = _controller(service)
    controller.dispatch(SelectCategory("Закуски"))

    fresh = make_menu()
    del fresh["Закуски"]
    controller.dispatch(CatalogRefreshed(fresh))

    assert snapshots[-1].view.active_category == "Салаты"


def test_banner_swap_resets_out_of_range_slide(service):
    controller, snapshots = _controller(service)
    controller.dispatch(SelectSlide(5))
    assert snapshots[-1].view.current_slide == 5

    controller.dispatch(BannersRefreshed(make_banners(3)))
    assert snapshots[-1].view.current_slide == 0

    controller.dispatch(SelectSlide(4))
    assert snapshots[-1].view.current_slide == 1


def test_submit_success_clears_cart_and_promo(service):
    async def scenario():
        controller, snapshots = _controller(service)
        controller.dispatch(AddItem(4, 1))
        controller.dispatch(SetPromoText("SALE10"))
        await settle()

        outcome = await controller.submit_order(_form())

        assert outcome.ok
        assert outcome.receipt.order_id == 101
        assert "Итого: 400 RSD" in outcome.message
        assert service.orders[0]["promo_code"] == "SALE10"
        assert service.orders[0]["order_items"] == [{"item_id": 4, "quantity": 1}]
        assert controller.cart.is_empty()
        assert snapshots[-1].promo_status is PromoStatus.EMPTY
        assert snapshots[-1].applied_code is None
        assert controller.promo.state.raw_input == ""

    asyncio.run(scenario())


def test_submit_blocks_on_form_errors(service):
    async def scenario():
        controller, _ = _controller(service)

        outcome = await controller.submit_order(_form())

        assert not outcome.ok
        assert outcome.message.startswith("Ваша корзина пуста")
        assert service.orders == []

    asyncio.run(scenario())


def test_rejected_promo_reverts_discount_and_keeps_cart(service):
    async def scenario():
        service.order_error = OrderRejected(
            "Validation failed",
            details={"promo_code": "Промокод истёк"},
            status_code=400,
        )
        controller, snapshots = _controller(service)
        controller.dispatch(AddItem(4, 1))
        controller.dispatch(SetPromoText("SALE10"))
        await settle()

        outcome = await controller.submit_order(_form())

        assert not outcome.ok
        assert outcome.promo_rejected
        assert outcome.message.startswith("Промокод недействителен")
        assert snapshots[-1].applied_code is None
        assert snapshots[-1].promo_message == "✗ Промокод истёк"
        assert snapshots[-1].totals == Totals(subtotal=437, discount=0, total=437)
        assert not controller.cart.is_empty()

    asyncio.run(scenario())


def test_transport_failure_is_reported_without_retry(service):
    async def scenario():
        service.order_error = TransportError("POST /api/create_order failed")
        controller, _ = _controller(service)
        controller.dispatch(AddItem(1, 1))

        outcome = await controller.submit_order(_form())

        assert not outcome.ok
        assert "POST /api/create_order failed" in outcome.message
        assert len(service.orders) == 1
        assert not controller.is_submitting
        assert not controller.cart.is_empty()

    asyncio.run(scenario())


def test_second_submit_while_in_flight_is_dropped():
    async def scenario():
        service = FakeService()
        service.order_gate = asyncio.Event()
        controller, _ = _controller(service)
        controller.dispatch(AddItem(1, 1))

        first = asyncio.ensure_future(controller.submit_order(_form()))
        await settle()
        assert controller.is_submitting

        second = await controller.submit_order(_form())
        service.order_gate.set()
        result = await first

        assert second is None
        assert result.ok
        assert len(service.orders) == 1

    asyncio.run(scenario())
