import asyncio
from dataclasses import replace

from conftest import FakeService, make_banners, make_menu

from menu_order.controller import AddItem, MenuController
from menu_order.data import CatalogStore
from menu_order.errors import MenuLoadError, TransportError
from menu_order.refresh import BackgroundRefresh


class FakeSource:
    def __init__(self, menu=None, banners=None, menu_error=None, banners_error=None):
        self.menu = menu
        self.banners = banners
        self.menu_error = menu_error
        self.banners_error = banners_error
        self.calls = 0

    async def get_menu(self):
        self.calls += 1
        if self.menu_error is not None:
            raise self.menu_error
        return self.menu

    async def get_banners(self):
        if self.banners_error is not None:
            raise self.banners_error
        return self.banners


def _controller():
    controller = MenuController(FakeService(), CatalogStore(make_menu(), make_banners(3)), debounce_seconds=0)
    renders = []
    controller.subscribe(renders.append)
    return controller, renders


def test_identical_data_swaps_nothing():
    controller, renders = _controller()
    refresher = BackgroundRefresh(FakeSource(make_menu(), make_banners(3)), controller)

    result = asyncio.run(refresher.run_once())

    assert result == (False, False)
    assert renders == []


def test_changed_menu_is_swapped_and_cart_survives():
    controller, renders = _controller()
    controller.dispatch(AddItem(3, 2))
    fresh = make_menu()
    fresh["Канапе"][0] = replace(fresh["Канапе"][0], description="Томат черри, Огурец, Перец")
    refresher = BackgroundRefresh(FakeSource(fresh, make_banners(3)), controller)

    result = asyncio.run(refresher.run_once())

    assert result == (True, False)
    assert len(renders) == 2
    assert controller.catalog.find(3).description == "Томат черри, Огурец, Перец"
    assert controller.cart.quantity_of(3) == 2


def test_menu_failure_still_refreshes_banners():
    controller, _ = _controller()
    refresher = BackgroundRefresh(FakeSource(menu_error=TransportError("offline"), banners=make_banners(5)), controller)

    result = asyncio.run(refresher.run_once())

    assert result == (False, True)
    assert controller.catalog.menu == make_menu()
    assert len(controller.catalog.banners) == 5


def test_all_failures_are_swallowed():
    controller, renders = _controller()
    source = FakeSource(menu_error=MenuLoadError("Invalid menu data"), banners_error=TransportError("offline"))

    result = asyncio.run(BackgroundRefresh(source, controller).run_once())

    assert result == (False, False)
    assert renders == []


def test_start_runs_a_single_delayed_pass():
    async def scenario():
        controller, _ = _controller()
        source = FakeSource(make_menu(), make_banners(3))
        refresher = BackgroundRefresh(source, controller, delay_seconds=0)

        task = refresher.start()
        assert refresher.start() is task
        await task
        return source.calls

    assert asyncio.run(scenario()) == 1
