"""One-shot background refresh of menu and banners after the first render."""

from __future__ import annotations

import asyncio
from typing import Protocol

import structlog

from menu_order.config import REFRESH_DELAY_SECONDS
from menu_order.controller import BannersRefreshed, CatalogRefreshed, MenuController
from menu_order.errors import CatalogError, ServiceError
from menu_order.models import Banner, Catalog

log = structlog.get_logger(__name__)


class MenuSource(Protocol):
    async def get_menu(self) -> Catalog: ...

    async def get_banners(self) -> list[Banner]: ...


class BackgroundRefresh:
    """Fetches fresh catalog data once and swaps it in only when it changed.

    Failures are logged and dropped; the page keeps the data it already has.
    """

    def __init__(self, source: MenuSource, controller: MenuController, *, delay_seconds: float = REFRESH_DELAY_SECONDS) -> None:
        self.source = source
        self.controller = controller
        self.delay_seconds = delay_seconds
        self._task: asyncio.Task[tuple[bool, bool]] | None = None

    def start(self) -> asyncio.Task[tuple[bool, bool]]:
        """Schedule the pass; calling again returns the already scheduled task."""
        if self._task is None:
            self._task = asyncio.get_running_loop().create_task(self._delayed())
        return self._task

    def cancel(self) -> None:
        if self._task is not None and not self._task.done():
            self._task.cancel()

    async def _delayed(self) -> tuple[bool, bool]:
        await asyncio.sleep(self.delay_seconds)
        return await self.run_once()

    async def run_once(self) -> tuple[bool, bool]:
        """Return whether the menu and the banners were swapped."""
        menu_swapped = False
        banners_swapped = False
        catalog = self.controller.catalog

        try:
            menu = await self.source.get_menu()
        except (ServiceError, CatalogError) as exc:
            log.warning("refresh_menu_failed", error=str(exc))
        else:
            before = catalog.menu_version
            self.controller.dispatch(CatalogRefreshed(menu))
            menu_swapped = catalog.menu_version != before

        try:
            banners = await self.source.get_banners()
        except (ServiceError, CatalogError) as exc:
            log.warning("refresh_banners_failed", error=str(exc))
        else:
            before = catalog.banners_version
            self.controller.dispatch(BannersRefreshed(banners))
            banners_swapped = catalog.banners_version != before

        log.info("refresh_done", menu_swapped=menu_swapped, banners_swapped=banners_swapped)
        return (menu_swapped, banners_swapped)
