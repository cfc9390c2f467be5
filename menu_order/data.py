"""Catalog store: current menu and banners plus structural change detection."""

from __future__ import annotations

from typing import Any, Iterable, Mapping

from menu_order.constant import FALLBACK_BANNERS, FALLBACK_MENU
from menu_order.errors import CatalogError
from menu_order.models import Banner, Catalog, MenuItem


def parse_menu_item(raw: Mapping[str, Any]) -> MenuItem:
    """Build a MenuItem from one service/fallback record."""
    try:
        price = int(raw["price"])
        item = MenuItem(
            id=int(raw["id"]),
            name=str(raw["name"]),
            category=str(raw["category"]),
            description=str(raw.get("description") or ""),
            price=price,
            image=str(raw["image"]) if raw.get("image") else None,
        )
    except (KeyError, TypeError, ValueError) as exc:
        raise CatalogError(f"Malformed menu item: {raw!r}") from exc
    if price < 0:
        raise CatalogError(f"Negative price for item {item.id}")
    return item


def parse_catalog(raw: Mapping[str, Iterable[Mapping[str, Any]]]) -> Catalog:
    """Parse a category -> items mapping, keeping the service's category order."""
    if not isinstance(raw, Mapping):
        raise CatalogError("Menu data must be a mapping of category to items")

    catalog: Catalog = {}
    for category, records in raw.items():
        items = [parse_menu_item(record) for record in records]
        for item in items:
            if item.category != category:
                raise CatalogError(f"Item {item.id} is filed under {category!r} but belongs to {item.category!r}")
        catalog[str(category)] = items
    return catalog


def parse_banners(raw: Iterable[Mapping[str, Any]]) -> list[Banner]:
    banners: list[Banner] = []
    for record in raw:
        try:
            banners.append(
                Banner(
                    id=int(record["id"]),
                    name=str(record["name"]),
                    item_link=str(record.get("item_link") or ""),
                    image_url=str(record.get("image_url") or ""),
                    display_order=int(record.get("display_order") or 0),
                )
            )
        except (KeyError, TypeError, ValueError) as exc:
            raise CatalogError(f"Malformed banner: {record!r}") from exc
    return banners


def menu_changed(old: Catalog, new: Catalog) -> bool:
    """Return True when ``new`` differs from ``old`` in anything the page shows."""
    old_keys = sorted(old)
    new_keys = sorted(new)
    if old_keys != new_keys:
        return True

    for category in old_keys:
        old_items = old[category]
        new_items = new[category]
        if len(old_items) != len(new_items):
            return True
        for old_item, new_item in zip(old_items, new_items):
            if (
                old_item.id != new_item.id
                or old_item.name != new_item.name
                or old_item.price != new_item.price
                or old_item.description != new_item.description
            ):
                return True

    return False


def banners_changed(old: list[Banner], new: list[Banner]) -> bool:
    if len(old) != len(new):
        return True
    for old_banner, new_banner in zip(old, new):
        if (
            old_banner.id != new_banner.id
            or old_banner.name != new_banner.name
            or old_banner.image_url != new_banner.image_url
        ):
            return True
    return False


class CatalogStore:
    """Holds the menu and banners currently on screen.

    Both are replaced wholesale; items are never edited in place.
    """

    def __init__(self, menu: Catalog | None = None, banners: list[Banner] | None = None) -> None:
        self.menu: Catalog = menu if menu is not None else {}
        self.banners: list[Banner] = banners if banners is not None else []
        self.menu_version = 0
        self.banners_version = 0
        self._index: dict[int, MenuItem] = {}
        self._reindex()

    @classmethod
    def from_fallback(cls) -> "CatalogStore":
        """Store seeded with the embedded snapshot for the first render."""
        return cls(parse_catalog(FALLBACK_MENU), parse_banners(FALLBACK_BANNERS))

    def _reindex(self) -> None:
        self._index = {item.id: item for items in self.menu.values() for item in items}

    def categories(self) -> list[str]:
        return list(self.menu)

    def items_in(self, category: str) -> list[MenuItem]:
        return list(self.menu.get(category, []))

    def find(self, product_id: int) -> MenuItem | None:
        return self._index.get(product_id)

    def find_with_category(self, product_id: int) -> tuple[MenuItem, str] | None:
        item = self.find(product_id)
        if item is None:
            return None
        return (item, item.category)

    def replace_menu(self, menu: Catalog) -> None:
        self.menu = menu
        self.menu_version += 1
        self._reindex()

    def replace_banners(self, banners: list[Banner]) -> None:
        self.banners = list(banners)
        self.banners_version += 1
