from dataclasses import replace

import pytest

from conftest import make_banners, make_menu

from menu_order.data import CatalogStore, banners_changed, menu_changed, parse_catalog
from menu_order.errors import CatalogError


def test_fallback_store_keeps_category_order_and_indexes_items():
    store = CatalogStore.from_fallback()

    assert store.categories() == ["Брускетты", "Горячее", "Закуски", "Канапе", "Салаты", "Тарталетки"]
    item, category = store.find_with_category(39)
    assert category == "Салаты"
    assert item.image == "images/photos/furherring.jpg"
    assert store.find(10).image is None
    assert len(store.banners) == 7


def test_parse_catalog_rejects_misfiled_items():
    raw = {"Салаты": [{"id": 1, "name": "Винегрет", "category": "Канапе", "description": "", "price": 175}]}

    with pytest.raises(CatalogError):
        parse_catalog(raw)


def test_parse_catalog_rejects_missing_price():
    with pytest.raises(CatalogError):
        parse_catalog({"Салаты": [{"id": 1, "name": "Винегрет", "category": "Салаты"}]})


def test_identical_menu_is_not_a_change():
    assert not menu_changed(make_menu(), make_menu())


def test_menu_change_detection():
    base = make_menu()

    repriced = make_menu()
    repriced["Салаты"][1] = replace(repriced["Салаты"][1], price=260)
    assert menu_changed(base, repriced)

    extra = make_menu()
    extra["Канапе"].append(replace(extra["Канапе"][0], id=30))
    assert menu_changed(base, extra)

    renamed_category = make_menu()
    renamed_category["Горячее"] = renamed_category.pop("Закуски")
    assert menu_changed(base, renamed_category)

    new_image = make_menu()
    new_image["Канапе"][0] = replace(new_image["Канапе"][0], image="images/photos/canape.jpg")
    assert not menu_changed(base, new_image)


def test_banner_change_detection():
    base = make_banners(3)

    assert not banners_changed(base, make_banners(3))
    assert banners_changed(base, make_banners(2))

    moved = make_banners(3)
    moved[0] = replace(moved[0], image_url="https://example.test/other.jpg")
    assert banners_changed(base, moved)

    relinked = make_banners(3)
    relinked[0] = replace(relinked[0], item_link="https://example.test/#99")
    assert not banners_changed(base, relinked)


def test_replace_menu_reindexes(store):
    menu = make_menu()
    menu["Канапе"] = [replace(menu["Канапе"][0], id=77)]

    store.replace_menu(menu)

    assert store.find(3) is None
    assert store.find(77).name == "Канапе овощное"
    assert store.menu_version == 1
