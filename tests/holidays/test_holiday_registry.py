from __future__ import annotations

import pytest

from fakes import InMemoryHolidays
from zoppertrack.core.exceptions import ValidationError
from zoppertrack.holidays.model import Holiday
from zoppertrack.holidays.registry import HolidayRegistry


def _registry(*holidays: Holiday):
    store = InMemoryHolidays(list(holidays))
    registry = HolidayRegistry(store)
    registry.load()
    return registry, store


def test_load_replaces_local_state():
    registry, store = _registry(Holiday(id="1", date_key="2024-03-25", name="Holi"))

    assert registry.snapshot() == frozenset({"2024-03-25"})
    assert registry.contains("2024-03-25")
    assert registry.holidays() == [{"date": "2024-03-25", "name": "Holi"}]


def test_toggle_adds_holiday_remotely():
    registry, store = _registry()

    assert registry.toggle("2024-03-15") is True

    assert registry.contains("2024-03-15")
    assert store.dates() == {"2024-03-15"}
    assert ("create", "2024-03-15", "Holiday - 15/03/2024") in store.calls


def test_toggle_removes_holiday_by_cached_id():
    registry, store = _registry(Holiday(id="7", date_key="2024-03-25", name="Holi"))

    assert registry.toggle("2024-03-25") is False

    assert not registry.contains("2024-03-25")
    assert store.dates() == set()
    assert ("delete", "7") in store.calls


def test_toggle_twice_removes_newly_created_holiday():
    registry, store = _registry()

    registry.toggle("2024-03-15")
    registry.toggle("2024-03-15")

    assert registry.snapshot() == frozenset()
    assert store.dates() == set()


def test_failed_delete_rolls_back():
    registry, store = _registry(Holiday(id="7", date_key="2024-03-25", name="Holi"))
    store.fail_delete = True

    assert registry.toggle("2024-03-25") is True

    assert registry.contains("2024-03-25")
    assert store.dates() == {"2024-03-25"}


def test_failed_create_rolls_back():
    registry, store = _registry()
    store.fail_create = True

    assert registry.toggle("2024-03-15") is False

    assert registry.snapshot() == frozenset()


def test_remove_looks_up_remote_record_when_id_unknown():
    store = InMemoryHolidays([Holiday(id="9", date_key="2024-03-25", name="Holi")])
    registry = HolidayRegistry(store)
    registry.load()
    # Simulate a registry that learned about the day without its id
    registry._ids.clear()

    assert registry.toggle("2024-03-25") is False
    assert ("delete", "9") in store.calls


def test_remove_of_day_missing_remotely_stands():
    store = InMemoryHolidays([Holiday(id="9", date_key="2024-03-25", name="Holi")])
    registry = HolidayRegistry(store)
    registry.load()
    store.delete_holiday("9")
    registry._ids.clear()

    assert registry.toggle("2024-03-25") is False
    assert not registry.contains("2024-03-25")


@pytest.mark.parametrize("bad", ["", "25/03/2024", "2024-02-30"])
def test_toggle_rejects_malformed_keys(bad):
    registry, store = _registry()

    with pytest.raises(ValidationError):
        registry.toggle(bad)
    assert store.calls == [("list",)]


def test_malformed_relist_during_remove_rolls_back():
    registry, store = _registry(Holiday(id="9", date_key="2024-03-25", name="Holi"))
    registry._ids.clear()
    store.malformed_list = True

    assert registry.toggle("2024-03-25") is True

    assert registry.contains("2024-03-25")
    assert store.dates() == {"2024-03-25"}


def test_malformed_create_response_keeps_created_holiday():
    registry, store = _registry()
    store.malformed_create = True

    assert registry.toggle("2024-03-15") is True

    assert registry.contains("2024-03-15")
    assert store.dates() == {"2024-03-15"}


def test_malformed_create_that_cannot_be_confirmed_rolls_back():
    registry, store = _registry()
    store.malformed_create = True
    store.malformed_list = True

    assert registry.toggle("2024-03-15") is False

    assert not registry.contains("2024-03-15")
