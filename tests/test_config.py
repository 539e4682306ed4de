"""Tests for busbook configuration helpers."""

import pytest

from busbook import config
from busbook.models.seat import Seat
from busbook.services.registry_service import BusRegistry


@pytest.mark.parametrize("value,expected", [
    ("", True), ("0", True), (None, True), (0, True),
    ("B1", False), (" ", False), ("00", False),
])
def test_is_cancel_input(value, expected):
    assert config.is_cancel_input(value) is expected


def test_grid_constants():
    assert config.ROWS * config.COLUMNS == config.SEAT_COUNT == 32


def test_custom_cancel_token(monkeypatch):
    monkeypatch.setattr(config, "CANCEL_TOKEN", "q")
    assert config.is_cancel_input("q")
    assert not config.is_cancel_input("0")

    registry = BusRegistry()
    assert not registry.register("B1", "Ravi", "10:00", "10:30", "Delhi", "q")
    assert registry.register("B1", "Ravi", "10:00", "10:30", "0", "Agra")


def test_default_fare_read_at_seat_creation(monkeypatch):
    monkeypatch.setattr(config, "DEFAULT_FARE", 450.0)
    assert Seat().fare == 450.0


def test_read_fare():
    assert config.read_fare("300.0") == 300.0
    assert config.read_fare("0") == 0.0


@pytest.mark.parametrize("raw", ["-1", "-0.5", "abc", "", "nan"])
def test_read_fare_rejects_bad_values(raw):
    with pytest.raises(ValueError):
        config.read_fare(raw)
