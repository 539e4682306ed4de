"""Tests for the Bus aggregate."""

import pytest

from busbook.models.bus import Bus, is_affirmative
from busbook.models.result import BookingError, InvalidSeatError, Reservation


@pytest.fixture
def bus():
    """Fixture for a freshly installed bus."""
    return Bus("B1", "Ravi", "10:00", "10:30", "Delhi", "Agra")


def test_seat_numbers_map_onto_grid_without_gaps():
    positions = [Bus.seat_position(n) for n in range(1, 33)]
    assert len(set(positions)) == 32
    assert set(positions) == {(row, col) for row in range(8) for col in range(4)}
    for n, (row, col) in zip(range(1, 33), positions):
        assert row == (n - 1) // 4
        assert col == (n - 1) % 4


@pytest.mark.parametrize("number", [0, 33, -1])
def test_seat_position_rejects_out_of_range(number):
    with pytest.raises(InvalidSeatError):
        Bus.seat_position(number)


def test_seat_accessor_returns_distinct_seats(bus):
    seats = [bus.seat(n) for n in range(1, 33)]
    assert len({id(s) for s in seats}) == 32


def test_new_bus_has_32_vacant_seats(bus):
    detail = bus.describe()
    assert len(detail.seats) == 32
    assert detail.vacant_count == 32
    assert all(seat.fare == 300.0 for seat in detail.seats)
    assert [seat.number for seat in detail.seats] == list(range(1, 33))


def test_bus_number_is_read_only(bus):
    with pytest.raises(AttributeError):
        bus.bus_number = "B2"


def test_empty_bus_number_rejected():
    with pytest.raises(ValueError):
        Bus("", "Ravi", "10:00", "10:30", "Delhi", "Agra")


def test_reserve_seat_returns_fare(bus):
    result = bus.reserve_seat(5, "Alice")
    assert result.ok
    assert result.value == Reservation("B1", 5, "Alice", 300.0)
    assert bus.seat(5).passenger_name == "Alice"


def test_reserve_taken_seat_reports_occupant(bus):
    bus.reserve_seat(5, "Alice")
    result = bus.reserve_seat(5, "Bob")
    assert not result.ok
    assert result.error is BookingError.ALREADY_RESERVED
    assert result.value == "Alice"
    assert "Alice" in result.message
    assert bus.seat(5).passenger_name == "Alice"
    assert bus.seat(5).fare == 300.0


@pytest.mark.parametrize("name", ["", "0", None])
def test_reserve_without_passenger_is_cancelled(bus, name):
    result = bus.reserve_seat(5, name)
    assert result.error is BookingError.CANCELLED
    assert bus.seat(5).is_vacant


def test_reserve_out_of_range_seat(bus):
    result = bus.reserve_seat(33, "Alice")
    assert result.error is BookingError.INVALID_SEAT
    assert bus.vacant_count == 32


def test_reserve_then_release_restores_seat(bus):
    bus.reserve_seat(12, "Alice")
    result = bus.release_seat(12, "y")
    assert result.ok
    assert result.value == 12
    assert bus.seat(12).is_vacant
    assert bus.seat(12).fare == 300.0
    assert bus.vacant_count == 32


def test_release_vacant_seat(bus):
    result = bus.release_seat(3, True)
    assert result.error is BookingError.ALREADY_EMPTY


@pytest.mark.parametrize("answer", ["n", "", "no", False, "maybe"])
def test_release_declined_leaves_seat(bus, answer):
    bus.reserve_seat(3, "Alice")
    result = bus.release_seat(3, answer)
    assert result.error is BookingError.ABORTED
    assert bus.seat(3).passenger_name == "Alice"


def test_release_asks_callable_with_occupant(bus):
    bus.reserve_seat(3, "Alice")
    asked = []

    def confirm(seat_number, passenger_name):
        asked.append((seat_number, passenger_name))
        return "Y"

    assert bus.release_seat(3, confirm).ok
    assert asked == [(3, "Alice")]


def test_release_vacant_seat_does_not_ask(bus):
    def confirm(seat_number, passenger_name):
        raise AssertionError("confirmation should not be requested")

    assert bus.release_seat(3, confirm).error is BookingError.ALREADY_EMPTY


@pytest.mark.parametrize("answer,expected", [
    ("y", True), ("Y", True), ("yes", True), (" y", True), (True, True),
    ("n", False), ("", False), (None, False), (False, False), ("ok", False),
])
def test_is_affirmative(answer, expected):
    assert is_affirmative(answer) is expected


def test_summary(bus):
    summary = bus.summary()
    assert summary.bus_number == "B1"
    assert summary.driver_name == "Ravi"
    assert summary.arrival_time == "10:00"
    assert summary.departure_time == "10:30"
    assert summary.route == "Delhi -> Agra"


def test_matches_route_is_exact(bus):
    assert bus.matches_route("Delhi", "Agra")
    assert not bus.matches_route("delhi", "Agra")
    assert not bus.matches_route("Delhi ", "Agra")
    assert not bus.matches_route("Agra", "Delhi")


def test_describe_is_a_snapshot(bus):
    detail = bus.describe()
    bus.reserve_seat(1, "Alice")
    assert detail.seats[0].is_vacant
    assert bus.describe().seats[0].passenger_name == "Alice"


def test_describe_rows_follow_grid(bus):
    bus.reserve_seat(6, "Alice")
    rows = bus.describe().rows()
    assert len(rows) == 8
    assert all(len(row) == 4 for row in rows)
    assert rows[1][1].number == 6
    assert rows[1][1].passenger_name == "Alice"


@pytest.mark.parametrize("seat", ["5", 5.0, True, None])
def test_reserve_seat_rejects_non_int_seat(bus, seat):
    result = bus.reserve_seat(seat, "Alice")
    assert result.error is BookingError.INVALID_SEAT
    assert bus.vacant_count == 32


@pytest.mark.parametrize("seat", ["5", 5.0, True, None])
def test_release_seat_rejects_non_int_seat(bus, seat):
    bus.reserve_seat(5, "Alice")
    result = bus.release_seat(seat, "y")
    assert result.error is BookingError.INVALID_SEAT
    assert bus.seat(5).passenger_name == "Alice"


def test_check_vacant(bus):
    result = bus.check_vacant(7)
    assert result.ok
    assert result.value is bus.seat(7)

    bus.reserve_seat(7, "Alice")
    taken = bus.check_vacant(7)
    assert taken.error is BookingError.ALREADY_RESERVED
    assert taken.value == "Alice"
    assert taken.message == bus.reserve_seat(7, "Bob").message

    assert bus.check_vacant(0).error is BookingError.INVALID_SEAT
