"""Entity models for the busbook application."""
from busbook.models.seat import Seat
from busbook.models.bus import Bus, is_affirmative
from busbook.models.views import BusSummary, BusDetail, SeatView
from busbook.models.result import (
    BookingError,
    BusbookError,
    InvalidSeatError,
    Reservation,
    Result,
)


__all__ = [
    'Seat',
    'Bus',
    'is_affirmative',
    'BusSummary',
    'BusDetail',
    'SeatView',
    'BookingError',
    'BusbookError',
    'InvalidSeatError',
    'Reservation',
    'Result',
]
