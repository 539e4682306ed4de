"""Operation results and the error taxonomy for busbook."""

from dataclasses import dataclass
from enum import Enum
from typing import Any, Optional


class BusbookError(Exception):
    """Base exception for busbook programming errors."""
    pass


class InvalidSeatError(BusbookError):
    """Raised when a seat is addressed outside the bus's seat grid."""
    pass


class BookingError(Enum):
    """Reasons an operation can fail without side effects."""
    CANCELLED = "cancelled"
    NOT_FOUND = "not_found"
    INVALID_INPUT = "invalid_input"
    INVALID_SEAT = "invalid_seat"
    ALREADY_RESERVED = "already_reserved"
    ALREADY_EMPTY = "already_empty"
    ABORTED = "aborted"
    DUPLICATE_BUS = "duplicate_bus"
    NO_VEHICLES = "no_vehicles"
    NO_MATCHES = "no_matches"


@dataclass
class Result:
    """
    Outcome of a registry or bus operation.

    Attributes:
        ok: True when the operation succeeded
        value: Success payload, or extra detail for some failures
            (the current occupant for ALREADY_RESERVED)
        error: Failure reason, None on success
        message: Human-readable detail for the caller to display
    """
    ok: bool
    value: Any = None
    error: Optional[BookingError] = None
    message: str = ""

    @classmethod
    def success(cls, value: Any = None, message: str = "") -> "Result":
        return cls(ok=True, value=value, message=message)

    @classmethod
    def failure(cls, error: BookingError, message: str, value: Any = None) -> "Result":
        return cls(ok=False, value=value, error=error, message=message)

    def __bool__(self) -> bool:
        return self.ok


@dataclass(frozen=True)
class Reservation:
    """A confirmed seat reservation."""
    bus_number: str
    seat_number: int
    passenger_name: str
    fare: float
