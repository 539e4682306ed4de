"""Bus registry service for the busbook application."""

import logging
import re
from typing import Iterator, List, Optional, Union

from busbook import config
from busbook.models.bus import Bus, Confirmation, invalid_seat, is_seat_number
from busbook.models.result import BookingError, Result
from busbook.services.input_flow import (
    REGISTRATION_FIELDS,
    ROUTE_FIELDS,
    FlowState,
    InputFlow,
)

logger = logging.getLogger(__name__)

SeatInput = Union[int, str]

SEAT_NUMBER_PATTERN = re.compile(r"[+-]?[0-9]+")


def parse_seat_number(raw: SeatInput) -> Result:
    """
    Turn raw seat input into a seat number.

    Range is not checked here: 33 parses fine and is rejected later as
    INVALID_SEAT.

    Args:
        raw: Seat number as typed by the operator, or an int

    Returns:
        Result: The seat number on success. CANCELLED for the cancellation
        token, empty input or 0. INVALID_INPUT for anything non-numeric.
    """
    if isinstance(raw, bool):
        return Result.failure(BookingError.INVALID_INPUT, "Invalid input. Operation cancelled.")

    if isinstance(raw, int):
        number = raw
    else:
        if config.is_cancel_input(raw):
            return Result.failure(BookingError.CANCELLED, "Operation cancelled.")
        text = str(raw).strip()
        if not SEAT_NUMBER_PATTERN.fullmatch(text):
            return Result.failure(BookingError.INVALID_INPUT, "Invalid input. Operation cancelled.")
        number = int(text)

    if number == 0:
        return Result.failure(BookingError.CANCELLED, "Operation cancelled.")
    return Result.success(number)


def resolve_seat(bus: Bus, raw: SeatInput) -> Result:
    """
    Parse and range-check seat input against a bus.

    Returns:
        Result: A (seat_number, Seat) pair on success. Failures are those
        of parse_seat_number plus INVALID_SEAT.
    """
    parsed = parse_seat_number(raw)
    if not parsed:
        return parsed

    if not is_seat_number(parsed.value):
        return invalid_seat()
    return Result.success((parsed.value, bus.seat(parsed.value)))


class BusRegistry:
    """
    Ordered, in-memory collection of every registered bus.

    Buses are kept in registration order and are never removed. All
    operations return a Result rather than raising for expected failures.
    """

    def __init__(self):
        self._buses: List[Bus] = []

    def __len__(self) -> int:
        return len(self._buses)

    def __iter__(self) -> Iterator[Bus]:
        return iter(self._buses)

    @property
    def is_empty(self) -> bool:
        return not self._buses

    def register(self, bus_number: str, driver_name: str, arrival_time: str,
                 departure_time: str, origin: str, destination: str) -> Result:
        """
        Install a new bus.

        Fields are taken in the order given. The first empty field or
        cancellation token abandons the whole registration.

        Args:
            bus_number: Unique bus identifier
            driver_name: Name of the driver
            arrival_time: Arrival time, free text
            departure_time: Departure time, free text
            origin: Start of the route
            destination: End of the route

        Returns:
            Result: The new Bus on success, CANCELLED or DUPLICATE_BUS otherwise
        """
        flow = InputFlow(REGISTRATION_FIELDS)
        flow.feed_all([bus_number, driver_name, arrival_time,
                       departure_time, origin, destination])
        return self.register_from_flow(flow)

    def register_from_flow(self, flow: InputFlow) -> Result:
        """Install a bus from a registration flow that has finished collecting."""
        if flow.state is not FlowState.COMPLETE:
            logger.debug("Bus registration cancelled")
            return Result.failure(BookingError.CANCELLED, "Installation cancelled.")

        fields = flow.values
        if self.find_by_id(fields["bus_number"]) is not None:
            logger.debug(f"Rejected duplicate bus number {fields['bus_number']}")
            return Result.failure(
                BookingError.DUPLICATE_BUS,
                f"Bus {fields['bus_number']} is already installed.")

        bus = Bus(**fields)
        self._buses.append(bus)
        logger.info(f"Installed bus {bus.bus_number} ({bus.origin} -> {bus.destination})")
        return Result.success(bus, "Bus installed successfully!")

    def find_by_id(self, bus_number: str) -> Optional[Bus]:
        """Return the first bus with the given number, or None."""
        for bus in self._buses:
            if bus.bus_number == bus_number:
                return bus
        return None

    def resolve_bus(self, bus_number: str) -> Result:
        """
        Look up a bus from operator input.

        Returns:
            Result: The Bus on success, CANCELLED or NOT_FOUND otherwise
        """
        if config.is_cancel_input(bus_number):
            return Result.failure(BookingError.CANCELLED, "Operation cancelled.")

        bus = self.find_by_id(bus_number)
        if bus is None:
            return Result.failure(BookingError.NOT_FOUND, f"Bus {bus_number} not found.")
        return Result.success(bus)

    def reserve(self, bus_number: str, seat_number: SeatInput, passenger_name: str) -> Result:
        """
        Reserve a seat on a bus.

        Args:
            bus_number: Bus to book on
            seat_number: Seat number (1..32), as an int or raw text
            passenger_name: Passenger to put on the seat

        Returns:
            Result: A Reservation carrying the seat's fare on success
        """
        found = self.resolve_bus(bus_number)
        if not found:
            return found

        seat = resolve_seat(found.value, seat_number)
        if not seat:
            return seat

        number = seat.value[0]
        result = found.value.reserve_seat(number, passenger_name)
        if result:
            logger.info(f"Reserved seat {number} on bus {bus_number} for {passenger_name}")
        else:
            logger.debug(f"Reservation on bus {bus_number} rejected: {result.error.name}")
        return result

    def release(self, bus_number: str, seat_number: SeatInput, confirm: Confirmation) -> Result:
        """
        Cancel the reservation on a seat.

        Args:
            bus_number: Bus the seat is on
            seat_number: Seat number (1..32), as an int or raw text
            confirm: The confirmation answer, or a callable asked with
                (seat_number, passenger_name) once the seat is known to be taken

        Returns:
            Result: The released seat number on success
        """
        found = self.resolve_bus(bus_number)
        if not found:
            return found

        seat = resolve_seat(found.value, seat_number)
        if not seat:
            return seat

        number = seat.value[0]
        result = found.value.release_seat(number, confirm)
        if result:
            logger.info(f"Released seat {number} on bus {bus_number}")
        else:
            logger.debug(f"Release on bus {bus_number} rejected: {result.error.name}")
        return result

    def show(self, bus_number: str) -> Result:
        """Return the full BusDetail for a bus."""
        found = self.resolve_bus(bus_number)
        if not found:
            return found
        return Result.success(found.value.describe())

    def list_all(self) -> Result:
        """
        Summaries of every bus in registration order.

        Returns:
            Result: List of BusSummary, or NO_VEHICLES when nothing is installed
        """
        if self.is_empty:
            return Result.failure(BookingError.NO_VEHICLES, "No buses available.")
        return Result.success([bus.summary() for bus in self._buses])

    def search_by_route(self, origin: str, destination: str) -> Result:
        """
        Summaries of the buses running exactly from origin to destination.

        Returns:
            Result: Matching BusSummary list in registration order. CANCELLED
            for empty or token input, NO_VEHICLES when nothing is installed,
            NO_MATCHES when no route matches.
        """
        flow = InputFlow(ROUTE_FIELDS)
        if flow.feed_all([origin, destination]) is not FlowState.COMPLETE:
            return Result.failure(BookingError.CANCELLED, "Search cancelled.")

        if self.is_empty:
            return Result.failure(BookingError.NO_VEHICLES, "No buses available.")

        matches = [bus.summary() for bus in self._buses
                   if bus.matches_route(origin, destination)]
        if not matches:
            return Result.failure(
                BookingError.NO_MATCHES,
                f"No matching buses found for route {origin} -> {destination}.")
        return Result.success(matches)
