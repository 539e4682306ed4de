"""Bus entity for the busbook application."""

from typing import Callable, List, Tuple, Union

from busbook import config
from busbook.models.result import BookingError, InvalidSeatError, Reservation, Result
from busbook.models.seat import Seat
from busbook.models.views import BusDetail, BusSummary, SeatView

# A confirmation is either the answer itself or a callback that asks for it
# given the seat number and the current passenger.
ConfirmAnswer = Union[bool, str]
Confirmation = Union[ConfirmAnswer, Callable[[int, str], ConfirmAnswer]]


def is_seat_number(value) -> bool:
    """Return True for an int (not a bool) between 1 and 32."""
    return isinstance(value, int) and not isinstance(value, bool) \
        and 1 <= value <= config.SEAT_COUNT


def invalid_seat() -> Result:
    return Result.failure(
        BookingError.INVALID_SEAT,
        f"Invalid seat number. Please enter a number between 1 and {config.SEAT_COUNT}.")


def is_affirmative(answer: ConfirmAnswer) -> bool:
    """Return True for True, or for a string answer starting with 'y'."""
    if isinstance(answer, bool):
        return answer
    if not answer:
        return False
    text = str(answer).strip()
    return bool(text) and text[0].lower() == "y"


class Bus:
    """
    A registered bus with a fixed route, schedule and an 8x4 seat grid.

    Seats are numbered 1..32 in row-major order: seat N lives at
    row (N-1) // 4, column (N-1) % 4.

    Attributes:
        bus_number: Unique identifier for the bus, read-only
        driver_name: Name of the bus driver
        arrival_time: Arrival time, free text
        departure_time: Departure time, free text
        origin: Where the route starts
        destination: Where the route ends
    """

    def __init__(self, bus_number: str, driver_name: str, arrival_time: str,
                 departure_time: str, origin: str, destination: str):
        if not bus_number:
            raise ValueError("Bus number must not be empty")
        self._bus_number = bus_number
        self.driver_name = driver_name
        self.arrival_time = arrival_time
        self.departure_time = departure_time
        self.origin = origin
        self.destination = destination
        self._seats: List[List[Seat]] = [
            [Seat() for _ in range(config.COLUMNS)] for _ in range(config.ROWS)
        ]

    @property
    def bus_number(self) -> str:
        return self._bus_number

    @staticmethod
    def seat_position(seat_number: int) -> Tuple[int, int]:
        """
        Map a seat number to its (row, column) in the grid.

        Raises:
            InvalidSeatError: If the number is not between 1 and 32
        """
        if not is_seat_number(seat_number):
            raise InvalidSeatError(
                f"Seat number must be between 1 and {config.SEAT_COUNT}, got {seat_number!r}")
        return divmod(seat_number - 1, config.COLUMNS)

    def seat(self, seat_number: int) -> Seat:
        """Return the seat with the given number."""
        row, column = self.seat_position(seat_number)
        return self._seats[row][column]

    @property
    def vacant_count(self) -> int:
        return sum(1 for row in self._seats for seat in row if seat.is_vacant)

    def check_vacant(self, seat_number: int) -> Result:
        """
        Check that a seat exists and nobody holds it.

        Returns:
            Result: The Seat on success. INVALID_SEAT, or ALREADY_RESERVED
            with the current occupant's name as the value.
        """
        if not is_seat_number(seat_number):
            return invalid_seat()

        seat = self.seat(seat_number)
        if not seat.is_vacant:
            return Result.failure(
                BookingError.ALREADY_RESERVED,
                f"That seat is already reserved by {seat.passenger_name}!",
                value=seat.passenger_name)
        return Result.success(seat)

    def reserve_seat(self, seat_number: int, passenger_name: str) -> Result:
        """
        Reserve one seat on this bus for a passenger.

        Args:
            seat_number: Seat to reserve (1..32)
            passenger_name: Name to put on the seat

        Returns:
            Result: A Reservation on success. On ALREADY_RESERVED the value
            holds the current occupant's name.
        """
        checked = self.check_vacant(seat_number)
        if not checked:
            return checked

        seat = checked.value
        if config.is_cancel_input(passenger_name):
            return Result.failure(BookingError.CANCELLED, "Operation cancelled.")

        seat.occupy(passenger_name)
        reservation = Reservation(
            bus_number=self._bus_number,
            seat_number=seat_number,
            passenger_name=passenger_name,
            fare=seat.fare,
        )
        return Result.success(
            reservation,
            f"Seat {seat_number} reserved successfully for {passenger_name}.")

    def release_seat(self, seat_number: int, confirm: Confirmation) -> Result:
        """
        Cancel the reservation on one seat after confirmation.

        Args:
            seat_number: Seat to release (1..32)
            confirm: The answer to "are you sure?", or a callable taking
                (seat_number, passenger_name) that returns it

        Returns:
            Result: The released seat number on success
        """
        if not is_seat_number(seat_number):
            return invalid_seat()

        seat = self.seat(seat_number)
        if seat.is_vacant:
            return Result.failure(BookingError.ALREADY_EMPTY, "This seat is already empty.")

        answer = confirm(seat_number, seat.passenger_name) if callable(confirm) else confirm
        if not is_affirmative(answer):
            return Result.failure(BookingError.ABORTED, "Cancellation aborted.")

        seat.vacate()
        return Result.success(
            seat_number, f"Reservation for seat {seat_number} has been cancelled.")

    def describe(self) -> BusDetail:
        """Take a full snapshot of the bus and its seats."""
        seats = []
        for row_index, row in enumerate(self._seats):
            for column_index, seat in enumerate(row):
                seats.append(SeatView(
                    number=row_index * config.COLUMNS + column_index + 1,
                    row=row_index,
                    column=column_index,
                    passenger_name=seat.passenger_name,
                    fare=seat.fare,
                ))
        return BusDetail(
            bus_number=self._bus_number,
            driver_name=self.driver_name,
            arrival_time=self.arrival_time,
            departure_time=self.departure_time,
            origin=self.origin,
            destination=self.destination,
            seats=seats,
            vacant_count=sum(1 for s in seats if s.is_vacant),
        )

    def summary(self) -> BusSummary:
        return BusSummary(
            bus_number=self._bus_number,
            driver_name=self.driver_name,
            arrival_time=self.arrival_time,
            departure_time=self.departure_time,
            route=f"{self.origin} -> {self.destination}",
        )

    def matches_route(self, origin: str, destination: str) -> bool:
        """Exact, case-sensitive match on both ends of the route."""
        return self.origin == origin and self.destination == destination

    def __repr__(self) -> str:
        return f"<Bus {self._bus_number} {self.origin} -> {self.destination}>"
