"""Read-only views of buses used for display."""

from dataclasses import dataclass, field
from typing import List, Optional


@dataclass(frozen=True)
class BusSummary:
    """Basic information about a bus, as shown in listings and searches."""
    bus_number: str
    driver_name: str
    arrival_time: str
    departure_time: str
    route: str


@dataclass(frozen=True)
class SeatView:
    """State of one seat at the moment the view was taken."""
    number: int
    row: int
    column: int
    passenger_name: Optional[str]
    fare: float

    @property
    def is_vacant(self) -> bool:
        return self.passenger_name is None


@dataclass(frozen=True)
class BusDetail:
    """
    Full information about a bus, including its seat map.

    Attributes:
        bus_number: Bus identifier
        driver_name: Name of the bus driver
        arrival_time: Arrival time as entered
        departure_time: Departure time as entered
        origin: Where the bus starts
        destination: Where the bus ends
        seats: Every seat in seat-number order (1..32)
        vacant_count: Number of seats with no passenger
    """
    bus_number: str
    driver_name: str
    arrival_time: str
    departure_time: str
    origin: str
    destination: str
    seats: List[SeatView] = field(default_factory=list)
    vacant_count: int = 0

    @property
    def route(self) -> str:
        return f"{self.origin} -> {self.destination}"

    def rows(self) -> List[List[SeatView]]:
        """Group the seats by grid row."""
        grouped: List[List[SeatView]] = []
        for seat in self.seats:
            if seat.row == len(grouped):
                grouped.append([])
            grouped[seat.row].append(seat)
        return grouped
