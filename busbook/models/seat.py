"""Seat entity for the busbook application."""

from typing import Optional

from busbook import config


class Seat:
    """
    A single seat on a bus.

    Attributes:
        passenger_name: Name of the passenger holding the seat, None if vacant
        fare: Price of the seat; fixed once the seat is created
    """

    def __init__(self, fare: Optional[float] = None):
        if fare is None:
            fare = config.DEFAULT_FARE
        if fare < 0:
            raise ValueError(f"Seat fare cannot be negative: {fare}")
        self._fare = float(fare)
        self.passenger_name: Optional[str] = None

    @property
    def fare(self) -> float:
        return self._fare

    @property
    def is_vacant(self) -> bool:
        return not self.passenger_name

    def occupy(self, passenger_name: str) -> None:
        """Assign the seat to a passenger."""
        if not passenger_name:
            raise ValueError("Passenger name must not be empty")
        self.passenger_name = passenger_name

    def vacate(self) -> None:
        """Clear the seat's occupant. The fare is left as is."""
        self.passenger_name = None

    def __repr__(self) -> str:
        occupant = self.passenger_name or "Empty"
        return f"<Seat {occupant} fare={self._fare:.2f}>"
