"""Step-by-step collection of multi-field input."""

from enum import Enum, auto
from typing import Dict, Optional, Sequence, Tuple

from busbook import config


class FlowState(Enum):
    """Where an input flow stands."""
    COLLECTING = auto()
    COMPLETE = auto()
    CANCELLED = auto()


# (field name, prompt) pairs, in the order they are asked for
REGISTRATION_FIELDS: Tuple[Tuple[str, str], ...] = (
    ("bus_number", "Enter bus number"),
    ("driver_name", "Enter driver's name"),
    ("arrival_time", "Enter arrival time"),
    ("departure_time", "Enter departure time"),
    ("origin", "Enter origin (From)"),
    ("destination", "Enter destination (To)"),
)

ROUTE_FIELDS: Tuple[Tuple[str, str], ...] = (
    ("origin", "Enter origin (From)"),
    ("destination", "Enter destination (To)"),
)


class InputFlow:
    """
    Linear state machine that collects named fields in a fixed order.

    Each call to feed() fills the next field. An empty value or the
    cancellation token moves the flow to CANCELLED and drops everything
    collected so far. Once every field is filled the flow is COMPLETE.
    """

    def __init__(self, fields: Sequence[Tuple[str, str]]):
        if not fields:
            raise ValueError("An input flow needs at least one field")
        self._fields = list(fields)
        self._values: Dict[str, str] = {}
        self.state = FlowState.COLLECTING

    @property
    def current_field(self) -> Optional[str]:
        if self.state is not FlowState.COLLECTING:
            return None
        return self._fields[len(self._values)][0]

    @property
    def prompt(self) -> Optional[str]:
        if self.state is not FlowState.COLLECTING:
            return None
        return self._fields[len(self._values)][1]

    def feed(self, value: str) -> FlowState:
        """Supply the value for the current field."""
        if self.state is not FlowState.COLLECTING:
            raise RuntimeError(f"Input flow is already {self.state.name.lower()}")

        if config.is_cancel_input(value):
            self._values.clear()
            self.state = FlowState.CANCELLED
            return self.state

        self._values[self.current_field] = value
        if len(self._values) == len(self._fields):
            self.state = FlowState.COMPLETE
        return self.state

    def feed_all(self, values: Sequence[str]) -> FlowState:
        """Feed values in order, stopping as soon as the flow leaves COLLECTING."""
        for value in values:
            if self.feed(value) is not FlowState.COLLECTING:
                break
        return self.state

    @property
    def values(self) -> Dict[str, str]:
        """The collected fields. Only available once the flow is complete."""
        if self.state is not FlowState.COMPLETE:
            raise RuntimeError("Input flow is not complete")
        return dict(self._values)
