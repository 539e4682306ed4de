"""Runtime configuration for busbook."""

import os
from dotenv import load_dotenv

load_dotenv()

# Seat grid layout
ROWS = 8
COLUMNS = 4
SEAT_COUNT = ROWS * COLUMNS


def read_fare(raw: str) -> float:
    """
    Parse a fare setting.

    Raises:
        ValueError: If the value is not a number or is negative
    """
    fare = float(raw)
    if not fare >= 0:
        raise ValueError(f"BUSBOOK_DEFAULT_FARE cannot be negative: {raw}")
    return fare


# Fare assigned to every seat of a newly installed bus
DEFAULT_FARE = read_fare(os.getenv("BUSBOOK_DEFAULT_FARE", "300.0"))

# Literal input that aborts the operation in progress (empty input does too)
CANCEL_TOKEN = os.getenv("BUSBOOK_CANCEL_TOKEN", "0")

LOG_LEVEL = os.getenv("BUSBOOK_LOG_LEVEL", "WARNING").upper()

# Only used when rendering fares
CURRENCY_LABEL = os.getenv("BUSBOOK_CURRENCY", "Rs.")


def is_cancel_input(value) -> bool:
    """Check whether a raw input means "abort the current operation"."""
    if value is None:
        return True
    text = str(value)
    return text == "" or text == CANCEL_TOKEN
