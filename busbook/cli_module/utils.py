"""Utility functions for the CLI interface."""

from typing import List

import click
from tabulate import tabulate

from busbook import config
from busbook.models.result import BookingError, Result
from busbook.models.views import BusDetail, BusSummary

LINE_WIDTH = 80


def prompt_input(text: str, cancellable: bool = True) -> str:
    """Prompt for a line of text. Empty input is returned as an empty string."""
    if cancellable:
        text = f"{text} (or {config.CANCEL_TOKEN} to cancel)"
    return click.prompt(text, default="", show_default=False)


def format_fare(fare: float) -> str:
    return f"{config.CURRENCY_LABEL} {fare:.2f}"


def echo_failure(result: Result) -> None:
    """Report a failed operation. Operator cancellations are not errors."""
    if result.error in (BookingError.CANCELLED, BookingError.ABORTED):
        click.echo(result.message)
        return
    click.echo(f"Error: {result.message}", err=True)


def echo_line(char: str = "*") -> None:
    click.echo(char * LINE_WIDTH)


def render_detail(detail: BusDetail) -> str:
    """Render a bus's fields and seat map."""
    header = tabulate([
        ["Bus Number", detail.bus_number],
        ["Driver", detail.driver_name],
        ["Arrival Time", detail.arrival_time],
        ["Departure Time", detail.departure_time],
        ["From", detail.origin],
        ["To", detail.destination],
    ], tablefmt="plain")

    table_data = []
    for index, row in enumerate(detail.rows(), 1):
        cells = [f"Row {index}"]
        for seat in row:
            occupant = "Empty" if seat.is_vacant else seat.passenger_name
            cells.append(f"{seat.number:2d}: {occupant} ({format_fare(seat.fare)})")
        table_data.append(cells)
    headers = [""] + [f"Col {c}" for c in range(1, config.COLUMNS + 1)]
    seat_map = tabulate(table_data, headers=headers, tablefmt="grid")

    return f"{header}\n\n{seat_map}\n\nTotal empty seats: {detail.vacant_count}"


def render_summaries(summaries: List[BusSummary]) -> str:
    """Render bus summaries as a table."""
    table_data = [
        [s.bus_number, s.driver_name, s.arrival_time, s.departure_time, s.route]
        for s in summaries
    ]
    headers = ["Bus Number", "Driver", "Arrival Time", "Departure Time", "Route"]
    return tabulate(table_data, headers=headers, tablefmt="grid")
