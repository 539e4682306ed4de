"""Handlers for the bus menu entries of the busbook CLI."""

import click

from busbook import config
from busbook.cli_module.utils import (
    echo_failure,
    echo_line,
    format_fare,
    prompt_input,
    render_detail,
    render_summaries,
)
from busbook.services.input_flow import REGISTRATION_FIELDS, ROUTE_FIELDS, FlowState, InputFlow
from busbook.services.registry_service import BusRegistry, resolve_seat


def install_bus(registry: BusRegistry) -> None:
    """Collect a new bus's details field by field and install it."""
    flow = InputFlow(REGISTRATION_FIELDS)
    while flow.state is FlowState.COLLECTING:
        flow.feed(prompt_input(flow.prompt))

    result = registry.register_from_flow(flow)
    if not result:
        echo_failure(result)
        return

    click.echo(f"\n{result.message}")


def reserve_seat(registry: BusRegistry) -> None:
    """Reserve a seat for a passenger."""
    if registry.is_empty:
        click.echo("No buses installed. Please install a bus first.")
        return

    bus_number = prompt_input("Enter bus number to reserve seat")
    found = registry.resolve_bus(bus_number)
    if not found:
        echo_failure(found)
        return

    seat = resolve_seat(found.value, prompt_input(f"Enter seat number (1-{config.SEAT_COUNT})"))
    if not seat:
        echo_failure(seat)
        return

    seat_number = seat.value[0]
    vacant = found.value.check_vacant(seat_number)
    if not vacant:
        echo_failure(vacant)
        return

    passenger_name = prompt_input("Enter passenger's name")
    result = registry.reserve(bus_number, seat_number, passenger_name)
    if not result:
        echo_failure(result)
        return

    click.echo(result.message)
    click.echo(f"Fare: {format_fare(result.value.fare)}")


def show_bus(registry: BusRegistry) -> None:
    """Show the full details and seat map of one bus."""
    if registry.is_empty:
        click.echo("No buses installed yet.")
        return

    result = registry.show(prompt_input("Enter bus number to show details"))
    if not result:
        echo_failure(result)
        return

    echo_line("*")
    click.echo(render_detail(result.value))
    echo_line("*")


def show_all_buses(registry: BusRegistry) -> None:
    """List every installed bus."""
    result = registry.list_all()
    if not result:
        click.echo(result.message)
        return

    click.echo(render_summaries(result.value))


def cancel_seat(registry: BusRegistry) -> None:
    """Cancel a seat reservation after asking for confirmation."""
    if registry.is_empty:
        click.echo("No buses installed yet.")
        return

    bus_number = prompt_input("Enter bus number to cancel a seat")
    found = registry.resolve_bus(bus_number)
    if not found:
        echo_failure(found)
        return

    seat = resolve_seat(found.value, prompt_input(f"Enter seat number to cancel (1-{config.SEAT_COUNT})"))
    if not seat:
        echo_failure(seat)
        return

    def confirm(seat_number, passenger_name):
        return prompt_input(
            f"Are you sure you want to cancel the reservation for seat "
            f"{seat_number} (Passenger: {passenger_name})? (y/n)",
            cancellable=False)

    result = registry.release(bus_number, seat.value[0], confirm)
    if not result:
        echo_failure(result)
        return

    click.echo(result.message)


def search_by_route(registry: BusRegistry) -> None:
    """Find the buses running a given route."""
    if registry.is_empty:
        click.echo("No buses available.")
        return

    flow = InputFlow(ROUTE_FIELDS)
    while flow.state is FlowState.COLLECTING:
        flow.feed(prompt_input(flow.prompt, cancellable=False))

    if flow.state is FlowState.CANCELLED:
        click.echo("Search cancelled.")
        return

    route = flow.values
    result = registry.search_by_route(route["origin"], route["destination"])
    if not result:
        click.echo(result.message)
        return

    click.echo(render_summaries(result.value))
