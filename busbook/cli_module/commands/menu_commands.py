"""Interactive menu command for the busbook CLI."""

import logging

import click

from busbook import config
from busbook.cli_module.commands import bus_commands
from busbook.services.registry_service import BusRegistry

MENU = """
\t\t===== Bus Booking System =====
\t\t1. Install New Bus
\t\t2. Reserve a Seat
\t\t3. Show Bus Details
\t\t4. Show All Buses Available
\t\t5. Cancel (Remove) a Seat
\t\t6. Search Buses by Route
\t\t7. Exit
"""

EXIT_CHOICE = 7

ACTIONS = {
    1: bus_commands.install_bus,
    2: bus_commands.reserve_seat,
    3: bus_commands.show_bus,
    4: bus_commands.show_all_buses,
    5: bus_commands.cancel_seat,
    6: bus_commands.search_by_route,
}


def read_choice():
    """Read a menu choice, returning None when it is not a whole number."""
    raw = click.prompt("\t\tEnter your choice:->", default="", show_default=False)
    try:
        return int(raw.strip())
    except ValueError:
        return None


@click.command(name="menu", help="Run the interactive bus booking menu")
@click.option("--log-level", default=config.LOG_LEVEL,
              type=click.Choice(["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"], case_sensitive=False),
              help="Logging level")
def menu_command(log_level):
    """
    Run the interactive menu until the operator chooses to exit.

    All buses live in memory for the duration of the session.
    """
    logging.basicConfig(level=log_level.upper())
    registry = BusRegistry()

    click.clear()
    while True:
        click.echo(MENU)
        choice = read_choice()

        if choice == EXIT_CHOICE:
            click.echo("Exiting... Have a nice day!")
            return

        action = ACTIONS.get(choice)
        if action is None:
            click.echo(f"Invalid choice. Please enter a number between 1 and {EXIT_CHOICE}.")
            continue

        action(registry)
