"""Command modules for the busbook CLI."""

from busbook.cli_module.commands.menu_commands import menu_command

__all__ = [
    'menu_command',
]
