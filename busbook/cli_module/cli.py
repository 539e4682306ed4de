"""Main CLI entry point for busbook application."""

import click

# Set context settings to properly display help for all commands
CONTEXT_SETTINGS = {
    "help_option_names": ["-h", "--help"],
    "max_content_width": 120,
    "show_default": True
}

from busbook.cli_module.commands.menu_commands import menu_command


@click.group(context_settings=CONTEXT_SETTINGS, invoke_without_command=True)
@click.pass_context
def cli(ctx):
    """busbook CLI for bus seat reservations."""
    if ctx.invoked_subcommand is None:
        ctx.invoke(menu_command)


cli.add_command(menu_command)


def main():
    """Entry point for the application."""
    cli()


if __name__ == '__main__':
    main()
