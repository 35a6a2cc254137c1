"""Interactive WoofAreYou shell.

Reads one command per line, hands it to the message bus and prints the
outcome. A rejected command is reported and the shell carries on; the pet
book is never left half-changed.

Notes
- Feedback and errors go to **stderr**; pet listings go to **stdout**.
- The pet book lives in memory for the lifetime of the shell.
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

import click
from rich.console import Console
from rich.table import Table

from woofareyou.bootstrap import bootstrap
from woofareyou.interfaces.model import AbstractModel
from woofareyou.service_layer import commands, messages
from woofareyou.service_layer.errors import CommandError

from .helpers import error, success, warn
from .parser import ParseError, parse_command

if TYPE_CHECKING:
    from woofareyou.domain import Pet

logger = logging.getLogger(__name__)

PROMPT = "woofareyou"

HELP_TEXT = "\n\n".join(
    [
        messages.ADD_USAGE,
        messages.EDIT_USAGE,
        messages.DELETE_USAGE,
        messages.FIND_USAGE,
        messages.SORT_USAGE.format(fields=", ".join(AbstractModel.SORT_FIELDS)),
        messages.CHARGE_USAGE,
        "Other commands: list, clear, undo, present, absent, diet, app, help, exit",
    ]
)

VIEW_COMMANDS = (commands.ListPets, commands.FindPets, commands.SortPets)


def render_pet_list(console: Console, pets: tuple[Pet, ...]) -> None:
    """Print the displayed pets as a numbered table."""
    table = Table(show_header=True, header_style="bold")
    table.add_column("#", justify="right")
    table.add_column("Name")
    table.add_column("Owner")
    table.add_column("Phone")
    table.add_column("Address")
    table.add_column("Tags")
    table.add_column("Diet")
    table.add_column("Appointment")
    for position, pet in enumerate(pets, start=1):
        table.add_row(
            str(position),
            str(pet.name),
            str(pet.owner_name),
            str(pet.phone),
            str(pet.address),
            ", ".join(sorted(tag.tag_name for tag in pet.tags)),
            str(pet.diet),
            str(pet.appointment) if pet.appointment is not None else "",
        )
    console.print(table)


@click.command()
@click.option(
    "--empty/--sample",
    "empty",
    default=False,
    help="Start with an empty pet book instead of the sample pets.",
)
def shell(empty: bool) -> None:
    """Start an interactive session. Type 'help' for commands, 'exit' to leave."""

    container = bootstrap(pets=() if empty else None)
    bus = container.message_bus
    console = Console(file=click.get_text_stream("stdout"))

    if empty:
        warn("Starting with an empty pet book.")
    render_pet_list(console, bus.model.get_filtered_pet_list())

    while True:
        try:
            line = click.prompt(PROMPT, prompt_suffix="> ", default="", show_default=False)
        except click.Abort:
            logger.debug("Input closed; leaving shell")
            break
        if not line.strip():
            continue

        try:
            cmd = parse_command(line)
            result = bus.handle(cmd)
        except (ParseError, CommandError) as e:
            error(e.message)
            continue

        success(result.feedback)
        if result.show_help:
            click.echo(HELP_TEXT)
        if isinstance(cmd, VIEW_COMMANDS):
            render_pet_list(console, bus.model.get_filtered_pet_list())
        if result.exit:
            break
