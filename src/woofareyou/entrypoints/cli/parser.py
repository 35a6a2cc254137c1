"""Grammar of the single-line commands typed into the WoofAreYou shell.

Each command word is a small Click command whose callback returns the
corresponding service-layer command object. Click does the tokenizing and the
syntactic validation (positive indices, dates, months, rates); whether an
index exists in the current pet list is left to the command handlers.

Examples
    add --name Rex --phone 98765432 --owner "John Doe" --address "Blk 1" -t Poodle
    edit 2 --phone 91234567
    charge 1 --month 03-2022 --cost 200
    present 1 --date 01-03-2022 --drop-off 08:30
"""

from __future__ import annotations

import shlex
from datetime import date
from decimal import Decimal
from typing import Any

import click

from woofareyou.domain import (
    Address,
    Appointment,
    BillingMonth,
    Charge,
    Diet,
    Name,
    OwnerName,
    Pet,
    Phone,
    Tag,
)
from woofareyou.domain.errors import InvalidFieldError
from woofareyou.service_layer import commands
from woofareyou.service_layer.predicates import PetMatchesKeywords

# pylint: disable=too-many-arguments,too-many-positional-arguments

CONTEXT_SETTINGS = {"help_option_names": []}
DATE_FORMATS = ["%d-%m-%Y"]
TIME_FORMATS = ["%H:%M"]
APPOINTMENT_FORMATS = ["%d-%m-%Y %H:%M"]


class ParseError(Exception):
    """Raised when a line cannot be turned into a command."""

    def __init__(self, message: str) -> None:
        super().__init__(message)
        self.message = message


# --- Parameter types ---


class IndexType(click.ParamType):
    """A 1-based positive index."""

    name = "index"

    def convert(self, value: Any, param, ctx) -> commands.Index:
        if isinstance(value, commands.Index):
            return value
        try:
            return commands.Index(int(value))
        except (TypeError, ValueError):
            self.fail(f"{value!r} is not a positive integer index.", param, ctx)


class ValueObjectType(click.ParamType):
    """Build a domain value object from its text, reporting its constraints on failure."""

    def __init__(self, factory, name: str) -> None:
        self.factory = factory
        self.name = name

    def convert(self, value: Any, param, ctx):
        if not isinstance(value, str):
            return value
        try:
            return self.factory(value)
        except InvalidFieldError as e:
            self.fail(e.constraints, param, ctx)


class RateType(click.ParamType):
    """A non-negative decimal amount."""

    name = "cost"

    def convert(self, value: Any, param, ctx) -> Decimal:
        try:
            return Charge(value).amount
        except InvalidFieldError as e:
            self.fail(e.constraints, param, ctx)


INDEX = IndexType()
NAME = ValueObjectType(Name, "name")
PHONE = ValueObjectType(Phone, "phone")
OWNER = ValueObjectType(OwnerName, "owner")
ADDRESS = ValueObjectType(Address, "address")
TAG = ValueObjectType(Tag, "tag")
MONTH = ValueObjectType(BillingMonth.parse, "MM-yyyy")
RATE = RateType()


# --- Grammar ---


@click.group(context_settings=CONTEXT_SETTINGS)
def grammar() -> None:
    """Commands accepted by the shell."""


@grammar.command(context_settings=CONTEXT_SETTINGS)
@click.option("--name", "-n", type=NAME, required=True)
@click.option("--phone", "-p", type=PHONE, required=True)
@click.option("--owner", "-o", type=OWNER, required=True)
@click.option("--address", "-a", type=ADDRESS, required=True)
@click.option("--tag", "-t", "tags", type=TAG, multiple=True)
def add(name, phone, owner, address, tags) -> commands.AddPet:
    """Add a pet."""
    return commands.AddPet(Pet(name, phone, owner, address, frozenset(tags)))


@grammar.command(context_settings=CONTEXT_SETTINGS)
@click.argument("index", type=INDEX)
@click.option("--name", "-n", type=NAME)
@click.option("--phone", "-p", type=PHONE)
@click.option("--owner", "-o", type=OWNER)
@click.option("--address", "-a", type=ADDRESS)
@click.option("--tag", "-t", "tags", type=TAG, multiple=True)
@click.option("--clear-tags", is_flag=True, help="Remove every tag.")
def edit(index, name, phone, owner, address, tags, clear_tags) -> commands.EditPet:
    """Edit fields of a displayed pet."""
    changes: dict[str, Any] = {
        field: value
        for field, value in (
            ("name", name),
            ("phone", phone),
            ("owner_name", owner),
            ("address", address),
        )
        if value is not None
    }
    if tags or clear_tags:
        changes["tags"] = frozenset(tags)
    return commands.EditPet(index, commands.EditPetDescriptor(**changes))


@grammar.command(context_settings=CONTEXT_SETTINGS)
@click.argument("index", type=INDEX)
def delete(index) -> commands.DeletePet:
    """Delete a displayed pet."""
    return commands.DeletePet(index)


@grammar.command(context_settings=CONTEXT_SETTINGS)
@click.option(
    "--by",
    "field",
    type=click.Choice(PetMatchesKeywords.FIELDS, case_sensitive=False),
    default="name",
)
@click.argument("keywords", nargs=-1, required=True)
def find(field, keywords) -> commands.FindPets:
    """Show pets matching any keyword."""
    return commands.FindPets(PetMatchesKeywords(tuple(keywords), field.lower()))


@grammar.command(name="list", context_settings=CONTEXT_SETTINGS)
def list_() -> commands.ListPets:
    """Show every pet."""
    return commands.ListPets()


@grammar.command(context_settings=CONTEXT_SETTINGS)
@click.argument("field")
def sort(field) -> commands.SortPets:
    """Sort the displayed pets."""
    return commands.SortPets(field)


@grammar.command(context_settings=CONTEXT_SETTINGS)
def clear() -> commands.ClearPets:
    """Remove every pet."""
    return commands.ClearPets()


@grammar.command(context_settings=CONTEXT_SETTINGS)
def undo() -> commands.Undo:
    """Revert the last change to the pet book."""
    return commands.Undo()


@grammar.command(context_settings=CONTEXT_SETTINGS)
@click.argument("index", type=INDEX)
@click.option("--month", "-m", type=MONTH, required=True)
@click.option("--cost", "-c", type=RATE, default=None)
def charge(index, month, cost) -> commands.ChargePet:
    """Compute a month's charge."""
    return commands.ChargePet(index, month, Charge(cost))


@grammar.command(context_settings=CONTEXT_SETTINGS)
@click.argument("index", type=INDEX)
@click.option("--date", "-d", "day", type=click.DateTime(DATE_FORMATS), default=None)
@click.option("--drop-off", type=click.DateTime(TIME_FORMATS), default=None)
@click.option("--pick-up", type=click.DateTime(TIME_FORMATS), default=None)
def present(index, day, drop_off, pick_up) -> commands.MarkPresent:
    """Mark a pet present (today by default)."""
    return commands.MarkPresent(
        index,
        day.date() if day is not None else date.today(),
        drop_off=drop_off.time() if drop_off is not None else None,
        pick_up=pick_up.time() if pick_up is not None else None,
    )


@grammar.command(context_settings=CONTEXT_SETTINGS)
@click.argument("index", type=INDEX)
@click.option("--date", "-d", "day", type=click.DateTime(DATE_FORMATS), default=None)
def absent(index, day) -> commands.MarkAbsent:
    """Mark a pet absent (today by default)."""
    return commands.MarkAbsent(index, day.date() if day is not None else date.today())


@grammar.command(context_settings=CONTEXT_SETTINGS)
@click.argument("index", type=INDEX)
@click.argument("text", nargs=-1)
def diet(index, text) -> commands.SetDiet:
    """Set a pet's diet; no text removes it."""
    return commands.SetDiet(index, Diet(" ".join(text)))


@grammar.command(context_settings=CONTEXT_SETTINGS)
@click.argument("index", type=INDEX)
@click.option("--at", "when", type=click.DateTime(APPOINTMENT_FORMATS), default=None)
@click.option("--location", "-l", default=None)
@click.option("--clear", "clear_", is_flag=True, help="Remove the appointment.")
def app(index, when, location, clear_) -> commands.SetAppointment:
    """Set or clear a pet's appointment."""
    if clear_:
        return commands.SetAppointment(index, None)
    if when is None or location is None:
        raise click.UsageError("Give both --at and --location, or --clear.")
    try:
        appointment = Appointment(when, location)
    except InvalidFieldError as e:
        raise click.BadParameter(e.constraints, param_hint="--location") from e
    return commands.SetAppointment(index, appointment)


@grammar.command(name="help", context_settings=CONTEXT_SETTINGS)
def help_() -> commands.ShowHelp:
    """Show usage information."""
    return commands.ShowHelp()


@grammar.command(name="exit", context_settings=CONTEXT_SETTINGS)
def exit_() -> commands.ExitApp:
    """Leave the shell."""
    return commands.ExitApp()


def parse_command(line: str) -> commands.Command:
    """Turn one line of user input into a command.

    Raises:
        ParseError: If the line is empty, names no known command, or has
            malformed arguments.
    """
    try:
        args = shlex.split(line)
    except ValueError as e:
        raise ParseError(f"Invalid command format! {e}") from e
    if not args:
        raise ParseError("Invalid command format! Type 'help' to see all commands.")

    try:
        cmd = grammar.main(args, prog_name="", standalone_mode=False)
    except click.ClickException as e:
        raise ParseError(e.format_message()) from e
    if not isinstance(cmd, commands.Command):
        raise ParseError("Invalid command format! Type 'help' to see all commands.")
    return cmd
