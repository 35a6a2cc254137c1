"""Handlers for commands that only change what is displayed."""

from collections.abc import Callable

from woofareyou.interfaces.model import AbstractModel
from woofareyou.service_layer import commands, messages
from woofareyou.service_layer.errors import UnknownSortFieldError
from woofareyou.service_layer.results import CommandResult

# pylint: disable=unused-argument


def find_pets(cmd: commands.FindPets, model: AbstractModel) -> CommandResult:
    """Filter the displayed list down to the pets matching the predicate."""

    model.update_filtered_pet_list(cmd.predicate)
    count = len(model.get_filtered_pet_list())
    return CommandResult(messages.PETS_LISTED_OVERVIEW.format(count=count))


def list_pets(cmd: commands.ListPets, model: AbstractModel) -> CommandResult:
    """Show every pet again."""

    model.update_filtered_pet_list()
    return CommandResult(messages.LIST_SUCCESS)


def sort_pets(cmd: commands.SortPets, model: AbstractModel) -> CommandResult:
    """Order the displayed list by one of the model's sort fields."""

    field = cmd.field.strip().lower()
    if field not in model.SORT_FIELDS:
        raise UnknownSortFieldError(cmd.field, model.SORT_FIELDS)

    model.sort_pet_list(field)
    return CommandResult(messages.SORT_SUCCESS.format(field=field))


def show_help(cmd: commands.ShowHelp, model: AbstractModel) -> CommandResult:
    """Ask the front end to show usage information."""
    return CommandResult(messages.SHOWING_HELP, show_help=True)


def exit_app(cmd: commands.ExitApp, model: AbstractModel) -> CommandResult:
    """Ask the front end to shut down."""
    return CommandResult(messages.EXITING, exit=True)


COMMAND_HANDLERS: dict[type, Callable[..., CommandResult]] = {
    commands.FindPets: find_pets,
    commands.ListPets: list_pets,
    commands.SortPets: sort_pets,
    commands.ShowHelp: show_help,
    commands.ExitApp: exit_app,
}
