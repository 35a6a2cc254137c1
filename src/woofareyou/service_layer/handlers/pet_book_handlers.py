"""Handlers for commands that change the pet book."""

import logging
from collections.abc import Callable

from woofareyou.interfaces.model import AbstractModel
from woofareyou.service_layer import commands, messages
from woofareyou.service_layer.errors import (
    DuplicatePetError,
    NoFieldsEditedError,
    NothingToUndoError,
)
from woofareyou.service_layer.results import CommandResult

from .lookup import pet_at

logger = logging.getLogger(__name__)

# ============================================================================
#                           Record management
# ============================================================================


def add_pet(cmd: commands.AddPet, model: AbstractModel) -> CommandResult:
    """Append a new pet unless the same pet is already in the book."""

    if model.has_pet(cmd.pet):
        raise DuplicatePetError

    model.add_pet(cmd.pet)
    return CommandResult(messages.ADD_SUCCESS.format(pet=cmd.pet))


def edit_pet(cmd: commands.EditPet, model: AbstractModel) -> CommandResult:
    """Replace the displayed pet with a copy carrying the edited fields."""

    if not cmd.descriptor.is_any_field_edited():
        raise NoFieldsEditedError

    pet_to_edit = pet_at(cmd.index, model)
    edited_pet = cmd.descriptor.apply_to(pet_to_edit)

    if not pet_to_edit.is_same_pet(edited_pet) and model.has_pet(edited_pet):
        raise DuplicatePetError

    model.set_pet(pet_to_edit, edited_pet)
    model.update_filtered_pet_list()
    return CommandResult(messages.EDIT_SUCCESS.format(pet=edited_pet))


def delete_pet(cmd: commands.DeletePet, model: AbstractModel) -> CommandResult:
    """Remove the displayed pet from the book."""

    pet_to_delete = pet_at(cmd.index, model)
    model.delete_pet(pet_to_delete)
    return CommandResult(messages.DELETE_SUCCESS.format(pet=pet_to_delete))


def clear_pets(
    cmd: commands.ClearPets,  # pylint: disable=unused-argument
    model: AbstractModel,
) -> CommandResult:
    """Empty the pet book. The previous content stays reachable through undo."""

    model.set_pet_book(())
    return CommandResult(messages.CLEAR_SUCCESS)


def undo(
    cmd: commands.Undo,  # pylint: disable=unused-argument
    model: AbstractModel,
) -> CommandResult:
    """Restore the pet book as it was before the last change."""

    if not model.has_undo_history():
        raise NothingToUndoError

    model.undo()
    return CommandResult(messages.UNDO_SUCCESS)


# ============================================================================
#                           Care details
# ============================================================================


def set_diet(cmd: commands.SetDiet, model: AbstractModel) -> CommandResult:
    """Replace the diet of the displayed pet."""

    pet = pet_at(cmd.index, model)
    if pet.diet == cmd.diet:
        logger.debug("SetDiet %s: no changes; noop", pet.name)
    else:
        model.set_pet(pet, pet.replace(diet=cmd.diet))

    if not cmd.diet.value:
        return CommandResult(messages.DIET_REMOVED.format(pet_name=pet.name))
    return CommandResult(messages.DIET_ADDED.format(pet_name=pet.name, diet=cmd.diet))


def set_appointment(
    cmd: commands.SetAppointment, model: AbstractModel
) -> CommandResult:
    """Set or clear the appointment of the displayed pet."""

    pet = pet_at(cmd.index, model)
    if pet.appointment == cmd.appointment:
        logger.debug("SetAppointment %s: no changes; noop", pet.name)
    else:
        model.set_pet(pet, pet.replace(appointment=cmd.appointment))

    if cmd.appointment is None:
        return CommandResult(messages.APPOINTMENT_CLEARED.format(pet_name=pet.name))
    return CommandResult(
        messages.APPOINTMENT_ADDED.format(
            pet_name=pet.name, appointment=cmd.appointment
        )
    )


# ============================================================================
#                       Handler Registry
# ============================================================================


COMMAND_HANDLERS: dict[type, Callable[..., CommandResult]] = {
    commands.AddPet: add_pet,
    commands.EditPet: edit_pet,
    commands.DeletePet: delete_pet,
    commands.ClearPets: clear_pets,
    commands.Undo: undo,
    commands.SetDiet: set_diet,
    commands.SetAppointment: set_appointment,
}
