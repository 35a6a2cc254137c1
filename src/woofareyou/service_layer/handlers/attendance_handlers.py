"""Handlers for attendance tracking and the billing derived from it."""

import logging
from collections.abc import Callable

from woofareyou.domain import AttendanceEntry
from woofareyou.interfaces.model import AbstractModel
from woofareyou.service_layer import commands, messages
from woofareyou.service_layer.billing import (
    compute_monthly_charge,
    format_charge_report,
)
from woofareyou.service_layer.errors import NoChargeSetError
from woofareyou.service_layer.results import CommandResult

from .lookup import pet_at

logger = logging.getLogger(__name__)


def mark_present(cmd: commands.MarkPresent, model: AbstractModel) -> CommandResult:
    """Record that the displayed pet attended on the given day."""

    pet = pet_at(cmd.index, model)
    entry = AttendanceEntry.present(drop_off=cmd.drop_off, pick_up=cmd.pick_up)
    model.set_pet(pet, pet.with_attendance(cmd.day, entry))
    return CommandResult(
        messages.PRESENT_SUCCESS.format(
            pet_name=pet.name, day=cmd.day.strftime("%d-%m-%Y")
        )
    )


def mark_absent(cmd: commands.MarkAbsent, model: AbstractModel) -> CommandResult:
    """Record that the displayed pet was away on the given day."""

    pet = pet_at(cmd.index, model)
    model.set_pet(pet, pet.with_attendance(cmd.day, AttendanceEntry.absent()))
    return CommandResult(
        messages.ABSENT_SUCCESS.format(
            pet_name=pet.name, day=cmd.day.strftime("%d-%m-%Y")
        )
    )


def charge_pet(cmd: commands.ChargePet, model: AbstractModel) -> CommandResult:
    """Report what the displayed pet owes for a month. Nothing is modified."""

    pet = pet_at(cmd.index, model)
    if not cmd.charge.is_set:
        raise NoChargeSetError

    amount = compute_monthly_charge(pet.attendance, cmd.month, cmd.charge)
    logger.debug(
        "ChargePet %s: %s at %s per day -> %s",
        pet.name,
        cmd.month,
        cmd.charge.amount,
        amount,
    )
    return CommandResult(format_charge_report(pet.name, amount, cmd.month))


COMMAND_HANDLERS: dict[type, Callable[..., CommandResult]] = {
    commands.MarkPresent: mark_present,
    commands.MarkAbsent: mark_absent,
    commands.ChargePet: charge_pet,
}
