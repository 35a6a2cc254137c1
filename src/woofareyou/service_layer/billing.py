"""Monthly billing computed from a pet's attendance calendar."""

from __future__ import annotations

from decimal import ROUND_HALF_UP, Decimal
from typing import TYPE_CHECKING

from . import messages
from .errors import NoChargeSetError

if TYPE_CHECKING:
    from woofareyou.domain import AttendanceCalendar, BillingMonth, Charge, Name

CENT = Decimal("0.01")


def compute_monthly_charge(
    calendar: AttendanceCalendar, month: BillingMonth, charge: Charge
) -> Decimal:
    """Compute the amount owed for `month` at the given per-day rate.

    Every day of the month is visited in ascending order. A day contributes
    the rate only when its entry explicitly marks the pet as present; days
    without an entry, or whose presence is unknown or False, contribute zero.

    Args:
        calendar: The pet's attendance calendar. It is not modified.
        month: The month to bill.
        charge: The per-day rate.

    Returns:
        The non-negative total.

    Raises:
        NoChargeSetError: If `charge` carries no rate.
    """
    if charge.amount is None:
        raise NoChargeSetError
    total = Decimal(0)
    for day in month.days():
        entry = calendar.get(day)
        if entry is not None and entry.is_present is True:
            total += charge.amount
    return total


def format_charge_report(pet_name: Name, amount: Decimal, month: BillingMonth) -> str:
    """Render the charge report shown to the user.

    Cents are rounded half-up, so 0.125 is reported as 0.13.
    """
    cents = Decimal(amount).quantize(CENT, rounding=ROUND_HALF_UP)
    return messages.CHARGE_SUCCESS.format(
        pet_name=pet_name, amount=cents, month=month.name
    )
