"""Domain layer for WoofAreYou.

Contains business rules: the `Pet` aggregate, its value objects, the
attendance calendar and the duplicate-free `PetBook`. This package is
deliberately technology-agnostic.

Dependency rule: do not import from `woofareyou.adapters` or
`woofareyou.entrypoints`.
"""

from .attendance import AttendanceCalendar, AttendanceEntry
from .pet import Pet
from .pet_book import PetBook
from .value_objects import (
    Address,
    Appointment,
    BillingMonth,
    Charge,
    Diet,
    Name,
    OwnerName,
    Phone,
    Tag,
)

__all__ = [
    "Address",
    "Appointment",
    "AttendanceCalendar",
    "AttendanceEntry",
    "BillingMonth",
    "Charge",
    "Diet",
    "Name",
    "OwnerName",
    "Pet",
    "PetBook",
    "Phone",
    "Tag",
]
