"""Pet aggregate."""

from __future__ import annotations

import dataclasses
from collections.abc import Iterable
from dataclasses import dataclass, field
from datetime import date
from typing import Any

from .attendance import AttendanceCalendar, AttendanceEntry
from .value_objects import Address, Appointment, Diet, Name, OwnerName, Phone, Tag


@dataclass(frozen=True, slots=True)
class Pet:
    """Aggregate root representing a boarded pet and its owner's contact details.

    Pets are immutable: every change produces a new `Pet` that replaces the old
    one in the pet book, so the book only ever holds fully valid records.

    Conventions:
      - `tags` is a set; order is irrelevant and duplicates collapse.
      - `diet` is empty when no feeding instructions were given.
      - `appointment` is None when nothing is scheduled.
    """

    name: Name
    phone: Phone
    owner_name: OwnerName
    address: Address
    tags: frozenset[Tag] = frozenset()
    diet: Diet = field(default_factory=Diet)
    appointment: Appointment | None = None
    attendance: AttendanceCalendar = field(default_factory=AttendanceCalendar)

    def __post_init__(self) -> None:
        if not isinstance(self.tags, frozenset):
            object.__setattr__(self, "tags", frozenset(self.tags))

    # --- Identity ---

    def is_same_pet(self, other: Pet | None) -> bool:
        """Return True if `other` is the same pet as this one.

        Identity is weaker than equality: two records naming the same pet for
        the same owner are the same pet, whatever their other fields say.
        """
        if other is self:
            return True
        return (
            other is not None
            and other.name == self.name
            and other.owner_name == self.owner_name
        )

    # --- Replacement ---

    def replace(self, **changes: Any) -> Pet:
        """Return a copy of this pet with the given fields replaced."""
        return dataclasses.replace(self, **changes)

    def with_tags(self, tags: Iterable[Tag]) -> Pet:
        """Return a copy of this pet carrying exactly `tags`."""
        return self.replace(tags=frozenset(tags))

    def with_attendance(self, day: date, entry: AttendanceEntry) -> Pet:
        """Return a copy of this pet with `entry` recorded for `day`."""
        return self.replace(attendance=self.attendance.with_entry(day, entry))

    def __str__(self) -> str:
        parts = [
            str(self.name),
            f"Phone: {self.phone}",
            f"Owner Name: {self.owner_name}",
            f"Address: {self.address}",
        ]
        if self.tags:
            parts.append(
                "Tags: " + "".join(str(t) for t in sorted(self.tags, key=str))
            )
        if self.diet.value:
            parts.append(f"Diet: {self.diet}")
        if self.appointment is not None:
            parts.append(f"Appointment: {self.appointment}")
        return "; ".join(parts)
