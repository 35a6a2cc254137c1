"""Per-pet attendance records.

An attendance calendar distinguishes three situations for any day:

* no entry at all: nothing was recorded for that day;
* an entry whose presence is ``None``: a record exists but attendance is unknown;
* an entry whose presence is ``True``/``False``: the pet was known present/absent.

Billing depends on this distinction, so none of the three may be collapsed.
"""

from __future__ import annotations

from collections.abc import Iterator, Mapping
from dataclasses import dataclass
from datetime import date, time
from types import MappingProxyType

from .errors import InvalidFieldError


@dataclass(frozen=True, slots=True)
class AttendanceEntry:
    """One day's attendance record for one pet."""

    CONSTRAINTS = "Drop-off and pick-up times can only be recorded for a present pet"

    is_present: bool | None = None
    drop_off: time | None = None
    pick_up: time | None = None

    def __post_init__(self) -> None:
        if self.is_present is not True and (
            self.drop_off is not None or self.pick_up is not None
        ):
            raise InvalidFieldError("attendance", self, self.CONSTRAINTS)

    @classmethod
    def present(
        cls, drop_off: time | None = None, pick_up: time | None = None
    ) -> AttendanceEntry:
        """Build an entry for a day the pet attended."""
        return cls(is_present=True, drop_off=drop_off, pick_up=pick_up)

    @classmethod
    def absent(cls) -> AttendanceEntry:
        """Build an entry for a day the pet was known to be away."""
        return cls(is_present=False)


class AttendanceCalendar:
    """Immutable mapping of calendar dates to attendance entries.

    Writing an entry returns a new calendar, which keeps every `Pet` (and so
    every undo snapshot holding one) unaffected by later changes.
    """

    __slots__ = ("_entries",)

    def __init__(self, entries: Mapping[date, AttendanceEntry] | None = None) -> None:
        self._entries: Mapping[date, AttendanceEntry] = MappingProxyType(
            dict(sorted((entries or {}).items()))
        )

    def has_entry(self, day: date) -> bool:
        """Whether anything was recorded for `day`."""
        return day in self._entries

    def get(self, day: date) -> AttendanceEntry | None:
        """Return the entry for `day`, or None when nothing was recorded."""
        return self._entries.get(day)

    def with_entry(self, day: date, entry: AttendanceEntry) -> AttendanceCalendar:
        """Return a copy of this calendar with `entry` recorded for `day`.

        An existing entry for the same day is overwritten.
        """
        entries = dict(self._entries)
        entries[day] = entry
        return AttendanceCalendar(entries)

    def between(self, start: date, end: date) -> Iterator[tuple[date, AttendanceEntry]]:
        """Yield (day, entry) pairs for start <= day <= end in ascending order."""
        for day, entry in self._entries.items():
            if start <= day <= end:
                yield day, entry

    def items(self) -> Iterator[tuple[date, AttendanceEntry]]:
        """Yield every (day, entry) pair in ascending date order."""
        yield from self._entries.items()

    def __len__(self) -> int:
        return len(self._entries)

    def __contains__(self, day: object) -> bool:
        return day in self._entries

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, AttendanceCalendar):
            return NotImplemented
        return dict(self._entries) == dict(other._entries)

    def __hash__(self) -> int:
        return hash(tuple(self._entries.items()))

    def __repr__(self) -> str:
        return f"AttendanceCalendar({dict(self._entries)!r})"
