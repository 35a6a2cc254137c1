"""Conversions between pets and their persisted record shape.

A record is a plain dict of JSON-compatible values. Writing records anywhere
is the persistence collaborator's job; this module only guarantees that every
pet field and every attendance entry survives the trip.
"""

from __future__ import annotations

from collections.abc import Iterable, Mapping
from datetime import date, datetime, time
from typing import Any

from woofareyou.domain import (
    Address,
    Appointment,
    AttendanceCalendar,
    AttendanceEntry,
    Diet,
    Name,
    OwnerName,
    Pet,
    PetBook,
    Phone,
    Tag,
)
from woofareyou.domain.errors import InvalidFieldError

PetRecord = dict[str, Any]


class RecordFormatError(ValueError):
    """Raised when a persisted record is missing a field or holds a malformed value."""

    def __init__(self, reason: str) -> None:
        super().__init__(f"Malformed pet record: {reason}")


def _time_to_str(value: time | None) -> str | None:
    return value.isoformat() if value is not None else None


def _time_from_str(value: str | None) -> time | None:
    return time.fromisoformat(value) if value is not None else None


def pet_to_record(pet: Pet) -> PetRecord:
    """Convert a Pet to its persisted record."""
    return {
        "name": pet.name.full_name,
        "phone": pet.phone.value,
        "owner_name": pet.owner_name.value,
        "address": pet.address.value,
        "tags": sorted(tag.tag_name for tag in pet.tags),
        "diet": pet.diet.value,
        "appointment": (
            None
            if pet.appointment is None
            else {
                "when": pet.appointment.when.isoformat(),
                "location": pet.appointment.location,
            }
        ),
        "attendance": [
            {
                "date": day.isoformat(),
                "is_present": entry.is_present,
                "drop_off": _time_to_str(entry.drop_off),
                "pick_up": _time_to_str(entry.pick_up),
            }
            for day, entry in pet.attendance.items()
        ],
    }


def pet_from_record(record: Mapping[str, Any]) -> Pet:
    """Convert a persisted record back to a Pet.

    Raises:
        RecordFormatError: If a required field is missing or a date/time is malformed.
        InvalidFieldError: If a field value violates its constraints.
    """
    try:
        appointment = record.get("appointment")
        entries = {
            date.fromisoformat(item["date"]): AttendanceEntry(
                is_present=item.get("is_present"),
                drop_off=_time_from_str(item.get("drop_off")),
                pick_up=_time_from_str(item.get("pick_up")),
            )
            for item in record.get("attendance", [])
        }
        return Pet(
            name=Name(record["name"]),
            phone=Phone(record["phone"]),
            owner_name=OwnerName(record["owner_name"]),
            address=Address(record["address"]),
            tags=frozenset(Tag(name) for name in record.get("tags", [])),
            diet=Diet(record.get("diet", "")),
            appointment=(
                None
                if appointment is None
                else Appointment(
                    when=datetime.fromisoformat(appointment["when"]),
                    location=appointment["location"],
                )
            ),
            attendance=AttendanceCalendar(entries),
        )
    except KeyError as e:
        raise RecordFormatError(f"missing field {e.args[0]!r}") from e
    except (TypeError, AttributeError) as e:
        raise RecordFormatError(str(e)) from e
    except InvalidFieldError:
        raise
    except ValueError as e:
        raise RecordFormatError(str(e)) from e


def book_to_records(pets: Iterable[Pet]) -> list[PetRecord]:
    """Convert pets, in order, to a list of records."""
    return [pet_to_record(pet) for pet in pets]


def book_from_records(records: Iterable[Mapping[str, Any]]) -> PetBook:
    """Rebuild a pet book from records, preserving order.

    Raises:
        DuplicatePetInBookError: If two records describe the same pet.
    """
    return PetBook(pet_from_record(record) for record in records)
