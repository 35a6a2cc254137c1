"""Module including value objects used across the domain layer.

Every value object validates itself on construction and raises
`InvalidFieldError` with a user-facing constraint message when it cannot be
built. Pets are only ever assembled from valid value objects.
"""

from __future__ import annotations

import calendar
import re
from collections.abc import Iterator
from dataclasses import dataclass
from datetime import date, datetime, timedelta
from decimal import Decimal, InvalidOperation

from .errors import InvalidFieldError

_NAME_RE = re.compile(r"[A-Za-z0-9][A-Za-z0-9 ]*")
_PHONE_RE = re.compile(r"\d{3,}")
_TAG_RE = re.compile(r"[A-Za-z0-9]+")
_MONTH_RE = re.compile(r"(\d{2})-(\d{4})")

APPOINTMENT_FORMAT = "%d-%m-%Y %H:%M"


# --- Contact details ---


@dataclass(frozen=True, slots=True)
class Name:
    """A pet's name."""

    CONSTRAINTS = (
        "Names should only contain alphanumeric characters and spaces, "
        "and it should not be blank"
    )

    full_name: str

    def __post_init__(self) -> None:
        if not _NAME_RE.fullmatch(self.full_name):
            raise InvalidFieldError("name", self.full_name, self.CONSTRAINTS)

    def __str__(self) -> str:
        return self.full_name


@dataclass(frozen=True, slots=True)
class OwnerName:
    """The name of a pet's owner."""

    CONSTRAINTS = (
        "Owner names should only contain alphanumeric characters and spaces, "
        "and it should not be blank"
    )

    value: str

    def __post_init__(self) -> None:
        if not _NAME_RE.fullmatch(self.value):
            raise InvalidFieldError("owner_name", self.value, self.CONSTRAINTS)

    def __str__(self) -> str:
        return self.value


@dataclass(frozen=True, slots=True)
class Phone:
    """The owner's contact number."""

    CONSTRAINTS = (
        "Phone numbers should only contain numbers, and it should be at least 3 digits long"
    )

    value: str

    def __post_init__(self) -> None:
        if not _PHONE_RE.fullmatch(self.value):
            raise InvalidFieldError("phone", self.value, self.CONSTRAINTS)

    def __str__(self) -> str:
        return self.value


@dataclass(frozen=True, slots=True)
class Address:
    """The owner's address. Any text is accepted as long as it is not blank."""

    CONSTRAINTS = "Addresses can take any values, and it should not be blank"

    value: str

    def __post_init__(self) -> None:
        if not self.value or self.value[0].isspace():
            raise InvalidFieldError("address", self.value, self.CONSTRAINTS)

    def __str__(self) -> str:
        return self.value


@dataclass(frozen=True, slots=True)
class Tag:
    """A single-word label attached to a pet (breed, temperament, ...)."""

    CONSTRAINTS = "Tags names should be alphanumeric"

    tag_name: str

    def __post_init__(self) -> None:
        if not _TAG_RE.fullmatch(self.tag_name):
            raise InvalidFieldError("tag", self.tag_name, self.CONSTRAINTS)

    def __str__(self) -> str:
        return f"[{self.tag_name}]"


@dataclass(frozen=True, slots=True)
class Diet:
    """Free-text feeding instructions. An empty diet means none were given."""

    value: str = ""

    def __str__(self) -> str:
        return self.value


@dataclass(frozen=True, slots=True)
class Appointment:
    """A scheduled appointment (vet visit, grooming, ...) for a pet."""

    CONSTRAINTS = "Appointments need a date and time and a location that is not blank"

    when: datetime
    location: str

    def __post_init__(self) -> None:
        if not isinstance(self.when, datetime):
            raise InvalidFieldError("appointment", self.when, self.CONSTRAINTS)
        if not self.location or self.location.isspace():
            raise InvalidFieldError("appointment", self.location, self.CONSTRAINTS)

    def __str__(self) -> str:
        return f"{self.when.strftime(APPOINTMENT_FORMAT)} at {self.location}"


# --- Billing ---


@dataclass(frozen=True, slots=True)
class Charge:
    """A per-day rate used for one charge computation.

    `amount` is None when no rate was supplied; billing refuses to run on an
    unset charge rather than treating it as zero.
    """

    CONSTRAINTS = "Charges should be a non-negative amount, e.g. 200 or 12.50"

    amount: Decimal | None = None

    def __post_init__(self) -> None:
        if self.amount is None:
            return
        try:
            amount = Decimal(str(self.amount))
        except InvalidOperation as e:
            raise InvalidFieldError("charge", self.amount, self.CONSTRAINTS) from e
        if not amount.is_finite() or amount < 0:
            raise InvalidFieldError("charge", self.amount, self.CONSTRAINTS)
        object.__setattr__(self, "amount", amount)

    @property
    def is_set(self) -> bool:
        """Whether a rate was supplied."""
        return self.amount is not None


@dataclass(frozen=True, slots=True, order=True)
class BillingMonth:
    """A calendar month of a given year, written as MM-YYYY."""

    CONSTRAINTS = "Charge date should be formatted as MM-yyyy!"

    year: int
    month: int

    def __post_init__(self) -> None:
        if not 1 <= self.month <= 12 or not 1 <= self.year <= 9999:
            raise InvalidFieldError(
                "month", f"{self.month:02d}-{self.year}", self.CONSTRAINTS
            )

    @classmethod
    def parse(cls, text: str) -> BillingMonth:
        """Parse a month written as MM-YYYY (e.g. "03-2022")."""
        if not (match := _MONTH_RE.fullmatch(text.strip())):
            raise InvalidFieldError("month", text, cls.CONSTRAINTS)
        return cls(year=int(match.group(2)), month=int(match.group(1)))

    @property
    def first_day(self) -> date:
        """The 1st of the month."""
        return date(self.year, self.month, 1)

    @property
    def day_count(self) -> int:
        """Number of days in the month."""
        return calendar.monthrange(self.year, self.month)[1]

    @property
    def last_day(self) -> date:
        """The last day of the month."""
        return date(self.year, self.month, self.day_count)

    @property
    def name(self) -> str:
        """Month name in the default locale, e.g. "March"."""
        return calendar.month_name[self.month]

    def days(self) -> Iterator[date]:
        """Yield every day of the month in ascending order."""
        day = self.first_day
        for _ in range(self.day_count):
            yield day
            day += timedelta(days=1)

    def __str__(self) -> str:
        return f"{self.month:02d}-{self.year:04d}"
