"""Module defining Commands.

Each command is a frozen dataclass carrying the already-parsed arguments of
one user intent, so two commands built from the same arguments compare equal.
Commands only check that their required arguments are present; everything
that depends on the model (index ranges, duplicates, charge rates) is checked
by the handler when the command is executed.
"""

from __future__ import annotations

from dataclasses import dataclass, field, fields
from datetime import date, time
from typing import TYPE_CHECKING

from woofareyou.domain import Appointment, BillingMonth, Charge, Diet, Pet

from .errors import InvalidCommandError
from .predicates import PetMatchesKeywords
from .unsettable import UNSET, Unsettable, is_unset, resolve

if TYPE_CHECKING:
    from woofareyou.domain import Address, Name, OwnerName, Phone, Tag

# pylint: disable=too-many-instance-attributes


@dataclass(frozen=True, slots=True, order=True)
class Index:
    """A 1-based position in the displayed pet list."""

    one_based: int

    def __post_init__(self) -> None:
        if isinstance(self.one_based, bool) or not isinstance(self.one_based, int):
            raise TypeError(f"Index must be an int, got {self.one_based!r}")
        if self.one_based < 1:
            raise ValueError(f"Index must be a positive integer, got {self.one_based}")

    @classmethod
    def from_zero_based(cls, zero_based: int) -> Index:
        """Build an Index from a 0-based list offset."""
        return cls(zero_based + 1)

    @property
    def zero_based(self) -> int:
        """The 0-based list offset."""
        return self.one_based - 1

    def __str__(self) -> str:
        return str(self.one_based)


@dataclass(frozen=True)
class Command:
    """Base class for all commands.

    Subclasses list their mandatory arguments in REQUIRED; building a command
    with any of them missing fails immediately.
    """

    REQUIRED = ()

    def __post_init__(self) -> None:
        for name in self.REQUIRED:
            if getattr(self, name) is None:
                raise InvalidCommandError(type(self).__name__, name)


# ============================================================================
#                           Pet book commands
# ============================================================================


@dataclass(frozen=True)
class AddPet(Command):
    """Command to add a pet to the pet book."""

    REQUIRED = ("pet",)

    pet: Pet


@dataclass(frozen=True)
class EditPetDescriptor:
    """The fields an edit replaces; every field left UNSET keeps its current value.

    `tags`, when given, replaces the whole tag set (an empty set removes all tags).
    """

    name: Unsettable[Name] = UNSET
    phone: Unsettable[Phone] = UNSET
    owner_name: Unsettable[OwnerName] = UNSET
    address: Unsettable[Address] = UNSET
    tags: Unsettable[frozenset[Tag]] = UNSET

    def __post_init__(self) -> None:
        if not is_unset(self.tags) and self.tags is not None:
            object.__setattr__(self, "tags", frozenset(self.tags))

    def is_any_field_edited(self) -> bool:
        """Whether at least one field is set."""
        return any(not is_unset(getattr(self, f.name)) for f in fields(self))

    def apply_to(self, pet: Pet) -> Pet:
        """Build the replacement for `pet`; fields not named here are kept as is."""

        def _resolve(name: str, current):
            return resolve(
                getattr(self, name),
                current,
                clearable=False,
                field=name,
                command="EditPet",
            )

        return pet.replace(
            name=_resolve("name", pet.name),
            phone=_resolve("phone", pet.phone),
            owner_name=_resolve("owner_name", pet.owner_name),
            address=_resolve("address", pet.address),
            tags=_resolve("tags", pet.tags),
        )


@dataclass(frozen=True)
class EditPet(Command):
    """Command to replace fields of the pet at `index` in the displayed list."""

    REQUIRED = ("index", "descriptor")

    index: Index
    descriptor: EditPetDescriptor


@dataclass(frozen=True)
class DeletePet(Command):
    """Command to delete the pet at `index` in the displayed list."""

    REQUIRED = ("index",)

    index: Index


@dataclass(frozen=True)
class ClearPets(Command):
    """Command to remove every pet from the pet book."""


@dataclass(frozen=True)
class Undo(Command):
    """Command to revert the most recent change to the pet book."""


# ============================================================================
#                           View commands
# ============================================================================


@dataclass(frozen=True)
class FindPets(Command):
    """Command to show only the pets matching `predicate`."""

    REQUIRED = ("predicate",)

    predicate: PetMatchesKeywords


@dataclass(frozen=True)
class ListPets(Command):
    """Command to show every pet."""


@dataclass(frozen=True)
class SortPets(Command):
    """Command to order the displayed list by `field`."""

    REQUIRED = ("field",)

    field: str


# ============================================================================
#                           Per-pet commands
# ============================================================================


@dataclass(frozen=True)
class ChargePet(Command):
    """Command to compute what the pet at `index` owes for `month`.

    `charge` may carry no rate; that is reported when the command runs, not
    when it is built.
    """

    REQUIRED = ("index", "month", "charge")

    index: Index
    month: BillingMonth
    charge: Charge = field(default_factory=Charge)


@dataclass(frozen=True)
class MarkPresent(Command):
    """Command to record that the pet at `index` attended on `day`."""

    REQUIRED = ("index", "day")

    index: Index
    day: date
    drop_off: time | None = None
    pick_up: time | None = None


@dataclass(frozen=True)
class MarkAbsent(Command):
    """Command to record that the pet at `index` was away on `day`."""

    REQUIRED = ("index", "day")

    index: Index
    day: date


@dataclass(frozen=True)
class SetDiet(Command):
    """Command to replace the diet of the pet at `index`. An empty diet removes it."""

    REQUIRED = ("index", "diet")

    index: Index
    diet: Diet


@dataclass(frozen=True)
class SetAppointment(Command):
    """Command to set the appointment of the pet at `index`; None clears it."""

    REQUIRED = ("index",)

    index: Index
    appointment: Appointment | None = None


# ============================================================================
#                           Front-end commands
# ============================================================================


@dataclass(frozen=True)
class ShowHelp(Command):
    """Command asking the front end to show usage information."""


@dataclass(frozen=True)
class ExitApp(Command):
    """Command asking the front end to shut down."""
