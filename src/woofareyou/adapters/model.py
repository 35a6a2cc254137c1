"""In-memory Model for WoofAreYou.

Holds the authoritative pet book, the view state and an unbounded undo stack
of whole pet-list snapshots. Pets are immutable, so a snapshot is simply the
tuple of pets the book held before a mutation.
"""

from __future__ import annotations

import logging
from collections.abc import Callable, Iterable
from datetime import datetime
from pathlib import Path
from typing import Any

from woofareyou.config import GuiSettings, UserPrefs, default_user_prefs
from woofareyou.domain import Pet, PetBook
from woofareyou.interfaces.model import (
    AbstractModel,
    PetPredicate,
    UndoHistoryEmptyError,
    show_all_pets,
)

logger = logging.getLogger(__name__)


def _appointment_key(pet: Pet) -> tuple[bool, datetime]:
    # pets without an appointment go last
    if pet.appointment is None:
        return (True, datetime.min)
    return (False, pet.appointment.when)


SORT_KEYS: dict[str, Callable[[Pet], Any]] = {
    "name": lambda pet: pet.name.full_name.lower(),
    "owner": lambda pet: pet.owner_name.value.lower(),
    "phone": lambda pet: pet.phone.value,
    "address": lambda pet: pet.address.value.lower(),
    "appointment": _appointment_key,
}


class InMemoryModel(AbstractModel):
    """Process-lifetime model kept entirely in memory.

    Args:
        pet_book: Initial pets, typically loaded by the persistence collaborator.
        user_prefs: Initial preferences; defaults are used when omitted.

    Note:
        This is NOT thread-safe. Commands are expected to run one at a time.
    """

    def __init__(
        self,
        pet_book: Iterable[Pet] = (),
        user_prefs: UserPrefs | None = None,
    ) -> None:
        self._book = PetBook(pet_book)
        self._user_prefs = user_prefs if user_prefs is not None else default_user_prefs()
        self._predicate: PetPredicate = show_all_pets
        self._sort_field: str | None = None
        self._history: list[tuple[Pet, ...]] = []
        logger.debug("Initializing model with %d pets", len(self._book))

    # --- User preferences ---

    def get_user_prefs(self) -> UserPrefs:
        return self._user_prefs

    def set_user_prefs(self, user_prefs: UserPrefs) -> None:
        self._user_prefs = user_prefs

    def get_gui_settings(self) -> GuiSettings:
        return self._user_prefs.gui_settings

    def set_gui_settings(self, gui_settings: GuiSettings) -> None:
        self._user_prefs = UserPrefs(
            gui_settings=gui_settings,
            pet_book_file_path=self._user_prefs.pet_book_file_path,
        )

    def get_pet_book_file_path(self) -> Path:
        return self._user_prefs.pet_book_file_path

    def set_pet_book_file_path(self, path: Path) -> None:
        self._user_prefs = UserPrefs(
            gui_settings=self._user_prefs.gui_settings,
            pet_book_file_path=path,
        )

    # --- Pet book ---

    def get_pet_book(self) -> PetBook:
        return PetBook(self._book.pets)

    def set_pet_book(self, pets: Iterable[Pet]) -> None:
        snapshot = self._book.pets
        self._book.set_pets(pets)
        self._record(snapshot, "set_pet_book")

    def has_pet(self, pet: Pet) -> bool:
        return self._book.contains(pet)

    def add_pet(self, pet: Pet) -> None:
        snapshot = self._book.pets
        self._book.add(pet)
        self._record(snapshot, "add_pet")
        self.update_filtered_pet_list()

    def delete_pet(self, target: Pet) -> None:
        snapshot = self._book.pets
        self._book.remove(target)
        self._record(snapshot, "delete_pet")

    def set_pet(self, target: Pet, edited: Pet) -> None:
        snapshot = self._book.pets
        self._book.set_pet(target, edited)
        self._record(snapshot, "set_pet")

    # --- Filtered view ---

    def get_filtered_pet_list(self) -> tuple[Pet, ...]:
        pets = [pet for pet in self._book if self._predicate(pet)]
        if self._sort_field is not None:
            pets.sort(key=SORT_KEYS[self._sort_field])
        return tuple(pets)

    def update_filtered_pet_list(self, predicate: PetPredicate | None = None) -> None:
        self._predicate = predicate if predicate is not None else show_all_pets

    def get_last_used_predicate(self) -> PetPredicate:
        return self._predicate

    def sort_pet_list(self, field: str) -> None:
        if field not in SORT_KEYS:
            raise ValueError(f"Unknown sort field: {field!r}")
        self._sort_field = field

    def get_sort_field(self) -> str | None:
        return self._sort_field

    # --- Undo history ---

    def has_undo_history(self) -> bool:
        return bool(self._history)

    def undo(self) -> PetBook:
        if not self._history:
            raise UndoHistoryEmptyError
        snapshot = self._history.pop()
        self._book.set_pets(snapshot)
        logger.info(
            "Restored previous pet list (%d pets); %d snapshots left",
            len(snapshot),
            len(self._history),
        )
        return self.get_pet_book()

    # --- Plumbing ---

    def _record(self, snapshot: tuple[Pet, ...], operation: str) -> None:
        self._history.append(snapshot)
        logger.debug(
            "%s: pet book now holds %d pets; undo depth %d",
            operation,
            len(self._book),
            len(self._history),
        )

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, InMemoryModel):
            return NotImplemented
        return (
            self._book == other._book
            and self._user_prefs == other._user_prefs
            and self.get_filtered_pet_list() == other.get_filtered_pet_list()
        )

    __hash__ = None  # type: ignore[assignment]
