"""Model interface for WoofAreYou.

Defines the AbstractModel contract: the single source of truth for pets and
view state that every command handler is given.
"""

from __future__ import annotations

import abc
from collections.abc import Callable, Iterable
from pathlib import Path
from typing import TYPE_CHECKING, ClassVar, TypeAlias

if TYPE_CHECKING:
    from woofareyou.config import GuiSettings, UserPrefs
    from woofareyou.domain import Pet, PetBook

PetPredicate: TypeAlias = Callable[["Pet"], bool]


class UndoHistoryEmptyError(LookupError):
    """Raised when an undo is requested but no earlier pet list was recorded."""

    def __init__(self) -> None:
        super().__init__("Undo history is empty")


def show_all_pets(pet: Pet) -> bool:  # pylint: disable=unused-argument
    """Predicate of the unfiltered view."""
    return True


class AbstractModel(abc.ABC):
    """Contract for the mutable, process-lifetime store of pets.

    Invariants implementations must keep:
      - Every mutation of the pet list records the pre-mutation list in the
        undo history, and only once the mutation is known to succeed. A failed
        mutation leaves both the list and the history unchanged.
      - The filtered view is a projection of the current pet list, never a
        stale copy.
    """

    SORT_FIELDS: ClassVar[tuple[str, ...]] = (
        "name",
        "owner",
        "phone",
        "address",
        "appointment",
    )

    # --- User preferences ---

    @abc.abstractmethod
    def get_user_prefs(self) -> UserPrefs:
        """Return the current user preferences."""

    @abc.abstractmethod
    def set_user_prefs(self, user_prefs: UserPrefs) -> None:
        """Replace the user preferences."""

    @abc.abstractmethod
    def get_gui_settings(self) -> GuiSettings:
        """Return the saved window geometry."""

    @abc.abstractmethod
    def set_gui_settings(self, gui_settings: GuiSettings) -> None:
        """Replace the saved window geometry."""

    @abc.abstractmethod
    def get_pet_book_file_path(self) -> Path:
        """Return where the pet book is persisted."""

    @abc.abstractmethod
    def set_pet_book_file_path(self, path: Path) -> None:
        """Change where the pet book is persisted."""

    # --- Pet book ---

    @abc.abstractmethod
    def get_pet_book(self) -> PetBook:
        """Return a copy of the authoritative pet book."""

    @abc.abstractmethod
    def set_pet_book(self, pets: Iterable[Pet]) -> None:
        """Replace the whole pet book (import, clear). Undoable."""

    @abc.abstractmethod
    def has_pet(self, pet: Pet) -> bool:
        """Whether a pet that is the same pet as `pet` is in the book."""

    @abc.abstractmethod
    def add_pet(self, pet: Pet) -> None:
        """Append `pet`; the caller guarantees it is not a duplicate. Undoable."""

    @abc.abstractmethod
    def delete_pet(self, target: Pet) -> None:
        """Remove `target`, which must be in the book. Undoable."""

    @abc.abstractmethod
    def set_pet(self, target: Pet, edited: Pet) -> None:
        """Replace `target` with `edited` in place. Undoable."""

    # --- Filtered view ---

    @abc.abstractmethod
    def get_filtered_pet_list(self) -> tuple[Pet, ...]:
        """Return the pets currently on display, filtered and sorted."""

    @abc.abstractmethod
    def update_filtered_pet_list(self, predicate: PetPredicate | None = None) -> None:
        """Filter the view by `predicate`; None shows every pet."""

    @abc.abstractmethod
    def get_last_used_predicate(self) -> PetPredicate:
        """Return the predicate the view is currently filtered by."""

    @abc.abstractmethod
    def sort_pet_list(self, field: str) -> None:
        """Order the view by one of SORT_FIELDS.

        Raises:
            ValueError: If `field` is not one of SORT_FIELDS.
        """

    @abc.abstractmethod
    def get_sort_field(self) -> str | None:
        """Return the field the view is ordered by, or None for book order."""

    # --- Undo history ---

    @abc.abstractmethod
    def has_undo_history(self) -> bool:
        """Whether there is a previous pet list to go back to."""

    @abc.abstractmethod
    def undo(self) -> PetBook:
        """Restore the pet list recorded before the last mutation.

        Returns:
            The restored pet book.

        Raises:
            UndoHistoryEmptyError: If the undo history is empty.
        """
