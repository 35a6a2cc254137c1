"""The ordered, duplicate-free collection of pets."""

from __future__ import annotations

from collections.abc import Iterable, Iterator

from .errors import DuplicatePetInBookError, PetNotFoundError
from .pet import Pet


class PetBook:
    """Ordered list of pets in which no two pets are the same pet.

    Sameness is decided by `Pet.is_same_pet`, never by full equality. Every
    mutator validates before touching the list, so a failed call leaves the
    book exactly as it was.
    """

    def __init__(self, pets: Iterable[Pet] = ()) -> None:
        self._pets: list[Pet] = []
        self.set_pets(pets)

    # --- Queries ---

    def contains(self, pet: Pet) -> bool:
        """Whether the book holds a pet that is the same pet as `pet`."""
        return any(existing.is_same_pet(pet) for existing in self._pets)

    @property
    def pets(self) -> tuple[Pet, ...]:
        """The pets in book order."""
        return tuple(self._pets)

    # --- Mutators ---

    def add(self, pet: Pet) -> None:
        """Append `pet`.

        Raises:
            DuplicatePetInBookError: If the same pet is already in the book.
        """
        if self.contains(pet):
            raise DuplicatePetInBookError(str(pet.name), str(pet.owner_name))
        self._pets.append(pet)

    def set_pet(self, target: Pet, edited: Pet) -> None:
        """Replace `target` with `edited`, keeping its position.

        Raises:
            PetNotFoundError: If `target` is not in the book.
            DuplicatePetInBookError: If `edited` is the same pet as another entry.
        """
        position = self._position_of(target)
        if any(
            i != position and existing.is_same_pet(edited)
            for i, existing in enumerate(self._pets)
        ):
            raise DuplicatePetInBookError(str(edited.name), str(edited.owner_name))
        self._pets[position] = edited

    def remove(self, target: Pet) -> None:
        """Remove `target`.

        Raises:
            PetNotFoundError: If `target` is not in the book.
        """
        del self._pets[self._position_of(target)]

    def set_pets(self, pets: Iterable[Pet]) -> None:
        """Replace the whole content of the book.

        Raises:
            DuplicatePetInBookError: If `pets` holds the same pet twice.
        """
        replacement: list[Pet] = []
        for pet in pets:
            if any(existing.is_same_pet(pet) for existing in replacement):
                raise DuplicatePetInBookError(str(pet.name), str(pet.owner_name))
            replacement.append(pet)
        self._pets = replacement

    # --- Plumbing ---

    def _position_of(self, target: Pet) -> int:
        for i, existing in enumerate(self._pets):
            if existing == target:
                return i
        raise PetNotFoundError(str(target.name))

    def __iter__(self) -> Iterator[Pet]:
        return iter(tuple(self._pets))

    def __len__(self) -> int:
        return len(self._pets)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, PetBook):
            return NotImplemented
        return self._pets == other._pets

    def __repr__(self) -> str:
        return f"PetBook({self._pets!r})"
