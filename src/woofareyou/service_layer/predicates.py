"""Predicates used to filter the displayed pet list.

Predicates are frozen dataclasses so that two find commands built from the
same keywords compare equal.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING, ClassVar

if TYPE_CHECKING:
    from woofareyou.domain import Pet


def contains_word_ignore_case(sentence: str, word: str) -> bool:
    """Whether `sentence` contains `word` as a whole word, ignoring case."""
    target = word.strip().lower()
    return bool(target) and target in sentence.lower().split()


@dataclass(frozen=True, slots=True)
class PetMatchesKeywords:
    """Matches pets whose `field` contains any of `keywords` as a whole word.

    `field` is one of "name", "owner" or "tag".
    """

    FIELDS: ClassVar[tuple[str, ...]] = ("name", "owner", "tag")

    keywords: tuple[str, ...]
    field: str = "name"

    def __post_init__(self) -> None:
        if self.field not in self.FIELDS:
            raise ValueError(
                f"Cannot search pets by {self.field!r}; expected one of {self.FIELDS}"
            )
        object.__setattr__(self, "keywords", tuple(self.keywords))

    def _haystacks(self, pet: Pet) -> list[str]:
        match self.field:
            case "name":
                return [pet.name.full_name]
            case "owner":
                return [pet.owner_name.value]
            case _:
                return [tag.tag_name for tag in pet.tags]

    def __call__(self, pet: Pet) -> bool:
        return any(
            contains_word_ignore_case(haystack, keyword)
            for haystack in self._haystacks(pet)
            for keyword in self.keywords
        )
