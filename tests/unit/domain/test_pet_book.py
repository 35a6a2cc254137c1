"""Unit tests for PetBook."""

import pytest

from woofareyou.domain import Phone, PetBook
from woofareyou.domain.errors import DuplicatePetInBookError, PetNotFoundError

# pylint: disable=magic-value-comparison


def test_add_appends_in_order(rex, bella, coco):
    """Pets keep their insertion order."""
    book = PetBook()
    for pet in (rex, bella, coco):
        book.add(pet)
    assert book.pets == (rex, bella, coco)
    assert len(book) == 3


def test_add_rejects_same_pet(rex, make_pet):
    """A pet with the same name and owner cannot be added twice."""
    book = PetBook([rex])
    with pytest.raises(DuplicatePetInBookError) as exc:
        book.add(make_pet(tags=["Husky"], diet="No chicken"))
    assert exc.value.pet_name == "Rex"
    assert exc.value.owner_name == "John Doe"
    assert book.pets == (rex,)


def test_contains_uses_identity_not_equality(rex):
    """contains() is true for any record of the same pet."""
    book = PetBook([rex])
    assert book.contains(rex.replace(phone=Phone("123")))


def test_set_pet_keeps_position(rex, bella, coco):
    """Replacing a pet keeps it in place."""
    book = PetBook([rex, bella, coco])
    edited = bella.replace(phone=Phone("123"))
    book.set_pet(bella, edited)
    assert book.pets == (rex, edited, coco)


def test_set_pet_may_keep_identity(rex):
    """A pet can be replaced by another record of itself."""
    book = PetBook([rex])
    book.set_pet(rex, rex.replace(phone=Phone("123")))
    assert book.pets[0].phone == Phone("123")


def test_set_pet_rejects_collision_with_other_pet(rex, bella):
    """An edit cannot turn a pet into another pet already in the book."""
    book = PetBook([rex, bella])
    with pytest.raises(DuplicatePetInBookError):
        book.set_pet(bella, rex.replace(phone=Phone("123")))
    assert book.pets == (rex, bella)


def test_set_pet_unknown_target(rex, bella):
    """Replacing a pet that is not in the book fails."""
    book = PetBook([rex])
    with pytest.raises(PetNotFoundError, match="Bella"):
        book.set_pet(bella, bella)


def test_remove(rex, bella):
    """Removing a pet drops exactly that pet."""
    book = PetBook([rex, bella])
    book.remove(rex)
    assert book.pets == (bella,)
    with pytest.raises(PetNotFoundError):
        book.remove(rex)


def test_remove_requires_full_equality(rex):
    """A different record of the same pet is not the stored pet."""
    book = PetBook([rex])
    with pytest.raises(PetNotFoundError):
        book.remove(rex.replace(phone=Phone("123")))


def test_set_pets_rejects_duplicates_atomically(rex, bella, make_pet):
    """Replacing the whole book with a duplicate-holding list changes nothing."""
    book = PetBook([bella])
    with pytest.raises(DuplicatePetInBookError):
        book.set_pets([rex, make_pet(phone="123")])
    assert book.pets == (bella,)


def test_books_compare_by_content(rex, bella):
    """Two books with the same pets in the same order are equal."""
    assert PetBook([rex, bella]) == PetBook([rex, bella])
    assert PetBook([rex, bella]) != PetBook([bella, rex])


def test_iteration_is_a_snapshot(rex, bella):
    """Changing the book while iterating does not disturb the iteration."""
    book = PetBook([rex, bella])
    seen = []
    for pet in book:
        seen.append(pet)
        book.remove(pet)
    assert seen == [rex, bella]
    assert len(book) == 0
