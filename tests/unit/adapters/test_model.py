"""Unit tests for the in-memory model."""

from datetime import datetime
from pathlib import Path

import pytest

from woofareyou.adapters.model import InMemoryModel
from woofareyou.config import GuiSettings, UserPrefs
from woofareyou.domain import Appointment, Phone, PetBook
from woofareyou.domain.errors import DuplicatePetInBookError, PetNotFoundError
from woofareyou.interfaces.model import UndoHistoryEmptyError, show_all_pets

# pylint: disable=magic-value-comparison,redefined-outer-name


@pytest.fixture
def model(rex, bella, coco) -> InMemoryModel:
    """A model holding Rex, Bella and Coco, with an empty undo history."""
    prefs = UserPrefs(pet_book_file_path=Path("book.json"))
    return InMemoryModel([rex, bella, coco], user_prefs=prefs)


class TestPetBook:
    """Pet list mutations and queries."""

    @staticmethod
    def test_initial_pets(model, rex, bella, coco):
        """The model starts with the pets it was given, in order."""
        assert model.get_pet_book() == PetBook([rex, bella, coco])
        assert model.has_pet(rex)
        assert not model.has_undo_history()

    @staticmethod
    def test_get_pet_book_is_a_copy(model, rex):
        """Changing the returned book does not change the model."""
        book = model.get_pet_book()
        book.remove(rex)
        assert model.has_pet(rex)

    @staticmethod
    def test_duplicate_initial_pets_rejected(rex):
        """A model cannot be built from a list holding the same pet twice."""
        with pytest.raises(DuplicatePetInBookError):
            InMemoryModel([rex, rex.replace(phone=Phone("123"))])

    @staticmethod
    def test_add_pet_resets_the_filter(model, make_pet, rex):
        """A freshly added pet is always visible."""
        model.update_filtered_pet_list(lambda pet: pet == rex)
        new_pet = make_pet(name="Max")

        model.add_pet(new_pet)

        assert model.get_last_used_predicate() is show_all_pets
        assert model.get_filtered_pet_list()[-1] == new_pet

    @staticmethod
    def test_delete_and_set_pet(model, rex, bella):
        """delete_pet and set_pet change the pet list in place."""
        edited = bella.replace(phone=Phone("123"))
        model.set_pet(bella, edited)
        model.delete_pet(rex)
        assert model.get_pet_book().pets[0] == edited

    @staticmethod
    def test_failed_mutation_leaves_history_unchanged(model, rex, bella, make_pet):
        """A mutation that raises records nothing."""
        with pytest.raises(DuplicatePetInBookError):
            model.add_pet(make_pet(phone="123"))
        with pytest.raises(PetNotFoundError):
            model.delete_pet(make_pet(name="Nobody"))
        with pytest.raises(DuplicatePetInBookError):
            model.set_pet(bella, rex)

        assert not model.has_undo_history()
        assert model.get_pet_book().pets[:2] == (rex, bella)


class TestFilteredView:
    """The live, filtered and sorted view."""

    @staticmethod
    def test_view_tracks_underlying_list(model, rex, bella):
        """The view reflects mutations without being refreshed."""
        model.update_filtered_pet_list(lambda pet: pet.name.full_name.startswith("B"))
        assert model.get_filtered_pet_list() == (bella,)

        model.delete_pet(bella)
        assert model.get_filtered_pet_list() == ()

        model.undo()
        assert model.get_filtered_pet_list() == (bella,)
        assert rex not in model.get_filtered_pet_list()

    @staticmethod
    def test_none_predicate_shows_all(model):
        """Updating with no predicate shows every pet."""
        model.update_filtered_pet_list(lambda pet: False)
        model.update_filtered_pet_list()
        assert len(model.get_filtered_pet_list()) == 3

    @staticmethod
    @pytest.mark.parametrize(
        "field, expected",
        [
            ("name", ["Bella", "Coco", "Rex"]),
            ("owner", ["Coco", "Rex", "Bella"]),
            ("phone", ["Coco", "Bella", "Rex"]),
        ],
    )
    def test_sort(model, field, expected):
        """Sorting orders the view by the chosen field."""
        model.sort_pet_list(field)
        assert [pet.name.full_name for pet in model.get_filtered_pet_list()] == expected
        assert model.get_sort_field() == field

    @staticmethod
    def test_sort_by_appointment_puts_unscheduled_last(model, rex, bella, coco):
        """Pets without an appointment come after those with one."""
        early = bella.replace(appointment=Appointment(datetime(2022, 1, 1, 9, 0), "Vet"))
        model.set_pet(bella, early)
        model.sort_pet_list("appointment")
        assert model.get_filtered_pet_list() == (early, coco, rex)

    @staticmethod
    def test_sort_does_not_change_book_order_or_history(model, rex, bella, coco):
        """Sorting only affects the view."""
        model.sort_pet_list("name")
        assert model.get_pet_book().pets == (rex, bella, coco)
        assert not model.has_undo_history()

    @staticmethod
    def test_sort_unknown_field(model):
        """An unknown field is rejected."""
        with pytest.raises(ValueError, match="Unknown sort field"):
            model.sort_pet_list("colour")


class TestUndo:
    """The snapshot-based undo history."""

    @staticmethod
    def test_undo_on_empty_history(model):
        """Undo with nothing recorded raises."""
        with pytest.raises(UndoHistoryEmptyError):
            model.undo()

    @staticmethod
    def test_undo_is_lifo(model, rex, bella, coco, make_pet):
        """Each undo restores the list as it was before the latest change."""
        max_ = make_pet(name="Max")
        model.add_pet(max_)
        model.delete_pet(rex)
        model.set_pet_book(())

        assert model.undo() == PetBook([bella, coco, max_])
        assert model.undo() == PetBook([rex, bella, coco, max_])
        assert model.undo() == PetBook([rex, bella, coco])
        assert not model.has_undo_history()

    @staticmethod
    def test_undo_restores_previous_pet_records(model, bella):
        """Undo brings back the earlier record, not the edited one."""
        model.set_pet(bella, bella.replace(phone=Phone("123")))
        model.undo()
        assert model.get_pet_book().pets[1] == bella

    @staticmethod
    def test_undo_does_not_touch_the_view_state(model, bella):
        """Undo leaves the predicate and sort field alone."""

        def only_bella(pet):
            return pet.is_same_pet(bella)

        model.update_filtered_pet_list(only_bella)
        model.sort_pet_list("owner")
        model.delete_pet(bella)
        model.undo()

        assert model.get_last_used_predicate() is only_bella
        assert model.get_sort_field() == "owner"


class TestUserPrefs:
    """User preference accessors."""

    @staticmethod
    def test_gui_settings_roundtrip(model):
        """Setting window geometry keeps the pet book path."""
        model.set_gui_settings(GuiSettings(800, 600, 10, 20))
        assert model.get_gui_settings() == GuiSettings(800, 600, 10, 20)
        assert model.get_pet_book_file_path() == Path("book.json")

    @staticmethod
    def test_pet_book_path(model):
        """Setting the pet book path keeps the window geometry."""
        model.set_pet_book_file_path(Path("other.json"))
        assert model.get_pet_book_file_path() == Path("other.json")
        assert model.get_gui_settings() == GuiSettings()
        assert model.get_user_prefs().pet_book_file_path == Path("other.json")


def test_models_compare_by_state(rex, bella):
    """Two models with the same pets, prefs and view are equal."""
    prefs = UserPrefs(pet_book_file_path=Path("book.json"))
    a = InMemoryModel([rex, bella], user_prefs=prefs)
    b = InMemoryModel([rex, bella], user_prefs=prefs)
    assert a == b

    b.update_filtered_pet_list(lambda pet: pet == rex)
    assert a != b
