"""Sample pets used to populate an empty pet book on first start."""

from .pet import Pet
from .value_objects import Address, Diet, Name, OwnerName, Phone, Tag


def get_tag_set(*names: str) -> frozenset[Tag]:
    """Build a tag set from tag names."""
    return frozenset(Tag(name) for name in names)


def get_sample_pets() -> tuple[Pet, ...]:
    """Return a small, fixed set of pets."""
    return (
        Pet(
            Name("Bagel"),
            Phone("87438807"),
            OwnerName("Alex Yeoh"),
            Address("Blk 30 Geylang Street 29, #06-40"),
            get_tag_set("Beagle"),
        ),
        Pet(
            Name("Bernice"),
            Phone("99272758"),
            OwnerName("Bernice Yu"),
            Address("Blk 30 Lorong 3 Serangoon Gardens, #07-18"),
            get_tag_set("Poodle", "Friendly"),
            Diet("No chicken"),
        ),
        Pet(
            Name("Charlie"),
            Phone("93210283"),
            OwnerName("Charlotte Oliveiro"),
            Address("Blk 11 Ang Mo Kio Street 74, #11-04"),
            get_tag_set("Husky"),
        ),
        Pet(
            Name("Dobby"),
            Phone("91031282"),
            OwnerName("David Li"),
            Address("Blk 436 Serangoon Gardens Street 26, #16-43"),
            get_tag_set("Terrier"),
        ),
        Pet(
            Name("Ivy"),
            Phone("92492021"),
            OwnerName("Irfan Ibrahim"),
            Address("Blk 47 Tampines Street 20, #17-35"),
            get_tag_set("Shiba"),
        ),
    )
