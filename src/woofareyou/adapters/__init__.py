"""Adapters for WoofAreYou.

Provide concrete implementations of the application contracts (the in-memory
model) plus the mapping of pets to and from their persisted record shape.

Dependency rule: may import `woofareyou.domain` and `woofareyou.interfaces`;
the domain must not import this package.
"""

from .serialization import (
    RecordFormatError,
    book_from_records,
    book_to_records,
    pet_from_record,
    pet_to_record,
)

__all__ = [
    "RecordFormatError",
    "book_from_records",
    "book_to_records",
    "pet_from_record",
    "pet_to_record",
]
