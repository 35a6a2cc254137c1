"""Tri-state handling for edit fields.

This module defines the ``UNSET`` sentinel, the `Unsettable` type alias,
and the `resolve` helper for applying partial edits to a pet.

A field of type ``Unsettable[T]`` can take three states:

* ``UNSET``: the field is intentionally left unchanged by the edit.
* ``None``: the field is explicitly cleared (only if allowed).
* concrete ``T``: the field is explicitly updated to a new value.
"""

from dataclasses import dataclass
from typing import TypeAlias, TypeVar

from .errors import InvalidCommandError


def _get_unset() -> "_UnsetType":
    # Factory used by pickle to retrieve the one true instance.
    return UNSET


@dataclass(frozen=True)
class _UnsetType:
    """Sentinel to mark fields intentionally left untouched by an edit.

    This is distinct from `None`, which indicates an explicit clearing of a value.
    """

    def __bool__(self) -> bool:  # falsy to simplify conditionals
        return False

    def __repr__(self) -> str:
        return "UNSET"

    def __reduce__(self):  # keep singleton on pickle
        return (_get_unset, ())


# Singleton instance
UNSET = _UnsetType()

T = TypeVar("T")
Unsettable: TypeAlias = T | _UnsetType | None


def is_unset(value: object) -> bool:
    """Whether `value` is the UNSET sentinel."""
    return isinstance(value, _UnsetType)


def resolve(
    value: T | None | _UnsetType,
    current: T,
    *,
    clearable: bool,
    field: str,
    command: str,
) -> T | None:
    """Resolve a tri-state value against the current value.

    Args:
        value: The new value from the edit (may be UNSET, None, or a concrete value).
        current: The pet's current value.
        clearable: Whether this field is allowed to be cleared (set to None).
        field: The name of the field (for error messages).
        command: The name of the command doing the edit (for error messages).

    Returns:
        The concrete value when one is given, the current value when UNSET,
        and None when clearing is allowed.

    Raises:
        InvalidCommandError: If attempting to clear a non-clearable field.
    """
    if isinstance(value, _UnsetType):
        return current
    if value is None and not clearable:
        raise InvalidCommandError(command, field)
    return value  # may be None only when clearable=True
