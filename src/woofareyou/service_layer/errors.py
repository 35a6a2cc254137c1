"""Errors raised while building or executing commands."""

from . import messages

# ============================================================================
#                           Construction errors
# ============================================================================


class InvalidCommandError(ValueError):
    """Raised when a command is built without one of its required arguments."""

    def __init__(self, command: str, argument: str) -> None:
        super().__init__(f"{command} requires a value for '{argument}'")
        self.command = command
        self.argument = argument


# ============================================================================
#                           Execution errors
# ============================================================================


class CommandError(Exception):
    """Base class for failures of a command against the current model.

    The message is meant to be shown to the user verbatim. A handler raising a
    CommandError has not changed the model.
    """

    def __init__(self, message: str) -> None:
        super().__init__(message)
        self.message = message


class InvalidPetIndexError(CommandError):
    """Raised when an index does not resolve within the displayed pet list."""

    def __init__(self, index: int, list_size: int) -> None:
        super().__init__(messages.INVALID_PET_DISPLAYED_INDEX)
        self.index = index
        self.list_size = list_size


class DuplicatePetError(CommandError):
    """Raised when an add or edit would store the same pet twice."""

    def __init__(self) -> None:
        super().__init__(messages.DUPLICATE_PET)


class NoFieldsEditedError(CommandError):
    """Raised when an edit names no field to change."""

    def __init__(self) -> None:
        super().__init__(messages.NOT_EDITED)


class NothingToUndoError(CommandError):
    """Raised when undo is requested with an empty history."""

    def __init__(self) -> None:
        super().__init__(messages.NOTHING_TO_UNDO)


class NoChargeSetError(CommandError):
    """Raised when a charge is computed without a rate."""

    def __init__(self) -> None:
        super().__init__(messages.NO_CHARGE_SET.format(usage=messages.CHARGE_USAGE))


class UnknownSortFieldError(CommandError):
    """Raised when the view is sorted by a field that does not exist."""

    def __init__(self, field: str, known_fields: tuple[str, ...]) -> None:
        super().__init__(
            messages.UNKNOWN_SORT_FIELD.format(
                field=field,
                usage=messages.SORT_USAGE.format(fields=", ".join(known_fields)),
            )
        )
        self.field = field
