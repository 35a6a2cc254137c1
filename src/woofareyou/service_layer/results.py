"""The value returned to the front end by every successful command."""

from dataclasses import dataclass


@dataclass(frozen=True, slots=True)
class CommandResult:
    """Outcome of a successful command.

    Attributes:
        feedback: Message to display to the user.
        show_help: Whether the front end should show help information.
        exit: Whether the front end should shut down.
    """

    feedback: str
    show_help: bool = False
    exit: bool = False
