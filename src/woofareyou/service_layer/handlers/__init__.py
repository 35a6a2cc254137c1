"""Service layer handlers.

Every handler has the signature ``handler(cmd, model) -> CommandResult`` and
raises a `CommandError` when the command cannot be applied to the model.
"""

from collections.abc import Callable

from woofareyou.service_layer.results import CommandResult

from .attendance_handlers import COMMAND_HANDLERS as ATTENDANCE_COMMAND_HANDLERS
from .pet_book_handlers import COMMAND_HANDLERS as PET_BOOK_COMMAND_HANDLERS
from .view_handlers import COMMAND_HANDLERS as VIEW_COMMAND_HANDLERS

__all__ = ["COMMAND_HANDLERS"]

COMMAND_HANDLERS: dict[type, Callable[..., CommandResult]] = {
    **PET_BOOK_COMMAND_HANDLERS,
    **VIEW_COMMAND_HANDLERS,
    **ATTENDANCE_COMMAND_HANDLERS,
}
