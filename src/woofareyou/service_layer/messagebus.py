"""Message bus implementation for handling commands."""

import logging
from collections.abc import Callable

from woofareyou.interfaces.model import AbstractModel

from .commands import Command
from .errors import CommandError
from .results import CommandResult

logger = logging.getLogger(__name__)

# pylint: disable=too-few-public-methods


class NoHandlerForCommand(LookupError):
    """Exception raised when no handler is found for a command."""

    def __init__(self, cmd: Command) -> None:
        super().__init__(f"No handler found for command {type(cmd).__name__}")


class MessageBus:
    """A simple message bus for handling commands.

    The main responsibility of the message bus is to route commands to their
    appropriate handlers by command type and hand the handler's result back to
    the caller. It also manages logging and error handling during the dispatch
    process. Additionally, it provides access to the model the handlers work
    against for convenience.

    Args:
        model: The model the command handlers operate on. It should still have
            been injected into the command handlers, it is just also available
            here for convenience.
        command_handlers: A mapping of command types to their handlers.
            Note that handlers should be callables that accept a single command argument.
            Additional dependencies (i.e. model) should be injected via closures or other means.

    Note:
        Dispatch is synchronous: a command runs to completion before `handle`
        returns, and commands must not be handled concurrently.
    """

    def __init__(
        self,
        model: AbstractModel,
        command_handlers: dict[type[Command], Callable[..., CommandResult]],
    ) -> None:
        self.model = model
        self._command_handlers = command_handlers

    def handle(self, cmd: Command) -> CommandResult:
        """Handle a command by dispatching it to the appropriate handler.

        Args:
            cmd: The command to handle.

        Returns:
            The handler's result.

        Raises:
            NoHandlerForCommand: If no handler is found for the command type.
            CommandError: If the command cannot be applied to the model.
            Exception: If the handler raises an exception.
        """

        if handler := self._command_handlers.get(type(cmd)):
            handler_name = self._get_handler_name(handler)
            logger.debug("Handling command %s with handler %s", cmd, handler_name)
            try:
                result = handler(cmd)
            except CommandError as e:
                logger.info("Command %s rejected: %s", type(cmd).__name__, e.message)
                raise
            except Exception:  # pylint: disable=broad-except
                logger.exception(
                    "Exception handling command %s with handler %s", cmd, handler_name
                )
                raise
            return result

        logger.error("No handler found for command %s", type(cmd).__name__)
        raise NoHandlerForCommand(cmd)

    @staticmethod
    def _get_handler_name(fn: Callable[..., CommandResult]) -> str:
        if hasattr(fn, "__name__"):
            return fn.__name__
        if hasattr(fn, "func") and hasattr(fn.func, "__name__"):
            return fn.func.__name__
        return repr(fn)
