"""Bootstrap the message bus with handlers and the model."""

from __future__ import annotations

import inspect
import logging
from collections.abc import Callable, Iterable, Mapping
from dataclasses import dataclass
from functools import partial
from typing import TYPE_CHECKING

from woofareyou.adapters.model import InMemoryModel
from woofareyou.domain.sample_data import get_sample_pets
from woofareyou.service_layer.handlers import COMMAND_HANDLERS
from woofareyou.service_layer.messagebus import MessageBus

if TYPE_CHECKING:
    from woofareyou.config import UserPrefs
    from woofareyou.domain import Pet
    from woofareyou.interfaces.model import AbstractModel
    from woofareyou.service_layer.commands import Command
    from woofareyou.service_layer.results import CommandResult

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class AppContainer:
    """A class to hold application wiring constants."""

    message_bus: MessageBus


def build_model(
    pets: Iterable[Pet] | None = None, user_prefs: UserPrefs | None = None
) -> AbstractModel:
    """Build the model, falling back to sample pets when none are supplied."""
    if pets is None:
        logger.info("No pet data supplied; starting with sample pets")
        pets = get_sample_pets()
    return InMemoryModel(pets, user_prefs=user_prefs)


def build_message_bus(
    model: AbstractModel,
    command_handlers: Mapping[type[Command], Callable[..., CommandResult]],
) -> MessageBus:
    """Build a message bus with injected dependencies."""
    dependencies = {"model": model}
    injected_command_handlers = {
        command_type: inject_dependencies(handler, dependencies)
        for command_type, handler in command_handlers.items()
    }

    return MessageBus(
        model,
        command_handlers=injected_command_handlers,
    )


def bootstrap(
    pets: Iterable[Pet] | None = None, user_prefs: UserPrefs | None = None
) -> AppContainer:
    """Bootstrap the message bus with handlers and the model."""
    model = build_model(pets, user_prefs)
    message_bus = build_message_bus(model, COMMAND_HANDLERS)

    return AppContainer(
        message_bus=message_bus,
    )


def inject_dependencies(
    handler: Callable, dependencies: Mapping[str, object]
) -> Callable:
    """Inject dependencies into a handler function based on its parameters."""
    params = inspect.signature(handler).parameters
    deps = {
        name: dependency for name, dependency in dependencies.items() if name in params
    }
    return partial(handler, **deps)
