"""Unit tests for the MessageBus"""

import re
from dataclasses import dataclass
from functools import partial

import pytest

from woofareyou.adapters.model import InMemoryModel
from woofareyou.service_layer.commands import Command
from woofareyou.service_layer.errors import NothingToUndoError
from woofareyou.service_layer.messagebus import MessageBus, NoHandlerForCommand
from woofareyou.service_layer.results import CommandResult

# pylint: disable=unused-argument, too-few-public-methods


# --- Fakes ---


@dataclass(frozen=True)
class CommandA(Command):
    """A simple fake command for testing purposes."""

    x: int = 0


@dataclass(frozen=True)
class CommandB(Command):
    """A simple fake command for testing purposes."""

    msg: str = "hi"


# --- Assert Helpers ---


def assert_log_message(records, message, level: str) -> None:
    """Assert that a log message is in the log records."""
    log_msgs = [rec.getMessage() for rec in records if rec.levelname == level]
    assert message in log_msgs


# --- Tests ---


def test_dispatches_to_specific_handler_once(caplog):
    """MessageBus dispatches to the handler registered for the command's type,
    returns its result and logs the handling action.
    """

    calls: list[Command] = []

    def handle_a(cmd: CommandA) -> CommandResult:
        calls.append(cmd)
        return CommandResult("a handled")

    def handle_b(cmd: CommandB) -> CommandResult:
        calls.append(cmd)
        return CommandResult("b handled")

    bus = MessageBus(
        InMemoryModel(), command_handlers={CommandA: handle_a, CommandB: handle_b}
    )
    a = CommandA(42)

    with caplog.at_level("DEBUG"):
        result = bus.handle(a)

    assert calls == [a]
    assert result == CommandResult("a handled")
    assert_log_message(
        caplog.records,
        f"Handling command {a} with handler {handle_a.__name__}",
        "DEBUG",
    )


def test_message_bus_no_handler_logs_error(caplog):
    """MessageBus logs an error and raises when no handler is found."""
    bus = MessageBus(InMemoryModel(), command_handlers={})
    with caplog.at_level("ERROR"):
        with pytest.raises(
            NoHandlerForCommand,
            match="No handler found for command CommandA",
        ):
            bus.handle(CommandA())

    assert_log_message(
        caplog.records,
        "No handler found for command CommandA",
        "ERROR",
    )


def test_message_bus_handler_exception_logs(caplog):
    """MessageBus logs an unexpected exception raised by a handler and reraises."""

    def faulty_handler(cmd: CommandA):
        raise RuntimeError("Handler error")

    bus = MessageBus(InMemoryModel(), command_handlers={CommandA: faulty_handler})
    cmd = CommandA()
    with caplog.at_level("ERROR"):
        with pytest.raises(RuntimeError):
            bus.handle(cmd)
    assert_log_message(
        caplog.records,
        f"Exception handling command {cmd} with handler {faulty_handler.__name__}",
        "ERROR",
    )


def test_command_error_is_logged_at_info_and_reraised(caplog):
    """A rejected command is a normal outcome: logged at INFO, not as an exception."""

    def rejecting_handler(cmd: CommandA):
        raise NothingToUndoError

    bus = MessageBus(InMemoryModel(), command_handlers={CommandA: rejecting_handler})
    with caplog.at_level("DEBUG"):
        with pytest.raises(NothingToUndoError):
            bus.handle(CommandA())

    assert_log_message(
        caplog.records, "Command CommandA rejected: There is nothing to undo!", "INFO"
    )
    assert not [rec for rec in caplog.records if rec.levelname == "ERROR"]


def test_handler_name_falls_back_to_repr(caplog):
    """Handler name falls back to repr when __name__ is missing."""

    class CallableObj:
        """A callable object without a __name__ attribute."""

        def __call__(self, x):
            return CommandResult("ok")

    bus = MessageBus(InMemoryModel(), command_handlers={CommandA: CallableObj()})
    with caplog.at_level("DEBUG"):
        bus.handle(cmd=CommandA())
    logs = " ".join(rec.message for rec in caplog.records)
    pattern = r"Handling command CommandA\(x=0\) with handler <.*>"
    assert re.search(pattern, logs), f"Expected log pattern not found: {pattern}"


def test_handler_name_with_partial(caplog):
    """Handler name is extracted from the function wrapped by a partial."""

    def record_handler(cmd: CommandA, sink: list[CommandA]) -> CommandResult:
        """Test handler that records commands to a sink."""
        sink.append(cmd)
        return CommandResult("recorded")

    sink: list[CommandA] = []
    injected_handler = partial(record_handler, sink=sink)
    bus = MessageBus(InMemoryModel(), command_handlers={CommandA: injected_handler})
    with caplog.at_level("DEBUG"):
        cmd = CommandA(0)
        bus.handle(cmd)
    assert sink == [cmd]
    assert_log_message(
        caplog.records,
        f"Handling command {cmd} with handler {injected_handler.func.__name__}",  # pylint: disable=no-member
        "DEBUG",
    )


def test_message_bus_exposes_model():
    """MessageBus exposes the model it was built with."""
    model = InMemoryModel()
    bus = MessageBus(model, command_handlers={})
    assert bus.model is model
