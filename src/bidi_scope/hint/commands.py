"""Named hint commands (``on``, ``off``, ``toggle``) and their dispatch."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Callable, Dict, Iterable

from bidi_scope.runtime.telemetry import span


class UnknownCommandError(KeyError):
    """Raised when dispatching a name no command is registered under."""

    def __init__(self, name: str, choices: Iterable[str]) -> None:
        self.name = name
        self.choices = tuple(choices)
        super().__init__(f"Unknown command '{name}' (expected {'|'.join(self.choices)})")

    def __str__(self) -> str:
        return str(self.args[0])


@dataclass(frozen=True, slots=True)
class CommandRef:
    """Callable metadata for one subcommand."""

    name: str
    handler: Callable[[], object]
    description: str = ""

    def __post_init__(self) -> None:
        if not self.name:
            raise ValueError("CommandRef name cannot be empty")
        if not callable(self.handler):
            raise TypeError("handler must be callable")

    def __call__(self) -> object:
        return self.handler()


class CommandRegistry:
    """Owns subcommands in registration order."""

    def __init__(self, *, logger_name: str | None = None) -> None:
        self._commands: Dict[str, CommandRef] = {}
        self._logger_name = logger_name

    @property
    def names(self) -> tuple[str, ...]:
        return tuple(self._commands)

    def register(self, command: CommandRef, *, replace: bool = False) -> CommandRef:
        if not replace and command.name in self._commands:
            raise ValueError(f"Command '{command.name}' already registered")
        self._commands[command.name] = command
        return command

    def complete(self, prefix: str = "") -> list[str]:
        return [name for name in self._commands if name.startswith(prefix)]

    def dispatch(self, name: str) -> object:
        key = name.strip()
        command = self._commands.get(key)
        if command is None:
            raise UnknownCommandError(key, self._commands)
        with span(
            "commands::dispatch",
            logger_name=self._logger_name,
            component="commands",
            metadata={"command": key},
        ):
            return command()


__all__ = ["CommandRef", "CommandRegistry", "UnknownCommandError"]
