"""This file defines the command data model and the in-memory command registry.
"""

from dataclasses import dataclass, field
from typing import (
    TYPE_CHECKING,
    Any,
    Awaitable,
    Callable,
    Iterable,
    Iterator,
    Optional,
)

import discord

if TYPE_CHECKING:
    from .bot import RevBot

CommandCallback = Callable[[discord.Message, list[str], "RevBot"], Awaitable[Any]]


class CommandRegistrationError(ValueError):
    """Raised when a command's name or one of its aliases is already taken."""


@dataclass(frozen=True)
class Command:
    """A static command definition.

    Names and aliases share a single namespace within a registry.
    """

    name: str
    handler: CommandCallback = field(compare=False, repr=False)
    aliases: frozenset[str] = frozenset()
    developer: bool = False
    server_only: bool = False
    description: str = ""
    usage: str = ""

    @property
    def invocation_names(self) -> frozenset[str]:
        return self.aliases | {self.name}


def command(
    name: Optional[str] = None,
    *,
    aliases: Iterable[str] = (),
    developer: bool = False,
    server_only: bool = False,
    usage: str = "",
) -> Callable[[CommandCallback], Command]:
    """A decorator that turns a coroutine function into a `Command`.

    Args:
        name (Optional[str]): The command name. Defaults to the function name.
        aliases (Iterable[str]): Alternative names the command can be invoked with.
        developer (bool): Whether only bot developers may run the command.
        server_only (bool): Whether the command may only run inside a server.
        usage (str): A short argument signature shown by the help command.
    """

    def decorator(func: CommandCallback) -> Command:
        doc = (func.__doc__ or "").strip()
        return Command(
            name=name or func.__name__,
            handler=func,
            aliases=frozenset(aliases),
            developer=developer,
            server_only=server_only,
            description=doc.splitlines()[0] if doc else "",
            usage=usage,
        )

    return decorator


class CommandRegistry:
    def __init__(self, commands: Iterable[Command] = ()) -> None:
        self._commands: dict[str, Command] = {}
        for cmd in commands:
            self.add(cmd)

    def add(self, command: Command) -> None:
        taken = command.invocation_names & self._taken_names()
        if taken:
            raise CommandRegistrationError(
                f"cannot register command '{command.name}', the following names "
                f"are already in use: {', '.join(sorted(taken))}"
            )
        self._commands[command.name] = command

    def remove(self, name: str) -> Optional[Command]:
        return self._commands.pop(name, None)

    def lookup(self, token: str) -> Optional[Command]:
        """Find the first registered command whose name or aliases match `token`.

        Commands are checked in registration order. Returns `None` if nothing
        matches.
        """
        for cmd in self._commands.values():
            if cmd.name == token or token in cmd.aliases:
                return cmd
        return None

    def _taken_names(self) -> set[str]:
        names: set[str] = set()
        for cmd in self._commands.values():
            names |= cmd.invocation_names
        return names

    def __iter__(self) -> Iterator[Command]:
        return iter(tuple(self._commands.values()))

    def __len__(self) -> int:
        return len(self._commands)

    def __contains__(self, name: object) -> bool:
        return name in self._commands
