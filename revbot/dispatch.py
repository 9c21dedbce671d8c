"""This file defines how incoming messages are resolved into command invocations.

Resolution is not side-effect free: a message starting with a mention of the
bot gets the command prefix announced in reply, and permission denials are
sent to the channel the command was invoked in.
"""

import logging
import re
from dataclasses import dataclass, field
from typing import TYPE_CHECKING, Optional

import discord

from .commands import Command
from .i18n import GLOBAL_STRINGS

if TYPE_CHECKING:
    from .bot import RevBot

_logger = logging.getLogger(__name__)


@dataclass
class Context:
    command: Optional[Command] = None
    args: list[str] = field(default_factory=list)
    can_execute: bool = False


async def _send(channel: discord.abc.Messageable, content: str) -> None:
    try:
        await channel.send(content)
    except discord.HTTPException as exc:
        _logger.warning("Failed to send message to channel %s", channel, exc_info=exc)


def mention_pattern(user_id: int) -> re.Pattern:
    return re.compile(rf"<@!?{user_id}>.*", flags=re.DOTALL)


async def check_command(
    message: discord.Message, command: Command, is_dev: bool
) -> bool:
    """Check whether `command` may not be run for the given message.

    Exactly one denial message is sent to the message's channel if a check
    fails.

    Args:
        message (discord.Message): The invocation message.
        command (Command): The resolved command.
        is_dev (bool): Whether the invoker is a bot developer.

    Returns:
        bool: `True` if there is an issue preventing execution, `False` otherwise.
    """
    if command.developer and not is_dev:
        await _send(message.channel, GLOBAL_STRINGS["errors.dev_only_command"])
        return True
    elif command.server_only and message.guild is None:
        await _send(message.channel, GLOBAL_STRINGS["errors.server_only_command"])
        return True
    return False


async def resolve_context(
    message: discord.Message, is_dev: bool, bot: "RevBot"
) -> Context:
    """Resolve a message into a command invocation context.

    Args:
        message (discord.Message): The incoming message.
        is_dev (bool): Whether the author is a bot developer.
        bot (RevBot): The bot, providing the prefix, its own user and the
          command registry.

    Returns:
        Context: The resolved context. `can_execute` is only `True` if a command
          was found and passed all permission checks.
    """
    ctx = Context()

    # system messages
    if not message.content:
        return ctx

    if bot.user is not None and mention_pattern(bot.user.id).match(message.content):
        await _send(
            message.channel, GLOBAL_STRINGS["help.ping_prefix"].format(prefix=bot.prefix)
        )

    if not message.content.startswith(bot.prefix):
        return ctx

    name, *args = message.content[len(bot.prefix) :].split(" ")
    ctx.args = args
    ctx.command = bot.command_registry.lookup(name)

    if ctx.command is None:
        return ctx

    ctx.can_execute = not await check_command(message, ctx.command, is_dev)
    return ctx
