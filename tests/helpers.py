from typing import Optional
from unittest.mock import AsyncMock, MagicMock

from revbot.commands import Command

BOT_USER_ID = 1234


async def noop_handler(message, args, bot):
    return None


def make_command(name: str, *aliases: str, **kwargs) -> Command:
    return Command(
        name=name,
        handler=kwargs.pop("handler", noop_handler),
        aliases=frozenset(aliases),
        **kwargs,
    )


def make_message(
    content: Optional[str], *, in_guild: bool = True, author_id: int = 42
) -> MagicMock:
    message = MagicMock()
    message.content = content
    message.guild = MagicMock(id=999) if in_guild else None
    message.author = MagicMock(id=author_id, bot=False)
    message.channel = MagicMock()
    message.channel.send = AsyncMock()
    return message
