"""Commands for the bot's developers.
"""

import json

import discord

from revbot.bot import RevBot
from revbot.commands import command
from revbot.i18n import localized
from revbot.utils import generate_timestamp, upload_file


@command(developer=True, usage="[id]")
async def config(message: discord.Message, args: list[str], bot: RevBot):
    """Upload the stored configuration of a user or server."""
    strings = await localized(bot.config_store, message.author.id)
    target_id = args[0] if args and args[0] else str(message.author.id)

    if bot.attachment_host_url is None or bot.http_session is None:
        await message.channel.send(strings["dev.upload_unavailable"])
        return

    document = await bot.config_store.read(target_id)
    if document is None:
        await message.channel.send(strings["dev.config_missing"].format(id=target_id))
        return

    # upload errors propagate to the command error handler
    attachment_id = await upload_file(
        bot.http_session,
        bot.attachment_host_url,
        json.dumps(document, indent=4).encode("utf-8"),
        f"{target_id}.json",
    )
    await message.channel.send(
        strings["dev.config_uploaded"].format(id=target_id, attachment_id=attachment_id)
    )


@command(developer=True)
async def timestamp(message: discord.Message, args: list[str], bot: RevBot):
    """Show the current UTC timestamp."""
    strings = await localized(bot.config_store, message.author.id)
    await message.channel.send(
        strings["dev.timestamp"].format(timestamp=generate_timestamp())
    )


async def setup(bot: RevBot):
    bot.register_command(config)
    bot.register_command(timestamp)
