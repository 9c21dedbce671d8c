"""General purpose commands available to everyone.
"""

import discord

from revbot.bot import RevBot
from revbot.commands import command
from revbot.i18n import localized


@command(aliases=("p",))
async def ping(message: discord.Message, args: list[str], bot: RevBot):
    """Check whether the bot is responsive."""
    strings = await localized(bot.config_store, message.author.id)
    await message.channel.send(strings["general.pong"].format(latency=bot.latency * 1000))


@command()
async def prefix(message: discord.Message, args: list[str], bot: RevBot):
    """Show the command prefix."""
    strings = await localized(bot.config_store, message.author.id)
    await message.channel.send(strings["general.prefix"].format(prefix=bot.prefix))


@command(name="help", aliases=("h",), usage="[command]")
async def help_command(message: discord.Message, args: list[str], bot: RevBot):
    """List the available commands, or show how to use one of them."""
    strings = await localized(bot.config_store, message.author.id)
    is_dev = await bot.is_owner(message.author)

    if args and args[0]:
        cmd = bot.command_registry.lookup(args[0])
        if cmd is None or (cmd.developer and not is_dev):
            await message.channel.send(
                strings["help.unknown_command"].format(name=args[0])
            )
            return

        lines = [
            strings["help.entry"].format(
                prefix=bot.prefix, name=cmd.name, description=cmd.description
            )
        ]
        if cmd.aliases:
            lines.append(
                strings["help.aliases"].format(
                    aliases=", ".join(f"`{alias}`" for alias in sorted(cmd.aliases))
                )
            )
        if cmd.usage:
            lines.append(
                strings["help.usage"].format(
                    prefix=bot.prefix, name=cmd.name, usage=cmd.usage
                )
            )
        await message.channel.send("\n".join(lines))
        return

    lines = [strings["help.title"]]
    lines.extend(
        strings["help.entry"].format(
            prefix=bot.prefix, name=cmd.name, description=cmd.description
        )
        for cmd in bot.command_registry
        if is_dev or not cmd.developer
    )
    await message.channel.send("\n".join(lines))


async def setup(bot: RevBot):
    bot.register_command(ping)
    bot.register_command(prefix)
    bot.register_command(help_command)
