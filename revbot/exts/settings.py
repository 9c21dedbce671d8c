"""Commands for changing the stored user and server configuration.
"""

from typing import Mapping, Union

import discord

from revbot.bot import RevBot
from revbot.commands import command
from revbot.config_store import ConfigKind, ConfigStore, ReadStatus
from revbot.i18n import STRING_TABLES, Language, available_languages, localized


async def store_language(
    store: ConfigStore, id: Union[int, str], kind: ConfigKind, language: Language
) -> bool:
    """Persist `language` for the given user/server, creating its configuration
    document when it has none yet.
    """
    status = (await store.read_result(id)).status
    if status is ReadStatus.NOT_FOUND:
        return await store.create(id, kind, language=language.value)
    elif status is ReadStatus.OK:
        return await store.write(id, "language", language.value)
    return False


async def _reply_invalid(
    message: discord.Message, strings: Mapping[str, str], tag: str
) -> None:
    await message.channel.send(
        strings["settings.language_invalid"].format(
            language=tag, languages=available_languages()
        )
    )


@command(aliases=("lang",), usage="[language]")
async def language(message: discord.Message, args: list[str], bot: RevBot):
    """Show or change the language the bot replies to you in."""
    strings = await localized(bot.config_store, message.author.id)

    if not args or not args[0]:
        config = await bot.config_store.read_user_config(message.author.id)
        if config is None or config.language is None:
            reply = strings["settings.language_unset"]
        else:
            reply = strings["settings.language_current"].format(
                language=config.language
            )
        await message.channel.send(
            f"{reply}\n"
            + strings["settings.language_available"].format(
                languages=available_languages()
            )
        )
        return

    selected = Language.from_tag(args[0])
    if selected is None:
        await _reply_invalid(message, strings, args[0])
        return

    if not await store_language(
        bot.config_store, message.author.id, "user", selected
    ):
        await message.channel.send(strings["settings.language_failed"])
        return

    await message.channel.send(STRING_TABLES[selected]["settings.language_updated"])


@command(aliases=("serverlang",), server_only=True, usage="[language]")
async def serverlanguage(message: discord.Message, args: list[str], bot: RevBot):
    """Show or change the language configured for this server."""
    assert message.guild is not None
    strings = await localized(bot.config_store, message.author.id)

    if not args or not args[0]:
        config = await bot.config_store.read_server_config(message.guild.id)
        if config is None or config.language is None:
            reply = strings["settings.server_language_unset"]
        else:
            reply = strings["settings.server_language_current"].format(
                language=config.language
            )
        await message.channel.send(reply)
        return

    selected = Language.from_tag(args[0])
    if selected is None:
        await _reply_invalid(message, strings, args[0])
        return

    if not await store_language(
        bot.config_store, message.guild.id, "server", selected
    ):
        await message.channel.send(strings["settings.language_failed"])
        return

    await message.channel.send(
        strings["settings.server_language_updated"].format(language=selected.value)
    )


async def setup(bot: RevBot):
    bot.register_command(language)
    bot.register_command(serverlanguage)
