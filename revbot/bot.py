"""This file defines the `discord.ext.commands.Bot` subclass to use for the project.

Text commands are resolved by `revbot.dispatch` instead of `discord.ext.commands`,
so `on_message` never calls `process_commands`.
"""

import asyncio
import logging
from typing import Any, Iterable, Optional

import aiohttp
import discord
from discord.ext import commands

from . import constants
from .commands import Command, CommandRegistry
from .config_store import ConfigStore
from .diagnostics import DiagnosticSink
from .dispatch import Context, resolve_context
from .i18n import localized

_logger = logging.getLogger(__name__)


class RevBot(commands.Bot):
    def __init__(
        self,
        command_prefix: str = constants.DEFAULT_PREFIX,
        *args,
        config_store: Optional[ConfigStore] = None,
        developer_ids: Iterable[int] = (),
        logging_channel_id: Optional[int] = None,
        attachment_host_url: Optional[str] = None,
        **kwargs,
    ) -> None:
        kwargs.setdefault("help_command", None)
        super().__init__(
            command_prefix, *args, owner_ids=set(developer_ids), **kwargs
        )
        self.command_registry = CommandRegistry()
        self.config_store = config_store or ConfigStore(constants.DEFAULT_CONFIG_DIR)
        self.diagnostics = DiagnosticSink(self, logging_channel_id)
        self.attachment_host_url = attachment_host_url
        self.http_session: Optional[aiohttp.ClientSession] = None
        self.launch_config: dict[str, Any] = {"extensions": []}

    @property
    def prefix(self) -> str:
        return self.command_prefix

    def register_command(self, command: Command) -> None:
        self.command_registry.add(command)

    def unregister_command(self, name: str) -> Optional[Command]:
        return self.command_registry.remove(name)

    async def setup_hook(self) -> None:
        self.http_session = aiohttp.ClientSession()
        for ext_dict in self.launch_config["extensions"]:
            try:
                await self.load_extension(
                    ext_dict["name"], package=ext_dict.get("package")
                )
            except commands.ExtensionAlreadyLoaded:
                continue
            except (TypeError, commands.ExtensionError) as exc:
                _logger.error(
                    f"Failed to load extension '{ext_dict.get('package', '')}{ext_dict['name']}' at launch",
                    exc_info=exc,
                )
            else:
                _logger.info(
                    f"Successfully loaded extension '{ext_dict.get('package', '')}{ext_dict['name']}' at launch"
                )

    async def close(self) -> None:
        if self.http_session is not None and not self.http_session.closed:
            await self.http_session.close()
        await super().close()

    async def on_ready(self) -> None:
        assert self.user is not None
        _logger.info(f"Logged in as {self.user} (ID: {self.user.id})")

    async def resolve_context(self, message: discord.Message) -> Context:
        is_dev = await self.is_owner(message.author)
        return await resolve_context(message, is_dev, self)

    async def invoke_command(self, message: discord.Message, ctx: Context) -> None:
        assert ctx.command is not None
        try:
            await ctx.command.handler(message, ctx.args, self)
        except asyncio.CancelledError:
            raise
        except Exception as exc:
            _logger.error(
                "An unhandled exception occured in command %s",
                ctx.command.name,
                exc_info=exc,
            )
            await self.diagnostics.report(
                f"{exc.__class__.__name__} in command '{ctx.command.name}': {exc}",
                "error",
            )
            strings = await localized(self.config_store, message.author.id)
            try:
                await message.channel.send(strings["errors.command_failed"])
            except discord.HTTPException as send_exc:
                _logger.warning(
                    "Failed to send command failure notice to channel %s",
                    message.channel,
                    exc_info=send_exc,
                )

    async def on_message(self, message: discord.Message) -> None:
        if message.author.bot:
            return

        ctx = await self.resolve_context(message)
        if ctx.can_execute:
            await self.invoke_command(message, ctx)
