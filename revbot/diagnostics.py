"""This file defines the sink that command failures and warnings are reported to.
"""

import logging
from typing import Literal, Optional

import discord

_logger = logging.getLogger(__name__)

ReportLevel = Literal["warning", "error"]


def format_report(error: object, level: ReportLevel = "error") -> str:
    heading = "error :bangbang:" if level == "error" else "warning :warning:"
    return f"**New {heading}**\n```\n{error}\n```"


class DiagnosticSink:
    """Reports errors to a logging channel when one is configured, and to the
    local logger otherwise.
    """

    def __init__(
        self, client: discord.Client, logging_channel_id: Optional[int] = None
    ) -> None:
        self.client = client
        self.logging_channel_id = logging_channel_id

    def _log_locally(self, error: object, level: ReportLevel) -> None:
        exc_info = error if isinstance(error, BaseException) else None
        if level == "error":
            _logger.error("%s", error, exc_info=exc_info)
        else:
            _logger.warning("%s", error, exc_info=exc_info)

    async def _get_logging_channel(self) -> Optional[discord.abc.Messageable]:
        if self.logging_channel_id is None:
            return None

        channel = self.client.get_channel(self.logging_channel_id)
        if channel is None:
            try:
                channel = await self.client.fetch_channel(self.logging_channel_id)
            except (discord.HTTPException, discord.InvalidData):
                return None

        if not isinstance(channel, discord.abc.Messageable):
            return None
        return channel

    async def report(self, error: object, level: ReportLevel = "error") -> None:
        channel = await self._get_logging_channel()
        if channel is None:
            self._log_locally(error, level)
            return

        try:
            await channel.send(format_report(error, level))
        except discord.HTTPException:
            self._log_locally(error, level)
