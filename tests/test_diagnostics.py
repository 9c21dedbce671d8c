import logging
from unittest.mock import AsyncMock, MagicMock

import discord
import pytest

from revbot.diagnostics import DiagnosticSink, format_report


def make_client(channel=None):
    client = MagicMock()
    client.get_channel = MagicMock(return_value=channel)
    client.fetch_channel = AsyncMock(return_value=channel)
    return client


def make_channel():
    channel = MagicMock(spec=discord.TextChannel)
    channel.send = AsyncMock()
    return channel


def test_format_report():
    assert format_report("boom", "error") == "**New error :bangbang:**\n```\nboom\n```"
    assert (
        format_report(ValueError("bad"), "warning")
        == "**New warning :warning:**\n```\nbad\n```"
    )


@pytest.mark.asyncio
async def test_report_without_channel_logs_locally(caplog):
    client = make_client()
    sink = DiagnosticSink(client, None)
    with caplog.at_level(logging.WARNING, logger="revbot.diagnostics"):
        await sink.report("something odd", "warning")
    assert "something odd" in caplog.text
    client.get_channel.assert_not_called()


@pytest.mark.asyncio
async def test_report_sends_to_logging_channel():
    channel = make_channel()
    sink = DiagnosticSink(make_client(channel), 555)
    await sink.report("boom")
    channel.send.assert_awaited_once_with(format_report("boom", "error"))


@pytest.mark.asyncio
async def test_report_fetches_uncached_channel():
    channel = make_channel()
    client = make_client()
    client.fetch_channel.return_value = channel
    sink = DiagnosticSink(client, 555)
    await sink.report("boom", "warning")
    client.fetch_channel.assert_awaited_once_with(555)
    channel.send.assert_awaited_once_with(format_report("boom", "warning"))


@pytest.mark.asyncio
async def test_report_falls_back_when_channel_cannot_be_fetched(caplog):
    client = make_client()
    client.fetch_channel.side_effect = discord.NotFound(
        MagicMock(status=404, reason="Not Found"), "Unknown Channel"
    )
    sink = DiagnosticSink(client, 555)
    with caplog.at_level(logging.ERROR, logger="revbot.diagnostics"):
        await sink.report("lost error")
    assert "lost error" in caplog.text


@pytest.mark.asyncio
async def test_report_falls_back_when_sending_fails(caplog):
    channel = make_channel()
    channel.send.side_effect = discord.Forbidden(
        MagicMock(status=403, reason="Forbidden"), "Missing Access"
    )
    sink = DiagnosticSink(make_client(channel), 555)
    with caplog.at_level(logging.ERROR, logger="revbot.diagnostics"):
        await sink.report(RuntimeError("kaboom"))
    assert "kaboom" in caplog.text
