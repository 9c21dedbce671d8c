import json
from types import SimpleNamespace
from unittest.mock import AsyncMock

import pytest

from revbot.commands import CommandRegistry
from revbot.exts import dev, general, settings
from revbot.i18n import GLOBAL_STRINGS, STRING_TABLES, Language, available_languages

from .helpers import make_message

DEVELOPER_ID = 1


def make_bot(store, **kwargs):
    registry = CommandRegistry()
    return SimpleNamespace(
        prefix="!",
        command_registry=registry,
        register_command=registry.add,
        config_store=store,
        is_owner=AsyncMock(side_effect=lambda user: user.id == DEVELOPER_ID),
        latency=0.0421,
        attachment_host_url=kwargs.get("attachment_host_url"),
        http_session=kwargs.get("http_session"),
    )


async def make_loaded_bot(store, **kwargs):
    bot = make_bot(store, **kwargs)
    for ext in (general, settings, dev):
        await ext.setup(bot)
    return bot


def sent_text(message) -> str:
    return message.channel.send.await_args.args[0]


@pytest.mark.asyncio
async def test_setup_registers_all_commands(store):
    bot = await make_loaded_bot(store)
    assert [cmd.name for cmd in bot.command_registry] == [
        "ping",
        "prefix",
        "help",
        "language",
        "serverlanguage",
        "config",
        "timestamp",
    ]
    assert bot.command_registry.lookup("lang").name == "language"
    assert bot.command_registry.lookup("serverlanguage").server_only
    assert bot.command_registry.lookup("config").developer


@pytest.mark.asyncio
async def test_ping_reports_latency(store):
    bot = await make_loaded_bot(store)
    message = make_message("!ping")
    await general.ping.handler(message, [], bot)
    assert sent_text(message) == GLOBAL_STRINGS["general.pong"].format(latency=42.1)


@pytest.mark.asyncio
async def test_ping_replies_in_configured_language(store):
    bot = await make_loaded_bot(store)
    await store.create(42, "user", language="de_DE")
    message = make_message("!ping")
    await general.ping.handler(message, [], bot)
    assert sent_text(message).startswith("Pong! Die Gateway-Latenz")


@pytest.mark.asyncio
async def test_help_hides_developer_commands(store):
    bot = await make_loaded_bot(store)
    message = make_message("!help")
    await general.help_command.handler(message, [], bot)
    text = sent_text(message)
    assert "`!language`" in text
    assert "`!config`" not in text
    assert "`!timestamp`" not in text


@pytest.mark.asyncio
async def test_help_shows_developer_commands_to_developers(store):
    bot = await make_loaded_bot(store)
    message = make_message("!help", author_id=DEVELOPER_ID)
    await general.help_command.handler(message, [], bot)
    assert "`!config`" in sent_text(message)


@pytest.mark.asyncio
async def test_help_for_single_command_by_alias(store):
    bot = await make_loaded_bot(store)
    message = make_message("!help lang")
    await general.help_command.handler(message, ["lang"], bot)
    text = sent_text(message)
    assert text.splitlines()[0].startswith("`!language` - ")
    assert "`lang`" in text
    assert "`!language [language]`" in text


@pytest.mark.asyncio
async def test_help_for_unknown_command(store):
    bot = await make_loaded_bot(store)
    message = make_message("!help config")
    await general.help_command.handler(message, ["config"], bot)
    assert sent_text(message) == GLOBAL_STRINGS["help.unknown_command"].format(
        name="config"
    )


@pytest.mark.asyncio
async def test_language_without_configuration(store):
    bot = await make_loaded_bot(store)
    message = make_message("!language")
    await settings.language.handler(message, [], bot)
    text = sent_text(message)
    assert GLOBAL_STRINGS["settings.language_unset"] in text
    assert available_languages() in text


@pytest.mark.asyncio
async def test_language_set_creates_then_updates_document(store):
    bot = await make_loaded_bot(store)

    message = make_message("!language fr_FR")
    await settings.language.handler(message, ["fr_FR"], bot)
    assert sent_text(message) == STRING_TABLES[Language.FR_FR]["settings.language_updated"]
    assert await store.read(42) == {"type": "user", "language": "fr_FR"}

    message = make_message("!language de_DE")
    await settings.language.handler(message, ["de_DE"], bot)
    assert sent_text(message) == STRING_TABLES[Language.DE_DE]["settings.language_updated"]
    assert await store.read(42) == {"type": "user", "language": "de_DE"}

    message = make_message("!language")
    await settings.language.handler(message, [], bot)
    assert "`de_DE`" in sent_text(message)


@pytest.mark.asyncio
async def test_language_rejects_unknown_tags(store):
    bot = await make_loaded_bot(store)
    message = make_message("!language klingon")
    await settings.language.handler(message, ["klingon"], bot)
    assert "`klingon`" in sent_text(message)
    assert await store.read(42) is None


@pytest.mark.asyncio
async def test_language_leaves_corrupt_documents_alone(store):
    bot = await make_loaded_bot(store)
    path = store.path_for(42)
    path.parent.mkdir(parents=True)
    path.write_text("{", encoding="utf-8")

    message = make_message("!language fr_FR")
    await settings.language.handler(message, ["fr_FR"], bot)
    assert sent_text(message) == GLOBAL_STRINGS["settings.language_failed"]
    assert path.read_text(encoding="utf-8") == "{"


@pytest.mark.asyncio
async def test_server_language(store):
    bot = await make_loaded_bot(store)

    message = make_message("!serverlanguage")
    await settings.serverlanguage.handler(message, [], bot)
    assert sent_text(message) == GLOBAL_STRINGS["settings.server_language_unset"]

    message = make_message("!serverlanguage fr_FR")
    await settings.serverlanguage.handler(message, ["fr_FR"], bot)
    assert await store.read(999) == {"type": "server", "language": "fr_FR"}
    assert await store.read(42) is None

    message = make_message("!serverlanguage")
    await settings.serverlanguage.handler(message, [], bot)
    assert sent_text(message) == GLOBAL_STRINGS[
        "settings.server_language_current"
    ].format(language="fr_FR")


@pytest.mark.asyncio
async def test_config_upload_unavailable(store):
    bot = await make_loaded_bot(store)
    message = make_message("!config", author_id=DEVELOPER_ID)
    await dev.config.handler(message, [], bot)
    assert sent_text(message) == GLOBAL_STRINGS["dev.upload_unavailable"]


@pytest.mark.asyncio
async def test_config_uploads_stored_document(store, monkeypatch):
    upload = AsyncMock(return_value="att-1")
    monkeypatch.setattr(dev, "upload_file", upload)
    session = object()
    bot = await make_loaded_bot(
        store, attachment_host_url="https://autumn.example", http_session=session
    )
    await store.create(777, "server", language="en_GB")

    message = make_message("!config 777", author_id=DEVELOPER_ID)
    await dev.config.handler(message, ["777"], bot)

    upload.assert_awaited_once()
    args = upload.await_args.args
    assert args[0] is session
    assert args[1] == "https://autumn.example"
    assert json.loads(args[2]) == {"type": "server", "language": "en_GB"}
    assert args[3] == "777.json"
    assert sent_text(message) == GLOBAL_STRINGS["dev.config_uploaded"].format(
        id="777", attachment_id="att-1"
    )


@pytest.mark.asyncio
async def test_config_for_missing_document(store, monkeypatch):
    upload = AsyncMock()
    monkeypatch.setattr(dev, "upload_file", upload)
    bot = await make_loaded_bot(
        store, attachment_host_url="https://autumn.example", http_session=object()
    )
    message = make_message("!config", author_id=DEVELOPER_ID)
    await dev.config.handler(message, [], bot)
    upload.assert_not_awaited()
    assert sent_text(message) == GLOBAL_STRINGS["dev.config_missing"].format(
        id=str(DEVELOPER_ID)
    )


@pytest.mark.asyncio
async def test_timestamp(store, monkeypatch):
    monkeypatch.setattr(dev, "generate_timestamp", lambda: "2022-06-01T12:30:00.000Z")
    bot = await make_loaded_bot(store)
    message = make_message("!timestamp", author_id=DEVELOPER_ID)
    await dev.timestamp.handler(message, [], bot)
    assert sent_text(message) == "`2022-06-01T12:30:00.000Z`"
