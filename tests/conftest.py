from types import SimpleNamespace

import pytest

from revbot.commands import CommandRegistry
from revbot.config_store import ConfigStore

from .helpers import BOT_USER_ID, make_command


@pytest.fixture
def registry() -> CommandRegistry:
    return CommandRegistry(
        [
            make_command("ping", "p"),
            make_command("shutdown", developer=True),
            make_command("serverinfo", "si", server_only=True),
            make_command("purge", developer=True, server_only=True),
        ]
    )


@pytest.fixture
def fake_bot(registry: CommandRegistry) -> SimpleNamespace:
    return SimpleNamespace(
        prefix="!", user=SimpleNamespace(id=BOT_USER_ID), command_registry=registry
    )


@pytest.fixture
def store(tmp_path) -> ConfigStore:
    return ConfigStore(tmp_path / "config")
