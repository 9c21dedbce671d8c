"""This file represents the main entry point into the bot application.
"""
import asyncio
import contextlib
import copy
import logging
from typing import Optional

import click
import discord

from . import constants
from .bot import RevBot as Bot
from .config_store import ConfigStore
from .utils import import_module_from_path

try:
    import uvloop  # type: ignore
except ImportError:
    pass
else:
    # uvloop replaces the default Python event loop with a cythonized version.
    asyncio.set_event_loop_policy(uvloop.EventLoopPolicy())

DEFAULT_BOT_CONFIG: dict = {
    "intents": discord.Intents.default().value | discord.Intents.message_content.flag,
    "developer_ids": [],
    "logging_channel_id": None,
    "attachment_host_url": None,
}
DEFAULT_LAUNCH_CONFIG: dict = {
    "command_prefix": constants.DEFAULT_PREFIX,
    "config_dir": constants.DEFAULT_CONFIG_DIR,
    "extensions": copy.deepcopy(constants.DEFAULT_EXTENSIONS),
}

BOT_CONFIG: dict = copy.deepcopy(DEFAULT_BOT_CONFIG)
LAUNCH_CONFIG: dict = copy.deepcopy(DEFAULT_LAUNCH_CONFIG)


def setup_logging(log_level: int = logging.INFO) -> None:
    discord.utils.setup_logging(level=log_level)


def clear_logging_handlers(logger: Optional[logging.Logger] = None):
    if logger is None:
        logger = logging.getLogger()

    for handler in logger.handlers[:]:
        handler.close()
        logger.removeHandler(handler)


@contextlib.contextmanager
def logging_handling(log_level: int = logging.INFO):
    try:
        setup_logging(log_level=log_level)
        yield
    finally:
        clear_logging_handlers()


async def start_bot(bot: Bot) -> None:
    try:
        print(f"Starting bot ({bot.__class__.__name__})...")
        await bot.start(BOT_CONFIG["auth"]["token"])
    except KeyboardInterrupt:
        pass
    finally:
        await close_bot(bot)


async def close_bot(bot: Bot) -> None:
    print("Closing bot...")
    await bot.close()


def parse_intents(value) -> Optional[int]:
    """Interpret a base 2, 8, 10 or 16 integer literal (or an integer) as
    intent flags. Returns `None` if that isn't possible.
    """
    if isinstance(value, int):
        return value
    if not isinstance(value, str):
        return None

    base_hint = value[:2]
    try:
        return int(
            value,
            base=(
                2
                if base_hint == "0b"
                else 8
                if base_hint == "0o"
                else 16
                if base_hint == "0x"
                else 10
            ),
        )
    except ValueError:
        return None


def validate_bot_config(bot_config: dict) -> Optional[str]:
    """Check the loaded bot configuration, returning an error message for the
    first problem found.
    """
    if (
        ("auth" not in bot_config or not isinstance(bot_config["auth"], dict))
        or (
            "token" not in bot_config["auth"]
            or not isinstance(bot_config["auth"]["token"], str)
        )
    ):
        return (
            "BOT_CONFIG error: 'auth' variable must be of type 'dict' "
            "and must at least contain 'token' of type 'str'"
        )

    if parse_intents(bot_config["intents"]) is None:
        return (
            "BOT_CONFIG error: 'intents' variable must be of type 'int' or 'str' "
            "and must be interpretable as an integer."
        )

    if not isinstance(bot_config["developer_ids"], (list, tuple)) or not all(
        isinstance(user_id, int) for user_id in bot_config["developer_ids"]
    ):
        return (
            "BOT_CONFIG error: 'developer_ids' variable must be a 'list'/'tuple' "
            "of user IDs of type 'int'."
        )

    if bot_config["logging_channel_id"] is not None and not isinstance(
        bot_config["logging_channel_id"], int
    ):
        return "BOT_CONFIG error: 'logging_channel_id' variable must be of type 'int' or None."

    if bot_config["attachment_host_url"] is not None and not isinstance(
        bot_config["attachment_host_url"], str
    ):
        return "BOT_CONFIG error: 'attachment_host_url' variable must be of type 'str' or None."

    return None


def validate_launch_config(launch_config: dict) -> Optional[str]:
    """Check the loaded launch configuration, returning an error message for the
    first problem found.
    """
    if (
        not isinstance(launch_config["command_prefix"], str)
        or not launch_config["command_prefix"]
    ):
        return "LAUNCH_CONFIG error: 'command_prefix' variable must be a non-empty 'str'."

    if not isinstance(launch_config["config_dir"], str):
        return "LAUNCH_CONFIG error: 'config_dir' variable must be of type 'str'."

    if not isinstance(launch_config["extensions"], (list, tuple)):
        return (
            "LAUNCH_CONFIG error: 'extensions' variable must be a container of type "
            "'list'/'tuple' containing dictionaries that specify parameters for the "
            "extensions to load."
        )

    if launch_config["extensions"] and not all(
        isinstance(ext_dict, dict) and "name" in ext_dict
        for ext_dict in launch_config["extensions"]
    ):
        return (
            "LAUNCH_CONFIG error: The objects in the 'extensions' variable container "
            "must be of type 'dict' and must at least contain the 'name' key mapping "
            "to the string name of an extension to load."
        )

    if (
        launch_config.get("log_level") is not None
        and launch_config["log_level"] not in constants.LOG_LEVEL_NAMES
    ):
        return (
            "LAUNCH_CONFIG error: 'log_level' variable must be a valid log level "
            "name of type 'str' or None."
        )

    return None


# fmt: off
@click.command(add_help_option=False)
@click.option("--bot-config", "bot_config_path", default="./bot_config.py",
    type=click.Path(resolve_path=True),
    help="A path to the 'bot_config.py' file to use for configuring bot credentials.")
@click.option("--launch-config", "launch_config_path", default="./launch_config.py",
    type=click.Path(resolve_path=True),
    help="A path to the 'launch_config.py' file to use for configuring bot launching.")
@click.option("--intents", type=str,
    help=("The integer of bot intents as bitwise flags to be used by the bot instead "
    f"of the defaults ({bin(DEFAULT_BOT_CONFIG['intents'])}). "
    "It can be specified as a base 2, 8, 10 or 16 integer literal."))
@click.option("--prefix", "--command-prefix", "command_prefix", type=str,
    help=("The command prefix to use. "
    f"By default, {DEFAULT_LAUNCH_CONFIG['command_prefix']} is used as a prefix."))
@click.option("--config-dir", "config_dir", type=click.Path(file_okay=False),
    help=("The directory holding the per-user and per-server configuration files. "
    f"By default, '{DEFAULT_LAUNCH_CONFIG['config_dir']}' is used."))
@click.option("--disable-ext", "--disable-extension", "disable_extension",
    multiple=True, type=str,
    help="The qualified name(s) of the extension(s) to disable upon startup.")
@click.option("--log-level", "--bot-log-level", "log_level",
    show_default=True, type=click.Choice(
        ('NOTSET', 'DEBUG', 'INFO', 'WARNING', 'WARN', 'ERROR', 'FATAL', 'CRITICAL')),
    help="The log level to use for the bot's default logging system.")
@click.help_option("-h", "--help", "help")
# fmt: on
def main(
    bot_config_path: str,
    launch_config_path: str,
    intents: Optional[str],
    command_prefix: Optional[str],
    config_dir: Optional[str],
    disable_extension: tuple[str, ...],
    log_level: Optional[str],
):
    """Launch this bot application."""

    # load mandatory BOT_CONFIG data
    try:
        bot_config = import_module_from_path("bot_config", bot_config_path)
        try:
            BOT_CONFIG.update(bot_config.BOT_CONFIG)
        except AttributeError:
            click.echo(
                "Could not find the 'BOT_CONFIG' dictionary in the 'bot_config.py' "
                f"file at '{bot_config_path}'.",
                err=True,
            )
            raise click.Abort()
    except ImportError:
        click.echo("Could not find a 'bot_config.py' file.", err=True)
        raise click.Abort()

    # load optional LAUNCH_CONFIG data
    try:
        launch_config = import_module_from_path("launch_config", launch_config_path)
        try:
            LAUNCH_CONFIG.update(launch_config.LAUNCH_CONFIG)
        except AttributeError:
            click.echo(
                "Could not find the 'LAUNCH_CONFIG' dictionary in the "
                f"'launch_config.py' file at '{launch_config_path}'.",
                err=True,
            )
            raise click.Abort()
    except ImportError:
        click.echo("No 'launch_config.py' file found, using defaults instead...")

    # CLI options take precedence over config files
    if intents is not None:
        BOT_CONFIG["intents"] = intents

    if command_prefix is not None:
        LAUNCH_CONFIG["command_prefix"] = command_prefix

    if config_dir is not None:
        LAUNCH_CONFIG["config_dir"] = config_dir

    if log_level is not None:
        LAUNCH_CONFIG["log_level"] = log_level.upper()

    for error_message in (
        validate_bot_config(BOT_CONFIG),
        validate_launch_config(LAUNCH_CONFIG),
    ):
        if error_message is not None:
            click.echo(error_message, err=True)
            raise click.Abort()

    # remove disabled extensions
    if disable_extension:
        disabled = set(disable_extension)
        LAUNCH_CONFIG["extensions"] = [
            ext_dict
            for ext_dict in LAUNCH_CONFIG["extensions"]
            if ext_dict["name"] not in disabled
        ]

    # pass configuration data to bot instance
    bot = Bot(
        LAUNCH_CONFIG["command_prefix"],
        intents=discord.Intents(parse_intents(BOT_CONFIG["intents"])),
        config_store=ConfigStore(LAUNCH_CONFIG["config_dir"]),
        developer_ids=BOT_CONFIG["developer_ids"],
        logging_channel_id=BOT_CONFIG["logging_channel_id"],
        attachment_host_url=BOT_CONFIG["attachment_host_url"],
    )
    bot.launch_config = LAUNCH_CONFIG

    if (
        LAUNCH_CONFIG.get("log_level") is not None
    ):  # not specifying a logging level disables logging
        with logging_handling(
            log_level=logging.getLevelName(LAUNCH_CONFIG["log_level"])
        ):
            asyncio.run(start_bot(bot))
            return

    asyncio.run(start_bot(bot))


if __name__ == "__main__":
    main()
