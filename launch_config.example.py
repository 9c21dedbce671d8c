# Copy this file to 'launch_config.py' to customize how the bot is launched.

LAUNCH_CONFIG = {
    "command_prefix": "!",
    "config_dir": "data/config",
    "extensions": [
        {"name": "revbot.exts.general"},
        {"name": "revbot.exts.settings"},
        {"name": "revbot.exts.dev"},
    ],
    "log_level": "INFO",
}
