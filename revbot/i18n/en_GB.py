"""English (United Kingdom) strings. This table doubles as the global fallback.
"""

STRINGS: dict[str, str] = {
    "help.ping_prefix": "Hey there! My prefix here is `{prefix}` - try `{prefix}help` to see what I can do.",
    "help.title": "**Available commands**",
    "help.entry": "`{prefix}{name}` - {description}",
    "help.aliases": "Aliases: {aliases}",
    "help.usage": "Usage: `{prefix}{name} {usage}`",
    "help.unknown_command": "I couldn't find a command called `{name}`.",
    "general.pong": "Pong! Gateway latency is `{latency:.0f}ms`.",
    "general.prefix": "My prefix is `{prefix}`.",
    "errors.dev_only_command": "This command can only be run by the bot's developers.",
    "errors.server_only_command": "This command can only be run inside a server.",
    "errors.command_failed": "Something went wrong while running that command. The developers have been notified.",
    "settings.language_current": "Your language is set to `{language}`.",
    "settings.language_unset": "You haven't picked a language yet, so I'm using `en_GB`.",
    "settings.language_available": "Available languages: {languages}",
    "settings.language_invalid": "`{language}` isn't a language I know. Available languages: {languages}",
    "settings.language_updated": "Done! I'll speak British English to you from now on.",
    "settings.language_failed": "I couldn't save your language, please try again later.",
    "settings.server_language_current": "This server's language is set to `{language}`.",
    "settings.server_language_unset": "This server hasn't picked a language yet.",
    "settings.server_language_updated": "This server's language is now `{language}`.",
    "dev.config_missing": "There is no stored configuration for `{id}`.",
    "dev.config_uploaded": "Uploaded the configuration for `{id}` as attachment `{attachment_id}`.",
    "dev.upload_unavailable": "No attachment host is configured.",
    "dev.timestamp": "`{timestamp}`",
}
