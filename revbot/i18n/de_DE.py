"""German (Germany) strings.
"""

STRINGS: dict[str, str] = {
    "help.ping_prefix": "Hallo! Mein Präfix hier ist `{prefix}` - probier `{prefix}help`, um zu sehen, was ich kann.",
    "help.title": "**Verfügbare Befehle**",
    "help.entry": "`{prefix}{name}` - {description}",
    "help.aliases": "Aliase: {aliases}",
    "help.usage": "Verwendung: `{prefix}{name} {usage}`",
    "help.unknown_command": "Ich konnte keinen Befehl namens `{name}` finden.",
    "general.pong": "Pong! Die Gateway-Latenz beträgt `{latency:.0f}ms`.",
    "general.prefix": "Mein Präfix ist `{prefix}`.",
    "errors.dev_only_command": "Dieser Befehl kann nur von den Entwicklern des Bots ausgeführt werden.",
    "errors.server_only_command": "Dieser Befehl kann nur auf einem Server ausgeführt werden.",
    "errors.command_failed": "Beim Ausführen des Befehls ist ein Fehler aufgetreten. Die Entwickler wurden benachrichtigt.",
    "settings.language_current": "Deine Sprache ist `{language}`.",
    "settings.language_unset": "Du hast noch keine Sprache gewählt, deshalb verwende ich `en_GB`.",
    "settings.language_available": "Verfügbare Sprachen: {languages}",
    "settings.language_invalid": "Die Sprache `{language}` kenne ich nicht. Verfügbare Sprachen: {languages}",
    "settings.language_updated": "Erledigt! Ab jetzt spreche ich Deutsch mit dir.",
    "settings.language_failed": "Deine Sprache konnte nicht gespeichert werden, bitte versuch es später noch einmal.",
    "settings.server_language_current": "Die Sprache dieses Servers ist `{language}`.",
    "settings.server_language_unset": "Dieser Server hat noch keine Sprache gewählt.",
    "settings.server_language_updated": "Die Sprache dieses Servers ist jetzt `{language}`.",
    "dev.config_missing": "Für `{id}` ist keine Konfiguration gespeichert.",
    "dev.config_uploaded": "Die Konfiguration von `{id}` wurde als Anhang `{attachment_id}` hochgeladen.",
    "dev.upload_unavailable": "Es ist kein Anhang-Host konfiguriert.",
    "dev.timestamp": "`{timestamp}`",
}
