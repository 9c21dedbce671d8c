"""French (France) strings.
"""

STRINGS: dict[str, str] = {
    "help.ping_prefix": "Salut ! Mon préfixe ici est `{prefix}` - essayez `{prefix}help` pour voir ce que je sais faire.",
    "help.title": "**Commandes disponibles**",
    "help.entry": "`{prefix}{name}` - {description}",
    "help.aliases": "Alias : {aliases}",
    "help.usage": "Utilisation : `{prefix}{name} {usage}`",
    "help.unknown_command": "Je ne trouve aucune commande nommée `{name}`.",
    "general.pong": "Pong ! La latence de la passerelle est de `{latency:.0f}ms`.",
    "general.prefix": "Mon préfixe est `{prefix}`.",
    "errors.dev_only_command": "Seuls les développeurs du bot peuvent utiliser cette commande.",
    "errors.server_only_command": "Cette commande ne peut être utilisée que dans un serveur.",
    "errors.command_failed": "Une erreur s'est produite pendant l'exécution de la commande. Les développeurs ont été prévenus.",
    "settings.language_current": "Votre langue est `{language}`.",
    "settings.language_unset": "Vous n'avez pas encore choisi de langue, j'utilise donc `en_GB`.",
    "settings.language_available": "Langues disponibles : {languages}",
    "settings.language_invalid": "Je ne connais pas la langue `{language}`. Langues disponibles : {languages}",
    "settings.language_updated": "C'est fait ! Je vous parlerai en français désormais.",
    "settings.language_failed": "Impossible d'enregistrer votre langue, veuillez réessayer plus tard.",
    "settings.server_language_current": "La langue de ce serveur est `{language}`.",
    "settings.server_language_unset": "Ce serveur n'a pas encore choisi de langue.",
    "settings.server_language_updated": "La langue de ce serveur est désormais `{language}`.",
    "dev.config_missing": "Aucune configuration enregistrée pour `{id}`.",
    "dev.config_uploaded": "Configuration de `{id}` envoyée en tant que pièce jointe `{attachment_id}`.",
    "dev.upload_unavailable": "Aucun hébergeur de pièces jointes n'est configuré.",
    "dev.timestamp": "`{timestamp}`",
}
