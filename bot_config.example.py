# Copy this file to 'bot_config.py' and fill in your bot's credentials.

BOT_CONFIG = {
    "auth": {
        "token": "...",
    },
    # "intents": 0b1100011111111011111101,
    "developer_ids": [],
    # Channel that command errors are reported to. Errors are only logged
    # locally when this is None.
    "logging_channel_id": None,
    # Base URL of the attachment host used by the 'config' developer command.
    "attachment_host_url": None,
}
