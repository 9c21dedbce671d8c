"""Extensions providing the bot's built-in commands. Each extension module
defines a `setup(bot)` coroutine that registers its commands.
"""
