import logging
import traceback

import discord
from discord.ext import commands

import bonsai as bonsai_global

startup_extensions = (
    'bonsai.plant.tree_cog',
)


class BonsaiBot(commands.Bot):

    def __init__(self, **kwargs):
        self.debug = bonsai_global.config.get('debug', False)
        allowed_mentions = discord.AllowedMentions(roles=False, everyone=False, users=True)
        intents = discord.Intents(
            guilds=True,
            messages=True,
            message_content=True,
        )
        super().__init__(
            command_prefix='&' if not self.debug else '$',
            intents=intents,
            case_insensitive=True,
            allowed_mentions=allowed_mentions,
            **kwargs,
        )

    async def setup_hook(self) -> None:
        for extension in startup_extensions:
            try:
                await self.load_extension(extension)
            except (discord.ClientException, commands.ExtensionError):
                logging.warning('Failed to load extension {0}.'.format(extension))
                traceback.print_exc()

    def run(self):
        super().run(bonsai_global.config['bot_token'], reconnect=True, log_handler=None)

    async def on_ready(self):
        logging.info('Ready as {0}!'.format(self.user))

    async def on_command_error(self, ctx, error, *, raise_err=True):
        if isinstance(error, commands.CommandNotFound):
            return
        if isinstance(error, commands.CheckFailure):
            return
        if isinstance(error, (commands.BadArgument, commands.MissingRequiredArgument)):
            await ctx.send(str(error), ephemeral=True)
            return
        if raise_err:
            raise error

    async def process_commands(self, message):
        if message.author.bot:
            return
        await super().process_commands(message)
