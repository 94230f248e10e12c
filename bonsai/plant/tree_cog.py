import asyncio
import io
import random
from typing import Optional

import discord
from discord.ext import commands

import bonsai as bonsai_global
from bonsai.plant.branch import ConfigError, GrowthConfig
from bonsai.plant.growth import GrowthEngine
from bonsai.util import base
from bonsai.util.canvas import Canvas

MESSAGE_LIMIT = 2000

MAX_LIFE = 200
MAX_MULTIPLIER = 20


def parse_leaves(leaves: str) -> list[str]:
    return [leaf for leaf in leaves.split(',') if leaf.strip()]


def grow(config: GrowthConfig, width: int, height: int, base_type: int = 2) -> Canvas:
    """Grows a whole tree at once and returns it sitting in its pot."""
    _, base_height = base.size(base_type)
    tree = Canvas(width, height - base_height)
    GrowthEngine(config, random.Random(config.seed), tree).grow_tree()
    screen = Canvas(width, height)
    screen.blit(tree, 0, 0)
    base.draw(screen, base_type)
    return screen


def format_tree(screen: Canvas, seed: int) -> Optional[str]:
    """
    Wraps the tree in a code block. Discord only knows the basic 8 colors so
    bright colors are dropped, and color is given up entirely if it doesn't fit.
    """
    footer = '\nSeed: `{0}`'.format(seed)
    colored = '```ansi\n{0}\n```'.format(screen.render(allow_bright=False, trim=True))
    if len(colored) + len(footer) <= MESSAGE_LIMIT:
        return colored + footer
    plain = '```\n{0}\n```'.format(screen.render(color=False, trim=True))
    if len(plain) + len(footer) <= MESSAGE_LIMIT:
        return plain + footer
    return None


class Bonsai(commands.Cog):

    def __init__(self, bot):
        self.bot = bot
        options = bonsai_global.config.section('discord')
        self.width = options.get('width', 48)
        self.height = options.get('height', 22)
        self.base_type = options.get('base', 2)

    @commands.hybrid_command(name='bonsai', description='Grow a bonsai tree')
    async def bonsai_command(
            self,
            ctx: commands.Context,
            seed: Optional[int] = None,
            life: int = 32,
            multiplier: int = 5,
            *,
            leaves: str = '&',
    ):
        if seed is None:
            seed = random.randint(1, 2 ** 31 - 1)
        if not 0 <= life <= MAX_LIFE or not 1 <= multiplier <= MAX_MULTIPLIER:
            await ctx.send('Life has to be 0-{0} and multiplier 1-{1}.'.format(MAX_LIFE, MAX_MULTIPLIER), ephemeral=True)
            return
        config = GrowthConfig(life_start=life, multiplier=multiplier, leaves=parse_leaves(leaves), seed=seed)
        try:
            config.validate()
        except ConfigError as error:
            await ctx.send('Could not grow that tree: {0}'.format(error), ephemeral=True)
            return
        async with ctx.typing():
            screen = await asyncio.to_thread(grow, config, self.width, self.height, self.base_type)
        content = format_tree(screen, seed)
        if content is not None:
            await ctx.send(content)
            return
        file = discord.File(io.BytesIO(screen.render(color=False, trim=True).encode('utf-8')), filename='bonsai.txt')
        await ctx.send('Seed: `{0}`'.format(seed), file=file)


async def setup(bot):
    await bot.add_cog(Bonsai(bot))
