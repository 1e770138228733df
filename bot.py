# bot.py

"""Discord bot exposing the meal report and the novelty lookups.

Commands (prefix `!`):
    !meals [id] [date]   meals for one canteen, or the configured defaults
    !near <location>     meals for every canteen matching a location
    !meme                a random meme link
    !fact / !dailyfact   a random fact / the fact of the day
"""

import asyncio
import io
import logging
import os
from typing import Sequence

import discord
from discord.ext import commands
from dotenv import dotenv_values

import canteen_data
import facts
import meme
from config import Configs
from dates import TODAY, normalize_date
from errors import BotTokenError, MensaError, ServiceError
from report import render_meals
from resolver import ByLocation, Selection, resolve_canteens, selection_from_inputs

_logger = logging.getLogger(__name__)

TOKEN_VAR = "DISCORD_TOKEN"
COMMAND_PREFIX = "!"
# Discord rejects messages over 2000 characters; leave room for the code fence
MESSAGE_LIMIT = 1900


def _token_from_env_file(path: str) -> str:
    token = dotenv_values(path).get(TOKEN_VAR) or os.environ.get(TOKEN_VAR)
    if not token:
        raise BotTokenError(f'Could not find "{TOKEN_VAR}" in .env file')
    return token


def get_bot_token(token: str | None = None, env_file: str | None = None) -> str:
    """Pick the bot token from --env-file, --token or ./.env, in that order."""
    if token is None and env_file is None:
        if not os.path.exists(".env"):
            raise BotTokenError("Please provide a Discord Token either as a parameter or in a .env file")
        return _token_from_env_file(".env")

    if env_file is not None:
        if not os.path.exists(env_file):
            raise BotTokenError(f"Wrong path passed to arg: {env_file}")
        return _token_from_env_file(env_file)

    return token


def parse_meals_args(args: Sequence[str]) -> tuple[int | None, str]:
    """`!meals` arguments: an optional numeric canteen id, then an optional date."""
    canteen_id = None
    date_token = TODAY
    rest = list(args)
    if rest and rest[0].isdigit():
        canteen_id = int(rest.pop(0))
    if rest:
        date_token = rest.pop(0)
    return canteen_id, date_token


def build_meals_report(selection: Selection, date_token: str, defaults: Sequence[int], directory=canteen_data) -> str:
    """Run the report pipeline and return what it would print."""
    day = normalize_date(date_token)
    canteens = resolve_canteens(selection, defaults, directory)
    buf = io.StringIO()
    render_meals(canteens, day, directory, out=buf)
    return buf.getvalue()


def chunk_message(text: str, limit: int = MESSAGE_LIMIT) -> list[str]:
    """Split text on line boundaries into pieces of at most `limit` characters."""
    chunks: list[str] = []
    current = ""
    for line in text.splitlines():
        while len(line) > limit:
            if current:
                chunks.append(current)
                current = ""
            chunks.append(line[:limit])
            line = line[limit:]
        candidate = f"{current}\n{line}" if current else line
        if len(candidate) > limit:
            chunks.append(current)
            current = line
        else:
            current = candidate
    if current:
        chunks.append(current)
    return chunks


async def _send_report(ctx, selection: Selection, date_token: str, defaults: Sequence[int]):
    try:
        text = await asyncio.to_thread(build_meals_report, selection, date_token, defaults)
    except MensaError as e:
        _logger.error("%s", e)
        await ctx.send(str(e))
        return
    if not text.strip():
        await ctx.send("No canteens found.")
        return
    for chunk in chunk_message(text):
        await ctx.send(f"```\n{chunk}\n```")


def create_bot(configs: Configs) -> commands.Bot:
    intents = discord.Intents.default()
    intents.message_content = True
    bot = commands.Bot(command_prefix=COMMAND_PREFIX, intents=intents)

    @bot.event
    async def on_ready():
        _logger.info("Logged in as %s", bot.user)

    @bot.command(name="meals")
    async def meals_command(ctx, *args):
        canteen_id, date_token = parse_meals_args(args)
        await _send_report(ctx, selection_from_inputs(canteen_id=canteen_id), date_token, configs.canteens)

    @bot.command(name="near")
    async def near_command(ctx, *args):
        if not args:
            await ctx.send(f"Usage: {COMMAND_PREFIX}near <location>")
            return
        await _send_report(ctx, ByLocation(" ".join(args)), TODAY, configs.canteens)

    @bot.command(name="meme")
    async def meme_command(ctx):
        try:
            result = await asyncio.to_thread(meme.get_meme)
        except ServiceError as e:
            _logger.error("%s", e)
            await ctx.send("Could not fetch a meme.")
            return
        await ctx.send(result.url)

    @bot.command(name="fact")
    async def fact_command(ctx):
        try:
            result = await asyncio.to_thread(facts.get_random_fact)
        except ServiceError as e:
            _logger.error("%s", e)
            await ctx.send("Could not fetch a fact.")
            return
        await ctx.send(result.text)

    @bot.command(name="dailyfact")
    async def daily_fact_command(ctx):
        try:
            result = await asyncio.to_thread(facts.get_daily_fact)
        except ServiceError as e:
            _logger.error("%s", e)
            await ctx.send("Could not fetch the daily fact.")
            return
        await ctx.send(result.text)

    return bot


def run_bot(token: str, configs: Configs) -> None:
    """Block until the bot disconnects."""
    bot = create_bot(configs)
    # logging is already configured by the CLI
    bot.run(token, log_handler=None)
