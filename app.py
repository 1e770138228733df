# app.py

"""Command line entry point: print canteen meals, memes and facts, or run the bot."""

import argparse
import logging
import sys
from typing import Sequence

import canteen_data
import config
import facts
import meme
from dates import TODAY, normalize_date
from errors import MensaError, ServiceError
from report import render_meals
from resolver import Default, resolve_canteens, selection_from_inputs

_logger = logging.getLogger(__name__)


def _parse_args(argv: Sequence[str] | None = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(
        prog="mensabot",
        description="Show today's canteen meals from OpenMensa.",
    )
    # --id and --location are checked by the resolver, not by argparse
    parser.add_argument("-i", "--id", type=int, help="Canteen id to show meals for.")
    parser.add_argument("-l", "--location", help="Show meals for all canteens in this location.")
    parser.add_argument("-d", "--date", default=TODAY, help="Date as YYYY-MM-DD or 'today' (default).")
    parser.add_argument("-c", "--config", default=None, help=f"Config file (default {config.CONFIG_PATH}).")
    parser.add_argument("--meme", action="store_true", help="Print a random meme link.")
    parser.add_argument("--daily-fact", action="store_true", help="Print the useless fact of the day.")
    parser.add_argument("--random-fact", action="store_true", help="Print a random useless fact.")
    parser.add_argument("--discord-bot", action="store_true", help="Run the Discord bot.")
    parser.add_argument("-t", "--token", help="Discord bot token.")
    parser.add_argument("-e", "--env-file", help="dotenv file containing DISCORD_TOKEN.")
    parser.add_argument("-v", "--verbose", action="store_true", help="Enable debug logging.")
    return parser.parse_args(argv)


def _setup_logging(verbose: bool) -> None:
    level = logging.DEBUG if verbose else getattr(logging, config.LOG_LEVEL)
    logging.basicConfig(level=level, format=config.LOG_FORMAT, stream=sys.stderr)


def _run_bot(args: argparse.Namespace) -> int:
    # discord.py is only imported when the bot is actually started
    import bot

    try:
        token = bot.get_bot_token(args.token, args.env_file)
        configs = config.load_config(args.config)
    except MensaError as exc:
        _logger.error("%s", exc)
        return 1
    bot.run_bot(token, configs)
    return 0


def _print_meme() -> int:
    try:
        print(meme.get_meme().url)
    except ServiceError as exc:
        _logger.error("%s", exc)
    return 0


def _print_fact(daily: bool) -> int:
    try:
        fact = facts.get_daily_fact() if daily else facts.get_random_fact()
        print(fact.text)
    except ServiceError as exc:
        _logger.error("%s", exc)
    return 0


def run_report(
    canteen_id: int | None,
    location: str | None,
    date_token: str,
    config_path: str | None = None,
    directory=canteen_data,
) -> int:
    """Resolve the canteens, then print their meals for the requested date."""
    try:
        selection = selection_from_inputs(canteen_id, location)
        day = normalize_date(date_token)
        defaults = config.load_config(config_path).canteens if isinstance(selection, Default) else ()
        canteens = resolve_canteens(selection, defaults, directory)
        render_meals(canteens, day, directory)
    except MensaError as exc:
        _logger.error("%s", exc)
        return 1
    return 0


def main(argv: Sequence[str] | None = None) -> int:
    args = _parse_args(argv)
    _setup_logging(args.verbose)

    if args.discord_bot:
        return _run_bot(args)
    if args.meme:
        return _print_meme()
    if args.daily_fact:
        return _print_fact(daily=True)
    if args.random_fact:
        return _print_fact(daily=False)
    return run_report(args.id, args.location, args.date, args.config)


if __name__ == "__main__":
    sys.exit(main())
