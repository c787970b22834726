"""
Build a flashcard for an expression and optionally export it.
"""

import asyncio
import sys

import httpx
from rich.console import Console
from rich.markup import escape

from ankore.cli import client
from ankore.cli.commands.lookup import fetch_word_data
from ankore.core.card import Card, build_card, validate_sentence, write_export
from ankore.core.errors import AnkoreError
from ankore.core.sources import translate_sentence

console = Console()


def add_subparser(subparsers):
    parser = subparsers.add_parser("card", help="Build a flashcard")
    parser.add_argument("expression", help="Word or expression")
    parser.add_argument("-s", "--sentence", help="Use this sentence instead of a suggested one")
    parser.add_argument("-m", "--mode", choices=["normal", "precise"], help="Meaning mode")
    parser.add_argument("--seed", type=int, help="Seed for the sentence pick")
    parser.add_argument("--translate", action="store_true", help="Add a literal pt-BR translation")
    parser.add_argument("--export", nargs="?", const="", metavar="DIR", help="Write a TSV import file")
    parser.add_argument("--remote", action="store_true", help="Build the card through the HTTP API")
    parser.set_defaults(func=run_card)


async def _translate(sentence: str, timeout: float) -> str:
    async with httpx.AsyncClient(timeout=timeout) as http:
        return await translate_sentence(sentence, http)


def _translation(args, sentence: str, settings) -> str | None:
    if not args.translate:
        return None
    try:
        return asyncio.run(_translate(sentence, settings.http_timeout))
    except AnkoreError as e:
        console.print(f"[yellow]Translation skipped: {escape(str(e))}[/yellow]")
        return None


def _remote_card(args, mode, settings) -> Card:
    data = client.lookup(args.expression, mode, base_url=settings.api_url)
    sentence = args.sentence.strip() if args.sentence else data["sentence"]
    created = client.create_card(
        data["expression"],
        sentence,
        data["definition"],
        data["phonetic"],
        literal_translation=_translation(args, sentence, settings),
        base_url=settings.api_url,
    )
    return Card(**created)


def _local_card(args, mode, settings) -> Card:
    data = fetch_word_data(args.expression, mode, settings, args.seed)
    sentence = data["sentence"]
    if args.sentence:
        sentence = validate_sentence(args.sentence, data["expression"])

    translation = _translation(args, sentence, settings)
    return build_card(sentence, data["expression"], data["definition"], data["phonetic"], translation)


def run_card(args, settings):
    mode = args.mode or settings.meaning_mode.value

    try:
        if args.remote:
            card = _remote_card(args, mode, settings)
        else:
            card = _local_card(args, mode, settings)
    except AnkoreError as e:
        console.print(f"[red]✗ {escape(str(e))}[/red]")
        sys.exit(1)
    except httpx.HTTPError as e:
        console.print(f"[red]✗ Error: {escape(str(e))}[/red]")
        sys.exit(1)

    console.print(f"[bold]Front:[/bold] {escape(card.front)}")
    console.print(f"[bold]Back:[/bold]  {escape(card.back)}")

    if args.export is not None:
        directory = args.export or settings.export_dir
        path = write_export([card], directory)
        console.print(f"[dim]Wrote {path}[/dim]")
