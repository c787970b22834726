"""
Look up an expression: definition, phonetic and example sentences.
"""

import asyncio
import random
import sys

import httpx
from rich import print_json
from rich.console import Console
from rich.markup import escape

from ankore.cli import client
from ankore.core.cache import LookupCache
from ankore.core.errors import AnkoreError
from ankore.core.matcher import highlight
from ankore.core.sources import lookup

console = Console()


def add_subparser(subparsers):
    parser = subparsers.add_parser("lookup", help="Look up a word or expression")
    parser.add_argument("expression", help="Word or expression, e.g. 'give up'")
    parser.add_argument("-m", "--mode", choices=["normal", "precise"], help="Meaning mode")
    parser.add_argument("--seed", type=int, help="Seed for the sentence pick")
    parser.add_argument("--json", action="store_true", help="Print the raw result as JSON")
    parser.add_argument("--remote", action="store_true", help="Resolve through the HTTP API")
    parser.set_defaults(func=run_lookup)


def open_cache(settings) -> LookupCache | None:
    if not settings.redis_url:
        return None
    return LookupCache.from_url(settings.redis_url, ttl=settings.cache_ttl)


def accent(text: str) -> str:
    return f"[bold cyan]{text}[/bold cyan]"


def fetch_word_data(expression: str, mode: str, settings, seed: int | None = None) -> dict:
    rng = random.Random(seed)
    data = asyncio.run(lookup(
        expression,
        mode=mode,
        cache=open_cache(settings),
        rng=rng,
        timeout=settings.http_timeout,
    ))
    return data.to_dict()


def print_word_data(data: dict):
    expression = data["expression"]
    console.print(f"[bold]{escape(expression)}[/bold]  [dim]{escape(data['phonetic'])}[/dim]")
    console.print(f"Meaning: {escape(data['definition'])} [dim]({data['meaning_confidence']})[/dim]")
    console.print(f"Sentence: {highlight(escape(data['sentence']), expression, accent)}")

    others = [m for m in data["meaning_candidates"] if m != data["definition"]]
    if others:
        console.print("[dim]Other meanings:[/dim]")
        for m in others:
            console.print(f"  [dim]- {escape(m)}[/dim]")

    console.print(f"[dim]{len(data['sentence_candidates'])} sentence candidates[/dim]")


def run_lookup(args, settings):
    mode = args.mode or settings.meaning_mode.value

    try:
        if args.remote:
            data = client.lookup(args.expression, mode, base_url=settings.api_url)
        else:
            data = fetch_word_data(args.expression, mode, settings, args.seed)
    except AnkoreError as e:
        console.print(f"[red]✗ {escape(str(e))}[/red]")
        sys.exit(1)
    except httpx.HTTPError as e:
        console.print(f"[red]✗ Error: {escape(str(e))}[/red]")
        sys.exit(1)

    if args.json:
        print_json(data=data)
    else:
        print_word_data(data)
