"""
Check whether a sentence contains an expression.
"""

import sys

from rich.console import Console
from rich.markup import escape

from ankore.cli import client
from ankore.cli.commands.lookup import accent
from ankore.core.matcher import build_verb_forms, classify_expression, contains_expression, highlight, tokenize_expression

console = Console()


def add_subparser(subparsers):
    parser = subparsers.add_parser("match", help="Test an expression against a sentence")
    parser.add_argument("expression", help="Word or expression")
    parser.add_argument("sentence", help="Sentence to search")
    parser.add_argument("--forms", action="store_true", help="Show the verb forms tried")
    parser.add_argument("--remote", action="store_true", help="Match through the HTTP API")
    parser.set_defaults(func=run_match)


def run_match(args, settings):
    tokens = tokenize_expression(args.expression)
    kind = classify_expression(tokens)

    if args.forms and tokens:
        console.print(f"[dim]{kind.value}: {', '.join(build_verb_forms(tokens[0]))}[/dim]")

    if args.remote:
        result = client.match(args.expression, args.sentence, base_url=settings.api_url)
        matches = result["matches"]
    else:
        matches = contains_expression(args.sentence, args.expression)

    if not matches:
        console.print(f"[red]✗ No match for {escape(args.expression)!r}[/red]")
        sys.exit(1)

    console.print(f"✓ {highlight(escape(args.sentence), args.expression, accent)}")
