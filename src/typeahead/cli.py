"""
Command-line interface for typeahead.
"""

from __future__ import annotations

import argparse
import json
import sys
from pathlib import Path

import yaml
from rich.console import Console
from rich.markup import escape
from rich.table import Table

from typeahead.app import start
from typeahead.config import CONFIG_SEARCH_PATHS, DICTIONARY_ENV, TypeaheadConfig
from typeahead.dictionary import build_trie, load_words
from typeahead.errors import StartupError
from typeahead.logging import setup_logging

console = Console()


def main(argv: list[str] | None = None) -> None:
    """Main CLI entry point."""
    parser = argparse.ArgumentParser(
        description="Terminal word completion with a frequency-ranked trie",
        prog="typeahead",
    )

    parser.add_argument(
        "-v",
        "--verbose",
        action="store_true",
        help="Enable verbose output (debug logging)",
    )
    parser.add_argument(
        "-c",
        "--config",
        help="Config file (default: search typeahead.yaml, ~/.config/typeahead/config.yaml)",
    )

    subparsers = parser.add_subparsers(dest="command", help="Commands")

    # Run command
    run_parser = subparsers.add_parser("run", help="Start an interactive typing session")
    run_parser.add_argument("-d", "--dict", dest="dictionary", help="Seed dictionary file")
    run_parser.add_argument("--log-file", help="Write logs to this file")

    # Suggest command
    suggest_parser = subparsers.add_parser("suggest", help="Show ranked completions for a prefix")
    suggest_parser.add_argument("prefix", help="Word prefix")
    suggest_parser.add_argument("-d", "--dict", dest="dictionary", help="Seed dictionary file")
    suggest_parser.add_argument(
        "--json",
        action="store_true",
        help="Output as JSON",
    )

    # Config command with subcommands
    config_parser = subparsers.add_parser("config", help="Configuration management")
    config_subparsers = config_parser.add_subparsers(dest="config_command", help="Config commands")
    config_subparsers.add_parser("show", help="Show effective configuration")
    config_init_parser = config_subparsers.add_parser("init", help="Write a default config file")
    config_init_parser.add_argument(
        "-o",
        "--output",
        default="typeahead.yaml",
        help="Output file path",
    )
    config_subparsers.add_parser("path", help="Show config file search paths")

    args = parser.parse_args(argv)

    if args.command == "run":
        cmd_run(args)
    elif args.command == "suggest":
        cmd_suggest(args)
    elif args.command == "config":
        cmd_config(args)
    else:
        parser.print_help()


def _load_config(args: argparse.Namespace) -> TypeaheadConfig:
    """Effective config for *args*, with command-line overrides applied."""
    try:
        config, _ = TypeaheadConfig.load(getattr(args, "config", None))
    except (OSError, ValueError, yaml.YAMLError) as e:
        console.print(f"[red]Failed to load config: {e}[/red]")
        sys.exit(1)
    if getattr(args, "dictionary", None):
        config.dictionary_path = Path(args.dictionary)
    if getattr(args, "log_file", None):
        config.log_file = Path(args.log_file)
    if getattr(args, "verbose", False):
        config.log_level = "DEBUG"
    return config


def cmd_run(args: argparse.Namespace) -> None:
    """Start an interactive session."""
    config = _load_config(args)
    # The session owns the terminal: only log to a file while it runs.
    setup_logging(
        config.log_level,
        stream=False,
        file=str(config.log_file) if config.log_file else None,
    )

    console.print("[bold]START TYPING[/bold]  [dim](Tab: next suggestion, Enter: accept, Esc: quit)[/dim]")
    try:
        session = start(config)
    except StartupError as e:
        console.print(f"[red]{e}[/red]")
        sys.exit(1)

    stats = session.stats
    console.print()
    console.print(
        f"[dim]{stats.keystrokes} keys, {stats.commits} completions accepted, "
        f"{stats.words_learned} words learned[/dim]"
    )


def cmd_suggest(args: argparse.Namespace) -> None:
    """Print the ranked completions for a prefix."""
    config = _load_config(args)
    setup_logging(config.log_level)

    try:
        trie = build_trie(load_words(config.dictionary_path))
    except StartupError as e:
        console.print(f"[red]{e}[/red]")
        sys.exit(1)

    candidates = trie.query(args.prefix)

    if args.json:
        data = [
            {"word": args.prefix + c.text, "suffix": c.text, "count": c.count}
            for c in candidates
        ]
        console.print_json(json.dumps(data))
        return

    if not candidates:
        console.print(f"[dim]No completions for {escape(repr(args.prefix))}[/dim]")
        return

    table = Table(title=f"Completions for {escape(repr(args.prefix))}")
    table.add_column("#", style="dim", justify="right")
    table.add_column("Word", style="cyan")
    table.add_column("Count", justify="right")
    for i, c in enumerate(candidates):
        table.add_row(str(i), f"{escape(args.prefix)}[bold]{escape(c.text)}[/bold]", str(c.count))
    console.print(table)


def cmd_config(args: argparse.Namespace) -> None:
    """Configuration management commands."""
    if args.config_command == "show":
        _config_show(args)
    elif args.config_command == "init":
        _config_init(args.output)
    elif args.config_command == "path":
        _config_path()
    else:
        console.print("[yellow]Usage: typeahead config <show|init|path>[/yellow]")


def _config_show(args: argparse.Namespace) -> None:
    try:
        config, loaded_from = TypeaheadConfig.load(getattr(args, "config", None))
    except (OSError, ValueError, yaml.YAMLError) as e:
        console.print(f"[red]Failed to load config: {e}[/red]")
        sys.exit(1)

    if loaded_from is None:
        console.print("[dim]No config file found. Using defaults.[/dim]")
    else:
        console.print(f"[dim]Loaded from: {loaded_from}[/dim]\n")

    console.print("[bold]Current Configuration:[/bold]\n")
    console.print(yaml.dump(config.to_dict(), default_flow_style=False, sort_keys=False))


def _config_init(output: str) -> None:
    output_path = Path(output)

    if output_path.exists():
        console.print(f"[red]File already exists: {output_path}[/red]")
        sys.exit(1)

    with open(output_path, "w", encoding="utf-8") as f:
        yaml.dump(TypeaheadConfig().to_dict(), f, default_flow_style=False, sort_keys=False)

    console.print(f"[green]Created config file: {output_path}[/green]")


def _config_path() -> None:
    console.print("[bold]Config file search paths:[/bold]\n")

    for path in CONFIG_SEARCH_PATHS:
        resolved = path.expanduser()
        exists = "[green]✓[/green]" if resolved.is_file() else "[dim]·[/dim]"
        console.print(f"  {exists} {resolved}")

    console.print(f"\n[dim]{DICTIONARY_ENV} overrides the dictionary path.[/dim]")


if __name__ == "__main__":
    main()
