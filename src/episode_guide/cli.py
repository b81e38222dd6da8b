"""CLI interface for episode-guide."""

from __future__ import annotations

import argparse
import logging
import sys
from pathlib import Path

import questionary
from questionary import Style
from rich.console import Console
from rich.markup import escape

from . import __version__, catalog, config, search
from .theme import get_theme, set_theme, theme_names

console = Console(highlight=False)

logger = logging.getLogger(__name__)

custom_style = Style(
    [
        ("qmark", "fg:cyan bold"),
        ("question", "fg:white bold"),
        ("answer", "fg:cyan"),
        ("pointer", "fg:cyan bold"),
        ("highlighted", "fg:cyan bold"),
        ("instruction", "fg:gray"),
    ]
)


def setup_logging(cfg: dict, debug: bool = False) -> None:
    """Log to a file in debug mode so output never lands on the live screen."""
    if debug or config.is_debug_enabled(cfg):
        log_path = config.get_log_path(cfg)
        log_path.parent.mkdir(parents=True, exist_ok=True)
        logging.basicConfig(
            filename=log_path,
            level=logging.DEBUG,
            format="%(asctime)s %(levelname)s %(name)s: %(message)s",
        )
    else:
        logging.basicConfig(level=logging.WARNING, format="%(levelname)s: %(message)s")


def _resolve_paths(args, cfg: dict) -> tuple[Path, Path]:
    episodes = Path(args.episodes).expanduser() if args.episodes else config.get_episodes_path(cfg)
    standalone = (
        Path(args.standalone).expanduser() if args.standalone else config.get_standalone_path(cfg)
    )
    return episodes, standalone


def _load_catalog(args, cfg: dict) -> catalog.CatalogStore:
    """Load the catalog or exit(1) on malformed files."""
    episodes, standalone = _resolve_paths(args, cfg)
    logger.debug("Catalog paths: episodes=%s standalone=%s", episodes, standalone)
    try:
        return catalog.load_or_default(
            episodes,
            standalone,
            write_defaults=bool(cfg.get("write_defaults", False)),
        )
    except catalog.CatalogFormatError as e:
        theme = get_theme()
        console.print(f"[{theme.error_rich}]Error:[/{theme.error_rich}] {escape(str(e))}")
        sys.exit(1)


def cmd_browse(args, cfg: dict) -> None:
    """Run the interactive browser."""
    from .app import run_browser

    store = _load_catalog(args, cfg)
    run_browser(store, console=console)


def cmd_init(args, cfg: dict) -> None:
    """Write the default catalog to the configured paths."""
    episodes, standalone = _resolve_paths(args, cfg)

    existing = [p for p in (episodes, standalone) if p.exists()]
    if existing and not args.force:
        names = ", ".join(str(p) for p in existing)
        overwrite = questionary.confirm(
            f"Catalog already exists ({names}). Overwrite?",
            default=False,
            style=custom_style,
        ).ask()
        if not overwrite:
            console.print("[dim]Left existing catalog untouched.[/dim]")
            return

    catalog.save(catalog.default_catalog(), episodes, standalone)
    theme = get_theme()
    console.print(f"  [{theme.success_rich}]✓[/{theme.success_rich}] Wrote {escape(str(episodes))}")
    console.print(f"  [{theme.success_rich}]✓[/{theme.success_rich}] Wrote {escape(str(standalone))}")


def cmd_search(args, cfg: dict) -> None:
    """Print search results without entering the browser."""
    store = _load_catalog(args, cfg)
    results = search.execute(args.query, store)
    if not results:
        console.print(f"[dim]No matches for '{escape(args.query)}'.[/dim]")
        return

    theme = get_theme()
    for result in results:
        console.print(
            f"[{theme.success_rich}]{escape('[' + result.kind + ']')}[/{theme.success_rich}] "
            f"{escape(result.title)}"
        )


def build_parser() -> argparse.ArgumentParser:
    """Build the CLI argument parser."""
    parser = argparse.ArgumentParser(
        prog="episode-guide",
        description="episode-guide: browse series episodes and movies in the terminal",
        formatter_class=argparse.RawDescriptionHelpFormatter,
    )
    parser.add_argument("--version", action="version", version=f"episode-guide {__version__}")
    parser.add_argument("--episodes", help="Episodes JSON file (default: from config)")
    parser.add_argument("--standalone", help="Standalone/movies JSON file (default: from config)")
    parser.add_argument("--config", help="Config file (default: ~/.config/episode-guide/config.yaml)")
    parser.add_argument("--theme", choices=theme_names(), help="Color theme")
    parser.add_argument("--debug", action="store_true", help="Write debug log to the log file")

    subparsers = parser.add_subparsers(dest="command")

    init_p = subparsers.add_parser("init", help="Write the default catalog files")
    init_p.add_argument("--force", action="store_true", help="Overwrite existing files")
    init_p.set_defaults(func=cmd_init)

    search_p = subparsers.add_parser("search", help="Search titles and descriptions")
    search_p.add_argument("query", help="Case-insensitive substring to look for")
    search_p.set_defaults(func=cmd_search)

    return parser


def main(argv: list[str] | None = None) -> None:
    """Main entry point."""
    parser = build_parser()
    args = parser.parse_args(argv)

    cfg = config.load_config(Path(args.config).expanduser() if args.config else None)
    setup_logging(cfg, debug=args.debug)
    set_theme(args.theme or cfg.get("theme"))

    try:
        if args.command is None:
            cmd_browse(args, cfg)
        else:
            args.func(args, cfg)
    except KeyboardInterrupt:
        print()
        sys.exit(130)


if __name__ == "__main__":
    main()
