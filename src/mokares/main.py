"""MoKaRes command-line entry point."""

import argparse
import asyncio
import logging
import sys
from pathlib import Path

from mokares.config import settings
from mokares.core import indexer
from mokares.core.creator import create_article, create_cheatsheet
from mokares.core.models import ArticleMetadata, CheatsheetMetadata, Language

_LOGGER_NAME = "mokares"


def configure_logging(*, verbose: bool = False) -> logging.Logger:
    """Attach a console handler to the mokares logger hierarchy."""
    level = logging.DEBUG if verbose else logging.INFO
    logger = logging.getLogger(_LOGGER_NAME)
    logger.setLevel(level)
    logger.propagate = False

    # Reset handlers so repeated invocations don't duplicate output
    for handler in list(logger.handlers):
        logger.removeHandler(handler)

    handler = logging.StreamHandler()
    handler.setLevel(level)
    handler.setFormatter(logging.Formatter("[mokares] %(levelname)s %(message)s"))
    logger.addHandler(handler)
    return logger


def ask(message: str) -> str:
    """Print a prompt and return the trimmed answer line."""
    print(message)
    return sys.stdin.readline().strip()


def _new_article(directory: Path) -> Path:
    title = ask("Title:")
    description = ask("Description:")
    author = ask("Author:")
    tags = ask("Tags:")
    icon = ask("Icon:")
    metadata = ArticleMetadata.from_prompt(title, description, author, icon, tags)
    return create_article(metadata, directory)


def _new_cheatsheet(directory: Path) -> Path:
    title = ask("Title:")
    author = ask("Author:")
    level = ask("Level:")
    language = ask("Language:")
    icon = ask(f"Icon: (suggestion {Language.from_string(language).icon_suggestion()})")
    metadata = CheatsheetMetadata.from_prompt(title, author, level, language, icon)
    return create_cheatsheet(metadata, directory)


def _build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="mokares",
        description="A resources manager for MoKa Reads.",
    )
    parser.add_argument(
        "-v",
        "--verbose",
        action="store_true",
        help="Increase log verbosity for troubleshooting.",
    )
    subparsers = parser.add_subparsers(dest="command", required=True)

    new_parser = subparsers.add_parser("new", help="Create a new resource.")
    new_parser.add_argument("kind", choices=["article", "cheatsheet", "indexer"])
    new_parser.add_argument(
        "--dir",
        type=Path,
        default=Path("."),
        help="Directory to create the resource in (defaults to current directory).",
    )

    subparsers.add_parser(
        "build-indexer",
        help=f"Build the README from `{settings.config_file}`.",
    )
    subparsers.add_parser(
        "show-index",
        help="Print the README that build-indexer would write.",
    )
    return parser


def main(argv: list[str] | None = None) -> None:
    """CLI entrypoint for mokares commands."""
    parser = _build_parser()
    args = parser.parse_args(argv)

    configure_logging(verbose=bool(args.verbose) or settings.debug)

    try:
        if args.command == "new":
            if args.kind == "article":
                path = _new_article(args.dir)
            elif args.kind == "cheatsheet":
                path = _new_cheatsheet(args.dir)
            else:
                path = indexer.initialize_default()
            print(f"Created {path}")
        elif args.command == "build-indexer":
            config = indexer.load()
            path = asyncio.run(indexer.write_index_document(config))
            print(f"README written to {path}")
        elif args.command == "show-index":
            config = indexer.load()
            print(asyncio.run(indexer.build_index_document(config)))
    except FileExistsError as exc:
        parser.exit(1, f"File already exists: {exc.filename}\n")
    except ValueError as exc:
        parser.exit(1, f"Invalid input: {exc}\n")
    except OSError as exc:
        parser.exit(1, f"mokares {args.command} failed: {exc}\nRun with --verbose for more details.\n")


if __name__ == "__main__":
    main(sys.argv[1:])
