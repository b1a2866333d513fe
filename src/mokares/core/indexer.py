"""README indexer: scan resource roots, parse, and render the index."""

import errno
import logging
import os
import tomllib
from pathlib import Path

from pydantic import ValidationError

from mokares.config import settings
from mokares.core.guides import build_guides
from mokares.core.models import Article, Cheatsheet, Guide, IndexerConfig
from mokares.core.render import render_index
from mokares.core.scanner import scan_child_directory_names, scan_files_recursive

logger = logging.getLogger(__name__)


def load(path: Path | None = None) -> IndexerConfig:
    """Read the persisted indexer configuration.

    Any failure to read or decode the file yields the default
    configuration instead of an error.
    """
    path = path or settings.config_file
    try:
        data = tomllib.loads(path.read_text(encoding="utf-8"))
        config = IndexerConfig.model_validate(data)
    except FileNotFoundError:
        logger.info("No %s found, using default configuration", path)
        return IndexerConfig()
    except (OSError, UnicodeDecodeError, tomllib.TOMLDecodeError, ValidationError) as exc:
        logger.warning("Could not load %s, using default configuration: %s", path, exc)
        return IndexerConfig()
    logger.info("Loaded indexer configuration from %s", path)
    return config


def initialize_default(path: Path | None = None) -> Path:
    """Write the default configuration, replacing any existing file."""
    path = path or settings.config_file
    path.write_text(IndexerConfig().to_toml(), encoding="utf-8")
    logger.info("Wrote default configuration to %s", path)
    return path


def _require(path: Path | None, key: str) -> Path:
    if path is None:
        raise FileNotFoundError(errno.ENOENT, f"`{key}` path is not set in the indexer configuration")
    return path


def _write_atomic(path: Path, data: str) -> None:
    """Replace path with data without leaving a half-written file."""
    tmp = path.with_name(path.name + ".tmp")
    try:
        tmp.write_text(data, encoding="utf-8")
        os.replace(tmp, path)
    except OSError:
        tmp.unlink(missing_ok=True)
        raise


class Indexer:
    """Builds the README index for one configuration."""

    def __init__(
        self,
        config: IndexerConfig,
        *,
        sort_entries: bool | None = None,
        quote_paths: bool | None = None,
        guide_base_url: str | None = None,
    ):
        self.config = config
        self.sort_entries = settings.sort_entries if sort_entries is None else sort_entries
        self.quote_paths = settings.quote_paths if quote_paths is None else quote_paths
        self.guide_base_url = guide_base_url

    async def articles(self) -> list[tuple[Article, Path]]:
        root = _require(self.config.article_root, "article")
        raw = await scan_files_recursive(root)
        articles = [(Article.parse(content), path) for content, path in raw]
        if self.sort_entries:
            articles.sort(key=lambda pair: pair[1])
        return articles

    async def cheatsheets(self) -> list[tuple[Cheatsheet, Path]]:
        root = _require(self.config.cheatsheet_root, "cheatsheet")
        raw = await scan_files_recursive(root)
        cheatsheets = [(Cheatsheet.parse(content), path) for content, path in raw]
        if self.sort_entries:
            cheatsheets.sort(key=lambda pair: pair[1])
        return cheatsheets

    async def guides(self) -> list[Guide]:
        root = _require(self.config.guide_root, "guide")
        names = await scan_child_directory_names(root)
        if self.sort_entries:
            names.sort()
        return build_guides(names, self.guide_base_url)

    async def build_index_document(self) -> str:
        """Scan every root and render the complete README text."""
        articles = await self.articles()
        cheatsheets = await self.cheatsheets()
        guides = await self.guides()
        logger.info(
            "Indexed %d articles, %d cheatsheets, %d guides",
            len(articles),
            len(cheatsheets),
            len(guides),
        )
        return render_index(
            self.config.readme_conf,
            articles,
            cheatsheets,
            guides,
            quote_paths=self.quote_paths,
        )

    async def write_index_document(self) -> Path:
        """Build the README and overwrite the configured file with it."""
        readme = _require(self.config.readme_path, "readme")
        data = await self.build_index_document()
        _write_atomic(readme, data)
        logger.info("README written to %s", readme)
        return readme


async def build_index_document(config: IndexerConfig) -> str:
    return await Indexer(config).build_index_document()


async def write_index_document(config: IndexerConfig) -> Path:
    return await Indexer(config).write_index_document()
