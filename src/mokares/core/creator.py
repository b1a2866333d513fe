"""Creation of new resource files from collected metadata."""

import logging
from pathlib import Path

from mokares.core.models import Article, ArticleMetadata, Cheatsheet, CheatsheetMetadata, Resource

logger = logging.getLogger(__name__)


def _write_new(resource: Resource, directory: Path) -> Path:
    path = directory / f"{resource.slug}.md"
    # "x" mode refuses to clobber an existing resource
    with path.open("x", encoding="utf-8") as fh:
        fh.write(resource.to_markdown())
    logger.info("Created %s", path)
    return path


def create_article(metadata: ArticleMetadata, directory: Path = Path(".")) -> Path:
    """Write a new article stub named after its slug.

    Raises FileExistsError if the file is already there.
    """
    article = Article(metadata=metadata, content=f"## {metadata.title}")
    return _write_new(article, directory)


def create_cheatsheet(metadata: CheatsheetMetadata, directory: Path = Path(".")) -> Path:
    """Write a new cheatsheet stub named after its slug.

    Raises FileExistsError if the file is already there.
    """
    cheatsheet = Cheatsheet(metadata=metadata, content=f"## {metadata.title}")
    return _write_new(cheatsheet, directory)
