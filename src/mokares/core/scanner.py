"""Directory traversal for resource files and guide projects.

Results come back in filesystem listing order; callers that need a stable
order sort them.
"""

import asyncio
import logging
from pathlib import Path

logger = logging.getLogger(__name__)

MARKDOWN_SUFFIX = ".md"
VCS_DIRECTORIES = frozenset({".git"})


def _walk_markdown(directory: Path, is_root: bool = False) -> list[Path]:
    """Collect markdown files below directory.

    An unreadable root raises OSError; unreadable subdirectories are
    logged and skipped.
    """
    try:
        entries = list(directory.iterdir())
    except OSError:
        if is_root:
            raise
        logger.warning("Skipping unreadable directory %s", directory)
        return []

    files = []
    for entry in entries:
        if entry.is_dir() and not entry.is_symlink():
            files.extend(_walk_markdown(entry))
        elif entry.is_file() and entry.suffix == MARKDOWN_SUFFIX:
            files.append(entry)
    return files


def _read(path: Path) -> str:
    return path.read_text(encoding="utf-8", errors="replace")


async def scan_files_recursive(root: Path) -> list[tuple[str, Path]]:
    """Return (content, path) for every ``.md`` file under root.

    Files are read concurrently; results keep traversal order.
    """
    paths = await asyncio.to_thread(_walk_markdown, root, True)
    contents = await asyncio.gather(*(asyncio.to_thread(_read, path) for path in paths))
    logger.debug("Read %d markdown files under %s", len(paths), root)
    return list(zip(contents, paths))


async def scan_child_directory_names(root: Path) -> list[str]:
    """Return names of the immediate subdirectories of root.

    Version-control bookkeeping directories are excluded.
    """
    entries = await asyncio.to_thread(lambda: list(root.iterdir()))
    return [
        entry.name
        for entry in entries
        if entry.is_dir() and entry.name not in VCS_DIRECTORIES
    ]
