"""Frontmatter parsing shared by every resource kind.

A resource file is a YAML frontmatter block fenced by ``---`` lines, one
blank line, then the markdown body::

    ---
    title: Intro
    author: alice
    ---

    ## Intro

Parsing is lenient: a malformed header never raises, it degrades to the
fields that can be salvaged plus defaults.
"""

import logging
import re
import unicodedata
from typing import Any, TypeVar

import yaml
from pydantic import BaseModel, ValidationError

logger = logging.getLogger(__name__)

M = TypeVar("M", bound=BaseModel)

FRONTMATTER_PATTERN = re.compile(
    r"\A---[ \t]*\r?\n(?:(.*?)\r?\n)?---[ \t]*(?:\r?\n|\Z)",
    re.DOTALL,
)

HEADING_PATTERN = re.compile(r"^#{1,6}[ \t]+(.+?)[ \t#]*$", re.MULTILINE)

DEFAULT_TITLE = "Untitled"


def slugify(title: str) -> str:
    """Derive a filesystem-safe file stem from a title.

    Accents are folded to ASCII, the result is lowercased and every run of
    other characters becomes a single hyphen.
    """
    folded = unicodedata.normalize("NFKD", title).encode("ascii", "ignore").decode("ascii")
    slug = re.sub(r"[^a-z0-9]+", "-", folded.lower()).strip("-")
    return slug or "untitled"


def split_frontmatter(raw: str) -> tuple[dict[str, Any], str]:
    """Split raw text into (header mapping, body).

    Text without a header is returned whole as the body. A header that is
    not valid YAML, or not a mapping, yields an empty mapping.
    """
    match = FRONTMATTER_PATTERN.match(raw)
    if not match:
        return {}, raw

    body = raw[match.end() :]
    # One blank line separates the header from the body
    if body.startswith("\r\n"):
        body = body[2:]
    elif body.startswith("\n"):
        body = body[1:]

    try:
        data = yaml.safe_load(match.group(1) or "") or {}
    except yaml.YAMLError:
        logger.debug("Unreadable frontmatter, using defaults")
        return {}, body
    if not isinstance(data, dict):
        return {}, body
    return {str(key): value for key, value in data.items()}, body


def join_frontmatter(data: dict[str, Any], body: str) -> str:
    """Render a header mapping and body back into resource text."""
    # Non-ASCII stays escaped; raw NEL or U+2028 would reload as line breaks
    header = yaml.safe_dump(
        data,
        sort_keys=False,
        default_flow_style=False,
    )
    return f"---\n{header}---\n\n{body}"


def first_heading(body: str) -> str | None:
    """Return the text of the first markdown heading in body, if any."""
    match = HEADING_PATTERN.search(body)
    if match:
        return match.group(1).strip()
    return None


def validate_lenient(model: type[M], data: dict[str, Any], fallbacks: dict[str, Any]) -> M:
    """Validate data into model, dropping fields that fail validation.

    ``fallbacks`` supplies values for required fields that are missing or
    were dropped; they must themselves be valid.
    """
    data = dict(data)
    while True:
        try:
            return model.model_validate({**fallbacks, **data})
        except ValidationError as exc:
            rejected = {
                err["loc"][0]
                for err in exc.errors()
                if err["loc"] and err["loc"][0] in data
            }
            if not rejected:
                raise
            logger.debug("Dropping invalid frontmatter fields: %s", sorted(map(str, rejected)))
            for key in rejected:
                del data[key]
