"""Data models for MoKa Reads resources and the indexer configuration."""

from enum import Enum
from pathlib import Path
from typing import Any, Protocol

import tomli_w
from pydantic import BaseModel, ConfigDict, Field, field_validator

from mokares.core.parser import (
    DEFAULT_TITLE,
    first_heading,
    join_frontmatter,
    slugify,
    split_frontmatter,
    validate_lenient,
)


class Language(str, Enum):
    """Programming languages a cheatsheet can cover."""

    RUST = "rust"
    PYTHON = "python"
    C = "c"
    CPP = "cpp"
    CSHARP = "csharp"
    GO = "go"
    JAVA = "java"
    JAVASCRIPT = "javascript"
    TYPESCRIPT = "typescript"
    KOTLIN = "kotlin"
    SWIFT = "swift"
    RUBY = "ruby"
    PHP = "php"
    HASKELL = "haskell"
    ZIG = "zig"
    BASH = "bash"
    SQL = "sql"
    OTHER = "other"

    @classmethod
    def from_string(cls, value: str) -> "Language":
        """Case-insensitive lookup; unknown names map to ``OTHER``."""
        key = value.strip().lower()
        key = _LANGUAGE_ALIASES.get(key, key)
        try:
            return cls(key)
        except ValueError:
            return cls.OTHER

    def icon_suggestion(self) -> str:
        """Default devicon class for this language."""
        if self is Language.OTHER:
            return "fa-solid fa-code"
        name = _DEVICON_NAMES.get(self, self.value)
        return f"devicon-{name}-plain"

    def __str__(self) -> str:
        return self.value


_LANGUAGE_ALIASES = {
    "rs": "rust",
    "py": "python",
    "c++": "cpp",
    "cplusplus": "cpp",
    "c#": "csharp",
    "cs": "csharp",
    "golang": "go",
    "js": "javascript",
    "ts": "typescript",
    "kt": "kotlin",
    "rb": "ruby",
    "hs": "haskell",
    "sh": "bash",
    "shell": "bash",
}

_DEVICON_NAMES = {
    Language.CPP: "cplusplus",
    Language.SQL: "azuresqldatabase",
}


def _split_csv(value: str) -> list[str]:
    return [part.strip() for part in value.split(",") if part.strip()]


class Resource(Protocol):
    """Capabilities shared by every resource kind."""

    content: str

    @property
    def title(self) -> str: ...

    @property
    def slug(self) -> str: ...

    def to_markdown(self) -> str: ...


# ============================================================
# Articles
# ============================================================


class ArticleMetadata(BaseModel):
    """Frontmatter of an article."""

    model_config = ConfigDict(frozen=True, coerce_numbers_to_str=True)

    title: str = Field(min_length=1)
    description: str = ""
    author: str = ""
    tags: list[str] = Field(default_factory=list)
    icon: str = ""

    @field_validator("tags", mode="before")
    @classmethod
    def _coerce_tags(cls, value: Any) -> Any:
        if isinstance(value, str):
            return _split_csv(value)
        if isinstance(value, list):
            return [str(tag) for tag in value if tag is not None]
        return value

    @classmethod
    def from_prompt(
        cls, title: str, description: str, author: str, icon: str, tags: str
    ) -> "ArticleMetadata":
        """Build metadata from raw answers; tags are comma separated."""
        return cls(
            title=title,
            description=description,
            author=author,
            icon=icon,
            tags=_split_csv(tags),
        )

    @property
    def slug(self) -> str:
        return slugify(self.title)


class Article(BaseModel):
    """A short article: metadata plus markdown body."""

    model_config = ConfigDict(frozen=True)

    metadata: ArticleMetadata
    content: str = ""

    @property
    def title(self) -> str:
        return self.metadata.title

    @property
    def slug(self) -> str:
        return self.metadata.slug

    @classmethod
    def parse(cls, raw: str) -> "Article":
        """Parse article text; never raises on a bad header."""
        data, body = split_frontmatter(raw)
        metadata = validate_lenient(
            ArticleMetadata, data, {"title": first_heading(body) or DEFAULT_TITLE}
        )
        return cls(metadata=metadata, content=body)

    def to_markdown(self) -> str:
        return join_frontmatter(self.metadata.model_dump(mode="json"), self.content)


# ============================================================
# Cheatsheets
# ============================================================


class CheatsheetMetadata(BaseModel):
    """Frontmatter of a language cheatsheet."""

    model_config = ConfigDict(frozen=True, coerce_numbers_to_str=True)

    title: str = Field(min_length=1)
    author: str = ""
    level: int = Field(default=0, ge=0, le=255)
    language: Language = Language.OTHER
    icon: str = ""

    @field_validator("language", mode="before")
    @classmethod
    def _lookup_language(cls, value: Any) -> Any:
        if isinstance(value, str):
            return Language.from_string(value)
        return value

    @classmethod
    def from_prompt(
        cls, title: str, author: str, level: str, language: str, icon: str
    ) -> "CheatsheetMetadata":
        """Build metadata from raw answers.

        Raises ValueError if level is not an integer in 0..255. A blank icon
        is replaced by the language's suggestion.
        """
        lang = Language.from_string(language)
        return cls(
            title=title,
            author=author,
            level=int(level.strip()),
            language=lang,
            icon=icon.strip() or lang.icon_suggestion(),
        )

    @property
    def slug(self) -> str:
        return slugify(self.title)


class Cheatsheet(BaseModel):
    """A language cheatsheet: metadata plus markdown body."""

    model_config = ConfigDict(frozen=True)

    metadata: CheatsheetMetadata
    content: str = ""

    @property
    def title(self) -> str:
        return self.metadata.title

    @property
    def slug(self) -> str:
        return self.metadata.slug

    @property
    def language(self) -> Language:
        return self.metadata.language

    @classmethod
    def parse(cls, raw: str) -> "Cheatsheet":
        """Parse cheatsheet text; never raises on a bad header."""
        data, body = split_frontmatter(raw)
        metadata = validate_lenient(
            CheatsheetMetadata, data, {"title": first_heading(body) or DEFAULT_TITLE}
        )
        return cls(metadata=metadata, content=body)

    def to_markdown(self) -> str:
        return join_frontmatter(self.metadata.model_dump(mode="json"), self.content)


# ============================================================
# Guides and indexer configuration
# ============================================================


class Guide(BaseModel):
    """A scaffolded guide project, known by its directory name."""

    model_config = ConfigDict(frozen=True)

    repo_name: str
    addy: str


class ReadmeConf(BaseModel):
    """Header block of the generated README."""

    model_config = ConfigDict(frozen=True)

    header: str = ""
    subheader: str | None = None
    license_info: str = ""


class IndexerConfig(BaseModel):
    """Persisted indexer settings (``indexer.toml``).

    Unset paths are ``None`` and are written as empty strings.
    """

    model_config = ConfigDict(frozen=True, populate_by_name=True)

    readme_path: Path | None = Field(default=None, alias="readme")
    article_root: Path | None = Field(default=None, alias="article")
    cheatsheet_root: Path | None = Field(default=None, alias="cheatsheet")
    guide_root: Path | None = Field(default=None, alias="guide")
    readme_conf: ReadmeConf = Field(default_factory=ReadmeConf)

    @field_validator("readme_path", "article_root", "cheatsheet_root", "guide_root", mode="before")
    @classmethod
    def _blank_is_unset(cls, value: Any) -> Any:
        if isinstance(value, str) and not value.strip():
            return None
        return value

    def to_toml(self) -> str:
        data = {
            "readme": _path_str(self.readme_path),
            "article": _path_str(self.article_root),
            "cheatsheet": _path_str(self.cheatsheet_root),
            "guide": _path_str(self.guide_root),
            "readme_conf": self.readme_conf.model_dump(exclude_none=True),
        }
        return tomli_w.dumps(data)


def _path_str(path: Path | None) -> str:
    return path.as_posix() if path is not None else ""
