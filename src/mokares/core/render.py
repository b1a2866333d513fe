"""Index document rendering.

Everything here is a pure function of its inputs; the indexer does the
scanning and hands the collected records over.
"""

import json
from pathlib import Path

from mokares.core.models import Article, Cheatsheet, Guide, ReadmeConf


def capitalize_first(text: str) -> str:
    """Uppercase the first character if it is ASCII, leaving the rest verbatim."""
    first = text[:1]
    if first.isascii():
        first = first.upper()
    return first + text[1:]


def render_readme_conf(conf: ReadmeConf) -> str:
    lines = [f"# {conf.header}"]
    if conf.subheader:
        lines.append(f"## {conf.subheader}")
    lines.append(f"> {conf.license_info}")
    return "\n".join(lines)


def render_path(path: Path, quoted: bool = False) -> str:
    """Render a link target.

    ``quoted`` reproduces the double-quoted, escaped form found in READMEs
    generated by earlier releases.
    """
    if quoted:
        return json.dumps(str(path), ensure_ascii=False)
    return path.as_posix()


def render_index(
    conf: ReadmeConf,
    articles: list[tuple[Article, Path]],
    cheatsheets: list[tuple[Cheatsheet, Path]],
    guides: list[Guide],
    quote_paths: bool = False,
) -> str:
    """Compose the README from the header block and the three sections."""
    lines = [render_readme_conf(conf), "## Articles"]
    for article, path in articles:
        lines.append(f"- [{article.title}]({render_path(path, quote_paths)})")

    lines.append("## Cheatsheets")
    for cheatsheet, path in cheatsheets:
        lines.append(
            f"- **{cheatsheet.language.value}**: "
            f"[{capitalize_first(cheatsheet.title)}]({render_path(path, quote_paths)})"
        )

    lines.append("## Guides")
    for guide in guides:
        lines.append(f"- [{guide.repo_name}]({guide.addy})")

    return "\n".join(lines)
