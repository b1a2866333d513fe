"""Unit tests for index rendering and the guide registry."""

from pathlib import Path

from mokares.core.guides import build_guides, guide_address
from mokares.core.models import (
    Article,
    ArticleMetadata,
    Cheatsheet,
    CheatsheetMetadata,
    Guide,
    Language,
    ReadmeConf,
)
from mokares.core.render import (
    capitalize_first,
    render_index,
    render_path,
    render_readme_conf,
)


def _article(title: str) -> Article:
    return Article(metadata=ArticleMetadata(title=title))


def _cheatsheet(title: str, language: Language) -> Cheatsheet:
    return Cheatsheet(metadata=CheatsheetMetadata(title=title, language=language))


# ============================================================
# Small helpers
# ============================================================


class TestCapitalizeFirst:
    def test_only_first_character(self):
        assert capitalize_first("rust guide") == "Rust guide"

    def test_rest_verbatim(self):
        assert capitalize_first("hELLO wORLD") == "HELLO wORLD"

    def test_already_capitalized(self):
        assert capitalize_first("Basics") == "Basics"

    def test_empty(self):
        assert capitalize_first("") == ""

    def test_non_ascii_first_left_alone(self):
        assert capitalize_first("éclair") == "éclair"
        assert capitalize_first("ßtraße") == "ßtraße"


class TestRenderReadmeConf:
    def test_without_subheader(self):
        conf = ReadmeConf(header="Docs", license_info="MIT")
        assert render_readme_conf(conf) == "# Docs\n> MIT"

    def test_with_subheader(self):
        conf = ReadmeConf(header="Docs", subheader="Everything", license_info="MIT")
        assert render_readme_conf(conf) == "# Docs\n## Everything\n> MIT"

    def test_empty_subheader_omitted(self):
        conf = ReadmeConf(header="Docs", subheader="", license_info="MIT")
        assert render_readme_conf(conf) == "# Docs\n> MIT"


class TestRenderPath:
    def test_plain(self):
        assert render_path(Path("articles") / "intro.md") == "articles/intro.md"

    def test_quoted(self):
        assert render_path(Path("articles/intro.md"), quoted=True) == '"articles/intro.md"'

    def test_quoted_escapes(self):
        assert render_path(Path('odd "name".md'), quoted=True) == '"odd \\"name\\".md"'


# ============================================================
# Guide registry
# ============================================================


class TestGuides:
    def test_address_from_name(self):
        assert guide_address("my-guide", "https://github.com/MoKa-Reads") == (
            "https://github.com/MoKa-Reads/my-guide"
        )

    def test_trailing_slash_in_base(self):
        assert guide_address("g", "https://example.org/") == "https://example.org/g"

    def test_odd_name_still_builds(self):
        assert guide_address("My Guide", "https://example.org") == "https://example.org/My%20Guide"

    def test_build_keeps_order(self):
        guides = build_guides(["b", "a"], "https://example.org")
        assert guides == [
            Guide(repo_name="b", addy="https://example.org/b"),
            Guide(repo_name="a", addy="https://example.org/a"),
        ]

    def test_build_empty(self):
        assert build_guides([]) == []


# ============================================================
# Full document
# ============================================================


class TestRenderIndex:
    def test_section_layout(self):
        document = render_index(
            ReadmeConf(header="Docs", license_info="MIT"),
            [(_article("Intro"), Path("articles/intro.md"))],
            [(_cheatsheet("basics", Language.RUST), Path("cheatsheets/rust.md"))],
            [Guide(repo_name="my-guide", addy="https://example.org/my-guide")],
        )
        assert document.splitlines() == [
            "# Docs",
            "> MIT",
            "## Articles",
            "- [Intro](articles/intro.md)",
            "## Cheatsheets",
            "- **rust**: [Basics](cheatsheets/rust.md)",
            "## Guides",
            "- [my-guide](https://example.org/my-guide)",
        ]

    def test_empty_sections(self):
        document = render_index(ReadmeConf(header="H", license_info="L"), [], [], [])
        assert document == "# H\n> L\n## Articles\n## Cheatsheets\n## Guides"

    def test_keeps_given_order(self):
        document = render_index(
            ReadmeConf(),
            [(_article("Zed"), Path("z.md")), (_article("Alpha"), Path("a.md"))],
            [],
            [],
        )
        assert document.index("[Zed]") < document.index("[Alpha]")

    def test_quoted_paths(self):
        document = render_index(
            ReadmeConf(),
            [(_article("Intro"), Path("articles/intro.md"))],
            [],
            [],
            quote_paths=True,
        )
        assert '- [Intro]("articles/intro.md")' in document
