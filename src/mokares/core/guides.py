"""Guide registry: directory names to linked guide entries."""

from urllib.parse import quote

from mokares.config import settings
from mokares.core.models import Guide


def guide_address(name: str, base_url: str | None = None) -> str:
    """Compose the repository link for a guide directory name.

    Names are treated as repository names under ``base_url``; characters
    that are not URL-safe are percent-encoded.
    """
    base = (base_url if base_url is not None else settings.guide_base_url).rstrip("/")
    return f"{base}/{quote(name.strip(), safe='-_.~')}"


def build_guides(names: list[str], base_url: str | None = None) -> list[Guide]:
    """Map each directory name to a Guide, keeping input order."""
    return [Guide(repo_name=name, addy=guide_address(name, base_url)) for name in names]
