from pathlib import Path
from typing import Optional

import pytest

from postdata.config_loader import SiteConfig


@pytest.fixture
def site(tmp_path):
    (tmp_path / "content").mkdir()
    return tmp_path


@pytest.fixture
def cfg(site):
    return SiteConfig(root=site, site_url="https://example.com/")


@pytest.fixture
def make_post(site):
    """Write content/<directory>/content.md with the given front matter."""

    def _make(directory: str, front_matter: Optional[str], body: str = "Body\n") -> Path:
        post_dir = site / "content" / directory
        post_dir.mkdir(parents=True, exist_ok=True)
        text = body if front_matter is None else f"---\n{front_matter}---\n{body}"
        path = post_dir / "content.md"
        path.write_text(text, encoding="utf-8")
        return path

    return _make
