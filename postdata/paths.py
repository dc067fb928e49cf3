from dataclasses import dataclass
from pathlib import Path

# Directory and file names inside a site root.
CONTENT_DIRNAME = "content"
CONTENT_FILENAME = "content.md"
POSTS_DIRNAME = "posts"
SHORT_LINKS_DIRNAME = "l3a"
METADATA_FILENAME = "metadata.json"
RSS_FILENAME = "rss.xml"
SITEMAP_FILENAME = "sitemap.xml"

# Content folders that hold generated output rather than a post.
RESERVED_DIRS = frozenset({POSTS_DIRNAME, SHORT_LINKS_DIRNAME})


@dataclass(frozen=True)
class SitePaths:
    root: Path

    @property
    def content_dir(self) -> Path:
        return self.root / CONTENT_DIRNAME

    @property
    def metadata_path(self) -> Path:
        return self.root / POSTS_DIRNAME / METADATA_FILENAME

    @property
    def rss_path(self) -> Path:
        return self.root / RSS_FILENAME

    @property
    def sitemap_path(self) -> Path:
        return self.root / SITEMAP_FILENAME

    @property
    def short_links_dir(self) -> Path:
        return self.root / SHORT_LINKS_DIRNAME

    def content_file(self, directory: str) -> Path:
        return self.content_dir / directory / CONTENT_FILENAME
