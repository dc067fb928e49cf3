from dataclasses import dataclass, field
from pathlib import Path
from typing import Dict, List, TypedDict

# Raw front matter of one content.md, every value coerced to a string.
MetadataDict = Dict[str, str]

# Optional front-matter keys copied verbatim into an entry when present.
OPTIONAL_FIELDS = ("category", "short_link", "image")


class EntryDict(TypedDict, total=False):
    title: str
    date: str  # YYYY/MM/DD
    category: str
    short_link: str
    image: str
    directory: str


@dataclass
class BuildResult:
    entries: List[EntryDict]
    short_links: Dict[str, EntryDict]
    rss: bytes
    sitemap: bytes
    written: List[Path] = field(default_factory=list)
