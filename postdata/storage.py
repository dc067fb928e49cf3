import json
import logging
from pathlib import Path
from typing import Any, Dict, Iterable, List

from . import models
from .errors import DuplicateShortLinkError

LOGGER = logging.getLogger("post_data")


def _write_json(path: Path, data: Any) -> None:
    payload = json.dumps(data, ensure_ascii=False, indent=2) + "\n"
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_text(payload, encoding="utf-8")
    LOGGER.debug("Wrote %s", path)


def collect_short_links(
    entries: Iterable[models.EntryDict],
) -> Dict[str, models.EntryDict]:
    """Map each short link to its entry, failing on the first repeated slug."""
    short_links: Dict[str, models.EntryDict] = {}
    for entry in entries:
        slug = entry.get("short_link")
        if not slug:
            continue
        if slug in short_links:
            raise DuplicateShortLinkError(slug)
        short_links[slug] = entry
    return short_links


def short_link_path(directory: Path, slug: str) -> Path:
    return directory / f"{slug}.json"


def write_short_links(
    short_links: Dict[str, models.EntryDict], directory: Path
) -> List[Path]:
    written: List[Path] = []
    for slug, entry in short_links.items():
        path = short_link_path(directory, slug)
        _write_json(path, entry)
        written.append(path)
    return written


def write_metadata(entries: List[models.EntryDict], path: Path) -> None:
    _write_json(path, entries)
