import logging
from datetime import date
from pathlib import Path
from typing import Iterable, List, Optional, Tuple

from . import models, paths, utils
from .frontmatter_reader import read_metadata

LOGGER = logging.getLogger("post_data")


def is_reserved_dir(name: str) -> bool:
    return name.startswith(".") or name in paths.RESERVED_DIRS


def list_content_dirs(content_dir: Path) -> List[str]:
    """Names of content folders to scan, in name order."""
    names: List[str] = []
    for child in sorted(content_dir.iterdir(), key=lambda p: p.name):
        if not child.is_dir():
            continue
        if is_reserved_dir(child.name):
            LOGGER.debug("Skipping reserved directory %s", child.name)
            continue
        names.append(child.name)
    return names


def normalize_entry(
    metadata: models.MetadataDict, directory: str
) -> Optional[models.EntryDict]:
    if metadata.get("draft") == "true":
        LOGGER.debug("Skipping draft %s", directory)
        return None
    if metadata.get("hide") == "true":
        LOGGER.debug("Skipping hidden %s", directory)
        return None

    entry: models.EntryDict = {}
    if metadata.get("title"):
        entry["title"] = metadata["title"]

    raw_date = metadata.get("date_updated") or metadata.get("date_created")
    if raw_date:
        entry["date"] = utils.canonical_date(raw_date, directory)

    for key in models.OPTIONAL_FIELDS:
        if key in metadata:
            entry[key] = metadata[key]  # type: ignore[literal-required]

    if "title" not in entry:
        LOGGER.debug("Skipping untitled %s", directory)
        return None
    entry["directory"] = directory
    return entry


def entry_date(entry: models.EntryDict) -> Optional[date]:
    value = entry.get("date")
    if not value:
        return None
    return utils.parse_date(value, entry.get("directory"))


def sort_entries(entries: Iterable[models.EntryDict]) -> List[models.EntryDict]:
    """Newest first; equal dates keep input order and undated entries go last."""
    keyed: List[Tuple[Optional[date], models.EntryDict]] = [
        (entry_date(e), e) for e in entries
    ]
    dated = [pair for pair in keyed if pair[0] is not None]
    undated = [e for d, e in keyed if d is None]
    dated.sort(key=lambda pair: pair[0], reverse=True)  # type: ignore[arg-type,return-value]
    return [e for _, e in dated] + undated


def collect_entries(site_paths: paths.SitePaths) -> List[models.EntryDict]:
    entries: List[models.EntryDict] = []
    for name in list_content_dirs(site_paths.content_dir):
        metadata = read_metadata(site_paths.content_file(name))
        entry = normalize_entry(metadata, name)
        if entry is not None:
            entries.append(entry)
    return entries
