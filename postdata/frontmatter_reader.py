import logging
from pathlib import Path
from typing import Any, Dict, Optional

import frontmatter
import yaml

from . import models

LOGGER = logging.getLogger("post_data")

# Raw values starting with these are YAML structures or quoted scalars and are
# taken from the YAML load instead of the raw line.
YAML_VALUE_PREFIXES = ("'", '"', "|", ">", "[", "{", "&", "*", "!")


class StringYAMLHandler(frontmatter.YAMLHandler):
    """YAML front matter where every scalar stays the string that was written.

    `yaml.BaseLoader` keeps `0123`, `yes` and dates as text. Plain one-line
    values are then taken from the raw line, so a `#` inside a value is kept.
    """

    def load(self, fm: str, **kwargs: Any) -> Any:
        data = super().load(fm, Loader=yaml.BaseLoader, **kwargs)
        if not isinstance(data, dict):
            return data
        for key, raw in parse_plain_lines(fm, unquote=False).items():
            if not raw or raw.startswith(YAML_VALUE_PREFIXES):
                continue
            current = data.get(key)
            if isinstance(current, str) and raw.startswith(current):
                data[key] = raw
        return data


def coerce_value(value: Any) -> Optional[str]:
    if value is None:
        return None
    if isinstance(value, (list, tuple)):
        return ", ".join(str(v) for v in value if v is not None)
    return str(value)


def coerce_metadata(raw: Dict[Any, Any]) -> models.MetadataDict:
    out: models.MetadataDict = {}
    for key, value in raw.items():
        text = coerce_value(value)
        if text is None:
            continue
        out[str(key)] = text
    return out


def _unquote(value: str) -> str:
    if len(value) >= 2 and value[0] == value[-1] and value[0] in ("'", '"'):
        return value[1:-1]
    return value


def parse_plain_lines(block: str, unquote: bool = True) -> models.MetadataDict:
    """Read a `key: value` block without YAML rules.

    Splits each top-level line on its first colon, so values may contain
    colons. Indented lines belong to a previous key and are skipped.
    """
    out: models.MetadataDict = {}
    for line in block.splitlines():
        if ":" not in line or line[:1].isspace():
            continue
        key, value = line.split(":", 1)
        key = key.strip()
        if not key or key.startswith("#"):
            continue
        value = value.strip()
        out[key] = _unquote(value) if unquote else value
    return out


def parse_metadata(text: str, source: str = "<string>") -> models.MetadataDict:
    handler = StringYAMLHandler()
    if not handler.detect(text):
        return {}
    try:
        post = frontmatter.loads(text, handler=handler)
    except yaml.YAMLError as e:
        block, _ = handler.split(text)
        LOGGER.warning(
            "Front matter in %s is not valid YAML, reading plain key/value lines: %s",
            source,
            e,
        )
        return parse_plain_lines(block)
    return coerce_metadata(post.metadata)


def read_metadata(path: Path) -> models.MetadataDict:
    return parse_metadata(path.read_text(encoding="utf-8"), source=str(path))
