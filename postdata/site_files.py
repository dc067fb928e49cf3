from datetime import datetime, time, timezone
from email.utils import format_datetime
from pathlib import Path
from typing import List
from urllib.parse import quote, urljoin
from xml.etree import ElementTree as ET

from . import content, models, utils
from .config_loader import SiteConfig

ATOM_NS = "http://www.w3.org/2005/Atom"
SITEMAP_NS = "http://www.sitemaps.org/schemas/sitemap/0.9"
# RFC 3986 sub-delims plus ":" and "@" are legal inside a path segment.
PATH_SEGMENT_SAFE = ":@!$&'()*+,;="


def entry_url(entry: models.EntryDict, base_url: str) -> str:
    directory = quote(entry.get("directory", ""), safe=PATH_SEGMENT_SAFE)
    return utils.normalize_site_url(base_url) + directory


def read_more_html(url: str) -> str:
    return f'<a href="{url}">read more</a>'


def render_rss(
    entries: List[models.EntryDict], cfg: SiteConfig, now: datetime
) -> bytes:
    base_url = utils.normalize_site_url(cfg.site_url)

    ET.register_namespace("atom", ATOM_NS)

    rss = ET.Element("rss", version="2.0")
    channel_el = ET.SubElement(rss, "channel")
    ET.SubElement(channel_el, "title").text = cfg.title
    ET.SubElement(channel_el, "description").text = cfg.description
    ET.SubElement(channel_el, "link").text = base_url
    ET.SubElement(
        channel_el,
        f"{{{ATOM_NS}}}link",
        attrib={
            "href": urljoin(base_url, cfg.paths.rss_path.name),
            "rel": "self",
            "type": "application/rss+xml",
        },
    )
    if now.tzinfo is None:
        now = now.replace(tzinfo=timezone.utc)
    ET.SubElement(channel_el, "lastBuildDate").text = format_datetime(now)
    ET.SubElement(channel_el, "language").text = cfg.language

    for e in entries:
        item = ET.SubElement(channel_el, "item")
        ET.SubElement(item, "title").text = e.get("title", "")
        link = entry_url(e, base_url)
        ET.SubElement(item, "link").text = link
        ET.SubElement(item, "guid").text = link
        ET.SubElement(item, "description").text = read_more_html(link)
        published = content.entry_date(e)
        if published:
            pub_dt = datetime.combine(published, time.min, tzinfo=timezone.utc)
            ET.SubElement(item, "pubDate").text = format_datetime(pub_dt)
        if e.get("category"):
            ET.SubElement(item, "category").text = e["category"]

    return ET.tostring(rss, encoding="utf-8", xml_declaration=True)


def render_sitemap(entries: List[models.EntryDict], cfg: SiteConfig) -> bytes:
    base_url = utils.normalize_site_url(cfg.site_url)

    urlset = ET.Element("urlset", xmlns=SITEMAP_NS)
    for e in entries:
        url_el = ET.SubElement(urlset, "url")
        ET.SubElement(url_el, "loc").text = entry_url(e, base_url)
        lastmod = utils.fmt_lastmod(content.entry_date(e))
        if lastmod:
            ET.SubElement(url_el, "lastmod").text = lastmod

    return ET.tostring(urlset, encoding="utf-8", xml_declaration=True)


def write_rss(rss: bytes, path: Path) -> None:
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_bytes(rss)


def write_sitemap(sitemap: bytes, path: Path) -> None:
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_bytes(sitemap)
