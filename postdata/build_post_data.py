#!/usr/bin/env python3
"""Build the post metadata index, RSS feed, sitemap and short-link files.

Scans `content/*/content.md` under the site root, keeps published entries,
sorts them newest first and writes `posts/metadata.json`, `rss.xml`,
`sitemap.xml` and `l3a/<short_link>.json`.
"""

import argparse
import logging
from datetime import datetime, timezone
from pathlib import Path
from typing import Optional

from dotenv import load_dotenv

from postdata import content, models, site_files, storage, utils
from postdata.config_loader import SiteConfig, apply_cli_overrides, load_env_config
from postdata.errors import PostDataError

LOGGER = logging.getLogger("post_data")


def build(
    cfg: SiteConfig, dry_run: bool = False, now: Optional[datetime] = None
) -> models.BuildResult:
    site_paths = cfg.paths
    entries = content.sort_entries(content.collect_entries(site_paths))
    # Fails before any file is written.
    short_links = storage.collect_short_links(entries)
    LOGGER.info("Collected %d entries, %d short links", len(entries), len(short_links))

    now = now or datetime.now(timezone.utc)
    result = models.BuildResult(
        entries=entries,
        short_links=short_links,
        rss=site_files.render_rss(entries, cfg, now),
        sitemap=site_files.render_sitemap(entries, cfg),
    )
    if dry_run:
        LOGGER.info("Dry run: nothing written")
        return result

    result.written.extend(
        storage.write_short_links(short_links, site_paths.short_links_dir)
    )
    storage.write_metadata(entries, site_paths.metadata_path)
    site_files.write_rss(result.rss, site_paths.rss_path)
    site_files.write_sitemap(result.sitemap, site_paths.sitemap_path)
    result.written.extend(
        [site_paths.metadata_path, site_paths.rss_path, site_paths.sitemap_path]
    )
    LOGGER.info("Wrote %d files under %s", len(result.written), site_paths.root)
    return result


def parse_args(argv: Optional[list] = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(
        description="Generate metadata.json, rss.xml, sitemap.xml and short links."
    )
    parser.add_argument(
        "--root",
        type=Path,
        help="Site root holding content/ (default: SITE_ROOT env, fallback: cwd).",
    )
    parser.add_argument(
        "--site-url",
        dest="site_url",
        help="Public base URL (default: SITE_URL env, fallback: https://a.llama.codes/).",
    )
    parser.add_argument(
        "--title", help="Feed title (default: SITE_TITLE env, fallback: a llama codes)."
    )
    parser.add_argument(
        "--dry-run",
        action="store_true",
        help="Do not write any files; scan and render only.",
    )
    return parser.parse_args(argv)


def main(argv: Optional[list] = None) -> None:
    utils.setup_logging()
    load_dotenv()
    args = parse_args(argv)
    cfg = apply_cli_overrides(load_env_config(), args)
    try:
        build(cfg, dry_run=args.dry_run)
    except PostDataError as e:
        raise SystemExit(str(e)) from e
    print("success")


if __name__ == "__main__":
    main()
