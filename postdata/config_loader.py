import argparse
from dataclasses import dataclass, replace
from pathlib import Path

from . import utils
from .paths import SitePaths

DEFAULT_SITE_URL = "https://a.llama.codes/"
DEFAULT_TITLE = "a llama codes"
DEFAULT_DESCRIPTION = "Software blog of afuzzyllama"
DEFAULT_LANGUAGE = "en"


@dataclass(frozen=True)
class SiteConfig:
    root: Path
    site_url: str = DEFAULT_SITE_URL
    title: str = DEFAULT_TITLE
    description: str = DEFAULT_DESCRIPTION
    language: str = DEFAULT_LANGUAGE

    @property
    def paths(self) -> SitePaths:
        return SitePaths(self.root)


def load_env_config() -> SiteConfig:
    return SiteConfig(
        root=Path(utils.env_str("SITE_ROOT", ".")).resolve(),
        site_url=utils.normalize_site_url(utils.env_str("SITE_URL", DEFAULT_SITE_URL)),
        title=utils.env_str("SITE_TITLE", DEFAULT_TITLE),
        description=utils.env_str("SITE_DESCRIPTION", DEFAULT_DESCRIPTION),
        language=utils.env_str("SITE_LANGUAGE", DEFAULT_LANGUAGE),
    )


def apply_cli_overrides(cfg: SiteConfig, args: argparse.Namespace) -> SiteConfig:
    return replace(
        cfg,
        root=cfg.root if args.root is None else args.root.resolve(),
        site_url=cfg.site_url
        if args.site_url is None
        else utils.normalize_site_url(args.site_url),
        title=cfg.title if getattr(args, "title", None) is None else args.title,
    )
