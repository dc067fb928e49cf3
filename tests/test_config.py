from pathlib import Path

from postdata import config_loader
from postdata.build_post_data import parse_args


def test_load_env_config_defaults(monkeypatch, tmp_path):
    for name in ["SITE_ROOT", "SITE_URL", "SITE_TITLE", "SITE_DESCRIPTION", "SITE_LANGUAGE"]:
        monkeypatch.delenv(name, raising=False)
    monkeypatch.chdir(tmp_path)
    cfg = config_loader.load_env_config()
    assert cfg.root == tmp_path.resolve()
    assert cfg.site_url == "https://a.llama.codes/"
    assert cfg.title == "a llama codes"
    assert cfg.description == "Software blog of afuzzyllama"
    assert cfg.language == "en"


def test_load_env_config_reads_env(monkeypatch, tmp_path):
    monkeypatch.setenv("SITE_ROOT", str(tmp_path))
    monkeypatch.setenv("SITE_URL", "https://example.org")
    monkeypatch.setenv("SITE_TITLE", "Example")
    monkeypatch.setenv("SITE_LANGUAGE", "de")
    cfg = config_loader.load_env_config()
    assert cfg.root == tmp_path.resolve()
    assert cfg.site_url == "https://example.org/"
    assert cfg.title == "Example"
    assert cfg.language == "de"
    assert cfg.paths.content_dir == tmp_path.resolve() / "content"
    assert cfg.paths.short_links_dir == tmp_path.resolve() / "l3a"
    assert cfg.paths.metadata_path == tmp_path.resolve() / "posts" / "metadata.json"


def test_apply_cli_overrides_only_replaces_given_values(tmp_path):
    base = config_loader.SiteConfig(root=Path("/srv/site"), site_url="https://a.test/")
    unchanged = config_loader.apply_cli_overrides(base, parse_args([]))
    assert unchanged == base

    args = parse_args(["--root", str(tmp_path), "--site-url", "https://b.test", "--title", "B"])
    cfg = config_loader.apply_cli_overrides(base, args)
    assert cfg.root == tmp_path.resolve()
    assert cfg.site_url == "https://b.test/"
    assert cfg.title == "B"
    assert cfg.description == base.description
