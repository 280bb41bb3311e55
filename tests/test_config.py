# File: tests/test_config.py
import json
from pathlib import Path

import pytest
from pydantic import ValidationError

from selenops.config import CrawlConfig, load_config


def write_file(tmp_path: Path, content: str, suffix: str) -> Path:
    path = tmp_path / f"config{suffix}"
    path.write_text(content, encoding="utf-8")
    return path


@pytest.mark.parametrize(
    "content,expect_exc",
    [
        ("start_url: http://example.com\nword: fall", None),
        (json.dumps({"start_url": "http://example.com", "word": "fall"}), None),
        ("{}", ValidationError),
        ("not: a: mapping", ValueError),
        ("::invalid yaml", TypeError),
        ("start_url: example.com\nword: fall", ValidationError),
        ("start_url: http://example.com\nword: '   '", ValidationError),
        ("start_url: http://example.com\nword: fall\nmax_pages: 0", ValidationError),
        ("start_url: http://example.com\nword: fall\nunknown: 1", ValidationError),
    ],
)
def test_load_config_variants(tmp_path, content, expect_exc):
    suffix = ".yaml" if not content.strip().startswith("{") else ".json"
    cfg_path = write_file(tmp_path, content, suffix)
    if expect_exc:
        with pytest.raises(expect_exc):
            load_config(cfg_path)
    else:
        cfg = load_config(cfg_path)
        assert isinstance(cfg, CrawlConfig)
        assert str(cfg.start_url).rstrip("/") == "http://example.com"
        assert cfg.word == "fall"
        assert cfg.max_pages == 10


def test_overrides_replace_file_values(tmp_path):
    cfg_path = write_file(tmp_path, "start_url: http://example.com\nword: fall\nmax_pages: 3", ".yml")
    cfg = load_config(cfg_path, word="autumn", max_pages=None)
    assert cfg.word == "autumn"
    assert cfg.max_pages == 3


def test_missing_file(tmp_path):
    with pytest.raises(FileNotFoundError):
        load_config(tmp_path / "nope.yaml")


def test_unsupported_suffix(tmp_path):
    cfg_path = write_file(tmp_path, "start_url = 'http://example.com'", ".toml")
    with pytest.raises(ValueError):
        load_config(cfg_path)


def test_config_is_frozen():
    cfg = CrawlConfig(start_url="https://example.com", word="fall")
    with pytest.raises(ValidationError):
        cfg.max_pages = 5


def test_overrides_alone_without_file():
    cfg = load_config(None, start_url="https://example.com", word="fall", timeout=None)
    assert cfg.word == "fall"
    assert cfg.timeout == 10.0


def test_no_file_and_no_overrides_is_invalid():
    with pytest.raises(ValidationError):
        load_config(None)
