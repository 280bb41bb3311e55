# === FILE: selenops/config.py ===
"""
Loading and validation of the Selenops crawl configuration.
Pydantic describes the schema and checks the data.
"""
from __future__ import annotations

import errno
import json
import os
from pathlib import Path
from typing import Any, Union

import yaml
from pydantic import BaseModel, ConfigDict, Field, HttpUrl, field_validator


class CrawlConfig(BaseModel):
    """Configuration of a single word-search crawl."""
    model_config = ConfigDict(extra="forbid", frozen=True)

    start_url: HttpUrl = Field(..., description="Page the crawl starts from.")
    word: str = Field(..., min_length=1, description="Word to look for, case-insensitive.")
    max_pages: int = Field(10, ge=1, description="Maximum number of pages to visit.")
    timeout: float = Field(10.0, gt=0, description="Timeout of a single request (seconds).")
    user_agent: str = Field("Selenops/1.0", min_length=1, description="User-Agent header.")
    same_domain: bool = Field(True, description="Only visit pages on the start URL's host.")

    @field_validator("start_url", mode="before")
    def _require_http_prefix(cls, v: Any) -> Any:
        if isinstance(v, str) and not v.startswith(("http://", "https://")):
            raise ValueError("start_url must have an http:// or https:// prefix")
        return v

    @field_validator("word")
    def _strip_word(cls, v: str) -> str:
        stripped = v.strip()
        if not stripped:
            raise ValueError("word must not be blank")
        return stripped


def _read_yaml(path: Path) -> dict[str, Any]:
    try:
        data = yaml.safe_load(path.read_text(encoding="utf-8")) or {}
    except yaml.YAMLError as exc:
        raise ValueError(f"Invalid YAML in {path}: {exc}") from exc
    if not isinstance(data, dict):
        raise TypeError(f"Top level of YAML must be a mapping, got {type(data).__name__}")
    return data


def _read_json(path: Path) -> dict[str, Any]:
    try:
        data = json.loads(path.read_text(encoding="utf-8")) or {}
    except json.JSONDecodeError as exc:
        raise ValueError(f"Invalid JSON in {path}: {exc}") from exc
    if not isinstance(data, dict):
        raise TypeError(f"Top level of JSON must be a mapping, got {type(data).__name__}")
    return data


def _read_config(path: Union[str, Path]) -> dict[str, Any]:
    path_obj = Path(path).expanduser().resolve()
    if not path_obj.is_file():
        raise FileNotFoundError(errno.ENOENT, os.strerror(errno.ENOENT), str(path_obj))

    suffix = path_obj.suffix.lower()
    if suffix in (".yaml", ".yml"):
        return _read_yaml(path_obj)
    if suffix == ".json":
        return _read_json(path_obj)
    raise ValueError(f"Unsupported config format: {suffix}")


def load_config(path: Union[str, Path, None], **overrides: Any) -> CrawlConfig:
    """
    Read YAML or JSON and return a validated CrawlConfig.
    Keyword *overrides* that are not None replace values from the file;
    with *path* None the overrides alone make up the configuration.
    Raises FileNotFoundError when the file does not exist.
    """
    data = {} if path is None else _read_config(path)
    data.update({k: v for k, v in overrides.items() if v is not None})
    return CrawlConfig(**data)
