from os import PathLike
from pathlib import Path
from typing import Any

import yaml
from pydantic import BaseModel, Field, field_validator

from .manifest.cache import ManifestSource
from .references import UrlTransform
from .render import AssetMode, DevServerMode, ManifestMode

CONFIG_FILENAME = "viteref.yml"
DEFAULT_MANIFEST_PATH = Path(".vite/manifest.json")


class ViteConfig(BaseModel):
    """Settings controlling how asset references are resolved."""

    manifest_path: Path = Field(
        default=DEFAULT_MANIFEST_PATH,
        description="Vite manifest produced by `vite build --manifest`.",
    )
    dev_server: bool = Field(default=False, description="Reference the Vite dev server instead of the manifest.")
    watchers: list[str] = Field(
        default_factory=list,
        description="Watcher processes started alongside the app; 'vite' implies the dev server.",
    )
    dev_server_url: str = Field(default="http://localhost:5173", description="Origin of the Vite dev server.")
    base_url: str = Field(default="", description="Prefix for compiled assets, e.g. a CDN host or /static.")
    react_refresh: bool = Field(default=False, description="Install the React fast-refresh preamble in dev mode.")

    @field_validator("manifest_path", mode="before")
    @classmethod
    def _coerce_path(cls, value: Any) -> Path:
        if value is None or value == "":
            return DEFAULT_MANIFEST_PATH
        if not isinstance(value, (str, PathLike)):
            raise ValueError("manifest_path must be a path string")
        return Path(value)

    @field_validator("dev_server_url", "base_url")
    @classmethod
    def _strip_trailing_slash(cls, value: str) -> str:
        return value.strip().rstrip("/")

    @field_validator("watchers", mode="before")
    @classmethod
    def _normalize_watchers(cls, value: Any) -> list[str]:
        if value is None:
            return []
        if isinstance(value, str):
            return [value]
        if not isinstance(value, (list, tuple)):
            raise ValueError("watchers must be a list of names")
        return [str(item) for item in value]

    @property
    def manifest_source(self) -> ManifestSource:
        return ManifestSource(self.manifest_path)

    @property
    def use_dev_server(self) -> bool:
        return self.dev_server or has_vite_watcher(self)

    def mode(self) -> AssetMode:
        if self.use_dev_server:
            return DevServerMode(react_refresh=self.react_refresh)
        return ManifestMode(self.manifest_source)

    def url_transform(self) -> UrlTransform:
        """Prefix rooted asset paths with the origin of the active mode."""
        prefix = self.dev_server_url if self.use_dev_server else self.base_url

        def to_url(path: str) -> str:
            return f"{prefix}{path}"

        return to_url


def has_vite_watcher(config: ViteConfig) -> bool:
    """Checks for a conventional ``vite`` entry in the configured watchers."""
    return "vite" in config.watchers


def load_config(path: str | Path) -> ViteConfig:
    """Load configuration and resolve the manifest path against the config location.

    ``path`` may point to a file (e.g. ``/app/viteref.yml``) or to a directory
    containing that file. A directory without one yields the defaults.
    """
    candidate = Path(path)
    data: dict[str, Any] = {}
    if candidate.is_dir():
        config_file = candidate / CONFIG_FILENAME
        if config_file.exists():
            with config_file.open("r", encoding="utf-8") as handle:
                data = yaml.safe_load(handle) or {}
        base_dir = candidate.resolve()
    else:
        if not candidate.exists():
            raise FileNotFoundError(candidate)
        with candidate.open("r", encoding="utf-8") as handle:
            data = yaml.safe_load(handle) or {}
        base_dir = candidate.parent.resolve()

    if not isinstance(data, dict):
        raise ValueError(f"Configuration {candidate} must define a mapping at the top level.")

    cfg = ViteConfig(**data)
    if not cfg.manifest_path.is_absolute():
        cfg.manifest_path = (base_dir / cfg.manifest_path).resolve()
    return cfg
