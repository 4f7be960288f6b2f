"""Process-wide cache of parsed Vite manifests keyed by their source."""

from __future__ import annotations

import logging
from collections.abc import Callable, Mapping
from dataclasses import dataclass
from pathlib import Path
from typing import Any, Union

from .models import Manifest
from ..errors import MalformedManifest
from .parser import load_manifest_file, parse

logger = logging.getLogger(__name__)


@dataclass(frozen=True, slots=True)
class ManifestSource:
    """Location tag identifying one manifest file."""

    path: Path
    root: Path | None = None

    @property
    def location(self) -> Path:
        if self.root is None or self.path.is_absolute():
            return self.path
        return self.root / self.path


SourceLike = Union[ManifestSource, str, Path]
ManifestLoader = Callable[[Path], Manifest]


def as_source(value: SourceLike) -> ManifestSource:
    """Normalise strings and paths so equal locations share a cache entry."""
    if isinstance(value, ManifestSource):
        return value
    if not isinstance(value, (str, Path)):
        raise MalformedManifest(f"Unsupported Vite manifest source: {type(value).__name__}.")
    return ManifestSource(Path(value))


class ManifestCache:
    """Parse each manifest source once and reuse it until invalidated.

    Concurrent misses for the same source may both parse; whichever store
    lands last is kept. Parsing is pure, so either result is equivalent.
    """

    def __init__(self, loader: ManifestLoader = load_manifest_file) -> None:
        self._loader = loader
        self._entries: dict[ManifestSource, Manifest] = {}

    def resolve(self, source: Mapping[str, Any] | SourceLike) -> Manifest:
        if isinstance(source, Manifest):
            return source
        if isinstance(source, Mapping):
            # Decoded manifest data is already resolved by the caller; parse it uncached.
            return parse(source)
        key = as_source(source)
        manifest = self._entries.get(key)
        if manifest is None:
            logger.debug("Parsing Vite manifest at %s", key.location)
            manifest = self._loader(key.location)
            self._entries[key] = manifest
        return manifest

    def invalidate(self, source: SourceLike) -> None:
        key = as_source(source)
        if self._entries.pop(key, None) is not None:
            logger.debug("Dropped cached Vite manifest for %s", key.location)

    def clear(self) -> None:
        self._entries.clear()

    def __contains__(self, source: object) -> bool:
        if not isinstance(source, (ManifestSource, str, Path)):
            return False
        return as_source(source) in self._entries

    def __len__(self) -> int:
        return len(self._entries)


default_cache = ManifestCache()


def cached_manifest(source: Mapping[str, Any] | SourceLike) -> Manifest:
    """Resolve ``source`` through the process-wide cache."""
    return default_cache.resolve(source)


def clear_manifest_cache(source: SourceLike) -> None:
    """Forget the cached manifest for ``source`` so the next access reparses it."""
    default_cache.invalidate(source)
