"""Render entry point switching between manifest and dev server assets."""

from __future__ import annotations

from collections.abc import Iterable, Mapping
from dataclasses import dataclass
from typing import Any, Union

from .dev_server import dev_server_references
from .manifest.cache import SourceLike, cached_manifest
from .manifest.resolver import resolve_entry
from .references import AssetReference, UrlTransform, identity, references_for_entry


@dataclass(frozen=True, slots=True)
class ManifestMode:
    """Resolve compiled assets from a build manifest."""

    source: Union[Mapping[str, Any], SourceLike]


@dataclass(frozen=True, slots=True)
class DevServerMode:
    """Reference unbundled sources served by the Vite dev server."""

    react_refresh: bool = False


AssetMode = Union[ManifestMode, DevServerMode]


def render_assets(
    names: Iterable[str],
    mode: AssetMode,
    *,
    to_url: UrlTransform = identity,
) -> list[AssetReference]:
    """Return the ordered asset references for ``names`` under ``mode``."""
    if isinstance(mode, DevServerMode):
        return dev_server_references(names, to_url=to_url, react_refresh=mode.react_refresh)
    if isinstance(mode, ManifestMode):
        return _manifest_references(names, mode.source, to_url)
    raise TypeError(f"Unsupported asset mode: {mode!r}")


def _manifest_references(
    names: Iterable[str],
    source: Union[Mapping[str, Any], SourceLike],
    to_url: UrlTransform,
) -> list[AssetReference]:
    manifest = cached_manifest(source)
    references: list[AssetReference] = []
    emitted: set[AssetReference] = set()
    for name in names:
        for reference in references_for_entry(resolve_entry(manifest, name), to_url=to_url):
            # Entries sharing chunks would otherwise repeat the same tag.
            if reference in emitted:
                continue
            emitted.add(reference)
            references.append(reference)
    return references


def assets(
    names: Iterable[str],
    manifest: Union[Mapping[str, Any], SourceLike],
    *,
    dev_server: bool = False,
    to_url: UrlTransform = identity,
    react_refresh: bool = False,
) -> list[AssetReference]:
    """Flag-driven form of :func:`render_assets` for template helpers."""
    mode: AssetMode = DevServerMode(react_refresh=react_refresh) if dev_server else ManifestMode(manifest)
    return render_assets(names, mode, to_url=to_url)
