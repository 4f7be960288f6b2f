"""Typed asset references produced for a page render."""

from __future__ import annotations

import posixpath
from collections.abc import Callable, Iterable
from dataclasses import dataclass
from enum import Enum
from pathlib import PurePosixPath
from urllib.parse import urlsplit, urlunsplit

from .manifest.resolver import ResolvedEntry

SCRIPT_EXTENSIONS = frozenset({".js", ".jsx", ".mjs", ".mts", ".ts", ".tsx"})
STYLESHEET_EXTENSIONS = frozenset({".css"})
CACHE_BUST_QUERY = "vsn=d"

UrlTransform = Callable[[str], str]


def identity(path: str) -> str:
    return path


class AssetKind(str, Enum):
    """How a reference is loaded by the browser."""

    SCRIPT = "script"
    STYLESHEET = "stylesheet"
    MODULEPRELOAD = "modulepreload-script"
    INLINE_SCRIPT = "inline-script"


@dataclass(frozen=True, slots=True)
class AssetReference:
    """A single script, stylesheet or preload hint to place in the page head."""

    kind: AssetKind
    url: str
    content: str | None = None

    def to_dict(self) -> dict[str, str | None]:
        return {"kind": self.kind.value, "url": self.url, "content": self.content}


def classify(path: str, *, preload: bool = False) -> AssetKind | None:
    """Map a file path to the reference kind used for it, if any."""
    suffix = PurePosixPath(urlsplit(path).path).suffix
    if suffix in SCRIPT_EXTENSIONS:
        return AssetKind.MODULEPRELOAD if preload else AssetKind.SCRIPT
    if suffix in STYLESHEET_EXTENSIONS:
        return AssetKind.STYLESHEET
    return None


def served_path(path: str, *, cache: bool = False) -> str:
    """Root ``path`` at ``/`` and optionally append the cache-busting marker."""
    rooted = posixpath.join("/", path.lstrip("/"))
    if not cache:
        return rooted
    parts = urlsplit(rooted)
    query = f"{parts.query}&{CACHE_BUST_QUERY}" if parts.query else CACHE_BUST_QUERY
    return urlunsplit(parts._replace(query=query))


def build_reference(
    path: str,
    *,
    to_url: UrlTransform = identity,
    cache: bool = False,
    preload: bool = False,
) -> AssetReference | None:
    """Return the reference for ``path``, or ``None`` for non-asset files."""
    kind = classify(path, preload=preload)
    if kind is None:
        return None
    return AssetReference(kind=kind, url=to_url(served_path(path, cache=cache)))


def build_references(
    paths: Iterable[str],
    *,
    to_url: UrlTransform = identity,
    cache: bool = False,
    preload: bool = False,
) -> list[AssetReference]:
    references: list[AssetReference] = []
    for path in paths:
        reference = build_reference(path, to_url=to_url, cache=cache, preload=preload)
        if reference is not None:
            references.append(reference)
    return references


def references_for_entry(resolved: ResolvedEntry, *, to_url: UrlTransform = identity) -> list[AssetReference]:
    """Stylesheets first, then the entry script, then preloads for its imports."""
    references = build_references(resolved.stylesheets(), to_url=to_url, cache=True)
    references.extend(build_references([resolved.chunk.file], to_url=to_url, cache=True))
    references.extend(build_references(resolved.preloads(), to_url=to_url, cache=True, preload=True))
    return references
