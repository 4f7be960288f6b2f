"""Vite manifest parsing, caching and import resolution."""

from .cache import (
    ManifestCache,
    ManifestSource,
    cached_manifest,
    clear_manifest_cache,
    default_cache,
)
from .models import Chunk, Manifest
from .parser import load_manifest_file, parse
from .resolver import ResolvedEntry, imported_chunks, resolve_entry

__all__ = [
    "Chunk",
    "Manifest",
    "ManifestCache",
    "ManifestSource",
    "ResolvedEntry",
    "cached_manifest",
    "clear_manifest_cache",
    "default_cache",
    "imported_chunks",
    "load_manifest_file",
    "parse",
    "resolve_entry",
]
