"""Walk the import graph of a Vite manifest."""

from __future__ import annotations

from collections.abc import Iterator
from dataclasses import dataclass

from ..errors import UnknownEntry, UnknownImport
from .models import Chunk, Manifest


def normalize_name(name: str) -> str:
    """Manifest keys are relative to the project root."""
    return name.lstrip("/")


def _lookup(manifest: Manifest, name: str) -> Chunk:
    try:
        return manifest[name]
    except KeyError as exc:
        raise UnknownEntry(name) from exc


def imported_chunks(manifest: Manifest, name: str) -> list[Chunk]:
    """Return every chunk reachable through ``imports`` from ``name``.

    Chunks are listed depth-first in discovery order, each one before its own
    imports and never twice. The entry itself is excluded, even when a cycle
    leads back to it.
    """
    key = normalize_name(name)
    entry = _lookup(manifest, key)
    seen = {key}
    found: list[Chunk] = []
    # One pending import iterator per chunk on the current path.
    stack: list[tuple[str, Iterator[str]]] = [(key, iter(entry.imports))]
    while stack:
        importer, pending = stack[-1]
        child_key = next(pending, None)
        if child_key is None:
            stack.pop()
            continue
        if child_key in seen:
            continue
        try:
            child = manifest[child_key]
        except KeyError as exc:
            raise UnknownImport(importer, child_key) from exc
        seen.add(child_key)
        found.append(child)
        stack.append((child_key, iter(child.imports)))
    return found


@dataclass(frozen=True, slots=True)
class ResolvedEntry:
    """An entry chunk together with its transitive imports."""

    name: str
    chunk: Chunk
    imported: tuple[Chunk, ...]

    @property
    def chunks(self) -> list[Chunk]:
        return [self.chunk, *self.imported]

    def stylesheets(self) -> list[str]:
        """Entry css first, then css of imported chunks in discovery order."""
        paths = list(self.chunk.css)
        for chunk in self.imported:
            paths.extend(chunk.css)
        return paths

    def preloads(self) -> list[str]:
        return [chunk.file for chunk in self.imported]


def resolve_entry(manifest: Manifest, name: str) -> ResolvedEntry:
    key = normalize_name(name)
    chunk = _lookup(manifest, key)
    return ResolvedEntry(name=key, chunk=chunk, imported=tuple(imported_chunks(manifest, key)))
