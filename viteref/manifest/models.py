"""Pydantic models describing Vite manifest structures."""

from __future__ import annotations

from collections.abc import Iterator, Mapping
from typing import Optional

from pydantic import BaseModel, ConfigDict, Field


class Chunk(BaseModel):
    """One compiled output unit listed in the Vite manifest."""

    model_config = ConfigDict(extra="ignore", frozen=True, populate_by_name=True)

    file: str = Field(..., description="Path of the emitted asset, relative to the build output.")
    css: list[str] = Field(default_factory=list)
    imports: list[str] = Field(default_factory=list, description="Manifest keys loaded alongside this chunk.")
    src: Optional[str] = Field(default=None)
    name: Optional[str] = Field(default=None)
    is_entry: bool = Field(default=False, alias="isEntry")
    is_dynamic_entry: bool = Field(default=False, alias="isDynamicEntry")
    dynamic_imports: list[str] = Field(default_factory=list, alias="dynamicImports")
    assets: list[str] = Field(default_factory=list)


class Manifest(Mapping[str, Chunk]):
    """Read-only mapping from manifest key to chunk."""

    __slots__ = ("_chunks",)

    def __init__(self, chunks: Mapping[str, Chunk] | None = None) -> None:
        self._chunks: dict[str, Chunk] = dict(chunks or {})

    def __getitem__(self, key: str) -> Chunk:
        return self._chunks[key]

    def __iter__(self) -> Iterator[str]:
        return iter(self._chunks)

    def __len__(self) -> int:
        return len(self._chunks)

    def __repr__(self) -> str:
        return f"Manifest({sorted(self._chunks)!r})"

    def entries(self) -> list[str]:
        """Keys of chunks Vite marked as entry points."""
        return [key for key, chunk in self._chunks.items() if chunk.is_entry]
