"""Turn decoded manifest JSON into :class:`Manifest` objects."""

from __future__ import annotations

import json
from collections.abc import Mapping
from pathlib import Path
from typing import Any

from pydantic import ValidationError

from ..errors import MalformedManifest
from .models import Chunk, Manifest


def parse(data: Any) -> Manifest:
    """Validate decoded manifest data keyed by entry path.

    Each value must be an object with at least a ``file`` field; ``css`` and
    ``imports`` default to empty lists. Import keys are not checked here, the
    resolver reports them when an entry reaches them.
    """
    if not isinstance(data, Mapping):
        raise MalformedManifest(f"Vite manifest must be an object, got {type(data).__name__}.")

    chunks: dict[str, Chunk] = {}
    for key, raw in data.items():
        if not isinstance(key, str):
            raise MalformedManifest(f"Vite manifest keys must be strings, got {key!r}.")
        if not isinstance(raw, Mapping):
            raise MalformedManifest(f"Manifest entry '{key}' must be an object.")
        if "file" not in raw:
            raise MalformedManifest(f"Manifest entry '{key}' does not define a 'file'.")
        try:
            chunks[key] = Chunk.model_validate(dict(raw))
        except ValidationError as exc:
            raise MalformedManifest(f"Manifest entry '{key}' failed validation: {exc}") from exc
    return Manifest(chunks)


def load_manifest_file(path: str | Path) -> Manifest:
    """Read a manifest.json file from disk and parse it."""
    manifest_path = Path(path)
    try:
        with manifest_path.open("r", encoding="utf-8") as handle:
            data = json.load(handle)
    except (OSError, json.JSONDecodeError) as exc:
        raise MalformedManifest(f"Failed to load Vite manifest at {manifest_path}: {exc}") from exc
    return parse(data)
