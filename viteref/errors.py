"""Exceptions raised while resolving Vite assets."""

from __future__ import annotations


class ViteRefError(RuntimeError):
    """Base class for unrecoverable asset resolution failures."""


class MalformedManifest(ViteRefError, ValueError):
    """Raised when manifest data does not have the expected structure."""


class UnknownEntry(ViteRefError, KeyError):
    """Raised when a requested entry name is not present in the manifest."""

    def __init__(self, name: str) -> None:
        super().__init__(f"Entry '{name}' is not defined in the Vite manifest.")
        self.name = name

    def __str__(self) -> str:
        return str(self.args[0])


class UnknownImport(ViteRefError, KeyError):
    """Raised when a chunk imports a key the manifest does not define."""

    def __init__(self, importer: str, key: str) -> None:
        super().__init__(f"Chunk '{importer}' imports '{key}', which is not defined in the Vite manifest.")
        self.importer = importer
        self.key = key

    def __str__(self) -> str:
        return str(self.args[0])
