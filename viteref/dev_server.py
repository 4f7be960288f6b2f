"""References for pages served by a running Vite dev server."""

from __future__ import annotations

import logging
from collections.abc import Iterable
from textwrap import dedent

from jinja2.utils import htmlsafe_json_dumps

from .references import AssetKind, AssetReference, UrlTransform, build_reference, identity

logger = logging.getLogger(__name__)

VITE_CLIENT_PATH = "/@vite/client"
REACT_REFRESH_PATH = "/@react-refresh"


def react_refresh_preamble(runtime_url: str) -> str:
    """Inline module installing the React fast-refresh hook before app modules load.

    The runtime URL is emitted as an HTML-safe JSON string literal so it cannot
    close the surrounding script element.
    """
    return dedent(
        f"""\
        import RefreshRuntime from {htmlsafe_json_dumps(runtime_url)}
        RefreshRuntime.injectIntoGlobalHook(window)
        window.$RefreshReg$ = () => {{}}
        window.$RefreshSig$ = () => (type) => type
        window.__vite_plugin_react_preamble_installed__ = true
        """
    )


def dev_server_references(
    names: Iterable[str],
    *,
    to_url: UrlTransform = identity,
    react_refresh: bool = False,
) -> list[AssetReference]:
    """Reference source entries directly, without consulting a manifest."""
    references: list[AssetReference] = []
    if react_refresh:
        runtime_url = to_url(REACT_REFRESH_PATH)
        references.append(
            AssetReference(
                kind=AssetKind.INLINE_SCRIPT,
                url=runtime_url,
                content=react_refresh_preamble(runtime_url),
            )
        )
    references.append(AssetReference(kind=AssetKind.SCRIPT, url=to_url(VITE_CLIENT_PATH)))

    for name in names:
        reference = build_reference(name, to_url=to_url)
        if reference is None:
            logger.warning("Skipping dev server entry %s: not a script or stylesheet.", name)
            continue
        references.append(reference)
    return references
