from __future__ import annotations

import json
from pathlib import Path

import pytest

from viteref import DevServerMode, ManifestMode, assets, render_assets
from viteref.errors import UnknownEntry
from viteref.manifest import clear_manifest_cache, default_cache, parse
from viteref.references import AssetKind

SCENARIO_MANIFEST = {
    "app.js": {"file": "app-abc.js", "css": ["app-abc.css"], "imports": ["shared.js"]},
    "shared.js": {"file": "shared-def.js", "css": []},
}


def _pairs(references) -> list[tuple[AssetKind, str]]:
    return [(ref.kind, ref.url) for ref in references]


def test_manifest_mode_orders_stylesheet_script_then_preload() -> None:
    references = render_assets(["app.js"], ManifestMode(parse(SCENARIO_MANIFEST)))

    assert _pairs(references) == [
        (AssetKind.STYLESHEET, "/app-abc.css?vsn=d"),
        (AssetKind.SCRIPT, "/app-abc.js?vsn=d"),
        (AssetKind.MODULEPRELOAD, "/shared-def.js?vsn=d"),
    ]


def test_dev_mode_skips_the_manifest() -> None:
    references = render_assets(["js/app.js"], DevServerMode(react_refresh=False))

    assert _pairs(references) == [
        (AssetKind.SCRIPT, "/@vite/client"),
        (AssetKind.SCRIPT, "/js/app.js"),
    ]


def test_dev_flag_never_touches_manifest_source(tmp_path: Path) -> None:
    missing = tmp_path / "does-not-exist.json"

    references = assets(["js/app.js"], missing, dev_server=True)

    assert len(references) == 2
    assert missing not in default_cache


def test_unknown_entry_aborts_render() -> None:
    with pytest.raises(UnknownEntry):
        render_assets(["missing"], ManifestMode(parse(SCENARIO_MANIFEST)))


def test_shared_chunks_are_not_repeated_across_entries() -> None:
    manifest = parse(
        {
            "js/a.js": {"file": "a.js", "imports": ["_vendor.js"]},
            "js/b.js": {"file": "b.js", "imports": ["_vendor.js"]},
            "_vendor.js": {"file": "vendor.js", "css": ["vendor.css"]},
        }
    )

    references = render_assets(["js/a.js", "js/b.js"], ManifestMode(manifest))

    assert _pairs(references) == [
        (AssetKind.STYLESHEET, "/vendor.css?vsn=d"),
        (AssetKind.SCRIPT, "/a.js?vsn=d"),
        (AssetKind.MODULEPRELOAD, "/vendor.js?vsn=d"),
        (AssetKind.SCRIPT, "/b.js?vsn=d"),
    ]


def test_manifest_source_is_parsed_through_the_cache(tmp_path: Path) -> None:
    path = tmp_path / ".vite" / "manifest.json"
    path.parent.mkdir()
    path.write_text(json.dumps(SCENARIO_MANIFEST), encoding="utf-8")

    first = assets(["app.js"], path, to_url=lambda p: f"/static{p}")
    path.unlink()
    second = assets(["app.js"], path, to_url=lambda p: f"/static{p}")

    assert first == second
    assert first[0].url == "/static/app-abc.css?vsn=d"
    clear_manifest_cache(path)


def test_unsupported_mode_is_rejected() -> None:
    with pytest.raises(TypeError):
        render_assets(["app.js"], "manifest")  # type: ignore[arg-type]
