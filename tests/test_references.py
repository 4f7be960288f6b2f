from __future__ import annotations

from viteref.manifest import parse, resolve_entry
from viteref.references import (
    AssetKind,
    AssetReference,
    build_reference,
    classify,
    references_for_entry,
    served_path,
)


def test_extension_classification() -> None:
    assert build_reference("style.css") == AssetReference(AssetKind.STYLESHEET, "/style.css")
    assert build_reference("app.ts") == AssetReference(AssetKind.SCRIPT, "/app.ts")
    assert build_reference("readme.txt") is None


def test_all_script_extensions_are_scripts() -> None:
    for name in ("a.js", "a.jsx", "a.mjs", "a.mts", "a.ts", "a.tsx"):
        assert classify(name) is AssetKind.SCRIPT
    assert classify("a.js", preload=True) is AssetKind.MODULEPRELOAD
    assert classify("a.css", preload=True) is AssetKind.STYLESHEET
    assert classify("assets/logo.svg") is None


def test_cache_busting_marker() -> None:
    busted = build_reference("x.js", cache=True)
    plain = build_reference("x.js", cache=False)

    assert busted is not None and busted.url == "/x.js?vsn=d"
    assert plain is not None and plain.url == "/x.js"


def test_served_path_roots_paths_and_extends_existing_query() -> None:
    assert served_path("assets/app.js") == "/assets/app.js"
    assert served_path("/assets/app.js") == "/assets/app.js"
    assert served_path("app.js?v=2", cache=True) == "/app.js?v=2&vsn=d"


def test_url_transform_receives_rooted_path() -> None:
    seen: list[str] = []

    def to_url(path: str) -> str:
        seen.append(path)
        return f"https://cdn.example.com{path}"

    reference = build_reference("assets/app.css", to_url=to_url, cache=True)

    assert seen == ["/assets/app.css?vsn=d"]
    assert reference is not None
    assert reference.url == "https://cdn.example.com/assets/app.css?vsn=d"


def test_references_for_entry_orders_css_then_entry_then_preloads() -> None:
    manifest = parse(
        {
            "app.js": {"file": "app-abc.js", "css": ["app-abc.css"], "imports": ["shared.js"]},
            "shared.js": {"file": "shared-def.js", "css": ["shared-def.css"]},
        }
    )

    references = references_for_entry(resolve_entry(manifest, "app.js"))

    assert [(ref.kind, ref.url) for ref in references] == [
        (AssetKind.STYLESHEET, "/app-abc.css?vsn=d"),
        (AssetKind.STYLESHEET, "/shared-def.css?vsn=d"),
        (AssetKind.SCRIPT, "/app-abc.js?vsn=d"),
        (AssetKind.MODULEPRELOAD, "/shared-def.js?vsn=d"),
    ]


def test_css_entry_produces_only_a_stylesheet() -> None:
    manifest = parse({"css/app.css": {"file": "assets/app-123.css"}})

    references = references_for_entry(resolve_entry(manifest, "css/app.css"))

    assert references == [AssetReference(AssetKind.STYLESHEET, "/assets/app-123.css?vsn=d")]
