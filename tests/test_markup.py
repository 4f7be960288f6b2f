from __future__ import annotations

from jinja2 import DictLoader, Environment

from viteref.config import ViteConfig
from viteref.dev_server import dev_server_references
from viteref.manifest import parse
from viteref.markup import install_globals, render_tags
from viteref.references import AssetKind, AssetReference
from viteref.render import ManifestMode, render_assets


def test_render_tags_emits_one_tag_per_reference() -> None:
    manifest = parse(
        {
            "app.js": {"file": "app-abc.js", "css": ["app-abc.css"], "imports": ["shared.js"]},
            "shared.js": {"file": "shared-def.js"},
        }
    )

    html = render_tags(render_assets(["app.js"], ManifestMode(manifest)))

    assert html.splitlines() == [
        '<link rel="stylesheet" href="/app-abc.css?vsn=d">',
        '<script type="module" src="/app-abc.js?vsn=d"></script>',
        '<link rel="modulepreload" href="/shared-def.js?vsn=d">',
    ]


def test_render_tags_escapes_attribute_values() -> None:
    html = render_tags([AssetReference(AssetKind.SCRIPT, '/app.js?a=1&b="2"')])

    assert 'src="/app.js?a=1&amp;b=&#34;2&#34;"' in html


def test_render_tags_keeps_refresh_preamble_unescaped() -> None:
    html = render_tags(dev_server_references([], react_refresh=True))

    assert "import RefreshRuntime from \"/@react-refresh\"" in html
    assert "window.$RefreshSig$ = () => (type) => type" in html
    assert html.index("RefreshRuntime") < html.index('src="/@vite/client"')


def test_install_globals_renders_with_config(tmp_path) -> None:
    environment = Environment(loader=DictLoader({"head.html": "{{ vite_assets('js/app.js') }}"}))
    config = ViteConfig(dev_server=True, dev_server_url="http://localhost:5173/")
    install_globals(environment, config)

    html = environment.get_template("head.html").render()

    assert '<script type="module" src="http://localhost:5173/@vite/client"></script>' in html
    assert '<script type="module" src="http://localhost:5173/js/app.js"></script>' in html


def test_refresh_preamble_cannot_close_its_script_tag() -> None:
    references = dev_server_references([], to_url=lambda path: f"http://x</script>{path}", react_refresh=True)

    html = render_tags(references)

    inline = html.split('<script type="module">', 1)[1].split("</script>", 1)[0]
    assert "RefreshRuntime.injectIntoGlobalHook(window)" in inline
    assert "__vite_plugin_react_preamble_installed__" in inline
