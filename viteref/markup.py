"""Render asset references as HTML tags with Jinja2."""

from __future__ import annotations

from collections.abc import Iterable
from typing import TYPE_CHECKING

from jinja2 import DictLoader, Environment, select_autoescape
from markupsafe import Markup

from .references import AssetKind, AssetReference
from .render import render_assets

if TYPE_CHECKING:
    from .config import ViteConfig

TAGS_TEMPLATE = "tags.html"

_TEMPLATES = {
    TAGS_TEMPLATE: """\
{% for ref in references %}
{% if ref.kind == "inline-script" %}
<script type="module">
{{ ref.content | safe }}</script>
{% elif ref.kind == "script" %}
<script type="module" src="{{ ref.url }}"></script>
{% elif ref.kind == "modulepreload-script" %}
<link rel="modulepreload" href="{{ ref.url }}">
{% elif ref.kind == "stylesheet" %}
<link rel="stylesheet" href="{{ ref.url }}">
{% endif %}
{% endfor %}
""",
}

_environment = Environment(
    loader=DictLoader(_TEMPLATES),
    autoescape=select_autoescape(["html"]),
    trim_blocks=True,
    lstrip_blocks=True,
)


def render_tags(references: Iterable[AssetReference]) -> Markup:
    """Return ``<script>``/``<link>`` markup for ``references`` in order."""
    payload = [
        {"kind": AssetKind(reference.kind).value, "url": reference.url, "content": reference.content}
        for reference in references
    ]
    template = _environment.get_template(TAGS_TEMPLATE)
    return Markup(template.render(references=payload))


def install_globals(environment: Environment, config: "ViteConfig") -> None:
    """Expose ``vite_assets(*names)`` to templates rendered by ``environment``."""

    def vite_assets(*names: str) -> Markup:
        references = render_assets(names, config.mode(), to_url=config.url_transform())
        return render_tags(references)

    environment.globals["vite_assets"] = vite_assets
