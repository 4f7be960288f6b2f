"""CLI entrypoints for inspecting Vite asset resolution."""

from pathlib import Path
from typing import Annotated

import typer
import yaml
from rich.console import Console
from rich.table import Table

from .config import ViteConfig, load_config
from .errors import ViteRefError
from .manifest import cached_manifest, resolve_entry
from .markup import render_tags
from .references import AssetReference, references_for_entry
from .render import DevServerMode, render_assets

console = Console()
app = typer.Typer(help="Resolve Vite manifest entries into page asset references.")

ConfigPathOption = Annotated[
    str,
    typer.Option("--config", "-c", help="Path to configuration file or project directory."),
]


@app.command()
def tags(
    names: Annotated[
        list[str],
        typer.Argument(..., help="Entry names as they appear in the Vite manifest, e.g. js/app.js."),
    ],
    config_path: ConfigPathOption = ".",
    dev: Annotated[
        bool | None,
        typer.Option("--dev/--no-dev", help="Force dev server references on or off."),
    ] = None,
    react: Annotated[
        bool | None,
        typer.Option("--react/--no-react", help="Force the React refresh preamble on or off."),
    ] = None,
) -> None:
    """Print the <script>/<link> tags a page needs for NAMES."""
    config = _load(config_path)
    overrides: dict[str, bool] = {}
    if dev is not None:
        overrides["dev_server"] = dev
        if not dev:
            overrides["watchers"] = []
    if react is not None:
        overrides["react_refresh"] = react
    if overrides:
        config = config.model_copy(update=overrides)

    try:
        references = render_assets(names, config.mode(), to_url=config.url_transform())
    except ViteRefError as exc:
        console.print(f"[bold red]Cannot resolve assets[/]: {exc}")
        raise typer.Exit(code=1) from exc

    typer.echo(render_tags(references), nl=False)


@app.command()
def inspect(
    name: Annotated[str, typer.Argument(..., help="Manifest entry to inspect.")],
    config_path: ConfigPathOption = ".",
    json_output: Annotated[
        bool,
        typer.Option("--json", help="Emit machine-readable JSON instead of a table."),
    ] = False,
) -> None:
    """Show the chunks and references resolved for one manifest entry."""
    config = _load(config_path)
    if isinstance(config.mode(), DevServerMode):
        console.print("[bold yellow]Dev server enabled[/]: inspecting the manifest anyway.")

    try:
        manifest = cached_manifest(config.manifest_source)
        resolved = resolve_entry(manifest, name)
    except ViteRefError as exc:
        console.print(f"[bold red]Cannot resolve assets[/]: {exc}")
        raise typer.Exit(code=1) from exc

    references = references_for_entry(resolved, to_url=config.url_transform())
    if json_output:
        console.print_json(
            data={
                "entry": resolved.name,
                "chunks": [chunk.model_dump(mode="json") for chunk in resolved.chunks],
                "references": [reference.to_dict() for reference in references],
            }
        )
        return
    _print_references(resolved.name, references, config)


def _print_references(name: str, references: list[AssetReference], config: ViteConfig) -> None:
    table = Table(title=f"Assets for {name}")
    table.add_column("#", justify="right")
    table.add_column("Kind")
    table.add_column("URL")
    for index, reference in enumerate(references, start=1):
        table.add_row(str(index), reference.kind.value, reference.url)
    console.print(table)
    console.print(f"[bold blue]Manifest[/]: {_display_path(config.manifest_path)}")


def _load(path: str) -> ViteConfig:
    try:
        return load_config(path)
    except FileNotFoundError as exc:
        raise typer.BadParameter(f"Config file not found: {path}") from exc
    except (ValueError, yaml.YAMLError) as exc:
        raise typer.BadParameter(str(exc)) from exc


def _display_path(path: Path) -> str:
    try:
        return str(path.relative_to(Path.cwd()))
    except ValueError:
        return str(path)
