"""
IPA Distribution CLI - Command-line interface.

Run the server, publish builds and render manifests from the terminal.
"""

from dataclasses import replace
from pathlib import Path
from typing import Optional

import typer
from rich.console import Console
from rich.panel import Panel
from rich.table import Table

from ipa_distribution.artifacts import ArtifactStore
from ipa_distribution.config import DistributionConfig
from ipa_distribution.core.exceptions import DistributionError
from ipa_distribution.manifest import generate_manifest

app = typer.Typer(
    name="ipa-distribution",
    help="IPA Distribution - over-the-air delivery of iOS builds",
    no_args_is_help=True,
)
console = Console()


def _load_config(storage_root: Optional[Path]) -> DistributionConfig:
    """Environment configuration, optionally re-rooted at storage_root."""
    try:
        config = DistributionConfig.from_env()
    except DistributionError as e:
        console.print(f"[red]Configuration error:[/red] {e}")
        raise typer.Exit(2)

    if storage_root is None:
        return config

    rooted = DistributionConfig.for_root(storage_root)
    return replace(config, staging_root=rooted.staging_root, publish_root=rooted.publish_root)


@app.command()
def serve(
    host: Optional[str] = typer.Option(None, "--host", help="Bind address (default: IPA_HOST)"),
    port: Optional[int] = typer.Option(None, "--port", "-p", help="Port (default: PORT/IPA_PORT)"),
    reload: bool = typer.Option(False, "--reload", help="Reload on code changes"),
):
    """Run the HTTP API with uvicorn."""
    import uvicorn

    config = _load_config(None)
    bind_host = host or config.host
    bind_port = port or config.port

    console.print(
        Panel.fit(
            f"[bold blue]IPA Distribution[/bold blue]\n"
            f"Listening: http://{bind_host}:{bind_port}\n"
            f"Staging: {config.staging_root}\n"
            f"Publish: {config.publish_root}"
        )
    )
    uvicorn.run(
        "ipa_distribution.api.app:create_app",
        factory=True,
        host=bind_host,
        port=bind_port,
        reload=reload,
        log_level=config.log_level.lower(),
    )


@app.command()
def apps(
    storage_root: Optional[Path] = typer.Option(
        None, "--storage-root", "-s", help="Override IPA_STORAGE_ROOT"
    ),
):
    """List published builds."""
    store = ArtifactStore(_load_config(storage_root))
    try:
        entries = store.list_published()
    except DistributionError as e:
        console.print(f"[red]Error:[/red] {e}")
        raise typer.Exit(1)

    # Wide enough that the title never wraps above an empty table
    table = Table(title=f"Published Builds ({len(entries)})", min_width=40)
    table.add_column("Name", style="cyan")
    table.add_column("Path")

    for entry in entries:
        table.add_row(entry.name, entry.path)

    console.print(table)


@app.command()
def publish(
    ipa_file: Path = typer.Argument(..., help="Path to the .ipa to publish", exists=True, dir_okay=False),
    version: str = typer.Option(..., "--version", "-v", help="Version the build is stored under"),
    storage_root: Optional[Path] = typer.Option(
        None, "--storage-root", "-s", help="Override IPA_STORAGE_ROOT"
    ),
):
    """Stage and publish a local build, exactly as POST /upload does."""
    store = ArtifactStore(_load_config(storage_root))
    try:
        store.ensure_layout()
        with open(ipa_file, "rb") as source:
            result = store.upload(source, version)
    except DistributionError as e:
        console.print(f"[red]Publish failed:[/red] {e}")
        raise typer.Exit(1)

    console.print(f"[green]Published[/green] {result.file_name}")
    console.print(f"  Stored at: {store.published_path(result.version)}")


@app.command()
def manifest(
    bundle_id: str = typer.Option(..., "--bundle-id", "-b", help="App bundle identifier"),
    version: str = typer.Option(..., "--version", "-v", help="Published version"),
    title: str = typer.Option(..., "--title", "-t", help="Title shown by the installer"),
    base_url: Optional[str] = typer.Option(
        None, "--base-url", help="Public base URL (default: IPA_PUBLIC_BASE_URL)"
    ),
):
    """Print the OTA manifest for a build."""
    config = _load_config(None)
    url = base_url or config.public_base_url
    if not url:
        console.print("[red]No base URL:[/red] pass --base-url or set IPA_PUBLIC_BASE_URL")
        raise typer.Exit(2)

    try:
        document = generate_manifest(bundle_id, version, title, url)
    except DistributionError as e:
        console.print(f"[red]Error:[/red] {e}")
        raise typer.Exit(1)

    # Plain stdout so the output can be redirected into a file
    typer.echo(document, nl=False)


@app.command()
def version():
    """Show IPA Distribution version."""
    from ipa_distribution import __version__

    console.print(f"IPA Distribution v{__version__}")


if __name__ == "__main__":
    app()
