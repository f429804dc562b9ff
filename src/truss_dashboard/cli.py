"""CLI entry point for truss-dashboard."""

import asyncio
import json
import logging
from pathlib import Path

import click

from truss_dashboard import config
from truss_dashboard.catalog.service import CatalogService
from truss_dashboard.catalog.source import FileDocumentSource
from truss_dashboard.client import ParagonClient
from truss_dashboard.geometry import member_length

DOC_OPTION_HELP = "OpenAPI document (JSON or YAML). Defaults to $TRUSS_OPENAPI_PATH."


def _catalog_service(doc_path: Path | None) -> CatalogService:
    return CatalogService(FileDocumentSource(doc_path or config.OPENAPI_PATH))


@click.group()
@click.option("-v", "--verbose", is_flag=True, help="Enable debug logging.")
def main(verbose: bool):
    """Truss dashboard: inspect the widget catalog and the vendor API."""
    logging.basicConfig(level=logging.DEBUG if verbose else logging.WARNING)


@main.command()
@click.option("--doc", "doc_path", default=None, type=click.Path(path_type=Path), help=DOC_OPTION_HELP)
@click.option("--tag", default=None, help="Only show endpoints with this tag.")
def endpoints(doc_path: Path | None, tag: str | None):
    """List GET endpoints available to widgets, grouped by tag."""
    groups = asyncio.run(_catalog_service(doc_path).get_endpoints_by_tag())
    if tag is not None:
        groups = {tag: groups.get(tag, [])}

    total = 0
    for group, eps in groups.items():
        click.echo(f"[{group}]")
        for ep in eps:
            shape = ""
            if ep.response_shape is not None:
                kind = ep.response_shape.element_kind or ep.response_shape.raw_kind or "?"
                shape = f" -> {kind}[]" if ep.response_shape.is_array else f" -> {kind}"
            click.echo(f"  {ep.method} {ep.path}{shape}")
            total += 1
    click.echo(f"Found {total} endpoints.")


@main.command()
@click.argument("name")
@click.option("--doc", "doc_path", default=None, type=click.Path(path_type=Path), help=DOC_OPTION_HELP)
def schema(name: str, doc_path: Path | None):
    """Show the properties of a schema."""
    info = asyncio.run(_catalog_service(doc_path).get_schema(name))
    if info is None:
        raise click.ClickException(f"Unknown schema: {name}")

    click.echo(f"{info.name} ({info.kind})")
    for prop in info.properties:
        fmt = f" ({prop.format})" if prop.format else ""
        marker = " *" if prop.required else ""
        click.echo(f"  {prop.name}: {prop.type}{fmt}{marker}")


@main.command("member-length")
@click.argument("points_path", type=click.Path(exists=True, path_type=Path))
def member_length_cmd(points_path: Path):
    """Compute a member's length from a JSON list of {x, y} points."""
    try:
        points = json.loads(points_path.read_text(encoding="utf-8"))
        length = member_length(points)
    except (ValueError, TypeError) as exc:
        raise click.ClickException(f"Invalid point geometry: {exc}") from exc
    click.echo(f"{length:g}")


@main.command()
@click.option("--base-url", default=None, help="Vendor API base URL.")
def health(base_url: str | None):
    """Check that the vendor API is reachable."""
    client = ParagonClient(base_url=base_url)
    if not client.health_check():
        raise click.ClickException(f"Vendor API at {client.base_url} is unreachable")
    click.echo(f"Vendor API at {client.base_url} is reachable")
