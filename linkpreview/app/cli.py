"""Command line entry point using Typer."""
from __future__ import annotations

import asyncio
import json
from pathlib import Path
from typing import Annotated

import typer
from loguru import logger
from rich.console import Console
from rich.table import Table

from linkpreview.app.composition import create_dependencies
from linkpreview.app.core import SERVICE_NAME
from linkpreview.app.domain.models import MetadataRecord
from linkpreview.app.services.resume_links import (
    ResumeConfigError,
    collect_resume_links,
    load_resume_config,
)

app = typer.Typer(
    name="linkpreview",
    help="Resolve preview metadata (title, description, icon) for outbound links.",
    add_completion=False,
    no_args_is_help=True,
    context_settings={"help_option_names": ["-h", "--help"]},
)

console = Console()


async def _resolve_one(url: str) -> MetadataRecord:
    deps = create_dependencies()
    await deps.connect()
    try:
        return await deps.resolver.resolve(url)
    finally:
        await deps.close()


async def _resolve_many(urls: list[str]) -> list[MetadataRecord]:
    deps = create_dependencies()
    await deps.connect()
    try:
        return list(await asyncio.gather(*(deps.resolver.resolve(url) for url in urls)))
    finally:
        await deps.close()


@app.command(name="resolve", help="Resolve metadata for a single URL and print it as JSON.")
def resolve(
    url: Annotated[str, typer.Argument(help="Absolute URL to describe.")],
) -> None:
    record = asyncio.run(_resolve_one(url))
    typer.echo(json.dumps(record.to_dict(), indent=2))


@app.command(name="preload", help="Resolve every outbound link found in a resume config.")
def preload(
    config: Annotated[Path, typer.Argument(help="Path to the resume config.json.")],
    as_json: Annotated[
        bool,
        typer.Option("--json", help="Print records as a JSON array instead of a table."),
    ] = False,
) -> None:
    try:
        urls = collect_resume_links(load_resume_config(config))
    except ResumeConfigError as exc:
        console.print(f"[red]Error:[/red] {exc}")
        raise typer.Exit(1) from exc

    if not urls:
        console.print("[yellow]No outbound links found.[/yellow]")
        return

    logger.bind(service_name=SERVICE_NAME, event="cli_preload", links=len(urls)).debug("")
    records = asyncio.run(_resolve_many(urls))

    if as_json:
        typer.echo(json.dumps([record.to_dict() for record in records], indent=2))
        return

    table = Table(title=f"Link metadata ({len(records)})")
    table.add_column("URL", overflow="fold")
    table.add_column("Title")
    table.add_column("Site")
    table.add_column("Type")
    for record in records:
        table.add_row(record.url, record.title or "", record.site_name or "", record.type or "")
    console.print(table)


def main() -> None:
    app()


if __name__ == "__main__":
    main()
