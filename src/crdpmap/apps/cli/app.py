# src/crdpmap/apps/cli/app.py
from __future__ import annotations

import json
import os
from pathlib import Path
from typing import Optional

import typer
import yaml
from rich import print

from crdpmap.adapters.fs import FileSink, MemorySink
from crdpmap.adapters.typescript import TreeSitterSchemaProvider
from crdpmap.config import const
from crdpmap.domain import CrdpMapError
from crdpmap.services.exporter import build_export, export_data
from crdpmap.services.extractor import ExtractionResult
from crdpmap.services.generator import extract_from, generate
from crdpmap.services.logging import setup_logging
from crdpmap.services.settings import Settings

app = typer.Typer(help="Generate CRDP event/command mapping typings from a protocol .d.ts file.")

# -------- вспомогательные --------


def _settings(ctx: typer.Context) -> Settings:
    return ctx.obj


def _require_schema(settings: Settings) -> None:
    if not settings.schema_path.exists():
        typer.echo(f"[error] schema file not found: {settings.schema_path}", err=True)
        raise typer.Exit(code=1)


def _fail(error: Optional[CrdpMapError]) -> None:
    if os.getenv("CRDPMAP_CLI_DEBUG") == "1" and error is not None:
        raise error
    typer.echo(f"[error] {error}", err=True)
    raise typer.Exit(code=1)


def _extract(settings: Settings) -> ExtractionResult:
    _require_schema(settings)
    result = extract_from(settings, TreeSitterSchemaProvider())
    if not result.ok:
        _fail(result.error)
    return result


def _run_generate(settings: Settings) -> None:
    _require_schema(settings)
    result = generate(settings, TreeSitterSchemaProvider(), FileSink(settings.output_path))
    if not result.ok:
        _fail(result.error)
    typer.echo(const.COMPLETION_MESSAGE)


# -------- корневой callback --------


@app.callback(invoke_without_command=True)
def main(
    ctx: typer.Context,
    env_file: str = typer.Option(".env", "--env-file", help="dotenv file with CRDPMAP_* settings"),
    log_level: Optional[str] = typer.Option(None, "--log-level", help="DEBUG|INFO|WARNING|ERROR"),
):
    """
    Without a subcommand, behaves like `generate` with configured defaults.
    """
    settings = Settings.from_sources(env_file).with_overrides(log_level=log_level)
    setup_logging(settings.log_level, settings.log_file)
    ctx.obj = settings
    if ctx.invoked_subcommand is None:
        _run_generate(settings)


@app.command("generate")
def generate_cmd(
    ctx: typer.Context,
    schema: Optional[Path] = typer.Option(None, "--schema", help="protocol .d.ts to read"),
    out: Optional[Path] = typer.Option(None, "--out", help="typings file to write"),
):
    """Write the mapping typings file."""
    _run_generate(_settings(ctx).with_overrides(schema_path=schema, output_path=out))


@app.command("check")
def check_cmd(
    ctx: typer.Context,
    schema: Optional[Path] = typer.Option(None, "--schema"),
    out: Optional[Path] = typer.Option(None, "--out", help="previously generated file to compare with"),
):
    """
    Проверить дрейф: сгенерировать в памяти и сравнить с существующим файлом.
    """
    settings = _settings(ctx).with_overrides(schema_path=schema, output_path=out)
    _require_schema(settings)
    if not settings.output_path.exists():
        typer.echo(f"[warn] generated file not found: {settings.output_path}")
        raise typer.Exit(code=0)

    sink = MemorySink()
    result = generate(settings, TreeSitterSchemaProvider(), sink)
    if not result.ok:
        _fail(result.error)
    current = settings.output_path.read_text(encoding="utf-8")
    if current != sink.text:
        typer.echo(f"[error] {settings.output_path} is out of date; run `crdpmap generate`")
        raise typer.Exit(code=2)
    typer.echo("ok")


@app.command("export")
def export_cmd(
    ctx: typer.Context,
    schema: Optional[Path] = typer.Option(None, "--schema"),
    fmt: str = typer.Option("json", "--format", help="json|yaml"),
    out: Optional[Path] = typer.Option(None, "--out", help="write here instead of stdout"),
):
    """Dump the extracted mapping as JSON or YAML."""
    if fmt not in ("json", "yaml"):
        raise typer.BadParameter("format must be json|yaml")
    settings = _settings(ctx).with_overrides(schema_path=schema)
    result = _extract(settings)
    data = export_data(build_export(result.unwrap(), result.domains, str(settings.schema_path)))

    if fmt == "json":
        text = json.dumps(data, ensure_ascii=False, indent=2) + "\n"
    else:
        text = yaml.safe_dump(data, sort_keys=False, allow_unicode=True)

    if out is None:
        typer.echo(text, nl=False)
        return
    out.parent.mkdir(parents=True, exist_ok=True)
    out.write_text(text, encoding="utf-8")
    typer.echo(f"written: {out}")


@app.command("domains")
def domains_cmd(ctx: typer.Context, schema: Optional[Path] = typer.Option(None, "--schema")):
    """List protocol domains with their event and command counts."""
    result = _extract(_settings(ctx).with_overrides(schema_path=schema))
    extracted = result.unwrap()
    for domain in result.domains:
        n_events = sum(1 for e in extracted.events.values() if e.domain == domain)
        n_commands = sum(1 for c in extracted.commands.values() if c.domain == domain)
        print(f"[bold cyan]{domain}[/bold cyan]  events={n_events} commands={n_commands}")


def main_entry() -> None:
    app()
