"""
cmdforge — CLI entrypoint.

Usage:
    python -m cmdforge.main --help
    cmdforge build ls -s long -s all -s human
    cmdforge chain pipeline.yml
    cmdforge catalog check

The CLI only prints commands; it never executes them.
"""

from __future__ import annotations

import json
import os
import sys
from pathlib import Path

import click

from cmdforge import __version__
from cmdforge.core.observability.logging_config import (
    LOG_FILE_ENV,
    LOG_FILE_LEVEL_ENV,
    resolve_level,
    setup_logging,
)

_RISK_STYLE = {
    "none": ("🟢", "green"),
    "caution": ("🟡", "yellow"),
    "dangerous": ("🔴", "red"),
}


@click.group()
@click.version_option(version=__version__, prog_name="cmdforge")
@click.option("--verbose", "-v", is_flag=True, help="Enable verbose output.")
@click.option("--quiet", "-q", is_flag=True, help="Suppress non-essential output.")
@click.option("--debug", is_flag=True, help="Enable debug logging (very verbose).")
@click.option(
    "--catalog",
    "catalog_path",
    type=click.Path(exists=False),
    default=None,
    help="Path to a command catalogue (default: $CMDFORGE_CATALOG, commands.yml, or bundled).",
)
@click.pass_context
def cli(
    ctx: click.Context,
    verbose: bool,
    quiet: bool,
    debug: bool,
    catalog_path: str | None,
) -> None:
    """cmdforge — build shell command lines from a tool catalogue."""
    ctx.ensure_object(dict)
    ctx.obj["verbose"] = verbose
    ctx.obj["quiet"] = quiet
    ctx.obj["catalog_path"] = Path(catalog_path) if catalog_path else None

    # ── Logging setup (once, at process start) ──────────────────
    setup_logging(
        level=resolve_level(debug=debug, verbose=verbose, quiet=quiet),
        log_file=os.environ.get(LOG_FILE_ENV),
        log_file_level=os.environ.get(LOG_FILE_LEVEL_ENV),
    )


def _echo_risk(risk: str, warnings: list[str], escalation: dict | None) -> None:
    icon, color = _RISK_STYLE.get(risk, ("❔", "white"))
    click.secho(f"   {icon} Risk: {risk}", fg=color)
    for warning in warnings:
        click.secho(f"      {warning}", fg="yellow")
    if escalation:
        click.secho(f"      {escalation['reason']}", fg=color)


@cli.command()
@click.argument("command_id")
@click.option(
    "--set",
    "-s",
    "assignments",
    multiple=True,
    metavar="KEY[=VALUE]",
    help="Argument value; a bare KEY turns a checkbox argument on.",
)
@click.option("--json-output", "--json", "as_json", is_flag=True, help="Output as JSON.")
@click.pass_context
def build(
    ctx: click.Context,
    command_id: str,
    assignments: tuple[str, ...],
    as_json: bool,
) -> None:
    """Build one command line.

    Examples:

        cmdforge build ls -s long -s all -s human

        cmdforge build docker-run -s image=nginx:latest -s detach -s port=8080:80
    """
    from cmdforge.core.use_cases.build import build_command

    result = build_command(
        command_id,
        catalog_path=ctx.obj.get("catalog_path"),
        assignments=assignments,
    )

    if as_json:
        click.echo(json.dumps(result.to_dict(), indent=2, ensure_ascii=False))
        sys.exit(0 if result.resolved and result.resolved.valid else 1)

    if result.error:
        click.secho(f"❌ {result.error}", fg="red")
        sys.exit(1)

    resolved = result.resolved
    assert resolved is not None  # guaranteed after error check above

    if not resolved.valid:
        click.secho(f"❌ {command_id}: {len(resolved.errors)} problem(s)", fg="red", bold=True)
        for err in resolved.errors:
            click.echo(f"   • [{err.code.value}] {err.message}")
        if resolved.command and not ctx.obj.get("quiet"):
            click.echo()
            click.secho(f"   preview: {resolved.command}", dim=True)
        sys.exit(1)

    click.echo(resolved.command)
    if not ctx.obj.get("quiet") and (resolved.risk != "none" or resolved.warnings):
        _echo_risk(resolved.risk, resolved.warnings, resolved.escalation)


@cli.command()
@click.argument("chain_file", type=click.Path(exists=False))
@click.option("--json-output", "--json", "as_json", is_flag=True, help="Output as JSON.")
@click.pass_context
def chain(ctx: click.Context, chain_file: str, as_json: bool) -> None:
    """Build a chain of commands joined by shell operators.

    CHAIN_FILE is YAML or JSON: a list of items with ``commandId``,
    ``values`` and ``operator`` (``|``, ``&&``, ``||``, ``;``).
    """
    from cmdforge.core.use_cases.build import build_chain

    result = build_chain(Path(chain_file), catalog_path=ctx.obj.get("catalog_path"))

    if as_json:
        click.echo(json.dumps(result.to_dict(), indent=2, ensure_ascii=False))
        sys.exit(0 if result.chain and result.chain.valid else 1)

    if result.error:
        click.secho(f"❌ {result.error}", fg="red")
        sys.exit(1)

    resolved = result.chain
    assert resolved is not None

    if not resolved.valid:
        click.secho("❌ Chain not built:", fg="red", bold=True)
        for index, errors in sorted(resolved.errors.items()):
            command_id = resolved.items[index].command_id
            click.secho(f"   #{index + 1} {command_id}", fg="white", bold=True)
            for err in errors:
                click.echo(f"     • [{err.code.value}] {err.message}")
        sys.exit(1)

    click.echo(resolved.command)
    if not ctx.obj.get("quiet") and (resolved.risk != "none" or resolved.warnings):
        _echo_risk(resolved.risk, resolved.warnings, None)


@cli.group()
def catalog() -> None:
    """Command catalogue commands."""


@catalog.command("check")
@click.option("--json-output", "--json", "as_json", is_flag=True, help="Output as JSON.")
@click.pass_context
def catalog_check(ctx: click.Context, as_json: bool) -> None:
    """Validate the catalogue and replay its examples."""
    from cmdforge.core.use_cases.catalog_check import check_catalog

    result = check_catalog(ctx.obj.get("catalog_path"))

    if as_json:
        click.echo(json.dumps(result.to_dict(), indent=2, ensure_ascii=False))
        sys.exit(0 if result.valid else 1)

    if not result.valid:
        click.secho("❌ Catalogue errors:", fg="red", bold=True)
        for err in result.errors:
            click.echo(f"   • {err}")
        click.echo()
        sys.exit(1)

    source = str(result.catalog_path) if result.catalog_path else "bundled"
    click.secho("✅ Catalogue is valid", fg="green", bold=True)
    click.echo(f"   Source: {source}")
    click.echo(f"   Commands: {result.command_count}")
    click.echo(f"   Examples: {result.examples_passed}/{result.example_count} match")

    if result.warnings and not ctx.obj.get("quiet"):
        click.echo()
        click.secho("⚠️  Warnings:", fg="yellow")
        for warn in result.warnings:
            click.echo(f"   • {warn}")

    click.echo()


if __name__ == "__main__":
    cli()
