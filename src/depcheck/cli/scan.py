"""AsyncClick CLI for dependency evidence scans.

Provides user-facing commands:
- scan: Collect evidence from files and directories
"""

import json
import logging
import sys

import asyncclick as click
import structlog
from pydantic import ValidationError

from depcheck.core.config import load_config
from depcheck.core.evidence import format_evidence_list
from depcheck.engine import Engine


def configure_logging(verbose: bool) -> None:
    """Send log events to stderr, keeping stdout for results."""
    structlog.configure(
        wrapper_class=structlog.make_filtering_bound_logger(
            logging.INFO if verbose else logging.WARNING
        ),
        logger_factory=lambda *args: structlog.PrintLogger(sys.stderr),
    )


@click.group()
@click.option("--verbose", "-v", is_flag=True, help="Show info-level log events")
@click.pass_context
async def cli(ctx, verbose: bool):
    """depcheck - Dependency identity evidence scanner"""
    ctx.ensure_object(dict)
    configure_logging(verbose)


@cli.command()
@click.argument("paths", nargs=-1, required=True, type=click.Path(exists=True))
@click.option("--json", "as_json", is_flag=True, help="Print results as JSON")
@click.option("--disable-autoconf", is_flag=True, help="Do not run the Autoconf analyzer")
@click.option("--max-content-chars", type=click.IntRange(min=0), default=None,
              help="Characters searched per file (0 = unlimited)")
@click.pass_context
async def scan(ctx, paths: tuple[str, ...], as_json: bool, disable_autoconf: bool,
               max_content_chars: int | None):
    """Scan files and directories for dependency evidence.

    Examples:
        depcheck scan ./hello-2.12
        depcheck scan ./hello-2.12/configure.ac --json
    """
    try:
        config = load_config()
    except ValidationError as e:
        click.echo(f"[-] Invalid configuration: {e}")
        ctx.exit(1)
    if disable_autoconf:
        config.autoconf_analyzer_enabled = False
    if max_content_chars is not None:
        config.max_content_chars = max_content_chars

    engine = Engine(config=config)
    result = await engine.scan(paths)

    if as_json:
        payload = [
            {
                "file": str(dep.actual_file),
                "display_name": dep.display_name,
                "highest_confidence": dep.highest_confidence(),
                "evidence": [e.model_dump(mode="json") for e in dep.evidence],
            }
            for dep in result.dependencies
        ]
        click.echo(json.dumps({"dependencies": payload, "errors": result.errors}, indent=2))
    else:
        click.echo(f"[*] Dependencies scanned: {len(result.dependencies)}")
        for dep in result.dependencies:
            click.echo(f"\n[+] {dep.display_name}")
            if dep.evidence:
                click.echo(f"    Highest confidence: {dep.highest_confidence().value.upper()}")
                click.echo(format_evidence_list(dep.evidence))
            else:
                click.echo("    (no evidence)")
        for path, error in result.errors.items():
            click.echo(f"\n[-] {path}: {error}")

    if not result.ok:
        ctx.exit(1)


if __name__ == "__main__":
    cli()
