"""AsyncClick CLI for the deprecations audit.

Provides user-facing commands:
- run: Audit an artifacts file and print the JSON result
- summary: Audit an artifacts file and print a text table
"""

import json
import logging
import sys

import asyncclick as click
import structlog

from deprecation_audit.audits import AuditResult, DeprecationsAudit
from deprecation_audit.bundles import JsonBundleProvider, StaticBundleProvider
from deprecation_audit.core.artifacts import load_artifacts
from deprecation_audit.core.config import Config, load_config
from deprecation_audit.core.exceptions import DeprecationAuditError
from deprecation_audit.core.output import format_output

logger = structlog.get_logger()


def configure_logging(config: Config) -> None:
    """Send structlog output to stderr, filtered at the configured level."""
    level = getattr(logging, config.log_level.upper(), logging.WARNING)
    structlog.configure(
        wrapper_class=structlog.make_filtering_bound_logger(level),
        logger_factory=structlog.PrintLoggerFactory(file=sys.stderr),
    )


async def run_audit(artifacts_path: str, bundles_path: str | None, config: Config) -> AuditResult:
    """Load artifacts, pick a bundle provider, and run the audit."""
    artifacts = load_artifacts(artifacts_path)
    provider = JsonBundleProvider(bundles_path) if bundles_path else StaticBundleProvider()
    return await DeprecationsAudit(config).audit(artifacts, provider)


@click.group()
@click.pass_context
async def cli(ctx):
    """Deprecated API usage audit"""
    ctx.ensure_object(dict)
    config = load_config()
    configure_logging(config)
    ctx.obj["config"] = config


@cli.command()
@click.argument("artifacts", type=click.Path(dir_okay=False))
@click.option("--bundles", "-b", default=None, type=click.Path(dir_okay=False),
              help="JSON file with precomputed bundle records")
@click.option("--pretty", is_flag=True, help="Indent the JSON output")
@click.pass_context
async def run(ctx, artifacts: str, bundles: str | None, pretty: bool):
    """Audit ARTIFACTS and print the result as JSON.

    Examples:
        deprecation-audit run artifacts.json
        deprecation-audit run artifacts.json -b bundles.json --pretty
    """
    try:
        result = await run_audit(artifacts, bundles, ctx.obj["config"])
    except DeprecationAuditError as e:
        click.echo(f"[-] Audit failed: {e}", err=True)
        ctx.exit(1)

    click.echo(json.dumps(result.to_dict(), indent=2 if pretty else None))


@cli.command()
@click.argument("artifacts", type=click.Path(dir_okay=False))
@click.option("--bundles", "-b", default=None, type=click.Path(dir_okay=False),
              help="JSON file with precomputed bundle records")
@click.pass_context
async def summary(ctx, artifacts: str, bundles: str | None):
    """Audit ARTIFACTS and print a text summary.

    Example:
        deprecation-audit summary artifacts.json
    """
    try:
        result = await run_audit(artifacts, bundles, ctx.obj["config"])
    except DeprecationAuditError as e:
        click.echo(f"[-] Audit failed: {e}", err=True)
        ctx.exit(1)

    click.echo(format_output(result.report, title=result.title))
