"""
chromegen — CLI entrypoint.

Usage:
    chromegen --help
    chromegen build [WORKSPACE]
    chromegen check [WORKSPACE]
"""

from __future__ import annotations

import json
import os
import sys
from pathlib import Path

import click

from chromegen import __version__
from chromegen.core.observability.logging_config import setup_logging


@click.group()
@click.version_option(version=__version__, prog_name="chromegen")
@click.option("--verbose", "-v", is_flag=True, help="Enable verbose output.")
@click.option("--quiet", "-q", is_flag=True, help="Suppress non-essential output.")
@click.option("--debug", is_flag=True, help="Enable debug logging (very verbose).")
@click.option(
    "--config",
    "-c",
    "config_path",
    type=click.Path(exists=False),
    default=None,
    help="Path to chromegen.yml (default: auto-detect from the workspace).",
)
@click.pass_context
def cli(
    ctx: click.Context,
    verbose: bool,
    quiet: bool,
    debug: bool,
    config_path: str | None,
) -> None:
    """Chrome extension generator — turn plugin contributions into extension files."""
    ctx.ensure_object(dict)
    ctx.obj["verbose"] = verbose
    ctx.obj["quiet"] = quiet
    ctx.obj["config_path"] = Path(config_path) if config_path else None

    if debug:
        level = "DEBUG"
    elif verbose:
        level = "INFO"
    elif quiet:
        level = "ERROR"
    else:
        level = os.environ.get("CHROMEGEN_LOG_LEVEL", "WARNING")

    setup_logging(
        level=level,
        log_file=os.environ.get("CHROMEGEN_LOG_FILE"),
        log_file_level=os.environ.get("CHROMEGEN_LOG_FILE_LEVEL"),
        quiet_third_party=not debug,
    )


@cli.command()
@click.argument("workspace", type=click.Path(file_okay=False, path_type=Path), default=".")
@click.option("--api-url", default=None, help="Override the API base URL.")
@click.option("--output-path", default=None, help="Override the output path (relative to WORKSPACE).")
@click.option("--json-output", "--json", "as_json", is_flag=True, help="Output as JSON.")
@click.pass_context
def build(
    ctx: click.Context,
    workspace: Path,
    api_url: str | None,
    output_path: str | None,
    as_json: bool,
) -> None:
    """Generate Chrome extension files from plugin contributions.

    Examples:

        chromegen build

        chromegen build ../orchestra --output-path dist/chrome
    """
    from chromegen.core.use_cases.build import run_build

    quiet = ctx.obj.get("quiet", False)
    if not as_json and not quiet:
        click.echo(f"[chrome] Generating extension files in {workspace} ...")

    result = run_build(
        workspace,
        config_path=ctx.obj.get("config_path"),
        api_url=api_url,
        output_path=output_path,
    )

    if as_json:
        click.echo(json.dumps(result.to_dict(), indent=2))
        sys.exit(0 if result.ok else 1)

    if not result.ok:
        click.secho(f"[chrome] Build failed: {result.error}", fg="red", err=True)
        sys.exit(1)

    report = result.report
    assert report is not None  # guaranteed when ok

    if not quiet:
        if ctx.obj.get("verbose"):
            click.echo(f"   Producers: {len(result.producers)}")
            if report.template_copied:
                click.echo("   Template:  copied")
            for f in report.files:
                click.echo(f"     • {f.path}  ({f.reason})")
        click.secho("[chrome] Extension files generated successfully", fg="green")


@cli.command()
@click.argument("workspace", type=click.Path(file_okay=False, path_type=Path), default=".")
@click.option("--json-output", "--json", "as_json", is_flag=True, help="Output as JSON.")
@click.pass_context
def check(ctx: click.Context, workspace: Path, as_json: bool) -> None:
    """Validate chromegen.yml and its declared plugins."""
    from chromegen.core.use_cases.config_check import check_config

    result = check_config(config_path=ctx.obj.get("config_path"), start_dir=workspace)

    if as_json:
        click.echo(json.dumps(result.to_dict(), indent=2))
        sys.exit(0 if result.valid else 1)

    if result.valid:
        assert result.config is not None  # guaranteed when valid
        click.secho("✅ Configuration is valid", fg="green", bold=True)
        click.echo(f"   Extension: {result.config.name} {result.config.version}")
        click.echo(f"   Plugins:   {len(result.plugins)}")
    else:
        click.secho("❌ Configuration errors:", fg="red", bold=True)
        for err in result.errors:
            click.echo(f"   • {err}")

    if result.warnings:
        click.echo()
        click.secho("⚠️  Warnings:", fg="yellow")
        for warn in result.warnings:
            click.echo(f"   • {warn}")

    if not result.valid:
        sys.exit(1)


def main(argv: list[str] | None = None) -> int:
    """Console-script entry point. Usage errors exit with 1, like build failures."""
    try:
        rv = cli.main(args=argv, prog_name="chromegen", standalone_mode=False)
    except click.UsageError as e:
        e.show()
        return 1
    except click.Abort:
        click.echo("Aborted!", err=True)
        return 1
    return rv if isinstance(rv, int) else 0


if __name__ == "__main__":
    sys.exit(main())
