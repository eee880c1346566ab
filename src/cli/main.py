"""Main CLI entry point for cfplugin."""

import json
from pathlib import Path

import click

from src.cli.display import (
    console,
    show_error,
    show_integration_report,
    show_known_checkers,
    show_success,
)
from src.core.config.settings import Settings, get_settings
from src.core.exceptions.errors import PluginError
from src.core.logger.logger import setup_logging
from src.plugin.planner import load_build_script, plan_integration


@click.group(invoke_without_command=True)
@click.option("--version", "-V", is_flag=True, help="Show version")
@click.option("--verbose", "-v", is_flag=True, help="Enable debug logging")
@click.option(
    "--config",
    "-c",
    "config_path",
    type=click.Path(exists=True, dir_okay=False),
    help="Settings file (YAML)",
)
@click.pass_context
def main(ctx: click.Context, version: bool, verbose: bool, config_path: str | None) -> None:
    """cfplugin - run Checker Framework checkers as part of compile tasks."""
    if version:
        from src import __version__

        click.echo(f"cfplugin version {__version__}")
        return

    try:
        settings = Settings.from_yaml(Path(config_path)) if config_path else get_settings()
    except PluginError as e:
        show_error("Configuration Error", str(e))
        ctx.exit(1)

    setup_logging(settings.logging, level="DEBUG" if verbose else None)
    ctx.obj = settings

    if ctx.invoked_subcommand is None:
        click.echo(ctx.get_help())


@main.command()
def checkers() -> None:
    """List the bundled checkers and their short names."""
    show_known_checkers()


@main.command()
@click.option(
    "--script",
    "-s",
    required=True,
    type=click.Path(exists=True, dir_okay=False),
    help="Build script (YAML)",
)
@click.option(
    "--format",
    "-f",
    "output_format",
    type=click.Choice(["text", "json"]),
    default="text",
    help="Output format",
)
@click.option("--output", "-o", "output_path", type=click.Path(), help="Write the plan to a file")
@click.pass_obj
def plan(settings: Settings | None, script: str, output_format: str, output_path: str | None) -> None:
    """Show the compiler arguments each compile task would receive.

    Examples:
        cfplugin plan --script build.yaml
        cfplugin plan -s build.yaml -f json -o plan.json
    """
    settings = settings or get_settings()

    try:
        build_script = load_build_script(Path(script), settings.plugin)
        report = plan_integration(build_script, settings.plugin)
    except PluginError as e:
        show_error("Configuration Error", str(e))
        raise SystemExit(1) from e

    if output_format == "json":
        payload = json.dumps(report.to_dict(), indent=2)
        if output_path:
            Path(output_path).write_text(payload + "\n", encoding="utf-8")
            show_success("Plan Exported", f"Plan written to {output_path}")
        else:
            click.echo(payload)
        return

    show_integration_report(report)
    if output_path:
        with open(output_path, "w", encoding="utf-8") as f:
            for integration in report.tasks:
                f.write(f"{integration.task_name}: {' '.join(integration.arguments)}\n")
        console.print(f"[dim]Plan written to {output_path}[/]")


if __name__ == "__main__":
    main()
