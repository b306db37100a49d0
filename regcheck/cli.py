"""Command-line interface for regcheck."""

import asyncio
from pathlib import Path
from typing import Optional

import typer
from pydantic import ValidationError
from rich.console import Console
from rich.markup import escape

from regcheck import RegistryChecker, CheckerConfig, save_json, __version__
from regcheck.core.fetcher import descriptor_url
from regcheck.exceptions import DuplicateContentError, RegistryCheckError, RegistryViolations
from regcheck.models.result import CheckReport

app = typer.Typer(
    name="regcheck",
    help="Validate the my-links user registry",
    add_completion=False,
)
console = Console()
err_console = Console(stderr=True)

DUPLICATE_MESSAGE = "page.json content has already been processed."
SUCCESS_MESSAGE = "Registry validation successful."


def version_callback(value: bool):
    if value:
        console.print(f"regcheck version {__version__}")
        raise typer.Exit()


@app.callback(invoke_without_command=True)
def main(
    ctx: typer.Context,
    version: bool = typer.Option(
        False,
        "--version",
        "-v",
        callback=version_callback,
        is_eager=True,
        help="Show version and exit",
    ),
):
    """regcheck - validate the my-links user registry."""
    if ctx.invoked_subcommand is None:
        _run_check(_load_config(), report_path=None)


@app.command()
def check(
    registry: Optional[Path] = typer.Option(
        None, "--registry", "-r", help="Path to registry.yaml"
    ),
    restricted: Optional[Path] = typer.Option(
        None, "--restricted", help="Path to restricted-usernames.yaml"
    ),
    skip_images: bool = typer.Option(
        False, "--skip-images", help="Do not check image_url reachability"
    ),
    report: Optional[Path] = typer.Option(
        None, "--report", "-o", help="Write the check report as JSON"
    ),
):
    """Validate the registry and every user's page.json."""
    overrides = {}
    if registry:
        overrides["registry_path"] = registry
    if restricted:
        overrides["restricted_path"] = restricted
    if skip_images:
        overrides["check_images"] = False

    _run_check(_load_config(**overrides), report_path=report)


@app.command()
def url(
    github_username: str = typer.Argument(..., help="GitHub username"),
):
    """Print the page.json URL checked for a GitHub user."""
    config = _load_config()
    console.print(descriptor_url(github_username, config.descriptor_url_template), soft_wrap=True)


def _load_config(**overrides) -> CheckerConfig:
    """Build the config, turning invalid settings into a one-line error."""
    try:
        return CheckerConfig(**overrides)
    except ValidationError as e:
        for error in e.errors():
            field = ".".join(str(part) for part in error["loc"]) or "settings"
            err_console.print(
                f"[red]✗[/red] Invalid configuration for {escape(field)}: {escape(error['msg'])}",
                soft_wrap=True,
            )
        raise typer.Exit(1)


def _run_check(config: CheckerConfig, report_path: Path | None) -> None:
    """Run the pipeline and translate the outcome into an exit code."""

    async def run() -> CheckReport:
        async with RegistryChecker(config) as checker:
            return await checker.run()

    try:
        result = asyncio.run(run())
    except DuplicateContentError:
        err_console.print(DUPLICATE_MESSAGE, soft_wrap=True)
        raise typer.Exit(1)
    except RegistryViolations as e:
        for error in e.errors:
            err_console.print(f"[red]✗[/red] {escape(str(error))}", soft_wrap=True)
        raise typer.Exit(1)
    except RegistryCheckError as e:
        err_console.print(f"[red]✗[/red] {escape(str(e))}", soft_wrap=True)
        raise typer.Exit(1)

    for warning in result.image_warnings:
        err_console.print(
            f'[yellow]![/yellow] Invalid image_url for user "{escape(warning.username)}".',
            soft_wrap=True,
        )

    if report_path:
        save_json(result, report_path)
        console.print(f"[dim]Saved report to {escape(str(report_path))}[/dim]", soft_wrap=True)

    console.print(SUCCESS_MESSAGE, soft_wrap=True)


if __name__ == "__main__":
    app()
