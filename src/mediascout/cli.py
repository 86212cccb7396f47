"""Command-line interface for mediascout."""

import asyncio
import json
import logging
import sys
from typing import Annotated, Optional

import typer
from rich.console import Console
from rich.logging import RichHandler
from rich.panel import Panel
from rich.table import Table

from mediascout import __version__
from mediascout.core.models import (
    DiscoveryResult,
    LogoDiscoveryResult,
    MediaConfig,
    OperationStatus,
    SelectionResult,
)
from mediascout.engine.media import MediaDiscovery

console = Console()

COMMANDS = ("discover", "logo", "--help", "-h", "--version", "-V")


def version_callback(value: bool) -> None:
    """Print version and exit."""
    if value:
        console.print(f"[bold]mediascout[/bold] version {__version__}")
        raise typer.Exit()


def _configure_logging(verbose: bool) -> None:
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format="%(message)s",
        datefmt="[%X]",
        handlers=[RichHandler(console=Console(stderr=True), rich_tracebacks=True)],
        force=True,
    )


def _normalize_url(url: str) -> str:
    if not url.startswith(("http://", "https://")):
        url = f"https://{url}"
    return url


def _build_config(
    timeout: Optional[float],
    screenshot_api_key: Optional[str],
    video_api_key: Optional[str],
) -> MediaConfig:
    try:
        config = MediaConfig.from_env()
    except ValueError as e:
        raise typer.BadParameter(
            f"MEDIASCOUT_TIMEOUT must be a number of seconds ({e})"
        ) from e
    if timeout is not None:
        config.timeout = timeout
    if screenshot_api_key:
        config.screenshot_api_key = screenshot_api_key
    if video_api_key:
        config.video_api_key = video_api_key
    return config


def _print_media(url: str, result: DiscoveryResult, best: SelectionResult) -> None:
    """Render a discovery result as tables."""
    console.print()

    if result.total_found == 0:
        console.print(
            Panel(
                "No media found, add screenshots and videos manually.",
                title=f"[bold]{url}[/bold]",
                border_style="dim",
            )
        )
        return

    shots = Table(title="[bold]Screenshots[/bold]", header_style="bold cyan")
    shots.add_column("Best", justify="center")
    shots.add_column("Page", style="cyan")
    shots.add_column("Viewport", style="yellow")
    shots.add_column("Confidence", justify="right")
    shots.add_column("URL", style="green", overflow="fold")
    for shot in result.screenshots:
        marker = "*" if shot in best.best_screenshots else ""
        shots.add_row(
            marker,
            shot.page_type.value,
            shot.viewport.label,
            f"{shot.confidence:.2f}",
            shot.url,
        )

    videos = Table(title="[bold]Videos[/bold]", header_style="bold cyan")
    videos.add_column("Best", justify="center")
    videos.add_column("Title", style="cyan")
    videos.add_column("Source", style="yellow")
    videos.add_column("Confidence", justify="right")
    videos.add_column("URL", style="green", overflow="fold")
    for video in result.videos:
        marker = "*" if video in best.best_videos else ""
        videos.add_row(
            marker, video.title, video.source.value, f"{video.confidence:.2f}", video.url
        )

    console.print(shots)
    console.print()
    console.print(videos)
    console.print()
    console.print(
        f"[bold green]Total found:[/bold green] {result.total_found}  "
        f"[dim](* = selected)[/dim]"
    )


def _print_problems(result: DiscoveryResult) -> None:
    problems = [
        d
        for d in result.diagnostics
        if d.status in (OperationStatus.FAILED, OperationStatus.NOT_IMPLEMENTED)
    ]
    if not problems:
        return
    console.print()
    console.print("[yellow]Problems:[/yellow]")
    for report in problems[:5]:
        console.print(f"  [dim]-[/dim] {report.operation} {report.target}: {report.reason}")
    if len(problems) > 5:
        console.print(f"  [dim]... and {len(problems) - 5} more[/dim]")


def _print_logos(url: str, result: LogoDiscoveryResult) -> None:
    console.print()
    if not result.logos:
        console.print(
            Panel(
                "No logo found, upload one manually.",
                title=f"[bold]{url}[/bold]",
                border_style="dim",
            )
        )
        return

    table = Table(title="[bold]Logos[/bold]", header_style="bold cyan")
    table.add_column("Best", justify="center")
    table.add_column("Source", style="yellow")
    table.add_column("Confidence", justify="right")
    table.add_column("URL", style="green", overflow="fold")
    for logo in result.logos:
        marker = "*" if logo == result.best else ""
        table.add_row(marker, logo.source.value, f"{logo.confidence:.2f}", logo.url)

    console.print(table)
    console.print(f"[bold green]Total found:[/bold green] {result.total_found}")


app = typer.Typer(
    name="mediascout",
    help="Find screenshots, videos and logos for an AI tool's website.",
    add_completion=False,
    rich_markup_mode="rich",
    no_args_is_help=True,
)


@app.callback()
def _root(
    version: Annotated[
        Optional[bool],
        typer.Option(
            "--version",
            "-V",
            callback=version_callback,
            is_eager=True,
            help="Show version and exit",
        ),
    ] = None,
) -> None:
    """Find screenshots, videos and logos for an AI tool's website."""


TimeoutOption = Annotated[
    Optional[float],
    typer.Option("-t", "--timeout", help="Per-request timeout in seconds"),
]
VerboseOption = Annotated[
    bool, typer.Option("-v", "--verbose", help="Verbose output")
]
JsonOption = Annotated[
    bool, typer.Option("--json", help="Print the result as JSON")
]


@app.command()
def discover(
    url: Annotated[str, typer.Argument(help="Website of the tool (e.g., https://example.ai)")],
    as_json: JsonOption = False,
    verbose: VerboseOption = False,
    timeout: TimeoutOption = None,
    screenshot_api_key: Annotated[
        Optional[str],
        typer.Option(
            "--screenshot-api-key",
            help="API key for the keyed screenshot service [env: MEDIASCOUT_SCREENSHOT_API_KEY]",
        ),
    ] = None,
    video_api_key: Annotated[
        Optional[str],
        typer.Option(
            "--video-api-key",
            help="API key for keyed video search [env: MEDIASCOUT_VIDEO_API_KEY]",
        ),
    ] = None,
) -> None:
    """Discover screenshots and videos for a tool's website.

    \b
    Examples:
        mediascout discover https://example.ai
        mediascout discover example.ai --json
    """
    _configure_logging(verbose)
    url = _normalize_url(url)
    engine = MediaDiscovery(_build_config(timeout, screenshot_api_key, video_api_key))

    result = asyncio.run(engine.discover_media(url))
    best = engine.select_best_media(result)

    if as_json:
        payload = {**result.to_dict(), **best.to_dict()}
        typer.echo(json.dumps(payload, indent=2))
        return

    _print_media(url, result, best)
    if verbose:
        _print_problems(result)


@app.command()
def logo(
    url: Annotated[str, typer.Argument(help="Website of the tool (e.g., https://example.ai)")],
    as_json: JsonOption = False,
    verbose: VerboseOption = False,
    timeout: TimeoutOption = None,
) -> None:
    """Discover logo candidates for a tool's website."""
    _configure_logging(verbose)
    url = _normalize_url(url)
    engine = MediaDiscovery(_build_config(timeout, None, None))

    result = asyncio.run(engine.discover_logo(url))

    if as_json:
        typer.echo(json.dumps(result.to_dict(), indent=2))
        return

    _print_logos(url, result)


def main() -> None:
    """Main entry point with smart argument handling.

    Allows both:
        mediascout https://example.ai
        mediascout discover https://example.ai
    """
    if len(sys.argv) > 1:
        first_arg = sys.argv[1]
        if first_arg not in COMMANDS and (
            first_arg.startswith(("http://", "https://")) or "." in first_arg
        ):
            sys.argv.insert(1, "discover")

    app()


if __name__ == "__main__":
    main()
