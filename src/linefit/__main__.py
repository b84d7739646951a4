"""CLI entry point for linefit."""

from __future__ import annotations

# Python version check - must be before any imports that use 3.12+ syntax.
import sys

if sys.version_info < (3, 12):  # noqa: UP036
    print("Error: linefit requires Python 3.12 or higher.")
    sys.exit(1)

import shutil  # noqa: E402
from pathlib import Path  # noqa: E402

import click  # noqa: E402
from rich.console import Console  # noqa: E402
from rich.markup import escape  # noqa: E402

from linefit import __version__  # noqa: E402
from linefit.cli.config import config, load_config  # noqa: E402
from linefit.core.errors import LinefitError  # noqa: E402
from linefit.core.oracle import FontWidthOracle  # noqa: E402
from linefit.core.truncation import truncate_lines  # noqa: E402


def _read_text(text: str | None, file_path: Path | None) -> str:
    if file_path is not None:
        content = file_path.read_text(encoding="utf-8")
    elif text == "-":
        content = click.get_text_stream("stdin").read()
    elif text is None:
        raise click.UsageError("Either provide a TEXT argument, '-' for stdin, or use --file")
    else:
        content = text
    return content.rstrip("\n").replace("\n", " ")


@click.group(invoke_without_command=True)
@click.option("--version", is_flag=True, help="Show version and exit")
@click.pass_context
def cli(ctx: click.Context, version: bool) -> None:
    """Clamp text to a number of lines of a given width."""
    if version:
        click.echo(f"linefit {__version__}")
        ctx.exit(0)

    if ctx.invoked_subcommand is None:
        click.echo(ctx.get_help())


cli.add_command(config)


_config_option = click.option(
    "--config",
    "config_path",
    type=click.Path(dir_okay=False, path_type=Path),
    default=None,
    help="Config file (defaults to the user config dir)",
)


@cli.command()
@click.argument("text", required=False, default=None)
@click.option(
    "-f",
    "--file",
    "file_path",
    type=click.Path(exists=True, readable=True, dir_okay=False, path_type=Path),
    default=None,
    help="Read text from a file",
)
@click.option("-n", "--lines", "line_limit", type=int, default=None, help="Maximum lines")
@click.option(
    "-w",
    "--width",
    type=float,
    default=None,
    help="Line width in cells, or pixels with --font (defaults to terminal width)",
)
@click.option("--ellipsis", default=None, help="Marker for cut text")
@click.option(
    "--font",
    "font_path",
    type=click.Path(exists=True, dir_okay=False, path_type=Path),
    default=None,
    help="Measure in pixels with this TrueType font",
)
@click.option("--font-size", type=click.IntRange(min=1), default=None, help="Font size in pixels")
@click.option("-v", "--verbose", is_flag=True, help="Show the line breakdown on stderr")
@_config_option
def render(
    text: str | None,
    file_path: Path | None,
    line_limit: int | None,
    width: float | None,
    ellipsis: str | None,
    font_path: Path | None,
    font_size: int | None,
    verbose: bool,
    config_path: Path | None,
) -> None:
    """Print TEXT clamped to --lines lines of --width.

    \b
    Examples:
        linefit render "The quick brown fox" -n 1 -w 10
        cat notes.txt | linefit render - -n 3
        linefit render -f title.txt -w 320 --font DejaVuSans.ttf
    """
    cfg = load_config(config_path)
    content = _read_text(text, file_path)

    if font_path is not None:
        oracle = FontWidthOracle(font_path, font_size or cfg.font.size)
    else:
        oracle = cfg.make_oracle()

    max_width = width if width is not None else shutil.get_terminal_size().columns
    limit = line_limit if line_limit is not None else cfg.truncation.default_lines

    try:
        result = truncate_lines(
            content,
            limit,
            max_width,
            oracle=oracle,
            ellipsis=ellipsis if ellipsis is not None else cfg.truncation.ellipsis,
        )
    except LinefitError as exc:
        raise click.ClickException(str(exc)) from exc

    if verbose:
        console = Console(stderr=True, highlight=False)
        for index, line in enumerate(result.lines, 1):
            console.print(f"[dim]{index:>3}[/] {escape(line)}")
        state = "truncated" if result.truncated else "fits"
        console.print(
            f"[cyan]{len(result.lines)}/{result.total_lines} lines, width {max_width:g}, {state}[/]"
        )

    click.echo(result.text)


@cli.command()
@click.argument("text", required=False, default=None)
@click.option(
    "-f",
    "--file",
    "file_path",
    type=click.Path(exists=True, readable=True, dir_okay=False, path_type=Path),
    default=None,
    help="Read text from a file",
)
@click.option("-n", "--lines", "line_limit", type=click.IntRange(min=1), default=None)
@click.option("-w", "--width", type=click.IntRange(min=8), default=None, help="Frame width")
@_config_option
def view(
    text: str | None,
    file_path: Path | None,
    line_limit: int | None,
    width: int | None,
    config_path: Path | None,
) -> None:
    """Open an interactive viewer that re-clamps TEXT as the frame resizes."""
    from linefit.tui.app import LinefitApp

    cfg = load_config(config_path)
    content = _read_text(text, file_path)
    LinefitApp(content, line_limit, config=cfg, frame_width=width).run()


def main() -> None:
    cli()


if __name__ == "__main__":
    main()
