"""Config inspection commands."""

from __future__ import annotations

import tomllib
from pathlib import Path

import click
from pydantic import ValidationError

from linefit.core.config import LinefitConfig
from linefit.core.paths import get_config_path


def load_config(config_path: Path | None) -> LinefitConfig:
    """Load config for a CLI command, mapping parse and validation errors to click errors."""
    try:
        return LinefitConfig.load(config_path)
    except (ValidationError, tomllib.TOMLDecodeError) as exc:
        path = config_path if config_path is not None else get_config_path()
        raise click.ClickException(f"Invalid config {path}:\n{exc}") from exc


@click.group()
def config() -> None:
    """Inspect or create the linefit config file."""
    pass


@config.command()
@click.option(
    "--config",
    "config_path",
    type=click.Path(dir_okay=False, path_type=Path),
    default=None,
    help="Config file (defaults to the user config dir)",
)
def show(config_path: Path | None) -> None:
    """Print the effective configuration as TOML."""
    path = config_path if config_path is not None else get_config_path()
    cfg = load_config(path)
    source = str(path) if path.exists() else "defaults"
    click.secho(f"# {source}", fg="cyan", err=True)
    click.echo(cfg.to_toml(), nl=False)


@config.command()
@click.option(
    "--config",
    "config_path",
    type=click.Path(dir_okay=False, path_type=Path),
    default=None,
    help="Config file (defaults to the user config dir)",
)
@click.option("--force", is_flag=True, help="Overwrite an existing file")
def init(config_path: Path | None, force: bool) -> None:
    """Write a config file with default values."""
    path = config_path if config_path is not None else get_config_path()
    if path.exists() and not force:
        raise click.ClickException(f"{path} already exists (use --force to overwrite)")
    LinefitConfig().save(path)
    click.secho(f"Wrote {path}", fg="green")
