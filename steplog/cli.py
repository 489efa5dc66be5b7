import json
from pathlib import Path

import click

from .config import load_config, read_config_file, validate_config


@click.group()
def cli():
    """steplog CLI - inspect and validate step transcript configuration"""
    pass


@cli.command("show-config")
@click.option("--config", type=click.Path(exists=True), default=None,
              help="Path to a TOML config file (default: discover in the current directory)")
def show_config(config):
    """Print the effective configuration as JSON."""
    try:
        cfg = load_config(config)
    except ValueError as e:
        raise click.BadParameter(f"Invalid config file: {e}")
    click.echo(json.dumps(cfg, indent=2, sort_keys=True))


@cli.command("check-config")
@click.argument("path", type=click.Path(exists=True, dir_okay=False))
def check_config(path):
    """Validate the config file at PATH."""
    p = Path(path)
    try:
        validate_config(read_config_file(p))
    except ValueError as e:
        raise click.BadParameter(f"Invalid config file: {e}")
    click.echo(f"{path}: OK")
