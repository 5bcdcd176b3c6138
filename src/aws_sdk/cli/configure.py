"""CLI: aws-sdk configure"""

import json
from typing import Optional

import click
from rich.console import Console

from aws_sdk.config import ClientConfig, load_config, read_config_file, save_config

console = Console()


@click.command("configure")
@click.option("--region", default=None, help="Default region")
@click.option("--endpoint-url", default=None, help="Override the service endpoint")
@click.option("--show", is_flag=True, help="Print the effective configuration")
def configure(region: Optional[str], endpoint_url: Optional[str], show: bool):
    """Save region and endpoint settings."""
    if show:
        click.echo(json.dumps(load_config().model_dump(), indent=2))
        return
    # start from the file alone so environment overrides are never persisted
    cfg = ClientConfig.model_validate(read_config_file())
    if region:
        cfg.region = region
    if endpoint_url:
        cfg.endpoint_url = endpoint_url
    path = save_config(cfg)
    console.print(f"[green]Saved to {path}[/green]")
