"""
aws-sdk CLI — `aws-sdk` command.

Commands:
  aws-sdk configure                          Region / endpoint settings
  aws-sdk apigateway update-method-response  Patch a method response
  aws-sdk apigateway get-method-response     Describe a method response
  aws-sdk route53 change-record              Create/delete/upsert a record set
  aws-sdk route53 list-records               List record sets
"""

import asyncio
import logging

try:
    import click
    from rich.console import Console
    from rich.logging import RichHandler
    from rich.table import Table
except ImportError:
    raise SystemExit("CLI requires extras: pip install aws-rest-sdk[cli]")

from aws_sdk import __version__
from aws_sdk.errors import AWSError
from aws_sdk.transport.request import Request

console = Console()


def _run(coro):
    try:
        return asyncio.run(coro)
    except AWSError as e:
        console.print(f"[red]{e.code}: {e.message}[/red]", soft_wrap=True)
        raise SystemExit(1)


def print_request(request: Request) -> None:
    """Render a marshalled request without sending it."""
    console.print(f"[dim]{request.service_name}[/dim]")
    console.print(f"{request.http_method} {request.resource_path}", soft_wrap=True, markup=False, highlight=False)
    table = Table()
    table.add_column("Header", style="bold")
    table.add_column("Value")
    for name, value in request.headers.items():
        table.add_row(name, value)
    for name, value in request.parameters.items():
        table.add_row(f"?{name}", value)
    console.print(table)
    if request.content:
        console.rule("Body")
        console.print(request.content.decode("utf-8"), soft_wrap=True, markup=False, highlight=False)


@click.group()
@click.version_option(__version__)
@click.option("--debug", is_flag=True, help="Log wire activity")
def main(debug: bool):
    """AWS SDK CLI — marshal and send API Gateway and Route 53 requests."""
    if debug:
        logging.basicConfig(
            level=logging.DEBUG, format="%(message)s", handlers=[RichHandler(console=console)],
        )


# Register subcommands from separate modules
from aws_sdk.cli.apigateway import apigateway
from aws_sdk.cli.configure import configure
from aws_sdk.cli.route53 import route53

main.add_command(configure)
main.add_command(apigateway)
main.add_command(route53)


if __name__ == "__main__":
    main()
