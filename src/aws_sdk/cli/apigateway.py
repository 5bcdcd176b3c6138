"""CLI: aws-sdk apigateway update-method-response|get-method-response"""

import json

import click
from rich.console import Console

from aws_sdk.apigateway import AsyncApiGatewayClient
from aws_sdk.config import load_config
from aws_sdk.models.apigateway import GetMethodResponseRequest, PatchOperation, UpdateMethodResponseRequest
from aws_sdk.transform.apigateway import (
    GetMethodResponseRequestMarshaller,
    UpdateMethodResponseRequestMarshaller,
    protocol_factory,
)

console = Console()

PATCH_KEYS = {"op": "op", "path": "path", "value": "value", "from": "from_"}


def _run(coro):
    from aws_sdk.cli.main import _run
    return _run(coro)


def _print_request(request):
    from aws_sdk.cli.main import print_request
    print_request(request)


def parse_patch(text: str) -> PatchOperation:
    """Parse `op=replace,path=/a/b,value=c` into a PatchOperation."""
    fields = {}
    for item in text.split(","):
        key, sep, value = item.partition("=")
        key = key.strip()
        if not sep or key not in PATCH_KEYS:
            raise click.BadParameter(f"expected op=...,path=...[,value=...][,from=...], got {text!r}")
        fields[PATCH_KEYS[key]] = value
    return PatchOperation(**fields)


def method_response_options(fn):
    for option in reversed([
        click.option("--rest-api-id", required=True),
        click.option("--resource-id", required=True),
        click.option("--http-method", required=True),
        click.option("--status-code", required=True),
    ]):
        fn = option(fn)
    return fn


def _show_result(result, json_output: bool) -> None:
    if json_output:
        click.echo(json.dumps(result.model_dump(by_alias=True, exclude_none=True), indent=2))
    else:
        console.print(f"[green]{result}[/green]")


@click.group()
def apigateway():
    """API Gateway operations."""


@apigateway.command("update-method-response")
@method_response_options
@click.option("--patch", "patches", multiple=True, help="op=...,path=...[,value=...][,from=...]")
@click.option("--dry-run", is_flag=True, help="Print the marshalled request instead of sending it")
@click.option("--json-output", "--json", is_flag=True)
def update_method_response(rest_api_id, resource_id, http_method, status_code, patches, dry_run, json_output):
    """Apply patch operations to a method response."""
    request = UpdateMethodResponseRequest(
        rest_api_id=rest_api_id, resource_id=resource_id, http_method=http_method, status_code=status_code,
    )
    if patches:
        request.with_patch_operations(*(parse_patch(p) for p in patches))

    if dry_run:
        _print_request(UpdateMethodResponseRequestMarshaller(protocol_factory()).marshall(request))
        return

    async def _update():
        async with AsyncApiGatewayClient(load_config()) as client:
            with console.status("Updating method response..."):
                result = await client.update_method_response(request)
        _show_result(result, json_output)

    _run(_update())


@apigateway.command("get-method-response")
@method_response_options
@click.option("--dry-run", is_flag=True, help="Print the marshalled request instead of sending it")
@click.option("--json-output", "--json", is_flag=True)
def get_method_response(rest_api_id, resource_id, http_method, status_code, dry_run, json_output):
    """Describe a method response."""
    request = GetMethodResponseRequest(
        rest_api_id=rest_api_id, resource_id=resource_id, http_method=http_method, status_code=status_code,
    )

    if dry_run:
        _print_request(GetMethodResponseRequestMarshaller(protocol_factory()).marshall(request))
        return

    async def _get():
        async with AsyncApiGatewayClient(load_config()) as client:
            result = await client.get_method_response(request)
        _show_result(result, json_output)

    _run(_get())
