"""CLI: aws-sdk route53 change-record|list-records"""

import json

import click
from rich.console import Console
from rich.table import Table

from aws_sdk.config import load_config
from aws_sdk.models.route53 import (
    Change,
    ChangeAction,
    ChangeBatch,
    ChangeResourceRecordSetsRequest,
    ListResourceRecordSetsRequest,
    ResourceRecord,
    ResourceRecordSet,
    RRType,
)
from aws_sdk.route53 import AsyncRoute53Client
from aws_sdk.transform.route53 import ChangeResourceRecordSetsRequestMarshaller, protocol_factory

console = Console()


def _run(coro):
    from aws_sdk.cli.main import _run
    return _run(coro)


def _print_request(request):
    from aws_sdk.cli.main import print_request
    print_request(request)


@click.group()
def route53():
    """Route 53 record set operations."""


@route53.command("change-record")
@click.option("--hosted-zone-id", required=True)
@click.option("--action", type=click.Choice([a.value for a in ChangeAction]), default="UPSERT")
@click.option("--name", required=True)
@click.option("--type", "record_type", type=click.Choice([t.value for t in RRType]), required=True)
@click.option("--ttl", type=int, default=None)
@click.option("--value", "values", multiple=True, help="Record value (repeatable)")
@click.option("--comment", default=None)
@click.option("--dry-run", is_flag=True, help="Print the marshalled request instead of sending it")
def change_record(hosted_zone_id, action, name, record_type, ttl, values, comment, dry_run):
    """Create, delete or upsert one record set."""
    record_set = ResourceRecordSet(name, record_type, ttl=ttl)
    if values:
        record_set.with_resource_records(*(ResourceRecord(value=v) for v in values))
    request = ChangeResourceRecordSetsRequest(
        hosted_zone_id=hosted_zone_id,
        change_batch=ChangeBatch(comment=comment).with_changes(
            Change(action=action, resource_record_set=record_set),
        ),
    )

    if dry_run:
        _print_request(ChangeResourceRecordSetsRequestMarshaller(protocol_factory()).marshall(request))
        return

    async def _change():
        async with AsyncRoute53Client(load_config()) as client:
            with console.status("Submitting change batch..."):
                result = await client.change_resource_record_sets(request)
        info = result.change_info
        if info is None:
            console.print("[yellow]No change info returned.[/yellow]")
        else:
            console.print(f"[green]Change {info.id}: {info.status}[/green]")

    _run(_change())


@route53.command("list-records")
@click.option("--hosted-zone-id", required=True)
@click.option("--name", default=None, help="Start listing at this record name")
@click.option("--type", "record_type", default=None, help="Start listing at this record type")
@click.option("--identifier", default=None, help="Start listing at this set identifier (weighted, latency, failover records)")
@click.option("--max-items", default=None)
@click.option("--json-output", "--json", is_flag=True)
def list_records(hosted_zone_id, name, record_type, identifier, max_items, json_output):
    """List record sets in a hosted zone."""

    async def _list():
        request = ListResourceRecordSetsRequest(
            hosted_zone_id=hosted_zone_id,
            start_record_name=name,
            start_record_type=record_type,
            start_record_identifier=identifier,
            max_items=max_items,
        )
        async with AsyncRoute53Client(load_config()) as client:
            result = await client.list_resource_record_sets(request)
        record_sets = result.resource_record_sets or []
        if json_output:
            click.echo(json.dumps(result.model_dump(by_alias=True, exclude_none=True), indent=2))
            return
        table = Table(title=f"Record sets in {hosted_zone_id}")
        table.add_column("Name", style="bold")
        table.add_column("Type")
        table.add_column("TTL")
        table.add_column("Values")
        for rs in record_sets:
            values = ", ".join(r.value or "" for r in rs.resource_records or [])
            if rs.alias_target is not None:
                values = f"ALIAS {rs.alias_target.dns_name}"
            table.add_row(rs.name or "", rs.type or "", str(rs.ttl or ""), values)
        console.print(table)
        if result.is_truncated:
            console.print(f"[dim]More records from {result.next_record_name} {result.next_record_type} {result.next_record_identifier or ''}[/dim]")

    _run(_list())
