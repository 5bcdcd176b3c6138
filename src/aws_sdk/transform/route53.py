"""
Route 53 marshallers and unmarshallers (REST-XML).
"""

import xml.etree.ElementTree as ETree
from typing import Any

from aws_sdk.models.route53 import (
    AliasTarget,
    Change,
    ChangeInfo,
    ChangeResourceRecordSetsResult,
    GeoLocation,
    ListResourceRecordSetsResult,
    ResourceRecord,
    ResourceRecordSet,
)
from aws_sdk.protocol.marshaller import RequestMarshaller
from aws_sdk.protocol.xml_protocol import (
    StructuredXmlGenerator,
    XmlProtocolFactory,
    child_bool,
    child_int,
    child_text,
    find_child,
    find_children,
    parse_document,
)

SERVICE_NAME = "AmazonRoute53"
XML_NAMESPACE = "https://route53.amazonaws.com/doc/2013-04-01/"


def protocol_factory() -> XmlProtocolFactory:
    return XmlProtocolFactory()


class ResourceRecordSetXmlMarshaller:
    """Writes a <ResourceRecordSet> element, fields in declaration order."""

    def marshall(self, record_set: ResourceRecordSet, generator: StructuredXmlGenerator) -> None:
        generator.start_element("ResourceRecordSet")
        if record_set.name is not None:
            generator.write_element("Name", record_set.name)
        if record_set.type is not None:
            generator.write_element("Type", record_set.type)
        if record_set.set_identifier is not None:
            generator.write_element("SetIdentifier", record_set.set_identifier)
        if record_set.weight is not None:
            generator.write_element("Weight", record_set.weight)
        if record_set.region is not None:
            generator.write_element("Region", record_set.region)

        geo = record_set.geo_location
        if geo is not None:
            generator.start_element("GeoLocation")
            if geo.continent_code is not None:
                generator.write_element("ContinentCode", geo.continent_code)
            if geo.country_code is not None:
                generator.write_element("CountryCode", geo.country_code)
            if geo.subdivision_code is not None:
                generator.write_element("SubdivisionCode", geo.subdivision_code)
            generator.end_element()

        if record_set.failover is not None:
            generator.write_element("Failover", record_set.failover)
        if record_set.ttl is not None:
            generator.write_element("TTL", record_set.ttl)

        if record_set.resource_records is not None:
            generator.start_element("ResourceRecords")
            for record in record_set.resource_records:
                generator.start_element("ResourceRecord")
                if record.value is not None:
                    generator.write_element("Value", record.value)
                generator.end_element()
            generator.end_element()

        alias = record_set.alias_target
        if alias is not None:
            generator.start_element("AliasTarget")
            if alias.hosted_zone_id is not None:
                generator.write_element("HostedZoneId", alias.hosted_zone_id)
            if alias.dns_name is not None:
                generator.write_element("DNSName", alias.dns_name)
            if alias.evaluate_target_health is not None:
                generator.write_element("EvaluateTargetHealth", alias.evaluate_target_health)
            generator.end_element()

        if record_set.health_check_id is not None:
            generator.write_element("HealthCheckId", record_set.health_check_id)
        if record_set.traffic_policy_instance_id is not None:
            generator.write_element("TrafficPolicyInstanceId", record_set.traffic_policy_instance_id)
        generator.end_element()


resource_record_set_marshaller = ResourceRecordSetXmlMarshaller()


class ChangeResourceRecordSetsRequestMarshaller(RequestMarshaller):
    service_name = SERVICE_NAME
    http_method = "POST"
    uri_template = "/2013-04-01/hostedzone/{Id}/rrset/"
    path_params = {"Id": "hosted_zone_id"}

    def write_body(self, model: Any, generator: StructuredXmlGenerator) -> None:
        generator.start_element("ChangeResourceRecordSetsRequest", namespace=XML_NAMESPACE)
        batch = model.change_batch
        if batch is not None:
            generator.start_element("ChangeBatch")
            if batch.comment is not None:
                generator.write_element("Comment", batch.comment)
            if batch.changes is not None:
                generator.start_element("Changes")
                for change in batch.changes:
                    self._write_change(change, generator)
                generator.end_element()
            generator.end_element()
        generator.end_element()

    @staticmethod
    def _write_change(change: Change, generator: StructuredXmlGenerator) -> None:
        generator.start_element("Change")
        if change.action is not None:
            generator.write_element("Action", change.action)
        if change.resource_record_set is not None:
            resource_record_set_marshaller.marshall(change.resource_record_set, generator)
        generator.end_element()


class ListResourceRecordSetsRequestMarshaller(RequestMarshaller):
    service_name = SERVICE_NAME
    http_method = "GET"
    uri_template = "/2013-04-01/hostedzone/{Id}/rrset"
    path_params = {"Id": "hosted_zone_id"}
    query_params = {
        "name": "start_record_name",
        "type": "start_record_type",
        "identifier": "start_record_identifier",
        "maxitems": "max_items",
    }
    has_body = False


def unmarshall_resource_record_set(element: ETree.Element) -> ResourceRecordSet:
    record_set = ResourceRecordSet(
        name=child_text(element, "Name"),
        type=child_text(element, "Type"),
        set_identifier=child_text(element, "SetIdentifier"),
        weight=child_int(element, "Weight"),
        region=child_text(element, "Region"),
        failover=child_text(element, "Failover"),
        ttl=child_int(element, "TTL"),
        health_check_id=child_text(element, "HealthCheckId"),
        traffic_policy_instance_id=child_text(element, "TrafficPolicyInstanceId"),
    )

    geo = find_child(element, "GeoLocation")
    if geo is not None:
        record_set.geo_location = GeoLocation(
            continent_code=child_text(geo, "ContinentCode"),
            country_code=child_text(geo, "CountryCode"),
            subdivision_code=child_text(geo, "SubdivisionCode"),
        )

    records = find_child(element, "ResourceRecords")
    if records is not None:
        record_set.resource_records = [
            ResourceRecord(value=child_text(record, "Value"))
            for record in find_children(records, "ResourceRecord")
        ]

    alias = find_child(element, "AliasTarget")
    if alias is not None:
        record_set.alias_target = AliasTarget(
            hosted_zone_id=child_text(alias, "HostedZoneId"),
            dns_name=child_text(alias, "DNSName"),
            evaluate_target_health=child_bool(alias, "EvaluateTargetHealth"),
        )
    return record_set


def unmarshall_change_info(element: ETree.Element) -> ChangeInfo:
    return ChangeInfo(
        id=child_text(element, "Id"),
        status=child_text(element, "Status"),
        submitted_at=child_text(element, "SubmittedAt"),
        comment=child_text(element, "Comment"),
    )


def unmarshall_change_resource_record_sets_result(content: bytes) -> ChangeResourceRecordSetsResult:
    root = parse_document(content)
    result = ChangeResourceRecordSetsResult()
    change_info = find_child(root, "ChangeInfo")
    if change_info is not None:
        result.change_info = unmarshall_change_info(change_info)
    return result


def unmarshall_list_resource_record_sets_result(content: bytes) -> ListResourceRecordSetsResult:
    root = parse_document(content)
    result = ListResourceRecordSetsResult(
        is_truncated=child_bool(root, "IsTruncated"),
        next_record_name=child_text(root, "NextRecordName"),
        next_record_type=child_text(root, "NextRecordType"),
        next_record_identifier=child_text(root, "NextRecordIdentifier"),
        max_items=child_text(root, "MaxItems"),
    )
    record_sets = find_child(root, "ResourceRecordSets")
    if record_sets is not None:
        result.resource_record_sets = [
            unmarshall_resource_record_set(element)
            for element in find_children(record_sets, "ResourceRecordSet")
        ]
    return result
