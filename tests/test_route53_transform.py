"""Route 53 XML marshalling and unmarshalling."""

import xml.etree.ElementTree as ETree

import pytest

from aws_sdk.errors import InvalidArgumentError
from aws_sdk.models.route53 import (
    AliasTarget,
    Change,
    ChangeAction,
    ChangeBatch,
    ChangeResourceRecordSetsRequest,
    ChangeStatus,
    GeoLocation,
    ListResourceRecordSetsRequest,
    ResourceRecord,
    ResourceRecordSet,
    ResourceRecordSetFailover,
    RRType,
)
from aws_sdk.protocol.xml_protocol import StructuredXmlGenerator
from aws_sdk.transform.route53 import (
    XML_NAMESPACE,
    ChangeResourceRecordSetsRequestMarshaller,
    ListResourceRecordSetsRequestMarshaller,
    protocol_factory,
    resource_record_set_marshaller,
    unmarshall_change_resource_record_sets_result,
    unmarshall_list_resource_record_sets_result,
    unmarshall_resource_record_set,
)

NS = "{" + XML_NAMESPACE + "}"


def weighted_record_set() -> ResourceRecordSet:
    return ResourceRecordSet(
        "api.example.com.",
        RRType.CNAME,
        set_identifier="blue",
        weight=20,
        geo_location=GeoLocation(continent_code="EU", country_code="DE"),
        failover=ResourceRecordSetFailover.PRIMARY,
        ttl=60,
        health_check_id="hc-1",
        traffic_policy_instance_id="tp-1",
    ).with_resource_records(ResourceRecord(value="blue.example.com."))


def alias_record_set() -> ResourceRecordSet:
    return ResourceRecordSet(
        "example.com.",
        RRType.A,
        region="eu-west-1",
        set_identifier="eu",
        alias_target=AliasTarget(hosted_zone_id="Z32O12XQLNTSW2", dns_name="lb.example.com.", evaluate_target_health=False),
    )


def change_request() -> ChangeResourceRecordSetsRequest:
    return ChangeResourceRecordSetsRequest(
        hosted_zone_id="Z1D633PJN98FT9",
        change_batch=ChangeBatch(comment="rollout").with_changes(
            Change(action=ChangeAction.UPSERT, resource_record_set=weighted_record_set()),
            Change(action=ChangeAction.DELETE, resource_record_set=alias_record_set()),
        ),
    )


def test_change_resource_record_sets_request():
    request = ChangeResourceRecordSetsRequestMarshaller(protocol_factory()).marshall(change_request())

    assert request.http_method == "POST"
    assert request.service_name == "AmazonRoute53"
    assert request.resource_path == "/2013-04-01/hostedzone/Z1D633PJN98FT9/rrset/"
    assert request.headers["Content-Type"] == "application/xml"
    assert request.headers["Content-Length"] == str(len(request.content))

    root = ETree.fromstring(request.content)
    assert root.tag == NS + "ChangeResourceRecordSetsRequest"
    assert root.findtext(f"{NS}ChangeBatch/{NS}Comment") == "rollout"
    changes = root.findall(f"{NS}ChangeBatch/{NS}Changes/{NS}Change")
    assert [c.findtext(f"{NS}Action") for c in changes] == ["UPSERT", "DELETE"]
    first = changes[0].find(f"{NS}ResourceRecordSet")
    assert first.findtext(f"{NS}Name") == "api.example.com."
    assert first.findtext(f"{NS}ResourceRecords/{NS}ResourceRecord/{NS}Value") == "blue.example.com."
    second = changes[1].find(f"{NS}ResourceRecordSet")
    assert second.findtext(f"{NS}AliasTarget/{NS}EvaluateTargetHealth") == "false"


def test_record_set_fields_written_in_declared_order():
    gen = StructuredXmlGenerator()
    resource_record_set_marshaller.marshall(weighted_record_set(), gen)
    root = ETree.fromstring(gen.get_bytes())
    assert [child.tag for child in root] == [
        "Name", "Type", "SetIdentifier", "Weight", "GeoLocation", "Failover", "TTL",
        "ResourceRecords", "HealthCheckId", "TrafficPolicyInstanceId",
    ]


def test_absent_fields_are_omitted():
    gen = StructuredXmlGenerator()
    resource_record_set_marshaller.marshall(ResourceRecordSet("a.example.com."), gen)
    assert gen.get_bytes() == b"<ResourceRecordSet><Name>a.example.com.</Name></ResourceRecordSet>"

    request = ChangeResourceRecordSetsRequestMarshaller(protocol_factory()).marshall(
        ChangeResourceRecordSetsRequest(hosted_zone_id="Z1"),
    )
    assert request.content == f'<ChangeResourceRecordSetsRequest xmlns="{XML_NAMESPACE}" />'.encode()


def test_absent_hosted_zone_resolves_to_empty():
    request = ChangeResourceRecordSetsRequestMarshaller(protocol_factory()).marshall(ChangeResourceRecordSetsRequest())
    assert request.resource_path == "/2013-04-01/hostedzone//rrset/"


def test_none_model_is_rejected():
    with pytest.raises(InvalidArgumentError):
        ChangeResourceRecordSetsRequestMarshaller(protocol_factory()).marshall(None)


@pytest.mark.parametrize("factory", [weighted_record_set, alias_record_set, ResourceRecordSet])
def test_record_set_round_trip(factory):
    original = factory()
    gen = StructuredXmlGenerator()
    resource_record_set_marshaller.marshall(original, gen)
    assert unmarshall_resource_record_set(ETree.fromstring(gen.get_bytes())) == original


def test_list_resource_record_sets_request():
    request = ListResourceRecordSetsRequestMarshaller(protocol_factory()).marshall(
        ListResourceRecordSetsRequest(hosted_zone_id="Z1", start_record_name="www.example.com.",
                                      start_record_type=RRType.A, max_items="10"),
    )
    assert request.http_method == "GET"
    assert request.resource_path == "/2013-04-01/hostedzone/Z1/rrset"
    assert request.parameters == {"name": "www.example.com.", "type": "A", "maxitems": "10"}
    assert request.content is None


def test_unmarshall_change_result():
    result = unmarshall_change_resource_record_sets_result(f"""<?xml version="1.0" encoding="UTF-8"?>
<ChangeResourceRecordSetsResponse xmlns="{XML_NAMESPACE}">
  <ChangeInfo>
    <Id>/change/C2682N5HXP0BZ4</Id>
    <Status>PENDING</Status>
    <SubmittedAt>2017-03-10T01:36:41.958Z</SubmittedAt>
    <Comment>rollout</Comment>
  </ChangeInfo>
</ChangeResourceRecordSetsResponse>""".encode())
    assert result.change_info.id == "/change/C2682N5HXP0BZ4"
    assert result.change_info.status == ChangeStatus.PENDING.value
    assert result.change_info.comment == "rollout"


def test_unmarshall_list_result():
    result = unmarshall_list_resource_record_sets_result(f"""<?xml version="1.0" encoding="UTF-8"?>
<ListResourceRecordSetsResponse xmlns="{XML_NAMESPACE}">
  <ResourceRecordSets>
    <ResourceRecordSet>
      <Name>example.com.</Name>
      <Type>NS</Type>
      <TTL>172800</TTL>
      <ResourceRecords>
        <ResourceRecord><Value>ns-1.awsdns-00.com.</Value></ResourceRecord>
        <ResourceRecord><Value>ns-2.awsdns-00.net.</Value></ResourceRecord>
      </ResourceRecords>
    </ResourceRecordSet>
    <ResourceRecordSet>
      <Name>www.example.com.</Name>
      <Type>A</Type>
      <AliasTarget>
        <HostedZoneId>Z2</HostedZoneId>
        <DNSName>lb.example.com.</DNSName>
        <EvaluateTargetHealth>true</EvaluateTargetHealth>
      </AliasTarget>
    </ResourceRecordSet>
  </ResourceRecordSets>
  <IsTruncated>true</IsTruncated>
  <NextRecordName>z.example.com.</NextRecordName>
  <NextRecordType>TXT</NextRecordType>
  <MaxItems>2</MaxItems>
</ListResourceRecordSetsResponse>""".encode())

    assert result.is_truncated is True
    assert result.next_record_name == "z.example.com."
    assert result.next_record_type == "TXT"
    assert result.next_record_identifier is None
    assert result.max_items == "2"

    ns, www = result.resource_record_sets
    assert ns == ResourceRecordSet("example.com.", RRType.NS, ttl=172800).with_resource_records(
        ResourceRecord(value="ns-1.awsdns-00.com."), ResourceRecord(value="ns-2.awsdns-00.net."),
    )
    assert www.alias_target == AliasTarget(hosted_zone_id="Z2", dns_name="lb.example.com.", evaluate_target_health=True)
    assert www.resource_records is None


class TestStructuredXmlGenerator:
    def test_single_root(self):
        gen = StructuredXmlGenerator()
        gen.write_element("A", 1)
        with pytest.raises(ValueError):
            gen.start_element("B")

    def test_unclosed_element(self):
        gen = StructuredXmlGenerator()
        gen.start_element("A")
        with pytest.raises(ValueError):
            gen.get_bytes()

    def test_values_are_escaped(self):
        gen = StructuredXmlGenerator()
        gen.write_element("TXT", '"v=spf1 <all>"')
        assert gen.get_bytes() == b'<TXT>"v=spf1 &lt;all&gt;"</TXT>'
