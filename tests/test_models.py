"""Value semantics of the model records."""

import pytest

from aws_sdk.models.apigateway import MethodResponse, Op, PatchOperation, UpdateMethodResponseRequest
from aws_sdk.models.route53 import (
    AliasTarget,
    GeoLocation,
    ResourceRecord,
    ResourceRecordSet,
    ResourceRecordSetFailover,
    ResourceRecordSetRegion,
    RRType,
)


def full_record_set() -> ResourceRecordSet:
    return ResourceRecordSet(
        "www.example.com.",
        RRType.A,
        set_identifier="eu",
        weight=10,
        region=ResourceRecordSetRegion.EU_WEST_1,
        geo_location=GeoLocation(continent_code="EU", country_code="DE", subdivision_code="BE"),
        failover=ResourceRecordSetFailover.PRIMARY,
        ttl=300,
        alias_target=AliasTarget(hosted_zone_id="Z2", dns_name="lb.example.com.", evaluate_target_health=True),
        health_check_id="hc-1",
        traffic_policy_instance_id="tp-1",
    ).with_resource_records(ResourceRecord(value="192.0.2.1"), ResourceRecord(value="192.0.2.2"))


MODELS = [
    full_record_set,
    lambda: ResourceRecordSet(),
    lambda: PatchOperation(op="copy", path="/a", from_="/b"),
    lambda: UpdateMethodResponseRequest(rest_api_id="abc").with_patch_operations(PatchOperation(op="remove", path="/x")),
    lambda: MethodResponse(status_code="200", response_parameters={"method.response.header.X": True},
                           response_models={"application/json": "Empty"}),
]


@pytest.mark.parametrize("factory", MODELS)
def test_equality_is_reflexive_symmetric_and_hash_consistent(factory):
    a, b = factory(), factory()
    assert a == a
    assert a == b and b == a
    assert hash(a) == hash(b)


@pytest.mark.parametrize("factory", MODELS)
def test_clone_is_equal_but_not_identical(factory):
    original = factory()
    copy = original.clone()
    assert copy == original
    assert copy is not original


def test_clone_is_shallow():
    original = full_record_set()
    copy = original.clone()
    assert copy.geo_location is original.geo_location
    assert copy.resource_records is original.resource_records


def test_inequality_on_any_field():
    base = full_record_set()
    for name, value in [("name", "other.example.com."), ("weight", 11), ("ttl", None), ("health_check_id", "hc-2")]:
        other = full_record_set()
        setattr(other, name, value)
        assert other != base

    other = full_record_set()
    other.geo_location.country_code = "FR"
    assert other != base


def test_different_types_are_not_equal():
    assert GeoLocation() != ResourceRecord()
    assert ResourceRecordSet() != None  # noqa: E711


def test_enum_fields_store_string_values():
    rs = ResourceRecordSet("example.com.", RRType.MX)
    assert rs.type == "MX"
    assert rs == ResourceRecordSet("example.com.", "MX")

    rs.failover = ResourceRecordSetFailover.SECONDARY
    assert rs.failover == "SECONDARY"

    assert PatchOperation(op=Op.REPLACE).op == "replace"


def test_unset_fields_default_to_none():
    rs = ResourceRecordSet()
    assert rs.name is None
    assert rs.resource_records is None
    assert rs.alias_target is None


def test_fluent_setters_return_self():
    rs = ResourceRecordSet()
    assert rs.with_values(name="a.example.com.", ttl=60) is rs
    assert rs.name == "a.example.com."
    assert rs.ttl == 60

    assert rs.with_resource_records(ResourceRecord(value="1")) is rs
    rs.with_resource_records(ResourceRecord(value="2"))
    assert [r.value for r in rs.resource_records] == ["1", "2"]


def test_wire_names_accepted_on_construction():
    rs = ResourceRecordSet.model_validate({"Name": "x.example.com.", "Type": "CNAME", "TTL": 60})
    assert rs == ResourceRecordSet("x.example.com.", RRType.CNAME, ttl=60)
    assert PatchOperation.model_validate({"op": "move", "from": "/a", "path": "/b"}).from_ == "/a"


def test_str_lists_present_fields_by_wire_name():
    rs = ResourceRecordSet("www.example.com.", RRType.A, ttl=300).with_resource_records(
        ResourceRecord(value="192.0.2.1"),
    )
    assert str(rs) == "{Name: www.example.com.,Type: A,TTL: 300,ResourceRecords: [{Value: 192.0.2.1}]}"
    assert str(ResourceRecordSet()) == "{}"
    assert str(AliasTarget(evaluate_target_health=False)) == "{EvaluateTargetHealth: false}"
