"""
Route 53 models: resource record sets and the change/list operations on them.
"""

from enum import Enum
from typing import Any, Optional

from pydantic import Field

from aws_sdk.models.base import AWSModel


class RRType(str, Enum):
    SOA = "SOA"
    A = "A"
    TXT = "TXT"
    NS = "NS"
    CNAME = "CNAME"
    MX = "MX"
    NAPTR = "NAPTR"
    PTR = "PTR"
    SRV = "SRV"
    SPF = "SPF"
    AAAA = "AAAA"


class ResourceRecordSetRegion(str, Enum):
    US_EAST_1 = "us-east-1"
    US_EAST_2 = "us-east-2"
    US_WEST_1 = "us-west-1"
    US_WEST_2 = "us-west-2"
    CA_CENTRAL_1 = "ca-central-1"
    EU_WEST_1 = "eu-west-1"
    EU_WEST_2 = "eu-west-2"
    EU_CENTRAL_1 = "eu-central-1"
    AP_SOUTHEAST_1 = "ap-southeast-1"
    AP_SOUTHEAST_2 = "ap-southeast-2"
    AP_NORTHEAST_1 = "ap-northeast-1"
    AP_NORTHEAST_2 = "ap-northeast-2"
    AP_SOUTH_1 = "ap-south-1"
    SA_EAST_1 = "sa-east-1"
    CN_NORTH_1 = "cn-north-1"


class ResourceRecordSetFailover(str, Enum):
    PRIMARY = "PRIMARY"
    SECONDARY = "SECONDARY"


class ChangeAction(str, Enum):
    CREATE = "CREATE"
    DELETE = "DELETE"
    UPSERT = "UPSERT"


class ChangeStatus(str, Enum):
    PENDING = "PENDING"
    INSYNC = "INSYNC"


class GeoLocation(AWSModel):
    continent_code: Optional[str] = Field(default=None, alias="ContinentCode")
    country_code: Optional[str] = Field(default=None, alias="CountryCode")
    subdivision_code: Optional[str] = Field(default=None, alias="SubdivisionCode")


class ResourceRecord(AWSModel):
    value: Optional[str] = Field(default=None, alias="Value")


class AliasTarget(AWSModel):
    hosted_zone_id: Optional[str] = Field(default=None, alias="HostedZoneId")
    dns_name: Optional[str] = Field(default=None, alias="DNSName")
    evaluate_target_health: Optional[bool] = Field(default=None, alias="EvaluateTargetHealth")


class ResourceRecordSet(AWSModel):
    """Information about the resource record set to create or delete.

    ``type``, ``region`` and ``failover`` accept either the enum or its string
    value; the string value is stored.
    """

    name: Optional[str] = Field(default=None, alias="Name")
    type: Optional[str] = Field(default=None, alias="Type")
    set_identifier: Optional[str] = Field(default=None, alias="SetIdentifier")
    weight: Optional[int] = Field(default=None, alias="Weight")
    region: Optional[str] = Field(default=None, alias="Region")
    geo_location: Optional[GeoLocation] = Field(default=None, alias="GeoLocation")
    failover: Optional[str] = Field(default=None, alias="Failover")
    ttl: Optional[int] = Field(default=None, alias="TTL")
    resource_records: Optional[list[ResourceRecord]] = Field(default=None, alias="ResourceRecords")
    alias_target: Optional[AliasTarget] = Field(default=None, alias="AliasTarget")
    health_check_id: Optional[str] = Field(default=None, alias="HealthCheckId")
    traffic_policy_instance_id: Optional[str] = Field(default=None, alias="TrafficPolicyInstanceId")

    def __init__(self, name: Optional[str] = None, type: Any = None, **data: Any):
        if name is not None:
            data["name"] = name
        if type is not None:
            data["type"] = type
        super().__init__(**data)

    def with_resource_records(self, *records: ResourceRecord) -> "ResourceRecordSet":
        """Append records, creating the list if it is unset."""
        if self.resource_records is None:
            self.resource_records = list(records)
        else:
            self.resource_records.extend(records)
        return self


class Change(AWSModel):
    action: Optional[str] = Field(default=None, alias="Action")
    resource_record_set: Optional[ResourceRecordSet] = Field(default=None, alias="ResourceRecordSet")


class ChangeBatch(AWSModel):
    comment: Optional[str] = Field(default=None, alias="Comment")
    changes: Optional[list[Change]] = Field(default=None, alias="Changes")

    def with_changes(self, *changes: Change) -> "ChangeBatch":
        if self.changes is None:
            self.changes = list(changes)
        else:
            self.changes.extend(changes)
        return self


class ChangeResourceRecordSetsRequest(AWSModel):
    hosted_zone_id: Optional[str] = Field(default=None, alias="HostedZoneId")
    change_batch: Optional[ChangeBatch] = Field(default=None, alias="ChangeBatch")


class ChangeInfo(AWSModel):
    id: Optional[str] = Field(default=None, alias="Id")
    status: Optional[str] = Field(default=None, alias="Status")
    submitted_at: Optional[str] = Field(default=None, alias="SubmittedAt")
    comment: Optional[str] = Field(default=None, alias="Comment")


class ChangeResourceRecordSetsResult(AWSModel):
    change_info: Optional[ChangeInfo] = Field(default=None, alias="ChangeInfo")


class ListResourceRecordSetsRequest(AWSModel):
    hosted_zone_id: Optional[str] = Field(default=None, alias="HostedZoneId")
    start_record_name: Optional[str] = Field(default=None, alias="StartRecordName")
    start_record_type: Optional[str] = Field(default=None, alias="StartRecordType")
    start_record_identifier: Optional[str] = Field(default=None, alias="StartRecordIdentifier")
    max_items: Optional[str] = Field(default=None, alias="MaxItems")


class ListResourceRecordSetsResult(AWSModel):
    resource_record_sets: Optional[list[ResourceRecordSet]] = Field(default=None, alias="ResourceRecordSets")
    is_truncated: Optional[bool] = Field(default=None, alias="IsTruncated")
    next_record_name: Optional[str] = Field(default=None, alias="NextRecordName")
    next_record_type: Optional[str] = Field(default=None, alias="NextRecordType")
    next_record_identifier: Optional[str] = Field(default=None, alias="NextRecordIdentifier")
    max_items: Optional[str] = Field(default=None, alias="MaxItems")
