"""
aws-rest-sdk — AWS service clients for Python.

Request/result models, wire marshallers and thin async + sync clients
for API Gateway (REST-JSON) and Route 53 (REST-XML).
"""

from aws_sdk.apigateway import ApiGatewayClient, AsyncApiGatewayClient
from aws_sdk.config import ClientConfig, load_config
from aws_sdk.errors import AWSError, ClientError, InvalidArgumentError, MarshallingError, ServiceError
from aws_sdk.models.base import AWSModel
from aws_sdk.route53 import AsyncRoute53Client, Route53Client
from aws_sdk.transport.request import Request

__version__ = "0.1.0"
__all__ = [
    "ApiGatewayClient",
    "AsyncApiGatewayClient",
    "Route53Client",
    "AsyncRoute53Client",
    "ClientConfig",
    "load_config",
    "AWSModel",
    "Request",
    "AWSError",
    "ClientError",
    "InvalidArgumentError",
    "MarshallingError",
    "ServiceError",
]
