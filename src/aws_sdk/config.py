"""
Client configuration.

Stored as JSON in ~/.aws-sdk/config.json, overridable from the environment.
"""

import json
import logging
import os
from pathlib import Path
from typing import Optional

from pydantic import BaseModel, ValidationError

LOG = logging.getLogger(__name__)

DEFAULT_REGION = "us-east-1"
USER_AGENT = "aws-rest-sdk/0.1.0"
CONFIG_FILE = Path.home() / ".aws-sdk" / "config.json"

# services without regional endpoints
GLOBAL_ENDPOINTS = {
    "route53": "https://route53.amazonaws.com",
}


class ClientConfig(BaseModel):
    region: str = DEFAULT_REGION
    endpoint_url: Optional[str] = None
    timeout: float = 30.0
    user_agent: str = USER_AGENT

    def endpoint_for(self, endpoint_prefix: str) -> str:
        if self.endpoint_url:
            return self.endpoint_url.rstrip("/")
        if endpoint_prefix in GLOBAL_ENDPOINTS:
            return GLOBAL_ENDPOINTS[endpoint_prefix]
        return f"https://{endpoint_prefix}.{self.region}.amazonaws.com"


def read_config_file(path: Optional[Path] = None) -> dict:
    """Return the settings stored in the config file, without environment overrides.

    Entries that fail validation are dropped; the rest are kept.
    """
    path = path or CONFIG_FILE
    try:
        data = json.loads(path.read_text())
    except (FileNotFoundError, json.JSONDecodeError):
        return {}
    if not isinstance(data, dict):
        return {}

    try:
        ClientConfig.model_validate(data)
    except ValidationError as e:
        bad = {err["loc"][0] for err in e.errors() if err["loc"]}
        LOG.warning("Ignoring invalid config entries in %s: %s", path, ", ".join(sorted(map(str, bad))))
        data = {k: v for k, v in data.items() if k not in bad}
    return data


def load_config(path: Optional[Path] = None) -> ClientConfig:
    """Read the config file, then apply AWS_REGION / AWS_DEFAULT_REGION / AWS_ENDPOINT_URL."""
    data = read_config_file(path)

    region = os.environ.get("AWS_REGION") or os.environ.get("AWS_DEFAULT_REGION")
    if region:
        data["region"] = region
    endpoint_url = os.environ.get("AWS_ENDPOINT_URL")
    if endpoint_url:
        data["endpoint_url"] = endpoint_url

    return ClientConfig.model_validate(data)


def save_config(config: ClientConfig, path: Optional[Path] = None) -> Path:
    """Write the explicitly set fields of `config`; defaults are not persisted."""
    path = path or CONFIG_FILE
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_text(json.dumps(config.model_dump(exclude_unset=True, exclude_none=True), indent=2))
    return path
