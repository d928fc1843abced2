from datetime import datetime
from typing import Any, Dict, Optional

from replicate_client.pydantic_base import DictCompatibleModel

from .timestamps import timestamp_validator


class DeploymentConfiguration(DictCompatibleModel):
    hardware: Optional[str] = None
    min_instances: Optional[int] = None
    max_instances: Optional[int] = None


class DeploymentRelease(DictCompatibleModel):
    """``current_release`` of a deployment payload

    Attributes:
        number: Release counter, incremented by each update
        model: Model name in ``owner/name`` format
        version: ID of the released model version
        created_by: Account that created the release, as returned by the API
    """

    number: Optional[int] = None
    model: Optional[str] = None
    version: Optional[str] = None
    created_at: Optional[datetime] = None
    created_by: Optional[Dict[str, Any]] = None
    configuration: Optional[DeploymentConfiguration] = None

    _parse_created_at = timestamp_validator("created_at")


class DeploymentDetails(DictCompatibleModel):
    """Pydantic model to parse a deployment response from JSON"""

    owner: str
    name: str
    current_release: Optional[DeploymentRelease] = None
