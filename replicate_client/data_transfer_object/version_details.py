from datetime import datetime
from typing import Any, Dict, Optional

from replicate_client.pydantic_base import DictCompatibleModel

from .timestamps import timestamp_validator


class VersionDetails(DictCompatibleModel):
    """Pydantic model to parse a model version response from JSON"""

    id: str
    created_at: datetime
    cog_version: Optional[str] = None
    openapi_schema: Optional[Dict[str, Any]] = None

    _parse_created_at = timestamp_validator("created_at")
