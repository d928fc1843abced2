from datetime import datetime
from typing import Any, Dict, Optional

from replicate_client.pydantic_base import DictCompatibleModel

from .timestamps import timestamp_validator


class TrainingDetails(DictCompatibleModel):
    """Pydantic model to parse a training response from JSON"""

    id: str
    status: str
    model: Optional[str] = None
    version: Optional[str] = None
    input: Optional[Dict[str, Any]] = None
    output: Optional[Any] = None
    error: Optional[Any] = None
    logs: Optional[str] = None
    urls: Optional[Dict[str, str]] = None
    created_at: Optional[datetime] = None
    started_at: Optional[datetime] = None
    completed_at: Optional[datetime] = None

    _parse_timestamps = timestamp_validator(
        "created_at", "started_at", "completed_at"
    )
