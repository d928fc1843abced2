from datetime import datetime
from typing import Any, Dict, Optional

from replicate_client.pydantic_base import DictCompatibleModel

from .timestamps import timestamp_validator


class PredictionDetails(DictCompatibleModel):
    """Pydantic model to parse a prediction response from JSON

    Attributes:
        id: Server generated prediction ID
        status: One of ``starting``, ``processing``, ``succeeded``, ``failed``, ``canceled``
        version: ID of the model version that ran the prediction
        model: Model name in ``owner/name`` format
        data_removed: Whether input and output were deleted by the server
    """

    id: str
    status: str
    version: Optional[str] = None
    model: Optional[str] = None
    input: Optional[Dict[str, Any]] = None
    output: Optional[Any] = None
    error: Optional[Any] = None
    logs: Optional[str] = None
    metrics: Optional[Dict[str, Any]] = None
    urls: Optional[Dict[str, str]] = None
    data_removed: Optional[bool] = None
    created_at: Optional[datetime] = None
    started_at: Optional[datetime] = None
    completed_at: Optional[datetime] = None

    _parse_timestamps = timestamp_validator(
        "created_at", "started_at", "completed_at"
    )
