from typing import Any, Dict, Optional

from replicate_client.pydantic_base import DictCompatibleModel


class LatestVersionEntry(DictCompatibleModel):
    """Nested ``latest_version`` of a model payload, only the id is used"""

    id: str


class ModelDetails(DictCompatibleModel):
    """Pydantic model to parse a model response from JSON"""

    owner: str
    name: str
    url: Optional[str] = None
    description: Optional[str] = None
    visibility: Optional[str] = None
    github_url: Optional[str] = None
    paper_url: Optional[str] = None
    license_url: Optional[str] = None
    run_count: Optional[int] = None
    cover_image_url: Optional[str] = None
    default_example: Optional[Dict[str, Any]] = None
    latest_version: Optional[LatestVersionEntry] = None
