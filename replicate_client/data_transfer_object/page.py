from typing import Any, Dict, List, Optional

from replicate_client.pydantic_base import DictCompatibleModel


class Page(DictCompatibleModel):
    """One page of a cursor-paginated list response"""

    results: List[Dict[str, Any]]
    next: Optional[str] = None
    previous: Optional[str] = None
