from datetime import datetime
from typing import TYPE_CHECKING, Any, Dict, List, Optional

from .data_transfer_object.version_details import VersionDetails
from .pydantic_base import parse_payload

if TYPE_CHECKING:
    from . import ReplicateClient
    from .prediction import Prediction
    from .webhook import WebhookEvent


class Version:
    """An immutable, runnable build of a :class:`Model`.

    Attributes:
        id: Version ID, a content hash.
        created_at: When the version was pushed.
        cog_version: Version of Cog used to build the model.
        openapi_schema: Input and output schema of the model.
    """

    def __init__(
        self,
        version_id: str,
        created_at: datetime,
        client: "ReplicateClient",
        cog_version: Optional[str] = None,
        openapi_schema: Optional[Dict[str, Any]] = None,
    ):
        self.id = version_id
        self.created_at = created_at
        self.cog_version = cog_version
        self.openapi_schema = openapi_schema
        self._client = client

    def __repr__(self):
        return f"Version(version_id='{self.id}', created_at='{self.created_at}', cog_version='{self.cog_version}')"

    def __eq__(self, other):
        return (self.id == other.id) and (self.created_at == other.created_at)

    def __hash__(self):
        return hash(self.id)

    @classmethod
    def from_json(cls, payload: dict, client: "ReplicateClient") -> "Version":
        details = parse_payload(VersionDetails, payload)
        return cls(
            version_id=details.id,
            created_at=details.created_at,
            client=client,
            cog_version=details.cog_version,
            openapi_schema=details.openapi_schema,
        )

    def create_prediction(
        self,
        input: Dict[str, Any],  # pylint: disable=redefined-builtin
        webhook_url: Optional[str] = None,
        webhook_events_filter: Optional[List["WebhookEvent"]] = None,
    ) -> "Prediction":
        """Runs this version, see :meth:`ReplicateClient.create_prediction`."""
        return self._client.create_prediction(
            version=self,
            input=input,
            webhook_url=webhook_url,
            webhook_events_filter=webhook_events_filter,
        )
