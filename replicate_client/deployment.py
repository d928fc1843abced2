from typing import TYPE_CHECKING, Any, Dict, List, Optional

from .data_transfer_object.deployment_details import (
    DeploymentDetails,
    DeploymentRelease,
)
from .pydantic_base import parse_payload
from .references import build_deployment_path

if TYPE_CHECKING:
    from . import ReplicateClient
    from .prediction import Prediction
    from .references import HardwareReference, VersionReference
    from .webhook import WebhookEvent


class Deployment:
    """A private, fixed endpoint serving one model version on chosen hardware.

    ::

        deployment = client.get_deployment("acme/image-upscaler")
        deployment.update(min_instances=1, max_instances=5)
        prediction = deployment.create_prediction({"image": "https://..."})

    Attributes:
        owner: Account owning the deployment
        name: Name of the deployment
        current_release: The release currently serving traffic, if any
    """

    def __init__(
        self,
        owner: str,
        name: str,
        client: "ReplicateClient",
        current_release: Optional[DeploymentRelease] = None,
    ):
        self.owner = owner
        self.name = name
        self.current_release = current_release
        self._client = client

    def __repr__(self):
        return f"Deployment(owner='{self.owner}', name='{self.name}', current_release={self.current_release})"

    def __eq__(self, other):
        return (
            (self.owner == other.owner)
            and (self.name == other.name)
            and (self.current_release == other.current_release)
        )

    def __hash__(self):
        return hash(self.full_name)

    @classmethod
    def from_json(cls, payload: dict, client: "ReplicateClient") -> "Deployment":
        details = parse_payload(DeploymentDetails, payload)
        return cls(
            owner=details.owner,
            name=details.name,
            client=client,
            current_release=details.current_release,
        )

    @property
    def full_name(self) -> str:
        return f"{self.owner}/{self.name}"

    @property
    def path(self) -> str:
        return build_deployment_path(self.owner, self.name)

    def create_prediction(
        self,
        input: Dict[str, Any],  # pylint: disable=redefined-builtin
        webhook_url: Optional[str] = None,
        webhook_events_filter: Optional[List["WebhookEvent"]] = None,
    ) -> "Prediction":
        return self._client.create_deployment_prediction(
            deployment=self,
            input=input,
            webhook_url=webhook_url,
            webhook_events_filter=webhook_events_filter,
        )

    def update(
        self,
        hardware: Optional["HardwareReference"] = None,
        min_instances: Optional[int] = None,
        max_instances: Optional[int] = None,
        version: Optional["VersionReference"] = None,
    ) -> None:
        """Creates a new release with the given changes.

        Arguments left as ``None`` keep their current value. The snapshot is
        replaced by the server's answer.
        """
        fresh = self._client.update_deployment(
            self,
            hardware=hardware,
            min_instances=min_instances,
            max_instances=max_instances,
            version=version,
        )
        self.__dict__.update(fresh.__dict__)

    def reload(self) -> None:
        fresh = Deployment.from_json(self._client.get(self.path), self._client)
        self.__dict__.update(fresh.__dict__)

    def delete(self) -> None:
        self._client.delete_deployment(self.owner, self.name)


def current_hardware(deployment: Deployment) -> Optional[str]:
    """SKU the deployment currently runs on, if it has a release."""
    release = deployment.current_release
    if release is None or release.configuration is None:
        return None
    return release.configuration.hardware
