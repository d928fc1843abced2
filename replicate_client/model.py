from enum import Enum
from typing import TYPE_CHECKING, Any, Dict, Iterator, List, Optional

from .data_transfer_object.model_details import ModelDetails
from .pydantic_base import parse_payload
from .references import build_model_path, build_version_path

if TYPE_CHECKING:
    from . import ReplicateClient
    from .prediction import Prediction
    from .version import Version
    from .webhook import WebhookEvent


class Visibility(str, Enum):
    """Who can see and run a model."""

    PUBLIC = "public"
    PRIVATE = "private"

    def __contains__(self, item):
        try:
            self(item)
        except ValueError:
            return False
        return True

    @staticmethod
    def options():
        return list(map(lambda c: c.value, Visibility))


class Model:
    """A model hosted on Replicate.

    A Model is a snapshot of the attributes the API returned when it was last
    fetched. It pins one version, ``version_id``, used when running
    predictions; this defaults to the latest version of the model. ::

        import replicate_client

        client = replicate_client.ReplicateClient("YOUR_API_TOKEN")
        model = client.get_model("stability-ai/sdxl")

        prediction = model.create_prediction(input={"prompt": "an astronaut"})
        prediction.reload()

    Models cannot be instantiated directly and instead must be fetched or
    created through :class:`ReplicateClient`.
    """

    def __init__(
        self,
        owner: str,
        name: str,
        client: "ReplicateClient",
        url: Optional[str] = None,
        description: Optional[str] = None,
        visibility: Optional[str] = None,
        github_url: Optional[str] = None,
        paper_url: Optional[str] = None,
        license_url: Optional[str] = None,
        run_count: Optional[int] = None,
        cover_image_url: Optional[str] = None,
        default_example: Optional[Dict[str, Any]] = None,
        latest_version_id: Optional[str] = None,
        version_id: Optional[str] = None,
    ):
        self.owner = owner
        self.name = name
        self.url = url
        self.description = description
        self.visibility = visibility
        self.github_url = github_url
        self.paper_url = paper_url
        self.license_url = license_url
        self.run_count = run_count
        self.cover_image_url = cover_image_url
        self.default_example = default_example
        self.latest_version_id = latest_version_id
        self.version_id = version_id or latest_version_id
        self._client = client

    def __repr__(self):
        return f"Model(owner='{self.owner}', name='{self.name}', visibility='{self.visibility}', version_id='{self.version_id}', client={self._client})"

    def __eq__(self, other):
        return (
            (self.owner == other.owner)
            and (self.name == other.name)
            and (self.version_id == other.version_id)
            and (self.latest_version_id == other.latest_version_id)
        )

    def __hash__(self):
        return hash(self.full_name)

    @classmethod
    def from_json(
        cls,
        payload: dict,
        client: "ReplicateClient",
        version_id: Optional[str] = None,
    ) -> "Model":
        """Instantiates model object from schematized JSON dict payload."""
        details = parse_payload(ModelDetails, payload)
        return cls(
            owner=details.owner,
            name=details.name,
            client=client,
            url=details.url,
            description=details.description,
            visibility=details.visibility,
            github_url=details.github_url,
            paper_url=details.paper_url,
            license_url=details.license_url,
            run_count=details.run_count,
            cover_image_url=details.cover_image_url,
            default_example=details.default_example,
            latest_version_id=details.latest_version.id
            if details.latest_version
            else None,
            version_id=version_id,
        )

    @property
    def full_name(self) -> str:
        """Name of the model in ``owner/name`` format."""
        return f"{self.owner}/{self.name}"

    @property
    def path(self) -> str:
        return build_model_path(self.owner, self.name)

    @property
    def version_path(self) -> str:
        return build_version_path(self.owner, self.name, self.version_id)

    @property
    def is_public(self) -> bool:
        return self.visibility == Visibility.PUBLIC

    @property
    def is_private(self) -> bool:
        return self.visibility == Visibility.PRIVATE

    @property
    def version(self) -> "Version":
        """Fetches the version pinned on this model."""
        return self._client.get_version(self.owner, self.name, self.version_id)

    @property
    def latest_version(self) -> "Version":
        """Fetches the latest version of this model."""
        return self._client.get_version(
            self.owner, self.name, self.latest_version_id
        )

    @property
    def versions(self) -> List["Version"]:
        """All versions of this model, see :meth:`versions_generator`."""
        return list(self.versions_generator())

    def versions_generator(self) -> Iterator["Version"]:
        """Lazily pages through the versions of this model."""
        return self._client.versions_generator(self.owner, self.name)

    def create_prediction(
        self,
        input: Dict[str, Any],  # pylint: disable=redefined-builtin
        webhook_url: Optional[str] = None,
        webhook_events_filter: Optional[List["WebhookEvent"]] = None,
    ) -> "Prediction":
        """Runs this model.

        Without a pinned version the prediction goes through the official
        model route, ``POST /models/{owner}/{name}/predictions``. Otherwise it
        runs the pinned version.

        Args:
            input: Inputs of the model, as described by its OpenAPI schema.
            webhook_url: URL notified on prediction events. Defaults to the
              client's configured webhook.
            webhook_events_filter: Events that trigger the webhook.

        Returns:
            The created :class:`Prediction`.
        """
        if self.version_id is None:
            return self._client.create_official_model_prediction(
                model=self,
                input=input,
                webhook_url=webhook_url,
                webhook_events_filter=webhook_events_filter,
            )
        return self._client.create_prediction(
            version=self.version_id,
            input=input,
            webhook_url=webhook_url,
            webhook_events_filter=webhook_events_filter,
        )

    def reload(self) -> None:
        """Refetches the model, keeping the pinned version."""
        response = self._client.get(self.path)
        fresh = Model.from_json(
            response, client=self._client, version_id=self.version_id
        )
        self.__dict__.update(fresh.__dict__)

    def delete(self) -> None:
        self._client.delete_model(self)
