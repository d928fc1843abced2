"""Replicate Python SDK. """

__all__ = [
    "ConfigurationError",
    "Configuration",
    "DecodingError",
    "Deployment",
    "DeploymentRelease",
    "ForbiddenError",
    "Hardware",
    "Model",
    "NotFoundError",
    "Prediction",
    "PredictionStatus",
    "ReplicateAPIError",
    "ReplicateClient",
    "ServerError",
    "Training",
    "TrainingStatus",
    "UnauthorizedError",
    "Version",
    "Visibility",
    "WebhookEvent",
]

from typing import Any, Dict, Iterator, List, Optional

from ._metadata import __version__
from .configuration import Configuration
from .connection import Connection
from .constants import (
    COVER_IMAGE_URL_KEY,
    DEPLOYMENTS_PATH,
    DESCRIPTION_KEY,
    DESTINATION_KEY,
    GITHUB_URL_KEY,
    HARDWARE_KEY,
    HARDWARE_PATH,
    INPUT_KEY,
    LICENSE_URL_KEY,
    MAX_INSTANCES_KEY,
    MIN_INSTANCES_KEY,
    MODEL_KEY,
    MODELS_PATH,
    NAME_KEY,
    OWNER_KEY,
    PAPER_URL_KEY,
    PREDICTIONS_PATH,
    TRAININGS_PATH,
    VERSION_KEY,
    VISIBILITY_KEY,
    WEBHOOK_EVENTS_FILTER_KEY,
    WEBHOOK_KEY,
)
from .data_transfer_object.deployment_details import DeploymentRelease
from .deployment import Deployment
from .errors import (
    ConfigurationError,
    DecodingError,
    ForbiddenError,
    NotFoundError,
    ReplicateAPIError,
    ServerError,
    UnauthorizedError,
)
from .hardware import Hardware
from .model import Model, Visibility
from .prediction import Prediction, PredictionStatus
from .references import (
    DeploymentReference,
    HardwareReference,
    ModelReference,
    VersionReference,
    build_cancel_path,
    build_deployment_path,
    build_model_path,
    build_prediction_path,
    build_training_path,
    build_version_path,
    build_versions_path,
    deployment_path,
    hardware_sku,
    model_full_name,
    model_path,
    parse_full_name,
    resolve_version_id,
    version_id_of,
)
from .training import Training, TrainingStatus
from .utils import paginate_generator
from .version import Version
from .webhook import WebhookEvent, serialize_events_filter

# pylint: disable=redefined-builtin


class ReplicateClient:
    """Client to interact with the Replicate API via Python SDK.

    Parameters:
        access_token: API token from https://replicate.com/account/api-tokens.
          Falls back to the ``REPLICATE_API_TOKEN`` environment variable.
        uri_base: Base URL of the API. Falls back to ``REPLICATE_URI_BASE``,
          then to Replicate's production API.
        request_timeout: Timeout in seconds of every request. Default is 120.
        webhook_url: Default webhook for new predictions. Falls back to
          ``REPLICATE_WEBHOOK_URL``.
        configuration: A complete :class:`Configuration`. Takes precedence
          over every other argument.
    """

    def __init__(
        self,
        access_token: Optional[str] = None,
        uri_base: Optional[str] = None,
        request_timeout: Optional[float] = None,
        webhook_url: Optional[str] = None,
        configuration: Optional[Configuration] = None,
    ):
        if configuration is None:
            configuration = Configuration.from_env(
                access_token=access_token,
                uri_base=uri_base,
                request_timeout=request_timeout,
                webhook_url=webhook_url,
            )
        self.configuration = configuration
        self.connection = Connection(self.configuration)

    def __repr__(self):
        return f"ReplicateClient(uri_base='{self.configuration.uri_base}', request_timeout={self.configuration.request_timeout})"

    def __eq__(self, other):
        return self.configuration == other.configuration

    # Models

    @property
    def models(self) -> List[Model]:
        """Fetches all models visible to the client, see :meth:`models_generator`."""
        return list(self.models_generator())

    def models_generator(self) -> Iterator[Model]:
        """Generator yielding every public model and the client's private ones.

        ::

            for model in client.models_generator():
                print(model.full_name, model.run_count)

        Yields:
            :class:`Model`: One model at a time, pages are fetched on demand.
        """
        return paginate_generator(
            self.connection,
            MODELS_PATH,
            lambda payload: Model.from_json(payload, client=self),
        )

    def get_model(
        self, model_name: str, version_id: Optional[str] = None
    ) -> Model:
        """Fetches a model by its full name.

        Parameters:
            model_name: Name in ``owner/name`` format.
            version_id: Version to pin on the returned model. Defaults to the
              latest version.

        Returns:
            :class:`Model`: The model as an object.

        Raises:
            NotFoundError: No such model.
        """
        owner, name = parse_full_name(model_name)
        return self.get_model_by(owner, name, version_id=version_id)

    def get_model_by(
        self, owner: str, name: Optional[str], version_id: Optional[str] = None
    ) -> Model:
        response = self.get(build_model_path(owner, name))
        return Model.from_json(response, client=self, version_id=version_id)

    def find_model_by(
        self, owner: str, name: Optional[str], version_id: Optional[str] = None
    ) -> Optional[Model]:
        """Like :meth:`get_model_by`, but returns ``None`` if the model does not exist."""
        try:
            return self.get_model_by(owner, name, version_id=version_id)
        except NotFoundError:
            return None

    def create_model(
        self,
        owner: str,
        name: str,
        description: str,
        visibility: str,
        hardware: HardwareReference,
        github_url: Optional[str] = None,
        paper_url: Optional[str] = None,
        license_url: Optional[str] = None,
        cover_image_url: Optional[str] = None,
    ) -> Model:
        """Creates an empty model that versions can be pushed to.

        Parameters:
            owner: User or organization that will own the model.
            name: Name of the model.
            description: Short description of the model.
            visibility: ``"public"`` or ``"private"``, see :class:`Visibility`.
            hardware: SKU or :class:`Hardware` the model runs on.
            github_url: URL of the model's source code.
            paper_url: URL of the model's paper.
            license_url: URL of the model's license.
            cover_image_url: URL of an image shown on the model page.

        Returns:
            :class:`Model`: The newly created model.
        """
        payload = {
            OWNER_KEY: owner,
            NAME_KEY: name,
            DESCRIPTION_KEY: description,
            VISIBILITY_KEY: visibility,
            HARDWARE_KEY: hardware_sku(hardware),
            GITHUB_URL_KEY: github_url,
            PAPER_URL_KEY: paper_url,
            LICENSE_URL_KEY: license_url,
            COVER_IMAGE_URL_KEY: cover_image_url,
        }
        response = self.post(payload, MODELS_PATH)
        return Model.from_json(response, client=self)

    def delete_model(self, model: ModelReference) -> None:
        """Deletes a model. The API only allows this for models without versions."""
        self.delete(model_path(model))

    # Versions

    def versions_generator(
        self, owner: str, name: Optional[str]
    ) -> Iterator[Version]:
        return paginate_generator(
            self.connection,
            build_versions_path(owner, name),
            lambda payload: Version.from_json(payload, client=self),
        )

    def list_versions(self, owner: str, name: Optional[str]) -> List[Version]:
        return list(self.versions_generator(owner, name))

    def get_version(
        self, owner: str, name: Optional[str], version_id: Optional[str]
    ) -> Version:
        response = self.get(build_version_path(owner, name, version_id))
        return Version.from_json(response, client=self)

    def find_version(
        self, owner: str, name: Optional[str], version_id: Optional[str]
    ) -> Optional[Version]:
        try:
            return self.get_version(owner, name, version_id)
        except NotFoundError:
            return None

    # Predictions

    def _prediction_payload(
        self,
        input: Dict[str, Any],
        webhook_url: Optional[str],
        webhook_events_filter: Optional[List[WebhookEvent]],
    ) -> Dict[str, Any]:
        return {
            INPUT_KEY: input,
            WEBHOOK_KEY: webhook_url or self.configuration.webhook_url,
            WEBHOOK_EVENTS_FILTER_KEY: serialize_events_filter(
                webhook_events_filter
            ),
        }

    def create_prediction(
        self,
        version: VersionReference,
        input: Dict[str, Any],
        webhook_url: Optional[str] = None,
        webhook_events_filter: Optional[List[WebhookEvent]] = None,
    ) -> Prediction:
        """Runs a model version.

        Parameters:
            version: Version ID or :class:`Version` to run.
            input: Inputs of the model.
            webhook_url: URL notified on prediction events. Defaults to the
              configured ``webhook_url``.
            webhook_events_filter: Events that trigger the webhook, see
              :class:`WebhookEvent`.

        Returns:
            :class:`Prediction`: The prediction, usually still ``starting``.
        """
        payload = {
            VERSION_KEY: version_id_of(version),
            **self._prediction_payload(input, webhook_url, webhook_events_filter),
        }
        response = self.post(payload, PREDICTIONS_PATH)
        return Prediction.from_json(response, client=self)

    def create_official_model_prediction(
        self,
        model: ModelReference,
        input: Dict[str, Any],
        webhook_url: Optional[str] = None,
        webhook_events_filter: Optional[List[WebhookEvent]] = None,
    ) -> Prediction:
        """Runs an official model, which is always served at its latest version.

        Parameters:
            model: Name in ``owner/name`` format or :class:`Model`.
        """
        payload = self._prediction_payload(
            input, webhook_url, webhook_events_filter
        )
        response = self.post(payload, f"{model_path(model)}{PREDICTIONS_PATH}")
        return Prediction.from_json(response, client=self)

    def create_deployment_prediction(
        self,
        deployment: DeploymentReference,
        input: Dict[str, Any],
        webhook_url: Optional[str] = None,
        webhook_events_filter: Optional[List[WebhookEvent]] = None,
    ) -> Prediction:
        """Runs the current release of a deployment.

        Parameters:
            deployment: Name in ``owner/name`` format or :class:`Deployment`.
        """
        payload = self._prediction_payload(
            input, webhook_url, webhook_events_filter
        )
        response = self.post(
            payload, f"{deployment_path(deployment)}{PREDICTIONS_PATH}"
        )
        return Prediction.from_json(response, client=self)

    def get_prediction(self, prediction_id: str) -> Prediction:
        response = self.get(build_prediction_path(prediction_id))
        return Prediction.from_json(response, client=self)

    def find_prediction(self, prediction_id: str) -> Optional[Prediction]:
        try:
            return self.get_prediction(prediction_id)
        except NotFoundError:
            return None

    def cancel_prediction(self, prediction_id: str) -> None:
        self.post({}, build_cancel_path(build_prediction_path(prediction_id)))

    # Trainings

    @property
    def trainings(self) -> List[Training]:
        return list(self.trainings_generator())

    def trainings_generator(self) -> Iterator[Training]:
        return paginate_generator(
            self.connection,
            TRAININGS_PATH,
            lambda payload: Training.from_json(payload, client=self),
        )

    def create_training(
        self,
        owner: str,
        name: str,
        version: VersionReference,
        destination: ModelReference,
        input: Dict[str, Any],
        webhook: Optional[str] = None,
        webhook_events_filter: Optional[List[WebhookEvent]] = None,
    ) -> Training:
        """Fine-tunes a model version.

        Parameters:
            owner: Owner of the model to train.
            name: Name of the model to train.
            version: Version ID or :class:`Version` to train.
            destination: Model receiving the trained version, ``owner/name``
              or :class:`Model`.
            input: Training inputs.
            webhook: URL notified on training events.
            webhook_events_filter: Events that trigger the webhook.

        Returns:
            :class:`Training`: The started training.
        """
        route = f"{build_version_path(owner, name, version_id_of(version))}{TRAININGS_PATH}"
        payload = {
            DESTINATION_KEY: model_full_name(destination),
            INPUT_KEY: input,
            WEBHOOK_KEY: webhook,
            WEBHOOK_EVENTS_FILTER_KEY: serialize_events_filter(
                webhook_events_filter
            ),
        }
        response = self.post(payload, route)
        return Training.from_json(response, client=self)

    def create_model_training(
        self,
        model: ModelReference,
        destination: ModelReference,
        input: Dict[str, Any],
        webhook: Optional[str] = None,
        webhook_events_filter: Optional[List[WebhookEvent]] = None,
    ) -> Training:
        """Fine-tunes the version pinned on ``model``.

        A model given by name, or a handle without a version, is looked up
        and trained at its latest version.
        """
        owner, name = parse_full_name(model_full_name(model))
        return self.create_training(
            owner=owner,
            name=name,
            version=resolve_version_id(None, model, self.get_model),
            destination=destination,
            input=input,
            webhook=webhook,
            webhook_events_filter=webhook_events_filter,
        )

    def get_training(self, training_id: str) -> Training:
        response = self.get(build_training_path(training_id))
        return Training.from_json(response, client=self)

    def find_training(self, training_id: str) -> Optional[Training]:
        try:
            return self.get_training(training_id)
        except NotFoundError:
            return None

    def cancel_training(self, training_id: str) -> None:
        self.post({}, build_cancel_path(build_training_path(training_id)))

    # Deployments

    @property
    def deployments(self) -> List[Deployment]:
        return list(self.deployments_generator())

    def deployments_generator(self) -> Iterator[Deployment]:
        return paginate_generator(
            self.connection,
            DEPLOYMENTS_PATH,
            lambda payload: Deployment.from_json(payload, client=self),
        )

    def create_deployment(
        self,
        name: str,
        model: ModelReference,
        hardware: HardwareReference,
        min_instances: int,
        max_instances: int,
        version_id: Optional[VersionReference] = None,
    ) -> Deployment:
        """Deploys a model version on dedicated hardware.

        Parameters:
            name: Name of the deployment.
            model: Name in ``owner/name`` format or :class:`Model`.
            hardware: SKU or :class:`Hardware`.
            min_instances: Lower bound of the autoscaler.
            max_instances: Upper bound of the autoscaler.
            version_id: Version to deploy. Defaults to the version pinned on a
              :class:`Model`, and otherwise to the model's latest version,
              which costs one extra request.

        Returns:
            :class:`Deployment`: The created deployment.
        """
        payload = {
            NAME_KEY: name,
            MODEL_KEY: model_full_name(model),
            VERSION_KEY: resolve_version_id(version_id, model, self.get_model),
            HARDWARE_KEY: hardware_sku(hardware),
            MIN_INSTANCES_KEY: min_instances,
            MAX_INSTANCES_KEY: max_instances,
        }
        response = self.post(payload, DEPLOYMENTS_PATH)
        return Deployment.from_json(response, client=self)

    def get_deployment(self, full_name: str) -> Deployment:
        owner, name = parse_full_name(full_name)
        return self.get_deployment_by(owner, name)

    def get_deployment_by(self, owner: str, name: Optional[str]) -> Deployment:
        response = self.get(build_deployment_path(owner, name))
        return Deployment.from_json(response, client=self)

    def find_deployment_by(
        self, owner: str, name: Optional[str]
    ) -> Optional[Deployment]:
        try:
            return self.get_deployment_by(owner, name)
        except NotFoundError:
            return None

    def update_deployment(
        self,
        deployment: DeploymentReference,
        hardware: Optional[HardwareReference] = None,
        min_instances: Optional[int] = None,
        max_instances: Optional[int] = None,
        version: Optional[VersionReference] = None,
    ) -> Deployment:
        """Updates a deployment, only the given settings are sent."""
        payload = {
            HARDWARE_KEY: hardware_sku(hardware)
            if hardware is not None
            else None,
            MIN_INSTANCES_KEY: min_instances,
            MAX_INSTANCES_KEY: max_instances,
            VERSION_KEY: version_id_of(version),
        }
        response = self.patch(payload, deployment_path(deployment))
        return Deployment.from_json(response, client=self)

    def delete_deployment(self, owner: str, name: Optional[str]) -> None:
        self.delete(build_deployment_path(owner, name))

    # Hardware

    @property
    def hardware(self) -> List[Hardware]:
        """All hardware SKUs available to run models on."""
        response = self.get(HARDWARE_PATH)
        return [Hardware.from_json(payload, client=self) for payload in response]

    def find_hardware(self, sku: str) -> Optional[Hardware]:
        return next(
            (hardware for hardware in self.hardware if hardware.sku == sku),
            None,
        )

    def delete(self, route: str) -> None:
        self.connection.delete(route)

    def get(self, route: str):
        return self.connection.get(route)

    def post(self, payload: Optional[dict], route: str):
        return self.connection.post(payload, route)

    def patch(self, payload: Optional[dict], route: str):
        return self.connection.patch(payload, route)

