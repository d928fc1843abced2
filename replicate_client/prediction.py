from datetime import datetime
from enum import Enum
from typing import TYPE_CHECKING, Any, Dict, Optional

from .data_transfer_object.prediction_details import PredictionDetails
from .pydantic_base import parse_payload
from .references import build_prediction_path

if TYPE_CHECKING:
    from . import ReplicateClient
    from .model import Model
    from .version import Version


class PredictionStatus(str, Enum):
    STARTING = "starting"
    PROCESSING = "processing"
    SUCCEEDED = "succeeded"
    FAILED = "failed"
    CANCELED = "canceled"

    def __contains__(self, item):
        try:
            self(item)
        except ValueError:
            return False
        return True

    @staticmethod
    def options():
        return list(map(lambda c: c.value, PredictionStatus))


FINISHED_PREDICTION_STATUSES = {
    PredictionStatus.SUCCEEDED.value,
    PredictionStatus.FAILED.value,
    PredictionStatus.CANCELED.value,
}


class Prediction:
    """A single run of a model version.

    Predictions are created through :class:`ReplicateClient`, :class:`Model`,
    :class:`Version` or :class:`Deployment` and run asynchronously on the
    server. Call :meth:`reload` to refresh ``status`` and ``output``. ::

        prediction = client.create_prediction(
            version="5c7d5dc6dd8bf75c1acaa8565735e7986bc5b66206b55cca93cb72c9bf15ccaa",
            input={"text": "Alice"},
        )
        prediction.reload()
        if prediction.is_succeeded:
            print(prediction.output)
    """

    def __init__(
        self,
        prediction_id: str,
        status: str,
        client: "ReplicateClient",
        version_id: Optional[str] = None,
        model_name: Optional[str] = None,
        input: Optional[Dict[str, Any]] = None,  # pylint: disable=redefined-builtin
        output: Optional[Any] = None,
        error: Optional[Any] = None,
        logs: Optional[str] = None,
        metrics: Optional[Dict[str, Any]] = None,
        urls: Optional[Dict[str, str]] = None,
        data_removed: Optional[bool] = None,
        created_at: Optional[datetime] = None,
        started_at: Optional[datetime] = None,
        completed_at: Optional[datetime] = None,
    ):
        self.id = prediction_id
        self.status = status
        self.version_id = version_id
        self.model_name = model_name
        self.input = input
        self.output = output
        self.error = error
        self.logs = logs
        self.metrics = metrics
        self.urls = urls
        self.data_removed = data_removed
        self.created_at = created_at
        self.started_at = started_at
        self.completed_at = completed_at
        self._client = client

    def __repr__(self):
        return f"Prediction(prediction_id='{self.id}', status='{self.status}', model_name='{self.model_name}', version_id='{self.version_id}')"

    def __eq__(self, other):
        return (
            (self.id == other.id)
            and (self.status == other.status)
            and (self.output == other.output)
        )

    def __hash__(self):
        return hash(self.id)

    @classmethod
    def from_json(cls, payload: dict, client: "ReplicateClient") -> "Prediction":
        details = parse_payload(PredictionDetails, payload)
        return cls(
            prediction_id=details.id,
            status=details.status,
            client=client,
            version_id=details.version,
            model_name=details.model,
            input=details.input,
            output=details.output,
            error=details.error,
            logs=details.logs,
            metrics=details.metrics,
            urls=details.urls,
            data_removed=details.data_removed,
            created_at=details.created_at,
            started_at=details.started_at,
            completed_at=details.completed_at,
        )

    @property
    def path(self) -> str:
        return build_prediction_path(self.id)

    @property
    def model(self) -> "Model":
        """Fetches the model that ran this prediction, pinned to its version."""
        return self._client.get_model(self.model_name, version_id=self.version_id)

    @property
    def version(self) -> "Version":
        return self.model.version

    @property
    def is_starting(self) -> bool:
        return self.status == PredictionStatus.STARTING

    @property
    def is_processing(self) -> bool:
        return self.status == PredictionStatus.PROCESSING

    @property
    def is_succeeded(self) -> bool:
        return self.status == PredictionStatus.SUCCEEDED

    @property
    def is_failed(self) -> bool:
        return self.status == PredictionStatus.FAILED

    @property
    def is_canceled(self) -> bool:
        return self.status == PredictionStatus.CANCELED

    @property
    def is_finished(self) -> bool:
        return self.status in FINISHED_PREDICTION_STATUSES

    def reload(self) -> None:
        """Refetches the prediction and replaces every attribute."""
        fresh = Prediction.from_json(self._client.get(self.path), self._client)
        self.__dict__.update(fresh.__dict__)

    def cancel(self) -> None:
        """Asks the server to cancel the prediction.

        The local snapshot is left untouched, call :meth:`reload` to see the
        new status.
        """
        self._client.cancel_prediction(self.id)
