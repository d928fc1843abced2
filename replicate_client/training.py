from datetime import datetime
from enum import Enum
from typing import TYPE_CHECKING, Any, Dict, Optional

from .data_transfer_object.training_details import TrainingDetails
from .pydantic_base import parse_payload
from .references import build_training_path

if TYPE_CHECKING:
    from . import ReplicateClient


class TrainingStatus(str, Enum):
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
        return list(map(lambda c: c.value, TrainingStatus))


class Training:
    """A fine-tuning job that pushes a new version to a destination model.

    Attributes:
        id: Server generated training ID
        model: Name of the trained model in ``owner/name`` format
        version: ID of the version being trained
        status: Current :class:`TrainingStatus` value
        output: Training result, typically the new ``version`` and ``weights``
    """

    def __init__(
        self,
        training_id: str,
        status: str,
        client: "ReplicateClient",
        model: Optional[str] = None,
        version: Optional[str] = None,
        input: Optional[Dict[str, Any]] = None,  # pylint: disable=redefined-builtin
        output: Optional[Any] = None,
        error: Optional[Any] = None,
        logs: Optional[str] = None,
        urls: Optional[Dict[str, str]] = None,
        created_at: Optional[datetime] = None,
        started_at: Optional[datetime] = None,
        completed_at: Optional[datetime] = None,
    ):
        self.id = training_id
        self.status = status
        self.model = model
        self.version = version
        self.input = input
        self.output = output
        self.error = error
        self.logs = logs
        self.urls = urls
        self.created_at = created_at
        self.started_at = started_at
        self.completed_at = completed_at
        self._client = client

    def __repr__(self):
        return f"Training(training_id='{self.id}', status='{self.status}', model='{self.model}', version='{self.version}')"

    def __eq__(self, other):
        return (
            (self.id == other.id)
            and (self.status == other.status)
            and (self.output == other.output)
        )

    def __hash__(self):
        return hash(self.id)

    @classmethod
    def from_json(cls, payload: dict, client: "ReplicateClient") -> "Training":
        details = parse_payload(TrainingDetails, payload)
        return cls(
            training_id=details.id,
            status=details.status,
            client=client,
            model=details.model,
            version=details.version,
            input=details.input,
            output=details.output,
            error=details.error,
            logs=details.logs,
            urls=details.urls,
            created_at=details.created_at,
            started_at=details.started_at,
            completed_at=details.completed_at,
        )

    @property
    def path(self) -> str:
        return build_training_path(self.id)

    @property
    def is_starting(self) -> bool:
        return self.status == TrainingStatus.STARTING

    @property
    def is_processing(self) -> bool:
        return self.status == TrainingStatus.PROCESSING

    @property
    def is_succeeded(self) -> bool:
        return self.status == TrainingStatus.SUCCEEDED

    @property
    def is_failed(self) -> bool:
        return self.status == TrainingStatus.FAILED

    @property
    def is_canceled(self) -> bool:
        return self.status == TrainingStatus.CANCELED

    def reload(self) -> None:
        fresh = Training.from_json(self._client.get(self.path), self._client)
        self.__dict__.update(fresh.__dict__)

    def cancel(self) -> None:
        self._client.cancel_training(self.id)
