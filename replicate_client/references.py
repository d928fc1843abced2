"""Turns loosely typed resource references into canonical API paths.

Operations that accept "a model" or "a version" take either the raw
identifier string or the typed object returned by the client. Everything is
resolved here, once, before a request is built.
"""
from typing import TYPE_CHECKING, Callable, Optional, Tuple, Union

from .constants import (
    CANCEL_PATH,
    DEPLOYMENTS_PATH,
    MODELS_PATH,
    PREDICTIONS_PATH,
    TRAININGS_PATH,
    VERSIONS_PATH,
)
from .logger import logger

if TYPE_CHECKING:
    from .deployment import Deployment
    from .hardware import Hardware
    from .model import Model
    from .version import Version

ModelReference = Union[str, "Model"]
VersionReference = Union[str, "Version"]
DeploymentReference = Union[str, "Deployment"]
HardwareReference = Union[str, "Hardware"]


def parse_full_name(full_name: str) -> Tuple[str, Optional[str]]:
    """Splits ``"owner/name"`` into ``(owner, name)``.

    Only the first two segments are kept, ``"a/b/c"`` resolves to
    ``("a", "b")``. A string without a slash has no name.
    """
    parts = full_name.split("/")
    if len(parts) > 2:
        logger.warning(
            "Ignoring extra path segments in %s, using %s/%s",
            full_name,
            parts[0],
            parts[1],
        )
    owner = parts[0]
    name = parts[1] if len(parts) > 1 else None
    return owner, name


def build_model_path(owner: str, name: Optional[str]) -> str:
    return f"{MODELS_PATH}/{owner}/{name}"


def build_versions_path(owner: str, name: Optional[str]) -> str:
    return f"{build_model_path(owner, name)}{VERSIONS_PATH}"


def build_version_path(
    owner: str, name: Optional[str], version_id: Optional[str]
) -> str:
    return f"{build_versions_path(owner, name)}/{version_id}"


def build_prediction_path(prediction_id: str) -> str:
    return f"{PREDICTIONS_PATH}/{prediction_id}"


def build_training_path(training_id: str) -> str:
    return f"{TRAININGS_PATH}/{training_id}"


def build_deployment_path(owner: str, name: Optional[str]) -> str:
    return f"{DEPLOYMENTS_PATH}/{owner}/{name}"


def build_cancel_path(resource_path: str) -> str:
    return f"{resource_path}{CANCEL_PATH}"


def model_full_name(model: ModelReference) -> str:
    if isinstance(model, str):
        return model
    return model.full_name


def model_path(model: ModelReference) -> str:
    if isinstance(model, str):
        return build_model_path(*parse_full_name(model))
    return model.path


def deployment_path(deployment: DeploymentReference) -> str:
    if isinstance(deployment, str):
        return build_deployment_path(*parse_full_name(deployment))
    return deployment.path


def version_id_of(version: Optional[VersionReference]) -> Optional[str]:
    if version is None or isinstance(version, str):
        return version
    return version.id


def hardware_sku(hardware: HardwareReference) -> str:
    if isinstance(hardware, str):
        return hardware
    return hardware.sku


def resolve_version_id(
    version_id: Optional[VersionReference],
    model: ModelReference,
    find_model: Callable[[str], "Model"],
) -> str:
    """Picks the version to use for ``model``.

    In order: the explicit ``version_id``, the version already selected on a
    :class:`Model` handle, then the latest version of a fresh lookup through
    ``find_model``. The lookup only happens when neither is available.
    """
    explicit_id = version_id_of(version_id)
    if explicit_id is not None:
        return explicit_id

    if not isinstance(model, str) and model.version_id is not None:
        return model.version_id

    found = find_model(model_full_name(model))
    if found.latest_version_id is None:
        raise ValueError(
            f"Model {found.full_name} has no versions to choose from"
        )
    return found.latest_version_id
