from unittest import mock

import pytest

from replicate_client import (
    Deployment,
    Hardware,
    Model,
    NotFoundError,
    Version,
)
from replicate_client.deployment import current_hardware
from tests.helpers import (
    TEST_DEPLOYMENT_PAYLOAD,
    TEST_MODEL_PAYLOAD,
    TEST_OTHER_VERSION_ID,
    TEST_PREDICTION_PAYLOAD,
    TEST_URI_BASE,
    TEST_VERSION_ID,
    TEST_VERSION_PAYLOAD,
    make_page,
    make_response,
    model_payload,
    requested_json,
    requested_url,
)


@pytest.fixture()
def deployment(CLIENT):
    return Deployment.from_json(TEST_DEPLOYMENT_PAYLOAD, client=CLIENT)


def test_from_json(deployment):
    assert deployment.full_name == "acme/image-upscaler"
    assert deployment.path == "/deployments/acme/image-upscaler"
    assert deployment.current_release.number == 1
    assert deployment.current_release.version == TEST_VERSION_ID
    assert deployment.current_release["model"] == "acme/esrgan"
    assert current_hardware(deployment) == "gpu-t4"


def test_deployment_without_release(CLIENT):
    deployment = Deployment.from_json({"owner": "acme", "name": "new"}, client=CLIENT)
    assert deployment.current_release is None
    assert current_hardware(deployment) is None


def test_list_deployments(CLIENT):
    with mock.patch(
        "requests.get",
        return_value=make_response(200, make_page([TEST_DEPLOYMENT_PAYLOAD])),
    ) as mock_get:
        deployments = CLIENT.deployments
    assert requested_url(mock_get) == f"{TEST_URI_BASE}/deployments"
    assert [d.full_name for d in deployments] == ["acme/image-upscaler"]


def test_create_with_explicit_version_makes_no_lookup(CLIENT):
    hardware = Hardware.from_json({"sku": "gpu-t4", "name": "T4"}, client=CLIENT)
    with mock.patch(
        "requests.post", return_value=make_response(201, TEST_DEPLOYMENT_PAYLOAD)
    ) as mock_post, mock.patch("requests.get") as mock_get:
        CLIENT.create_deployment(
            name="image-upscaler",
            model="acme/esrgan",
            hardware=hardware,
            min_instances=1,
            max_instances=5,
            version_id=TEST_OTHER_VERSION_ID,
        )
    mock_get.assert_not_called()
    assert requested_url(mock_post) == f"{TEST_URI_BASE}/deployments"
    assert requested_json(mock_post) == {
        "name": "image-upscaler",
        "model": "acme/esrgan",
        "version": TEST_OTHER_VERSION_ID,
        "hardware": "gpu-t4",
        "min_instances": 1,
        "max_instances": 5,
    }


def test_create_with_version_handle(CLIENT):
    version = Version.from_json(TEST_VERSION_PAYLOAD, client=CLIENT)
    with mock.patch(
        "requests.post", return_value=make_response(201, TEST_DEPLOYMENT_PAYLOAD)
    ) as mock_post:
        CLIENT.create_deployment(
            name="image-upscaler",
            model="acme/esrgan",
            hardware="gpu-t4",
            min_instances=0,
            max_instances=1,
            version_id=version,
        )
    assert requested_json(mock_post)["version"] == TEST_VERSION_ID
    assert requested_json(mock_post)["min_instances"] == 0


def test_create_with_model_handle_uses_its_version(CLIENT):
    model = Model.from_json(
        TEST_MODEL_PAYLOAD, client=CLIENT, version_id=TEST_OTHER_VERSION_ID
    )
    with mock.patch(
        "requests.post", return_value=make_response(201, TEST_DEPLOYMENT_PAYLOAD)
    ) as mock_post, mock.patch("requests.get") as mock_get:
        CLIENT.create_deployment(
            name="hello",
            model=model,
            hardware="cpu",
            min_instances=0,
            max_instances=1,
        )
    mock_get.assert_not_called()
    assert requested_json(mock_post)["model"] == "replicate/hello-world"
    assert requested_json(mock_post)["version"] == TEST_OTHER_VERSION_ID


def test_create_with_model_name_looks_up_latest_version(CLIENT):
    with mock.patch(
        "requests.get",
        return_value=make_response(200, model_payload("acme", "esrgan", TEST_VERSION_ID)),
    ) as mock_get, mock.patch(
        "requests.post", return_value=make_response(201, TEST_DEPLOYMENT_PAYLOAD)
    ) as mock_post:
        CLIENT.create_deployment(
            name="image-upscaler",
            model="acme/esrgan",
            hardware="gpu-t4",
            min_instances=1,
            max_instances=5,
        )
    assert mock_get.call_count == 1
    assert requested_url(mock_get) == f"{TEST_URI_BASE}/models/acme/esrgan"
    assert requested_json(mock_post)["version"] == TEST_VERSION_ID


def test_get_and_find(CLIENT):
    with mock.patch(
        "requests.get",
        side_effect=lambda *args, **kwargs: make_response(200, TEST_DEPLOYMENT_PAYLOAD),
    ) as mock_get:
        by_name = CLIENT.get_deployment("acme/image-upscaler")
        by_parts = CLIENT.get_deployment_by("acme", "image-upscaler")
    assert by_name == by_parts
    assert requested_url(mock_get, 0) == requested_url(mock_get, 1)

    with mock.patch("requests.get", return_value=make_response(404, text="{}")):
        assert CLIENT.find_deployment_by("acme", "missing") is None
        with pytest.raises(NotFoundError):
            CLIENT.get_deployment_by("acme", "missing")


def test_update_sends_only_given_fields_and_replaces_snapshot(deployment):
    updated = {
        **TEST_DEPLOYMENT_PAYLOAD,
        "current_release": {
            **TEST_DEPLOYMENT_PAYLOAD["current_release"],
            "number": 2,
            "version": TEST_OTHER_VERSION_ID,
        },
    }
    with mock.patch(
        "requests.patch", return_value=make_response(200, updated)
    ) as mock_patch:
        deployment.update(max_instances=10, version=TEST_OTHER_VERSION_ID)
    assert requested_url(mock_patch) == f"{TEST_URI_BASE}/deployments/acme/image-upscaler"
    assert requested_json(mock_patch) == {
        "max_instances": 10,
        "version": TEST_OTHER_VERSION_ID,
    }
    assert deployment.current_release.number == 2
    assert deployment.current_release.version == TEST_OTHER_VERSION_ID


def test_reload_delete_and_predict(deployment):
    with mock.patch(
        "requests.get", return_value=make_response(200, TEST_DEPLOYMENT_PAYLOAD)
    ) as mock_get:
        deployment.reload()
    assert requested_url(mock_get) == f"{TEST_URI_BASE}/deployments/acme/image-upscaler"

    with mock.patch(
        "requests.post", return_value=make_response(201, TEST_PREDICTION_PAYLOAD)
    ) as mock_post:
        prediction = deployment.create_prediction({"image": "https://example.com/a.png"})
    assert requested_url(mock_post) == (
        f"{TEST_URI_BASE}/deployments/acme/image-upscaler/predictions"
    )
    assert prediction.id == TEST_PREDICTION_PAYLOAD["id"]

    with mock.patch(
        "requests.delete", return_value=make_response(204)
    ) as mock_delete:
        deployment.delete()
    assert requested_url(mock_delete) == f"{TEST_URI_BASE}/deployments/acme/image-upscaler"
