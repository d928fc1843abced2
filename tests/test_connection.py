from unittest import mock

import pytest

from replicate_client import (
    Configuration,
    ConfigurationError,
    ForbiddenError,
    NotFoundError,
    ReplicateAPIError,
    ReplicateClient,
    ServerError,
    UnauthorizedError,
)
from replicate_client.connection import Connection, prune_payload
from replicate_client.constants import DEFAULT_REQUEST_TIMEOUT_SEC, DEFAULT_URI_BASE
from tests.helpers import (
    TEST_ACCESS_TOKEN,
    TEST_URI_BASE,
    make_response,
    requested_json,
    requested_url,
)


def test_prune_payload_drops_only_none():
    payload = {"a": 1, "b": None, "c": False, "d": "", "e": {"nested": None}}
    assert prune_payload(payload) == {
        "a": 1,
        "c": False,
        "d": "",
        "e": {"nested": None},
    }
    assert prune_payload(None) == {}


def test_get_sends_auth_and_accept_headers(CLIENT):
    with mock.patch(
        "requests.get", return_value=make_response(200, {"ok": True})
    ) as mock_get:
        assert CLIENT.get("/models/replicate/hello-world") == {"ok": True}

    assert requested_url(mock_get) == f"{TEST_URI_BASE}/models/replicate/hello-world"
    kwargs = mock_get.call_args[1]
    assert kwargs["headers"]["Authorization"] == f"Bearer {TEST_ACCESS_TOKEN}"
    assert kwargs["headers"]["Accept"] == "application/json"
    assert "Content-Type" not in kwargs["headers"]
    assert "json" not in kwargs
    assert kwargs["timeout"] == 30


def test_post_prunes_none_and_sets_content_type(CLIENT):
    with mock.patch(
        "requests.post", return_value=make_response(201, {"id": "p1"})
    ) as mock_post:
        CLIENT.post({"input": {"text": "hi"}, "webhook": None}, "/predictions")

    assert requested_json(mock_post) == {"input": {"text": "hi"}}
    headers = mock_post.call_args[1]["headers"]
    assert headers["Content-Type"] == "application/json"
    assert headers["Accept"] == "application/json"


def test_patch_prunes_none(CLIENT):
    with mock.patch(
        "requests.patch", return_value=make_response(200, {})
    ) as mock_patch:
        CLIENT.patch(
            {"hardware": None, "min_instances": 0, "max_instances": None},
            "/deployments/acme/upscaler",
        )

    assert requested_json(mock_patch) == {"min_instances": 0}


def test_delete_returns_none(CLIENT):
    with mock.patch(
        "requests.delete", return_value=make_response(204)
    ) as mock_delete:
        assert CLIENT.delete("/models/acme/old") is None
    assert requested_url(mock_delete) == f"{TEST_URI_BASE}/models/acme/old"


def test_missing_token_is_sent_without_authorization(monkeypatch):
    monkeypatch.delenv("REPLICATE_API_TOKEN", raising=False)
    client = ReplicateClient(uri_base=TEST_URI_BASE)
    with mock.patch(
        "requests.get", return_value=make_response(401, text='{"detail": "Unauthenticated"}')
    ) as mock_get:
        with pytest.raises(UnauthorizedError):
            client.get("/models")
    assert "Authorization" not in mock_get.call_args[1]["headers"]


@pytest.mark.parametrize(
    "status_code,error_class",
    [
        (401, UnauthorizedError),
        (403, ForbiddenError),
        (404, NotFoundError),
        (409, ServerError),
        (422, ServerError),
        (500, ServerError),
        (503, ServerError),
    ],
)
def test_status_code_error_mapping(CLIENT, status_code, error_class):
    body = '{"detail": "something went wrong"}'
    with mock.patch(
        "requests.get", return_value=make_response(status_code, text=body)
    ):
        with pytest.raises(error_class) as error:
            CLIENT.get("/predictions/abc")

    assert isinstance(error.value, ReplicateAPIError)
    assert error.value.status_code == status_code
    assert error.value.body == body
    assert error.value.endpoint == f"{TEST_URI_BASE}/predictions/abc"
    assert "something went wrong" in str(error.value)


def test_server_error_is_not_a_not_found_error(CLIENT):
    with mock.patch("requests.get", return_value=make_response(500, text="boom")):
        with pytest.raises(ServerError) as error:
            CLIENT.get("/models")
    assert not isinstance(error.value, NotFoundError)


def test_configuration_defaults(monkeypatch):
    monkeypatch.delenv("REPLICATE_API_TOKEN", raising=False)
    monkeypatch.delenv("REPLICATE_URI_BASE", raising=False)
    monkeypatch.delenv("REPLICATE_WEBHOOK_URL", raising=False)
    configuration = Configuration.from_env()
    assert configuration.access_token is None
    assert configuration.uri_base == DEFAULT_URI_BASE
    assert configuration.request_timeout == DEFAULT_REQUEST_TIMEOUT_SEC
    assert configuration.webhook_url is None


def test_configuration_reads_environment(monkeypatch):
    monkeypatch.setenv("REPLICATE_API_TOKEN", "r8_from_env")
    monkeypatch.setenv("REPLICATE_WEBHOOK_URL", "https://example.com/hook")
    client = ReplicateClient()
    assert client.configuration.access_token == "r8_from_env"
    assert client.configuration.webhook_url == "https://example.com/hook"

    explicit = ReplicateClient(access_token="r8_explicit")
    assert explicit.configuration.access_token == "r8_explicit"


def test_configuration_is_immutable():
    configuration = Configuration(access_token="r8_token")
    with pytest.raises(TypeError):
        configuration.access_token = "r8_other"


def test_explicit_configuration_wins():
    configuration = Configuration(
        access_token="r8_config", uri_base="https://proxy.internal/v1"
    )
    client = ReplicateClient(access_token="ignored", configuration=configuration)
    assert client.connection == Connection(configuration)
    assert client.connection.endpoint == "https://proxy.internal/v1"


def test_configuration_error_message():
    assert ConfigurationError().message == "The client configuration is invalid"
    assert str(ConfigurationError("bad uri")) == "bad uri"
