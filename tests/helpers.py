import json
from typing import Any, Optional

import requests

TEST_ACCESS_TOKEN = "r8_test_token"
TEST_URI_BASE = "https://api.replicate.test/v1"
TEST_WEBHOOK_URL = "https://example.com/webhooks/replicate"

TEST_VERSION_ID = "5c7d5dc6dd8bf75c1acaa8565735e7986bc5b66206b55cca93cb72c9bf15ccaa"
TEST_OTHER_VERSION_ID = "b21cbe271e65c1718f2999b038c18b45e21e4fba961181fbfae9342fc53b9e05"

TEST_MODEL_PAYLOAD = {
    "url": "https://replicate.com/replicate/hello-world",
    "owner": "replicate",
    "name": "hello-world",
    "description": "A tiny model that says hello",
    "visibility": "public",
    "github_url": "https://github.com/replicate/cog-examples",
    "paper_url": None,
    "license_url": None,
    "run_count": 5681081,
    "cover_image_url": None,
    "default_example": {"input": {"text": "Alice"}},
    "latest_version": {
        "id": TEST_VERSION_ID,
        "created_at": "2022-04-26T19:29:04.418669Z",
        "cog_version": "0.3.0",
        "openapi_schema": {},
    },
}

TEST_OFFICIAL_MODEL_PAYLOAD = {
    "owner": "meta",
    "name": "meta-llama-3-8b",
    "visibility": "public",
    "latest_version": None,
}

TEST_VERSION_PAYLOAD = {
    "id": TEST_VERSION_ID,
    "created_at": "2022-04-26T19:29:04.418669Z",
    "cog_version": "0.3.0",
    "openapi_schema": {"info": {"title": "Cog"}},
}

TEST_PREDICTION_PAYLOAD = {
    "id": "gm3qorzdhgbfurvjtvhg6dckhu",
    "model": "replicate/hello-world",
    "version": TEST_VERSION_ID,
    "input": {"text": "Alice"},
    "logs": "",
    "output": None,
    "error": None,
    "status": "starting",
    "created_at": "2023-09-08T16:19:34.765994Z",
    "urls": {
        "cancel": "https://api.replicate.com/v1/predictions/gm3qorzdhgbfurvjtvhg6dckhu/cancel",
        "get": "https://api.replicate.com/v1/predictions/gm3qorzdhgbfurvjtvhg6dckhu",
    },
}

TEST_TRAINING_PAYLOAD = {
    "id": "zz4ibbonubfz7carwiefibzgga",
    "model": "stability-ai/sdxl",
    "version": TEST_VERSION_ID,
    "input": {"input_images": "https://example.com/images.zip"},
    "status": "processing",
    "created_at": "2023-03-28T21:47:58.566434Z",
    "logs": "",
    "error": None,
    "output": None,
    "urls": {
        "get": "https://api.replicate.com/v1/trainings/zz4ibbonubfz7carwiefibzgga",
        "cancel": "https://api.replicate.com/v1/trainings/zz4ibbonubfz7carwiefibzgga/cancel",
    },
}

TEST_DEPLOYMENT_PAYLOAD = {
    "owner": "acme",
    "name": "image-upscaler",
    "current_release": {
        "number": 1,
        "model": "acme/esrgan",
        "version": TEST_VERSION_ID,
        "created_at": "2024-02-15T16:32:57.018467Z",
        "created_by": {"type": "organization", "username": "acme"},
        "configuration": {
            "hardware": "gpu-t4",
            "min_instances": 1,
            "max_instances": 5,
        },
    },
}

TEST_HARDWARE_PAYLOAD = [
    {"name": "CPU", "sku": "cpu"},
    {"name": "Nvidia T4 GPU", "sku": "gpu-t4"},
    {"name": "Nvidia A40 (Large) GPU", "sku": "gpu-a40-large"},
]


def make_response(
    status_code: int = 200, payload: Optional[Any] = None, text: str = None
) -> requests.Response:
    """Builds a real requests.Response so .ok, .json() and .text behave as in production."""
    response = requests.Response()
    response.status_code = status_code
    response.reason = "OK" if status_code < 400 else "Error"
    response.encoding = "utf-8"
    if text is not None:
        response._content = text.encode("utf-8")  # pylint: disable=protected-access
    elif payload is not None:
        response._content = json.dumps(payload).encode("utf-8")  # pylint: disable=protected-access
    else:
        response._content = b""  # pylint: disable=protected-access
    return response


def make_page(results, next_cursor: Optional[str] = None, route: str = "/models") -> dict:
    return {
        "previous": None,
        "next": f"https://api.replicate.com/v1{route}?cursor={next_cursor}"
        if next_cursor
        else None,
        "results": results,
    }


def model_payload(owner: str, name: str, version_id: Optional[str] = None) -> dict:
    return {
        "owner": owner,
        "name": name,
        "visibility": "public",
        "latest_version": {"id": version_id} if version_id else None,
    }


def requested_url(mock_command, call_index: int = 0) -> str:
    return mock_command.call_args_list[call_index][0][0]


def requested_json(mock_command, call_index: int = 0) -> dict:
    return mock_command.call_args_list[call_index][1]["json"]
