from typing import Any, Dict, Optional

import requests

from .configuration import Configuration
from .errors import error_for_status
from .logger import logger


def prune_payload(payload: Optional[dict]) -> dict:
    """Drops top-level keys set to ``None`` so optional fields are omitted."""
    if payload is None:
        return {}
    return {key: value for key, value in payload.items() if value is not None}


class Connection:
    """Wrapper of HTTP requests to the Replicate endpoint."""

    def __init__(self, configuration: Configuration):
        self.configuration = configuration

    def __repr__(self):
        return f"Connection(endpoint='{self.endpoint}', request_timeout={self.configuration.request_timeout})"

    def __eq__(self, other):
        return self.configuration == other.configuration

    @property
    def endpoint(self) -> str:
        return self.configuration.uri_base

    def delete(self, route: str) -> None:
        self.make_request(None, route, requests_command=requests.delete)

    def get(self, route: str):
        return self.make_request(None, route, requests_command=requests.get)

    def post(self, payload: Optional[dict], route: str):
        return self.make_request(
            prune_payload(payload), route, requests_command=requests.post
        )

    def patch(self, payload: Optional[dict], route: str):
        return self.make_request(
            prune_payload(payload), route, requests_command=requests.patch
        )

    def make_request(
        self,
        payload: Optional[dict],
        route: str,
        requests_command=requests.get,
    ) -> Any:
        """
        Makes a request to the Replicate endpoint and raises a typed error if
        not successful.

        :param payload: JSON body, ``None`` for requests without a body
        :param route: route for the request, starting with a slash
        :param requests_command: requests.get, requests.post, requests.patch, requests.delete
        :return: response JSON, ``None`` when the body is empty
        """
        endpoint = f"{self.endpoint}{route}"

        logger.info("Make request to %s", endpoint)

        headers: Dict[str, str] = {"Accept": "application/json"}
        if self.configuration.access_token is not None:
            headers[
                "Authorization"
            ] = f"Bearer {self.configuration.access_token}"
        body_kwargs = {}
        if payload is not None:
            headers["Content-Type"] = "application/json"
            body_kwargs["json"] = payload

        response = requests_command(
            endpoint,
            headers=headers,
            timeout=self.configuration.request_timeout,
            **body_kwargs,
        )
        logger.info("API request has response code %s", response.status_code)

        if not response.ok:
            self.handle_bad_response(endpoint, response)

        if not response.content:
            return None
        return response.json()

    def handle_bad_response(self, endpoint, requests_response):
        error_class = error_for_status(requests_response.status_code)
        raise error_class(endpoint, requests_response)
