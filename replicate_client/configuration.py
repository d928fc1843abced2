import os
from typing import Optional

from .constants import (
    ACCESS_TOKEN_ENV_VAR,
    DEFAULT_REQUEST_TIMEOUT_SEC,
    DEFAULT_URI_BASE,
    URI_BASE_ENV_VAR,
    WEBHOOK_URL_ENV_VAR,
)
from .pydantic_base import ImmutableModel


class Configuration(ImmutableModel):
    """Settings shared by every request a :class:`ReplicateClient` makes.

    Attributes:
        access_token: API token sent as a bearer token. Not validated locally,
          a missing token surfaces as :class:`UnauthorizedError` from the API.
        uri_base: Base URL every route is appended to.
        request_timeout: Timeout in seconds applied to each request.
        webhook_url: Default webhook for new predictions.
    """

    access_token: Optional[str] = None
    uri_base: str = DEFAULT_URI_BASE
    request_timeout: float = DEFAULT_REQUEST_TIMEOUT_SEC
    webhook_url: Optional[str] = None

    @classmethod
    def from_env(
        cls,
        access_token: Optional[str] = None,
        uri_base: Optional[str] = None,
        request_timeout: Optional[float] = None,
        webhook_url: Optional[str] = None,
    ) -> "Configuration":
        """Explicit arguments win, then environment variables, then defaults."""
        return cls(
            access_token=access_token
            if access_token
            else os.environ.get(ACCESS_TOKEN_ENV_VAR, None),
            uri_base=uri_base
            if uri_base
            else os.environ.get(URI_BASE_ENV_VAR, DEFAULT_URI_BASE),
            request_timeout=request_timeout
            if request_timeout is not None
            else DEFAULT_REQUEST_TIMEOUT_SEC,
            webhook_url=webhook_url
            if webhook_url
            else os.environ.get(WEBHOOK_URL_ENV_VAR, None),
        )
