from typing import Optional

from ._metadata import __version__ as replicate_client_version


class ReplicateAPIError(Exception):
    """Raised when the API answers with a non-2xx status code.

    Attributes:
        endpoint: Full URL of the failed request.
        status_code: HTTP status code of the response.
        body: Raw response body, as returned by the server.
    """

    def __init__(self, endpoint, requests_response):
        self.endpoint = endpoint
        self.status_code = requests_response.status_code
        self.body = requests_response.text
        self.message = f"Request to {endpoint} received {requests_response.status_code}: {requests_response.reason}."
        if self.body:
            self.message += f"\nThe detailed error is:\n{self.body}"
        self.message += f"\n(replicate-client version {replicate_client_version})"
        super().__init__(self.message)


class UnauthorizedError(ReplicateAPIError):
    pass


class ForbiddenError(ReplicateAPIError):
    pass


class NotFoundError(ReplicateAPIError):
    pass


class ServerError(ReplicateAPIError):
    """Any non-2xx status that has no dedicated error class."""


STATUS_CODE_TO_ERROR = {
    401: UnauthorizedError,
    403: ForbiddenError,
    404: NotFoundError,
}


def error_for_status(status_code: int):
    return STATUS_CODE_TO_ERROR.get(status_code, ServerError)


class ConfigurationError(Exception):
    def __init__(self, message="The client configuration is invalid"):
        self.message = message
        super().__init__(self.message)


class DecodingError(Exception):
    """Raised when a response payload does not match the expected schema."""

    def __init__(self, resource: str, reason, payload: Optional[dict] = None):
        self.resource = resource
        self.payload = payload
        self.message = f"Could not decode {resource} from response: {reason}"
        super().__init__(self.message)
