import pytest

import replicate_client
from tests.helpers import TEST_ACCESS_TOKEN, TEST_MODEL_PAYLOAD, TEST_URI_BASE


@pytest.fixture()
def CLIENT():
    # Built from an explicit configuration so REPLICATE_* variables of the
    # developer's shell never leak into the tests.
    return replicate_client.ReplicateClient(
        configuration=replicate_client.Configuration(
            access_token=TEST_ACCESS_TOKEN,
            uri_base=TEST_URI_BASE,
            request_timeout=30,
        )
    )


@pytest.fixture()
def model(CLIENT):
    return replicate_client.Model.from_json(TEST_MODEL_PAYLOAD, client=CLIENT)
