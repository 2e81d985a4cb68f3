import pytest

from testhttp.bdd import *  # noqa: F401,F403
from testhttp.infrastructure.settings.env_settings import Settings
from tests.fake_round_trip import FakeRoundTrip

JSON = {"Content-Type": "application/json"}


@pytest.fixture
def http_settings():
    return Settings(base_url="http://api.test")


@pytest.fixture
def http_round_trip():
    return (
        FakeRoundTrip()
        .route("GET", "http://api.test/users", status=200, body=b'[{"id":1}]', headers=JSON)
        .route("POST", "http://api.test/users", status=201, body=b'{"id":2}', headers=JSON)
        .route("PUT", "http://api.test/users/2", status=200, body=b"renamed")
        .route("DELETE", "http://api.test/users/2", status=204)
    )
