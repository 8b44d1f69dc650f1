import pytest
import requests

from pynewebpaylogistics import NewebPayLogistics

MERCHANT_ID = "MS1234567"
HASH_KEY = "01234567890123456789012345678901"
HASH_IV = "0123456789012345"


def make_response(status_code: int, text: str) -> requests.Response:
    response = requests.Response()
    response.status_code = status_code
    response._content = text.encode("utf-8")
    response.encoding = "utf-8"
    return response


class FakeHttpClient:
    def __init__(self, response=None, error=None):
        self.response = response
        self.error = error
        self.calls = []

    def post(self, url, data):
        self.calls.append((url, data))
        if self.error is not None:
            raise self.error
        return self.response


@pytest.fixture
def fake_http():
    return FakeHttpClient(make_response(200, '{"Status":"SUCCESS","Message":"ok"}'))


@pytest.fixture
def client(fake_http):
    return NewebPayLogistics(MERCHANT_ID, HASH_KEY, HASH_IV, http_client=fake_http)
