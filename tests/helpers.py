import json

import requests
from fastapi.testclient import TestClient


def make_response(status_code, body=None, url="http://testserver/data"):
    response = requests.Response()
    response.status_code = status_code
    response.url = url
    if body is not None:
        response._content = json.dumps(body).encode("utf-8")
        response.headers["Content-Type"] = "application/json"
    else:
        response._content = b""
    return response


class TestClientSession:
    """Adapts a FastAPI TestClient to the ``requests.Session.request`` API."""

    __test__ = False

    def __init__(self, client: TestClient):
        self.client = client

    def request(self, method, url, timeout=None, **kwargs):
        r = self.client.request(method, url, **kwargs)
        response = requests.Response()
        response.status_code = r.status_code
        response._content = r.content
        response.headers.update(r.headers)
        response.url = url
        return response
