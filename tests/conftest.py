"""Shared fixtures: a fake Network as Code API behind httpx.MockTransport."""

import json
from collections.abc import Callable
from typing import Any

import httpx
import pytest

from network_as_code import NetworkAsCodeClient


class FakeApi:
    """Routes requests to canned responses and records what was sent.

    Responses registered for the same route are served in order; the last
    one is repeated. Unregistered routes fail the test.
    """

    def __init__(self):
        self._routes: dict[tuple[str, str], list[tuple[int, bytes]]] = {}
        self.requests: list[httpx.Request] = []

    def add(
        self,
        method: str,
        url: str,
        json_body: Any = None,
        status: int = 200,
        content: bytes | None = None,
    ) -> None:
        if content is None:
            content = b"" if json_body is None else json.dumps(json_body).encode()
        self._routes.setdefault((method, url), []).append((status, content))

    def handler(self, request: httpx.Request) -> httpx.Response:
        self.requests.append(request)
        url = f"{request.url.scheme}://{request.url.host}{request.url.path}"
        queue = self._routes.get((request.method, url))
        if not queue:
            msg = f"Unexpected request {request.method} {request.url}"
            raise AssertionError(msg)
        status, content = queue.pop(0) if len(queue) > 1 else queue[0]
        return httpx.Response(
            status,
            content=content,
            headers={"content-type": "application/json"},
        )

    def body(self, index: int = -1) -> Any:
        """Decoded JSON body of a recorded request."""
        return json.loads(self.requests[index].content)


@pytest.fixture
def fake_api() -> FakeApi:
    return FakeApi()


@pytest.fixture
def client(fake_api: FakeApi) -> NetworkAsCodeClient:
    """Client whose every service is served by ``fake_api``."""
    return NetworkAsCodeClient(
        token="TEST_TOKEN",
        transport=httpx.MockTransport(fake_api.handler),
    )


@pytest.fixture
def slice_json() -> Callable[..., dict[str, Any]]:
    """Factory for slicing service slice representations."""

    def make(
        state: str = "PENDING",
        name: str = "sdk-integration-slice-2",
        **slice_fields: Any,
    ) -> dict[str, Any]:
        return {
            "slice": {
                "name": name,
                "networkIdentifier": {"mcc": "236", "mnc": "30"},
                "sliceInfo": {"service_type": "eMBB", "differentiator": "444444"},
                "notificationUrl": "https://notify.me/here",
                **slice_fields,
            },
            "state": state,
            "csi_id": "csi-385",
        }

    return make
