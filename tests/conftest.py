from __future__ import annotations

import json
from collections.abc import Callable
from pathlib import Path
from typing import Any

import httpx
import pytest


class FakeServer:
    """Records requests and replies with a canned response."""

    def __init__(self, handler: Callable[[httpx.Request], httpx.Response]) -> None:
        self.requests: list[httpx.Request] = []
        self._handler = handler

    def __call__(self, request: httpx.Request) -> httpx.Response:
        self.requests.append(request)
        return self._handler(request)

    @property
    def transport(self) -> httpx.MockTransport:
        return httpx.MockTransport(self)


@pytest.fixture
def reply() -> Callable[..., FakeServer]:
    def make(
        payload: Any = None,
        *,
        status_code: int = 200,
        content: bytes | None = None,
    ) -> FakeServer:
        def handler(_: httpx.Request) -> httpx.Response:
            if content is not None:
                return httpx.Response(status_code, content=content)
            return httpx.Response(status_code, json=payload)

        return FakeServer(handler)

    return make


@pytest.fixture
def token_file(tmp_path: Path) -> Path:
    path = tmp_path / "auth.json"
    path.write_text(json.dumps({"meshery-provider": "Meshery", "token": "secret"}))
    return path
