import base64
from typing import Any, Dict, List, Optional, Tuple

import httpx
import pytest

from addgitattributes.config import Settings
from addgitattributes.gateway.github_client import GitHubContentClient

CONTENTS_URL = "/repos/alexkaratarakis/gitattributes/contents"


def listing_item(name: str, type_: str = "file", path: Optional[str] = None) -> Dict[str, Any]:
    return {"name": name, "path": path or name, "type": type_}


def file_item(name: str, content: bytes, path: Optional[str] = None) -> Dict[str, Any]:
    return {
        "name": name,
        "path": path or name,
        "type": "file",
        "content": base64.encodebytes(content).decode("ascii"),
        "encoding": "base64",
    }


class FakeGitHub:
    """
    Minimal stand-in for the GitHub contents API, served through httpx.MockTransport.
    httpx.MockTransport を通じて提供される GitHub contents API の最小限の代替。
    """

    def __init__(self):
        self.routes: Dict[str, Tuple[int, Any]] = {}
        self.requests: List[httpx.Request] = []

    def add(self, path: str, body: Any, status: int = 200):
        url = CONTENTS_URL + (f"/{path}" if path else "")
        self.routes[url] = (status, body)

    def handler(self, request: httpx.Request) -> httpx.Response:
        self.requests.append(request)
        status, body = self.routes.get(request.url.path, (404, {"message": "Not Found"}))
        return httpx.Response(status, json=body, headers={"x-ratelimit-remaining": "59"})

    def client(self, settings: Settings) -> GitHubContentClient:
        return GitHubContentClient(settings, transport=httpx.MockTransport(self.handler))


@pytest.fixture
def settings() -> Settings:
    return Settings(cache_expiration_interval=86400, token=None, proxy=None)


@pytest.fixture
def fake_github() -> FakeGitHub:
    return FakeGitHub()
