import logging
from typing import Optional
from urllib.parse import quote

import httpx

from ..config import Settings
from ..domain.exceptions import FormatError, RemoteError
from ..domain.remote_content import Listing, RemoteContent, RemoteEntry, SingleFile

logger = logging.getLogger(__name__)

GITHUB_API_URL = "https://api.github.com"
REPOSITORY_OWNER = "alexkaratarakis"
REPOSITORY_NAME = "gitattributes"
USER_AGENT = "addgitattributes-cli"


class GitHubContentClient:
    """
    Fetches directory listings and file contents from the gitattributes template repository
    through the GitHub contents API.
    GitHub contents API を通じて、gitattributes テンプレートリポジトリから
    ディレクトリ一覧とファイル内容を取得します。

    Responses are normalized into Listing or SingleFile so callers never inspect raw JSON.
    レスポンスは Listing または SingleFile に正規化されるため、呼び出し側が生の JSON を調べる必要はありません。
    """

    def __init__(self, settings: Settings, transport: Optional[httpx.BaseTransport] = None):
        """
        Initializes the client.
        クライアントを初期化します。

        Args:
            settings (Settings): Provides the token, proxy and request timeout.
                                 トークン、プロキシ、リクエストタイムアウトを提供します。
            transport (Optional[httpx.BaseTransport]): Custom transport, mainly for tests.
                                                       カスタムトランスポート（主にテスト用）。
        """
        headers = {
            "User-Agent": USER_AGENT,
            "Accept": "application/vnd.github+json",
        }
        if settings.token:
            headers["Authorization"] = f"Bearer {settings.token}"

        client_kwargs = {
            "base_url": GITHUB_API_URL,
            "headers": headers,
            "timeout": settings.request_timeout,
        }
        if transport is not None:
            client_kwargs["transport"] = transport
        else:
            proxy = settings.resolve_proxy()
            if proxy:
                client_kwargs["proxy"] = proxy
        self._client = httpx.Client(**client_kwargs)

    def get_content(self, path: str = "") -> RemoteContent:
        """
        Fetches the remote entry at path.
        path にあるリモートエントリを取得します。

        Args:
            path (str): Path inside the repository. "" is the repository root.
                        リポジトリ内のパス。"" はリポジトリのルート。

        Returns:
            RemoteContent: Listing for directories, SingleFile for anything else.
                           ディレクトリの場合は Listing、それ以外は SingleFile。

        Raises:
            RemoteError: On HTTP error status or transport failure.
                         HTTP エラーステータスまたは通信障害の場合。
            FormatError: If the response body is not a JSON list or object.
                         レスポンス本文が JSON のリストまたはオブジェクトでない場合。
        """
        url = f"/repos/{REPOSITORY_OWNER}/{REPOSITORY_NAME}/contents"
        path = path.strip("/")
        if path:
            url = f"{url}/{quote(path)}"

        logger.debug(f"GET {url}")
        try:
            response = self._client.get(url)
        except httpx.HTTPError as e:
            raise RemoteError(None, str(e)) from e

        remaining = response.headers.get("x-ratelimit-remaining")
        if remaining is not None:
            logger.debug(f"GitHub API ratelimit remaining: {remaining}")

        if response.is_error:
            raise RemoteError(response.status_code, _error_message(response))

        try:
            data = response.json()
        except ValueError as e:
            raise FormatError(f"Response for '{path}' is not valid JSON: {e}") from e

        if isinstance(data, list):
            return Listing(entries=tuple(RemoteEntry.from_json(item) for item in data if isinstance(item, dict)))
        if isinstance(data, dict):
            return SingleFile(entry=RemoteEntry.from_json(data))
        raise FormatError(f"Unexpected response type for '{path}': {type(data).__name__}")

    def close(self):
        self._client.close()


def _error_message(response: httpx.Response) -> str:
    """Extracts the API error message, falling back to the reason phrase."""
    try:
        data = response.json()
    except ValueError:
        data = None
    if isinstance(data, dict) and data.get("message"):
        return str(data["message"])
    return response.reason_phrase or f"HTTP {response.status_code}"
