import logging
from typing import Sequence

from ..domain.exceptions import FormatError
from ..domain.file_descriptor import FileDescriptor, TEMPLATE_SUFFIX
from ..domain.remote_content import Listing, RemoteEntry
from ..gateway.cache_storage import ExpiringCache
from ..gateway.github_client import GitHubContentClient

logger = logging.getLogger(__name__)

CACHE_KEY_PREFIX = "gitattributes/"


class CatalogFetcher:
    """
    Use case class that lists the .gitattributes templates available remotely.
    Results are cached per remote path for the lifetime of the cache entry.
    リモートで利用可能な .gitattributes テンプレートを一覧表示するユースケースクラス。
    結果はリモートパスごとにキャッシュされます。
    """

    def __init__(self, client: GitHubContentClient, cache: ExpiringCache):
        self.client = client
        self.cache = cache

    def list_files(self, remote_path: str = "") -> Sequence[FileDescriptor]:
        """
        Returns the templates found at remote_path, in remote listing order.
        remote_path にあるテンプレートをリモートの一覧順で返します。

        Args:
            remote_path (str): Directory inside the template repository. "" is the root.
                               テンプレートリポジトリ内のディレクトリ。"" はルート。

        Returns:
            Sequence[FileDescriptor]: The templates. Served from the cache when valid.
                                      テンプレート。有効な場合はキャッシュから返されます。

        Raises:
            RemoteError: If the GitHub API call fails.
                         GitHub API の呼び出しが失敗した場合。
            FormatError: If remote_path does not resolve to a directory listing.
                         remote_path がディレクトリ一覧に解決されない場合。
        """
        remote_path = remote_path.strip("/")
        cache_key = CACHE_KEY_PREFIX + remote_path
        cached = self.cache.get(cache_key)
        if cached is not None:
            logger.debug(f"Cache hit for '{cache_key}'")
            return cached

        logger.debug(f"Cache miss for '{cache_key}', fetching from GitHub")
        content = self.client.get_content(remote_path)
        if not isinstance(content, Listing):
            raise FormatError(f"Expected a directory listing for '{remote_path}', got a single entry.")

        files = tuple(
            _to_descriptor(entry) for entry in content.entries if _is_template(entry)
        )
        self.cache.put(cache_key, files)
        logger.info(f"Found {len(files)} template(s) at '{remote_path or '/'}'")
        return files


def _is_template(entry: RemoteEntry) -> bool:
    return entry.is_file and entry.name != TEMPLATE_SUFFIX and entry.name.endswith(TEMPLATE_SUFFIX)


def _to_descriptor(entry: RemoteEntry) -> FileDescriptor:
    return FileDescriptor(
        label=entry.name[:-len(TEMPLATE_SUFFIX)],
        description=entry.path,
        url=entry.path,
    )
