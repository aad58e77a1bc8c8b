import base64
import logging
from pathlib import Path
from typing import Callable, Optional

from ..domain.exceptions import ContentTypeError
from ..domain.merge_operation import MergeOperation, OperationType
from ..domain.remote_content import RemoteContent, SingleFile
from ..gateway.file_system_accessor import FileSystemAccessor
from ..gateway.github_client import GitHubContentClient
from ..service.deduplicator import Deduplicator

logger = logging.getLogger(__name__)

SEPARATOR = b"\n"

ContentFetcher = Callable[[str], RemoteContent]


class MergeEngine:
    """
    Use case class that writes a chosen template to a local .gitattributes file.
    選択されたテンプレートをローカルの .gitattributes ファイルに書き込むユースケースクラス。

    In OVERWRITE mode the target is truncated (or created) and removed again if anything fails.
    In APPEND mode a blank line separates the existing content from the template, and the merged
    file is deduplicated afterwards. The existing file is never removed in APPEND mode.
    OVERWRITE モードではターゲットを切り詰め（または作成し）、失敗した場合は削除します。
    APPEND モードでは既存の内容とテンプレートの間に空行を入れ、マージ後に重複を除去します。
    APPEND モードでは既存ファイルは決して削除されません。
    """

    def __init__(
        self,
        client: GitHubContentClient,
        file_accessor: Optional[FileSystemAccessor] = None,
        deduplicator: Optional[Deduplicator] = None,
    ):
        self.client = client
        self.file_accessor = file_accessor or FileSystemAccessor()
        self.deduplicator = deduplicator or Deduplicator(self.file_accessor)

    def apply(self, operation: MergeOperation, fetch_content: Optional[ContentFetcher] = None) -> MergeOperation:
        """
        Downloads operation.selected_file and writes it to operation.target_path.
        operation.selected_file をダウンロードし、operation.target_path に書き込みます。

        Args:
            operation (MergeOperation): What to write, where and how.
                                        何を、どこに、どのように書き込むか。
            fetch_content (Optional[ContentFetcher]): Fetches a remote path.
                                                      Defaults to the GitHub client.
                                                      リモートパスを取得する関数。デフォルトは GitHub クライアント。

        Returns:
            MergeOperation: The same operation, on success.
                            成功時は同じ操作。

        Raises:
            RemoteError: If fetching the template fails.
                         テンプレートの取得に失敗した場合。
            ContentTypeError: If the fetched entry is not a file with content.
                              取得したエントリが内容を持つファイルでない場合。
            OSError: File system errors are propagated as-is.
                     ファイルシステムエラーはそのまま伝播されます。
        """
        fetch = fetch_content or self.client.get_content
        target = Path(operation.target_path)
        append = operation.mode is OperationType.APPEND

        f = self.file_accessor.open_for_write(target, append=append)
        try:
            try:
                if append:
                    # Written before the fetch; stays behind if the fetch fails
                    f.write(SEPARATOR)
                data = _decode(fetch(operation.selected_file.url), operation.selected_file.url)
                f.write(data)
            finally:
                f.close()
        except BaseException:
            if not append:
                self._discard(target)
            raise

        if append:
            new_path = self.deduplicator.output_path(target)
            try:
                self.deduplicator.deduplicate(target)
                self.file_accessor.replace(new_path, target)
            except BaseException:
                self._discard(new_path)
                raise

        logger.info(f"{operation.mode.value.capitalize()} {operation.selected_file.description} -> {target}")
        return operation

    def _discard(self, path: Path):
        """Removes a file left behind by a failed write, without masking the original error."""
        try:
            if self.file_accessor.exists(path):
                self.file_accessor.delete(path)
        except OSError as e:
            logger.warning(f"Could not remove {path} after a failed write: {e}")


def _decode(content: RemoteContent, url: str) -> bytes:
    if not isinstance(content, SingleFile) or not content.entry.is_file or not content.entry.content:
        raise ContentTypeError(f"'{url}' is not a file with content.")
    entry = content.entry
    if entry.encoding == "base64":
        return base64.b64decode(entry.content)
    return entry.content.encode("utf-8")
