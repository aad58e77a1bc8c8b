from pathlib import Path
from typing import List, Optional, Sequence, Union
import importlib.metadata
import logging

from .config import Settings
from .domain.command_outcome import CommandOutcome
from .domain.exceptions import CancellationError
from .domain.file_descriptor import FileDescriptor
from .domain.merge_operation import MergeOperation, OperationType
from .gateway.cache_storage import ExpiringCache
from .gateway.file_system_accessor import FileSystemAccessor
from .gateway.github_client import GitHubContentClient
from .service.picker import Picker
from .usecase.catalog_fetcher import CatalogFetcher
from .usecase.merge_engine import MergeEngine

logger = logging.getLogger(__name__)

GITATTRIBUTES_FILE_NAME = ".gitattributes"

try:
    __version__ = importlib.metadata.version("addgitattributes")
except importlib.metadata.PackageNotFoundError:
    __version__ = "0.0.0-dev"


def sort_by_label(files: Sequence[FileDescriptor]) -> List[FileDescriptor]:
    """Sorts templates by label, ignoring case, for presentation."""
    return sorted(files, key=lambda f: f.label.casefold())


class GitAttributes:
    """
    The main facade class for addgitattributes.
    Wires the settings, GitHub client, catalog cache and merge engine together for one project root.
    addgitattributes のメインファサードクラス。
    1 つのプロジェクトルートに対して、設定、GitHub クライアント、カタログキャッシュ、マージエンジンを結び付けます。
    """

    def __init__(
        self,
        project_root: Union[str, Path],
        settings: Optional[Settings] = None,
        client: Optional[GitHubContentClient] = None,
        file_accessor: Optional[FileSystemAccessor] = None,
    ):
        """
        Initializes the GitAttributes facade.
        GitAttributes ファサードを初期化します。

        Args:
            project_root (Path | str): The project whose .gitattributes file is written.
                                       .gitattributes ファイルを書き込むプロジェクト。
            settings (Optional[Settings]): Configuration. Read from the environment if None.
                                           設定。None の場合は環境から読み込みます。
            client (Optional[GitHubContentClient]): Content fetcher. Built from settings if None.
                                                    コンテンツ取得クライアント。None の場合は設定から構築します。
            file_accessor (Optional[FileSystemAccessor]): File system access.
                                                          ファイルシステムアクセス。
        """
        self._project_root: Path = Path(project_root).resolve()
        self._settings = settings or Settings()
        self._client = client or GitHubContentClient(self._settings)
        self._file_accessor = file_accessor or FileSystemAccessor()
        self._cache = ExpiringCache(self._settings.cache_expiration_interval)

        self.catalog_fetcher = CatalogFetcher(self._client, self._cache)
        self.merge_engine = MergeEngine(self._client, self._file_accessor)

        logger.debug(f"addgitattributes v{__version__} initialized for project root: {self._project_root}")

    @property
    def project_root(self) -> Path:
        return self._project_root

    @property
    def target_path(self) -> Path:
        """The .gitattributes file in the project root."""
        return self._project_root / GITATTRIBUTES_FILE_NAME

    def list_templates(self, remote_path: str = "") -> Sequence[FileDescriptor]:
        """
        Lists the templates available at remote_path, in remote order.
        remote_path で利用可能なテンプレートをリモートの順序で一覧表示します。
        """
        return self.catalog_fetcher.list_files(remote_path)

    def build_operation(self, selected: FileDescriptor, picker: Picker) -> MergeOperation:
        """
        Decides how the selected template is written.
        An existing target asks the picker for the mode; a missing one is always overwritten.
        選択されたテンプレートの書き込み方法を決定します。
        ターゲットが存在する場合はピッカーにモードを問い合わせ、存在しない場合は常に上書きします。

        Raises:
            CancellationError: If the user dismisses the mode prompt.
                               ユーザーがモードの選択をキャンセルした場合。
        """
        target = self.target_path
        if not self._file_accessor.exists(target):
            return MergeOperation(mode=OperationType.OVERWRITE, target_path=target, selected_file=selected)

        mode = picker.pick_mode()
        if mode is None:
            raise CancellationError("No operation selected.")
        return MergeOperation(mode=mode, target_path=target, selected_file=selected)

    def add_template(self, picker: Picker, remote_path: str = "") -> CommandOutcome:
        """
        Runs the whole "add" command: list, pick, choose a mode, download and merge.
        "add" コマンド全体を実行します: 一覧取得、選択、モード決定、ダウンロード、マージ。

        Args:
            picker (Picker): Asks the user for the template and the mode.
                             ユーザーにテンプレートとモードを問い合わせます。
            remote_path (str): Remote directory to list templates from.
                               テンプレートを一覧表示するリモートディレクトリ。

        Returns:
            CommandOutcome: COMPLETED with the applied operation, or CANCELLED.
                            適用された操作を含む COMPLETED、または CANCELLED。

        Raises:
            GitAttributesError: Any failure other than cancellation.
                                キャンセル以外のすべての失敗。
            OSError: File system errors are propagated as-is.
                     ファイルシステムエラーはそのまま伝播されます。
        """
        try:
            files = sort_by_label(self.list_templates(remote_path))
            selected = picker.pick_template(files)
            if selected is None:
                raise CancellationError("No template selected.")
            operation = self.build_operation(selected, picker)
            return CommandOutcome.completed(self.merge_engine.apply(operation))
        except CancellationError as e:
            logger.debug(f"Command cancelled: {e}")
            return CommandOutcome.cancelled()

    def close(self):
        self._client.close()

    def __enter__(self) -> "GitAttributes":
        return self

    def __exit__(self, exc_type, exc_value, traceback):
        self.close()
