from dataclasses import dataclass
from enum import Enum
from pathlib import Path

from .file_descriptor import FileDescriptor


class OperationType(Enum):
    """How the chosen template is written to the target file."""
    APPEND = "append"
    OVERWRITE = "overwrite"


@dataclass(frozen=True)
class MergeOperation:
    """
    Describes a single write of a template to a local .gitattributes file.
    テンプレートをローカルの .gitattributes ファイルに書き込む 1 回の操作を表します。

    Attributes:
        mode (OperationType): Append to or overwrite the target.
                              ターゲットへ追記するか上書きするか。
        target_path (Path): The local file to write.
                            書き込むローカルファイル。
        selected_file (FileDescriptor): The template chosen by the user.
                                        ユーザーが選択したテンプレート。
    """
    mode: OperationType
    target_path: Path
    selected_file: FileDescriptor
