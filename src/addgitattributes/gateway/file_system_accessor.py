import logging
import os
from pathlib import Path
from typing import BinaryIO

logger = logging.getLogger(__name__)


class FileSystemAccessor:
    """
    Provides the file operations needed to write and merge .gitattributes files.
    .gitattributes ファイルの書き込みとマージに必要なファイル操作を提供します。
    """

    def open_for_write(self, file_path: Path | str, append: bool = False) -> BinaryIO:
        """
        Opens a file for binary writing, creating it if needed.
        バイナリ書き込み用にファイルを開きます。必要に応じて作成します。

        Args:
            file_path (Path | str): The file to open.
                                    開くファイル。
            append (bool): Append to the file instead of truncating it.
                           切り詰めずにファイルへ追記します。

        Returns:
            BinaryIO: The open file object. The caller closes it.
                      開いたファイルオブジェクト。呼び出し側が閉じます。
        """
        return open(file_path, "ab" if append else "wb")

    def read_bytes(self, file_path: Path | str) -> bytes:
        """
        Reads the whole content of a file.
        ファイルの内容全体を読み込みます。

        Raises:
            FileNotFoundError: If the file does not exist.
                               ファイルが存在しない場合。
        """
        return Path(file_path).read_bytes()

    def exists(self, file_path: Path | str) -> bool:
        return Path(file_path).exists()

    def delete(self, file_path: Path | str):
        Path(file_path).unlink()
        logger.debug(f"Deleted {file_path}")

    def replace(self, source: Path | str, destination: Path | str):
        """
        Moves source over destination in a single step.
        source を destination に一度の操作で置き換えます。
        """
        os.replace(source, destination)
        logger.debug(f"Replaced {destination} with {source}")
