from pathlib import Path
import logging
from typing import Optional

from ..gateway.file_system_accessor import FileSystemAccessor

logger = logging.getLogger(__name__)

MARKER = b"* text=auto"
DUPLICATE_COMMENT = b"# Commented because this line appears before in the file."
NEW_FILE_SUFFIX = ".new"


class Deduplicator:
    """
    Comments out repeated "* text=auto" lines in a .gitattributes file.
    The first occurrence is kept; every later one is replaced by an explanatory
    comment followed by the original line prefixed with "# ".
    .gitattributes ファイル内で繰り返される "* text=auto" 行をコメントアウトします。
    最初の出現は保持され、以降の出現は説明コメントと "# " を前置した元の行に置き換えられます。
    """

    def __init__(self, file_accessor: Optional[FileSystemAccessor] = None):
        self.file_accessor = file_accessor or FileSystemAccessor()

    def output_path(self, path: Path) -> Path:
        """The sibling file deduplicate() writes to."""
        return path.with_name(path.name + NEW_FILE_SUFFIX)

    def deduplicate(self, path: Path) -> Path:
        """
        Writes the deduplicated content of path to a sibling file and returns its path.
        Replacing the original with the new file is left to the caller.
        path の重複除去済み内容を隣接ファイルに書き込み、そのパスを返します。
        元のファイルの置き換えは呼び出し側の責任です。

        Args:
            path (Path): The file to deduplicate.
                         重複除去するファイル。

        Returns:
            Path: The path of the deduplicated copy (path + ".new").
                  重複除去済みコピーのパス（path + ".new"）。
        """
        new_path = self.output_path(path)
        content = self.file_accessor.read_bytes(path)

        found = False
        duplicates = 0
        output_lines = []
        for line in content.split(b"\n"):
            if MARKER not in line:
                output_lines.append(line)
            elif not found:
                output_lines.append(line)
                found = True
            else:
                output_lines.append(DUPLICATE_COMMENT)
                output_lines.append(b"# " + line)
                duplicates += 1

        with self.file_accessor.open_for_write(new_path) as f:
            for i, line in enumerate(output_lines):
                f.write(line)
                if i < len(output_lines) - 1:
                    f.write(b"\n")

        logger.debug(f"Commented out {duplicates} duplicate marker line(s) in {path}")
        return new_path
