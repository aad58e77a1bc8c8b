import pytest
from pathlib import Path

from addgitattributes.gateway.file_system_accessor import FileSystemAccessor


@pytest.fixture
def accessor() -> FileSystemAccessor:
    return FileSystemAccessor()

# --- Tests for open_for_write --- #

def test_open_for_write_creates_and_truncates(tmp_path: Path, accessor: FileSystemAccessor):
    """
    Tests that write mode creates a missing file and truncates an existing one.
    書き込みモードが存在しないファイルを作成し、既存のファイルを切り詰めることをテストします。
    """
    target = tmp_path / ".gitattributes"
    with accessor.open_for_write(target) as f:
        f.write(b"first")
    with accessor.open_for_write(target) as f:
        f.write(b"second")
    assert target.read_bytes() == b"second"


def test_open_for_write_append(tmp_path: Path, accessor: FileSystemAccessor):
    target = tmp_path / ".gitattributes"
    target.write_bytes(b"a\n")
    with accessor.open_for_write(target, append=True) as f:
        f.write(b"b\n")
    assert target.read_bytes() == b"a\nb\n"

# --- Tests for read_bytes / exists / delete / replace --- #

def test_read_bytes_not_found(tmp_path: Path, accessor: FileSystemAccessor):
    with pytest.raises(FileNotFoundError):
        accessor.read_bytes(tmp_path / "missing")


def test_exists_and_delete(tmp_path: Path, accessor: FileSystemAccessor):
    target = tmp_path / ".gitattributes"
    assert not accessor.exists(target)
    target.touch()
    assert accessor.exists(target)
    accessor.delete(target)
    assert not accessor.exists(target)


def test_replace_moves_source_over_destination(tmp_path: Path, accessor: FileSystemAccessor):
    source = tmp_path / ".gitattributes.new"
    destination = tmp_path / ".gitattributes"
    source.write_bytes(b"new")
    destination.write_bytes(b"old")

    accessor.replace(source, destination)

    assert destination.read_bytes() == b"new"
    assert not source.exists()
