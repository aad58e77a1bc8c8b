from dataclasses import dataclass
from typing import Any, Dict, Optional, Tuple, Union


@dataclass(frozen=True)
class RemoteEntry:
    """
    The subset of a GitHub contents API item that the application relies on.
    アプリケーションが依存する GitHub contents API 項目のサブセット。
    """
    type: str
    name: str
    path: str
    content: Optional[str] = None
    encoding: Optional[str] = None

    @classmethod
    def from_json(cls, data: Dict[str, Any]) -> "RemoteEntry":
        return cls(
            type=str(data.get("type", "")),
            name=str(data.get("name", "")),
            path=str(data.get("path", "")),
            content=data.get("content"),
            encoding=data.get("encoding"),
        )

    @property
    def is_file(self) -> bool:
        return self.type == "file"


@dataclass(frozen=True)
class Listing:
    """A directory listing returned for a remote path."""
    entries: Tuple[RemoteEntry, ...]


@dataclass(frozen=True)
class SingleFile:
    """A single entry returned for a remote path (usually a file with content)."""
    entry: RemoteEntry


RemoteContent = Union[Listing, SingleFile]
