from dataclasses import dataclass
from typing import Sequence

from .file_descriptor import FileDescriptor


@dataclass(frozen=True)
class CacheEntry:
    """
    A value stored in the expiring cache together with the time it was stored.
    保存時刻とともに期限付きキャッシュに格納される値。

    Attributes:
        key (str): The cache key (e.g. "gitattributes/<remote path>").
                   キャッシュキー（例: "gitattributes/<リモートパス>"）。
        value (Sequence[FileDescriptor]): The cached catalog.
                                            キャッシュされたカタログ。
        stored_at (float): POSIX timestamp of the put.
                           格納時の POSIX タイムスタンプ。
    """
    key: str
    value: Sequence[FileDescriptor]
    stored_at: float

    def is_expired(self, expiration_interval: float, now: float) -> bool:
        """Returns True once the entry is at least expiration_interval seconds old."""
        return now - self.stored_at >= expiration_interval
