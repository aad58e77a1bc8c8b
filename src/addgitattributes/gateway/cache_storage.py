import logging
import time
from typing import Callable, Dict, Optional, Sequence

from ..domain.cache_entry import CacheEntry
from ..domain.file_descriptor import FileDescriptor

logger = logging.getLogger(__name__)


class ExpiringCache:
    """
    Simple in-memory key/value store whose entries expire after a fixed interval.
    Expired entries are not evicted; they read as missing until overwritten.
    一定時間で期限切れになるシンプルなメモリ内キー/バリューストア。
    期限切れのエントリは削除されず、上書きされるまで存在しないものとして扱われます。
    """

    def __init__(self, expiration_interval: float, clock: Callable[[], float] = time.time):
        """
        Initializes the ExpiringCache.
        ExpiringCache を初期化します。

        Args:
            expiration_interval (float): Seconds an entry stays valid after it is stored.
                                         エントリが格納されてから有効な秒数。
            clock (Callable[[], float]): Returns the current POSIX time. Defaults to time.time.
                                         現在の POSIX 時刻を返す関数。デフォルトは time.time。
        """
        self._store: Dict[str, CacheEntry] = {}
        self._expiration_interval = expiration_interval
        self._clock = clock

    @property
    def expiration_interval(self) -> float:
        return self._expiration_interval

    def put(self, key: str, value: Sequence[FileDescriptor]):
        """
        Stores value under key, replacing any previous entry.
        key に value を格納し、既存のエントリを置き換えます。
        """
        now = self._clock()
        previous = self._store.get(key)
        # Never move stored_at backwards for the same key
        if previous is not None and previous.stored_at > now:
            now = previous.stored_at
        self._store[key] = CacheEntry(key=key, value=value, stored_at=now)
        logger.debug(f"Cached {len(value)} item(s) under '{key}'")

    def get_entry(self, key: str) -> Optional[CacheEntry]:
        """
        Returns the entry for key, or None if it is missing or expired.
        key のエントリを返します。存在しないか期限切れの場合は None。
        """
        entry = self._store.get(key)
        if entry is None or entry.is_expired(self._expiration_interval, self._clock()):
            return None
        return entry

    def get(self, key: str) -> Optional[Sequence[FileDescriptor]]:
        """
        Returns the cached value for key, or None if it is missing or expired.
        key のキャッシュ値を返します。存在しないか期限切れの場合は None。
        """
        entry = self.get_entry(key)
        return entry.value if entry is not None else None

    def __len__(self) -> int:
        # Includes expired entries, which are kept until overwritten
        return len(self._store)
