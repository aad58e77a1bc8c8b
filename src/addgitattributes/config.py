import logging
import os
from typing import Optional

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

logger = logging.getLogger(__name__)

DEFAULT_CACHE_EXPIRATION_INTERVAL = 86400
DEFAULT_REQUEST_TIMEOUT = 100.0


class Settings(BaseSettings):
    """
    Runtime configuration, read from GITATTRIBUTES_* environment variables or a .env file.
    GITATTRIBUTES_* 環境変数または .env ファイルから読み込まれる実行時設定。
    """

    # Seconds the template catalog stays cached
    cache_expiration_interval: int = Field(default=DEFAULT_CACHE_EXPIRATION_INTERVAL, ge=0)

    # GitHub API access
    token: Optional[str] = None
    request_timeout: float = Field(default=DEFAULT_REQUEST_TIMEOUT, gt=0)

    # Outbound proxy; falls back to HTTPS_PROXY / HTTP_PROXY
    proxy: Optional[str] = None

    model_config = SettingsConfigDict(env_prefix="GITATTRIBUTES_", env_file=".env", extra="ignore")

    @field_validator("token", "proxy")
    @classmethod
    def _blank_to_none(cls, value: Optional[str]) -> Optional[str]:
        if value is not None and not value.strip():
            return None
        return value

    def resolve_proxy(self) -> Optional[str]:
        """
        Returns the proxy URL to use: the setting first, then HTTPS_PROXY, then HTTP_PROXY.
        使用するプロキシ URL を返します: 設定値、HTTPS_PROXY、HTTP_PROXY の順。
        """
        proxy = self.proxy or os.environ.get("HTTPS_PROXY") or os.environ.get("HTTP_PROXY")
        if proxy:
            logger.info(f"Using proxy {proxy}")
        return proxy or None
