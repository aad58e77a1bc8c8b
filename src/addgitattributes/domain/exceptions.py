from typing import Optional


class GitAttributesError(Exception):
    """Base class for errors raised by addgitattributes."""


class RemoteError(GitAttributesError):
    """
    Raised when the GitHub API call fails (HTTP error status or transport failure).
    GitHub API 呼び出しが失敗した場合（HTTP エラーステータスまたは通信障害）に発生します。

    Attributes:
        status (Optional[int]): The HTTP status code, or None for transport errors.
                                HTTP ステータスコード。通信エラーの場合は None。
        message (str): The error message reported by the API or the transport.
                       API または通信層が報告したエラーメッセージ。
    """

    def __init__(self, status: Optional[int], message: str):
        self.status = status
        self.message = message
        if status is None:
            super().__init__(message)
        else:
            super().__init__(f"{status}: {message}")


class FormatError(GitAttributesError):
    """Raised when the remote response does not have the expected shape."""


class ContentTypeError(GitAttributesError):
    """Raised when a fetched entry is not a file or carries no content."""


class CancellationError(GitAttributesError):
    """Raised when the user dismisses a prompt. Never reported as a failure."""


class TemplateNotFoundError(GitAttributesError):
    """Raised when a template requested by name is not in the catalog."""
