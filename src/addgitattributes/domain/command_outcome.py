from dataclasses import dataclass
from enum import Enum
from typing import Optional

from .merge_operation import MergeOperation, OperationType


class OutcomeStatus(Enum):
    COMPLETED = "completed"
    CANCELLED = "cancelled"


@dataclass(frozen=True)
class CommandOutcome:
    """
    Result of the top-level "add" command.
    A cancelled command carries no operation and is not an error.
    トップレベルの "add" コマンドの結果。
    キャンセルされたコマンドは操作を持たず、エラーではありません。
    """
    status: OutcomeStatus
    operation: Optional[MergeOperation] = None

    @classmethod
    def completed(cls, operation: MergeOperation) -> "CommandOutcome":
        return cls(status=OutcomeStatus.COMPLETED, operation=operation)

    @classmethod
    def cancelled(cls) -> "CommandOutcome":
        return cls(status=OutcomeStatus.CANCELLED)

    @property
    def is_cancelled(self) -> bool:
        return self.status is OutcomeStatus.CANCELLED

    @property
    def message(self) -> str:
        """The user-facing summary of a completed command."""
        if self.operation is None:
            return ""
        description = self.operation.selected_file.description
        if self.operation.mode is OperationType.APPEND:
            return f"Appended {description} to the existing .gitattributes in the project root"
        return f"Created .gitattributes file in the project root based on {description}"
