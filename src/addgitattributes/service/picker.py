from abc import ABC, abstractmethod
from typing import Optional, Sequence

from ..domain.file_descriptor import FileDescriptor
from ..domain.merge_operation import OperationType


class Picker(ABC):
    """
    Lets the user choose a template and a write mode.
    Returning None from either method means the user cancelled.
    ユーザーにテンプレートと書き込みモードを選択させます。
    いずれかのメソッドが None を返した場合、ユーザーがキャンセルしたことを意味します。
    """

    @abstractmethod
    def pick_template(self, items: Sequence[FileDescriptor]) -> Optional[FileDescriptor]:
        pass

    @abstractmethod
    def pick_mode(self) -> Optional[OperationType]:
        pass
