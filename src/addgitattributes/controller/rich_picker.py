from typing import Optional, Sequence
import logging

from rich.console import Console
from rich.prompt import Prompt
from rich.table import Table
from rich import box

from ..domain.exceptions import TemplateNotFoundError
from ..domain.file_descriptor import FileDescriptor
from ..domain.merge_operation import OperationType
from ..service.picker import Picker

logger = logging.getLogger(__name__)

CANCEL_CHOICE = "cancel"


class RichPicker(Picker):
    """
    Interactive picker on the terminal using rich prompts.
    Choices given on the command line are used directly without prompting.
    rich のプロンプトを使用したターミナル上の対話型ピッカー。
    コマンドラインで指定された選択肢はプロンプトなしでそのまま使用されます。
    """

    def __init__(
        self,
        console: Optional[Console] = None,
        template_label: Optional[str] = None,
        mode: Optional[OperationType] = None,
    ):
        self.console = console or Console()
        self.template_label = template_label
        self.mode = mode

    def pick_template(self, items: Sequence[FileDescriptor]) -> Optional[FileDescriptor]:
        if self.template_label:
            match = _find_by_label(items, self.template_label)
            if match is None:
                raise TemplateNotFoundError(f"No template named '{self.template_label}'.")
            return match

        if not items:
            self.console.print("No templates available.")
            return None

        table = Table(box=box.SIMPLE, show_header=True)
        table.add_column("#", justify="right", style="dim")
        table.add_column("Template", style="cyan")
        table.add_column("Path", style="magenta")
        for index, item in enumerate(items, start=1):
            table.add_row(str(index), item.label, item.description)
        self.console.print(table)

        while True:
            try:
                answer = Prompt.ask("Template (number or name, empty to cancel)", console=self.console, default="")
            except (KeyboardInterrupt, EOFError):
                return None
            answer = answer.strip()
            if not answer:
                return None
            if answer.isdigit() and 1 <= int(answer) <= len(items):
                return items[int(answer) - 1]
            match = _find_by_label(items, answer)
            if match is not None:
                return match
            self.console.print(f"[red]Unknown template:[/red] {answer}")

    def pick_mode(self) -> Optional[OperationType]:
        if self.mode is not None:
            return self.mode
        try:
            answer = Prompt.ask(
                ".gitattributes already exists. Append or overwrite?",
                console=self.console,
                choices=[OperationType.APPEND.value, OperationType.OVERWRITE.value, CANCEL_CHOICE],
            )
        except (KeyboardInterrupt, EOFError):
            return None
        if answer == CANCEL_CHOICE:
            return None
        return OperationType(answer)


def _find_by_label(items: Sequence[FileDescriptor], label: str) -> Optional[FileDescriptor]:
    wanted = label.casefold()
    for item in items:
        if item.label.casefold() == wanted:
            return item
    return None
