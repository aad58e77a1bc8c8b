from pathlib import Path
from typing import Optional
import logging

from rich.console import Console
from rich.table import Table
from rich import box
import typer

from ..config import Settings
from ..core import GitAttributes, sort_by_label
from ..domain.exceptions import GitAttributesError
from ..domain.merge_operation import OperationType
from .rich_picker import RichPicker

logger = logging.getLogger(__name__)


class CliController:
    """
    Handles the logic for CLI commands, interfacing with the GitAttributes facade.
    Errors are printed here and turned into a non-zero exit code.
    CLI コマンドのロジックを処理し、GitAttributes ファサードとのインターフェースを提供します。
    エラーはここで表示され、0 以外の終了コードに変換されます。
    """

    def __init__(
        self,
        project_root: str,
        settings: Optional[Settings] = None,
        console: Optional[Console] = None,
    ):
        """
        Initializes the controller.
        コントローラーを初期化します。

        Args:
            project_root: Directory that holds (or will hold) the .gitattributes file.
                          .gitattributes ファイルを保持する（または保持する予定の）ディレクトリ。
            settings: Configuration. Read from the environment if None.
                      設定。None の場合は環境から読み込みます。
            console: Output console.
                     出力コンソール。
        """
        self.project_root = project_root
        self.settings = settings
        self.console = console or Console()
        # Lazy initialization of the facade
        self._instance: Optional[GitAttributes] = None

    def _get_instance(self) -> GitAttributes:
        if self._instance is None:
            try:
                self._instance = GitAttributes(project_root=Path(self.project_root), settings=self.settings)
            except Exception as e:
                logger.error(f"Failed to initialize: {e}", exc_info=True)
                self.console.print(f"[bold red]Configuration Error:[/bold red] {e}")
                raise typer.Exit(code=1)
        return self._instance

    def close(self):
        if self._instance is not None:
            self._instance.close()
            self._instance = None

    def display_templates(self, remote_path: str = ""):
        """
        Lists the remote templates in a table sorted by name.
        リモートテンプレートを名前順のテーブルで表示します。
        """
        try:
            files = sort_by_label(self._get_instance().list_templates(remote_path))
        except GitAttributesError as e:
            self.console.print(f"[bold red]Error:[/bold red] {e}")
            raise typer.Exit(code=1)

        if not files:
            self.console.print(f"No templates found at '{remote_path or '/'}'.")
            return

        table = Table(title="Available .gitattributes templates", box=box.ROUNDED)
        table.add_column("Template", style="cyan")
        table.add_column("Path", style="magenta")
        for f in files:
            table.add_row(f.label, f.description)
        self.console.print(table)

    def add_template(
        self,
        template: Optional[str] = None,
        mode: Optional[OperationType] = None,
        remote_path: str = "",
    ):
        """
        Picks a template and writes it to <project root>/.gitattributes.
        テンプレートを選択し、<プロジェクトルート>/.gitattributes に書き込みます。

        Args:
            template: Template label. Prompts when None.
                      テンプレート名。None の場合はプロンプトを表示します。
            mode: Write mode used when the file already exists. Prompts when None.
                  ファイルが既に存在する場合の書き込みモード。None の場合はプロンプトを表示します。
            remote_path: Remote directory to pick the template from.
                         テンプレートを選択するリモートディレクトリ。
        """
        picker = RichPicker(console=self.console, template_label=template, mode=mode)
        try:
            outcome = self._get_instance().add_template(picker, remote_path=remote_path)
        except (GitAttributesError, OSError) as e:
            logger.debug("add_template failed", exc_info=True)
            self.console.print(f"[bold red]Error:[/bold red] {e}")
            raise typer.Exit(code=1)

        if outcome.is_cancelled:
            return
        self.console.print(f"[green]{outcome.message}[/green]")
