import typer
from typing_extensions import Annotated
from pathlib import Path
import logging
from typing import Optional

from pydantic import ValidationError

from ..config import Settings
from ..controller.cli_controller import CliController
from ..domain.merge_operation import OperationType

# Basic logger setup (adjust level and format as needed)
logging.basicConfig(level=logging.INFO, format='[%(levelname)s] %(message)s')
logger = logging.getLogger(__name__)

app = typer.Typer(help="addgitattributes: Add .gitattributes templates from github.com/alexkaratarakis/gitattributes.")

# --- Common Type Annotations with Options ---
ProjectType = Annotated[
    Path,
    typer.Option(
        "--project-root", "-p",
        help="Directory in which .gitattributes is created or updated.",
        exists=True, file_okay=False, dir_okay=True, writable=True, resolve_path=True
    )
]

RemotePathType = Annotated[
    str,
    typer.Option("--path", help="Directory inside the template repository.")
]

TokenType = Annotated[
    Optional[str],
    typer.Option("--token", help="GitHub token (overrides GITATTRIBUTES_TOKEN).")
]

ProxyType = Annotated[
    Optional[str],
    typer.Option("--proxy", help="Proxy URL (overrides GITATTRIBUTES_PROXY, HTTPS_PROXY and HTTP_PROXY).")
]

VerboseType = Annotated[
    bool,
    typer.Option("--verbose", "-v", help="Enable verbose output.")
]


def _setup(verbose: bool, token: Optional[str] = None, proxy: Optional[str] = None) -> Settings:
    if verbose:
        logging.getLogger("addgitattributes").setLevel(logging.DEBUG)
        logger.info("Verbose mode enabled.")

    overrides = {}
    if token is not None:
        overrides["token"] = token
    if proxy is not None:
        overrides["proxy"] = proxy
    try:
        return Settings(**overrides)
    except ValidationError as e:
        typer.echo(f"Invalid configuration: {e}", err=True)
        raise typer.Exit(code=1)


# --- Commands ---

@app.command("list")
def list_templates(
    remote_path: RemotePathType = "",
    token: TokenType = None,
    proxy: ProxyType = None,
    verbose: VerboseType = False
):
    """List the available .gitattributes templates."""
    settings = _setup(verbose, token, proxy)
    controller = CliController(project_root=".", settings=settings)
    try:
        controller.display_templates(remote_path)
    finally:
        controller.close()


@app.command()
def add(
    template: Annotated[
        Optional[str],
        typer.Argument(help="Template name (e.g. 'Python'). Prompts when omitted.")
    ] = None,
    project_root: ProjectType = Path("."),
    mode: Annotated[
        Optional[OperationType],
        typer.Option("--mode", "-m", help="What to do when .gitattributes already exists. Prompts when omitted.",
                     case_sensitive=False)
    ] = None,
    remote_path: RemotePathType = "",
    token: TokenType = None,
    proxy: ProxyType = None,
    verbose: VerboseType = False
):
    """Add a .gitattributes template to the project root."""
    settings = _setup(verbose, token, proxy)
    controller = CliController(project_root=str(project_root), settings=settings)
    logger.debug(f"Adding template to: {project_root}")
    try:
        controller.add_template(template=template, mode=mode, remote_path=remote_path)
    finally:
        controller.close()


# --- Entry point for CLI ---
def main():
    app()

if __name__ == "__main__":
    main()
