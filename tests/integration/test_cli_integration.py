import logging
import pytest
from pathlib import Path
from typer.testing import CliRunner

from addgitattributes.gateway.cli_parser import app

from conftest import FakeGitHub, file_item, listing_item

runner = CliRunner()

WEB_TEMPLATE = b"* text=auto\n*.css text\n"


@pytest.fixture(autouse=True)
def fake_remote(monkeypatch, fake_github: FakeGitHub) -> FakeGitHub:
    """
    Routes every client the CLI builds to the fake GitHub API.
    CLI が構築するすべてのクライアントを偽の GitHub API に向けます。
    """
    for name in ("GITATTRIBUTES_TOKEN", "GITATTRIBUTES_PROXY", "GITATTRIBUTES_CACHE_EXPIRATION_INTERVAL"):
        monkeypatch.delenv(name, raising=False)
    fake_github.add("", [
        listing_item("Web.gitattributes"),
        listing_item("actionscript.gitattributes"),
        listing_item(".gitattributes"),
    ])
    fake_github.add("Web.gitattributes", file_item("Web.gitattributes", WEB_TEMPLATE))
    monkeypatch.setattr("addgitattributes.core.GitHubContentClient", fake_github.client)
    return fake_github


@pytest.fixture
def project(tmp_path: Path) -> Path:
    root = tmp_path / "test_project"
    root.mkdir()
    return root


def test_list_shows_sorted_templates():
    result = runner.invoke(app, ["list"])

    assert result.exit_code == 0, result.output
    assert "actionscript" in result.output
    assert "Web" in result.output
    assert result.output.index("actionscript") < result.output.index("Web")


def test_add_named_template_creates_file(project: Path):
    result = runner.invoke(app, ["add", "web", "--project-root", str(project)])

    assert result.exit_code == 0, result.output
    assert (project / ".gitattributes").read_bytes() == WEB_TEMPLATE
    assert "Created .gitattributes file" in result.output


def test_add_with_append_mode(project: Path):
    (project / ".gitattributes").write_bytes(b"* text=auto\n")

    result = runner.invoke(app, ["add", "Web", "-p", str(project), "--mode", "append"])

    assert result.exit_code == 0, result.output
    assert (project / ".gitattributes").read_bytes() == (
        b"* text=auto\n"
        b"\n"
        b"# Commented because this line appears before in the file.\n"
        b"# * text=auto\n"
        b"*.css text\n"
    )
    assert "Appended Web.gitattributes" in result.output


def test_add_prompts_for_template_and_mode(project: Path):
    """
    Tests the interactive flow: the template and the mode are read from stdin.
    対話型フローをテストします: テンプレートとモードは標準入力から読み込まれます。
    """
    (project / ".gitattributes").write_bytes(b"*.png binary\n")

    result = runner.invoke(app, ["add", "-p", str(project)], input="2\noverwrite\n")

    assert result.exit_code == 0, result.output
    assert (project / ".gitattributes").read_bytes() == WEB_TEMPLATE


def test_add_cancelled_prompt_exits_cleanly(project: Path):
    result = runner.invoke(app, ["add", "-p", str(project)], input="\n")

    assert result.exit_code == 0, result.output
    assert not (project / ".gitattributes").exists()


def test_add_unknown_template_fails(project: Path):
    result = runner.invoke(app, ["add", "Nope", "-p", str(project)])

    assert result.exit_code == 1
    assert "No template named 'Nope'" in result.output
    assert not (project / ".gitattributes").exists()


def test_add_remote_failure_reports_error(project: Path, fake_remote: FakeGitHub):
    fake_remote.add("Web.gitattributes", {"message": "API rate limit exceeded"}, status=403)

    result = runner.invoke(app, ["add", "Web", "-p", str(project)])

    assert result.exit_code == 1
    assert "API rate limit exceeded" in result.output
    assert not (project / ".gitattributes").exists()


# --- Option overrides --- #

def test_token_option_overrides_environment(monkeypatch, fake_remote: FakeGitHub):
    """
    Tests that --token wins over GITATTRIBUTES_TOKEN.
    --token が GITATTRIBUTES_TOKEN より優先されることをテストします。
    """
    monkeypatch.setenv("GITATTRIBUTES_TOKEN", "env")

    result = runner.invoke(app, ["list", "--token", "cli"])

    assert result.exit_code == 0, result.output
    assert fake_remote.requests[-1].headers["authorization"] == "Bearer cli"


def test_token_from_environment(monkeypatch, fake_remote: FakeGitHub):
    monkeypatch.setenv("GITATTRIBUTES_TOKEN", "env")

    result = runner.invoke(app, ["list"])

    assert result.exit_code == 0, result.output
    assert fake_remote.requests[-1].headers["authorization"] == "Bearer env"


def test_proxy_option_overrides_environment(monkeypatch, fake_remote: FakeGitHub):
    monkeypatch.setenv("GITATTRIBUTES_PROXY", "http://env-proxy:3128")
    seen = []

    def build_client(settings):
        seen.append(settings)
        return fake_remote.client(settings)

    monkeypatch.setattr("addgitattributes.core.GitHubContentClient", build_client)

    result = runner.invoke(app, ["list", "--proxy", "http://cli-proxy:3128"])

    assert result.exit_code == 0, result.output
    assert seen[-1].proxy == "http://cli-proxy:3128"
    assert seen[-1].resolve_proxy() == "http://cli-proxy:3128"


def test_add_path_option_lists_subdirectory(project: Path, fake_remote: FakeGitHub):
    fake_remote.add("Common", [listing_item("Csharp.gitattributes", path="Common/Csharp.gitattributes")])
    fake_remote.add("Common/Csharp.gitattributes",
                    file_item("Csharp.gitattributes", b"*.cs diff=csharp\n", path="Common/Csharp.gitattributes"))

    result = runner.invoke(app, ["add", "Csharp", "-p", str(project), "--path", "Common"])

    assert result.exit_code == 0, result.output
    paths = [request.url.path for request in fake_remote.requests]
    assert any(path.endswith("/contents/Common") for path in paths)
    assert (project / ".gitattributes").read_bytes() == b"*.cs diff=csharp\n"


@pytest.fixture
def package_logger():
    package_logger = logging.getLogger("addgitattributes")
    level = package_logger.level
    yield package_logger
    package_logger.setLevel(level)


def test_verbose_raises_package_log_level(package_logger: logging.Logger):
    result = runner.invoke(app, ["list", "-v"])

    assert result.exit_code == 0, result.output
    assert package_logger.level == logging.DEBUG
