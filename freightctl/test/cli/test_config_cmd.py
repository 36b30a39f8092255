from __future__ import annotations

from pathlib import Path

import pytest
import typer

import freightctl.cli.commands.config_cmd as config_cmd
from freightctl.cli.context import CLIContext, build_context
from freightctl.core.config import CLIConfig, load_config
from freightctl.core.result import Ok
from freightctl.output.console import MockConsole


def _use_console(monkeypatch: pytest.MonkeyPatch) -> MockConsole:
    console = MockConsole()

    def fake_build_context(*, verbose: bool = False) -> CLIContext:
        result = load_config()
        assert isinstance(result, Ok)
        return CLIContext(config=result.value, console=console)

    monkeypatch.setattr(config_cmd, "build_context", fake_build_context)
    return console


def test_set_project_persists(monkeypatch: pytest.MonkeyPatch, isolated_config: Path) -> None:
    console = _use_console(monkeypatch)

    config_cmd.set_project_cmd(project=" my-project ")

    assert load_config() == Ok(CLIConfig(project="my-project"))
    assert console.find("default project set to my-project")
    assert isolated_config.exists()


def test_set_project_rejects_empty(monkeypatch: pytest.MonkeyPatch, isolated_config: Path) -> None:
    console = _use_console(monkeypatch)

    with pytest.raises(typer.Exit) as exc:
        config_cmd.set_project_cmd(project="  ")

    assert exc.value.exit_code == 1
    assert console.has_error()
    assert not isolated_config.exists()


def test_set_server_keeps_project(monkeypatch: pytest.MonkeyPatch) -> None:
    _use_console(monkeypatch)
    config_cmd.set_project_cmd(project="my-project")

    config_cmd.set_server_cmd(address="https://kargo.test/", insecure_skip_tls_verify=True)

    result = load_config()
    assert isinstance(result, Ok)
    assert result.value.project == "my-project"
    assert result.value.api_address == "https://kargo.test"
    assert result.value.insecure_skip_tls_verify


def test_set_server_rejects_bad_scheme(monkeypatch: pytest.MonkeyPatch) -> None:
    console = _use_console(monkeypatch)

    with pytest.raises(typer.Exit) as exc:
        config_cmd.set_server_cmd(address="kargo.test", insecure_skip_tls_verify=False)

    assert exc.value.exit_code == 1
    assert "error: invalid API server address: kargo.test" in console.messages


def test_view_masks_token(
    monkeypatch: pytest.MonkeyPatch, isolated_config: Path, capsys: pytest.CaptureFixture[str]
) -> None:
    _use_console(monkeypatch)
    isolated_config.write_text(
        'api_address = "https://kargo.test"\nbearer_token = "s3cret"\n', encoding="utf-8"
    )

    config_cmd.view_cmd()

    out = capsys.readouterr().out
    assert out.startswith(f"# {isolated_config}\n")
    assert "https://kargo.test" in out
    assert "s3cret" not in out
    assert "********" in out


def test_broken_config_is_env_error(isolated_config: Path) -> None:
    isolated_config.write_text("project = [unclosed\n", encoding="utf-8")

    with pytest.raises(typer.Exit) as exc:
        build_context()

    assert exc.value.exit_code == 2
