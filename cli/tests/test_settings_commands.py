from __future__ import annotations

from typer.testing import CliRunner

from notify_cli import config, main


def test_help_lists_commands() -> None:
    runner = CliRunner()
    result = runner.invoke(main.app, ["--help"])
    assert result.exit_code == 0
    for name in ("settings", "auth", "subscribe", "unsubscribe", "list"):
        assert name in result.output


def test_settings_set_and_show(tmp_path, monkeypatch) -> None:
    monkeypatch.setattr(config, "user_config_dir", lambda _: str(tmp_path))
    runner = CliRunner()

    result = runner.invoke(
        main.app,
        ["settings", "set", "--base-url", "https://notify.example.test/", "--resource-types", "citations, datasetChanges"],
    )
    assert result.exit_code == 0

    result = runner.invoke(main.app, ["settings", "show"])
    assert result.exit_code == 0
    assert "base_url=https://notify.example.test" in result.output
    assert "resource_types=citations,datasetChanges" in result.output
    assert "token=(empty)" in result.output


def test_settings_set_rejects_blank_resource_types(tmp_path, monkeypatch) -> None:
    monkeypatch.setattr(config, "user_config_dir", lambda _: str(tmp_path))
    runner = CliRunner()
    result = runner.invoke(main.app, ["settings", "set", "--resource-types", " , "])
    assert result.exit_code == 2


def test_auth_set_token_and_clear(tmp_path, monkeypatch) -> None:
    monkeypatch.setattr(config, "user_config_dir", lambda _: str(tmp_path))
    runner = CliRunner()

    result = runner.invoke(main.app, ["auth", "set-token", "--token", "abc"])
    assert result.exit_code == 0
    assert config.load_config().auth.token == "abc"

    result = runner.invoke(main.app, ["auth", "clear"])
    assert result.exit_code == 0
    assert config.load_config().auth.token == ""
