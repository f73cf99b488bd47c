from __future__ import annotations

from notify_cli import config
from notify_cli.http import make_client


def test_make_client_uses_config(monkeypatch) -> None:
    monkeypatch.delenv(config.ENV_BASE_URL, raising=False)
    captured = {}

    class _FakeClient:
        def __init__(self, client_cfg):
            captured["base_url"] = client_cfg.base_url
            captured["resource_types"] = client_cfg.resource_types
            captured["token_supplier"] = client_cfg.token_supplier

    monkeypatch.setattr("notify_cli.http.NotificationClient", _FakeClient)
    cfg = config.AppConfig(
        base_url="https://notify.example.test",
        auth=config.AuthConfig(token="t"),
        resource_types=["citations"],
    )

    make_client(cfg)

    assert captured["base_url"] == "https://notify.example.test"
    assert captured["resource_types"] == ["citations"]
    assert captured["token_supplier"] is config.resolve_token


def test_make_client_normalizes_base_url_override(monkeypatch) -> None:
    captured = {}

    class _FakeClient:
        def __init__(self, client_cfg):
            captured["base_url"] = client_cfg.base_url

    monkeypatch.setattr("notify_cli.http.NotificationClient", _FakeClient)

    make_client(config.default_config(), base_url_override="example.com/")

    assert captured["base_url"] == "https://example.com"
