from notify_cli import config


def _use_tmp_config_dir(tmp_path, monkeypatch) -> None:
    def _config_dir(_: str) -> str:
        return str(tmp_path)

    monkeypatch.setattr(config, "user_config_dir", _config_dir)


def test_save_and_load_roundtrip(tmp_path, monkeypatch) -> None:
    _use_tmp_config_dir(tmp_path, monkeypatch)
    cfg = config.AppConfig(
        base_url="https://notify.example.test",
        auth=config.AuthConfig(token="secret"),
        resource_types=["citations"],
    )

    path = config.save_config(cfg)
    loaded = config.load_config()

    assert path.endswith("config.toml")
    assert loaded == cfg


def test_load_config_missing_file_returns_defaults(tmp_path, monkeypatch) -> None:
    _use_tmp_config_dir(tmp_path, monkeypatch)
    cfg = config.load_config()
    assert cfg.base_url == ""
    assert cfg.resource_types == ["datasetChanges", "citations"]


def test_empty_resource_types_fall_back_to_defaults(tmp_path, monkeypatch) -> None:
    _use_tmp_config_dir(tmp_path, monkeypatch)
    tmp_path.joinpath("config.toml").write_text(
        'base_url = "https://notify.example.test"\nresource_types = ["", " "]\n',
        encoding="utf-8",
    )
    assert config.load_config().resource_types == ["datasetChanges", "citations"]


def test_parse_resource_types_trims_and_dedupes() -> None:
    assert config.parse_resource_types(" citations, ,datasetChanges,citations") == ["citations", "datasetChanges"]


def test_resolve_token_prefers_env(tmp_path, monkeypatch) -> None:
    _use_tmp_config_dir(tmp_path, monkeypatch)
    config.save_config(
        config.AppConfig(base_url="https://notify.example.test", auth=config.AuthConfig(token="from-file"))
    )

    monkeypatch.setenv(config.ENV_TOKEN, "from-env")
    assert config.resolve_token() == "from-env"

    monkeypatch.delenv(config.ENV_TOKEN)
    assert config.resolve_token() == "from-file"


def test_resolve_base_url_env_override(monkeypatch) -> None:
    cfg = config.default_config()
    monkeypatch.setenv(config.ENV_BASE_URL, "https://env.example.test/")
    assert config.resolve_base_url(cfg) == "https://env.example.test"
    assert config.resolve_base_url(cfg, "https://flag.example.test") == "https://flag.example.test"


def test_normalize_base_url_defaults_to_https() -> None:
    assert config.normalize_base_url("example.com") == "https://example.com"


def test_normalize_base_url_defaults_to_http_for_localhost() -> None:
    assert config.normalize_base_url("localhost:8080/notifications/") == "http://localhost:8080/notifications"
