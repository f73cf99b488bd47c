from __future__ import annotations

import os
import tomllib
from dataclasses import dataclass, field
from typing import Any

import tomli_w
from platformdirs import user_config_dir

from notify_client.config_types import DEFAULT_RESOURCE_TYPES

from . import console

APP_NAME = "notify"
CONFIG_FILENAME = "config.toml"
ENV_BASE_URL = "NOTIFY_BASE_URL"
ENV_TOKEN = "NOTIFY_TOKEN"

_WARNED_BASE_URL_SCHEME = False


@dataclass
class AuthConfig:
    token: str = ""


@dataclass
class AppConfig:
    base_url: str
    auth: AuthConfig
    resource_types: list[str] = field(default_factory=lambda: list(DEFAULT_RESOURCE_TYPES))


def config_path() -> str:
    return f"{user_config_dir(APP_NAME)}/{CONFIG_FILENAME}"


def default_config() -> AppConfig:
    return AppConfig(
        base_url="",
        auth=AuthConfig(token=""),
        resource_types=list(DEFAULT_RESOURCE_TYPES),
    )


def normalize_base_url(raw: str | None, *, warn: bool = False) -> str:
    value = (raw or "").strip()
    if not value:
        return ""
    value = value.rstrip("/")
    lowered = value.lower()
    if lowered.startswith("http://") or lowered.startswith("https://"):
        return value

    host = value.split("/", 1)[0]
    host = host.split(":", 1)[0].lower()
    if host in {"localhost", "127.0.0.1", "0.0.0.0"}:
        scheme = "http://"
    else:
        scheme = "https://"

    normalized = f"{scheme}{value}"
    if warn:
        _warn_missing_scheme(normalized)
    return normalized


def _warn_missing_scheme(normalized: str) -> None:
    global _WARNED_BASE_URL_SCHEME
    if _WARNED_BASE_URL_SCHEME:
        return
    if not _is_interactive():
        return
    console.warn(f"base_url missing scheme, assuming {normalized}")
    _WARNED_BASE_URL_SCHEME = True


def _is_interactive() -> bool:
    import sys
    return bool(sys.stderr.isatty() or sys.stdout.isatty())


def parse_resource_types(raw: str | list | None) -> list[str]:
    if raw is None:
        return []
    items = raw.split(",") if isinstance(raw, str) else [str(v) for v in raw]
    out: list[str] = []
    for item in items:
        item = item.strip()
        if item and item not in out:
            out.append(item)
    return out


def to_toml(cfg: AppConfig) -> dict[str, Any]:
    return {
        "base_url": cfg.base_url,
        "resource_types": list(cfg.resource_types),
        "auth": {"token": cfg.auth.token},
    }


def from_toml(data: dict[str, Any]) -> AppConfig:
    cfg = default_config()
    cfg.base_url = normalize_base_url(str(data.get("base_url") or ""), warn=True)
    types_raw = data.get("resource_types")
    if isinstance(types_raw, list):
        cfg.resource_types = parse_resource_types(types_raw) or cfg.resource_types
    auth_raw = data.get("auth") or {}
    if isinstance(auth_raw, dict):
        cfg.auth.token = str(auth_raw.get("token") or "")
    return cfg


def load_config() -> AppConfig:
    path = config_path()
    try:
        with open(path, "rb") as f:
            data = tomllib.load(f)
        return from_toml(data)
    except FileNotFoundError:
        return default_config()


def save_config(cfg: AppConfig) -> str:
    path = config_path()
    os.makedirs(os.path.dirname(path), exist_ok=True)
    with open(path, "wb") as f:
        f.write(tomli_w.dumps(to_toml(cfg)).encode("utf-8"))
    os.chmod(path, 0o600)
    return path


def resolve_base_url(cfg: AppConfig, override: str | None = None) -> str:
    env_value = os.getenv(ENV_BASE_URL, "")
    return normalize_base_url(override or env_value or cfg.base_url, warn=True)


def resolve_token() -> str:
    """Current token: env var first, then the saved config."""
    env_value = os.getenv(ENV_TOKEN, "").strip()
    if env_value:
        return env_value
    return load_config().auth.token.strip()
