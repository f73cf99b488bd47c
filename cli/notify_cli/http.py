from __future__ import annotations

from importlib.metadata import PackageNotFoundError, version

from notify_client import NotificationClient
from notify_client.config_types import ClientConfig

from .config import AppConfig, resolve_base_url, resolve_token


def client_version() -> str | None:
    try:
        return version("notify-client")
    except PackageNotFoundError:
        return None


def make_client(cfg: AppConfig, *, base_url_override: str | None = None) -> NotificationClient:
    return NotificationClient(
        ClientConfig(
            base_url=resolve_base_url(cfg, base_url_override),
            token_supplier=resolve_token,
            resource_types=cfg.resource_types,
            client_version=client_version(),
        )
    )
