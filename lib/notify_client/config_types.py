from __future__ import annotations

from collections.abc import Awaitable, Callable, Iterable, Mapping
from dataclasses import dataclass
from typing import Any

TokenSupplier = Callable[[], "str | None | Awaitable[str | None]"]
PidValidator = Callable[[str], "bool | Awaitable[bool]"]

DEFAULT_RESOURCE_TYPES: tuple[str, ...] = ("datasetChanges", "citations")


@dataclass(frozen=True)
class ClientConfig:
    base_url: str
    token_supplier: TokenSupplier
    pid_validator: PidValidator | None = None
    resource_types: Iterable[str] = DEFAULT_RESOURCE_TYPES
    timeout_s: float = 15.0
    # Extra httpx.AsyncClient kwargs; ignored when a transport is injected.
    transport_options: Mapping[str, Any] | None = None
    client_version: str | None = None
