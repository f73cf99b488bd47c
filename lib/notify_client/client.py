from __future__ import annotations

import inspect
import logging
from collections.abc import Iterable
from typing import Any
from urllib.parse import quote

from .config_types import ClientConfig
from .errors import AuthError, ConfigError, ValidationError
from .transport import Transport, TransportLike

logger = logging.getLogger(__name__)

NO_BODY_STATUSES = frozenset({204, 205, 304})
# Set by the client itself; not accepted as pass-through options.
RESERVED_OPTIONS = frozenset({"method"})


async def _resolve(value: Any) -> Any:
    if inspect.isawaitable(value):
        return await value
    return value


def _always_valid(_pid: str) -> bool:
    return True


def _normalize_resource_types(resource_types: Iterable[str] | None) -> frozenset[str]:
    if resource_types is None or isinstance(resource_types, (str, bytes)):
        return frozenset()
    normalized = set()
    for item in resource_types:
        if not isinstance(item, str):
            return frozenset()
        item = item.strip()
        if item:
            normalized.add(item)
    return frozenset(normalized)


def _segment(value: str) -> str:
    return quote(value, safe="")


class NotificationClient:
    """Subscribe, unsubscribe and list notification subscriptions.

    All three operations run the same pipeline: check the resource type,
    check and validate the PID when one is required, fetch a token, then
    dispatch through the transport. Any failure stops the pipeline at that
    step, so a rejected resource type never reaches the PID validator or the
    token supplier.

    Headers passed by the caller merge on top of the ``Authorization`` header
    set here; the caller wins on key collision.
    """

    def __init__(self, cfg: ClientConfig, *, transport: TransportLike | None = None):
        if not isinstance(cfg.base_url, str) or not cfg.base_url.strip():
            raise ConfigError("base_url required")
        if not callable(cfg.token_supplier):
            raise ConfigError("token supplier required")
        if cfg.pid_validator is not None and not callable(cfg.pid_validator):
            raise ConfigError("pid_validator must be callable")
        resource_types = _normalize_resource_types(cfg.resource_types)
        if not resource_types:
            raise ConfigError("resource_types must be a non-empty collection of strings")

        self._cfg = cfg
        self._base_url = cfg.base_url.strip().rstrip("/")
        self._get_token = cfg.token_supplier
        self._validate_pid = cfg.pid_validator or _always_valid
        self._resource_types = resource_types

        self._owns_transport = transport is None
        self._t: TransportLike = transport if transport is not None else Transport(cfg, self._base_url)

    @property
    def base_url(self) -> str:
        return self._base_url

    @property
    def resource_types(self) -> frozenset[str]:
        return self._resource_types

    async def aclose(self) -> None:
        if self._owns_transport:
            await self._t.aclose()  # type: ignore[attr-defined]

    async def __aenter__(self) -> "NotificationClient":
        return self

    async def __aexit__(self, *exc_info: Any) -> None:
        await self.aclose()

    # --- API methods ---
    async def subscribe(self, pid: str | None, resource_type: str, **options: Any) -> Any:
        """Subscribe ``pid`` to notifications of ``resource_type``.

        Returns the subscription record decoded from the response, or
        ``None`` when the service answers without a body.
        """
        return await self._request(pid, resource_type, method="POST", pid_required=True, options=options)

    async def unsubscribe(self, pid: str | None, resource_type: str, **options: Any) -> None:
        await self._request(
            pid, resource_type, method="DELETE", pid_required=True, options=options, decode_body=False,
        )

    async def list_subscriptions(self, resource_type: str, **options: Any) -> Any:
        """Return the service's subscription listing for ``resource_type`` as-is."""
        return await self._request(None, resource_type, method="GET", pid_required=False, options=options)

    async def _request(
            self,
            pid: str | None,
            resource_type: str,
            *,
            method: str,
            pid_required: bool,
            options: dict[str, Any],
            decode_body: bool = True,
    ) -> Any:
        resource_type = resource_type.strip() if isinstance(resource_type, str) else ""
        if resource_type not in self._resource_types:
            raise ValidationError("invalid resource type")

        pid = str(pid).strip() if pid is not None else ""
        if pid_required and not pid:
            raise ValidationError("pid required")

        if pid_required:
            if not await _resolve(self._validate_pid(pid)):
                raise ValidationError("pid invalid")

        reserved = RESERVED_OPTIONS.intersection(options)
        if reserved:
            raise ValidationError(f"reserved option: {', '.join(sorted(reserved))}")

        token = await _resolve(self._get_token())
        if not token:
            raise AuthError("token required")

        endpoint = _segment(resource_type)
        if pid_required:
            endpoint = f"{endpoint}/{_segment(pid)}"

        options = dict(options)
        headers = {"Authorization": f"Bearer {token}"}
        headers.update(options.pop("headers", None) or {})

        logger.debug("%s %s", method, endpoint)
        response = await self._t(endpoint, method=method, headers=headers, **options)

        if response.status_code in NO_BODY_STATUSES:
            logger.debug("%s %s returned %s without body", method, endpoint, response.status_code)
            return None
        if not decode_body:
            return None
        return await _resolve(response.json())
