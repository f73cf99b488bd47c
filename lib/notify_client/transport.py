from __future__ import annotations

import json
from typing import Any, Protocol

import httpx

from .config_types import ClientConfig
from .errors import ApiAuthError, ApiError, NetworkError


class ResponseLike(Protocol):
    status_code: int

    def json(self) -> Any: ...


class TransportLike(Protocol):
    """Anything that can execute a request against the service base URL.

    ``json()`` on the returned response may return the decoded value or an
    awaitable resolving to it.
    """

    async def __call__(
        self,
        path: str,
        *,
        method: str,
        headers: dict[str, str],
        **options: Any,
    ) -> ResponseLike: ...


class Transport:
    def __init__(self, cfg: ClientConfig, base_url: str):
        options = dict(cfg.transport_options or {})
        headers = {"User-Agent": f"notify-client/{cfg.client_version or '0.1.0'}"}
        headers.update(options.pop("headers", None) or {})
        options.setdefault("timeout", cfg.timeout_s)
        options.setdefault("follow_redirects", True)

        self._client = httpx.AsyncClient(base_url=base_url, headers=headers, **options)

    async def aclose(self) -> None:
        await self._client.aclose()

    async def __call__(
        self,
        path: str,
        *,
        method: str,
        headers: dict[str, str],
        **options: Any,
    ) -> httpx.Response:
        try:
            r = await self._client.request(method, path, headers=headers, **options)
        except httpx.RequestError as e:
            raise NetworkError(str(e)) from e

        if r.status_code >= 400:
            raise _status_error(method, path, r)
        return r


def _status_error(method: str, path: str, r: httpx.Response) -> ApiError:
    msg = f"{method} {path} failed with {r.status_code}"
    details = None

    data: Any = None
    try:
        data = r.json()
    except ValueError:
        pass

    if isinstance(data, dict):
        details = json.dumps(data, ensure_ascii=False)
        text = data.get("detail") or data.get("message")
        if text:
            msg = str(text)
    elif r.text:
        details = r.text[:1000]

    if r.status_code in (401, 403):
        return ApiAuthError(r.status_code, msg, details)
    return ApiError(r.status_code, msg, details)
