from __future__ import annotations

import asyncio
from collections.abc import Awaitable, Callable
from typing import Any

import typer
from rich.table import Table

from notify_client import (
    ApiError,
    AuthError,
    ConfigError,
    NetworkError,
    NotificationClient,
    SubscriptionRecord,
    ValidationError,
)
from notify_client.types import looks_like_subscription

from .. import console
from ..config import load_config
from ..http import make_client


def _call(base_url: str | None, op: Callable[[NotificationClient], Awaitable[Any]]) -> Any:
    cfg = load_config()
    try:
        client = make_client(cfg, base_url_override=base_url)
    except ConfigError as e:
        console.err(f"Invalid settings: {e}. Run `notify settings init` first.")
        raise typer.Exit(code=2)

    async def _run() -> Any:
        async with client:
            return await op(client)

    try:
        return asyncio.run(_run())
    except ValidationError as e:
        console.err(str(e))
        raise typer.Exit(code=2)
    except AuthError as e:
        console.err(f"Not authorized: {e}. Use `notify auth set-token` or set NOTIFY_TOKEN.")
        raise typer.Exit(code=3)
    except ApiError as e:
        console.err(f"Service error ({e.status_code}): {e}")
        raise typer.Exit(code=1)
    except NetworkError as e:
        console.err(f"Network error: {e}")
        raise typer.Exit(code=1)
    except ValueError as e:
        console.err(f"Invalid response body: {e}")
        raise typer.Exit(code=1)


def _render_records(items: list[dict]) -> None:
    table = Table(title="Subscriptions")
    table.add_column("Resource type")
    table.add_column("Resource IDs")
    table.add_column("Subject")
    for item in items:
        rec = SubscriptionRecord.from_dict(item)
        table.add_row(rec.resource_type, "\n".join(rec.resource_ids) or "-", rec.subject)
    console.console.print(table)


def subscribe(
        pid: str = typer.Argument(..., help="Persistent identifier to subscribe to."),
        resource_type: str = typer.Option(..., "--type", "-t", help="Resource type, e.g. datasetChanges."),
        base_url: str | None = typer.Option(None, "--base-url", help="Override base URL."),
        json_out: bool = typer.Option(False, "--json", help="Print raw JSON."),
):
    data = _call(base_url, lambda client: client.subscribe(pid, resource_type))
    if json_out:
        console.print_json(data)
        return
    if looks_like_subscription(data):
        _render_records([data])
        return
    console.ok(f"Subscribed to {pid} ({resource_type}).")


def unsubscribe(
        pid: str = typer.Argument(..., help="Persistent identifier to unsubscribe from."),
        resource_type: str = typer.Option(..., "--type", "-t", help="Resource type, e.g. datasetChanges."),
        base_url: str | None = typer.Option(None, "--base-url", help="Override base URL."),
):
    _call(base_url, lambda client: client.unsubscribe(pid, resource_type))
    console.ok(f"Unsubscribed from {pid} ({resource_type}).")


def list_subscriptions(
        resource_type: str = typer.Option(..., "--type", "-t", help="Resource type, e.g. datasetChanges."),
        base_url: str | None = typer.Option(None, "--base-url", help="Override base URL."),
        json_out: bool = typer.Option(False, "--json", help="Print raw JSON."),
):
    data = _call(base_url, lambda client: client.list_subscriptions(resource_type))
    if data is None:
        console.info("No subscriptions.")
        return
    items = data if isinstance(data, list) else [data]
    if not json_out and items and all(looks_like_subscription(i) for i in items):
        _render_records(items)
        return
    console.print_json(data)
