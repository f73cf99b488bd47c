from __future__ import annotations

import os

import typer

from .. import console
from ..config import config_path, default_config, load_config, normalize_base_url, parse_resource_types, save_config

app = typer.Typer(help="Manage local CLI settings (~/.config/notify/config.toml).")


@app.command("init")
def init_settings(
        force: bool = typer.Option(False, "--force", help="Overwrite existing config."),
        base_url: str = typer.Option(
            ...,
            "--base-url",
            prompt="Notification service base URL",
            help="Service base URL like https://api.test.dataone.org/notifications",
        ),
):
    path = config_path()
    if os.path.exists(path) and not force:
        console.info(f"Config already exists: {path}")
        console.info("Use --force to overwrite.")
        return

    cfg = default_config()
    cfg.base_url = normalize_base_url(base_url, warn=True)
    if not cfg.base_url:
        console.err("Base URL cannot be empty.")
        raise typer.Exit(code=2)
    saved = save_config(cfg)
    console.ok(f"Config written: {saved}")


@app.command("show")
def show_settings():
    cfg = load_config()
    token_state = "(set)" if (cfg.auth.token or "").strip() else "(empty)"
    types = ",".join(cfg.resource_types)
    console.console.print(f"base_url={cfg.base_url} resource_types={types} token={token_state}", markup=False)


@app.command("set")
def set_setting(
        base_url: str | None = typer.Option(None, "--base-url", help="Set service base URL."),
        resource_types: str | None = typer.Option(
            None, "--resource-types", help="Comma-separated allowed resource types."
        ),
):
    cfg = load_config()
    if base_url is not None:
        cfg.base_url = normalize_base_url(base_url, warn=True)
    if resource_types is not None:
        types = parse_resource_types(resource_types)
        if not types:
            console.err("Resource types cannot be empty.")
            raise typer.Exit(code=2)
        cfg.resource_types = types
    saved = save_config(cfg)
    console.ok(f"Settings updated: {saved}")
