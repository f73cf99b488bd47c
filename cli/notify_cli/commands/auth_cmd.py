from __future__ import annotations

import typer

from .. import console
from ..config import load_config, save_config

app = typer.Typer(help="Manage the bearer token sent to the notification service.")


@app.command("set-token")
def set_token(
        token: str = typer.Option(..., "--token", prompt=True, hide_input=True, help="Bearer token."),
):
    token = token.strip()
    if not token:
        console.err("Token cannot be empty.")
        raise typer.Exit(code=2)
    cfg = load_config()
    cfg.auth.token = token
    saved = save_config(cfg)
    console.ok(f"Token saved to {saved}.")


@app.command("clear")
def clear_token():
    cfg = load_config()
    cfg.auth.token = ""
    saved = save_config(cfg)
    console.ok(f"Token removed from {saved}.")
