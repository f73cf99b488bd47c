from __future__ import annotations

import typer

from .commands import auth_cmd, settings_cmd, subscriptions_cmd
from .logging_ import setup_logging


def _build_app() -> typer.Typer:
    app = typer.Typer(
        name="notify",
        help="Manage notification service subscriptions.",
        no_args_is_help=True,
    )

    app.add_typer(settings_cmd.app, name="settings")
    app.add_typer(auth_cmd.app, name="auth")
    app.command("subscribe")(subscriptions_cmd.subscribe)
    app.command("unsubscribe")(subscriptions_cmd.unsubscribe)
    app.command("list")(subscriptions_cmd.list_subscriptions)

    @app.callback()
    def _main(
            verbose: bool = typer.Option(False, "-v", "--verbose", help="Verbose logs."),
    ):
        setup_logging(verbose)

    return app


app = _build_app()
