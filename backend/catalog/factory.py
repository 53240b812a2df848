"""Application factory wiring Flask extensions and blueprints."""

from __future__ import annotations

from flask import Flask

from catalog.core.config import BaseConfig, get_config
from catalog.core.logger import configure_logging, init_app as init_logging


def _init_auth_adapters(app: Flask) -> None:
    """Register the token provider and refresh token ledger for request handlers."""
    from catalog.api.deps import LEDGER_KEY, TOKEN_PROVIDER_KEY
    from catalog.infra.jwt import JWTTokenProvider
    from catalog.infra.sqlalchemy import SQLAlchemyRefreshTokenLedger

    app.extensions.setdefault(TOKEN_PROVIDER_KEY, JWTTokenProvider.from_config(app.config))
    app.extensions.setdefault(LEDGER_KEY, SQLAlchemyRefreshTokenLedger())


def create_app(
    config: str | type[BaseConfig] | object | None = None,
    *,
    instance_relative_config: bool = True,
    instance_config_filename: str = "config.py",
) -> Flask:
    """Build and configure the Flask application."""

    app = Flask(__name__, instance_relative_config=instance_relative_config)

    app.config.from_object(get_config() if config is None else config)
    if instance_relative_config and instance_config_filename:
        app.config.from_pyfile(instance_config_filename, silent=True)

    configure_logging(app.config.get("LOG_LEVEL", "INFO"))

    # Proxy headers if running behind a reverse proxy (client IPs land on the ledger)
    from catalog.core import proxy

    proxy.init_app(app)

    from catalog.core import extensions

    extensions.init_app(app)

    init_logging(app)

    from catalog.core import cors

    cors.init_app(app)

    _init_auth_adapters(app)

    from catalog.api import init_app as init_api

    init_api(app)

    from catalog.core import errors

    errors.init_app(app)

    from catalog import cli as app_cli

    app_cli.init_app(app)

    return app
