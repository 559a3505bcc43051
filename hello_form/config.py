"""Default configuration, overridable with ``HELLO_FORM_*`` environment variables."""

from __future__ import annotations

import secrets
from collections.abc import Mapping
from typing import Any

import structlog
from flask import Flask

from hello_form.handoff import HANDOFF_KEY
from hello_form.rules import NAME_MAX_LENGTH

log = structlog.get_logger(__name__)

ENV_PREFIX = "HELLO_FORM"


class DefaultConfig:
    SECRET_KEY = None
    NAME_MAX_LENGTH = NAME_MAX_LENGTH
    HANDOFF_KEY = HANDOFF_KEY
    LOG_JSON = False
    LOG_VERBOSE = False
    SESSION_COOKIE_HTTPONLY = True
    SESSION_COOKIE_SAMESITE = "Lax"
    HOST = "0.0.0.0"
    PORT = 8080


def load_config(app: Flask, overrides: Mapping[str, Any] | None = None) -> None:
    """Fill ``app.config`` from defaults, the environment, then ``overrides``."""
    app.config.from_object(DefaultConfig)
    app.config.from_prefixed_env(ENV_PREFIX)
    if overrides:
        app.config.update(overrides)


def ensure_secret_key(app: Flask) -> None:
    if app.config["SECRET_KEY"]:
        return
    # Sessions signed with a generated key do not survive a restart.
    app.config["SECRET_KEY"] = secrets.token_hex(32)
    log.warning("secret_key_generated", env_var=f"{ENV_PREFIX}_SECRET_KEY")
