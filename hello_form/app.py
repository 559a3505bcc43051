from __future__ import annotations

from collections.abc import Mapping
from typing import Any

from flask import Flask, redirect, url_for

from hello_form.config import ensure_secret_key, load_config
from hello_form.handoff import HandoffStore
from hello_form.rules import build_rule_table
from hello_form.views import bp

# Both pages are plain server-rendered HTML: no scripts, styles, images or
# frames. Forms post back to this origin only.
CSP = (
    "default-src 'none'; "
    "frame-ancestors 'none'; "           # Anti-clickjacking (modern)
    "base-uri 'none'; "
    "form-action 'self'"
)

PERMISSIONS_POLICY = (
    "camera=(), microphone=(), geolocation=(), "
    "fullscreen=(), clipboard-read=(), clipboard-write=()"
)

SECURITY_HEADERS = {
    "Content-Security-Policy": CSP,
    "X-Frame-Options": "DENY",  # Legacy anti-clickjacking; CSP already covers it.
    "Permissions-Policy": PERMISSIONS_POLICY,
    "X-Content-Type-Options": "nosniff",
    "Referrer-Policy": "no-referrer",
    "Cross-Origin-Resource-Policy": "same-origin",
    "Cross-Origin-Opener-Policy": "same-origin",
    "Server": "secure",
    # Pages show the submitted name and date: never cache them
    "Cache-Control": "no-store",
    "Pragma": "no-cache",
}


def add_security_headers(resp):
    resp.headers.update(SECURITY_HEADERS)
    return resp


def create_app(config: Mapping[str, Any] | None = None) -> Flask:
    app = Flask(__name__)
    load_config(app, config)
    ensure_secret_key(app)

    app.extensions["rule_table"] = build_rule_table(app.config["NAME_MAX_LENGTH"])
    app.extensions["handoff_store"] = HandoffStore(key=app.config["HANDOFF_KEY"])

    app.register_blueprint(bp)
    app.after_request(add_security_headers)

    @app.route("/health")
    def health():
        return "ok", 200

    # Unknown paths land back on the entry page.
    @app.errorhandler(404)
    def not_found(_error):
        return redirect(url_for("form.entry"))

    return app
