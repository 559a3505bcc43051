"""Entry and response pages."""

from __future__ import annotations

from functools import wraps

import structlog
from flask import Blueprint, current_app, redirect, render_template_string, request, url_for
from markupsafe import Markup

from hello_form.handoff import HandoffStore, Submission
from hello_form.rules import DATE_INVALID
from hello_form.sanitizer import normalize_whitespace, sanitize_date, sanitize_input, sanitize_name
from hello_form.validation import ValidationSession

log = structlog.get_logger(__name__)

bp = Blueprint("form", __name__)

APP_NAME = "HelloWorld"

_HEAD = """<!doctype html>
<html lang="en">
<head>
<meta charset="utf-8">
<title>{{ title }} - """ + APP_NAME + """</title>
<meta name="description" content="{{ description }}">
</head>
<body>
<main id="main-content">
"""

_FOOT = """
</main>
</body>
</html>
"""

ENTRY_PAGE = _HEAD + """<h1>Welcome</h1>
{% if has_errors %}
<div role="alert"><p>Please correct the errors below.</p></div>
{% endif %}
<form method="post" action="{{ url_for('form.entry') }}" novalidate>
  <label for="name">Name (required)</label>
  <input id="name" name="name" type="text" autocomplete="name" value="{{ values.name }}"
    {%- if errors.name %} aria-invalid="true" aria-describedby="name-error"{% endif %}>
  {% if errors.name %}<p id="name-error">Error: {{ errors.name }}</p>{% endif %}
  <label for="date">Date (required)</label>
  <input id="date" name="date" type="date" value="{{ values.date }}"
    {%- if errors.date %} aria-invalid="true" aria-describedby="date-error"{% endif %}>
  {% if errors.date %}<p id="date-error">Error: {{ errors.date }}</p>{% endif %}
  <button type="submit">Submit</button>
</form>
""" + _FOOT

RESPONSE_PAGE = _HEAD + """<h1>{{ greeting }}</h1>
<p>Your date: <time datetime="{{ date }}">{{ date }}</time></p>
<form method="post" action="{{ url_for('form.reset') }}">
  <button type="submit">Start over</button>
</form>
""" + _FOOT


def get_store() -> HandoffStore:
    return current_app.extensions["handoff_store"]


def require_submission(view):
    """Send the user back to the entry page when there is nothing to show."""

    @wraps(view)
    def guarded(*args, **kwargs):
        if not get_store().exists():
            log.debug("response_guard_redirect", path=request.path)
            return redirect(url_for("form.entry"))
        return view(*args, **kwargs)

    return guarded


def render_entry(values, validation: ValidationSession, status: int = 200):
    html = render_template_string(
        ENTRY_PAGE,
        title="Welcome",
        description="Enter your information to receive a personalized greeting",
        values=values,
        errors=validation.errors,
        has_errors=validation.has_errors,
    )
    return html, status


@bp.get("/")
def entry():
    previous = get_store().load()
    values = previous.model_dump() if previous else {"name": "", "date": ""}
    return render_entry(values, ValidationSession(rules=current_app.extensions["rule_table"]))


@bp.post("/")
def submit():
    store = get_store()
    # A new attempt replaces whatever the last one left behind.
    store.clear()

    raw_date = normalize_whitespace(request.form.get("date"))
    values = {
        "name": sanitize_name(request.form.get("name")),
        "date": sanitize_date(raw_date),
    }
    validation = ValidationSession(rules=current_app.extensions["rule_table"])
    validation.validate_form(values)
    if raw_date and not values["date"]:
        validation.set_error("date", DATE_INVALID)

    if validation.has_errors:
        failed = sorted(field for field, message in validation.errors.items() if message)
        log.info("submission_rejected", fields=failed)
        return render_entry({**values, "date": values["date"] or raw_date}, validation, 400)

    store.save(Submission(**values))
    log.info("submission_accepted")
    return redirect(url_for("form.response"), code=303)


@bp.get("/response")
@require_submission
def response():
    submission = get_store().load()
    if submission is None:
        return redirect(url_for("form.entry"))

    greeting = Markup(f"Hello {sanitize_input(submission.name)}!")
    return render_template_string(
        RESPONSE_PAGE,
        title="Your Greeting",
        description="View your personalized greeting",
        greeting=greeting,
        date=submission.date,
    )


@bp.post("/reset")
def reset():
    get_store().clear()
    return redirect(url_for("form.entry"), code=303)
