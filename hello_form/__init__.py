"""Two-page greeting form: enter a name and a date, get a greeting back."""

from hello_form.app import create_app

__all__ = ["create_app"]
