"""Shared pytest fixtures for hello_form tests."""

from __future__ import annotations

from collections.abc import Iterator

import pytest
from flask import Flask
from flask.testing import FlaskClient

from hello_form import create_app
from hello_form.handoff import HandoffStore


@pytest.fixture
def app() -> Iterator[Flask]:
    app = create_app({"TESTING": True, "SECRET_KEY": "test-secret"})
    yield app


@pytest.fixture
def client(app: Flask) -> FlaskClient:
    return app.test_client()


@pytest.fixture
def backend() -> dict:
    """Plain dict standing in for the Flask session."""
    return {}


@pytest.fixture
def store(backend: dict) -> HandoffStore:
    return HandoffStore(backend=backend)
