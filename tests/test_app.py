"""Tests for the inspection API endpoints."""

from __future__ import annotations

import pytest
from fastapi.responses import JSONResponse

from tiller_env import app
from tiller_env.services.environment_override import EnvironmentOverrideSource


@pytest.fixture
def fixed_source(monkeypatch: pytest.MonkeyPatch) -> EnvironmentOverrideSource:
    """Serve a source backed by a fixed environment."""
    source = EnvironmentOverrideSource({"HOME": "/root", "PATH": "/usr/bin"})
    monkeypatch.setattr(app, "_data_source", source)
    return source


def test_ping__reports_ok() -> None:
    """Return the ping payload."""
    assert app.ping() == {"ping": "Tiller API v2 OK"}


def test_get_globals__returns_lowercased_environment(
    fixed_source: EnvironmentOverrideSource,
) -> None:
    """Serve the data source's global values."""
    assert app.get_globals() == {"home": "/root", "path": "/usr/bin"}


def test_get_globals__defaults_to_process_environment(monkeypatch: pytest.MonkeyPatch) -> None:
    """Read the live process environment with the default source."""
    monkeypatch.setenv("TILLER_ENV_APP_VAR", "from-env")

    assert app.get_globals()["tiller_env_app_var"] == "from-env"


def test_get_template__returns_empty_values(fixed_source: EnvironmentOverrideSource) -> None:
    """Return empty per-template values for the environment source."""
    result = app.get_template(template_name="app.conf")

    assert result == {"values": {}, "target_values": {}}


@pytest.mark.parametrize("name", ["", "../escape", "dir/app.conf", "dir\\app.conf"])
def test_get_template__rejects_unsafe_name(name: str) -> None:
    """Return 400 JSONResponse for names that could escape the template directory."""
    response = app.get_template(template_name=name)

    assert isinstance(response, JSONResponse)
    assert response.status_code == 400
    assert b"invalid template name" in response.body.lower()


@pytest.mark.parametrize(
    ("name", "expected"),
    [
        ("app.conf", True),
        ("nginx.conf.erb", True),
        ("", False),
        ("..", False),
        ("a/b", False),
        ("a\\b", False),
    ],
)
def test_is_template_name_safe(name: str, expected: bool) -> None:
    """Accept plain names and reject path-like ones."""
    assert app.is_template_name_safe(name) is expected
