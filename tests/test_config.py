"""
Tests for environment configuration and the role gate.
"""
import pytest

from settings_admin.config import env
from settings_admin.config import logger as log
from settings_admin.errors import AccessDenied
from settings_admin.ui.access import require_role


def test_defaults(monkeypatch):
    for key in ("SETTINGS_API_URL", "SETTINGS_API_TOKEN", "SETTINGS_API_TIMEOUT"):
        monkeypatch.delenv(key, raising=False)

    assert env.get_api_url() == "http://localhost:5000/api"
    assert env.get_api_token() is None
    assert env.get_api_timeout() == 30.0


def test_overrides(monkeypatch):
    monkeypatch.setenv("SETTINGS_API_URL", "https://admin.example.com/api/")
    monkeypatch.setenv("SETTINGS_API_TOKEN", " abc ")
    monkeypatch.setenv("SETTINGS_API_TIMEOUT", "0")

    assert env.get_api_url() == "https://admin.example.com/api"
    assert env.get_api_token() == "abc"
    assert env.get_api_timeout() is None


def test_invalid_timeout(monkeypatch):
    monkeypatch.setenv("SETTINGS_API_TIMEOUT", "soon")
    with pytest.raises(ValueError):
        env.get_api_timeout()


def test_logger_level_filtering(capsys):
    log.set_level("warn")
    try:
        log.info("test", "hidden")
        log.error("test", "shown", code=500)
    finally:
        log.set_level("info")
    err = capsys.readouterr().err
    assert "hidden" not in err
    assert "shown" in err
    with pytest.raises(ValueError):
        log.set_level("verbose")


def test_role_gate():
    require_role("admin")
    require_role(" Admin ")
    with pytest.raises(AccessDenied):
        require_role("editor")
    with pytest.raises(AccessDenied):
        require_role("")


def test_global_container_lifecycle(container):
    from settings_admin.container import get_container, reset_container, set_container

    reset_container()
    with pytest.raises(RuntimeError):
        get_container()
    set_container(container)
    try:
        assert get_container() is container
    finally:
        reset_container()


def test_logger_prints_brackets_literally(capsys):
    log.info("list.category", "created [draft]", name="Main [/i]")
    err = capsys.readouterr().err
    assert "[list.category]" in err
    assert "created [draft]" in err
    assert "name=Main [/i]" in err
