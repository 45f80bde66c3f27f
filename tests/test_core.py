"""Tests for shared building blocks."""

import pytest

from core import db, results
from core.config import env_bool, env_int, get_settings


@pytest.fixture
def clean_settings():
    get_settings.cache_clear()
    yield
    get_settings.cache_clear()


def test_env_int_falls_back_on_garbage(monkeypatch):
    monkeypatch.setenv("DB_POOL_MAX_SIZE", "lots")
    assert env_int("DB_POOL_MAX_SIZE", 5) == 5


def test_env_bool(monkeypatch):
    monkeypatch.setenv("DB_INIT_SCHEMA", "Yes")
    assert env_bool("DB_INIT_SCHEMA") is True
    monkeypatch.setenv("DB_INIT_SCHEMA", "0")
    assert env_bool("DB_INIT_SCHEMA") is False


def test_settings_read_environment(monkeypatch, clean_settings):
    monkeypatch.setenv("DATABASE_URL", "postgresql://u:p@db/reviews")
    monkeypatch.setenv("DB_POOL_MAX_SIZE", "12")
    monkeypatch.setenv("CORS_ORIGINS", "https://a.example, https://b.example")

    settings = get_settings()

    assert settings.database_url == "postgresql://u:p@db/reviews"
    assert settings.pool_max_size == 12
    assert settings.cors_origins == ("https://a.example", "https://b.example")


def test_database_url_is_required(monkeypatch, clean_settings):
    monkeypatch.delenv("DATABASE_URL", raising=False)

    with pytest.raises(RuntimeError, match="DATABASE_URL"):
        db.database_url()


def test_database_url_drops_sslmode(monkeypatch, clean_settings):
    monkeypatch.setenv("DATABASE_URL", "postgresql://db/reviews?sslmode=require&application_name=api")

    assert db.database_url() == "postgresql://db/reviews?application_name=api"


@pytest.mark.parametrize(
    ("command_status", "expected"),
    [("DELETE 1", 1), ("DELETE 0", 0), ("INSERT 0 3", 3), ("CREATE TABLE", 0), ("", 0)],
)
def test_rows_affected(command_status, expected):
    assert db.rows_affected(command_status) == expected


def test_pool_must_be_initialized():
    with pytest.raises(RuntimeError, match="not initialized"):
        db.pool()


def test_to_response_without_body_is_empty():
    resp = results.to_response(results.not_found())

    assert resp.status_code == 404
    assert resp.body == b""


def test_to_response_keeps_false_body_and_location():
    resp = results.to_response(results.created(False, location="/reviews/9"))

    assert resp.status_code == 201
    assert resp.body == b"false"
    assert resp.headers["location"] == "/reviews/9"


def test_bad_request_is_a_400_with_the_reason():
    exc = results.bad_request("id must be greater than 0")

    assert exc.status_code == 400
    assert exc.detail == "id must be greater than 0"
