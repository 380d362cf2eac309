"""
Tests for settings loaded from the environment.
"""

from named_queries.config import Settings, get_settings


def test_defaults(monkeypatch):
    for var in ("MONGO_URI", "MONGO_DB_NAME", "PORT", "DISTINCT_ERROR_STATUSES"):
        monkeypatch.delenv(var, raising=False)

    settings = Settings(_env_file=None)

    assert settings.mongo_uri == "mongodb://localhost:27017"
    assert settings.mongo_db_name == "named-queries"
    assert settings.port == 4000
    assert settings.distinct_error_statuses is False


def test_reads_port_and_connection_string_from_environment(monkeypatch):
    monkeypatch.setenv("PORT", "8080")
    monkeypatch.setenv("MONGO_URI", "mongodb://db.internal:27017")
    monkeypatch.setenv("DISTINCT_ERROR_STATUSES", "true")

    settings = Settings(_env_file=None)

    assert settings.port == 8080
    assert settings.mongo_uri == "mongodb://db.internal:27017"
    assert settings.distinct_error_statuses is True


def test_get_settings_is_cached():
    get_settings.cache_clear()

    assert get_settings() is get_settings()


def test_configure_logging_uses_level_and_format(monkeypatch):
    import logging

    from named_queries.main import LOG_FORMAT, configure_logging

    calls = []
    monkeypatch.setattr(logging, "basicConfig", lambda **kwargs: calls.append(kwargs))

    configure_logging(Settings(_env_file=None, log_level="warning"))

    assert calls[0]["level"] == logging.WARNING
    assert calls[0]["format"] == LOG_FORMAT == "%(asctime)s | %(levelname)s | %(message)s"
