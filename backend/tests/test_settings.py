# tests/test_settings.py

import logging

from scientometrics.config import Settings
from scientometrics.logging_setup import setup_logging


def test_serpapi_defaults():
    settings = Settings()

    assert settings.serpapi.base_url == "https://serpapi.com/search"
    assert settings.serpapi.engine == "google_scholar"
    assert settings.serpapi.timeout == 30
    assert settings.default_max_articles == 3


def test_nested_env_override(monkeypatch):
    monkeypatch.setenv("SERPAPI__ENGINE", "google_scholar_author")
    monkeypatch.setenv("LOGGING__LEVEL", "DEBUG")

    settings = Settings()

    assert settings.serpapi.engine == "google_scholar_author"
    assert settings.logging.level == "DEBUG"


def test_yaml_settings_file(tmp_path, monkeypatch):
    (tmp_path / "settings.yaml").write_text(
        "default_max_articles: 5\nserpapi:\n  base_url: https://serp.test/search\n",
        encoding="utf-8",
    )
    monkeypatch.chdir(tmp_path)

    settings = Settings()

    assert settings.default_max_articles == 5
    assert settings.serpapi.base_url == "https://serp.test/search"


def test_setup_logging_writes_rotating_file(tmp_path):
    config = Settings().logging.model_copy(update={"log_dir": str(tmp_path / "logs"), "level": "info"})

    setup_logging(config)
    logging.getLogger("scientometrics.test").info("hello log")

    log_file = tmp_path / "logs" / config.log_file
    for handler in logging.getLogger().handlers:
        handler.flush()
    assert "hello log" in log_file.read_text(encoding="utf-8")

    setup_logging(config, to_file=False)
