import logging
import os
from typing import Any, Dict

import pytest
from jinja2 import TemplateNotFound, TemplateSyntaxError

from tinywiki.app import TEMPLATE_DIR, TinyWiki
from tinywiki.config import Config, load_config


def test_missing_templates_stop_startup(wiki_config: Dict[str, Any], tmp_path) -> None:
    empty_dir = tmp_path / "no_templates"
    empty_dir.mkdir()
    with pytest.raises(TemplateNotFound):
        TinyWiki(config=wiki_config, template_folder=empty_dir)


def test_malformed_template_stops_startup(wiki_config: Dict[str, Any], tmp_path) -> None:
    template_dir = tmp_path / "templates"
    template_dir.mkdir()
    (template_dir / "view.html").write_text("{% if %}broken")
    (template_dir / "edit.html").write_text((TEMPLATE_DIR / "edit.html").read_text())
    with pytest.raises(TemplateSyntaxError):
        TinyWiki(config=wiki_config, template_folder=template_dir)


def test_store_uses_configured_data_dir(wiki: TinyWiki, wiki_config: Dict[str, Any]) -> None:
    assert wiki.store.data_dir == wiki_config["DATA_DIR"]
    assert not os.path.exists(wiki_config["DATA_DIR"])


def test_logger_writes_to_configured_dir(wiki: TinyWiki, wiki_config: Dict[str, Any]) -> None:
    log_path = os.path.join(wiki_config["LOG_DIR"], Config.LOG_NAME)
    assert os.path.exists(log_path)
    assert wiki.app.logger.level == logging.WARNING


def test_front_page_is_configurable(wiki_config: Dict[str, Any]) -> None:
    wiki = TinyWiki(config={**wiki_config, "FRONT_PAGE": "Home"})
    response = wiki.app.test_client().get("/")
    assert response.headers["Location"] == "/view/Home"


def test_secret_is_generated_once_and_reused(wiki_config: Dict[str, Any], tmp_path) -> None:
    secret_file = tmp_path / "conf" / "secret_key"
    config = {**wiki_config, "SECRET_KEY": None, "SECRET_FILE": str(secret_file)}

    first = TinyWiki(config=config)
    assert secret_file.exists()
    second = TinyWiki(config=config)
    assert first.app.secret_key == second.app.secret_key == secret_file.read_text()


def test_load_config_defaults() -> None:
    config = load_config({})
    assert config["PORT"] == 3000
    assert config["DATA_DIR"] == "data"
    assert config["FRONT_PAGE"] == "FrontPage"
    assert config["WTF_CSRF_ENABLED"] is False


def test_load_config_reads_environment() -> None:
    config = load_config(
        {
            "WIKI_PORT": "8080",
            "WIKI_DATA_DIR": "/srv/wiki",
            "WIKI_RATELIMIT_ENABLED": "false",
            "WIKI_WTF_CSRF_ENABLED": "yes",
            "PORT": "1",
        }
    )
    assert config["PORT"] == 8080
    assert config["DATA_DIR"] == "/srv/wiki"
    assert config["RATELIMIT_ENABLED"] is False
    assert config["WTF_CSRF_ENABLED"] is True


def test_load_config_rejects_bad_numbers() -> None:
    with pytest.raises(ValueError, match="WIKI_PORT"):
        load_config({"WIKI_PORT": "lots"})
