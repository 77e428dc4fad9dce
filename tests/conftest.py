from typing import Any, Dict, Generator

import pytest
from flask import Flask
from flask.testing import FlaskClient

from tinywiki.app import TinyWiki
from tinywiki.page_store import PageStore


@pytest.fixture
def wiki_config(tmp_path) -> Dict[str, Any]:
    return {
        "TESTING": True,
        "SECRET_KEY": "test-secret",
        "DATA_DIR": str(tmp_path / "data"),
        "LOG_DIR": str(tmp_path / "logs"),
        "LOG_LEVEL": "WARNING",
        "RATELIMIT_ENABLED": False,
        "WTF_CSRF_ENABLED": False,
    }


@pytest.fixture
def wiki(wiki_config: Dict[str, Any]) -> TinyWiki:
    return TinyWiki(config=wiki_config)


@pytest.fixture
def app(wiki: TinyWiki) -> Flask:
    return wiki.app


@pytest.fixture
def client(app: Flask) -> Generator[FlaskClient, None, None]:
    with app.test_client() as client:
        yield client


@pytest.fixture
def store(wiki: TinyWiki) -> PageStore:
    return wiki.store
