import os
from pathlib import Path

ENV_PREFIX = "WIKI_"


class Config:
    DATA_DIR = "data"
    FRONT_PAGE = "FrontPage"

    HOST = "0.0.0.0"
    PORT = 3000
    THREADS = 4

    LOG_DIR = "logs"
    LOG_NAME = "wiki.log"
    LOG_LEVEL = "DEBUG"

    SECRET_KEY = None
    SECRET_FILE = str(Path("conf") / "secret_key")
    WTF_CSRF_ENABLED = False

    RATELIMIT_ENABLED = True
    RATELIMIT_STORAGE_URI = "memory://"
    SAVE_RATE_LIMIT = "60 per minute"

    MAX_CONTENT_LENGTH = 10 * 1024 * 1024  # 10 MB
    MAX_FORM_MEMORY_SIZE = 10 * 1024 * 1024


def _coerce(default, raw: str):
    if isinstance(default, bool):
        return raw.strip().lower() in ("1", "true", "yes", "on")
    if isinstance(default, int):
        return int(raw)
    return raw


def load_config(environ=None) -> dict:
    """
    Returns the default settings overlaid with WIKI_* environment variables,
    e.g. WIKI_PORT=8080 or WIKI_DATA_DIR=/srv/wiki.
    Values are converted to the type of the default where it has one.
    """
    if environ is None:
        environ = os.environ

    config = {
        key: getattr(Config, key) for key in dir(Config) if key.isupper()
    }
    for key, default in config.items():
        raw = environ.get(ENV_PREFIX + key)
        if raw is None:
            continue
        try:
            config[key] = _coerce(default, raw)
        except ValueError as e:
            raise ValueError(f"Invalid value for {ENV_PREFIX}{key}: {raw!r}") from e
    return config
