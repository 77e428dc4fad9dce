from flask import current_app
from flask_limiter import Limiter
from flask_limiter.util import get_remote_address

SAVE_ENDPOINT = "wiki.save"


def save_rate_limit():
    return current_app.config["SAVE_RATE_LIMIT"]


def init_limiter(app):
    """
    Builds a Limiter owned by this app and applies SAVE_RATE_LIMIT to the save route.
    Storage and the enabled flag come from RATELIMIT_* keys in app.config.
    Must run after the wiki blueprint is registered.
    """
    limiter = Limiter(
        key_func=get_remote_address,
        app=app,
    )
    app.view_functions[SAVE_ENDPOINT] = limiter.limit(save_rate_limit)(
        app.view_functions[SAVE_ENDPOINT]
    )
    app.logger.debug(
        f"Limiter initialized with {app.config['RATELIMIT_STORAGE_URI']} storage"
    )
    return limiter
