import os
import secrets
from pathlib import Path

from flask import Flask, request, redirect
from flask_wtf import CSRFProtect
from jinja2 import StrictUndefined
from werkzeug.middleware.proxy_fix import ProxyFix

from tinywiki.config import load_config
from tinywiki.limiter import init_limiter
from tinywiki.logger import setup_logger
from tinywiki.page_store import PageStore
from tinywiki.util.form_body import WikiRequest
from tinywiki.website.wiki_router import (
    STORE_KEY,
    PageTitleConverter,
    plain_error,
    wiki_route,
)

BASE_DIR = Path(__file__).resolve().parent
TEMPLATE_DIR = BASE_DIR / "templates"
TEMPLATE_NAMES = ("view.html", "edit.html")


class TinyWiki:
    def __init__(self, config=None, template_folder=TEMPLATE_DIR):
        """
        Builds the wiki application. Everything shared between requests
        (settings, url converters, parsed templates, the page store) is set up
        here once and only read afterwards.
        Args:
            config (dict): Overrides applied on top of the defaults and WIKI_* environment variables.
            template_folder (str | Path): Directory holding view.html and edit.html.
        Raises:
            jinja2.TemplateError: If a template is missing or malformed.
        """
        self.app = Flask(__name__, template_folder=str(template_folder))
        self.app.request_class = WikiRequest

        self.init_attributes(config)
        self.app = setup_logger(self.app)
        self.init_templates()

        CSRFProtect(self.app)

        self.app.register_blueprint(wiki_route)
        self.limiter = init_limiter(self.app)
        self.set_routes()
        self.app.logger.info(
            f"Wiki initialized, storing pages in {self.store.data_dir}"
        )

    def init_attributes(self, config):
        self.app.config.from_mapping(load_config())
        if config:
            self.app.config.from_mapping(config)

        self.app.wsgi_app = ProxyFix(self.app.wsgi_app, x_for=1, x_proto=1, x_host=1)
        if not self.app.config.get("SECRET_KEY"):
            self.app.secret_key = self.get_secret()

        self.app.url_map.converters["title"] = PageTitleConverter
        self.store = PageStore(self.app.config["DATA_DIR"])
        self.app.extensions[STORE_KEY] = self.store

    def init_templates(self):
        # Missing fields are render errors, not empty strings
        self.app.jinja_env.undefined = StrictUndefined

        # Parse up front so a broken template stops startup instead of a request
        for name in TEMPLATE_NAMES:
            self.app.jinja_env.get_template(name)
        self.app.logger.debug(f"Loaded templates: {', '.join(TEMPLATE_NAMES)}")

    def get_secret(self):
        secret_file = self.app.config["SECRET_FILE"]
        if os.path.exists(secret_file):
            with open(secret_file, "r", encoding="utf-8") as f:
                return f.read().strip()

        secret = secrets.token_hex(32)
        os.makedirs(os.path.dirname(secret_file) or ".", exist_ok=True)
        fd = os.open(secret_file, os.O_WRONLY | os.O_CREAT | os.O_TRUNC, 0o600)
        with os.fdopen(fd, "w", encoding="utf-8") as f:
            f.write(secret)
        return secret

    def set_routes(self):
        @self.app.before_request
        def log_request_info():
            self.app.logger.debug(
                f"{request.remote_addr} - {request.method} : {request.path}"
            )

        @self.app.route("/", methods=["GET"])
        def index():
            return redirect(f"/view/{self.app.config['FRONT_PAGE']}")

        @self.app.errorhandler(404)
        def not_found_error(e):
            return plain_error("404 page not found", 404)

        @self.app.errorhandler(500)
        def internal_error(e):
            self.app.logger.error(f"Internal server error: {e}")
            return plain_error("Internal server error")
