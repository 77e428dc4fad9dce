#!/usr/bin/env python3

import logging
import sys

from jinja2 import TemplateError
from waitress import serve

from tinywiki.app import TinyWiki


def main():
    try:
        wiki = TinyWiki()
    except (TemplateError, OSError, ValueError) as e:
        logging.basicConfig(level=logging.ERROR)
        logging.getLogger("tinywiki").critical(f"Wiki failed to start: {e}")
        sys.exit(1)

    app = wiki.app
    app.logger.info(f"Serving on {app.config['HOST']}:{app.config['PORT']}")
    try:
        serve(
            app,
            host=app.config["HOST"],
            port=app.config["PORT"],
            threads=app.config["THREADS"],
        )
    except OSError as e:
        app.logger.critical(f"Could not listen on port {app.config['PORT']}: {e}")
        sys.exit(1)


if __name__ == "__main__":
    main()
