# WSGI entry point, e.g. `waitress-serve wsgi:app` or `gunicorn wsgi:app`
from tinywiki.app import TinyWiki

wiki = TinyWiki()
app = wiki.app
