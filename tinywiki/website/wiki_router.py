from flask import (
    render_template,
    request,
    current_app,
    Blueprint,
    redirect,
)
from jinja2 import TemplateError
from werkzeug.routing import BaseConverter

from tinywiki.exceptions import PageNotFound
from tinywiki.page_store import Page, PageStore
from tinywiki.util.form_body import raw_form_value
from tinywiki.util.links import TITLE_PATTERN, render_links
from tinywiki.website.forms.edit_page import PageForm

wiki_route = Blueprint("wiki", __name__)

STORE_KEY = "tinywiki.page_store"


class PageTitleConverter(BaseConverter):
    """
    Matches a single path segment made of ascii letters and digits only.
    Any other title never reaches a handler, so it can't reach the filesystem either.
    """
    regex = TITLE_PATTERN


def get_store() -> PageStore:
    return current_app.extensions[STORE_KEY]


def plain_error(message, status=500):
    return message, status, {"Content-Type": "text/plain; charset=utf-8"}


def render_page(template_name, **context):
    try:
        return render_template(f"{template_name}.html", **context)
    except TemplateError as e:
        current_app.logger.error(f"Failed to render {template_name}.html: {e}")
        return plain_error(str(e))


@wiki_route.route("/view/<title:title>", methods=["GET"])
def view(title):
    try:
        page = get_store().load(title)
    except PageNotFound as e:
        current_app.logger.debug(f"{e}, redirecting to editor")
        return redirect(f"/edit/{title}")

    page.body = render_links(page.body)
    return render_page("view", page=page)


@wiki_route.route("/edit/<title:title>", methods=["GET"])
def edit(title):
    try:
        page = get_store().load(title)
    except PageNotFound:
        page = Page(title=title)

    form = PageForm(formdata=None, body=page.text)
    return render_page("edit", page=page, form=form)


@wiki_route.route("/save/<title:title>", methods=["POST"])
def save(title):
    # CSRFProtect has already checked the token when it is enabled.
    # Urlencoded bodies are stored byte for byte, other encodings as UTF-8.
    body = raw_form_value(request, "body")
    if body is None:
        form = PageForm()
        body = (form.body.data or "").encode("utf-8")
    page = Page(title=title, body=body)
    try:
        get_store().save(page)
    except OSError as e:
        current_app.logger.error(f"Failed to save page {title}: {e}")
        return plain_error(str(e))

    current_app.logger.info(f"Saved page {title} ({len(page.body)} bytes)")
    return redirect(f"/view/{title}")
