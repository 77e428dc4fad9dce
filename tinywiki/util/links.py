import re

TITLE_PATTERN = "[a-zA-Z0-9]+"

# Compiled once, shared read-only by every request thread.
LINK_RE = re.compile(rb"\[(" + TITLE_PATTERN.encode("ascii") + rb")\]")


def _anchor(match: re.Match) -> bytes:
    token = match.group(1)
    return b'<a href="/view/' + token + b'">' + token + b"</a>"


def render_links(body: bytes) -> bytes:
    """
    Turns every `[PageName]` in the body into a link to /view/PageName.
    Tokens that are not plain ascii letters and digits are left untouched.
    """
    return LINK_RE.sub(_anchor, body)
