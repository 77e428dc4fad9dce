from typing import Optional
from urllib.parse import parse_qsl

from flask import Request

URLENCODED = "application/x-www-form-urlencoded"


class WikiRequest(Request):
    """
    Caches the raw body of urlencoded posts before the form is parsed, so the
    exact submitted bytes are still available after CSRFProtect or WTForms
    have read request.form.
    """

    def _load_form_data(self):
        if self.mimetype == URLENCODED:
            self.get_data(cache=True, parse_form_data=False)
        super()._load_form_data()


def raw_form_value(request, name: str) -> Optional[bytes]:
    """
    Returns the percent-decoded bytes of a urlencoded form field, without any
    charset decoding. None if the request is not urlencoded or lacks the field.
    """
    if request.mimetype != URLENCODED:
        return None

    # latin-1 maps every byte to one code point and back
    raw = request.get_data(cache=True, parse_form_data=False).decode("latin-1")
    for key, value in parse_qsl(raw, keep_blank_values=True, encoding="latin-1"):
        if key == name:
            return value.encode("latin-1")
    return None
