from flask_wtf import FlaskForm
from wtforms import TextAreaField, SubmitField


class PageForm(FlaskForm):
    body = TextAreaField(
        "Body",
        default="",
        render_kw={"rows": 20, "cols": 80},
    )
    submit = SubmitField(label="Save")
