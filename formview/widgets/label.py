"""
Text widgets around an input: label, hint and error block.
"""

from ..html import encode, label_tag, tag
from ..model import get_input_id
from .base import FormWidget


class Label(FormWidget):
    """``<label>`` for an attribute.

    Special options:
        label: Text to use instead of `FormModel.attribute_label()`.
        for: Target id; defaults to the derived input id, None omits it.
        encode: Escape the label text (default True).
    """

    def render(self) -> str:
        options = dict(self.options)
        label = options.pop("label", None)
        if label is None:
            label = self.form.attribute_label(self.attribute)
        encode_content = options.pop("encode", True)
        if "for" not in options:
            # The "id" option belongs to the label itself, not to the input.
            options["for"] = get_input_id(self.form, self.attribute)
        return label_tag(label, None, options, encode_content=encode_content)


class Hint(FormWidget):
    """Hint block; renders nothing when the attribute has no hint.

    Special options:
        hint: Text to use instead of `FormModel.attribute_hint()`.
        tag: Tag name (default ``div``).
        encode: Escape the hint text (default True).
    """

    def render(self) -> str:
        options = dict(self.options)
        content = options.pop("hint", None)
        if content is None:
            content = self.form.attribute_hint(self.attribute)
        tag_name = options.pop("tag", "div")
        encode_content = options.pop("encode", True)
        if not content:
            return ""
        return tag(tag_name, content, options, encode_content=encode_content)


class Error(FormWidget):
    """Error block for an attribute; always rendered, empty when valid.

    Special options:
        tag: Tag name (default ``div``).
        encode: Escape messages (default True).
        show_all_errors: Render every message separated by ``<br>``
            instead of the first one.
    """

    def render(self) -> str:
        options = dict(self.options)
        tag_name = options.pop("tag", "div")
        encode_content = options.pop("encode", True)
        show_all = options.pop("show_all_errors", False)

        if show_all:
            messages = self.form.get_errors(self.attribute)
        else:
            first = self.form.first_error(self.attribute)
            messages = [first] if first else []
        if encode_content:
            messages = [encode(message) for message in messages]
        return tag(tag_name, "<br>\n".join(messages), options)
