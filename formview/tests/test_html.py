"""
HTML helpers: attribute rendering, class merging and select options.

Why:
    Every widget funnels its options through these helpers, so attribute order,
    boolean handling and escaping must be stable for literal markup asserts.
"""

from __future__ import annotations

from formview.html import (
    add_css_class,
    input_tag,
    label_tag,
    normalize_selection,
    remove_css_class,
    render_select_options,
    render_tag_attributes,
    tag,
)


def test_priority_attributes_come_first() -> None:
    assert render_tag_attributes({"name": "q", "type": "text", "required": True}) == ' type="text" name="q" required'


def test_false_none_and_empty_class_are_omitted() -> None:
    assert render_tag_attributes({"disabled": False, "title": None, "class": ""}) == ""


def test_data_and_aria_mappings_expand() -> None:
    html = render_tag_attributes({"data": {"id": 5, "role": "x"}, "aria": {"hidden": True}})
    assert html == ' data-id="5" data-role="x" aria-hidden="true"'


def test_style_mapping_is_serialized() -> None:
    html = render_tag_attributes({"style": {"color": "red", "display": "none"}})
    assert html == ' style="color: red; display: none;"'


def test_attribute_values_are_escaped() -> None:
    assert render_tag_attributes({"value": '"<>&'}) == ' value="&quot;&lt;&gt;&amp;"'


def test_add_and_remove_css_class() -> None:
    options = {"class": "a b"}
    add_css_class(options, "b c")
    assert options["class"] == "a b c"

    remove_css_class(options, ["a", "b", "c"])
    assert "class" not in options


def test_tag_content_escaping_is_opt_in() -> None:
    assert tag("br") == "<br>"
    assert tag("div", "<b>x</b>") == "<div><b>x</b></div>"
    assert tag("div", "<b>x</b>", encode_content=True) == "<div>&lt;b&gt;x&lt;/b&gt;</div>"


def test_input_and_label_tags() -> None:
    assert input_tag("text", "q", None, {"class": "x"}) == '<input type="text" class="x" name="q">'
    assert label_tag("A & B", "q") == '<label for="q">A &amp; B</label>'


def test_select_options_with_prompt_groups_and_item_options() -> None:
    html = render_select_options(
        ["2"],
        {"1": "One", "Group": {"2": "Two", "3": "Three"}},
        {"prompt": "Pick", "options": {"3": {"disabled": True}}},
    )
    assert html == (
        '<option value="">Pick</option>\n'
        '<option value="1">One</option>\n'
        '<optgroup label="Group">\n'
        '<option value="2" selected>Two</option>\n'
        '<option value="3" disabled>Three</option>\n'
        "</optgroup>"
    )


def test_select_options_encode_spaces() -> None:
    assert render_select_options(None, {"a": "x y"}, {"encode_spaces": True}) == '<option value="a">x&nbsp;y</option>'


def test_normalize_selection() -> None:
    assert normalize_selection(None) == set()
    assert normalize_selection(3) == {"3"}
    assert normalize_selection([1, "2"]) == {"1", "2"}


def test_bool_values_post_as_one_and_zero() -> None:
    assert input_tag("hidden", "flag", True) == '<input type="hidden" name="flag" value="1">'
    assert input_tag("hidden", "flag", False) == '<input type="hidden" name="flag" value="0">'
    assert normalize_selection(True) == {"1"}
    assert normalize_selection([False]) == {"0"}
