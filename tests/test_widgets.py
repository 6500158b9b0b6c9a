"""Tests for the attribute-to-form-widget mapping."""

from __future__ import annotations

import pytest

from crudgen.resource import classify, parse_attrs
from crudgen.widgets import WidgetSpec, widget_for, widgets_for


@pytest.mark.parametrize(
    "token, expected_input",
    [
        ("age:integer", '<%= number_input f, :age, class: "form-control" %>'),
        ("price:float", '<%= number_input f, :price, step: "any", class: "form-control" %>'),
        ("total:decimal", '<%= number_input f, :total, step: "any", class: "form-control" %>'),
        ("active:boolean", '<%= checkbox f, :active, class: "form-control" %>'),
        ("bio:text", '<%= textarea f, :bio, class: "form-control" %>'),
        ("born_on:date", '<%= date_select f, :born_on, class: "form-control" %>'),
        ("alarm:time", '<%= time_select f, :alarm, class: "form-control" %>'),
        ("published_at:datetime", '<%= datetime_select f, :published_at, class: "form-control" %>'),
        ("name:string", '<%= text_input f, :name, class: "form-control" %>'),
        ("token:uuid", '<%= text_input f, :token, class: "form-control" %>'),
        ("title", '<%= text_input f, :title, class: "form-control" %>'),
    ],
)
def test_input_markup_per_type(token: str, expected_input: str) -> None:
    assert widget_for(classify(token)).input == expected_input


def test_numeric_widget_key_and_label() -> None:
    widget = widget_for(classify("age:integer"))

    assert widget.param_key == "age"
    assert widget.label == '<%= label f, :age, "Age", class: "control-label" %>'
    assert "number_input" in widget.input


def test_label_is_humanized() -> None:
    widget = widget_for(classify("first_name:string"))
    assert '"First name"' in widget.label


@pytest.mark.parametrize("token", ["tags:array:string", "post_id:references:posts"])
def test_relational_attributes_have_no_widget(token: str) -> None:
    widget = widget_for(classify(token))

    assert widget == WidgetSpec(param_key=None, label=None, input=None)
    assert widget.excluded


def test_widgets_keep_attribute_order() -> None:
    attrs = parse_attrs(["name:string", "tags:array:string", "age:integer", "bio:text"])
    widgets = widgets_for(attrs)

    assert len(widgets) == len(attrs)
    assert [w.param_key for w in widgets] == ["name", None, "age", "bio"]
