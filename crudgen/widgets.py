"""
Crudgen Widgets - form field markup for each attribute type

Maps a typed attribute to the EEx form helpers used by the generated
form template. Arrays and references get no widget.
"""

from __future__ import annotations

from pydantic import BaseModel

from crudgen.naming import humanize
from crudgen.resource import Attribute, TypeTag

INPUT_CLASS = "form-control"
LABEL_CLASS = "control-label"


class WidgetSpec(BaseModel):
    """Form markup for one attribute; all ``None`` when excluded from forms"""

    param_key: str | None = None
    label: str | None = None
    input: str | None = None

    model_config = {"frozen": True}

    @property
    def excluded(self) -> bool:
        return self.input is None


# helper name, extra options
_INPUT_HELPERS: dict[TypeTag, tuple[str, str]] = {
    TypeTag.INTEGER: ("number_input", ""),
    TypeTag.FLOAT: ("number_input", 'step: "any", '),
    TypeTag.DECIMAL: ("number_input", 'step: "any", '),
    TypeTag.BOOLEAN: ("checkbox", ""),
    TypeTag.TEXT: ("textarea", ""),
    TypeTag.DATE: ("date_select", ""),
    TypeTag.TIME: ("time_select", ""),
    TypeTag.DATETIME: ("datetime_select", ""),
}

_DEFAULT_HELPER = ("text_input", "")


def atom(key: str) -> str:
    """Render a name as an Elixir atom literal"""
    return f":{key}"


def label_markup(key: str) -> str:
    return f'<%= label f, {atom(key)}, "{humanize(key)}", class: "{LABEL_CLASS}" %>'


def input_markup(attr: Attribute) -> str | None:
    """EEx input helper call for ``attr``, or ``None`` for arrays and references"""
    if attr.is_relational:
        return None
    helper, options = _INPUT_HELPERS.get(attr.type, _DEFAULT_HELPER)
    return f'<%= {helper} f, {atom(attr.name)}, {options}class: "{INPUT_CLASS}" %>'


def widget_for(attr: Attribute) -> WidgetSpec:
    """Map one attribute to its form widget"""
    markup = input_markup(attr)
    if markup is None:
        return WidgetSpec()
    return WidgetSpec(param_key=attr.name, label=label_markup(attr.name), input=markup)


def widgets_for(attrs: list[Attribute] | tuple[Attribute, ...]) -> list[WidgetSpec]:
    """Map attributes to widgets, one per attribute, in order"""
    return [widget_for(a) for a in attrs]
