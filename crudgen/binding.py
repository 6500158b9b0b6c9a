"""
Crudgen Binding - the context every template is rendered with
"""

from __future__ import annotations

from typing import Any

from pydantic import BaseModel

from crudgen.naming import NamingBinding, compose_route, inflect
from crudgen.resource import Attribute, ResourceDescriptor, params_literal, sample_params
from crudgen.widgets import WidgetSpec, widgets_for


class ResourceBinding(BaseModel):
    """Naming variants, route, attributes and widgets of one resource"""

    naming: NamingBinding
    plural: str
    route: str
    attrs: tuple[Attribute, ...]
    inputs: tuple[WidgetSpec, ...]
    params: dict[str, str]
    template_singular: str
    template_plural: str

    model_config = {"frozen": True}

    @property
    def form_inputs(self) -> list[WidgetSpec]:
        """Widgets that render in the form (arrays and references excluded)"""
        return [w for w in self.inputs if not w.excluded]

    def context(self) -> dict[str, Any]:
        """Flatten into the variables templates see"""
        app_prefix = f"{self.naming.base}." if self.naming.base else ""
        return {
            **self.naming.model_dump(),
            "app_prefix": app_prefix,
            "web_module": f"{app_prefix}Web",
            "plural": self.plural,
            "route": self.route,
            "attrs": self.attrs,
            "inputs": self.inputs,
            "form_inputs": self.form_inputs,
            "params": self.params,
            "params_literal": params_literal(self.params),
            "template_singular": self.template_singular,
            "template_plural": self.template_plural,
        }


def assemble(resource: ResourceDescriptor, base: str = "") -> ResourceBinding:
    """Merge naming, route, attributes and widgets for ``resource``"""
    naming = inflect(resource.singular, base, resource.plural)
    return ResourceBinding(
        naming=naming,
        plural=resource.plural,
        route=compose_route(naming.path, resource.plural),
        attrs=resource.attributes,
        inputs=tuple(widgets_for(resource.attributes)),
        params=sample_params(resource.attributes),
        template_singular=naming.singular.replace("_", " "),
        template_plural=resource.plural.replace("_", " "),
    )


def route_instructions(binding: ResourceBinding) -> str:
    """Router snippet the user adds to register the resource"""
    return (
        "\nAdd the resource to your browser scope in web/router.ex:\n\n"
        f'    resources "/{binding.route}", {binding.naming.scoped}Controller\n'
    )
