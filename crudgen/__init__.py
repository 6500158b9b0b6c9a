"""
Crudgen - CRUD resource generator for Phoenix-style web applications

Generates the controller, HTML templates, view and controller test for a
resource, and optionally its model and migration.
"""

__version__ = "0.1.0"

from crudgen.binding import ResourceBinding, assemble
from crudgen.html import generate_html, generate_resource
from crudgen.model import EctoModelGenerator, generate_model
from crudgen.naming import NamingBinding, compose_route, inflect
from crudgen.resource import Attribute, ResourceDescriptor, TypeTag

__all__ = [
    "Attribute",
    "EctoModelGenerator",
    "NamingBinding",
    "ResourceBinding",
    "ResourceDescriptor",
    "TypeTag",
    "assemble",
    "compose_route",
    "generate_html",
    "generate_model",
    "generate_resource",
    "inflect",
]
