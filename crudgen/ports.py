"""
Crudgen Ports - interfaces of the collaborators the generators call

The pure pipeline (naming, classification, widgets, binding) never touches
the filesystem; everything effectful sits behind these protocols.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Any, Protocol

if TYPE_CHECKING:
    from crudgen.generator import EmissionOutcome, GenerationResult


class TemplateEngine(Protocol):
    def emit(self, template: str, context: dict[str, Any], destination: str) -> EmissionOutcome: ...


class NameRegistry(Protocol):
    def check_available(self, name: str) -> None: ...


class ModelGenerator(Protocol):
    def run(self, args: list[str], instructions: str = "") -> GenerationResult: ...
