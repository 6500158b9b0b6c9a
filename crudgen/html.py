"""
Crudgen HTML Generator - controller, views, templates and controller test

    crudgen html User users name:string age:integer

The first argument is the module name followed by its plural name (used
for routes and the table). Scoped resources are written ``Admin.User``.
The model is generated too unless delegation is turned off.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import TYPE_CHECKING, Callable

from crudgen.binding import ResourceBinding, assemble, route_instructions
from crudgen.errors import DelegateFailure
from crudgen.generator import HTML_MANIFEST, GenerationResult, TemplateRenderer, emit_manifest
from crudgen.model import EctoModelGenerator
from crudgen.registry import ProjectNameRegistry
from crudgen.resource import ResourceDescriptor

if TYPE_CHECKING:
    from crudgen.config import GeneratorConfig
    from crudgen.ports import ModelGenerator, NameRegistry, TemplateEngine

logger = logging.getLogger(__name__)

HTML_COMMAND = "crudgen html"


@dataclass
class HtmlResult:
    """Outcome of one HTML resource generation."""

    binding: ResourceBinding
    files: GenerationResult
    instructions: str
    model: GenerationResult | None = None  # None when delegation is off

    @property
    def success(self) -> bool:
        return self.files.success and (self.model is None or self.model.success)


def delegate_model(
    args: list[str],
    instructions: str,
    enabled: bool,
    model_generator: ModelGenerator | None,
) -> GenerationResult | None:
    """Forward the invocation to the model generator when enabled.

    Returns ``None`` when disabled; the caller shows the instructions itself.
    """
    if not enabled:
        return None
    if model_generator is None:
        raise DelegateFailure("model generation is enabled but no model generator was given")

    logger.debug("delegating %s to the model generator", args)
    try:
        return model_generator.run(list(args), instructions)
    except Exception as e:
        raise DelegateFailure(f"model generator failed: {e}") from e


def generate_html(
    args: list[str],
    engine: TemplateEngine,
    registry: NameRegistry,
    base: str = "",
    model: bool = True,
    model_generator: ModelGenerator | None = None,
) -> HtmlResult:
    """
    Generate the HTML resource files.

    Argument and name checks run before any file is written. Every file is
    then attempted, and failures are reported per file. If delegation fails,
    the raised ``DelegateFailure`` carries the HTML outcomes in ``files``.
    """
    resource = ResourceDescriptor.from_args(args, HTML_COMMAND)
    binding = assemble(resource, base)

    registry.check_available(binding.naming.module + "Controller")
    registry.check_available(binding.naming.module + "View")
    if model:
        registry.check_available(binding.naming.module)

    files = emit_manifest(HTML_MANIFEST, binding.context(), binding.naming.path, engine)
    instructions = route_instructions(binding)
    try:
        model_result = delegate_model(args, instructions, model, model_generator)
    except DelegateFailure as e:
        e.files = files
        raise

    return HtmlResult(binding=binding, files=files, instructions=instructions, model=model_result)


# ═══════════════════════════════════════════════════════════════════════════
# PUBLIC API
# ═══════════════════════════════════════════════════════════════════════════


def generate_resource(
    args: list[str],
    config: GeneratorConfig,
    dry_run: bool = False,
    confirm: Callable | None = None,
) -> HtmlResult:
    """
    Generate an HTML resource into the configured project.

    Args:
        args: ``singular plural attr...``
        config: Generator settings (project dir, base module, delegation)
        dry_run: Render without writing
        confirm: Asked before overwriting a file that differs

    Returns:
        HtmlResult with per-file outcomes and the router instructions
    """
    engine = TemplateRenderer(
        config.project_dir,
        config.templates_dir,
        force=config.force,
        dry_run=dry_run,
        confirm=confirm,
    )
    registry = ProjectNameRegistry(config.project_dir)
    model_generator = EctoModelGenerator(engine, registry, config.base_module)

    return generate_html(
        args,
        engine,
        registry,
        base=config.base_module,
        model=config.model,
        model_generator=model_generator,
    )
