"""
Crudgen Model Generator - Ecto model, migration and model test

Runs on its own (``crudgen model``) or as the delegate of the HTML
generator, which hands over its router instructions to be shown after the
model output.
"""

from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime, timezone
from typing import TYPE_CHECKING, Any, Callable

from crudgen.binding import ResourceBinding, assemble
from crudgen.generator import FileEmissionTask, GenerationResult, TemplateRenderer, emit_manifest
from crudgen.naming import camelize
from crudgen.registry import ProjectNameRegistry
from crudgen.resource import Attribute, ResourceDescriptor, TypeTag

if TYPE_CHECKING:
    from crudgen.config import GeneratorConfig
    from crudgen.ports import NameRegistry, TemplateEngine

MODEL_COMMAND = "crudgen model"

MIGRATE_REMINDER = """
Remember to update your repository by running migrations:

    $ mix ecto.migrate
"""

MODEL_MANIFEST: tuple[FileEmissionTask, ...] = (
    FileEmissionTask("model/model.ex.j2", "web/models/{path}.ex"),
    FileEmissionTask("model/model_test.exs.j2", "test/models/{path}_test.exs"),
)


# ═══════════════════════════════════════════════════════════════════════════
# TYPE CONVERSIONS
# ═══════════════════════════════════════════════════════════════════════════


_SCHEMA_TYPES = {
    TypeTag.STRING: ":string",
    TypeTag.INTEGER: ":integer",
    TypeTag.FLOAT: ":float",
    TypeTag.DECIMAL: ":decimal",
    TypeTag.BOOLEAN: ":boolean",
    TypeTag.TEXT: ":string",
    TypeTag.DATE: "Ecto.Date",
    TypeTag.TIME: "Ecto.Time",
    TypeTag.DATETIME: "Ecto.DateTime",
}

_MIGRATION_TYPES = {
    TypeTag.TEXT: ":text",
    TypeTag.DATE: ":date",
    TypeTag.TIME: ":time",
    TypeTag.DATETIME: ":datetime",
}


def schema_type(attr: Attribute) -> str:
    """Convert attribute to an Ecto schema field type"""
    if attr.type == TypeTag.ARRAY:
        return f"{{:array, :{attr.subtype}}}"
    if attr.type == TypeTag.OTHER:
        return f":{attr.raw_type}"
    return _SCHEMA_TYPES[attr.type]


def migration_type(attr: Attribute) -> str:
    """Convert attribute to an Ecto migration column type"""
    if attr.type in _MIGRATION_TYPES:
        return _MIGRATION_TYPES[attr.type]
    return schema_type(attr)


@dataclass(frozen=True)
class ModelField:
    name: str
    schema_type: str
    migration_type: str


@dataclass(frozen=True)
class Assoc:
    name: str  # belongs_to name, e.g. post
    key: str  # foreign key column, e.g. post_id
    module: str
    table: str


def model_context(binding: ResourceBinding, timestamp: str) -> dict[str, Any]:
    """Extend the resource context with schema fields and associations"""
    context = binding.context()
    prefix = context["app_prefix"]

    fields = [
        ModelField(a.name, schema_type(a), migration_type(a))
        for a in binding.attrs
        if a.type != TypeTag.REFERENCES
    ]
    assocs = [
        Assoc(a.assoc_name, a.name, f"{prefix}{camelize(a.assoc_name)}", a.subtype or "")
        for a in binding.attrs
        if a.type == TypeTag.REFERENCES
    ]

    context.update(
        fields=fields,
        assocs=assocs,
        required_fields=[f.name for f in fields],
        migration=binding.naming.path.replace("/", "_"),
        migration_module=binding.naming.scoped.replace(".", ""),
        timestamp=timestamp,
    )
    return context


# ═══════════════════════════════════════════════════════════════════════════
# MODEL GENERATOR
# ═══════════════════════════════════════════════════════════════════════════


def _utc_timestamp() -> str:
    return datetime.now(timezone.utc).strftime("%Y%m%d%H%M%S")


class EctoModelGenerator:
    """Generates the persistence layer for a resource."""

    def __init__(
        self,
        engine: TemplateEngine,
        registry: NameRegistry,
        base: str = "",
        clock: Callable[[], str] = _utc_timestamp,
    ):
        self.engine = engine
        self.registry = registry
        self.base = base
        self.clock = clock

    def manifest(self, context: dict[str, Any]) -> tuple[FileEmissionTask, ...]:
        migration = FileEmissionTask(
            "model/migration.exs.j2",
            f"priv/repo/migrations/{context['timestamp']}_create_{context['migration']}.exs",
        )
        return MODEL_MANIFEST + (migration,)

    def run(self, args: list[str], instructions: str = "") -> GenerationResult:
        """
        Generate model, model test and migration.

        Args:
            args: ``singular plural attr...`` as given on the command line
            instructions: Text to show before the migration reminder

        Returns:
            GenerationResult whose instructions end with the migration reminder
        """
        resource = ResourceDescriptor.from_args(args, MODEL_COMMAND)
        binding = assemble(resource, self.base)
        self.registry.check_available(binding.naming.module)

        context = model_context(binding, self.clock())
        result = emit_manifest(self.manifest(context), context, binding.naming.path, self.engine)
        result.instructions = instructions + MIGRATE_REMINDER
        return result


def generate_model(
    args: list[str],
    config: GeneratorConfig,
    dry_run: bool = False,
    confirm: Callable | None = None,
) -> GenerationResult:
    """Generate model files into the configured project"""
    engine = TemplateRenderer(
        config.project_dir,
        config.templates_dir,
        force=config.force,
        dry_run=dry_run,
        confirm=confirm,
    )
    registry = ProjectNameRegistry(config.project_dir)
    return EctoModelGenerator(engine, registry, config.base_module).run(args)
