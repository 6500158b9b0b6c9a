"""
Crudgen Generator - template-based file emission

Uses Jinja2 for templating. Each generator describes its output as a fixed
manifest of (template, destination) pairs; the emission engine renders every
entry and reports a per-file outcome.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from enum import Enum
from pathlib import Path
from typing import TYPE_CHECKING, Any, Callable

from jinja2 import Environment, FileSystemLoader, TemplateError, select_autoescape

from crudgen.errors import EmissionFailure
from crudgen.naming import camelize, humanize, underscore
from crudgen.widgets import atom

if TYPE_CHECKING:
    from crudgen.ports import TemplateEngine

logger = logging.getLogger(__name__)

DEFAULT_TEMPLATES_DIR = Path(__file__).parent / "templates"


# ═══════════════════════════════════════════════════════════════════════════
# GENERATED FILE TRACKING
# ═══════════════════════════════════════════════════════════════════════════


class EmissionStatus(str, Enum):
    WRITTEN = "written"
    SKIPPED = "skipped"
    FAILED = "failed"


@dataclass
class EmissionOutcome:
    """What happened to one destination file."""

    path: str  # Relative path from the project directory
    status: EmissionStatus
    template: str | None = None
    reason: str | None = None


@dataclass
class GenerationResult:
    """Result of one generator run."""

    files: list[EmissionOutcome] = field(default_factory=list)
    instructions: str = ""

    @property
    def errors(self) -> list[str]:
        return [f"{f.path}: {f.reason}" for f in self.files if f.status == EmissionStatus.FAILED]

    @property
    def written(self) -> list[str]:
        return [f.path for f in self.files if f.status == EmissionStatus.WRITTEN]

    @property
    def success(self) -> bool:
        return len(self.errors) == 0


# ═══════════════════════════════════════════════════════════════════════════
# MANIFEST
# ═══════════════════════════════════════════════════════════════════════════


@dataclass(frozen=True)
class FileEmissionTask:
    """One template and the destination it renders to."""

    template: str
    destination: str  # Formatted with the binding's ``path``

    def destination_for(self, path: str) -> str:
        return self.destination.format(path=path)


HTML_MANIFEST: tuple[FileEmissionTask, ...] = (
    FileEmissionTask("html/controller.ex.j2", "web/controllers/{path}_controller.ex"),
    FileEmissionTask("html/edit.html.eex.j2", "web/templates/{path}/edit.html.eex"),
    FileEmissionTask("html/form.html.eex.j2", "web/templates/{path}/form.html.eex"),
    FileEmissionTask("html/index.html.eex.j2", "web/templates/{path}/index.html.eex"),
    FileEmissionTask("html/new.html.eex.j2", "web/templates/{path}/new.html.eex"),
    FileEmissionTask("html/show.html.eex.j2", "web/templates/{path}/show.html.eex"),
    FileEmissionTask("html/view.ex.j2", "web/views/{path}_view.ex"),
    FileEmissionTask("html/controller_test.exs.j2", "test/controllers/{path}_controller_test.exs"),
)


# ═══════════════════════════════════════════════════════════════════════════
# JINJA ENVIRONMENT SETUP
# ═══════════════════════════════════════════════════════════════════════════


def create_jinja_env(templates_dir: Path) -> Environment:
    """Create Jinja2 environment with naming filters."""

    env = Environment(
        loader=FileSystemLoader(str(templates_dir)),
        autoescape=select_autoescape([]),
        trim_blocks=True,
        lstrip_blocks=True,
        keep_trailing_newline=True,
    )

    env.filters["camelize"] = camelize
    env.filters["underscore"] = underscore
    env.filters["humanize"] = humanize
    env.filters["atom"] = atom

    return env


# ═══════════════════════════════════════════════════════════════════════════
# TEMPLATE ENGINE
# ═══════════════════════════════════════════════════════════════════════════


class TemplateRenderer:
    """
    Renders templates into a project directory.

    Owns the overwrite policy: new files are written, identical files are
    skipped, and differing files are replaced only with ``force`` or when
    ``confirm`` agrees.
    """

    def __init__(
        self,
        project_dir: Path,
        templates_dir: Path | None = None,
        force: bool = False,
        dry_run: bool = False,
        confirm: Callable[[Path], bool] | None = None,
    ):
        if templates_dir is None:
            templates_dir = DEFAULT_TEMPLATES_DIR

        self.project_dir = Path(project_dir)
        self.templates_dir = Path(templates_dir)
        self.force = force
        self.dry_run = dry_run
        self.confirm = confirm
        self.env = create_jinja_env(self.templates_dir)

    def render(self, template: str, context: dict[str, Any]) -> str:
        """Render a Jinja2 template."""
        logger.debug("rendering %s", template)
        return self.env.get_template(template).render(**context)

    def emit(self, template: str, context: dict[str, Any], destination: str) -> EmissionOutcome:
        """Render ``template`` and write it to ``destination``."""
        try:
            content = self.render(template, context)
            return self._write_file(destination, content, template)
        except (TemplateError, OSError) as e:
            failure = EmissionFailure(destination, str(e))
            logger.warning("could not generate %s", failure)
            return EmissionOutcome(destination, EmissionStatus.FAILED, template, failure.reason)

    def _write_file(self, relative_path: str, content: str, template: str) -> EmissionOutcome:
        full_path = self.project_dir / relative_path

        if full_path.exists():
            if full_path.read_text(errors="replace") == content:
                return EmissionOutcome(relative_path, EmissionStatus.SKIPPED, template, "identical")
            if self.dry_run:
                return EmissionOutcome(relative_path, EmissionStatus.SKIPPED, template, "dry run")
            if not self._may_overwrite(full_path):
                return EmissionOutcome(relative_path, EmissionStatus.SKIPPED, template, "exists")

        if self.dry_run:
            return EmissionOutcome(relative_path, EmissionStatus.SKIPPED, template, "dry run")

        full_path.parent.mkdir(parents=True, exist_ok=True)
        full_path.write_text(content)
        logger.debug("wrote %s", full_path)
        return EmissionOutcome(relative_path, EmissionStatus.WRITTEN, template)

    def _may_overwrite(self, full_path: Path) -> bool:
        if self.force:
            return True
        if self.confirm is None:
            return False
        return self.confirm(full_path)


# ═══════════════════════════════════════════════════════════════════════════
# EMISSION ENGINE
# ═══════════════════════════════════════════════════════════════════════════


def emit_manifest(
    manifest: tuple[FileEmissionTask, ...],
    context: dict[str, Any],
    path: str,
    engine: TemplateEngine,
) -> GenerationResult:
    """
    Render every manifest entry through ``engine``.

    Every entry is attempted; a failing entry is recorded and does not stop
    the ones after it.
    """
    result = GenerationResult()

    for task in manifest:
        destination = task.destination_for(path)
        try:
            outcome = engine.emit(task.template, context, destination)
        except EmissionFailure as e:
            logger.warning("could not generate %s", e)
            outcome = EmissionOutcome(destination, EmissionStatus.FAILED, task.template, e.reason)
        except Exception as e:
            logger.warning("could not generate %s: %s", destination, e)
            outcome = EmissionOutcome(destination, EmissionStatus.FAILED, task.template, str(e))
        result.files.append(outcome)

    return result
