"""
Crudgen Registry - module names already defined in the target project
"""

from __future__ import annotations

import logging
import re
from pathlib import Path

from crudgen.errors import NameUnavailable

logger = logging.getLogger(__name__)

SOURCE_DIRS = ("web", "lib")
SOURCE_SUFFIXES = (".ex", ".exs")

_DEFMODULE = re.compile(r"^\s*defmodule\s+([A-Z][\w.]*)\s+do\b", re.MULTILINE)


class ProjectNameRegistry:
    """Finds ``defmodule`` declarations under the project's source dirs."""

    def __init__(self, project_dir: Path, source_dirs: tuple[str, ...] = SOURCE_DIRS):
        self.project_dir = Path(project_dir)
        self.source_dirs = source_dirs
        self._modules: dict[str, str] | None = None

    @property
    def modules(self) -> dict[str, str]:
        """Defined module names mapped to the file defining them"""
        if self._modules is None:
            self._modules = self._scan()
        return self._modules

    def check_available(self, name: str) -> None:
        """Raise ``NameUnavailable`` when ``name`` is already defined"""
        if name in self.modules:
            raise NameUnavailable(name, self.modules[name])

    def _scan(self) -> dict[str, str]:
        modules: dict[str, str] = {}
        for source_dir in self.source_dirs:
            root = self.project_dir / source_dir
            if not root.is_dir():
                continue
            for file in sorted(root.rglob("*")):
                if file.suffix not in SOURCE_SUFFIXES or not file.is_file():
                    continue
                relative = file.relative_to(self.project_dir).as_posix()
                for name in _DEFMODULE.findall(file.read_text(errors="replace")):
                    modules.setdefault(name, relative)
        logger.debug("found %d modules in %s", len(modules), self.project_dir)
        return modules
