"""Shared fixtures for crudgen tests."""

from __future__ import annotations

from pathlib import Path

import pytest

from crudgen.generator import TemplateRenderer
from crudgen.registry import ProjectNameRegistry


@pytest.fixture
def project_dir(tmp_path: Path) -> Path:
    """An empty Phoenix-style project with the usual source dirs."""
    root = tmp_path / "my_app"
    (root / "web").mkdir(parents=True)
    (root / "lib").mkdir()
    return root


@pytest.fixture
def renderer(project_dir: Path) -> TemplateRenderer:
    return TemplateRenderer(project_dir)


@pytest.fixture
def registry(project_dir: Path) -> ProjectNameRegistry:
    return ProjectNameRegistry(project_dir)


@pytest.fixture
def user_args() -> list[str]:
    return ["User", "users", "name:string", "age:integer"]
