"""
Crudgen Config - generator settings loaded from crudgen.yaml

Every setting has a default, so the file is optional. CLI options override
whatever the file says.
"""

from __future__ import annotations

from pathlib import Path
from typing import Any

import yaml
from pydantic import BaseModel, Field, ValidationError

from crudgen.errors import ConfigError
from crudgen.naming import camelize

CONFIG_FILENAME = "crudgen.yaml"


class GeneratorConfig(BaseModel):
    """Generator settings"""

    project_dir: Path = Field(Path("."), alias="projectDir")
    base: str | None = None  # Application module, e.g. MyApp
    templates_dir: Path | None = Field(None, alias="templatesDir")
    force: bool = False
    model: bool = True  # Delegate to the model generator by default

    model_config = {"populate_by_name": True}

    @property
    def base_module(self) -> str:
        """Application module name, derived from the project dir if unset"""
        if self.base is not None:
            return self.base
        return camelize(self.project_dir.resolve().name)

    @classmethod
    def from_yaml(cls, yaml_content: str, **overrides: Any) -> "GeneratorConfig":
        """Parse YAML content into GeneratorConfig"""
        try:
            data = yaml.safe_load(yaml_content) or {}
        except yaml.YAMLError as e:
            raise ConfigError(f"invalid YAML: {e}") from e
        if not isinstance(data, dict):
            raise ConfigError("config must be a mapping of settings")

        for name, info in cls.model_fields.items():
            if info.alias and info.alias in data:
                data.setdefault(name, data.pop(info.alias))
        data.update({k: v for k, v in overrides.items() if v is not None})
        try:
            return cls.model_validate(data)
        except ValidationError as e:
            raise ConfigError(str(e)) from e

    @classmethod
    def from_file(cls, path: str | Path, **overrides: Any) -> "GeneratorConfig":
        """Load config from a YAML file"""
        path = Path(path)
        try:
            content = path.read_text()
        except OSError as e:
            raise ConfigError(f"cannot read {path}: {e}") from e

        config = cls.from_yaml(content, **overrides)
        if "project_dir" not in overrides or overrides["project_dir"] is None:
            config = config.model_copy(update={"project_dir": path.parent / config.project_dir})
        return config.resolved()

    @classmethod
    def load(cls, project_dir: Path | None = None, config_file: Path | None = None, **overrides: Any) -> "GeneratorConfig":
        """Load ``crudgen.yaml`` from the project dir when present"""
        project_dir = project_dir or Path.cwd()
        if config_file is not None:
            return cls.from_file(config_file, project_dir=project_dir, **overrides)
        if (project_dir / CONFIG_FILENAME).exists():
            return cls.from_file(project_dir / CONFIG_FILENAME, project_dir=project_dir, **overrides)
        return cls.from_yaml("", project_dir=project_dir, **overrides).resolved()

    def resolved(self) -> "GeneratorConfig":
        """Make ``templates_dir`` relative to the project dir"""
        if self.templates_dir is None or self.templates_dir.is_absolute():
            return self
        return self.model_copy(update={"templates_dir": self.project_dir / self.templates_dir})
