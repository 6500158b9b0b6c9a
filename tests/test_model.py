"""Tests for the Ecto model generator."""

from __future__ import annotations

from pathlib import Path

import pytest

from crudgen.errors import InvalidArguments, NameUnavailable
from crudgen.generator import TemplateRenderer
from crudgen.model import (
    MIGRATE_REMINDER,
    EctoModelGenerator,
    migration_type,
    schema_type,
)
from crudgen.registry import ProjectNameRegistry
from crudgen.resource import classify

TIMESTAMP = "20260101120000"


@pytest.fixture
def generator(renderer: TemplateRenderer, registry: ProjectNameRegistry) -> EctoModelGenerator:
    return EctoModelGenerator(renderer, registry, base="MyApp", clock=lambda: TIMESTAMP)


@pytest.mark.parametrize(
    "token, schema, migration",
    [
        ("name:string", ":string", ":string"),
        ("age:integer", ":integer", ":integer"),
        ("bio:text", ":string", ":text"),
        ("born_on:date", "Ecto.Date", ":date"),
        ("published_at:datetime", "Ecto.DateTime", ":datetime"),
        ("tags:array:string", "{:array, :string}", "{:array, :string}"),
        ("token:uuid", ":uuid", ":uuid"),
        ("title", ":string", ":string"),
    ],
)
def test_type_conversions(token: str, schema: str, migration: str) -> None:
    attr = classify(token)

    assert schema_type(attr) == schema
    assert migration_type(attr) == migration


def test_generates_model_files(generator: EctoModelGenerator, project_dir: Path) -> None:
    result = generator.run(["User", "users", "name:string", "age:integer"])

    assert result.success, result.errors
    assert sorted(result.written) == [
        f"priv/repo/migrations/{TIMESTAMP}_create_user.exs",
        "test/models/user_test.exs",
        "web/models/user.ex",
    ]

    model = (project_dir / "web/models/user.ex").read_text()
    assert "defmodule MyApp.User do" in model
    assert 'schema "users" do' in model
    assert "    field :name, :string\n" in model
    assert "    field :age, :integer\n" in model
    assert "@required_fields ~w(name age)" in model

    migration = (project_dir / f"priv/repo/migrations/{TIMESTAMP}_create_user.exs").read_text()
    assert "defmodule MyApp.Repo.Migrations.CreateUser do" in migration
    assert "create table(:users) do" in migration

    test = (project_dir / "test/models/user_test.exs").read_text()
    assert '@valid_attrs %{name: "some content", age: 42}' in test


def test_references_become_associations(generator: EctoModelGenerator, project_dir: Path) -> None:
    generator.run(["Comment", "comments", "body:text", "post_id:references:posts"])

    model = (project_dir / "web/models/comment.ex").read_text()
    assert "belongs_to :post, MyApp.Post" in model
    assert "field :post_id" not in model

    migration = (project_dir / f"priv/repo/migrations/{TIMESTAMP}_create_comment.exs").read_text()
    assert "add :body, :text" in migration
    assert "add :post_id, references(:posts, on_delete: :nothing)" in migration
    assert "create index(:comments, [:post_id])" in migration


def test_scoped_migration_name(generator: EctoModelGenerator) -> None:
    result = generator.run(["Admin.User", "users"])

    assert f"priv/repo/migrations/{TIMESTAMP}_create_admin_user.exs" in result.written
    assert "web/models/admin/user.ex" in result.written


def test_instructions_end_with_migration_reminder(generator: EctoModelGenerator) -> None:
    result = generator.run(["User", "users"], instructions="route it\n")

    assert result.instructions == "route it\n" + MIGRATE_REMINDER


def test_taken_model_name(generator: EctoModelGenerator, project_dir: Path) -> None:
    (project_dir / "web/user.ex").write_text("defmodule MyApp.User do\nend\n")

    with pytest.raises(NameUnavailable):
        generator.run(["User", "users"])

    assert not (project_dir / "web/models").exists()


def test_invalid_arguments(generator: EctoModelGenerator) -> None:
    with pytest.raises(InvalidArguments, match="crudgen model"):
        generator.run(["User"])
