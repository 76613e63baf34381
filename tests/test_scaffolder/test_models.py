"""Tests for option models and step accounting (expressgen.scaffolder.models)."""

from __future__ import annotations

from pathlib import Path

import pytest
from pydantic import ValidationError

from expressgen.scaffolder.models import (
    DIRECTORY_STEPS,
    INIT_STEPS,
    LEGACY_TOTAL_STEPS,
    AuthLibrary,
    Database,
    FileSpec,
    Language,
    ProjectOptions,
    count_file_steps,
    count_total_steps,
)

pytestmark = pytest.mark.unit


class TestEnums:
    def test_values_match_prompt_choices(self):
        assert [lang.value for lang in Language] == ["JavaScript", "TypeScript"]
        assert [auth.value for auth in AuthLibrary] == ["None", "JWT"]
        assert [db.value for db in Database] == ["None", "MongoDB"]

    def test_extension(self):
        assert Language.JAVASCRIPT.extension == "js"
        assert Language.TYPESCRIPT.extension == "ts"

    def test_unknown_value(self):
        with pytest.raises(ValueError):
            Language("Go")


class TestProjectOptions:
    def test_defaults(self):
        options = ProjectOptions(project_name="demo")
        assert options.language is Language.JAVASCRIPT
        assert options.auth_library is AuthLibrary.NONE
        assert options.database is Database.NONE
        assert not options.typescript
        assert not options.use_jwt
        assert not options.use_mongodb

    def test_from_strings(self):
        options = ProjectOptions(
            project_name="api", language="TypeScript", auth_library="JWT", database="MongoDB"
        )
        assert options.typescript
        assert options.use_jwt
        assert options.use_mongodb

    def test_name_is_trimmed(self):
        assert ProjectOptions(project_name="  demo \n").project_name == "demo"

    def test_blank_name_rejected(self):
        with pytest.raises(ValidationError):
            ProjectOptions(project_name="   ")

    def test_unknown_option_rejected(self):
        with pytest.raises(ValidationError):
            ProjectOptions(project_name="demo", database="Postgres")

    def test_frozen(self, js_options):
        with pytest.raises(ValidationError):
            js_options.project_name = "other"


class TestStepCounting:
    @pytest.mark.parametrize(
        ("language", "database", "expected"),
        [
            (Language.JAVASCRIPT, Database.NONE, 2),
            (Language.TYPESCRIPT, Database.NONE, 3),
            (Language.JAVASCRIPT, Database.MONGODB, 4),
            (Language.TYPESCRIPT, Database.MONGODB, 5),
        ],
    )
    def test_file_steps(self, language, database, expected):
        options = ProjectOptions(project_name="p", language=language, database=database)
        assert count_file_steps(options) == expected

    def test_auth_does_not_add_files(self):
        options = ProjectOptions(project_name="p", auth_library=AuthLibrary.JWT)
        assert count_file_steps(options) == 2

    def test_total_minimal_matches_legacy(self, js_options):
        assert INIT_STEPS + DIRECTORY_STEPS == 10
        assert count_total_steps(js_options) == LEGACY_TOTAL_STEPS

    def test_total_full(self, full_options):
        assert count_total_steps(full_options) == 15


class TestFileSpec:
    def test_frozen_value(self):
        spec = FileSpec(Path("readme.md"), "# hi")
        assert spec == FileSpec(Path("readme.md"), "# hi")
        with pytest.raises(AttributeError):
            spec.content = "changed"  # type: ignore[misc]
