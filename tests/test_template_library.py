from __future__ import annotations

import json
from pathlib import Path

import pytest

from repwise.workout.library import (
    DEFAULT_TEMPLATE_TABLE,
    MOODS,
    WEEKDAYS,
    TemplateTableError,
    load_template_table,
)
from repwise.workout.resolver import resolve


def test_default_table_covers_every_day_and_mood() -> None:
    for program in DEFAULT_TEMPLATE_TABLE:
        for day in WEEKDAYS:
            for mood in MOODS:
                assert resolve(DEFAULT_TEMPLATE_TABLE, program, day, mood), (program, day, mood)


def test_default_table_mixes_kinds() -> None:
    kinds = {
        template.kind
        for day in WEEKDAYS
        for mood in MOODS
        for template in resolve(DEFAULT_TEMPLATE_TABLE, "Basic", day, mood)
    }
    assert kinds == {"weight", "bodyweight", "cardio", "yoga"}


def test_load_template_table_json(tmp_path: Path) -> None:
    table_file = tmp_path / "templates.json"
    table_file.write_text(
        json.dumps(
            {"Home": {"monday": {"good": [{"name": "Pushup", "type": "bodyweight", "sets": 4}]}}}
        ),
        encoding="utf-8",
    )

    table = load_template_table(table_file)
    (pushup,) = resolve(table, "Home", "Monday", "Good")

    assert pushup.name == "Pushup"
    assert pushup.prescription.sets == 4  # type: ignore[union-attr]


def test_load_template_table_invalid_json(tmp_path: Path) -> None:
    table_file = tmp_path / "broken.json"
    table_file.write_text("{not json", encoding="utf-8")

    with pytest.raises(TemplateTableError):
        load_template_table(table_file)


def test_load_template_table_requires_object(tmp_path: Path) -> None:
    table_file = tmp_path / "list.json"
    table_file.write_text("[]", encoding="utf-8")

    with pytest.raises(TemplateTableError):
        load_template_table(table_file)


def test_load_template_table_missing_explicit_file(tmp_path: Path) -> None:
    with pytest.raises(TemplateTableError):
        load_template_table(tmp_path / "missing.json")


def test_load_template_table_falls_back_to_builtin(
    tmp_path: Path, monkeypatch: pytest.MonkeyPatch
) -> None:
    monkeypatch.setattr(Path, "home", classmethod(lambda cls: tmp_path))

    assert load_template_table() is DEFAULT_TEMPLATE_TABLE


def test_load_template_table_undecodable_file(tmp_path: Path) -> None:
    table_file = tmp_path / "latin1.json"
    table_file.write_bytes(b'{"P": "\xff"}')

    with pytest.raises(TemplateTableError):
        load_template_table(table_file)


def test_load_template_table_directory_path(tmp_path: Path) -> None:
    with pytest.raises(TemplateTableError):
        load_template_table(tmp_path)
