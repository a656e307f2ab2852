from __future__ import annotations

import csv
import io
import re
from datetime import date, datetime, timezone
from pathlib import Path

import pytest

from repwise.workout.export import EmptyLogError, export_log, suggested_filename, write_export
from repwise.workout.model import StrengthPrescription, TimedPrescription, WorkoutEntry
from repwise.workout.session_log import SessionLog


def _entry(exercise: str, kind: str, prescription, workout_name: str = "Push Day") -> WorkoutEntry:
    return WorkoutEntry(
        key=f"entry-{exercise}",
        date=date(2026, 3, 2),
        day="Monday",
        mood="Good",
        program="Basic",
        workout_name=workout_name,
        exercise=exercise,
        kind=kind,  # type: ignore[arg-type]
        prescription=prescription,
    )


def test_export_empty_log_raises() -> None:
    with pytest.raises(EmptyLogError):
        export_log(SessionLog())


def test_export_header_follows_first_entry_shape() -> None:
    log = SessionLog()
    log.append(
        _entry("Bench press", "weight", StrengthPrescription(sets=3, reps=10, weight=135, rest="60s")),
        _entry("Run", "cardio", TimedPrescription(duration="30min")),
    )

    text = export_log(log)
    header, bench_row, run_row = text.split("\n")

    assert header == "date,day,mood,program,workout_name,exercise,sets,reps,weight,rest,kind"
    assert bench_row == (
        '"2026-03-02","Monday","Good","Basic","Push Day","Bench press",'
        '"3","10","135","60s","weight"'
    )
    # The cardio row is projected onto the weight columns: its duration is lost.
    assert run_row == (
        '"2026-03-02","Monday","Good","Basic","Push Day","Run",'
        '"","","","","cardio"'
    )
    assert "key" not in header
    assert "entry-" not in text


def test_export_cardio_first_drops_strength_columns() -> None:
    log = SessionLog()
    log.append(
        _entry("Walk", "cardio", TimedPrescription(duration=None)),
        _entry("Squat", "weight", StrengthPrescription(sets=5, reps=5, weight=225)),
    )

    header, walk_row, squat_row = export_log(log).split("\n")

    assert header == "date,day,mood,program,workout_name,exercise,duration,kind"
    assert walk_row.endswith('"Walk","","cardio"')
    assert squat_row.endswith('"Squat","","weight"')


def test_export_doubles_embedded_quotes() -> None:
    log = SessionLog()
    log.append(_entry("Curl", "weight", StrengthPrescription(weight=22.5), workout_name='Arms "A"'))

    text = export_log(log)
    rows = list(csv.reader(io.StringIO(text)))

    assert '"Arms ""A"""' in text
    assert rows[1][4] == 'Arms "A"'
    assert rows[1][8] == "22.5"
    assert not text.endswith("\n")


def test_suggested_filename_uses_millisecond_timestamp() -> None:
    moment = datetime(2026, 3, 2, 10, 0, tzinfo=timezone.utc)
    assert suggested_filename(moment) == f"workout_log_{int(moment.timestamp()) * 1000}.csv"
    assert re.fullmatch(r"workout_log_\d+\.csv", suggested_filename())


def test_write_export_creates_csv_file(tmp_path: Path) -> None:
    log = SessionLog()
    log.append(_entry("Bench press", "weight", StrengthPrescription(rest="90s")))

    out = write_export(log, out_dir=tmp_path / "exports")

    assert out.exists()
    assert out.name.startswith("workout_log_")
    assert out.read_text(encoding="utf-8") == export_log(log)


def test_write_export_empty_log_writes_nothing(tmp_path: Path) -> None:
    with pytest.raises(EmptyLogError):
        write_export(SessionLog(), out_dir=tmp_path)
    assert list(tmp_path.iterdir()) == []
