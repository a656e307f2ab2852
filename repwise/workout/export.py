"""Flatten the session log to CSV text."""

from __future__ import annotations

import csv
import io
from datetime import datetime, timezone
from pathlib import Path
from typing import Iterable

from loguru import logger

from repwise.workout.model import WorkoutEntry


class EmptyLogError(ValueError):
    """Raised when there is nothing to export."""


def _default_export_dir() -> Path:
    return Path.home() / ".repwise" / "exports"


def _format_value(value: object) -> str:
    if value is None:
        return ""
    if isinstance(value, float) and value.is_integer():
        return str(int(value))
    return str(value)


def export_log(entries: Iterable[WorkoutEntry]) -> str:
    """Render entries as a header line plus one quoted row per entry.

    Columns come from the first entry only. Later entries of another kind are
    projected onto those columns, so their own kind-specific fields may be
    missing from the output.
    """
    items = list(entries)
    if not items:
        raise EmptyLogError("No workouts to export")

    columns = items[0].field_names
    buffer = io.StringIO()
    writer = csv.writer(buffer, quoting=csv.QUOTE_ALL, lineterminator="\n")
    for entry in items:
        writer.writerow([_format_value(entry.value_of(name)) for name in columns])

    rows = buffer.getvalue().removesuffix("\n")
    logger.bind(rows=len(items), columns=len(columns)).info("Exported session log")
    return ",".join(columns) + "\n" + rows


def suggested_filename(now: datetime | None = None) -> str:
    moment = now or datetime.now(tz=timezone.utc)
    return f"workout_log_{int(moment.timestamp() * 1000)}.csv"


def write_export(entries: Iterable[WorkoutEntry], out_dir: Path | None = None) -> Path:
    text = export_log(entries)
    target_dir = out_dir or _default_export_dir()
    target_dir.mkdir(parents=True, exist_ok=True)
    out = target_dir / suggested_filename()
    out.write_text(text, encoding="utf-8")
    return out
