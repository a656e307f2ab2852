"""Terminal CLI entrypoint for Repwise."""

from __future__ import annotations

import argparse
import asyncio
from pathlib import Path
from typing import Any, Mapping

from repwise.core.logger import setup_logger
from repwise.workout.classifier import classify
from repwise.workout.library import TemplateTableError, load_template_table
from repwise.workout.resolver import list_programs, resolve
from repwise.workout.ticker import TimerDriver
from repwise.workout.timer import RestTimer, RestTimers


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description="Repwise workout planner")
    parser.add_argument(
        "--templates",
        type=Path,
        default=None,
        help="Workout template table (JSON). Defaults to ~/.repwise/workout_templates.json "
        "or the built-in table",
    )
    parser.add_argument("--programs", action="store_true", help="List available programs")
    parser.add_argument(
        "--suggest",
        action="store_true",
        help="Print the suggested workout for --program/--day/--mood",
    )
    parser.add_argument("--program", default=None, help="Program name (default: first one)")
    parser.add_argument("--day", default="Monday", help="Weekday, e.g. Monday")
    parser.add_argument("--mood", default="Good", help="Energy level: Okay, Good or Great")
    parser.add_argument("--classify", metavar="NAME", default=None, help="Classify an exercise name")
    parser.add_argument(
        "--rest",
        metavar="TEXT",
        default=None,
        help="Run a rest countdown in the terminal, e.g. 90s",
    )
    parser.add_argument(
        "--ui-web",
        action="store_true",
        help="Launch web UI (NiceGUI)",
    )
    parser.add_argument("--web-host", default="127.0.0.1", help="Host bind for --ui-web")
    parser.add_argument("--web-port", type=int, default=8090, help="Port for --ui-web")
    parser.add_argument(
        "--export-dir",
        type=Path,
        default=None,
        help="Directory for CSV exports from the web UI (default: ~/.repwise/exports)",
    )
    parser.add_argument("--debug", action="store_true", help="Enable debug logging")
    return parser


def run_suggest(table: Mapping[str, Any], program: str | None, day: str, mood: str) -> int:
    programs = list_programs(table)
    if not programs:
        print("No programs configured")
        return 1
    chosen = program or programs[0]
    templates = resolve(table, chosen, day, mood)
    if not templates:
        print(f"No suggestion for {chosen} / {day} / {mood}")
        return 0

    print(f"{chosen} - {day} ({mood})")
    for template in templates:
        print(f"  {template.name:<28} [{template.kind}] {template.summary()}")
    return 0


async def run_rest(duration_text: str) -> int:
    timers = RestTimers()
    timers.add_listener(lambda _event: print("\nRest Complete - time to start your next set!"))
    seconds = timers.start_timer("session", duration_text)
    print(f"Resting {seconds}s (Ctrl+C to stop)")

    def on_tick(timer: RestTimer) -> None:
        print(f"\rRest Timer: {timer.remaining_sec:>4}s", end="", flush=True)

    driver = TimerDriver()
    await driver.start(timers.session, on_tick=on_tick)
    try:
        await driver.wait()
    finally:
        await driver.stop()
    return 0


def main() -> int:
    parser = build_parser()
    args = parser.parse_args()
    setup_logger(level="DEBUG" if args.debug else "WARNING")

    try:
        table = load_template_table(args.templates)
    except TemplateTableError as exc:
        print(f"Error: {exc}")
        return 2

    if args.ui_web:
        from repwise.ui.web_app import run_web_ui

        return run_web_ui(
            table=table,
            host=args.web_host,
            port=args.web_port,
            export_dir=args.export_dir,
        )

    if args.programs:
        for name in list_programs(table):
            print(name)
        return 0

    if args.classify is not None:
        print(classify(args.classify))
        return 0

    if args.rest is not None:
        try:
            return asyncio.run(run_rest(args.rest))
        except KeyboardInterrupt:
            print("\nRest cancelled")
            return 130

    if args.suggest:
        return run_suggest(table, args.program, args.day, args.mood)

    parser.print_help()
    return 1


if __name__ == "__main__":
    raise SystemExit(main())
