"""cadence CLI - habit consistency graphs."""

import json
import logging
import sys
from datetime import date

import click

from .adapters.json_habits import HabitNotFoundError, JsonHabitFile
from .config import load_config
from .core.agenda import assemble_agenda, graph_window
from .core.errors import HabitError
from .core.graph import build_graph
from .core.priority import priority
from .core.repeater import parse_weekday_set
from .core.reschedule import next_allowed_weekday
from .core.schedule import effective_deadline
from .core.weekdays import WEEKDAY_NAMES, CalendarDay
from .ports.habit_source import HabitSource
from .render import cells_to_dicts, render_agenda_line, render_graph

logger = logging.getLogger(__name__)


def _parse_target_date(value: str | None) -> date:
    if not value:
        return date.today()
    try:
        return date.fromisoformat(value)
    except ValueError:
        raise click.BadParameter(f"Expected YYYY-MM-DD, got {value!r}", param_hint="--date") from None


def _habit_source(config, strict: bool = False) -> HabitSource:
    return JsonHabitFile(config.habits_path, strict=strict)


def _fail(message: str) -> None:
    click.echo(f"Error: {message}", err=True)
    sys.exit(1)


@click.group()
@click.version_option(package_name="cadence-habits")
@click.option("--debug", is_flag=True, help="Enable debug logging")
@click.option("--file", "habits_file", default=None, help="Habits JSON file (overrides config)")
@click.pass_context
def main(ctx, debug: bool, habits_file: str | None):
    """cadence - weekday-aware habit tracking."""
    if debug:
        logging.basicConfig(
            format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
            level=logging.DEBUG,
        )

    config = load_config()
    if habits_file:
        config.habits_file = habits_file
    ctx.obj = config


@main.command()
@click.option("--date", "-d", "target_date", default=None, help="Agenda day (YYYY-MM-DD), defaults to today")
@click.option("--all", "show_all", is_flag=True, help="Include habits scheduled after the agenda day")
@click.option("--json", "as_json", is_flag=True, help="Output as JSON")
@click.option("--no-color", is_flag=True, help="Plain text graphs")
@click.pass_obj
def agenda(config, target_date: str | None, show_all: bool, as_json: bool, no_color: bool):
    """Show habits with their consistency graphs, most urgent first."""
    target = _parse_target_date(target_date)
    try:
        habits = _habit_source(config).fetch_habits()
    except (ValueError, OSError) as e:
        _fail(str(e))
    logger.debug(f"Loaded {len(habits)} habits from {config.habits_path}")

    rows = assemble_agenda(
        habits,
        as_of=target,
        preceding_days=config.preceding_days,
        following_days=config.following_days,
        only_due=config.show_habits_only_for_today and not show_all,
        done_always_green=config.show_done_always_green,
    )

    if as_json:
        click.echo(
            json.dumps(
                [
                    {
                        "title": r.habit.title,
                        "priority": r.priority,
                        "scheduled": r.habit.scheduled.to_date().isoformat(),
                        "cells": cells_to_dicts(r.cells),
                    }
                    for r in rows
                ],
                indent=2,
            )
        )
        return

    if not rows:
        click.echo("No habits due.")
        return

    for row in rows:
        click.echo(
            render_agenda_line(
                row,
                graph_column=config.graph_column,
                completed_glyph=config.completed_glyph,
                today_glyph=config.today_glyph,
                color=not no_color,
            )
        )


@main.command()
@click.argument("title")
@click.option("--date", "-d", "target_date", default=None, help="Graph day (YYYY-MM-DD), defaults to today")
@click.option("--json", "as_json", is_flag=True, help="Output as JSON")
@click.option("--no-color", is_flag=True, help="Plain text graph")
@click.pass_obj
def graph(config, title: str, target_date: str | None, as_json: bool, no_color: bool):
    """Show the consistency graph of one habit."""
    target = _parse_target_date(target_date)
    try:
        habit = _habit_source(config, strict=True).fetch_habit(title)
    except (HabitError, HabitNotFoundError, ValueError, OSError) as e:
        _fail(str(e))

    today = CalendarDay.from_date(target)
    start, end = graph_window(today, config.preceding_days, config.following_days)
    cells = build_graph(habit, start, today, end, done_always_green=config.show_done_always_green)

    if as_json:
        click.echo(json.dumps(cells_to_dicts(cells), indent=2))
        return

    deadline = effective_deadline(habit)
    click.echo(f"{habit.title} ({habit.repeater_type.value}{habit.scheduled_repeat_days}d)")
    click.echo(f"  scheduled: {habit.scheduled.to_date().isoformat()}")
    if deadline != habit.scheduled:
        click.echo(f"  deadline:  {deadline.to_date().isoformat()}")
    if not habit.weekday_set.is_unconstrained:
        click.echo(f"  weekdays:  {', '.join(WEEKDAY_NAMES[d] for d in habit.weekday_set)}")
    click.echo(f"  priority:  {priority(habit, today)}")
    click.echo("  " + render_graph(cells, config.completed_glyph, config.today_glyph, color=not no_color))


@main.command()
@click.argument("title")
@click.option("--date", "-d", "target_date", default=None, help="Completion day (YYYY-MM-DD), defaults to today")
@click.pass_obj
def done(config, title: str, target_date: str | None):
    """Mark a habit done and move it to its next allowed day."""
    target = _parse_target_date(target_date)
    try:
        habit = _habit_source(config, strict=True).record_done(title, target)
    except (HabitError, HabitNotFoundError, ValueError, OSError) as e:
        _fail(str(e))

    nxt = habit.scheduled.to_date()
    click.echo(f"{habit.title}: done {target.isoformat()}, next {nxt.strftime('%a %Y-%m-%d')}")


@main.command("next")
@click.argument("weekday", type=click.IntRange(1, 7))
@click.argument("days", type=int)
@click.option("--weekdays", default=None, help='Allowed weekdays, e.g. "1 2 3 4 5"')
def next_weekday(weekday: int, days: int, weekdays: str | None):
    """Where a repeat of DAYS from WEEKDAY (1=Mon) lands."""
    try:
        weekday_set = parse_weekday_set(weekdays)
    except HabitError as e:
        _fail(str(e))

    target = next_allowed_weekday(weekday, days, weekday_set)
    click.echo(f"{WEEKDAY_NAMES[target.weekday]} (+{days + target.extra_days}d, {target.extra_days} extra)")


if __name__ == "__main__":
    main()
