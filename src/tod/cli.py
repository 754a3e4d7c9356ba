# SPDX-FileCopyrightText: 2025 Tod Contributors
# SPDX-License-Identifier: MPL-2.0

"""Tod command line interface."""

import json
import logging
import sys
from typing import NoReturn

import click

from tod.config import Config, load_config
from tod.errors import TodError
from tod.tasks import (
    DateOnly,
    DateTime,
    DueInfo,
    SortOrder,
    Task,
    TaskFilter,
    filter_not_in_future,
    matches_filter,
    resolve,
    sort,
    sort_by_value,
    value,
)
from tod.tasks.format import format_task


def _fail(error: Exception) -> NoReturn:
    click.echo(json.dumps({"error": str(error)}), err=True)
    sys.exit(1)


def _task_json(task: Task, config: Config) -> dict:
    return {
        "id": task.id,
        "content": task.content,
        "due": task.due.date if task.due else None,
        "priority": task.priority.value,
        "value": value(task, config),
    }


@click.group()
@click.option("--verbose", is_flag=True, help="Log debug output, including task values")
@click.pass_context
def tod(ctx: click.Context, verbose: bool):
    """Sort and inspect Todoist tasks."""
    if verbose:
        logging.getLogger("tod").setLevel(logging.DEBUG)
    if ctx.obj is None:
        try:
            ctx.obj = load_config()
        except TodError as e:
            _fail(e)


@tod.command("list")
@click.option("--filter", "filter_query", default=None, help="Todoist filter (e.g., 'today', '@home')")
@click.option(
    "--sort",
    "sort_order",
    type=click.Choice([s.value for s in SortOrder]),
    default=SortOrder.VALUE.value,
    show_default=True,
    help="How to order the tasks",
)
@click.option(
    "--only",
    type=click.Choice([f.value for f in TaskFilter]),
    default=None,
    help="Keep only unscheduled, overdue or recurring tasks",
)
@click.option("--not-in-future", is_flag=True, help="Drop tasks due after today")
@click.option("--json", "as_json", is_flag=True, help="Output JSON")
@click.pass_obj
def list_cmd(
    config: Config,
    filter_query: str | None,
    sort_order: str,
    only: str | None,
    not_in_future: bool,
    as_json: bool,
):
    """List tasks in value or due date order."""
    from tod.integrations import todoist

    try:
        tasks = todoist.fetch_tasks(todoist.get_token(), filter_query)
    except TodError as e:
        _fail(e)

    if not_in_future:
        tasks = filter_not_in_future(tasks, config)
    if only:
        task_filter = TaskFilter(only)
        tasks = [t for t in tasks if matches_filter(t, config, task_filter)]

    tasks = sort(tasks, config, SortOrder(sort_order))

    if as_json:
        result = [_task_json(t, config) for t in tasks]
        click.echo(json.dumps(result, indent=2))
        return

    if not tasks:
        click.echo("No tasks")
        return
    for task in tasks:
        click.echo(format_task(task, config, with_value=sort_order == SortOrder.VALUE.value))


@tod.command("next")
@click.option("--filter", "filter_query", default=None, help="Todoist filter (e.g., 'today', '@home')")
@click.option("--json", "as_json", is_flag=True, help="Output JSON")
@click.pass_obj
def next_cmd(config: Config, filter_query: str | None, as_json: bool):
    """Show the highest value task and how many are left."""
    from tod.integrations import todoist

    try:
        tasks = todoist.fetch_tasks(todoist.get_token(), filter_query)
    except TodError as e:
        _fail(e)

    tasks = sort_by_value(tasks, config)
    remaining = max(len(tasks) - 1, 0)

    if as_json:
        task = _task_json(tasks[0], config) if tasks else None
        click.echo(json.dumps({"task": task, "remaining": remaining}, indent=2))
        return

    if not tasks:
        click.echo("No tasks")
        return
    click.echo(format_task(tasks[0], config, with_value=True))
    click.echo(f"{remaining} task(s) remaining")


@tod.command("due")
@click.argument("date")
@click.option("--timezone", default=None, help="Timezone of the due date (e.g., 'America/Vancouver')")
@click.option("--recurring", is_flag=True, help="Treat the due date as recurring")
@click.pass_obj
def due_cmd(config: Config, date: str, timezone: str | None, recurring: bool):
    """Resolve a raw Todoist due date."""
    due = DueInfo(date=date, is_recurring=recurring, timezone=timezone)
    try:
        info = resolve(due, config.timezone)
    except TodError as e:
        _fail(e)

    if isinstance(info, DateOnly):
        result = {"kind": "date", "date": info.date.isoformat(), "timezone": str(info.timezone)}
    elif isinstance(info, DateTime):
        result = {"kind": "datetime", "datetime": info.datetime.isoformat()}
    else:
        result = {"kind": "none"}
    result["is_recurring"] = recurring
    click.echo(json.dumps(result, indent=2))


@tod.command("weights")
@click.pass_obj
def weights_cmd(config: Config):
    """Show the score weights in effect."""
    click.echo(json.dumps(config.sort_value.to_dict(), indent=2))


if __name__ == "__main__":
    tod()
