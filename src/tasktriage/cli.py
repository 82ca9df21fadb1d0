"""
Command Line Interface for tasktriage.

Drives the triage views and the custom field codec from exported task and
bucket records (JSON or YAML files).
"""

import json
import sys
from datetime import date
from pathlib import Path

import click

from .version import VERSION
from .dates import to_date_key
from .fields import merge_with_config, parse, serialize, update, validate, value_for_display
from .io import load_bucket, load_tasks
from .models import TriageResult, TriageView
from .recovery import TriageError
from .triage import classify


COMPLETED_STATUS = "completed"

def _fail(message: str):
    click.echo(f"❌ {message}")
    sys.exit(1)


@click.group()
@click.version_option(version=VERSION, prog_name="tasktriage")
def main():
    """
    tasktriage - custom field and My To-Do triage tools for task boards.
    """
    pass


@main.command()
@click.argument('tasks_file', type=click.Path(dir_okay=False, path_type=Path))
@click.option('--today', help='Reference day as YYYY-MM-DD (default: the local current date)')
@click.option('--view', 'view_name', type=click.Choice([v.value for v in TriageView]),
              default=TriageView.MY_DAY.value, show_default=True, help='View to list')
@click.option('--hide-completed', is_flag=True, help='Leave out completed tasks')
@click.option('--raw-order', is_flag=True, help='Keep the file order instead of sorting')
@click.option('--json', 'as_json', is_flag=True, help='Print JSON instead of text')
def views(tasks_file, today, view_name, hide_completed, raw_order, as_json):
    """Show view counts and the tasks of one triage view."""
    if today is None:
        today_key = date.today().isoformat()
    else:
        today_key = to_date_key(today)
        if not today_key:
            _fail(f"Invalid --today value: {today}")

    try:
        tasks = load_tasks(tasks_file)
    except TriageError as e:
        _fail(f"Error loading tasks: {e}")

    result = classify(tasks, today_key, sort=not raw_order)
    if hide_completed:
        result = TriageResult(
            today=result.today,
            views={
                view: [t for t in items if t.status != COMPLETED_STATUS]
                for view, items in result.views.items()
            },
        )

    selected = TriageView(view_name)
    listing = result.view(selected)

    if as_json:
        click.echo(json.dumps({
            "today": result.today,
            "view": selected.value,
            "counts": {view.value: count for view, count in result.counts.items()},
            "tasks": [t.model_dump(mode="json", by_alias=True) for t in listing],
        }, indent=2, ensure_ascii=False))
        return

    click.echo(f"📅 Today: {result.today}")
    for view in TriageView:
        marker = "👉" if view == selected else "  "
        click.echo(f"{marker} {view.label}: {result.count(view)}")
    click.echo("")

    if not listing:
        click.echo(f"📭 No tasks in {selected.label}")
        return

    click.echo(f"📋 {selected.label}:")
    for task in listing:
        due = to_date_key(task.due_date) or "—"
        priority = task.priority or "—"
        click.echo(f"   [{priority}] {task.title} (due {due}, {task.status})")


@main.group()
def fields():
    """Inspect and edit encoded custom field strings."""
    pass


@fields.command(name='parse')
@click.argument('encoded')
def parse_cmd(encoded):
    """Decode ENCODED into JSON."""
    click.echo(json.dumps(parse(encoded), indent=2, ensure_ascii=False))


@fields.command(name='set')
@click.argument('encoded')
@click.argument('key')
@click.argument('value', required=False)
def set_cmd(encoded, key, value):
    """Set KEY to VALUE in ENCODED; without VALUE the key is removed."""
    click.echo(update(encoded, {key: value}))


@fields.command(name='validate')
@click.argument('bucket_file', type=click.Path(dir_okay=False, path_type=Path))
@click.argument('encoded')
def validate_cmd(bucket_file, encoded):
    """Validate ENCODED against the custom fields of a bucket."""
    try:
        bucket = load_bucket(bucket_file)
    except TriageError as e:
        _fail(f"Error loading bucket: {e}")

    result = validate(parse(encoded), bucket.custom_fields_config)
    if result.valid:
        click.echo("✅ All custom fields are valid")
        return

    for error in result.errors:
        click.echo(f"❌ {error}")
    sys.exit(1)


@fields.command(name='merge')
@click.argument('bucket_file', type=click.Path(dir_okay=False, path_type=Path))
@click.argument('encoded')
def merge_cmd(bucket_file, encoded):
    """Re-encode ENCODED for the custom fields of another bucket."""
    try:
        bucket = load_bucket(bucket_file)
    except TriageError as e:
        _fail(f"Error loading bucket: {e}")

    click.echo(serialize(merge_with_config(encoded, bucket.custom_fields_config)))


@fields.command(name='show')
@click.argument('bucket_file', type=click.Path(dir_okay=False, path_type=Path))
@click.argument('encoded')
def show_cmd(bucket_file, encoded):
    """Show ENCODED the way reports display it."""
    try:
        bucket = load_bucket(bucket_file)
    except TriageError as e:
        _fail(f"Error loading bucket: {e}")

    if not bucket.custom_fields_config:
        click.echo("📭 Bucket has no custom fields")
        return

    values = parse(encoded)
    for config in sorted(bucket.custom_fields_config, key=lambda c: c.order if c.order is not None else sys.maxsize):
        click.echo(f"   {config.label}: {value_for_display(values.get(config.key), config)}")


if __name__ == "__main__":
    main()
