"""
Task triage - partitions tasks into the My To-Do views and orders them.

All functions take "today" explicitly, as a DateKey or any date-like value;
nothing here reads the system clock. The views are recomputed on every call
and the input sequence is never mutated.
"""

from typing import Dict, List, Optional, Sequence, Tuple, Union

from .dates import (
    DateLike,
    to_date_key,
    is_after_date_key,
    is_before_date_key,
    is_same_date_key,
)
from .logs import get_logger
from .models import Task, TriageResult, TriageView

log = get_logger("triage")

PRIORITY_RANK: Dict[str, int] = {
    "high": 0,
    "medium": 1,
    "low": 2,
}
UNRANKED_PRIORITY = 3

GROUP_OVERDUE = 0
GROUP_DUE_TODAY = 1
GROUP_DUE_LATER = 2
GROUP_NO_DUE_DATE = 3

def priority_rank(priority: Optional[str]) -> int:
    return PRIORITY_RANK.get(priority, UNRANKED_PRIORITY)

def group_rank(task: Task, today: str) -> int:
    """Rank a task by how its due date relates to today."""
    if is_before_date_key(task.due_date, today):
        return GROUP_OVERDUE
    if is_same_date_key(task.due_date, today):
        return GROUP_DUE_TODAY
    if is_after_date_key(task.due_date, today):
        return GROUP_DUE_LATER
    return GROUP_NO_DUE_DATE

def _sort_key(task: Task, today: str) -> Tuple[int, int, str, str]:
    return (
        group_rank(task, today),
        priority_rank(task.priority),
        to_date_key(task.due_date),
        task.title or "",
    )

def sort_tasks(tasks: Sequence[Task], today: DateLike) -> List[Task]:
    """
    Order tasks for display.

    Sorted by due-date group (overdue, due today, due later, no due date),
    then priority (high, medium, low, other), then due date, then title.
    The sort is stable, so fully tied tasks keep their input order.
    """
    today_key = to_date_key(today)
    return sorted(tasks, key=lambda task: _sort_key(task, today_key))

def _in_my_day(task: Task, today: str) -> bool:
    start_key = to_date_key(task.start_date)
    due_key = to_date_key(task.due_date)

    if not start_key:
        return True
    if not today:
        return False
    if start_key == today or due_key == today:
        return True
    # Running tasks: started on or before today and due on or after it
    return bool(due_key) and start_key <= today <= due_key

def matches_view(task: Task, view: Union[TriageView, str], today: DateLike) -> bool:
    """Check whether a task belongs to a triage view."""
    view = TriageView(view)
    today_key = to_date_key(today)

    if view == TriageView.TODAY:
        return is_same_date_key(task.start_date, today_key)
    if view == TriageView.OVERDUE:
        return is_before_date_key(task.due_date, today_key)
    if view == TriageView.UPCOMING:
        return is_after_date_key(task.due_date, today_key)
    if view == TriageView.MY_DAY:
        return _in_my_day(task, today_key)
    return True

def filter_view(tasks: Sequence[Task], view: Union[TriageView, str], today: DateLike,
                sort: bool = True) -> List[Task]:
    """
    Select the tasks of one view.

    Args:
        tasks: Task collection in input order.
        view: The view to compute.
        today: DateKey (or date-like value) for today.
        sort: False keeps the input order instead of the display order.

    Returns:
        A new list with the matching tasks.
    """
    today_key = to_date_key(today)
    selected = [task for task in tasks if matches_view(task, view, today_key)]
    return sort_tasks(selected, today_key) if sort else selected

def classify(tasks: Sequence[Task], today: DateLike, sort: bool = True) -> TriageResult:
    """
    Compute all five triage views for a task collection.

    Counts on the result are derived from the same lists, so a badge count
    always equals the length of its view.
    """
    today_key = to_date_key(today)
    if not today_key:
        log.warning(f"Triage called with an invalid today value: {today!r}")

    views = {view: filter_view(tasks, view, today_key, sort=sort) for view in TriageView}
    log.debug(
        f"Triaged {len(tasks)} tasks for {today_key}: "
        + ", ".join(f"{view.value}={len(items)}" for view, items in views.items())
    )
    return TriageResult(today=today_key, views=views)
