"""
tasktriage - Task attribute and triage engine for project boards.

This package provides the pure core behind a task board's custom fields and
its My To-Do screen:
Bucket field configuration → encoded task fields → validation / migration
Task collection + today → my-day / today / overdue / upcoming / all views
"""

from .version import VERSION
from .models import (
    FieldType,
    FieldConfig,
    Bucket,
    Task,
    TriageView,
    TriageResult,
    ValidationResult,
)
from .dates import to_date_key, is_same_date_key, is_before_date_key, is_after_date_key
from .fields import parse, serialize, update, validate, default_for, merge_with_config, defaults_for, value_for_display
from .triage import classify, filter_view, sort_tasks

__version__ = VERSION

__all__ = [
    "VERSION",
    "FieldType",
    "FieldConfig",
    "Bucket",
    "Task",
    "TriageView",
    "TriageResult",
    "ValidationResult",
    "to_date_key",
    "is_same_date_key",
    "is_before_date_key",
    "is_after_date_key",
    "parse",
    "serialize",
    "update",
    "validate",
    "default_for",
    "merge_with_config",
    "defaults_for",
    "value_for_display",
    "classify",
    "filter_view",
    "sort_tasks",
]
