"""Shared fixtures for tasktriage tests."""

import os

# Keep test runs from writing into the user's log directory; set before the
# package configures logging at import.
os.environ.setdefault("TASKTRIAGE_LOG_TO_FILE", "0")

import pytest

from tasktriage.models import FieldConfig, FieldType, Task

TODAY = "2024-03-10"


@pytest.fixture()
def today() -> str:
    return TODAY


@pytest.fixture()
def stage_configs():
    """Field configuration of a review stage."""
    return [
        FieldConfig(key="approved", label="Client Approval", type=FieldType.CHECKBOX, required=True),
        FieldConfig(key="qty", label="Quantity", type=FieldType.NUMBER),
        FieldConfig(key="size", label="Size", type=FieldType.LIST, options=["S", "M", "L"]),
        FieldConfig(key="notes", label="Notes", type=FieldType.TEXT),
    ]


@pytest.fixture()
def make_task():
    """Build tasks with only the attributes a test cares about."""
    def _make(title="Task", **kwargs):
        return Task(title=title, **kwargs)
    return _make
