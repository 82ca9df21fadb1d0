from pydantic import BaseModel, ConfigDict, Field, field_validator, model_validator
from pydantic.alias_generators import to_camel
from enum import Enum
from typing import Optional, List, Dict, Union

from .dates import DateLike

class FieldType(Enum):
    TEXT = "text"
    NUMBER = "number"
    LIST = "list"
    CHECKBOX = "checkbox"

class TriageView(Enum):
    MY_DAY = "my-day"
    TODAY = "today"
    OVERDUE = "overdue"
    UPCOMING = "upcoming"
    ALL = "all"

    @property
    def label(self) -> str:
        return _VIEW_LABELS[self]

_VIEW_LABELS = {
    TriageView.MY_DAY: "My Day",
    TriageView.TODAY: "Today",
    TriageView.OVERDUE: "Overdue",
    TriageView.UPCOMING: "Upcoming",
    TriageView.ALL: "All Tasks",
}

class RecordModel(BaseModel):
    """Base for records shared with the web application, which uses camelCase keys."""

    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)

class FieldConfig(RecordModel):
    """Declares one custom attribute of the tasks in a bucket."""

    key: str = Field(min_length=1, description="Stable identifier, unique within a bucket")
    label: str = Field(description="Display name used in validation messages")
    type: FieldType = Field(default=FieldType.TEXT, description="Value type of the field")
    required: bool = Field(default=False, description="Whether a blank value fails validation")
    options: Optional[List[str]] = Field(default=None, description="Allowed values, list fields only")
    id: Optional[str] = Field(default=None, description="Client-side identifier of the config row")
    order: Optional[int] = Field(default=None, description="Display position within the bucket")
    copy_on_progress: bool = Field(default=False, description="Carry the value along when the task moves on")

    @field_validator('key')
    @classmethod
    def validate_key(cls, v):
        # Decoded keys are trimmed, so a configured key must be too
        v = v.strip()
        if not v:
            raise ValueError("Field key must not be blank")
        return v

    @model_validator(mode='after')
    def validate_options(self):
        if self.type != FieldType.LIST and self.options is not None:
            if self.options:
                raise ValueError(f"options are only allowed for list fields, not {self.type.value}")
            self.options = None
        return self

class Bucket(RecordModel):
    """A stage/column of a project board and its custom-field configuration."""

    id: Optional[int] = Field(default=None, description="Bucket identifier")
    title: str = Field(default="", description="Bucket title")
    custom_fields_config: List[FieldConfig] = Field(
        default_factory=list,
        description="Custom field configuration applied to tasks in this bucket"
    )

    @model_validator(mode='after')
    def validate_unique_keys(self):
        seen = set()
        for config in self.custom_fields_config:
            if config.key in seen:
                raise ValueError(f"Duplicate custom field key: {config.key}")
            seen.add(config.key)
        return self

    def find_field(self, key: str) -> Optional[FieldConfig]:
        """Find a field config by key."""
        return next((f for f in self.custom_fields_config if f.key == key), None)

class Task(RecordModel):
    """A task as consumed from the application; read-only inside tasktriage."""

    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True, frozen=True)

    id: Optional[int] = Field(default=None, description="Task identifier")
    title: str = Field(default="", description="Task title")
    description: Optional[str] = Field(default=None, description="Free-form description")
    status: str = Field(default="todo", description="Workflow status, e.g. todo, in_progress, completed")
    priority: Optional[str] = Field(default=None, description="high, medium or low; absent sorts last")
    # Kept as given; unparseable strings become "no date" when triaged
    start_date: DateLike = Field(default=None, description="When work on the task starts")
    due_date: DateLike = Field(default=None, description="When the task is due")
    custom_fields: Optional[str] = Field(default=None, description="Encoded custom field values")
    bucket_id: Optional[int] = Field(default=None, description="Bucket the task is placed in")
    assignee_id: Optional[int] = Field(default=None, description="Assigned user")

    def field_values(self) -> Dict[str, str]:
        """Decode the task's custom fields."""
        from .fields.codec import parse
        return parse(self.custom_fields)

class ValidationResult(BaseModel):
    valid: bool
    errors: List[str] = Field(default_factory=list)

class TriageResult(BaseModel):
    """The five triage views computed for one "today"."""

    today: str = Field(description="DateKey the views were computed for")
    views: Dict[TriageView, List[Task]] = Field(default_factory=dict)

    def view(self, name: Union[TriageView, str]) -> List[Task]:
        return self.views.get(TriageView(name), [])

    @property
    def counts(self) -> Dict[TriageView, int]:
        return {view: len(tasks) for view, tasks in self.views.items()}

    def count(self, name: Union[TriageView, str]) -> int:
        return len(self.view(name))
