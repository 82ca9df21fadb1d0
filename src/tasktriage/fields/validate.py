"""
Custom field validation - checks decoded values against a bucket's field
configuration, and supplies the defaults and display forms of each type.

Number values follow the web client's numeric input grammar: ASCII decimal
or exponent notation with an optional sign, or a 0x/0b/0o prefixed integer,
surrounded by optional whitespace. The result must be finite.
"""

import math
import re
from typing import Callable, Dict, Mapping, Optional, Sequence

from tasktriage.logs import get_logger
from tasktriage.models import FieldConfig, FieldType, ValidationResult

log = get_logger("fields.validate")

EMPTY_DISPLAY = "—"

DECIMAL_PATTERN = re.compile(r"[+-]?(?:[0-9]+(?:\.[0-9]*)?|\.[0-9]+)(?:[eE][+-]?[0-9]+)?")
RADIX_PATTERN = re.compile(r"0(?:[xX][0-9a-fA-F]+|[bB][01]+|[oO][0-7]+)")

def _is_blank(value: Optional[str]) -> bool:
    return value is None or value.strip() == ""

def _to_number(value: str) -> Optional[float]:
    text = value.strip()
    if DECIMAL_PATTERN.fullmatch(text):
        return float(text)
    if RADIX_PATTERN.fullmatch(text):
        try:
            return float(int(text, 0))
        except OverflowError:
            return math.inf
    return None

def _check_number(value: str, config: FieldConfig) -> Optional[str]:
    number = _to_number(value)
    if number is None or not math.isfinite(number):
        return f'Field "{config.label}" must be a number'
    return None

def _check_checkbox(value: str, config: FieldConfig) -> Optional[str]:
    if value not in ("true", "false"):
        return f'Field "{config.label}" must be a checkbox (true/false)'
    return None

def _check_list(value: str, config: FieldConfig) -> Optional[str]:
    if config.options is not None and value not in config.options:
        return f'Field "{config.label}" must be one of: {", ".join(config.options)}'
    return None

def _check_text(value: str, config: FieldConfig) -> Optional[str]:
    return None

_CHECKS: Dict[FieldType, Callable[[str, FieldConfig], Optional[str]]] = {
    FieldType.NUMBER: _check_number,
    FieldType.CHECKBOX: _check_checkbox,
    FieldType.LIST: _check_list,
    FieldType.TEXT: _check_text,
}

_DEFAULTS: Dict[FieldType, str] = {
    FieldType.CHECKBOX: "false",
    FieldType.NUMBER: "0",
    FieldType.TEXT: "",
    FieldType.LIST: "",
}

def validate(values: Mapping[str, str], configs: Sequence[FieldConfig]) -> ValidationResult:
    """
    Validate custom field values against a bucket's field configuration.

    Produces at most one message per config, in declaration order. Keys that
    no config declares are not checked.

    Args:
        values: Decoded field values.
        configs: Field configurations of the bucket.

    Returns:
        ValidationResult with the overall flag and the error messages.
    """
    errors = []
    for config in configs:
        value = values.get(config.key)

        if _is_blank(value):
            if config.required:
                errors.append(f'Field "{config.label}" is required')
            continue

        error = _CHECKS[config.type](value, config)
        if error:
            errors.append(error)

    if errors:
        log.debug(f"Custom field validation failed: {errors}")
    return ValidationResult(valid=not errors, errors=errors)

def default_for(field_type: FieldType) -> str:
    """Get the value a field of this type starts with."""
    try:
        return _DEFAULTS[FieldType(field_type)]
    except ValueError:
        return ""

def value_for_display(raw_value: Optional[str], config: FieldConfig) -> str:
    """Format a stored value for tables and reports."""
    if _is_blank(raw_value):
        return EMPTY_DISPLAY

    if config.type == FieldType.CHECKBOX:
        return "Yes" if raw_value == "true" else "No"

    return raw_value
