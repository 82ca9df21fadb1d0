"""
Custom field submodule: encoding, validation and schema migration of the
per-bucket custom fields stored on tasks.
"""

from .codec import DELIMITER, KEY_VALUE_SEPARATOR, FieldValueMap, parse, serialize, update
from .validate import EMPTY_DISPLAY, validate, default_for, value_for_display
from .migrate import merge_with_config, defaults_for

__all__ = [
    'DELIMITER',
    'KEY_VALUE_SEPARATOR',
    'EMPTY_DISPLAY',
    'FieldValueMap',
    'parse',
    'serialize',
    'update',
    'validate',
    'default_for',
    'value_for_display',
    'merge_with_config',
    'defaults_for',
]
