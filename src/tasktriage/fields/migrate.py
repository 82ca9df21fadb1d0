"""
Reconciles stored field values with a changed field configuration.

When a task moves to a bucket with a different schema, or its bucket is
reconfigured, the task keeps exactly the new schema's keys: values of keys
that still exist are carried forward, new keys start at their type default,
and keys the new schema no longer declares are dropped.
"""

from typing import Optional, Sequence

from tasktriage.logs import get_logger
from tasktriage.models import FieldConfig
from .codec import FieldValueMap, parse
from .validate import default_for

log = get_logger("fields.migrate")

def merge_with_config(old_encoded: Optional[str], new_configs: Sequence[FieldConfig]) -> FieldValueMap:
    """
    Merge a task's stored fields into a new field configuration.

    Args:
        old_encoded: The task's current encoded field string.
        new_configs: Field configurations of the target bucket.

    Returns:
        Mapping whose keys are exactly the keys of new_configs.
    """
    old_values = parse(old_encoded)
    result: FieldValueMap = {}

    for config in new_configs:
        if config.key in old_values:
            result[config.key] = old_values[config.key]
        else:
            result[config.key] = default_for(config.type)

    dropped = set(old_values) - set(result)
    if dropped:
        log.info(f"Dropping custom fields not in the new configuration: {sorted(dropped)}")

    return result

def defaults_for(configs: Sequence[FieldConfig]) -> FieldValueMap:
    """Initial field values for a new task in a bucket."""
    return merge_with_config(None, configs)
