"""
Encoded field strings - the flat persisted form of a task's custom fields.

Format: key=value||key2=value2||key3=value3

Decoding is tolerant: historical strings may have been edited by hand, so
malformed segments are dropped instead of raising. Values are not escaped;
a value containing "||" does not survive a round trip.
"""

from typing import Dict, Mapping, Optional, Any
from tasktriage.logs import get_logger

log = get_logger("fields.codec")

DELIMITER = "||"
KEY_VALUE_SEPARATOR = "="

FieldValueMap = Dict[str, str]

def parse(encoded: Optional[str]) -> FieldValueMap:
    """
    Parse an encoded field string into a key-value mapping.

    Args:
        encoded: String like "client_approval=true||remarks=Reviewed".

    Returns:
        Mapping like {"client_approval": "true", "remarks": "Reviewed"}.
        Empty for None, "" or whitespace-only input.
    """
    if not encoded or not encoded.strip():
        return {}

    result: FieldValueMap = {}
    for segment in encoded.split(DELIMITER):
        if not segment.strip():
            continue

        key, sep, value = segment.partition(KEY_VALUE_SEPARATOR)
        key = key.strip()
        if not sep or not key:
            log.debug(f"Skipping malformed field segment: {segment!r}")
            continue

        # Last occurrence of a duplicate key wins
        if key in result:
            log.debug(f"Duplicate field key {key!r}, keeping the later value")
        # partition only splits on the first separator, the rest stays in value
        result[key] = value.strip()

    return result

def _stringify(value: Any) -> str:
    # Match what the web client wrote for checkbox and number inputs
    if isinstance(value, bool):
        return "true" if value else "false"
    return str(value)

def serialize(values: Optional[Mapping[str, Any]]) -> str:
    """
    Serialize a key-value mapping into an encoded field string.

    Entries with a falsy key or a None value are left out.
    """
    if not values:
        return ""

    pairs = [
        f"{key}{KEY_VALUE_SEPARATOR}{_stringify(value)}"
        for key, value in values.items()
        if key and value is not None
    ]
    return DELIMITER.join(pairs)

def update(encoded: Optional[str], changes: Mapping[str, Any]) -> str:
    """
    Apply edits to an encoded field string and return the new encoding.

    A change whose value is None removes that key.
    """
    values = parse(encoded)
    for key, value in changes.items():
        if value is None:
            values.pop(key, None)
        else:
            values[key] = _stringify(value)
    return serialize(values)
