"""
DateKey utility - reduces date-like values to comparable calendar-day keys.

A DateKey is a zero-padded "YYYY-MM-DD" string, so lexical order is
chronological order. Every temporal comparison in tasktriage goes through
these keys; two values on the same calendar day are equal whatever their
time of day. Absent or invalid values reduce to "", which never matches,
precedes or follows anything.
"""

from datetime import date, datetime
from typing import Union, Optional

DateLike = Optional[Union[datetime, date, str]]

NO_DATE = ""

def to_date_key(value: DateLike) -> str:
    """
    Reduce a date-like value to its DateKey.

    Datetimes keep the calendar day they already carry; no timezone
    conversion is applied.

    Args:
        value: A datetime, date, ISO 8601 string, or None.

    Returns:
        The "YYYY-MM-DD" key, or "" if the value is absent or not a valid date.
    """
    if value is None:
        return NO_DATE

    if isinstance(value, datetime):
        return value.date().isoformat()
    if isinstance(value, date):
        return value.isoformat()
    if not isinstance(value, str):
        return NO_DATE

    text = value.strip()
    if not text:
        return NO_DATE
    try:
        return datetime.fromisoformat(text).date().isoformat()
    except ValueError:
        return NO_DATE

def is_same_date_key(value: DateLike, compare_key: str) -> bool:
    key = to_date_key(value)
    return key != NO_DATE and bool(compare_key) and key == compare_key

def is_before_date_key(value: DateLike, compare_key: str) -> bool:
    key = to_date_key(value)
    return key != NO_DATE and bool(compare_key) and key < compare_key

def is_after_date_key(value: DateLike, compare_key: str) -> bool:
    key = to_date_key(value)
    return key != NO_DATE and bool(compare_key) and key > compare_key
