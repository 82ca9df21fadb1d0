import json
from pathlib import Path
from typing import Any, List, Union

import yaml
from pydantic import ValidationError

from tasktriage.logs import get_logger
from tasktriage.models import Bucket, Task
from tasktriage.recovery import CorruptionError, FileOperationError

log = get_logger("io")

YAML_SUFFIXES = {".yml", ".yaml"}

def load_records(file_path: Union[Path, str]) -> Any:
    """
    Load and parse a JSON or YAML file of application records.

    Args:
        file_path: Path to a .json, .yml or .yaml file

    Returns:
        The decoded data

    Raises:
        FileOperationError: If the file cannot be read
        CorruptionError: If the file is not valid JSON/YAML
    """
    file_path = Path(file_path)
    try:
        with open(file_path, 'r', encoding='utf-8') as f:
            if file_path.suffix.lower() in YAML_SUFFIXES:
                data = yaml.safe_load(f)
            else:
                data = json.load(f)

    except json.JSONDecodeError as e:
        raise CorruptionError(f"JSON syntax error in {file_path}: {e}") from e
    except yaml.YAMLError as e:
        raise CorruptionError(f"YAML syntax error in {file_path}: {e}") from e
    except UnicodeDecodeError as e:
        raise CorruptionError(f"File {file_path} is not UTF-8 text: {e}") from e
    except (IOError, OSError) as e:
        # I/O errors are recoverable
        raise FileOperationError(f"Failed to read file {file_path}: {e}") from e

    log.debug(f"Loaded records from {file_path}")
    return data

def load_tasks(file_path: Union[Path, str]) -> List[Task]:
    """Load task records from a list, or from the "tasks" entry of a mapping."""
    data = load_records(file_path)
    if isinstance(data, dict):
        data = data.get("tasks")
    if data is None:
        return []
    if not isinstance(data, list):
        raise CorruptionError(f"File {file_path} does not contain a list of tasks")

    try:
        tasks = [Task.model_validate(record) for record in data]
    except ValidationError as e:
        raise CorruptionError(f"Invalid task record in {file_path}: {e}") from e

    log.info(f"Loaded {len(tasks)} tasks from {file_path}")
    return tasks

def load_bucket(file_path: Union[Path, str]) -> Bucket:
    """Load a bucket record, or a bare list of its field configurations."""
    data = load_records(file_path)
    if isinstance(data, list):
        data = {"customFieldsConfig": data}
    if not isinstance(data, dict):
        raise CorruptionError(f"File {file_path} does not contain a bucket")

    try:
        return Bucket.model_validate(data)
    except ValidationError as e:
        raise CorruptionError(f"Invalid bucket record in {file_path}: {e}") from e
