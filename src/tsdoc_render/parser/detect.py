"""Auto-detect the format of a documentation dump."""

import json
from pathlib import Path

import yaml


def detect_format(file_path: Path) -> str:
    """Detect the format of a documentation dump file.

    Returns: 'json' or 'yaml'.
    """
    suffix = file_path.suffix.lower()
    if suffix == ".json":
        return "json"
    if suffix in (".yaml", ".yml"):
        return "yaml"

    text = file_path.read_text(encoding="utf-8")
    try:
        json.loads(text)
        return "json"
    except (json.JSONDecodeError, ValueError):
        pass

    try:
        yaml.safe_load(text)
    except yaml.YAMLError:
        # Let the JSON decoder report the error
        return "json"
    return "yaml"
