"""Reading share cases from JSON or YAML files."""

import json
from pathlib import Path
from typing import Any, Union

import yaml

from shamir_recovery.errors import InvalidCase
from shamir_recovery.shares.models import ShareCase

YAML_SUFFIXES = {".yaml", ".yml"}


def parse_document(text: str, fmt: str = "json") -> Any:
    if fmt == "yaml":
        try:
            return yaml.safe_load(text)
        except yaml.YAMLError as exc:
            raise InvalidCase(f"invalid YAML: {exc}") from exc
    try:
        return json.loads(text)
    except json.JSONDecodeError as exc:
        raise InvalidCase(f"invalid JSON: {exc}") from exc


def load_case(path: Union[str, Path]) -> ShareCase:
    """Load and validate a share case; the format follows the file suffix."""
    path = Path(path)
    fmt = "yaml" if path.suffix.lower() in YAML_SUFFIXES else "json"
    try:
        text = path.read_text(encoding="utf-8")
    except UnicodeDecodeError as exc:
        raise InvalidCase(f"not valid UTF-8: {exc}") from exc
    data = parse_document(text, fmt)
    return ShareCase.from_dict(data)
