"""Serialize projected data as JSON or YAML."""

from __future__ import annotations

import json
from enum import Enum
from typing import Any

import yaml

from .errors import InvalidOutputFormatError


class OutputFormat(str, Enum):
    JSON = "json"
    YAML = "yaml"

    @classmethod
    def parse(cls, value: str) -> OutputFormat:
        try:
            return cls(value)
        except ValueError:
            raise InvalidOutputFormatError("output-format choice invalid, use [json|yaml]") from None


def to_json(data: Any) -> str:
    return json.dumps(data, indent=2, ensure_ascii=False) + "\n"


def json_to_yaml(text: str) -> str:
    """Transliterate JSON text to YAML without changing the decoded value."""
    return yaml.safe_dump(
        json.loads(text),
        default_flow_style=False,
        sort_keys=False,
        allow_unicode=True,
    )


def render(data: Any, output_format: OutputFormat) -> str:
    text = to_json(data)
    if output_format is OutputFormat.YAML:
        return json_to_yaml(text)
    return text
