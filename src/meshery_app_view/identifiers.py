"""Classify the ``view`` argument as an application id or a name."""

from __future__ import annotations

import re
from collections.abc import Sequence
from dataclasses import dataclass

WORD_SEPARATOR = "%20"

_UUID_V4 = re.compile(
    r"[a-f0-9]{8}-[a-f0-9]{4}-4[a-f0-9]{3}-[89ab][a-f0-9]{3}-[a-f0-9]{12}",
    re.IGNORECASE,
)


@dataclass(frozen=True, slots=True)
class Classification:
    token: str
    is_id: bool


def join_arguments(args: Sequence[str]) -> str:
    """Join multi-word names the way the server expects them in a query string."""
    return WORD_SEPARATOR.join(args)


def is_uuid_v4(value: str) -> bool:
    # Lexical only; the id may still not exist on the server.
    return _UUID_V4.fullmatch(value) is not None


def classify(args: Sequence[str]) -> Classification:
    token = join_arguments(args)
    return Classification(token=token, is_id=is_uuid_v4(token))
