"""Select what gets rendered for each query intent."""

from __future__ import annotations

import json
import logging
from dataclasses import dataclass, field
from typing import Any

from pydantic import ValidationError

from .errors import DecodeError, NotFoundError
from .models import ApplicationsPage, ApplicationView
from .query import AllApplications, ById, ByName, QueryIntent

logger = logging.getLogger(__name__)

SUMMARY_SEPARATOR = "#####################"


@dataclass(slots=True)
class Projection:
    data: Any
    summary: list[str] = field(default_factory=list)


def decode_payload(body: bytes) -> dict[str, Any]:
    try:
        data = json.loads(body)
    except ValueError as exc:
        raise DecodeError(f"failed to unmarshal response body: {exc}") from exc
    if not isinstance(data, dict):
        raise DecodeError(f"Unexpected JSON type: {type(data).__name__}")
    return data


def summary_lines(view: ApplicationView) -> list[str]:
    location = json.dumps(view.location) if view.location is not None else ""
    return [
        f"Name: {view.name}",
        f"ID: {view.id or ''}",
        f"ApplicationFile: {view.application_file}",
        f"UpdatedAt: {view.updated_at or ''}",
        f"CreatedAt: {view.created_at or ''}",
        f"UserID: {view.user_id or ''}",
        f"Location: {location}",
        SUMMARY_SEPARATOR,
    ]


def find_by_name(payload: dict[str, Any], name: str) -> ApplicationView:
    try:
        page = ApplicationsPage.model_validate(payload)
    except ValidationError as exc:
        raise DecodeError(f"failed to unmarshal response body: {exc}") from exc

    if page.total_count == 0:
        raise NotFoundError(
            "application does not exist. Please get an app name and try again. "
            "Use `mesh-app view --all` to see a list of applications"
        )
    for record in page.applications or []:
        if record.name == name:
            return ApplicationView.from_record(record)
    raise NotFoundError(
        f"application {name!r} not found. Use `mesh-app view --all` to see a list of applications"
    )


def project(payload: dict[str, Any], intent: QueryIntent) -> Projection:
    if isinstance(intent, ById):
        return Projection(data=payload)
    if isinstance(intent, AllApplications):
        return Projection(data={"applications": payload.get("applications")})
    if isinstance(intent, ByName):
        view = find_by_name(payload, intent.name)
        logger.debug("matched application %s (%s)", view.name, view.id)
        return Projection(data=view.to_data(), summary=summary_lines(view))
    raise TypeError(f"unknown query intent: {intent!r}")
