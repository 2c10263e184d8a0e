"""The ``view`` pipeline: classify, plan, fetch, project, render."""

from __future__ import annotations

import logging
import sys
from collections.abc import Sequence
from dataclasses import dataclass
from typing import TextIO

from .client import ApplicationClient
from .identifiers import classify
from .projection import decode_payload, project
from .query import QueryIntent, plan_query
from .render import OutputFormat, render

logger = logging.getLogger(__name__)


@dataclass(frozen=True, slots=True)
class ViewPlan:
    intent: QueryIntent
    output_format: OutputFormat


def plan_view(
    args: Sequence[str],
    *,
    select_all: bool = False,
    output_format: str = "yaml",
) -> ViewPlan:
    """Validate the command input without touching the network."""
    fmt = OutputFormat.parse(output_format)
    classification = classify(args)
    intent = plan_query(args, classification, select_all=select_all)
    logger.debug("resolved %r to %r", classification.token, intent)
    return ViewPlan(intent=intent, output_format=fmt)


def run_view(client: ApplicationClient, plan: ViewPlan, out: TextIO | None = None) -> None:
    """Fetch, project and write the result. Nothing is written unless the lookup succeeds."""
    out = out or sys.stdout
    body = client.fetch(plan.intent)
    projection = project(decode_payload(body), plan.intent)
    rendered = render(projection.data, plan.output_format)

    for line in projection.summary:
        out.write(line + "\n")
    out.write(rendered)


def view_applications(
    client: ApplicationClient,
    args: Sequence[str],
    *,
    select_all: bool = False,
    output_format: str = "yaml",
    out: TextIO | None = None,
) -> None:
    plan = plan_view(args, select_all=select_all, output_format=output_format)
    run_view(client, plan, out)
