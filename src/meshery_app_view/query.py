"""Query intents and the request each one maps to."""

from __future__ import annotations

from collections.abc import Sequence
from dataclasses import dataclass
from .errors import ConflictingSelectorsError, NoSelectorProvidedError
from .identifiers import WORD_SEPARATOR, Classification

APPLICATIONS_PATH = "/api/experimental/application"
ALL_PAGE_SIZE = 10000


@dataclass(frozen=True, slots=True)
class ById:
    id: str

    def path(self) -> str:
        return f"{APPLICATIONS_PATH}/{self.id}"


@dataclass(frozen=True, slots=True)
class ByName:
    search: str

    @property
    def name(self) -> str:
        """The human-readable name, with the word separators decoded."""
        return self.search.replace(WORD_SEPARATOR, " ")

    def path(self) -> str:
        # Sent verbatim so the %20 separators reach the server as spaces.
        return f"{APPLICATIONS_PATH}?search={self.search}"


@dataclass(frozen=True, slots=True)
class AllApplications:
    def path(self) -> str:
        return f"{APPLICATIONS_PATH}?page_size={ALL_PAGE_SIZE}"


QueryIntent = ById | ByName | AllApplications


def plan_query(
    args: Sequence[str],
    classification: Classification,
    *,
    select_all: bool,
) -> QueryIntent:
    if args and select_all:
        raise ConflictingSelectorsError(
            "-a cannot be used when [application-name|application-id] is specified"
        )
    if not args:
        if select_all:
            return AllApplications()
        raise NoSelectorProvidedError(
            "[application-name|application-id] not specified, use -a to view all applications"
        )
    if classification.is_id:
        return ById(classification.token)
    return ByName(classification.token)
