"""Application payload models."""

from __future__ import annotations

from datetime import datetime
from typing import Any
from uuid import UUID

from pydantic import BaseModel, ConfigDict, Field


class ApplicationRecord(BaseModel):
    model_config = ConfigDict(extra="ignore")

    id: UUID | None = None
    name: str = ""
    application_file: str = ""
    user_id: str | None = None
    location: dict[str, Any] | None = None
    created_at: datetime | None = None
    updated_at: datetime | None = None


class ApplicationsPage(BaseModel):
    model_config = ConfigDict(extra="ignore")

    page: int = 0
    page_size: int = 0
    total_count: int = 0
    applications: list[ApplicationRecord] | None = None


class ApplicationView(BaseModel):
    """The attributes shown for an application looked up by name."""

    name: str = Field(serialization_alias="Name")
    id: UUID | None = Field(default=None, serialization_alias="ID")
    application_file: str = Field(default="", serialization_alias="ApplicationFile")
    user_id: str | None = Field(default=None, serialization_alias="UserID")
    location: dict[str, Any] | None = Field(default=None, serialization_alias="Location")
    updated_at: datetime | None = Field(default=None, serialization_alias="UpdatedAt")
    created_at: datetime | None = Field(default=None, serialization_alias="CreatedAt")

    @classmethod
    def from_record(cls, record: ApplicationRecord) -> ApplicationView:
        return cls(
            name=record.name,
            id=record.id,
            application_file=record.application_file,
            user_id=record.user_id,
            location=record.location,
            updated_at=record.updated_at,
            created_at=record.created_at,
        )

    def to_data(self) -> dict[str, Any]:
        return self.model_dump(mode="json", by_alias=True)
