"""Pydantic schemas for project comments."""

from datetime import datetime

from pydantic import AliasChoices, BaseModel, ConfigDict, Field


class CommentCreate(BaseModel):
    model_config = ConfigDict(extra="ignore")

    project_id: str | None = Field(
        default=None,
        validation_alias=AliasChoices("project_id", "projectId"),
    )
    content: str | None = None


class CommentRead(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    id: str
    project_id: str
    user_id: str
    content: str
    created_at: datetime | None = None
