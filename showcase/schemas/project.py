"""Pydantic schemas for projects and moderation."""

from datetime import datetime

from pydantic import AliasChoices, BaseModel, ConfigDict, Field

from showcase.models.enums import ProjectStatus


class ProjectCreate(BaseModel):
    """
    Project submission. Required fields are checked by the repository so that
    missing values are reported as 400 validation errors. Any status sent by the
    client is ignored; new projects are always pending.
    """

    model_config = ConfigDict(extra="ignore")

    title: str | None = None
    description: str | None = None
    category: str | None = None
    tags: list[str] | str | None = Field(
        default=None,
        description="List of tags or a comma-separated string.",
    )
    video_link: str | None = Field(
        default=None,
        validation_alias=AliasChoices("video_link", "videoLink"),
    )
    image_url: str | None = Field(
        default=None,
        validation_alias=AliasChoices("image_url", "imageUrl"),
    )


class ProjectRead(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    id: str
    user_id: str
    title: str
    description: str
    category: str
    tags: list[str]
    video_link: str | None = None
    image_url: str | None = None
    status: ProjectStatus
    created_at: datetime | None = None


class StatusUpdate(BaseModel):
    """Body for PUT /admin/projects/{id}/status. Validated against ProjectStatus by the repository."""

    status: str | None = None
