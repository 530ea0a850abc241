from datetime import datetime

from pydantic import BaseModel, ConfigDict, Field, TypeAdapter, field_validator


class Release(BaseModel):
    model_config = ConfigDict(populate_by_name=True, extra="ignore")

    tag: str = Field("", alias="tag_name", description="Git tag the release points to")
    is_draft: bool = Field(False, alias="draft", description="Unpublished release")
    is_prerelease: bool = Field(False, alias="prerelease", description="Marked as pre-release upstream")
    published_at: datetime | None = Field(None, description="Publication time, informational only")

    @field_validator("tag", mode="before")
    @classmethod
    def validate_tag(cls, value: str | None) -> str:
        # a missing tag is left for the comparator to skip
        return value or ""

    @field_validator("is_draft", "is_prerelease", mode="before")
    @classmethod
    def validate_flags(cls, value: bool | None) -> bool:
        return False if value is None else value


ReleaseList = TypeAdapter(list[Release])
