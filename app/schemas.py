from datetime import datetime

from pydantic import BaseModel, ConfigDict, Field, field_validator


class LinkCreate(BaseModel):
    url: str
    description: str


class CommentCreate(BaseModel):
    link_id: str = Field(alias="linkId")
    body: str

    model_config = ConfigDict(populate_by_name=True)

    # clients may send the id as a JSON number
    @field_validator("link_id", mode="before")
    @classmethod
    def link_id_as_text(cls, value):
        if isinstance(value, int) and not isinstance(value, bool):
            return str(value)
        return value


class LinkSummary(BaseModel):
    id: int
    created_at: datetime = Field(serialization_alias="createdAt")
    description: str
    url: str

    model_config = ConfigDict(from_attributes=True)


class CommentSummary(BaseModel):
    id: int
    created_at: datetime = Field(serialization_alias="createdAt")
    body: str

    model_config = ConfigDict(from_attributes=True)


class LinkOut(LinkSummary):
    comments: list[CommentSummary]


class CommentOut(CommentSummary):
    link: LinkSummary


class InfoOut(BaseModel):
    info: str


class HealthOut(BaseModel):
    status: str
    env: str
