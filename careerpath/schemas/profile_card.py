# careerpath/schemas/profile_card.py
from datetime import datetime
from typing import List, Literal, Optional

from pydantic import BaseModel, ConfigDict, Field, field_validator

Theme = Literal["blue", "purple", "green", "orange", "pink"]


def _check_image(value: Optional[str]) -> Optional[str]:
    if value is None:
        return value
    v = value.strip()
    if not v.startswith(("http://", "https://", "data:image/")):
        raise ValueError("profileImage must be an http(s) URL or a data:image URI")
    return v


def _check_skills(value: Optional[List[str]]) -> Optional[List[str]]:
    if value is None:
        return value
    skills = [s.strip() for s in value]
    if any(not s for s in skills):
        raise ValueError("skills must not contain blank entries")
    return skills


class _CardModel(BaseModel):
    model_config = ConfigDict(populate_by_name=True, from_attributes=True)


class ProfileCardCreate(_CardModel):
    name: str = Field(min_length=1, max_length=100)
    bio: str = Field(max_length=200)
    skills: List[str] = Field(min_length=1, max_length=10)
    profile_image: Optional[str] = Field(default=None, alias="profileImage")
    theme: Theme = "blue"

    @field_validator("profile_image")
    @classmethod
    def check_image(cls, v):
        return _check_image(v)

    @field_validator("skills")
    @classmethod
    def check_skills(cls, v):
        return _check_skills(v)


class ProfileCardUpdate(_CardModel):
    """Partial patch: only the fields present in the request are written."""
    name: Optional[str] = Field(default=None, min_length=1, max_length=100)
    bio: Optional[str] = Field(default=None, max_length=200)
    skills: Optional[List[str]] = Field(default=None, min_length=1, max_length=10)
    profile_image: Optional[str] = Field(default=None, alias="profileImage")
    theme: Optional[Theme] = None

    @field_validator("profile_image")
    @classmethod
    def check_image(cls, v):
        return _check_image(v)

    @field_validator("skills")
    @classmethod
    def check_skills(cls, v):
        return _check_skills(v)


class ProfileCardRead(_CardModel):
    id: str
    name: str
    bio: str
    skills: List[str]
    profile_image: Optional[str] = Field(default=None, alias="profileImage")
    theme: str
    created_at: datetime = Field(alias="createdAt")
    updated_at: datetime = Field(alias="updatedAt")


class ProfileCardCreated(_CardModel):
    success: bool = True
    card: ProfileCardRead
    share_url: str = Field(alias="shareUrl")


class ProfileCardOut(_CardModel):
    success: bool = True
    card: ProfileCardRead


class ProfileCardList(_CardModel):
    success: bool = True
    cards: List[ProfileCardRead]
    total: int


class ProfileCardDeleted(_CardModel):
    success: bool = True
    id: str
