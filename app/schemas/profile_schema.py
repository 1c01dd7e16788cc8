# app/schemas/profile_schema.py
from pydantic import BaseModel
from typing import Optional
from datetime import datetime

from app.config import settings
from app.core.profile_resolver import ResolvedProfile
from app.models.user import User


def display_name_for(user: User) -> str:
    if user.name and user.surname:
        return f"{user.name} {user.surname}"
    return user.username


def avatar_url_for(user: User) -> str:
    return user.avatar or settings.DEFAULT_AVATAR_URL


def cover_url_for(user: User) -> str:
    return user.cover or settings.DEFAULT_COVER_URL


def website_url_for(user: User) -> Optional[str]:
    # Only http(s) links are rendered; other schemes can run script
    website = (user.website or "").strip()
    if website.lower().startswith(("http://", "https://")):
        return website
    return None


class ProfileOut(BaseModel):
    id: str
    username: str

    display_name: str
    avatar_url: str
    cover_url: str

    post_count: int
    follower_count: int
    following_count: int

    # Info card
    description: Optional[str] = None
    city: Optional[str] = None
    school: Optional[str] = None
    work: Optional[str] = None
    website: Optional[str] = None
    created_at: Optional[datetime] = None

    @classmethod
    def from_resolved(cls, profile: ResolvedProfile) -> "ProfileOut":
        user = profile.user
        return cls(
            id=user.id,
            username=user.username,
            display_name=display_name_for(user),
            avatar_url=avatar_url_for(user),
            cover_url=cover_url_for(user),
            post_count=profile.post_count,
            follower_count=profile.follower_count,
            following_count=profile.following_count,
            description=user.description,
            city=user.city,
            school=user.school,
            work=user.work,
            website=website_url_for(user),
            created_at=user.created_at,
        )


class BlockedUserOut(BaseModel):
    id: str
    username: str
    display_name: str
    avatar_url: str
