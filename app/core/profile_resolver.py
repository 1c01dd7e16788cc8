from dataclasses import dataclass
from typing import Optional

from sqlalchemy import func, select
from sqlalchemy.orm import Session

from app.models.follower import Follower
from app.models.post import Post
from app.models.user import User


@dataclass(frozen=True)
class ResolvedProfile:
    user: User
    post_count: int
    follower_count: int
    following_count: int


def _count_of(column, user_id_column):
    return (
        select(func.count())
        .where(column == user_id_column)
        .correlate(User)
        .scalar_subquery()
    )


def resolve_profile(db: Session, username: str) -> Optional[ResolvedProfile]:
    """
    Loads the first user whose username matches exactly, with post,
    follower and following counts computed in the same statement.
    Returns None when nobody has that username.
    """
    row = (
        db.query(
            User,
            _count_of(Post.user_id, User.id).label("post_count"),
            _count_of(Follower.following_id, User.id).label("follower_count"),
            _count_of(Follower.follower_id, User.id).label("following_count"),
        )
        .filter(User.username == username)
        .first()
    )

    if row is None:
        return None

    user, post_count, follower_count, following_count = row

    return ResolvedProfile(
        user=user,
        post_count=post_count,
        follower_count=follower_count,
        following_count=following_count,
    )
