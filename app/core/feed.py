from typing import List, Optional

from sqlalchemy.orm import Session

from app.config import settings
from app.models.post import Post
from app.models.user import User


def get_user_feed(
    db: Session,
    username: str,
    limit: Optional[int] = None,
) -> List[Post]:
    """Newest-first posts written by ``username``."""
    if limit is None:
        limit = settings.FEED_PAGE_SIZE

    return (
        db.query(Post)
        .join(User, Post.user_id == User.id)
        .filter(User.username == username)
        .order_by(Post.created_at.desc(), Post.id.desc())
        .limit(limit)
        .all()
    )
