from dataclasses import dataclass
from typing import Optional

from sqlalchemy.orm import Session

from app.models.block import Block
from app.models.follower import Follower


@dataclass(frozen=True)
class ViewerRelationship:
    is_self: bool = False
    is_following: bool = False
    has_blocked_owner: bool = False


ANONYMOUS = ViewerRelationship()


def viewer_relationship(
    db: Session,
    owner_id: str,
    viewer_id: Optional[str],
) -> ViewerRelationship:
    """
    How the viewer relates to the profile owner, for the info card buttons.
    """
    if viewer_id is None:
        return ANONYMOUS

    if viewer_id == owner_id:
        return ViewerRelationship(is_self=True)

    following = db.query(Follower).filter(
        Follower.follower_id == viewer_id,
        Follower.following_id == owner_id,
    ).first()

    blocked = db.query(Block).filter(
        Block.blocker_id == viewer_id,
        Block.blocked_id == owner_id,
    ).first()

    return ViewerRelationship(
        is_following=following is not None,
        has_blocked_owner=blocked is not None,
    )
