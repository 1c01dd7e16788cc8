from typing import Optional

from sqlalchemy.orm import Session
from app.models.block import Block

def is_blocked(
    db: Session,
    owner_id: str,
    viewer_id: Optional[str],
) -> bool:
    """
    Returns True if the profile owner has blocked the viewer.
    Anonymous viewers are never blocked and cost no query.
    """
    if viewer_id is None:
        return False

    return (
        db.query(Block)
        .filter(
            Block.blocker_id == owner_id,
            Block.blocked_id == viewer_id,
        )
        .first()
        is not None
    )
