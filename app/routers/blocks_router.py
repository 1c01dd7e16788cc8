# routers/blocks_router.py
from typing import List

from fastapi import APIRouter, Depends, HTTPException
from sqlalchemy.orm import Session

from app.database import get_db
from app.models.block import Block
from app.models.follower import Follower
from app.models.user import User
from app.auth import get_current_viewer_id
from app.schemas.profile_schema import (
    BlockedUserOut,
    avatar_url_for,
    display_name_for,
)
from app.utils.logging import get_logger


router = APIRouter(prefix="/blocks", tags=["Blocks"])

logger = get_logger(__name__)


# --------------------------------------------------
# BLOCK USER
# --------------------------------------------------
@router.post("/{user_id}")
def block_user(
    user_id: str,
    db: Session = Depends(get_db),
    viewer_id: str = Depends(get_current_viewer_id),
):
    # Caller must have a user record of their own
    me = db.query(User).filter(User.id == viewer_id).first()
    if not me:
        raise HTTPException(400, "User has no profile")

    # Cannot block yourself
    if user_id == viewer_id:
        raise HTTPException(400, "Cannot block yourself")

    # Target must exist
    target = db.query(User).filter(User.id == user_id).first()
    if not target:
        raise HTTPException(404, "User not found")

    # Already blocked → no-op
    exists = (
        db.query(Block)
        .filter_by(
            blocker_id=viewer_id,
            blocked_id=user_id,
        )
        .first()
    )

    if exists:
        return {"status": "already_blocked"}

    db.add(
        Block(
            blocker_id=viewer_id,
            blocked_id=user_id,
        )
    )

    # Drop follows in both directions
    (
        db.query(Follower)
        .filter(
            (
                (Follower.follower_id == viewer_id)
                & (Follower.following_id == user_id)
            )
            | (
                (Follower.follower_id == user_id)
                & (Follower.following_id == viewer_id)
            )
        )
        .delete(synchronize_session=False)
    )

    db.commit()
    logger.info("user %s blocked %s", viewer_id, user_id)

    return {"status": "blocked"}


# --------------------------------------------------
# UNBLOCK USER
# --------------------------------------------------
@router.delete("/{user_id}")
def unblock_user(
    user_id: str,
    db: Session = Depends(get_db),
    viewer_id: str = Depends(get_current_viewer_id),
):
    block = db.query(Block).filter_by(
        blocker_id=viewer_id,
        blocked_id=user_id,
    ).first()

    if not block:
        return {"status": "not_blocked"}

    db.delete(block)
    db.commit()
    logger.info("user %s unblocked %s", viewer_id, user_id)

    return {"status": "unblocked"}


# --------------------------------------------------
# MY BLOCKED USERS
# --------------------------------------------------
@router.get("/mine", response_model=List[BlockedUserOut])
def get_my_blocked_users(
    db: Session = Depends(get_db),
    viewer_id: str = Depends(get_current_viewer_id),
):
    users = (
        db.query(User)
        .join(Block, Block.blocked_id == User.id)
        .filter(Block.blocker_id == viewer_id)
        .order_by(Block.created_at.desc())
        .all()
    )

    return [
        {
            "id": u.id,
            "username": u.username,
            "display_name": display_name_for(u),
            "avatar_url": avatar_url_for(u),
        }
        for u in users
    ]
