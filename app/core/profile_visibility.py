"""Decides what a viewer gets to see when opening a profile.

A missing user and a user who blocked the viewer produce the very same
``HIDDEN`` value, so nothing downstream can tell the two apart.
"""
from dataclasses import dataclass
from typing import Optional, Union

from sqlalchemy.orm import Session

from app.core.blocking import is_blocked
from app.core.profile_resolver import ResolvedProfile, resolve_profile
from app.utils.logging import get_logger

logger = get_logger(__name__)


@dataclass(frozen=True)
class Visible:
    profile: ResolvedProfile


class Hidden:
    __slots__ = ()

    def __repr__(self) -> str:
        return "HIDDEN"


HIDDEN = Hidden()

ProfileView = Union[Visible, Hidden]


def view_profile(
    db: Session,
    username: str,
    viewer_id: Optional[str],
) -> ProfileView:
    profile = resolve_profile(db, username)
    if profile is None:
        logger.debug("profile %r hidden: no such user", username)
        return HIDDEN

    if is_blocked(db, profile.user.id, viewer_id):
        logger.debug("profile %r hidden: viewer %s is blocked", username, viewer_id)
        return HIDDEN

    return Visible(profile)
